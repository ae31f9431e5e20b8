"""
Aeration calculator.

Oxygen demand (kg O2/day) = biomass x species demand x (1 + 2% per °C above
25°C). One 1 HP paddle wheel aerator supplies 2 kg O2/hour and draws 1 kW.
"""

import math

from .base import BaseCalculator
from ..models import Category

# kg O2 per kg fish per day
OXYGEN_DEMAND = {
    "carp": 0.2,
    "tilapia": 0.25,
    "catfish": 0.3,
    "trout": 0.35,
}
DEFAULT_OXYGEN_DEMAND = 0.25

AERATOR_O2_PER_HOUR = 2
AERATOR_KW = 1
ENERGY_PRICE_PER_KWH = 0.12
AERATOR_TYPE = "1 HP Paddle Wheel Aerator"

MAINTENANCE_SCHEDULE = [
    "Daily: Check aerator operation and clean water inlets",
    "Weekly: Inspect electrical connections and mounting hardware",
    "Monthly: Clean/replace filters and check motor bearings",
    "Quarterly: Full system inspection and performance testing",
]


class AerationCalculator(BaseCalculator):

    SLUG = "aeration"
    TITLE = "Aeration Calculator"
    CATEGORY = Category.ENVIRONMENT
    PATH = "/aeration-calculator"
    DESCRIPTION = "Oxygen demand, aerator count and energy cost for a stocked pond."

    def calculate(self, fields: dict) -> dict:
        length = self.require_number(fields, "length", positive=True)
        width = self.require_number(fields, "width", positive=True)
        depth = self.require_number(fields, "depth", positive=True)
        quantity = self.require_number(fields, "fish_quantity", minimum=0)
        avg_weight = self.require_number(fields, "average_weight", minimum=0)  # kg
        temperature = self.require_number(fields, "temperature")
        current_do = self.require_number(fields, "dissolved_oxygen", minimum=0)
        species = str(fields.get("fish_species") or "").strip()

        biomass = quantity * avg_weight
        base_demand = OXYGEN_DEMAND.get(species, DEFAULT_OXYGEN_DEMAND)
        oxygen_demand = biomass * base_demand * (1 + (temperature - 25) * 0.02)
        aerators = max(0, math.ceil(oxygen_demand / (AERATOR_O2_PER_HOUR * 24)))

        if current_do < 3:
            risk = "high"
        elif current_do < 5:
            risk = "medium"
        else:
            risk = "low"

        return {
            "water_volume": length * width * depth,
            "fish_biomass": biomass,
            "oxygen_demand": oxygen_demand,
            "required_aerators": aerators,
            "aerator_type": AERATOR_TYPE,
            "energy_cost": aerators * AERATOR_KW * 24 * ENERGY_PRICE_PER_KWH,
            "risk_level": risk,
            "maintenance_schedule": list(MAINTENANCE_SCHEDULE),
            "recommendations": [
                f"Install {aerators} aerators with minimum 1 HP capacity each",
                "Position aerators to ensure uniform oxygen distribution",
                "Implement backup power system for emergency situations",
                "Monitor dissolved oxygen levels during early morning hours",
            ],
        }
