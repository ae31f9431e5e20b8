"""
Fish stocking calculator.

Stocking density starts from the species' maximum (kg/m3) and is derated for
missing aeration and low water exchange. Fish count is sized so that the
surviving fish reach the target harvest weight at that density.
"""

import math

from .base import BaseCalculator
from ..models import Category

SPECIES_DATA = {
    "Tilapia": {"max_density": 5, "growth_rate": 2.5, "oxygen_requirement": 4},
    "Common Carp": {"max_density": 4, "growth_rate": 2.0, "oxygen_requirement": 3.5},
    "Catfish": {"max_density": 6, "growth_rate": 3.0, "oxygen_requirement": 3},
    "Rohu": {"max_density": 3, "growth_rate": 1.8, "oxygen_requirement": 4},
}

AERATION_SYSTEMS = ["Paddle Wheel", "Air Diffuser", "Surface Aerator", "No Aeration"]

FEEDING_STRATEGIES = [
    "Intensive (3-4 times/day)",
    "Semi-intensive (2 times/day)",
    "Extensive (once/day)",
]


class FishStockingCalculator(BaseCalculator):

    SLUG = "fish_stocking"
    TITLE = "Fish Stocking Calculator"
    CATEGORY = Category.FISH
    PATH = "/fish-stocking"
    DESCRIPTION = "Stocking count and density from pond volume, aeration and water exchange."

    def calculate(self, fields: dict) -> dict:
        species_name = self.require_choice(fields, "species", SPECIES_DATA)
        length = self.require_number(fields, "pond_length", positive=True)
        width = self.require_number(fields, "pond_width", positive=True)
        depth = self.require_number(fields, "pond_depth", positive=True)
        target_size = self.require_number(fields, "target_size", positive=True)  # grams
        survival_pct = self.require_number(fields, "survival_rate", positive=True, maximum=100)
        exchange = self.require_number(fields, "water_exchange", minimum=0)
        aeration = self.require_choice(fields, "aeration_system", AERATION_SYSTEMS)
        strategy = self.require_choice(fields, "feeding_strategy", FEEDING_STRATEGIES)

        species = SPECIES_DATA[species_name]
        volume = length * width * depth

        aeration_factor = 0.6 if aeration == "No Aeration" else 1.0
        if exchange < 5:
            exchange_factor = 0.7
        elif exchange < 10:
            exchange_factor = 0.85
        else:
            exchange_factor = 1.0

        density = species["max_density"] * aeration_factor * exchange_factor
        target_kg = target_size / 1000
        survival = survival_pct / 100

        total_fish = math.floor(volume * density / target_kg / survival)
        expected_production = total_fish * target_kg * survival
        aeration_requirement = expected_production * species["oxygen_requirement"] / 1000

        if "Semi" in strategy:
            feed_rate = 0.03
        elif "Intensive" in strategy:
            feed_rate = 0.05
        else:
            feed_rate = 0.02

        risks = []
        if aeration_factor < 1:
            risks.append("Limited aeration may restrict growth and survival")
        if exchange_factor < 1:
            risks.append("Low water exchange rate increases water quality risks")

        recommendations = [
            "Stock during early morning or evening hours",
            f"Implement {strategy.lower()} feeding schedule",
            "Monitor growth rates weekly",
        ]
        if aeration_factor < 1:
            recommendations.append("Consider adding supplemental aeration")

        return {
            "pond_volume": volume,
            "stocking_density": density,
            "total_fish": total_fish,
            "expected_production": expected_production,
            "aeration_requirement": aeration_requirement,
            "daily_feed": expected_production * feed_rate,
            "water_management": [
                "Monitor dissolved oxygen levels twice daily",
                "Check pH and ammonia levels weekly",
                f"Maintain water exchange rate of {exchange:g}% daily",
            ],
            "risk_factors": risks,
            "recommendations": recommendations,
        }
