"""
Fish production calculator.

Pond volume x stocking density sets the fingerling count; growth rate sets
the cycle length; FCR, seed cost and market price per species give the
production economics.
"""

import math

from .base import BaseCalculator, CalculationError
from ..models import Category

SPECIES_DATA = {
    "tilapia": {"max_density": 5, "feed_conversion": 1.6, "seed_cost": 0.1, "market_price": 3.5},
    "carp": {"max_density": 4, "feed_conversion": 1.8, "seed_cost": 0.15, "market_price": 4.0},
    "catfish": {"max_density": 6, "feed_conversion": 1.5, "seed_cost": 0.2, "market_price": 4.5},
}

FEED_PRICE_PER_KG = 1.2
OPERATING_OVERHEAD = 0.3


class FishProductionCalculator(BaseCalculator):

    SLUG = "fish_production"
    TITLE = "Fish Production Calculator"
    CATEGORY = Category.FISH
    PATH = "/fish-calculator"
    DESCRIPTION = "Stocking number, production cycle, feed and water needs, and cycle economics."

    def calculate(self, fields: dict) -> dict:
        species_name = self.require_choice(fields, "species", SPECIES_DATA)
        area = self.require_number(fields, "pond_area", positive=True)
        depth = self.require_number(fields, "pond_depth", positive=True)
        density = self.require_number(fields, "stocking_density", positive=True)  # kg/m3
        initial_g = self.require_number(fields, "initial_weight", positive=True)
        target_g = self.require_number(fields, "target_weight", positive=True)
        growth_rate = self.require_number(fields, "growth_rate", positive=True)  # g/day
        survival_pct = self.require_number(fields, "survival_rate", minimum=0, maximum=100)
        exchange_pct = self.optional_number(fields, "water_exchange", 0.0, minimum=0)

        if target_g <= initial_g:
            raise CalculationError(
                "target_weight must be greater than initial_weight", field="target_weight"
            )

        species = SPECIES_DATA[species_name]
        initial_kg = initial_g / 1000
        target_kg = target_g / 1000
        survival = survival_pct / 100

        volume = area * depth
        stocking_number = math.floor(volume * density / initial_kg)
        initial_biomass = stocking_number * initial_kg
        final_biomass = stocking_number * survival * target_kg
        cycle_days = math.ceil((target_g - initial_g) / growth_rate)

        feed_required = (final_biomass - initial_biomass) * species["feed_conversion"]
        water_required = volume * exchange_pct / 100 * cycle_days

        feed_cost = feed_required * FEED_PRICE_PER_KG
        seed_cost = stocking_number * species["seed_cost"]
        operating_cost = (feed_cost + seed_cost) * OPERATING_OVERHEAD
        total_cost = feed_cost + seed_cost + operating_cost
        revenue = final_biomass * species["market_price"]

        return {
            "pond_volume": volume,
            "stocking_number": stocking_number,
            "initial_biomass": initial_biomass,
            "final_biomass": final_biomass,
            "production_cycle_days": cycle_days,
            "feed_required": feed_required,
            "water_required": water_required,
            "economics": {
                "feed_cost": feed_cost,
                "seed_cost": seed_cost,
                "operating_cost": operating_cost,
                "total_cost": total_cost,
                "revenue": revenue,
                "profit": revenue - total_cost,
            },
        }
