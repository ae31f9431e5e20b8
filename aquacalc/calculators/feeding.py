"""
Feeding calculator.

Daily ration = biomass x stage feeding rate (% body weight). The rate table
switches to the suboptimal column when water temperature leaves the species'
optimal band. Ration is split across the stage's optimal feedings per day.
"""

from .base import BaseCalculator
from ..models import Category

GROWTH_STAGES = ["fry", "fingerling", "juvenile", "adult"]

SPECIES_DATA = {
    "Tilapia": {
        "feeding_rates": {
            "optimal": {
                "min_temp": 25, "max_temp": 32,
                "rates": {"fry": 15, "fingerling": 8, "juvenile": 5, "adult": 3},
            },
            "suboptimal": {
                "min_temp": 20, "max_temp": 24,
                "rates": {"fry": 12, "fingerling": 6, "juvenile": 4, "adult": 2},
            },
        },
        "feeding_tips": [
            "Feed small amounts frequently for better feed conversion",
            "Observe fish behavior during feeding to avoid overfeeding",
            "Adjust feeding rate based on water quality conditions",
            "Reduce feeding during periods of stress or disease",
        ],
        "optimal_frequency": {"fry": 6, "fingerling": 4, "juvenile": 3, "adult": 2},
    },
    "Common Carp": {
        "feeding_rates": {
            "optimal": {
                "min_temp": 20, "max_temp": 28,
                "rates": {"fry": 12, "fingerling": 6, "juvenile": 4, "adult": 2},
            },
            "suboptimal": {
                "min_temp": 15, "max_temp": 19,
                "rates": {"fry": 10, "fingerling": 5, "juvenile": 3, "adult": 1.5},
            },
        },
        "feeding_tips": [
            "Carp are bottom feeders - ensure feed reaches the bottom",
            "Monitor water quality closely during intensive feeding",
            "Supplement with natural pond productivity",
            "Adjust feeding based on seasonal changes",
        ],
        "optimal_frequency": {"fry": 5, "fingerling": 4, "juvenile": 3, "adult": 2},
    },
}


def feedings_per_day(species: str, growth_stage: str) -> int:
    """Optimal feedings per day for a species/stage. KeyError if unknown."""
    return SPECIES_DATA[species]["optimal_frequency"][growth_stage]


class FeedingCalculator(BaseCalculator):

    SLUG = "feeding"
    TITLE = "Feeding Calculator"
    CATEGORY = Category.FEED
    PATH = "/feeding-calculator"
    DESCRIPTION = "Daily ration and per-feeding amount by species, stage and temperature."

    def calculate(self, fields: dict) -> dict:
        species_name = self.require_choice(fields, "species", SPECIES_DATA)
        growth_stage = self.require_choice(fields, "growth_stage", GROWTH_STAGES)
        biomass = self.require_number(fields, "biomass", minimum=0)
        temp = self.optional_number(fields, "water_temperature", 25.0)

        species = SPECIES_DATA[species_name]
        optimal = species["feeding_rates"]["optimal"]
        condition = "optimal"
        if temp < optimal["min_temp"] or temp > optimal["max_temp"]:
            condition = "suboptimal"

        rate = species["feeding_rates"][condition]["rates"][growth_stage]
        daily_amount = biomass * rate / 100
        frequency = species["optimal_frequency"][growth_stage]

        return {
            "temperature_condition": condition,
            "feeding_rate_percent": rate,
            "daily_amount": daily_amount,
            "feedings_per_day": frequency,
            "amount_per_feeding": daily_amount / frequency,
            "reminder_interval_hours": 24 / frequency,
            "feeding_tips": list(species["feeding_tips"]),
        }
