"""
Fish yield calculator.

Daily growth is the species rate scaled by water quality, season and
management intensity; final weight is capped at the species maximum.
"""

from .base import BaseCalculator
from ..models import Category

SPECIES_DATA = {
    "Tilapia": {"growth_rate": 2.5, "max_size": 800},
    "Common Carp": {"growth_rate": 2.0, "max_size": 1500},
    "Catfish": {"growth_rate": 3.0, "max_size": 1200},
    "Rohu": {"growth_rate": 1.8, "max_size": 1000},
}

WATER_QUALITY_FACTORS = {"Excellent": 1.2, "Good": 1.0, "Fair": 0.8, "Poor": 0.6}
SEASON_FACTORS = {"Summer": 1.1, "Winter": 0.8, "Spring": 1.0, "Rainy": 1.0}
MANAGEMENT_FACTORS = {"Intensive": 1.2, "Semi-intensive": 1.0, "Extensive": 0.8}

FEED_PRICE_PER_KG = 2
FISH_PRICE_PER_KG = 4


class FishYieldCalculator(BaseCalculator):

    SLUG = "fish_yield"
    TITLE = "Fish Yield Calculator"
    CATEGORY = Category.FISH
    PATH = "/fish-yield"
    DESCRIPTION = "Expected biomass gain, feed use and margin under culture conditions."

    def calculate(self, fields: dict) -> dict:
        species_name = self.require_choice(fields, "species", SPECIES_DATA)
        stock = self.require_number(fields, "initial_stock", positive=True)
        initial_weight = self.require_number(fields, "initial_weight", minimum=0)  # grams
        days = self.require_number(fields, "culture_period", positive=True)
        mortality = self.require_number(fields, "mortality_rate", minimum=0, maximum=100)
        fcr = self.require_number(fields, "fcr", positive=True)
        water_quality = self.require_choice(fields, "water_quality", WATER_QUALITY_FACTORS)
        season = self.require_choice(fields, "season", SEASON_FACTORS)
        management = self.require_choice(fields, "management_level", MANAGEMENT_FACTORS)

        species = SPECIES_DATA[species_name]
        survival = (100 - mortality) / 100
        modifier = (
            WATER_QUALITY_FACTORS[water_quality]
            * SEASON_FACTORS[season]
            * MANAGEMENT_FACTORS[management]
        )

        final_weight = min(
            initial_weight + species["growth_rate"] * modifier * days,
            species["max_size"],
        )
        biomass_gain = stock * survival * (final_weight - initial_weight) / 1000
        feed_required = biomass_gain * fcr
        feed_efficiency = self.divide(biomass_gain, feed_required, "feed efficiency") * 100

        feed_cost = feed_required * FEED_PRICE_PER_KG
        revenue = biomass_gain * FISH_PRICE_PER_KG
        margin = self.divide(revenue - feed_cost, revenue, "profit margin") * 100

        recommendations = []
        if feed_efficiency < 50:
            recommendations.append("Consider optimizing feeding strategy to improve efficiency")
        if margin < 20:
            recommendations.append("Review cost structure and consider premium markets")
        if modifier < 0.8:
            recommendations.append("Improve culture conditions to enhance growth rate")

        risks = []
        if water_quality == "Poor":
            risks.append("Poor water quality may significantly impact growth and survival")
        if mortality > 20:
            risks.append("High mortality rate indicates potential health or management issues")
        if fcr > 2:
            risks.append("High FCR suggests inefficient feed utilization")

        return {
            "expected_yield": biomass_gain,
            "final_weight": final_weight,
            "survival_rate": survival * 100,
            "growth_modifier": modifier,
            "feed_required": feed_required,
            "feed_efficiency": feed_efficiency,
            "economics": {
                "feed_cost": feed_cost,
                "revenue": revenue,
                "profit": revenue - feed_cost,
                "profit_margin": margin,
            },
            "recommendations": recommendations,
            "risk_factors": risks,
        }
