"""
Pond sediment manager.

Removal is required when sediment fills more than 20% of pond depth, the pond
has gone more than two years without cleaning, or organic content exceeds 30%.
Run history (sediment depth over time) comes from stored calculation records.
"""

from .base import BaseCalculator
from ..models import Category

SEDIMENT_TYPES = {
    "sandy": {"density": 1500, "nutrient_retention": 0.6,
              "description": "Sandy sediment with low nutrient content"},
    "loamy": {"density": 1300, "nutrient_retention": 0.8,
              "description": "Loamy sediment with moderate nutrient content"},
    "clayey": {"density": 1200, "nutrient_retention": 0.9,
               "description": "Clay-rich sediment with high nutrient retention"},
    "organic": {"density": 1100, "nutrient_retention": 1.0,
                "description": "Highly organic sediment"},
}

DISPOSAL_METHODS = {
    "agricultural": {"cost": 10, "description": "Use as agricultural fertilizer"},
    "landfill": {"cost": 30, "description": "Disposal at landfill"},
    "composting": {"cost": 20, "description": "Composting and soil amendment"},
    "land_reclamation": {"cost": 15, "description": "Use in land reclamation projects"},
}

REMOVAL_COST_PER_M3 = 5

MANAGEMENT_PLAN = [
    "Regular monitoring of sediment depth",
    "Optimize feeding practices to reduce waste",
    "Maintain proper water exchange",
    "Schedule periodic sediment removal",
    "Monitor water quality parameters",
]

PREVENTIVE_MEASURES = [
    "Implement proper feeding management",
    "Maintain optimal stocking density",
    "Regular water quality monitoring",
    "Use high-quality feeds",
    "Install sediment traps",
]


class PondSedimentCalculator(BaseCalculator):

    SLUG = "pond_sediment"
    TITLE = "Pond Sediment Manager"
    CATEGORY = Category.WATER
    PATH = "/pond-sediment"
    DESCRIPTION = "Sediment volume, removal decision, disposal route, nutrients and cost."

    def calculate(self, fields: dict) -> dict:
        area = self.require_number(fields, "pond_area", positive=True)
        pond_depth = self.require_number(fields, "pond_depth", positive=True)
        sediment_depth = self.require_number(fields, "sediment_depth", minimum=0)
        sediment_type = self.require_choice(fields, "sediment_type", SEDIMENT_TYPES)
        organic = self.optional_number(fields, "organic_content", 0.0, minimum=0, maximum=100)
        last_cleaned = self.optional_number(fields, "last_cleaned", 0.0, minimum=0)
        exchange = self.optional_number(fields, "water_exchange_rate", 0.0, minimum=0)

        volume = area * sediment_depth
        depth_ratio = sediment_depth / pond_depth
        removal_required = depth_ratio > 0.2 or last_cleaned > 2 or organic > 30

        if organic > 40:
            disposal = "composting"
        elif organic < 10:
            disposal = "land_reclamation"
        else:
            disposal = "agricultural"

        retained = volume * SEDIMENT_TYPES[sediment_type]["nutrient_retention"] * organic / 100
        nutrients = {
            "nitrogen": retained * 0.05,
            "phosphorus": retained * 0.02,
            "organic_matter": retained,
        }

        removal_cost = volume * REMOVAL_COST_PER_M3
        disposal_cost = volume * DISPOSAL_METHODS[disposal]["cost"]

        recommendations = []
        if depth_ratio > 0.2:
            recommendations.append(
                "Immediate sediment removal recommended due to high accumulation"
            )
        if organic > 30:
            recommendations.append(
                "High organic content indicates need for improved feeding management"
            )
        if exchange < 10:
            recommendations.append("Increase water exchange rate to reduce sediment accumulation")

        return {
            "total_volume": volume,
            "depth_ratio": depth_ratio,
            "removal_required": removal_required,
            "disposal_method": disposal,
            "disposal_description": DISPOSAL_METHODS[disposal]["description"],
            "estimated_cost": removal_cost + disposal_cost,
            "nutrient_content": nutrients,
            "recommendations": recommendations,
            "management_plan": list(MANAGEMENT_PLAN),
            "preventive_measures": list(PREVENTIVE_MEASURES),
            "timeline": self.timeline(depth_ratio),
        }

    @staticmethod
    def timeline(depth_ratio: float) -> str:
        if depth_ratio > 0.3:
            return "Immediate removal required"
        if depth_ratio < 0.1:
            return "Monitor and reassess in 6 months"
        return "Annual removal recommended"
