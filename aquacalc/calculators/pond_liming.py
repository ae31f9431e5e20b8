"""
Pond liming calculator.

Lime requirement (kg) = pH rise x 1000 x soil buffer capacity, adjusted for
alkalinity and water source, divided by the lime's neutralizing value
relative to agricultural limestone (100).
"""

from .base import BaseCalculator, CalculationError
from ..models import Category

LIME_TYPES = {
    "agricultural": {"name": "Agricultural Limestone", "neutralizing_value": 100,
                     "solubility": 0.6, "cost_per_ton": 30},
    "hydrated": {"name": "Hydrated Lime", "neutralizing_value": 136,
                 "solubility": 0.9, "cost_per_ton": 45},
    "quicklime": {"name": "Quicklime", "neutralizing_value": 179,
                  "solubility": 1.0, "cost_per_ton": 60},
    "dolomitic": {"name": "Dolomitic Limestone", "neutralizing_value": 109,
                  "solubility": 0.5, "cost_per_ton": 35},
}

SOIL_TYPES = {
    "sandy": {"name": "Sandy Soil", "buffer_capacity": 0.5,
              "description": "Low buffering capacity, requires less lime"},
    "loamy": {"name": "Loamy Soil", "buffer_capacity": 1.0,
              "description": "Medium buffering capacity"},
    "clayey": {"name": "Clay Soil", "buffer_capacity": 1.5,
               "description": "High buffering capacity, requires more lime"},
    "organic": {"name": "Organic Soil", "buffer_capacity": 2.0,
                "description": "Very high buffering capacity, requires most lime"},
}

WATER_SOURCE_FACTORS = {"surface": 1.0, "groundwater": 0.8, "rainwater": 1.2}


class PondLimingCalculator(BaseCalculator):

    SLUG = "pond_liming"
    TITLE = "Pond Liming Calculator"
    CATEGORY = Category.WATER
    PATH = "/pond-liming"
    DESCRIPTION = "Lime quantity, cost and spreading rate to raise pond pH."

    def calculate(self, fields: dict) -> dict:
        area = self.require_number(fields, "pond_area", positive=True)  # ha
        depth = self.require_number(fields, "pond_depth", positive=True)
        current_ph = self.require_number(fields, "current_ph", minimum=0, maximum=14)
        target_ph = self.require_number(fields, "target_ph", minimum=0, maximum=14)
        alkalinity = self.require_number(fields, "alkalinity", minimum=0)
        soil = self.require_choice(fields, "soil_type", SOIL_TYPES)
        source = self.require_choice(fields, "water_source", WATER_SOURCE_FACTORS)
        lime_key = self.require_choice(fields, "lime_type", LIME_TYPES)

        ph_difference = target_ph - current_ph
        if ph_difference <= 0:
            raise CalculationError("target_ph must be above current_ph", field="target_ph")

        requirement = ph_difference * 1000 * SOIL_TYPES[soil]["buffer_capacity"]
        if alkalinity < 50:
            requirement *= 1.3
        elif alkalinity > 150:
            requirement *= 0.7
        requirement *= WATER_SOURCE_FACTORS[source]

        lime = LIME_TYPES[lime_key]
        lime_required = requirement / (lime["neutralizing_value"] / 100)
        cost = lime_required * lime["cost_per_ton"] / 1000
        application_rate = lime_required / (area * 10000)

        recommendations = [
            f"Apply {lime_required:.2f} kg of {lime['name']} total.",
            f"Spread lime evenly at a rate of {application_rate:.3f} kg/m².",
            "For best results, apply lime during dry weather.",
            "Monitor pH weekly after application.",
        ]
        if lime["solubility"] < 0.7:
            recommendations.append(
                "This lime type dissolves slowly. Consider multiple smaller applications."
            )
        if ph_difference > 2:
            recommendations.append(
                "Large pH adjustment needed. Consider gradual adjustment over multiple applications."
            )

        return {
            "pond_volume": area * depth,
            "lime_required": lime_required,
            "cost": cost,
            "application_rate": application_rate,
            "soil_description": SOIL_TYPES[soil]["description"],
            "recommendations": recommendations,
        }
