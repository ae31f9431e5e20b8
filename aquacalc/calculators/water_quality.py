"""
Water quality check against per-species parameter ranges.

Each reading is classified:
  success - inside the optimal band
  warning - outside optimal but inside the tolerated min/max
  error   - outside the tolerated range
"""

from .base import BaseCalculator
from ..models import Category

# parameter: (min, max, unit, optimal_min, optimal_max)
SPECIES_PARAMETERS = {
    "tilapia": {
        "temperature": (20, 35, "°C", 25, 32),
        "dissolved_oxygen": (3, 8, "mg/L", 5, 7),
        "ph": (6, 9, "pH", 6.5, 8.5),
        "ammonia": (0, 2, "mg/L", 0, 0.5),
        "nitrite": (0, 1, "mg/L", 0, 0.3),
        "nitrate": (0, 100, "mg/L", 0, 50),
        "alkalinity": (50, 200, "mg/L", 100, 150),
        "hardness": (50, 200, "mg/L", 100, 150),
        "turbidity": (0, 50, "NTU", 5, 25),
    },
    "carp": {
        "temperature": (15, 32, "°C", 20, 28),
        "dissolved_oxygen": (4, 8, "mg/L", 5, 7),
        "ph": (6.5, 9, "pH", 7, 8.5),
        "ammonia": (0, 1.5, "mg/L", 0, 0.4),
        "nitrite": (0, 0.8, "mg/L", 0, 0.2),
        "nitrate": (0, 80, "mg/L", 0, 40),
        "alkalinity": (60, 200, "mg/L", 100, 150),
        "hardness": (60, 200, "mg/L", 100, 150),
        "turbidity": (0, 40, "NTU", 5, 20),
    },
    "catfish": {
        "temperature": (18, 32, "°C", 24, 30),
        "dissolved_oxygen": (3, 8, "mg/L", 5, 7),
        "ph": (6, 8.5, "pH", 6.5, 7.5),
        "ammonia": (0, 2, "mg/L", 0, 0.5),
        "nitrite": (0, 1, "mg/L", 0, 0.3),
        "nitrate": (0, 100, "mg/L", 0, 50),
        "alkalinity": (50, 180, "mg/L", 80, 140),
        "hardness": (50, 180, "mg/L", 80, 140),
        "turbidity": (0, 50, "NTU", 5, 25),
    },
}


def classify(value: float, ranges: tuple) -> str:
    low, high, _, opt_low, opt_high = ranges
    if opt_low <= value <= opt_high:
        return "success"
    if low <= value <= high:
        return "warning"
    return "error"


class WaterQualityCalculator(BaseCalculator):

    SLUG = "water_quality"
    TITLE = "Water Quality"
    CATEGORY = Category.WATER
    PATH = "/water-quality"
    DESCRIPTION = "Classifies water readings against species-specific ranges."

    def calculate(self, fields: dict) -> dict:
        species = self.require_choice(fields, "species", SPECIES_PARAMETERS)
        params = SPECIES_PARAMETERS[species]

        parameters = {}
        recommendations = []
        for name, ranges in params.items():
            value = self.require_number(fields, name)
            _, _, unit, opt_low, opt_high = ranges
            parameters[name] = {
                "value": value,
                "unit": unit,
                "status": classify(value, ranges),
                "optimal": [opt_low, opt_high],
            }
            if value < opt_low:
                recommendations.append(
                    f"{name} is too low. Increase to {opt_low}-{opt_high} {unit}"
                )
            elif value > opt_high:
                recommendations.append(
                    f"{name} is too high. Decrease to {opt_low}-{opt_high} {unit}"
                )

        if not recommendations:
            recommendations.append("All parameters are within optimal ranges")

        return {"species": species, "parameters": parameters, "recommendations": recommendations}
