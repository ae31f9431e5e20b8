"""
Water quality monitor.

Species-independent bands for twelve parameters. Readings inside the optimal
band are Optimal, inside the warning band Warning, anything else Critical.
Blank readings are skipped; at least one must be supplied.
"""

from .base import BaseCalculator, CalculationError
from ..models import Category

PARAMETER_RANGES = {
    "dissolved_oxygen": {
        "name": "Dissolved Oxygen", "unit": "mg/L",
        "optimal": (5, 8), "warning": (3, 10), "critical": (2, 12),
        "recommendations": [
            "Increase aeration if levels are low",
            "Check stocking density if consistently low",
            "Monitor feeding rate if levels fluctuate",
        ],
    },
    "temperature": {
        "name": "Temperature", "unit": "°C",
        "optimal": (25, 30), "warning": (20, 32), "critical": (15, 35),
        "recommendations": [
            "Use shading during hot periods",
            "Adjust feeding based on temperature",
            "Consider water exchange in extreme conditions",
        ],
    },
    "ph": {
        "name": "pH", "unit": "",
        "optimal": (6.5, 8.5), "warning": (6, 9), "critical": (5.5, 9.5),
        "recommendations": [
            "Add lime if pH is low",
            "Check alkalinity levels",
            "Monitor after heavy rain",
        ],
    },
    "ammonia": {
        "name": "Ammonia", "unit": "mg/L",
        "optimal": (0, 0.5), "warning": (0, 1), "critical": (0, 2),
        "recommendations": [
            "Reduce feeding if levels are high",
            "Increase water exchange",
            "Check biofilter efficiency",
        ],
    },
    "nitrite": {
        "name": "Nitrite", "unit": "mg/L",
        "optimal": (0, 0.1), "warning": (0, 0.5), "critical": (0, 1),
        "recommendations": [
            "Add salt to reduce toxicity",
            "Check nitrifying bacteria",
            "Increase oxygenation",
        ],
    },
    "nitrate": {
        "name": "Nitrate", "unit": "mg/L",
        "optimal": (0, 50), "warning": (0, 100), "critical": (0, 200),
        "recommendations": [
            "Regular water exchange",
            "Monitor plant growth",
            "Check denitrification",
        ],
    },
    "alkalinity": {
        "name": "Alkalinity", "unit": "mg/L CaCO3",
        "optimal": (100, 200), "warning": (50, 300), "critical": (20, 400),
        "recommendations": [
            "Add buffer if low",
            "Check limestone addition",
            "Monitor pH stability",
        ],
    },
    "hardness": {
        "name": "Hardness", "unit": "mg/L CaCO3",
        "optimal": (100, 250), "warning": (50, 350), "critical": (20, 450),
        "recommendations": [
            "Add calcium if low",
            "Check mineral content",
            "Balance with alkalinity",
        ],
    },
    "salinity": {
        "name": "Salinity", "unit": "ppt",
        "optimal": (0, 5), "warning": (0, 10), "critical": (0, 15),
        "recommendations": [
            "Adjust based on species",
            "Monitor after rain",
            "Check evaporation rate",
        ],
    },
    "turbidity": {
        "name": "Turbidity", "unit": "NTU",
        "optimal": (0, 30), "warning": (0, 50), "critical": (0, 100),
        "recommendations": [
            "Use settling tanks",
            "Add mechanical filtration",
            "Check erosion sources",
        ],
    },
    "phosphate": {
        "name": "Phosphate", "unit": "mg/L",
        "optimal": (0, 0.5), "warning": (0, 1), "critical": (0, 2),
        "recommendations": [
            "Control feed waste",
            "Monitor algae growth",
            "Check fertilization rate",
        ],
    },
    "carbon_dioxide": {
        "name": "Carbon Dioxide", "unit": "mg/L",
        "optimal": (0, 10), "warning": (0, 15), "critical": (0, 20),
        "recommendations": [
            "Increase aeration",
            "Check respiration rate",
            "Monitor plant density",
        ],
    },
}


def parameter_status(value: float, ranges: dict) -> str:
    opt_low, opt_high = ranges["optimal"]
    warn_low, warn_high = ranges["warning"]
    if opt_low <= value <= opt_high:
        return "Optimal"
    if warn_low <= value <= warn_high:
        return "Warning"
    return "Critical"


class WaterQualityMonitorCalculator(BaseCalculator):

    SLUG = "water_quality_monitor"
    TITLE = "Water Quality Monitor"
    CATEGORY = Category.WATER
    PATH = "/water-quality-monitor"
    DESCRIPTION = "Optimal / Warning / Critical status for up to twelve water parameters."

    def calculate(self, fields: dict) -> dict:
        analysis = []
        for key, ranges in PARAMETER_RANGES.items():
            raw = fields.get(key)
            if raw is None or str(raw).strip() == "":
                continue
            value = self.require_number(fields, key)
            analysis.append({
                "parameter": ranges["name"],
                "key": key,
                "value": value,
                "unit": ranges["unit"],
                "status": parameter_status(value, ranges),
                "recommendations": list(ranges["recommendations"]),
            })

        if not analysis:
            raise CalculationError("At least one water parameter reading is required")

        statuses = [item["status"] for item in analysis]
        if "Critical" in statuses:
            overall = "Critical"
        elif "Warning" in statuses:
            overall = "Warning"
        else:
            overall = "Optimal"

        return {
            "overall_status": overall,
            "critical_count": statuses.count("Critical"),
            "warning_count": statuses.count("Warning"),
            "analysis": analysis,
        }
