"""
Environmental monitor.

Ten pond parameters checked against (min, max) and (critical low, critical
high) limits, plus weather, rainfall and wind. Each Warning parameter adds
10 risk points and each Critical one 20; severe weather adds 15, heavy
rain and strong wind 10 each. Overall status: > 50 Critical, > 25 Warning.
"""

from .base import BaseCalculator, CalculationError
from ..models import Category

# key -> (min, max, critical_low, critical_high, unit)
PARAMETER_LIMITS = {
    "temperature": (25, 32, 22, 35, "°C"),
    "dissolved_oxygen": (5, 8, 3, 12, "mg/L"),
    "ph": (6.5, 8.5, 6, 9, ""),
    "ammonia": (0, 0.5, 0, 1, "mg/L"),
    "nitrite": (0, 0.1, 0, 0.5, "mg/L"),
    "nitrate": (0, 50, 0, 100, "mg/L"),
    "alkalinity": (100, 200, 50, 300, "mg/L"),
    "hardness": (100, 250, 50, 350, "mg/L"),
    "turbidity": (0, 30, 0, 50, "NTU"),
    "salinity": (0, 5, 0, 10, "ppt"),
}

WEATHER_CONDITIONS = ["Clear", "Partly Cloudy", "Cloudy", "Rain", "Heavy Rain", "Storm"]

SUSTAINABILITY_PRACTICES = [
    "Implement water recycling to reduce waste",
    "Consider using solar-powered aeration systems",
    "Monitor and record energy consumption",
]


def parameter_status(key: str, value: float) -> str:
    low, high, critical_low, critical_high, _ = PARAMETER_LIMITS[key]
    if value < critical_low or value > critical_high:
        return "Critical"
    if value < low or value > high:
        return "Warning"
    return "Optimal"


class EnvironmentalMonitorCalculator(BaseCalculator):

    SLUG = "environmental_monitor"
    TITLE = "Environmental Monitor"
    CATEGORY = Category.ENVIRONMENT
    PATH = "/environmental-monitor"
    DESCRIPTION = "Risk level from pond parameters and weather, with sustainability advice."

    def calculate(self, fields: dict) -> dict:
        issues = []
        recommendations = []
        impacted = []
        statuses = {}
        risk = 0

        for key, limits in PARAMETER_LIMITS.items():
            raw = fields.get(key)
            if raw is None or str(raw).strip() == "":
                continue
            value = self.require_number(fields, key)
            status = parameter_status(key, value)
            statuses[key] = status
            if status == "Optimal":
                continue

            impacted.append(key)
            label = key.replace("_", " ")
            unit = limits[4]
            if status == "Critical":
                risk += 20
                issues.append(f"Critical {label} level: {value:g}{unit}")
                recommendations.append(f"Immediate action required for {label}")
            else:
                risk += 10
                issues.append(f"{label} outside optimal range: {value:g}{unit}")

        if not statuses:
            raise CalculationError("At least one pond parameter reading is required")

        weather = self.optional_choice(fields, "weather_condition", WEATHER_CONDITIONS)
        rainfall = self.optional_number(fields, "rainfall", 0.0, minimum=0)
        wind = self.optional_number(fields, "wind_speed", 0.0, minimum=0)

        if weather in ("Heavy Rain", "Storm"):
            risk += 15
            issues.append("Severe weather conditions")
            recommendations.append("Monitor water quality more frequently during severe weather")
        if rainfall > 50:
            risk += 10
            issues.append("High rainfall may affect water quality")
            recommendations.append("Increase water quality monitoring frequency")
        if wind > 30:
            risk += 10
            issues.append("High wind speed may affect aeration")
            recommendations.append("Check aeration systems and adjust if necessary")

        if risk > 50:
            recommendations.append("Consider emergency water exchange")
            recommendations.append("Reduce or stop feeding temporarily")
        recommendations += SUSTAINABILITY_PRACTICES

        if risk > 50:
            status = "Critical"
        elif risk > 25:
            status = "Warning"
        else:
            status = "Optimal"

        return {
            "status": status,
            "risk_level": min(risk, 100),
            "parameter_status": statuses,
            "impacted_parameters": impacted,
            "issues": issues,
            "recommendations": recommendations,
        }
