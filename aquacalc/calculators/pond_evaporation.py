"""
Pond evaporation calculator.

Simplified model: a 0.1 cm/day base rate scaled multiplicatively by the
water-air temperature difference, wind, humidity, sunlight hours, cloud cover
and season. Volumes are rate (cm) x surface area (m2) / 100 in m3.
"""

from .base import BaseCalculator
from ..models import Category

BASE_RATE_CM = 0.1

CLOUD_COVER_FACTORS = {
    "Clear": 1.0,
    "Partly Cloudy": 0.8,
    "Mostly Cloudy": 0.6,
    "Overcast": 0.4,
}

SEASON_FACTORS = {"Summer": 1.2, "Spring": 1.0, "Fall": 0.8, "Winter": 0.6}


class PondEvaporationCalculator(BaseCalculator):

    SLUG = "pond_evaporation"
    TITLE = "Pond Evaporation Calculator"
    CATEGORY = Category.WATER
    PATH = "/pond-evaporation"
    DESCRIPTION = "Daily, weekly and monthly evaporation losses with a risk rating."

    def calculate(self, fields: dict) -> dict:
        length = self.require_number(fields, "pond_length", positive=True)
        width = self.require_number(fields, "pond_width", positive=True)
        water_temp = self.require_number(fields, "water_temperature")
        air_temp = self.require_number(fields, "air_temperature")
        humidity = self.require_number(fields, "humidity", minimum=0, maximum=100)
        wind = self.require_number(fields, "wind_speed", minimum=0)
        sunlight = self.require_number(fields, "sunlight_hours", minimum=0, maximum=24)
        cloud_cover = str(fields.get("cloud_cover") or "").strip()
        season = str(fields.get("season") or "").strip()

        rate = BASE_RATE_CM
        rate *= 1 + (water_temp - air_temp) * 0.05
        rate *= 1 + wind * 0.02
        rate *= 1 - humidity / 200
        rate *= 1 + (sunlight / 24) * 0.5
        rate *= CLOUD_COVER_FACTORS.get(cloud_cover, 1.0)
        rate *= SEASON_FACTORS.get(season, 1.0)

        surface_area = length * width
        daily = rate * surface_area / 100

        if rate > 0.5:
            risk = "High"
        elif rate > 0.3:
            risk = "Moderate"
        else:
            risk = "Low"

        recommendations = [
            "Monitor water levels daily during high evaporation periods",
            "Consider installing shade structures to reduce evaporation",
            "Maintain proper water depth to minimize temperature fluctuations",
        ]
        if risk == "High":
            recommendations.extend([
                "Install water level monitoring system",
                "Plan for emergency water supply",
                "Consider reducing pond surface area during peak evaporation season",
            ])
        if wind > 15:
            recommendations.append("Install windbreaks to reduce evaporation")
        if sunlight > 10:
            recommendations.append("Consider using pond covers during peak sunlight hours")

        return {
            "evaporation_rate_cm": rate,
            "surface_area": surface_area,
            "daily_evaporation": daily,
            "weekly_evaporation": daily * 7,
            "monthly_evaporation": daily * 30,
            "risk_level": risk,
            "recommendations": recommendations,
        }
