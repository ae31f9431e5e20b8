"""
Weather impact analyzer.

Derives pond water conditions from the weather:
  water temperature = air temperature minus cloud, wind and season cooling
  dissolved oxygen  = 14.6 * exp(-0.0357 * water temp), scaled by wind,
                      air temperature, stocking density and rainfall
  pH, turbidity     = linear in rainfall, temperature, wind and season
Fish stress follows the species' optimal and stress temperature bands.
"""

import math

from .base import BaseCalculator
from ..models import Category

SPECIES_PARAMS = {
    "Tilapia": {"optimal_temp": (25, 32), "stress_temp": (15, 35),
                "oxygen_requirement": 5, "ph_range": (6.5, 8.5)},
    "Carp": {"optimal_temp": (20, 28), "stress_temp": (12, 32),
             "oxygen_requirement": 4, "ph_range": (6.5, 8.5)},
    "Catfish": {"optimal_temp": (24, 30), "stress_temp": (18, 34),
                "oxygen_requirement": 3, "ph_range": (6.0, 8.5)},
    "Trout": {"optimal_temp": (12, 18), "stress_temp": (8, 22),
              "oxygen_requirement": 7, "ph_range": (6.5, 8.0)},
}

SEASONS = ["Spring", "Summer", "Fall", "Winter"]

FEEDING_BEHAVIOR = {"High": "Significantly Reduced", "Moderate": "Slightly Reduced",
                    "Low": "Normal"}
GROWTH_IMPACT = {"High": "Severely Reduced", "Moderate": "Moderately Reduced",
                 "Low": "Optimal"}
FEEDING_SCHEDULE = {"High": "Reduce feeding by 50%", "Moderate": "Reduce feeding by 25%",
                    "Low": "Maintain regular schedule"}
MONITORING = {"High": "Hourly monitoring required", "Moderate": "Increase frequency",
              "Low": "Regular intervals"}


class WeatherImpactCalculator(BaseCalculator):

    SLUG = "weather_impact"
    TITLE = "Weather Impact Analyzer"
    CATEGORY = Category.ENVIRONMENT
    PATH = "/weather-impact"
    DESCRIPTION = "Effect of weather on water quality, fish stress and farm operations."

    def calculate(self, fields: dict) -> dict:
        species_name = self.require_choice(fields, "species", SPECIES_PARAMS)
        air_temp = self.require_number(fields, "temperature")
        rainfall = self.optional_number(fields, "rainfall", 0.0, minimum=0)
        wind = self.optional_number(fields, "wind_speed", 0.0, minimum=0)
        cloud = self.optional_number(fields, "cloud_cover", 0.0, minimum=0, maximum=100)
        density = self.optional_number(fields, "stocking_density", 0.0, minimum=0)
        season = str(fields.get("season") or "").strip()

        species = SPECIES_PARAMS[species_name]

        season_cooling = {"Winter": 2, "Summer": -1}.get(season, 0)
        water_temp = air_temp - (cloud * 0.05 + wind * 0.1 + season_cooling)

        base_oxygen = 14.6 * math.exp(-0.0357 * water_temp)
        oxygen = base_oxygen * (
            1 + wind * 0.05 - air_temp * 0.02 - density * 0.001 + rainfall * 0.02
        )
        ph = 7.0 + (rainfall * 0.1 - air_temp * 0.02
                    + {"Summer": 0.2, "Winter": -0.2}.get(season, 0))
        turbidity = rainfall * 2 + wind * 0.5

        stress_low, stress_high = species["stress_temp"]
        opt_low, opt_high = species["optimal_temp"]
        if water_temp < stress_low or water_temp > stress_high:
            stress = "High"
        elif water_temp < opt_low or water_temp > opt_high:
            stress = "Moderate"
        else:
            stress = "Low"

        required_o2 = species["oxygen_requirement"]
        if stress == "High" and oxygen < required_o2:
            disease_risk = "High"
        elif stress == "Moderate" or oxygen < required_o2 * 1.2:
            disease_risk = "Moderate"
        else:
            disease_risk = "Low"

        recommendations = []
        preventive = []
        if water_temp > opt_high:
            recommendations += ["Increase aeration to help reduce water temperature",
                                "Consider partial water exchange with cooler water"]
            preventive += ["Install temperature monitoring system",
                           "Prepare emergency cooling procedures"]
        elif water_temp < opt_low:
            recommendations += ["Monitor water temperature closely",
                                "Consider using pond covers to retain heat"]
            preventive.append("Install backup heating system")
        if oxygen < required_o2:
            recommendations += ["Increase aeration immediately",
                                "Reduce feeding until oxygen levels improve"]
            preventive += ["Install oxygen monitoring system",
                           "Have backup aeration equipment ready"]
        if rainfall > 5:
            recommendations += ["Monitor water quality parameters more frequently",
                                "Check and maintain proper drainage"]
            preventive.append("Implement erosion control measures")
        if wind > 20:
            recommendations += ["Secure equipment and pond covers",
                                "Monitor water turbulence"]
            preventive.append("Install wind breaks around ponds")

        return {
            "water_quality": {
                "temperature": water_temp,
                "dissolved_oxygen": oxygen,
                "ph": ph,
                "turbidity": turbidity,
            },
            "fish_health": {
                "stress_level": stress,
                "feeding_behavior": FEEDING_BEHAVIOR[stress],
                "growth_impact": GROWTH_IMPACT[stress],
                "disease_risk": disease_risk,
            },
            "operational_impact": {
                "feeding_schedule": FEEDING_SCHEDULE[stress],
                "water_exchange": ("Increase frequency" if rainfall > 5 or turbidity > 10
                                   else "Normal schedule"),
                "aeration": "Increase intensity" if oxygen < required_o2 else "Normal operation",
                "monitoring": MONITORING[stress],
            },
            "risk_level": stress,
            "recommendations": recommendations,
            "preventive_measures": preventive,
        }
