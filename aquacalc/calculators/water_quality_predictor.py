"""
Water quality predictor.

Projects temperature, dissolved oxygen, pH and ammonia hour by hour over the
next 48 hours from the current readings and simple linear effects of sunlight,
rainfall, feeding, stocking density and water exchange. Hours 6-18 count as
daytime. The projection is deterministic: identical inputs give identical
series.
"""

from .base import BaseCalculator
from ..models import Category

HOURS = 48

SPECIES_PARAMETERS = {
    "tilapia": {"temp_range": (25, 32), "ph_range": (6.5, 8.5), "do_range": (4, 8),
                "ammonia_max": 0.5},
    "carp": {"temp_range": (20, 28), "ph_range": (6.5, 8.5), "do_range": (5, 8),
             "ammonia_max": 0.4},
    "catfish": {"temp_range": (24, 30), "ph_range": (6.5, 7.5), "do_range": (3, 7),
                "ammonia_max": 0.5},
}

# parameter: (low, medium, high) risk thresholds
RISK_THRESHOLDS = {
    "temperature": (20, 25, 30),
    "dissolved_oxygen": (4, 5, 8),
    "ph": (6.5, 7, 8.5),
    "ammonia": (0, 0.5, 1),
}

STEADY = ["Maintain current management practices", "Continue regular monitoring"]


def risk_level(value: float, low: float, medium: float, high: float) -> str:
    if value <= low or value >= high:
        return "high"
    if value < medium:
        return "medium"
    return "low"


def trend(current: float, predicted: float) -> str:
    if predicted > current:
        return "increasing"
    if predicted < current:
        return "decreasing"
    return "stable"


def _is_daytime(hour: int) -> bool:
    return 6 <= hour % 24 <= 18


def temperature_recommendations(temp):
    if temp > 30:
        return [
            "Increase water exchange rate",
            "Add shading to reduce sunlight exposure",
            "Consider reducing feeding rate",
        ]
    if temp < 20:
        return [
            "Add heating if available",
            "Reduce water exchange rate",
            "Monitor fish behavior closely",
        ]
    return list(STEADY)


def oxygen_recommendations(do):
    if do < 4:
        return [
            "Increase aeration immediately",
            "Reduce feeding rate",
            "Consider emergency water exchange",
        ]
    if do < 5:
        return [
            "Increase aeration",
            "Monitor fish behavior",
            "Check aeration system efficiency",
        ]
    return ["Maintain current aeration levels", "Continue regular monitoring"]


def ph_recommendations(ph):
    if ph < 6.5 or ph > 8.5:
        return [
            "Apply pH buffer as needed",
            "Check alkalinity levels",
            "Increase water exchange rate",
        ]
    if ph < 7 or ph > 8:
        return [
            "Monitor more frequently",
            "Prepare pH adjustment if trend continues",
            "Check feeding rate",
        ]
    return list(STEADY)


def ammonia_recommendations(ammonia):
    if ammonia > 1:
        return [
            "Stop feeding immediately",
            "Increase water exchange rate",
            "Add zeolite if available",
        ]
    if ammonia > 0.5:
        return [
            "Reduce feeding rate",
            "Increase aeration",
            "Monitor biofilter performance",
        ]
    return list(STEADY)


class WaterQualityPredictorCalculator(BaseCalculator):

    SLUG = "water_quality_predictor"
    TITLE = "Water Quality Predictor"
    CATEGORY = Category.WATER
    PATH = "/water-quality-predictor"
    DESCRIPTION = "48-hour projection of temperature, oxygen, pH and ammonia with risk levels."

    def calculate(self, fields: dict) -> dict:
        species = self.require_choice(fields, "species", SPECIES_PARAMETERS)
        temp = self.require_number(fields, "temperature")
        do = self.require_number(fields, "dissolved_oxygen", minimum=0)
        ph = self.require_number(fields, "ph", minimum=0, maximum=14)
        ammonia = self.require_number(fields, "ammonia", minimum=0)
        feeding = self.require_number(fields, "feeding_rate", minimum=0)
        density = self.require_number(fields, "stocking_density", minimum=0)
        exchange = self.require_number(fields, "water_exchange_rate", minimum=0)
        sunlight = self.optional_number(fields, "sunlight", 0.0, minimum=0)
        rainfall = self.optional_number(fields, "rainfall", 0.0, minimum=0)

        temps = self.predict_temperature(temp, sunlight, rainfall)
        oxygen = self.predict_dissolved_oxygen(temp, feeding, density)
        phs = self.predict_ph(ph, feeding, rainfall)
        ammonias = self.predict_ammonia(temp, feeding, exchange)

        chart = [
            {"time": f"{i}h", "temperature": temps[i], "dissolved_oxygen": oxygen[i],
             "ph": phs[i], "ammonia": ammonias[i]}
            for i in range(HOURS)
        ]

        predictions = [
            self._summary("Temperature", "temperature", temp, temps[-1],
                          temperature_recommendations),
            self._summary("Dissolved Oxygen", "dissolved_oxygen", do, oxygen[-1],
                          oxygen_recommendations),
            self._summary("pH", "ph", ph, phs[-1], ph_recommendations),
            self._summary("Ammonia", "ammonia", ammonia, ammonias[-1],
                          ammonia_recommendations),
        ]

        return {
            "species": species,
            "species_ranges": SPECIES_PARAMETERS[species],
            "predictions": predictions,
            "hourly": chart,
        }

    def _summary(self, label, key, current, predicted, recommend):
        return {
            "parameter": label,
            "current": current,
            "predicted": predicted,
            "trend": trend(current, predicted),
            "risk": risk_level(predicted, *RISK_THRESHOLDS[key]),
            "recommendations": recommend(predicted),
        }

    def predict_temperature(self, current, sunlight, rainfall):
        rain_effect = -rainfall * 0.2 if rainfall > 0 else 0
        return [
            round(current + (sunlight * 0.1 if _is_daytime(h) else -0.05) + rain_effect, 1)
            for h in range(HOURS)
        ]

    def predict_dissolved_oxygen(self, temp, feeding, density):
        base = 6 - 0.1 * (temp - 25) - 0.2 * feeding - 0.1 * density
        return [round(base + (0.5 if _is_daytime(h) else -0.3), 1) for h in range(HOURS)]

    def predict_ph(self, current, feeding, rainfall):
        rain_effect = -rainfall * 0.1 if rainfall > 0 else 0
        value = round(current - 0.05 * feeding + rain_effect, 1)
        return [value] * HOURS

    def predict_ammonia(self, temp, feeding, exchange):
        value = 0.5 + 0.01 * (temp - 25) + 0.02 * feeding - 0.05 * exchange
        return [round(max(0.0, value), 2)] * HOURS
