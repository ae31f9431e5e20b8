"""
Growth benchmark.

Compares actual daily weight gain since stocking with an expected gain for the
species, adjusted for feed type, water temperature and stocking density.
"""

from datetime import date

from .base import BaseCalculator, CalculationError
from ..models import Category

BASE_GROWTH_RATES = {
    "Tilapia": 3.5,
    "Common Carp": 4.0,
    "Catfish": 5.0,
    "Rainbow Trout": 4.5,
    "Sea Bass": 3.8,
    "Sea Bream": 3.2,
}

OPTIMAL_TEMPERATURES = {
    "Tilapia": 28,
    "Common Carp": 25,
    "Catfish": 26,
    "Rainbow Trout": 15,
    "Sea Bass": 22,
    "Sea Bream": 23,
}

FEED_FACTORS = {
    "Commercial Pellets - High Protein": 1.2,
    "Commercial Pellets - Standard": 1.0,
    "Natural Feed": 0.8,
    "Mixed Feed": 0.9,
}


def _impact(factor):
    if factor >= 1:
        return "Positive"
    if factor >= 0.9:
        return "Neutral"
    return "Negative"


class GrowthBenchmarkCalculator(BaseCalculator):

    SLUG = "growth_benchmark"
    TITLE = "Growth Benchmark"
    CATEGORY = Category.FISH
    PATH = "/growth-benchmark"
    DESCRIPTION = "Actual versus expected growth since stocking, with a performance score."

    def calculate(self, fields: dict) -> dict:
        species = self.require_choice(fields, "species", BASE_GROWTH_RATES)
        stocking_date = self.require_date(fields, "stocking_date")
        as_of = self.optional_date(fields, "as_of", date.today())
        stocking_weight = self.require_number(fields, "stocking_weight", minimum=0)
        current_weight = self.require_number(fields, "current_weight", minimum=0)
        temp = self.require_number(fields, "water_temperature")
        density = self.require_number(fields, "stocking_density", minimum=0)
        feed_type = str(fields.get("feed_type") or "").strip()

        days = (as_of - stocking_date).days
        if days <= 0:
            raise CalculationError(
                "stocking_date must be before the assessment date", field="stocking_date"
            )

        actual_rate = (current_weight - stocking_weight) / days

        feed_factor = FEED_FACTORS.get(feed_type, 1.0)
        temp_diff = abs(temp - OPTIMAL_TEMPERATURES[species])
        if temp_diff <= 2:
            temp_factor = 1.0
        elif temp_diff <= 4:
            temp_factor = 0.9
        else:
            temp_factor = 0.7
        if density < 20:
            density_factor = 1.1
        elif density > 50:
            density_factor = 0.8
        else:
            density_factor = 1.0

        expected_rate = BASE_GROWTH_RATES[species] * feed_factor * temp_factor * density_factor
        score = min(100.0, actual_rate / expected_rate * 100)
        deviation = (actual_rate - expected_rate) / expected_rate * 100

        if deviation > 10:
            status = "Above Target"
        elif deviation < -10:
            status = "Below Target"
        else:
            status = "On Target"

        recommendations = []
        if score < 80:
            if temp_factor < 0.9:
                recommendations.append("Adjust water temperature closer to optimal range")
            if density_factor < 0.9:
                recommendations.append("Consider reducing stocking density")
            if feed_factor < 1:
                recommendations.append("Evaluate feed quality and consider upgrading feed type")
        if deviation < -10:
            recommendations.append("Review feeding schedule and portion sizes")
            recommendations.append("Check for signs of disease or stress")
        elif deviation > 20:
            recommendations.append("Optimize feed conversion by adjusting feeding rate")
            recommendations.append("Monitor water quality more frequently")

        return {
            "days_since_stocking": days,
            "actual_growth_rate": actual_rate,
            "expected_growth_rate": expected_rate,
            "performance_score": score,
            "deviation_percent": deviation,
            "status": status,
            "environmental_factors": [
                {"factor": "Temperature", "value": temp_factor, "impact": _impact(temp_factor)},
                {"factor": "Stocking Density", "value": density_factor,
                 "impact": _impact(density_factor)},
                {"factor": "Feed Type", "value": feed_factor, "impact": _impact(feed_factor)},
            ],
            "feed_efficiency": self._feed_efficiency(score),
            "recommendations": recommendations,
        }

    def _feed_efficiency(self, score):
        if score >= 90:
            return "Excellent"
        if score >= 80:
            return "Good"
        if score >= 70:
            return "Fair"
        return "Poor"
