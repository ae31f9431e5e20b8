"""
FCR optimizer.

Per-fish weights and a fish count give the batch gain. Adds feed efficiency,
daily growth, protein efficiency ratio and advice keyed on growth stage,
feed type, protein content and feeding frequency.
"""

from .base import BaseCalculator, CalculationError
from ..models import Category

GROWTH_STAGES = {
    "Fingerling": ("High protein diet recommended for rapid growth",
                   "Feed 4-6 times daily in small quantities"),
    "Juvenile": ("Balanced protein-energy ratio important",
                 "Feed 3-4 times daily"),
    "Grower": ("Monitor feed consumption closely",
               "Feed 2-3 times daily"),
    "Finisher": ("Focus on feed quality for final growth phase",
                 "Feed 1-2 times daily"),
}

FEED_TYPES = {
    "Commercial pellet": "Compare different brands for best price-quality ratio",
    "Farm-made feed": "Monitor ingredient quality and storage conditions",
    "Floating feed": "Observe feeding behavior to prevent waste",
    "Sinking feed": "Ensure proper feeding time for complete consumption",
    "Extruded feed": None,
}

FEEDING_FREQUENCIES = [
    "1 time per day",
    "2 times per day",
    "3 times per day",
    "4 times per day",
    "Continuous feeding",
]


class FcrOptimizerCalculator(BaseCalculator):

    SLUG = "fcr_optimizer"
    TITLE = "FCR Optimizer"
    CATEGORY = Category.FEED
    PATH = "/fcr-optimizer"
    DESCRIPTION = "Feed efficiency, protein efficiency ratio and feeding advice."

    def calculate(self, fields: dict) -> dict:
        feed = self.require_number(fields, "feed_amount", positive=True)
        initial_wt = self.require_number(fields, "initial_weight", minimum=0)
        final_wt = self.require_number(fields, "final_weight", minimum=0)
        fish_count = self.require_number(fields, "number_of_fish", positive=True)
        period = self.require_number(fields, "feeding_period", positive=True)
        temp = self.require_number(fields, "water_temperature")
        protein = self.require_number(fields, "feed_protein_content", positive=True, maximum=100)
        growth_stage = str(fields.get("growth_stage") or "")
        feed_type = str(fields.get("feed_type") or "")
        frequency = str(fields.get("feeding_frequency") or "")
        if frequency and frequency not in FEEDING_FREQUENCIES:
            raise CalculationError(
                f"Unknown feeding_frequency: {frequency}. Available: {FEEDING_FREQUENCIES}",
                field="feeding_frequency",
            )

        weight_gain = (final_wt - initial_wt) * fish_count
        if weight_gain <= 0:
            raise CalculationError(
                "final_weight must be greater than initial_weight", field="final_weight"
            )

        fcr = feed / weight_gain
        feed_efficiency = weight_gain / feed * 100
        daily_growth_rate = weight_gain / fish_count / period
        protein_intake = feed * protein / 100
        protein_efficiency_ratio = weight_gain / protein_intake
        feed_cost_per_kg = 2.5 if feed_type == "Commercial pellet" else 1.8

        recommendations = []
        schedule = []
        cost_optimization = []

        if fcr > 2.0:
            recommendations.append("High FCR detected - review feeding strategy")
        elif fcr < 1.2:
            recommendations.append("Excellent FCR - maintain current practices")

        if temp < 25:
            recommendations.append("Consider increasing water temperature for optimal feed conversion")
            schedule.append("Feed during warmest part of the day")
        elif temp > 32:
            recommendations.append("High temperature may reduce feed efficiency")
            schedule.append("Feed during cooler parts of the day")

        if growth_stage in GROWTH_STAGES:
            advice, timing = GROWTH_STAGES[growth_stage]
            recommendations.append(advice)
            schedule.append(timing)

        if FEED_TYPES.get(feed_type):
            cost_optimization.append(FEED_TYPES[feed_type])

        if protein < 28:
            recommendations.append("Consider increasing protein content for better growth")
        elif protein > 40:
            cost_optimization.append("High protein content may increase costs unnecessarily")

        if frequency == "1 time per day":
            recommendations.append("Consider increasing feeding frequency for better feed utilization")
        elif frequency == "Continuous feeding":
            cost_optimization.append("Monitor feed waste in continuous feeding system")

        return {
            "fcr": fcr,
            "feed_efficiency": feed_efficiency,
            "daily_growth_rate": daily_growth_rate,
            "feed_cost_per_kg": feed_cost_per_kg,
            "protein_efficiency_ratio": protein_efficiency_ratio,
            "recommendations": recommendations,
            "optimal_feeding_schedule": schedule,
            "cost_optimization": cost_optimization,
        }
