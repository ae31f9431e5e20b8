"""
Feed conversion ratio calculator.

FCR = feed given / biomass gain. Compared against a per-species target;
cost impact uses a flat feed price.
"""

from .base import BaseCalculator, CalculationError
from ..models import Category

TARGET_FCR = {
    "tilapia": 1.6,
    "carp": 1.8,
    "catfish": 1.5,
    "trout": 1.2,
    "seabass": 1.7,
    "seabream": 1.8,
}

FEED_COST_PER_KG = 45  # USD


class FcrCalculator(BaseCalculator):

    SLUG = "fcr"
    TITLE = "FCR Calculator"
    CATEGORY = Category.FEED
    PATH = "/fcr-calculator"
    DESCRIPTION = "Feed conversion ratio against species targets, with cost impact."

    def calculate(self, fields: dict) -> dict:
        species = self.require_choice(fields, "species", TARGET_FCR)
        initial_biomass = self.require_number(fields, "initial_weight", minimum=0)
        final_biomass = self.require_number(fields, "final_weight", minimum=0)
        feed_given = self.require_number(fields, "feed_given", minimum=0)
        mortality = self.parse_number(fields.get("mortality"), 0.0)
        duration = self.parse_int(fields.get("duration"), 0)

        biomass_gain = final_biomass - initial_biomass
        if biomass_gain <= 0:
            raise CalculationError(
                "final_weight must be greater than initial_weight", field="final_weight"
            )

        fcr = feed_given / biomass_gain
        target = TARGET_FCR[species]
        efficiency = (target - fcr) / target * 100
        deviation = fcr - target

        current_cost = feed_given * FEED_COST_PER_KG
        ideal_cost = biomass_gain * target * FEED_COST_PER_KG
        potential_savings = current_cost - ideal_cost if fcr > target else 0.0

        return {
            "fcr": self.round2(fcr),
            "efficiency": self.round2(efficiency),
            "target_fcr": target,
            "deviation": self.round2(deviation),
            "biomass_gain": biomass_gain,
            "mortality": mortality,
            "duration_days": duration,
            "efficiency_rating": self._rating(efficiency),
            "recommendations": self._recommendations(fcr, target, efficiency),
            "cost_implications": {
                "current_cost": self.round2(current_cost),
                "potential_savings": self.round2(potential_savings),
            },
        }

    def _rating(self, efficiency):
        if efficiency >= 0:
            return "success"
        if efficiency >= -10:
            return "warning"
        return "error"

    def _recommendations(self, fcr, target, efficiency):
        if fcr > target + 0.5:
            recs = [
                "Significant improvement needed in feed management",
                "Review feeding frequency and portion sizes",
                "Check for feed wastage during feeding",
                "Assess water quality parameters",
            ]
        elif fcr > target + 0.2:
            recs = [
                "Monitor feeding behavior more closely",
                "Adjust feed amounts based on appetite",
                "Consider feed quality and storage conditions",
            ]
        elif fcr > target:
            recs = [
                "Fine-tune feeding schedule",
                "Continue monitoring growth rates",
                "Maintain current water quality",
            ]
        else:
            recs = [
                "Maintain current feeding practices",
                "Document successful management strategies",
                "Consider sharing best practices",
            ]

        if efficiency < -20:
            recs.append("Urgent action needed to improve feed efficiency")
            recs.append("Consider consulting a feed specialist")
        return recs
