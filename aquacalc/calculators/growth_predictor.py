"""
Growth predictor.

Efficiency = temperature effect x density effect, each a linear penalty on the
distance from the species optimum (floored at 0.5 and 0.7). Weight compounds
monthly at 30 x the daily rate over ceil(days / 30) months.
"""

import math

from .base import BaseCalculator
from ..models import Category

SPECIES_DATA = {
    "Tilapia": {"optimal_temp": 28, "max_growth_rate": 3.5, "default_fcr": 1.6,
                "optimal_density": 20, "temp_tolerance": 5},
    "Common Carp": {"optimal_temp": 25, "max_growth_rate": 4.0, "default_fcr": 1.8,
                    "optimal_density": 15, "temp_tolerance": 8},
    "Catfish": {"optimal_temp": 26, "max_growth_rate": 5.0, "default_fcr": 1.4,
                "optimal_density": 25, "temp_tolerance": 6},
    "Rainbow Trout": {"optimal_temp": 15, "max_growth_rate": 4.5, "default_fcr": 1.2,
                      "optimal_density": 10, "temp_tolerance": 4},
    "Sea Bass": {"optimal_temp": 22, "max_growth_rate": 3.8, "default_fcr": 1.5,
                 "optimal_density": 12, "temp_tolerance": 5},
}


def _impact(value, optimal_limit, acceptable_limit):
    if value <= optimal_limit:
        return "Optimal"
    if value <= acceptable_limit:
        return "Acceptable"
    return "Suboptimal"


class GrowthPredictorCalculator(BaseCalculator):

    SLUG = "growth_predictor"
    TITLE = "Growth Predictor"
    CATEGORY = Category.FISH
    PATH = "/growth-predictor"
    DESCRIPTION = "Monthly weight and biomass projections from temperature, density and feeding."

    def calculate(self, fields: dict) -> dict:
        species_name = self.require_choice(fields, "species", SPECIES_DATA)
        species = SPECIES_DATA[species_name]

        initial_weight = self.require_number(fields, "initial_weight", positive=True)
        temp = self.require_number(fields, "water_temperature")
        feeding_rate = self.require_number(fields, "feeding_rate", positive=True) / 100
        period = self.require_number(fields, "culture_period", positive=True)
        fcr = self.optional_number(fields, "fcr", species["default_fcr"], positive=True)
        density = self.optional_number(
            fields, "stocking_density", species["optimal_density"], positive=True
        )
        feed_cost = self.optional_number(fields, "feed_cost", 0.0, minimum=0)

        temp_diff = abs(temp - species["optimal_temp"])
        density_diff = abs(density - species["optimal_density"])
        temp_effect = max(0.5, 1 - temp_diff / species["temp_tolerance"] * 0.5)
        density_effect = max(0.7, 1 - density_diff / species["optimal_density"] * 0.3)
        efficiency = temp_effect * density_effect

        base_rate = species["max_growth_rate"] / 100 * efficiency * feeding_rate
        daily_rate = base_rate / fcr

        projections = [{"month": 0, "weight": initial_weight,
                        "biomass": initial_weight * density, "feed_required": 0.0}]
        weight = initial_weight
        for month in range(1, math.ceil(period / 30) + 1):
            previous = weight
            weight = previous * (1 + daily_rate * 30)
            projections.append({
                "month": month,
                "weight": weight,
                "biomass": weight * density,
                "feed_required": (weight - previous) * fcr,
            })

        final_weight = weight
        feed_consumption = (final_weight - initial_weight) * fcr
        tolerance = species["temp_tolerance"]
        optimal_density = species["optimal_density"]
        default_fcr = species["default_fcr"]

        environmental_factors = [
            {"factor": "Temperature", "value": temp,
             "impact": _impact(temp_diff, tolerance / 2, tolerance)},
            {"factor": "Stocking Density", "value": density,
             "impact": _impact(density_diff, optimal_density * 0.2, optimal_density * 0.4)},
            {"factor": "Feed Conversion", "value": fcr,
             "impact": _impact(fcr, default_fcr * 1.1, default_fcr * 1.3)},
        ]

        recommendations = []
        if temp_diff > tolerance / 2:
            recommendations.append("Consider temperature control measures for optimal growth")
        if density_diff > optimal_density * 0.2:
            recommendations.append(
                "Adjust stocking density to optimize growth and resource utilization"
            )
        if fcr > default_fcr * 1.1:
            recommendations.append("Review feeding practices to improve feed conversion efficiency")
        if feeding_rate < 0.02:
            recommendations.append("Consider increasing feeding rate for better growth performance")
        elif feeding_rate > 0.04:
            recommendations.append("Monitor water quality closely with high feeding rate")

        return {
            "final_weight": final_weight,
            "daily_growth_rate": base_rate,
            "feed_consumption": feed_consumption,
            "feed_cost": feed_consumption * feed_cost,
            "total_biomass": final_weight * density,
            "efficiency_score": efficiency * 100,
            "growth_projections": projections,
            "environmental_factors": environmental_factors,
            "recommendations": recommendations,
        }
