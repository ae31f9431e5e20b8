"""
Harvest timing.

Days to harvest = ceil((target - current) / daily growth). Revenue applies a
seasonal price factor; the weekly projection prices fish at the market price.
"""

import math
from datetime import date, timedelta

from .base import BaseCalculator, CalculationError
from ..models import Category

SPECIES_DATA = {
    "tilapia": {"optimal_growth_rate": 2.5, "max_weight": 800, "price_variation": 0.2},
    "carp": {"optimal_growth_rate": 3.0, "max_weight": 1500, "price_variation": 0.15},
    "catfish": {"optimal_growth_rate": 3.5, "max_weight": 1200, "price_variation": 0.25},
}

WATER_QUALITY = ["Excellent", "Good", "Fair", "Poor"]

SEASONAL_FACTORS = {
    "Peak Season": 1.2,
    "Off Season": 0.8,
    "Normal": 1.0,
    "Festival Season": 1.0,
}


class HarvestTimingCalculator(BaseCalculator):

    SLUG = "harvest_timing"
    TITLE = "Harvest Timing"
    CATEGORY = Category.FISH
    PATH = "/harvest-timing"
    DESCRIPTION = "Optimal harvest date, economics and weekly growth projection."

    def calculate(self, fields: dict) -> dict:
        species_name = self.require_choice(fields, "species", SPECIES_DATA)
        current = self.require_number(fields, "current_weight", minimum=0)  # grams
        target = self.require_number(fields, "target_weight", positive=True)
        growth_rate = self.require_number(fields, "growth_rate", positive=True)  # g/day
        price = self.require_number(fields, "market_price", minimum=0)
        daily_costs = self.require_number(fields, "production_costs", minimum=0)
        survival = self.require_number(fields, "survival_rate", minimum=0, maximum=100) / 100
        water_quality = self.require_choice(fields, "water_quality", WATER_QUALITY)
        season = self.require_choice(fields, "seasonal_pricing", SEASONAL_FACTORS)
        as_of = self.optional_date(fields, "as_of", date.today())

        if target <= current:
            raise CalculationError(
                "target_weight must be greater than current_weight", field="target_weight"
            )

        species = SPECIES_DATA[species_name]
        days = math.ceil((target - current) / growth_rate)
        harvest_date = as_of + timedelta(days=days)

        if water_quality == "Excellent" and growth_rate >= species["optimal_growth_rate"]:
            confidence = "high"
        elif water_quality == "Poor":
            confidence = "low"
        else:
            confidence = "medium"

        revenue = target * price * SEASONAL_FACTORS[season] * survival
        cost = daily_costs * days
        profit = revenue - cost

        projection = []
        for week in range(1, math.ceil(days / 7) + 1):
            weight = current + growth_rate * 7 * week
            projection.append({
                "week": week,
                "weight": weight,
                "price": price,
                "profit": weight * price * survival - daily_costs * 7 * week,
            })

        risks = []
        if water_quality != "Excellent":
            risks.append({
                "factor": "Water Quality",
                "level": "high" if water_quality == "Poor" else "medium",
                "impact": "May slow growth rate and affect survival",
            })
        if growth_rate < species["optimal_growth_rate"]:
            risks.append({
                "factor": "Growth Rate",
                "level": "medium",
                "impact": "Below optimal growth rate for species",
            })
        if season == "Off Season":
            risks.append({
                "factor": "Market Timing",
                "level": "high",
                "impact": "Lower prices during off-season",
            })

        recommendations = []
        if confidence == "low":
            recommendations.append("Consider improving water quality before harvest")
            recommendations.append("Monitor growth rate more frequently")
        if season == "Off Season":
            recommendations.append(
                "Evaluate possibility of extending culture period to reach peak season"
            )
            recommendations.append("Consider partial harvesting strategy")
        if profit < 0:
            recommendations.append("Review production costs and feeding strategy")
            recommendations.append("Consider alternative market channels")
        recommendations.append(
            f"Optimal harvest window: {harvest_date.isoformat()} "
            f"(±{math.ceil(days * 0.1)} days)"
        )

        return {
            "days_to_harvest": days,
            "optimal_harvest_date": harvest_date.isoformat(),
            "confidence": confidence,
            "max_weight": species["max_weight"],
            "price_variation": species["price_variation"] * 100,
            "economics": {"revenue": revenue, "cost": cost, "profit": profit},
            "growth_projection": projection,
            "risk_factors": risks,
            "recommendations": recommendations,
        }
