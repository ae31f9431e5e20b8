"""
Market analysis: pricing band, competitive position and seasonal demand.

    min price       = (production + transport cost) x 1.1
    max price       = competitor price x 1.1
    suggested price = midpoint of the two
    margin %        = (suggested - total cost) / suggested x 100

Prices are shown to two decimals and the margin to one.
"""

from .base import BaseCalculator
from ..models import Category

PRODUCT_TYPES = [
    "Fresh Whole",
    "Fresh Fillet",
    "Frozen Whole",
    "Frozen Fillet",
    "Live",
    "Processed",
]

TARGET_MARKETS = ["Local Retail", "Wholesale", "Export", "Restaurants", "Processors"]

QUALITY_GRADES = ["Premium", "Standard", "Economy"]

SEASONALITY = {
    "Peak Season": "high",
    "Off Season": "low",
    "Year Round": "medium",
    "Festival Season": "medium",
}

SCALE_QUANTITY = 1000  # kg


class MarketAnalysisCalculator(BaseCalculator):

    SLUG = "market_analysis"
    TITLE = "Market Analysis"
    CATEGORY = Category.BUSINESS
    PATH = "/market-analysis"
    DESCRIPTION = "Suggested selling price, margin and market position."

    def calculate(self, fields: dict) -> dict:
        production_cost = self.require_number(fields, "production_cost", minimum=0)
        transport_cost = self.optional_number(fields, "transport_cost", 0.0, minimum=0)
        competitor_price = self.require_number(fields, "competitor_price", minimum=0)
        quantity = self.optional_number(fields, "quantity", 0.0, minimum=0)
        grade = self.optional_choice(fields, "quality_grade", QUALITY_GRADES)
        market = self.optional_choice(fields, "target_market", TARGET_MARKETS)
        season = self.optional_choice(fields, "seasonality", SEASONALITY)
        product = self.optional_choice(fields, "product_type", PRODUCT_TYPES)

        total_cost = production_cost + transport_cost
        min_price = total_cost * 1.1
        max_price = competitor_price * 1.1
        suggested = (min_price + max_price) / 2
        margin = self.divide(suggested - total_cost, suggested, "margin") * 100

        if suggested > competitor_price * 1.1:
            position = "premium"
        elif suggested < competitor_price:
            position = "aggressive"
        else:
            position = "competitive"

        advantages = []
        risks = []
        if grade == "Premium":
            advantages += ["High quality product positioning", "Better profit margins"]
            risks.append("Limited market size")
        if market == "Export":
            advantages += ["Access to higher-value markets", "Currency advantages"]
            risks += ["Complex logistics", "International regulations"]
        if quantity > SCALE_QUANTITY:
            advantages.append("Economy of scale")
            risks.append("Storage requirements")

        demand = SEASONALITY.get(season, "medium")

        recommendations = []
        if margin < 15:
            recommendations += ["Consider cost reduction strategies",
                                "Explore value-added products"]
        if position == "premium":
            recommendations += ["Focus on quality certification",
                                "Develop premium market channels"]
        if demand == "high":
            recommendations += ["Build inventory for peak demand", "Secure advance contracts"]

        return {
            "price_analysis": {
                "suggested_price": round(suggested, 2),
                "min_price": round(min_price, 2),
                "max_price": round(max_price, 2),
                "margin": round(margin, 1),
            },
            "competitive_analysis": {
                "position": position,
                "advantages": advantages,
                "risks": risks,
            },
            "product_type": product,
            "seasonal_demand": demand,
            "recommendations": recommendations,
        }
