"""
Feed management: daily usage and days of stock remaining per feed type.

Daily usage of a feed type is the sum of its scheduled feeding amounts;
days remaining is the stock on hand divided by that, rounded down, or 0 when
the feed is not on the schedule.
"""

import math

from .base import BaseCalculator
from ..models import Category


class FeedManagementCalculator(BaseCalculator):

    SLUG = "feed_management"
    TITLE = "Feed Management"
    CATEGORY = Category.FEED
    PATH = "/feed-management"
    DESCRIPTION = "Daily feed usage from the feeding schedule and days of stock remaining."

    def calculate(self, fields: dict) -> dict:
        schedules = [
            {
                "time": str(row.get("time") or ""),
                "type": self.require_text(row, "type"),
                "amount": self.require_number(row, "amount", minimum=0),
            }
            for row in self.require_records(fields, "schedules", min_count=0)
        ]
        stock = [
            {
                "type": self.require_text(row, "type"),
                "amount": self.require_number(row, "amount", minimum=0),
                "unit": str(row.get("unit") or "kg"),
            }
            for row in self.require_records(fields, "stock")
        ]

        usage = {}
        for schedule in schedules:
            usage[schedule["type"]] = usage.get(schedule["type"], 0.0) + schedule["amount"]

        items = []
        for item in stock:
            daily = usage.get(item["type"], 0.0)
            days = math.floor(item["amount"] / daily) if daily > 0 else 0
            items.append({**item, "daily_usage": daily, "days_remaining": days})

        return {
            "total_daily_usage": sum(usage.values()),
            "daily_usage_by_type": usage,
            "stock": items,
        }
