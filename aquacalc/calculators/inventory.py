"""
Inventory status: low stock, items expiring within 30 days, stock value.
"""

from datetime import date, timedelta

from .base import BaseCalculator
from ..models import Category

CATEGORIES = ["Feed", "Medication", "Equipment", "Testing Supplies", "Spare Parts", "Other"]

EXPIRY_WINDOW_DAYS = 30


class InventoryCalculator(BaseCalculator):

    SLUG = "inventory"
    TITLE = "Inventory Management"
    CATEGORY = Category.BUSINESS
    PATH = "/inventory"
    DESCRIPTION = "Low stock, expiring items and stock value by category."

    def calculate(self, fields: dict) -> dict:
        as_of = self.optional_date(fields, "as_of", date.today())
        items = []
        for row in self.require_records(fields, "items"):
            items.append({
                "name": self.require_text(row, "name"),
                "category": self.require_choice(row, "category", CATEGORIES),
                "quantity": self.require_number(row, "quantity", minimum=0),
                "unit": str(row.get("unit") or ""),
                "min_threshold": self.optional_number(row, "min_threshold", 0.0, minimum=0),
                "cost": self.optional_number(row, "cost", 0.0, minimum=0),
                "expiry": self.optional_date(row, "expiry_date", None),
            })

        cutoff = as_of + timedelta(days=EXPIRY_WINDOW_DAYS)
        low_stock = [i["name"] for i in items if i["quantity"] <= i["min_threshold"]]
        expiring = [
            i["name"] for i in items
            if i["expiry"] is not None and as_of <= i["expiry"] <= cutoff
        ]

        by_category = {}
        for item in items:
            entry = by_category.setdefault(item["category"], {"items": 0, "value": 0.0})
            entry["items"] += 1
            entry["value"] += item["quantity"] * item["cost"]

        return {
            "as_of": as_of.isoformat(),
            "item_count": len(items),
            "total_value": sum(i["quantity"] * i["cost"] for i in items),
            "low_stock": low_stock,
            "expiring_soon": expiring,
            "by_category": by_category,
        }
