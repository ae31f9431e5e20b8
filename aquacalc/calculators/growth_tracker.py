"""
Growth tracker.

Average daily growth of a batch from its dated sample records: weight gain
between the earliest and the latest sample divided by the days between them.
"""

from .base import BaseCalculator, CalculationError
from ..models import Category


class GrowthTrackerCalculator(BaseCalculator):

    SLUG = "growth_tracker"
    TITLE = "Growth Tracker"
    CATEGORY = Category.FISH
    PATH = "/growth-tracker"
    DESCRIPTION = "Average growth rate of a batch from dated weight samples."

    def calculate(self, fields: dict) -> dict:
        rows = self.require_records(fields, "records", min_count=2)
        samples = []
        for row in rows:
            samples.append({
                "date": self.require_date(row, "date"),
                "weight": self.require_number(row, "weight", minimum=0),
                "length": self.optional_number(row, "length", None, minimum=0),
                "sample_size": self.optional_number(row, "sample_size", None, minimum=0),
                "notes": str(row.get("notes") or ""),
            })
        samples.sort(key=lambda s: s["date"])

        first, last = samples[0], samples[-1]
        days = (last["date"] - first["date"]).days
        if days <= 0:
            raise CalculationError(
                "records must span at least one day", field="records"
            )
        weight_gain = last["weight"] - first["weight"]
        result = {
            "species": str(fields.get("species") or ""),
            "batch_id": str(fields.get("batch_id") or ""),
            "sample_count": len(samples),
            "first_date": first["date"].isoformat(),
            "last_date": last["date"].isoformat(),
            "days": days,
            "weight_gain": weight_gain,
            # Shown to two decimals, g/day
            "average_growth_rate": self.round2(weight_gain / days),
            "length_growth_rate": None,
            "records": [{**s, "date": s["date"].isoformat()} for s in samples],
        }
        if first["length"] is not None and last["length"] is not None:
            result["length_growth_rate"] = self.round2((last["length"] - first["length"]) / days)
        return result
