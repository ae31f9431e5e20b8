"""
Pond lining calculator.

Liner area = bottom + four sloped sides, where each side's run is widened by
depth x slope ratio at both ends. Material is ordered with 10% extra for
overlaps and wastage.
"""

from .base import BaseCalculator
from ..models import Category

MATERIALS = {
    "hdpe": {
        "name": "HDPE (High-Density Polyethylene)", "cost_per_sqm": 8, "lifespan": 15,
        "durability": "High", "maintenance": "Low", "installation": "Moderate",
        "description": "Excellent chemical resistance and durability",
    },
    "pvc": {
        "name": "PVC (Polyvinyl Chloride)", "cost_per_sqm": 5, "lifespan": 10,
        "durability": "Moderate", "maintenance": "Moderate", "installation": "Easy",
        "description": "Cost-effective and widely available",
    },
    "epdm": {
        "name": "EPDM (Rubber)", "cost_per_sqm": 12, "lifespan": 20,
        "durability": "Very High", "maintenance": "Low", "installation": "Easy",
        "description": "Highly flexible and excellent UV resistance",
    },
    "butyl": {
        "name": "Butyl Rubber", "cost_per_sqm": 15, "lifespan": 25,
        "durability": "Very High", "maintenance": "Low", "installation": "Moderate",
        "description": "Superior durability and puncture resistance",
    },
    "geomembrane": {
        "name": "Reinforced Geomembrane", "cost_per_sqm": 10, "lifespan": 18,
        "durability": "High", "maintenance": "Low", "installation": "Complex",
        "description": "High strength and good chemical resistance",
    },
}

OVERLAP_FACTOR = 1.1


class PondLiningCalculator(BaseCalculator):

    SLUG = "pond_lining"
    TITLE = "Pond Lining Calculator"
    CATEGORY = Category.WATER
    PATH = "/pond-lining"
    DESCRIPTION = "Liner area, material and labour cost, maintenance and installation plan."

    def calculate(self, fields: dict) -> dict:
        length = self.require_number(fields, "length", positive=True)
        width = self.require_number(fields, "width", positive=True)
        depth = self.require_number(fields, "depth", positive=True)
        slope_ratio = self.optional_number(fields, "slope_ratio", 2.0, minimum=0)
        material_key = self.require_choice(fields, "material_type", MATERIALS)
        labor_per_day = self.optional_number(fields, "labor_cost_per_day", 0.0, minimum=0)
        days = self.optional_number(fields, "estimated_days", 0.0, minimum=0)
        additional = self.optional_number(fields, "additional_costs", 0.0, minimum=0)

        material = MATERIALS[material_key]
        slope_length = depth * slope_ratio
        bottom_area = length * width
        side_area_1 = (length + 2 * slope_length) * depth
        side_area_2 = (width + 2 * slope_length) * depth
        total_area = bottom_area + 2 * side_area_1 + 2 * side_area_2
        area_with_overlap = total_area * OVERLAP_FACTOR

        material_cost = area_with_overlap * material["cost_per_sqm"]
        labor_cost = labor_per_day * days
        total_cost = material_cost + labor_cost + additional

        recommendations = []
        if total_area > 1000:
            recommendations.append("Consider hiring professional installation team")
            recommendations.append("Implement quality control measures during installation")
        if material["installation"] == "Complex":
            recommendations.append("Ensure installers are certified for this material")
        if depth > 3:
            recommendations.append("Use reinforced material at deeper sections")
        recommendations.append(
            f"Expected lifespan: {material['lifespan']} years with proper maintenance"
        )

        maintenance_plan = [
            "Regular inspection for tears and punctures",
            "Clean liner surface periodically",
            "Maintain proper water chemistry",
            "Monitor for UV degradation",
        ]
        if material["maintenance"] == "Moderate":
            maintenance_plan.append("Schedule bi-annual professional inspection")

        installation_steps = [
            "Site preparation and excavation",
            "Subgrade preparation and compaction",
            "Installation of underlayment or geotextile",
            f"Installation of {material['name']} liner",
            "Seaming and joining sections",
            "Anchor trench construction",
            "Quality control inspection",
        ]
        if material["installation"] == "Complex":
            installation_steps.append("Professional certification inspection")

        return {
            "total_area": area_with_overlap,
            "liner_area": total_area,
            "material_cost": material_cost,
            "labor_cost": labor_cost,
            "total_cost": total_cost,
            "cost_per_sqm": total_cost / total_area,
            "annual_cost": total_cost / material["lifespan"],
            "material": {k: material[k] for k in ("name", "durability", "maintenance",
                                                  "installation", "description")},
            "recommendations": recommendations,
            "maintenance_plan": maintenance_plan,
            "installation_steps": installation_steps,
        }
