"""
Energy efficiency calculator.

Input is a list of equipment items:
    {"name": "aerator", "power": kW, "hours": h/day, "quantity": n, "efficiency": 0-1}
Consumption is power x hours x quantity / efficiency. Peak hours bill at 120%
of the base rate and off-peak at 80%.
"""

from .base import BaseCalculator, CalculationError
from ..models import Category

EQUIPMENT_TYPES = {
    "aerator": {"base_efficiency": 0.75, "optimal_efficiency": 0.85},
    "pump": {"base_efficiency": 0.70, "optimal_efficiency": 0.80},
    "feeder": {"base_efficiency": 0.80, "optimal_efficiency": 0.90},
    "lighting": {"base_efficiency": 0.85, "optimal_efficiency": 0.95},
    "heater": {"base_efficiency": 0.75, "optimal_efficiency": 0.85},
    "filter": {"base_efficiency": 0.70, "optimal_efficiency": 0.80},
}

CO2_KG_PER_KWH = 0.5
UPGRADE_COST_PER_ITEM = 1000
SOLAR_INSTALL_COST = 15000
SOLAR_SAVINGS_SHARE = 0.4
PEAK_SHIFT_SAVINGS_SHARE = 0.2


class EnergyEfficiencyCalculator(BaseCalculator):

    SLUG = "energy_efficiency"
    TITLE = "Energy Efficiency Calculator"
    CATEGORY = Category.ENVIRONMENT
    PATH = "/energy-efficiency"
    DESCRIPTION = "Farm energy use, cost, emissions and savings measures with payback."

    def calculate(self, fields: dict) -> dict:
        rate = self.require_number(fields, "electricity_rate", minimum=0)
        solar = self.parse_flag(fields.get("solar_potential"))
        backup = self.parse_flag(fields.get("backup_required"))
        equipment = self._parse_equipment(fields.get("equipment"))

        daily = sum(
            item["power"] * item["hours"] * item["quantity"] / item["efficiency"]
            for item in equipment
        )
        monthly = daily * 30
        annual = monthly * 12

        peak_cost = daily * rate * 1.2
        off_peak_cost = daily * rate * 0.8
        total_cost = (peak_cost + off_peak_cost) * 30

        equipment_efficiency = []
        equipment_savings = 0.0
        for item in equipment:
            optimal = EQUIPMENT_TYPES[item["name"]]["optimal_efficiency"]
            if item["efficiency"] < optimal:
                advice = (
                    f"Upgrade or maintain {item['name']} to achieve optimal "
                    f"efficiency of {optimal * 100:g}%"
                )
            else:
                advice = f"{item['name']} is operating at optimal efficiency"
            equipment_efficiency.append({
                "name": item["name"],
                "efficiency": item["efficiency"],
                "recommendation": advice,
            })
            equipment_savings += (
                (1 / item["efficiency"] - 1 / optimal)
                * item["power"] * item["hours"] * item["quantity"] * rate * 30
            )

        savings_potential = []
        if equipment_savings > 0:
            upgrade_cost = len(equipment) * UPGRADE_COST_PER_ITEM
            savings_potential.append({
                "measure": "Equipment Upgrades",
                "savings": equipment_savings * 12,
                "cost": upgrade_cost,
                "payback": upgrade_cost / (equipment_savings * 12),
            })
        if solar and total_cost > 0:
            solar_savings = total_cost * SOLAR_SAVINGS_SHARE * 12
            savings_potential.append({
                "measure": "Solar Installation",
                "savings": solar_savings,
                "cost": SOLAR_INSTALL_COST,
                "payback": SOLAR_INSTALL_COST / solar_savings,
            })
        savings_potential.append({
            "measure": "Peak Hour Shifting",
            "savings": total_cost * PEAK_SHIFT_SAVINGS_SHARE * 12,
            "cost": 0,
            "payback": 0,
        })

        reduction = equipment_savings / total_cost * 100 if total_cost else 0.0
        recommendations = [
            f"Total energy consumption can be reduced by {reduction:.1f}% "
            f"through equipment upgrades",
            "Implement regular maintenance schedule for all equipment",
            "Monitor and record energy consumption patterns",
        ]
        if solar:
            recommendations.append("Consider solar installation for long-term cost savings")
        if peak_cost > off_peak_cost * 1.5:
            recommendations.append("Shift non-essential operations to off-peak hours")
        if backup:
            recommendations.append("Install energy storage system for backup power")

        return {
            "daily_consumption": daily,
            "monthly_consumption": monthly,
            "annual_consumption": annual,
            "peak_cost": peak_cost * 30,
            "off_peak_cost": off_peak_cost * 30,
            "total_cost": total_cost,
            "co2_emissions": annual * CO2_KG_PER_KWH,
            "equipment_efficiency": equipment_efficiency,
            "savings_potential": savings_potential,
            "recommendations": recommendations,
        }

    def _parse_equipment(self, raw) -> list:
        if not isinstance(raw, (list, tuple)) or not raw:
            raise CalculationError("equipment must be a non-empty list", field="equipment")

        items = []
        for index, entry in enumerate(raw):
            if not isinstance(entry, dict):
                raise CalculationError(
                    f"equipment[{index}] must be an object", field="equipment"
                )
            name = str(entry.get("name") or "").strip()
            if name not in EQUIPMENT_TYPES:
                raise CalculationError(
                    f"Unknown equipment type: {name}. Available: {list(EQUIPMENT_TYPES)}",
                    field="equipment",
                )
            items.append({
                "name": name,
                "power": self.require_number(entry, "power", minimum=0),
                "hours": self.require_number(entry, "hours", minimum=0, maximum=24),
                "quantity": self.require_number(entry, "quantity", minimum=0),
                "efficiency": self.require_number(entry, "efficiency", positive=True, maximum=1),
            })
        return items
