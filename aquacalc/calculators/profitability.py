"""
Profitability calculator.

Annual revenue = production per cycle x survival x price x cycles. A loan is
repaid as a five-year annuity. The cash-flow projection splits the year's
income and operating costs evenly over the harvest months and spreads the
loan payment over all twelve.
"""

import calendar
import math

from .base import BaseCalculator
from ..models import Category

CAPITAL_FIELDS = ["pond_construction", "equipment", "infrastructure", "permits"]

OPERATING_FIELDS = [
    "seed_stock",
    "feed",
    "labor",
    "electricity",
    "maintenance",
    "chemicals",
    "marketing",
]

LOAN_TERM_YEARS = 5


def annual_loan_payment(amount: float, rate: float, years: int = LOAN_TERM_YEARS) -> float:
    """Annuity payment; straight-line when the interest rate is zero."""
    if amount <= 0:
        return 0.0
    if rate == 0:
        return amount / years
    growth = (1 + rate) ** years
    return amount * rate * growth / (growth - 1)


def _label(field):
    return field.replace("_", " ").title()


class ProfitabilityCalculator(BaseCalculator):

    SLUG = "profitability"
    TITLE = "Profitability Calculator"
    CATEGORY = Category.BUSINESS
    PATH = "/profitability"
    DESCRIPTION = "Revenue, profit, ROI, payback, break-even and monthly cash flow."

    def calculate(self, fields: dict) -> dict:
        capital = {f: self.require_number(fields, f, minimum=0) for f in CAPITAL_FIELDS}
        operating = {f: self.require_number(fields, f, minimum=0) for f in OPERATING_FIELDS}
        cycles = self.require_number(fields, "cycles_per_year", positive=True, maximum=12)
        production = self.require_number(fields, "production_per_cycle", positive=True)
        survival = self.require_number(fields, "survival_rate", minimum=0, maximum=100) / 100
        price = self.require_number(fields, "selling_price", minimum=0)
        loan = self.optional_number(fields, "loan_amount", 0.0, minimum=0)
        interest = self.optional_number(fields, "interest_rate", 0.0, minimum=0) / 100

        total_capital = sum(capital.values())
        total_operating = sum(operating.values())

        revenue_per_cycle = production * survival * price
        annual_revenue = revenue_per_cycle * cycles
        loan_payment = annual_loan_payment(loan, interest)

        annual_operating = total_operating * cycles
        gross_profit = annual_revenue - annual_operating
        net_profit = gross_profit - loan_payment
        investment = total_capital + loan

        roi = self.divide(net_profit, investment, "ROI") * 100
        # No payback when the farm does not make a net profit
        payback = investment / net_profit if net_profit > 0 else None
        break_even = self.divide(
            total_operating, price - total_operating / production, "break-even point"
        )

        # Harvest months are int(k * 12 / cycles)
        interval = 12 / cycles
        harvests = {int(k * interval) for k in range(math.ceil(cycles))}
        cash_flow = []
        for i in range(12):
            harvest_month = i in harvests
            income = annual_revenue / len(harvests) if harvest_month else 0.0
            expenses = (
                (annual_operating / len(harvests) if harvest_month else 0.0) + loan_payment / 12
            )
            cash_flow.append({
                "month": calendar.month_abbr[i + 1],
                "income": income,
                "expenses": expenses,
                "balance": income - expenses,
            })

        recommendations = []
        if roi < 15:
            recommendations.append("Consider ways to reduce operating costs")
            recommendations.append("Explore higher-value markets or products")
        if payback is None or payback > 3:
            recommendations.append("Look for opportunities to increase production efficiency")
            recommendations.append("Evaluate financing options to reduce debt burden")
        if total_operating and operating["feed"] / total_operating > 0.5:
            recommendations.append("Optimize feed management to reduce costs")
            recommendations.append("Consider alternative feed sources")

        return {
            "capital_costs": {
                "total": total_capital,
                "breakdown": [{"name": _label(k), "value": v} for k, v in capital.items()],
            },
            "operating_costs": {
                "total": total_operating,
                "breakdown": [{"name": _label(k), "value": v} for k, v in operating.items()],
            },
            "revenue": {"annual": annual_revenue, "per_cycle": revenue_per_cycle},
            "profitability": {
                "gross_profit": gross_profit,
                "net_profit": net_profit,
                "annual_loan_payment": loan_payment,
                "roi": roi,
                "payback_period": payback,
                "break_even_point": break_even,
            },
            "cash_flow": cash_flow,
            "recommendations": recommendations,
        }
