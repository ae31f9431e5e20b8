"""
Health, environment and business calculators.

Tests:
1-6.   Disease risk
7-8.   Waste to fertilizer
9-10.  Aeration
11-14. Energy efficiency
15-16. Weather impact
17-22. Profitability
"""

import pytest

from aquacalc.calculators.aeration import AerationCalculator
from aquacalc.calculators.base import CalculationError
from aquacalc.calculators.disease_risk import DiseaseRiskCalculator
from aquacalc.calculators.energy_efficiency import EnergyEfficiencyCalculator
from aquacalc.calculators.profitability import ProfitabilityCalculator, annual_loan_payment
from aquacalc.calculators.waste_fertilizer import WasteFertilizerCalculator
from aquacalc.calculators.weather_impact import WeatherImpactCalculator


# ============================================================
# Disease risk
# ============================================================

CALM_POND = {
    "temperature": 28,
    "dissolved_oxygen": 6,
    "ph": 7.2,
    "ammonia": 0.2,
    "stocking_density": 20,
    "mortality_rate": 1,
}


def test_disease_risk_calm_pond_scores_zero():
    result = DiseaseRiskCalculator().calculate(CALM_POND)
    assert result["overall_risk_score"] == 0
    assert all(f["status"] == "low" for f in result["risk_factors"])
    assert result["seasonal_pattern"] is None


def test_disease_risk_every_disease_evaluated():
    """All seven diseases are scored and sorted by probability."""
    result = DiseaseRiskCalculator().calculate(CALM_POND)
    risks = result["disease_risks"]
    assert len(risks) == 7
    probabilities = [r["probability"] for r in risks]
    assert probabilities == sorted(probabilities, reverse=True)
    by_name = {r["disease"]: r for r in risks}
    # DO window of (5, None) means "5 or more"
    assert by_name["Trichodiniasis"]["probability"] == pytest.approx(70)
    assert by_name["Streptococcosis"]["probability"] == pytest.approx(70)
    assert by_name["Bacterial Gill Disease"]["probability"] == pytest.approx(50)
    assert by_name["White Spot Disease (Ich)"]["severity"] == "low"
    assert by_name["Saprolegniasis (Fungal Infection)"]["probability"] == pytest.approx(20)


def test_disease_risk_single_disease_selected():
    result = DiseaseRiskCalculator().calculate(dict(CALM_POND, disease="Bacterial Gill Disease"))
    assert [r["disease"] for r in result["disease_risks"]] == ["Bacterial Gill Disease"]
    assert result["disease_risks"][0]["probability"] == pytest.approx(50)
    with pytest.raises(CalculationError):
        DiseaseRiskCalculator().calculate(dict(CALM_POND, disease="Tilapia"))


def test_disease_risk_symptoms_raise_probability():
    fields = dict(CALM_POND, symptoms=[
        "Erratic swimming", "Pop-eye condition", "Hemorrhages", "Dark body color",
    ])
    result = DiseaseRiskCalculator().calculate(fields)
    top = result["disease_risks"][0]
    assert top["disease"] == "Streptococcosis"
    assert top["probability"] == pytest.approx(100)
    assert top["severity"] == "high"
    assert top["treatment_cost"] == {"low": 100, "high": 300}
    aeromonas = next(r for r in result["disease_risks"] if r["disease"] == "Aeromonas Infection")
    assert aeromonas["probability"] == pytest.approx(70)  # 30 + 20 + 2/3 x 30


def test_disease_risk_worst_case_factors():
    result = DiseaseRiskCalculator().calculate({
        "temperature": 35,
        "dissolved_oxygen": 2,
        "ph": 5.5,
        "ammonia": 1.5,
        "stocking_density": 60,
        "mortality_rate": 10,
        "behavior": ["Lethargic"],
        "season": "Summer",
    })
    assert result["overall_risk_score"] == pytest.approx(100)
    assert result["seasonal_pattern"]["risk_level"] == "High"


def test_disease_risk_bottom_sitting_is_medium():
    result = DiseaseRiskCalculator().calculate(dict(CALM_POND, behavior="Bottom sitting"))
    behavior = next(f for f in result["risk_factors"] if f["name"] == "Behavior")
    assert behavior["value"] == 50
    assert result["overall_risk_score"] == pytest.approx(5)


# ============================================================
# Waste to fertilizer
# ============================================================

WASTE_FIELDS = {
    "fish_species": "tilapia",
    "processing_method": "composting",
    "storage_conditions": "indoor",
    "crop_type": "vegetables",
    "feeding_rate": 10,
    "collection_frequency": 7,
    "pond_size": 10000,
    "feed_protein": 32,
}


def test_waste_fertilizer_yield():
    result = WasteFertilizerCalculator().calculate(WASTE_FIELDS)
    assert result["daily_waste"] == pytest.approx(3.5)
    assert result["fertilizer"] == pytest.approx(17.15)
    assert result["application_rate"] == pytest.approx(120.05)
    # retention 0.8 x (1 - 0.05)
    assert result["nutrient_content"]["nitrogen"] == pytest.approx(17.15 * 0.05 * 0.76)
    assert result["economic_value"]["disposal_savings"] == pytest.approx(5.145)
    assert result["economic_value"]["total_benefit"] == pytest.approx(
        result["economic_value"]["fertilizer_value"] + 5.145
    )


def test_waste_fertilizer_recommendations():
    result = WasteFertilizerCalculator().calculate(WASTE_FIELDS)
    assert result["recommendations"][0] == (
        "Collect waste every 7 days to maintain optimal nutrient content"
    )
    assert "Apply fertilizer weekly for vegetables" in result["recommendations"]
    assert result["storage_requirements"][0] == "Maximum storage duration: 180 days"


# ============================================================
# Aeration
# ============================================================

def test_aeration_demand_and_aerators():
    result = AerationCalculator().calculate({
        "length": 20,
        "width": 10,
        "depth": 1.5,
        "fish_quantity": 10000,
        "average_weight": 0.5,
        "temperature": 30,
        "dissolved_oxygen": 4,
        "fish_species": "tilapia",
    })
    assert result["water_volume"] == pytest.approx(300)
    assert result["fish_biomass"] == pytest.approx(5000)
    assert result["oxygen_demand"] == pytest.approx(1375)
    assert result["required_aerators"] == 29
    assert result["energy_cost"] == pytest.approx(83.52)
    assert result["risk_level"] == "medium"
    assert result["recommendations"][0] == "Install 29 aerators with minimum 1 HP capacity each"


def test_aeration_unknown_species_uses_default_demand():
    result = AerationCalculator().calculate({
        "length": 10, "width": 10, "depth": 1, "fish_quantity": 100,
        "average_weight": 1, "temperature": 25, "dissolved_oxygen": 2,
        "fish_species": "milkfish",
    })
    assert result["oxygen_demand"] == pytest.approx(25)
    assert result["risk_level"] == "high"


# ============================================================
# Energy efficiency
# ============================================================

def _energy_fields(**overrides):
    fields = {
        "electricity_rate": 0.1,
        "equipment": [
            {"name": "aerator", "power": 1, "hours": 24, "quantity": 2, "efficiency": 0.75},
        ],
    }
    fields.update(overrides)
    return fields


def test_energy_consumption_and_cost():
    result = EnergyEfficiencyCalculator().calculate(_energy_fields())
    assert result["daily_consumption"] == pytest.approx(64)
    assert result["monthly_consumption"] == pytest.approx(1920)
    assert result["annual_consumption"] == pytest.approx(23040)
    assert result["peak_cost"] == pytest.approx(230.4)
    assert result["off_peak_cost"] == pytest.approx(153.6)
    assert result["total_cost"] == pytest.approx(384)
    assert result["co2_emissions"] == pytest.approx(11520)


def test_energy_savings_measures():
    result = EnergyEfficiencyCalculator().calculate(_energy_fields(solar_potential=True))
    measures = [m["measure"] for m in result["savings_potential"]]
    assert measures == ["Equipment Upgrades", "Solar Installation", "Peak Hour Shifting"]
    solar = result["savings_potential"][1]
    assert solar["savings"] == pytest.approx(1843.2)
    assert result["equipment_efficiency"][0]["recommendation"] == (
        "Upgrade or maintain aerator to achieve optimal efficiency of 85%"
    )


def test_energy_optimal_equipment_needs_no_upgrade():
    result = EnergyEfficiencyCalculator().calculate(_energy_fields(equipment=[
        {"name": "feeder", "power": 0.5, "hours": 4, "quantity": 1, "efficiency": 0.9},
    ]))
    assert [m["measure"] for m in result["savings_potential"]] == ["Peak Hour Shifting"]
    assert result["equipment_efficiency"][0]["recommendation"] == (
        "feeder is operating at optimal efficiency"
    )


@pytest.mark.parametrize("equipment", [
    [],
    None,
    [{"name": "windmill", "power": 1, "hours": 1, "quantity": 1, "efficiency": 0.5}],
    [{"name": "pump", "power": 1, "hours": 1, "quantity": 1, "efficiency": 0}],
])
def test_energy_invalid_equipment(equipment):
    with pytest.raises(CalculationError):
        EnergyEfficiencyCalculator().calculate(_energy_fields(equipment=equipment))


# ============================================================
# Weather impact
# ============================================================

def test_weather_warm_still_day_low_oxygen():
    result = WeatherImpactCalculator().calculate({
        "species": "Tilapia", "temperature": 30, "season": "Spring",
    })
    assert result["water_quality"]["temperature"] == pytest.approx(30)
    assert result["water_quality"]["ph"] == pytest.approx(6.4)
    assert result["fish_health"]["stress_level"] == "Low"
    assert result["operational_impact"]["aeration"] == "Increase intensity"
    assert "Increase aeration immediately" in result["recommendations"]


def test_weather_cold_trout():
    result = WeatherImpactCalculator().calculate({
        "species": "Trout", "temperature": 5, "season": "Winter",
    })
    # winter cooling of 2 degrees
    assert result["water_quality"]["temperature"] == pytest.approx(3)
    assert result["risk_level"] == "High"
    assert result["fish_health"]["disease_risk"] == "Low"
    assert result["operational_impact"]["feeding_schedule"] == "Reduce feeding by 50%"
    assert "Monitor water temperature closely" in result["recommendations"]


# ============================================================
# Profitability
# ============================================================

def _profit_fields(**overrides):
    fields = {
        "pond_construction": 10000,
        "equipment": 5000,
        "infrastructure": 3000,
        "permits": 2000,
        "seed_stock": 1000,
        "feed": 3000,
        "labor": 1000,
        "electricity": 500,
        "maintenance": 200,
        "chemicals": 100,
        "marketing": 200,
        "cycles_per_year": 2,
        "production_per_cycle": 5000,
        "survival_rate": 80,
        "selling_price": 4,
        "loan_amount": 10000,
        "interest_rate": 0,
    }
    fields.update(overrides)
    return fields


def test_profitability_core_figures():
    result = ProfitabilityCalculator().calculate(_profit_fields())
    assert result["capital_costs"]["total"] == 20000
    assert result["operating_costs"]["total"] == 6000
    assert result["revenue"]["per_cycle"] == pytest.approx(16000)
    assert result["revenue"]["annual"] == pytest.approx(32000)

    p = result["profitability"]
    assert p["annual_loan_payment"] == pytest.approx(2000)  # straight-line at 0%
    assert p["gross_profit"] == pytest.approx(20000)
    assert p["net_profit"] == pytest.approx(18000)
    assert p["roi"] == pytest.approx(60)
    assert p["payback_period"] == pytest.approx(30000 / 18000)
    assert p["break_even_point"] == pytest.approx(6000 / 2.8)
    assert result["recommendations"] == []


def test_profitability_cash_flow_harvest_months():
    result = ProfitabilityCalculator().calculate(_profit_fields(cycles_per_year=3))
    flow = result["cash_flow"]
    assert len(flow) == 12
    harvest_months = [m["month"] for m in flow if m["income"] > 0]
    assert harvest_months == ["Jan", "May", "Sep"]
    assert flow[1]["expenses"] == pytest.approx(2000 / 12)


def test_profitability_loan_annuity():
    assert annual_loan_payment(10000, 0.1) == pytest.approx(2637.97, rel=1e-5)
    assert annual_loan_payment(10000, 0) == pytest.approx(2000)
    assert annual_loan_payment(0, 0.1) == 0.0


def test_profitability_loss_has_no_payback():
    result = ProfitabilityCalculator().calculate(_profit_fields(selling_price=1))
    assert result["profitability"]["net_profit"] < 0
    assert result["profitability"]["payback_period"] is None
    assert "Look for opportunities to increase production efficiency" in result["recommendations"]
    assert "Consider ways to reduce operating costs" in result["recommendations"]


def test_profitability_zero_investment_rejected():
    with pytest.raises(CalculationError):
        ProfitabilityCalculator().calculate(_profit_fields(
            pond_construction=0, equipment=0, infrastructure=0, permits=0, loan_amount=0,
        ))


def test_profitability_cash_flow_uneven_cycles_books_full_year():
    """Five cycles a year do not divide twelve months; the year still adds up."""
    result = ProfitabilityCalculator().calculate(_profit_fields(cycles_per_year=5))
    flow = result["cash_flow"]
    harvest_months = [m["month"] for m in flow if m["income"] > 0]
    # int(k * 2.4) for k = 0..4
    assert harvest_months == ["Jan", "Mar", "May", "Aug", "Oct"]
    assert sum(m["income"] for m in flow) == pytest.approx(result["revenue"]["annual"])
    loan = result["profitability"]["annual_loan_payment"]
    assert sum(m["expenses"] for m in flow) == pytest.approx(
        result["operating_costs"]["total"] * 5 + loan
    )
