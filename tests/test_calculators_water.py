"""
Water management calculators.

Tests:
1-4.   Water quality (species ranges)
5-7.   Water quality monitor
8-11.  Water quality predictor
12-13. Pond evaporation
14-16. Pond liming
17-18. Pond lining
19-22. Pond sediment
"""

import pytest

from aquacalc.calculators.base import CalculationError
from aquacalc.calculators.pond_evaporation import PondEvaporationCalculator
from aquacalc.calculators.pond_liming import PondLimingCalculator
from aquacalc.calculators.pond_lining import PondLiningCalculator
from aquacalc.calculators.pond_sediment import PondSedimentCalculator
from aquacalc.calculators.water_quality import SPECIES_PARAMETERS, WaterQualityCalculator, classify
from aquacalc.calculators.water_quality_monitor import WaterQualityMonitorCalculator
from aquacalc.calculators.water_quality_predictor import (
    HOURS,
    WaterQualityPredictorCalculator,
    risk_level,
    trend,
)


# ============================================================
# Water quality
# ============================================================

GOOD_TILAPIA_WATER = {
    "species": "tilapia",
    "temperature": 28,
    "dissolved_oxygen": 6,
    "ph": 7.5,
    "ammonia": 0.2,
    "nitrite": 0.1,
    "nitrate": 20,
    "alkalinity": 120,
    "hardness": 120,
    "turbidity": 10,
}


def test_water_quality_all_optimal():
    result = WaterQualityCalculator().calculate(GOOD_TILAPIA_WATER)
    assert all(p["status"] == "success" for p in result["parameters"].values())
    assert result["recommendations"] == ["All parameters are within optimal ranges"]


def test_water_quality_low_and_high_readings():
    """A warning-band low and an out-of-range high each get a recommendation."""
    fields = dict(GOOD_TILAPIA_WATER, dissolved_oxygen=4, ammonia=3)
    result = WaterQualityCalculator().calculate(fields)
    assert result["parameters"]["dissolved_oxygen"]["status"] == "warning"
    assert result["parameters"]["ammonia"]["status"] == "error"
    assert "dissolved_oxygen is too low. Increase to 5-7 mg/L" in result["recommendations"]
    assert "ammonia is too high. Decrease to 0-0.5 mg/L" in result["recommendations"]


def test_water_quality_blank_reading_rejected():
    """Every reading is required; a blank no longer counts as zero."""
    with pytest.raises(CalculationError) as exc:
        WaterQualityCalculator().calculate(dict(GOOD_TILAPIA_WATER, turbidity=""))
    assert exc.value.field == "turbidity"


def test_classify_band_edges():
    ranges = SPECIES_PARAMETERS["carp"]["ph"]  # (6.5, 9, pH, 7, 8.5)
    assert classify(7, ranges) == "success"
    assert classify(8.5, ranges) == "success"
    assert classify(6.5, ranges) == "warning"
    assert classify(9.1, ranges) == "error"


# ============================================================
# Water quality monitor
# ============================================================

def test_monitor_skips_blank_readings():
    result = WaterQualityMonitorCalculator().calculate({
        "dissolved_oxygen": 6,
        "temperature": "",
        "ph": 7.2,
    })
    assert [a["key"] for a in result["analysis"]] == ["dissolved_oxygen", "ph"]
    assert result["overall_status"] == "Optimal"
    assert result["critical_count"] == 0


def test_monitor_worst_status_wins():
    result = WaterQualityMonitorCalculator().calculate({
        "dissolved_oxygen": 4,     # Warning
        "ammonia": 3,              # Critical
        "carbon_dioxide": 5,       # Optimal
    })
    assert result["overall_status"] == "Critical"
    assert result["critical_count"] == 1
    assert result["warning_count"] == 1
    analysis = {a["key"]: a for a in result["analysis"]}
    assert analysis["carbon_dioxide"]["unit"] == "mg/L"
    assert analysis["ammonia"]["recommendations"][0] == "Reduce feeding if levels are high"


def test_monitor_requires_one_reading():
    with pytest.raises(CalculationError):
        WaterQualityMonitorCalculator().calculate({"ph": "", "temperature": None})


# ============================================================
# Water quality predictor
# ============================================================

PREDICTOR_FIELDS = {
    "species": "tilapia",
    "temperature": 28.01,
    "dissolved_oxygen": 6,
    "ph": 7.5,
    "ammonia": 0.3,
    "feeding_rate": 2,
    "stocking_density": 5,
    "water_exchange_rate": 4,
}


def test_predictor_series_and_summaries():
    result = WaterQualityPredictorCalculator().calculate(PREDICTOR_FIELDS)
    assert len(result["hourly"]) == HOURS
    assert result["hourly"][0]["time"] == "0h"

    summary = {p["parameter"]: p for p in result["predictions"]}
    # hour 47 is night: base 4.799 - 0.3
    assert summary["Dissolved Oxygen"]["predicted"] == 4.5
    assert summary["Dissolved Oxygen"]["trend"] == "decreasing"
    assert summary["Dissolved Oxygen"]["risk"] == "medium"
    assert summary["Dissolved Oxygen"]["recommendations"][0] == "Increase aeration"

    assert summary["pH"]["predicted"] == 7.4
    assert summary["pH"]["risk"] == "low"

    assert summary["Ammonia"]["predicted"] == 0.37
    assert summary["Ammonia"]["trend"] == "increasing"


def test_predictor_day_night_oxygen():
    result = WaterQualityPredictorCalculator().calculate(PREDICTOR_FIELDS)
    hourly = result["hourly"]
    assert hourly[12]["dissolved_oxygen"] == 5.3  # daytime
    assert hourly[2]["dissolved_oxygen"] == 4.5   # night


def test_predictor_is_deterministic():
    first = WaterQualityPredictorCalculator().calculate(PREDICTOR_FIELDS)
    second = WaterQualityPredictorCalculator().calculate(PREDICTOR_FIELDS)
    assert first == second


def test_risk_and_trend_helpers():
    assert risk_level(0, 0, 0.5, 1) == "high"
    assert risk_level(1.2, 0, 0.5, 1) == "high"
    assert risk_level(0.3, 0, 0.5, 1) == "medium"
    assert risk_level(0.7, 0, 0.5, 1) == "low"
    assert trend(5, 6) == "increasing"
    assert trend(6, 5) == "decreasing"
    assert trend(5, 5) == "stable"


# ============================================================
# Pond evaporation
# ============================================================

def test_evaporation_mild_conditions():
    result = PondEvaporationCalculator().calculate({
        "pond_length": 10,
        "pond_width": 10,
        "water_temperature": 25,
        "air_temperature": 25,
        "humidity": 50,
        "wind_speed": 0,
        "sunlight_hours": 0,
        "cloud_cover": "Clear",
        "season": "Spring",
    })
    # 0.1 cm x (1 - 50/200)
    assert result["evaporation_rate_cm"] == pytest.approx(0.075)
    assert result["surface_area"] == 100
    assert result["daily_evaporation"] == pytest.approx(0.075)
    assert result["monthly_evaporation"] == pytest.approx(2.25)
    assert result["risk_level"] == "Low"
    assert len(result["recommendations"]) == 3


def test_evaporation_high_risk():
    result = PondEvaporationCalculator().calculate({
        "pond_length": 20,
        "pond_width": 10,
        "water_temperature": 45,
        "air_temperature": 25,
        "humidity": 0,
        "wind_speed": 50,
        "sunlight_hours": 12,
        "cloud_cover": "Clear",
        "season": "Summer",
    })
    # 0.1 x 2.0 x 2.0 x 1.0 x 1.25 x 1.2
    assert result["evaporation_rate_cm"] == pytest.approx(0.6)
    assert result["risk_level"] == "High"
    assert "Install windbreaks to reduce evaporation" in result["recommendations"]
    assert len(result["recommendations"]) == 8


# ============================================================
# Pond liming
# ============================================================

def _liming_fields(**overrides):
    fields = {
        "pond_area": 1,
        "pond_depth": 1.5,
        "current_ph": 6,
        "target_ph": 7,
        "alkalinity": 100,
        "soil_type": "loamy",
        "water_source": "surface",
        "lime_type": "agricultural",
    }
    fields.update(overrides)
    return fields


def test_liming_agricultural_limestone():
    result = PondLimingCalculator().calculate(_liming_fields())
    assert result["pond_volume"] == pytest.approx(1.5)
    assert result["lime_required"] == pytest.approx(1000)
    assert result["cost"] == pytest.approx(30)
    assert result["application_rate"] == pytest.approx(0.1)
    assert result["recommendations"][0] == "Apply 1000.00 kg of Agricultural Limestone total."
    assert "This lime type dissolves slowly. Consider multiple smaller applications." in result["recommendations"]


def test_liming_adjustments_stack():
    """Clay soil, low alkalinity and rainwater all raise the dose; quicklime lowers it."""
    result = PondLimingCalculator().calculate(_liming_fields(
        current_ph=5, target_ph=8, alkalinity=40, soil_type="clayey",
        water_source="rainwater", lime_type="quicklime",
    ))
    # 3 x 1000 x 1.5 x 1.3 x 1.2 / 1.79
    assert result["lime_required"] == pytest.approx(7020 / 1.79)
    assert result["cost"] == pytest.approx(7020 / 1.79 * 60 / 1000)
    assert result["recommendations"][-1].startswith("Large pH adjustment needed")


def test_liming_target_must_be_higher():
    with pytest.raises(CalculationError) as exc:
        PondLimingCalculator().calculate(_liming_fields(target_ph=6))
    assert exc.value.field == "target_ph"


# ============================================================
# Pond lining
# ============================================================

def test_lining_area_and_costs():
    result = PondLiningCalculator().calculate({
        "length": 10,
        "width": 10,
        "depth": 1,
        "material_type": "hdpe",
        "labor_cost_per_day": 100,
        "estimated_days": 5,
        "additional_costs": 200,
    })
    # bottom 100 + 2 x 14 + 2 x 14
    assert result["liner_area"] == pytest.approx(156)
    assert result["total_area"] == pytest.approx(171.6)
    assert result["material_cost"] == pytest.approx(1372.8)
    assert result["labor_cost"] == pytest.approx(500)
    assert result["total_cost"] == pytest.approx(2072.8)
    assert result["annual_cost"] == pytest.approx(2072.8 / 15)
    assert result["recommendations"] == ["Expected lifespan: 15 years with proper maintenance"]
    assert len(result["installation_steps"]) == 7


def test_lining_complex_material():
    result = PondLiningCalculator().calculate({
        "length": 40, "width": 30, "depth": 3.5, "material_type": "geomembrane",
    })
    assert "Ensure installers are certified for this material" in result["recommendations"]
    assert "Use reinforced material at deeper sections" in result["recommendations"]
    assert "Consider hiring professional installation team" in result["recommendations"]
    assert result["installation_steps"][-1] == "Professional certification inspection"


# ============================================================
# Pond sediment
# ============================================================

def test_sediment_heavy_accumulation():
    result = PondSedimentCalculator().calculate({
        "pond_area": 1000,
        "pond_depth": 1.5,
        "sediment_depth": 0.6,
        "sediment_type": "loamy",
        "organic_content": 50,
    })
    assert result["total_volume"] == pytest.approx(600)
    assert result["depth_ratio"] == pytest.approx(0.4)
    assert result["removal_required"] is True
    assert result["disposal_method"] == "composting"
    assert result["nutrient_content"]["organic_matter"] == pytest.approx(240)
    assert result["nutrient_content"]["nitrogen"] == pytest.approx(12)
    assert result["estimated_cost"] == pytest.approx(15000)
    assert result["timeline"] == "Immediate removal required"
    assert len(result["recommendations"]) == 3


def test_sediment_light_accumulation():
    result = PondSedimentCalculator().calculate({
        "pond_area": 1000,
        "pond_depth": 2,
        "sediment_depth": 0.1,
        "sediment_type": "sandy",
        "organic_content": 5,
        "last_cleaned": 1,
        "water_exchange_rate": 15,
    })
    assert result["removal_required"] is False
    assert result["disposal_method"] == "land_reclamation"
    assert result["timeline"] == "Monitor and reassess in 6 months"
    assert result["recommendations"] == []


def test_sediment_overdue_cleaning_requires_removal():
    result = PondSedimentCalculator().calculate({
        "pond_area": 1000, "pond_depth": 2, "sediment_depth": 0.1,
        "sediment_type": "sandy", "organic_content": 5, "last_cleaned": 3,
    })
    assert result["removal_required"] is True


@pytest.mark.parametrize("ratio,expected", [
    (0.35, "Immediate removal required"),
    (0.2, "Annual removal recommended"),
    (0.05, "Monitor and reassess in 6 months"),
])
def test_sediment_timeline(ratio, expected):
    assert PondSedimentCalculator.timeline(ratio) == expected
