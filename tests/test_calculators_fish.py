"""
Fish management calculators.

Tests:
1-3.   Fish stocking
4-5.   Fish production
6-8.   Fish yield
9-14.  Fish stress
15-16. Growth predictor
17-19. Growth benchmark
20-22. Harvest timing
23-25. Species suitability
"""

import pytest

from aquacalc.calculators.base import CalculationError
from aquacalc.calculators.fish_production import FishProductionCalculator
from aquacalc.calculators.fish_stocking import FishStockingCalculator
from aquacalc.calculators.fish_stress import BEHAVIOR_SEVERITY, FishStressCalculator
from aquacalc.calculators.fish_yield import FishYieldCalculator
from aquacalc.calculators.growth_benchmark import GrowthBenchmarkCalculator
from aquacalc.calculators.growth_predictor import GrowthPredictorCalculator
from aquacalc.calculators.harvest_timing import HarvestTimingCalculator
from aquacalc.calculators.species_suitability import SpeciesSuitabilityCalculator


# ============================================================
# Fish stocking
# ============================================================

def _stocking_fields(**overrides):
    fields = {
        "species": "Tilapia",
        "pond_length": 10,
        "pond_width": 10,
        "pond_depth": 1,
        "target_size": 500,
        "survival_rate": 50,
        "water_exchange": 12,
        "aeration_system": "No Aeration",
        "feeding_strategy": "Intensive (3-4 times/day)",
    }
    fields.update(overrides)
    return fields


def test_stocking_without_aeration():
    """No aeration derates the species maximum density to 60%."""
    result = FishStockingCalculator().calculate(_stocking_fields())
    assert result["pond_volume"] == 100
    assert result["stocking_density"] == pytest.approx(3.0)
    # 100 m3 * 3 kg/m3 / 0.5 kg / 0.5 survival
    assert result["total_fish"] == 1200
    assert result["expected_production"] == pytest.approx(300.0)
    assert result["aeration_requirement"] == pytest.approx(1.2)
    assert result["daily_feed"] == pytest.approx(15.0)  # intensive: 5%
    assert result["risk_factors"] == ["Limited aeration may restrict growth and survival"]
    assert "Consider adding supplemental aeration" in result["recommendations"]


def test_stocking_semi_intensive_low_exchange():
    """Low exchange derates density; semi-intensive feeds at 3%."""
    result = FishStockingCalculator().calculate(_stocking_fields(
        aeration_system="Paddle Wheel",
        water_exchange=3,
        feeding_strategy="Semi-intensive (2 times/day)",
    ))
    assert result["stocking_density"] == pytest.approx(3.5)  # 5 * 0.7
    assert result["daily_feed"] == pytest.approx(result["expected_production"] * 0.03)
    assert result["risk_factors"] == ["Low water exchange rate increases water quality risks"]
    assert result["water_management"][2] == "Maintain water exchange rate of 3% daily"


def test_stocking_unknown_aeration():
    with pytest.raises(CalculationError) as exc:
        FishStockingCalculator().calculate(_stocking_fields(aeration_system="Windmill"))
    assert exc.value.field == "aeration_system"


# ============================================================
# Fish production
# ============================================================

def test_production_cycle_economics():
    """Fingerling count, cycle length and economics for a 1000 m3 tilapia pond."""
    result = FishProductionCalculator().calculate({
        "species": "tilapia",
        "pond_area": 1000,
        "pond_depth": 1,
        "stocking_density": 2,
        "initial_weight": 125,
        "target_weight": 500,
        "growth_rate": 2.5,
        "survival_rate": 50,
        "water_exchange": 10,
    })
    assert result["stocking_number"] == 16000
    assert result["initial_biomass"] == pytest.approx(2000)
    assert result["final_biomass"] == pytest.approx(4000)
    assert result["production_cycle_days"] == 150
    assert result["feed_required"] == pytest.approx(3200)
    assert result["water_required"] == pytest.approx(15000)

    econ = result["economics"]
    assert econ["feed_cost"] == pytest.approx(3840)
    assert econ["seed_cost"] == pytest.approx(1600)
    assert econ["operating_cost"] == pytest.approx(1632)
    assert econ["total_cost"] == pytest.approx(7072)
    assert econ["revenue"] == pytest.approx(14000)
    assert econ["profit"] == pytest.approx(6928)


def test_production_target_must_exceed_initial():
    with pytest.raises(CalculationError) as exc:
        FishProductionCalculator().calculate({
            "species": "carp", "pond_area": 100, "pond_depth": 1, "stocking_density": 2,
            "initial_weight": 500, "target_weight": 400, "growth_rate": 2, "survival_rate": 80,
        })
    assert exc.value.field == "target_weight"


# ============================================================
# Fish yield
# ============================================================

def _yield_fields(**overrides):
    fields = {
        "species": "Tilapia",
        "initial_stock": 1000,
        "initial_weight": 0,
        "culture_period": 100,
        "mortality_rate": 20,
        "fcr": 1.5,
        "water_quality": "Good",
        "season": "Spring",
        "management_level": "Semi-intensive",
    }
    fields.update(overrides)
    return fields


def test_yield_neutral_conditions():
    """Neutral modifiers: 2.5 g/day for 100 days, 80% survival."""
    result = FishYieldCalculator().calculate(_yield_fields())
    assert result["growth_modifier"] == pytest.approx(1.0)
    assert result["final_weight"] == pytest.approx(250)
    assert result["survival_rate"] == pytest.approx(80)
    assert result["expected_yield"] == pytest.approx(200)
    assert result["feed_required"] == pytest.approx(300)
    assert result["feed_efficiency"] == pytest.approx(66.6667, rel=1e-4)
    assert result["economics"]["profit_margin"] == pytest.approx(25)
    assert result["recommendations"] == []
    assert result["risk_factors"] == []


def test_yield_capped_at_species_max():
    result = FishYieldCalculator().calculate(_yield_fields(
        species="Catfish", initial_weight=1000, culture_period=200,
        water_quality="Excellent", season="Summer", management_level="Intensive",
    ))
    assert result["growth_modifier"] == pytest.approx(1.584)
    assert result["final_weight"] == 1200


def test_yield_poor_conditions_flagged():
    result = FishYieldCalculator().calculate(_yield_fields(
        water_quality="Poor", season="Winter", management_level="Extensive",
        mortality_rate=30, fcr=2.5,
    ))
    assert result["growth_modifier"] == pytest.approx(0.384)
    assert "Improve culture conditions to enhance growth rate" in result["recommendations"]
    assert len(result["risk_factors"]) == 3


# ============================================================
# Fish stress
# ============================================================

def _stress_fields(**overrides):
    fields = {
        "species": "tilapia",
        "temperature": 28,
        "dissolved_oxygen": 5,
        "ph": 7.5,
        "ammonia": 0,
        "nitrite": 0,
        "feeding_response": "normal",
    }
    fields.update(overrides)
    return fields


def test_stress_ideal_conditions_low():
    """Every reading at the species optimum scores 1.0 across the board."""
    result = FishStressCalculator().calculate(_stress_fields())
    assert result["overall_score"] == pytest.approx(1.0)
    assert result["stress_level"] == "Low"
    assert result["primary_causes"] == []
    assert result["immediate_actions"] == []
    assert result["economic_impact"]["treatment_cost"] == 50


def test_stress_severe_conditions_high():
    """Hot, low-oxygen water, every behaviour and no feeding is High stress."""
    result = FishStressCalculator().calculate(_stress_fields(
        temperature=35,
        dissolved_oxygen=2,
        ammonia=0.5,
        nitrite=0.3,
        behaviors=["gasping", "erratic", "lethargy", "crowding", "rubbing",
                   "color", "isolation", "aggression", "flashing", "clamped"],
        feeding_response="none",
        stocking_density=60,
        water_flow=0.5,
        turbidity=60,
    ))
    scores = result["scores"]
    assert scores["water_quality"] == pytest.approx(0.0)
    assert scores["behavior"] == pytest.approx(1 / 3)
    assert scores["feeding"] == pytest.approx(0.0)
    assert scores["environment"] == pytest.approx(0.2)
    assert result["overall_score"] == pytest.approx(0.14)
    assert result["stress_level"] == "High"
    assert len(result["primary_causes"]) == 5
    assert "Perform emergency water exchange" in result["immediate_actions"]


TROUT_BAD_WATER = {
    "species": "trout",
    "temperature": 30,
    "dissolved_oxygen": 2,
    "ph": 9.5,
    "ammonia": 1,
    "nitrite": 0.5,
    "feeding_response": "normal",
}


def test_stress_immediate_action_follows_water_score():
    """Collapsed water quality alone calls for a water exchange, even at Low overall stress."""
    result = FishStressCalculator().calculate(TROUT_BAD_WATER)
    scores = result["scores"]
    assert scores["water_quality"] == pytest.approx(0.0)
    assert scores["environment"] == pytest.approx(1.0)
    assert result["overall_score"] == pytest.approx(0.8)
    assert result["stress_level"] == "Low"
    assert result["immediate_actions"] == ["Perform emergency water exchange"]


def test_stress_immediate_actions_per_factor():
    """A healthy environment score never triggers the aeration action."""
    result = FishStressCalculator().calculate(dict(
        TROUT_BAD_WATER,
        behaviors=list(BEHAVIOR_SEVERITY),
        feeding_response="none",
    ))
    scores = result["scores"]
    assert scores["behavior"] == pytest.approx(1 / 3)
    assert scores["feeding"] == pytest.approx(0.0)
    assert scores["environment"] == pytest.approx(1.0)
    assert result["immediate_actions"] == [
        "Perform emergency water exchange",
        "Isolate affected fish if possible",
        "Temporarily reduce feeding rate",
    ]


def test_stress_behaviors_from_comma_string():
    result = FishStressCalculator().calculate(_stress_fields(behaviors="gasping, lethargy"))
    assert result["scores"]["behavior"] == pytest.approx(0.8)


@pytest.mark.parametrize("score,level", [
    (0.71, "Low"),
    (0.7, "Moderate"),
    (0.41, "Moderate"),
    (0.4, "High"),
    (0.0, "High"),
])
def test_stress_level_bands(score, level):
    assert FishStressCalculator.stress_level(score) == level


# ============================================================
# Growth predictor
# ============================================================

def test_growth_predictor_optimal_conditions():
    """At optimum temperature and density, weight compounds by rate x 30 per month."""
    result = GrowthPredictorCalculator().calculate({
        "species": "Tilapia",
        "initial_weight": 10,
        "water_temperature": 28,
        "feeding_rate": 3,
        "culture_period": 60,
    })
    assert result["efficiency_score"] == pytest.approx(100)
    assert result["daily_growth_rate"] == pytest.approx(0.00105)
    projections = result["growth_projections"]
    assert [p["month"] for p in projections] == [0, 1, 2]
    assert projections[0]["weight"] == 10
    # daily rate 0.00105 / 1.6 -> x 1.0196875 per month
    assert result["final_weight"] == pytest.approx(10 * 1.0196875 ** 2)
    assert result["total_biomass"] == pytest.approx(result["final_weight"] * 20)
    assert all(f["impact"] == "Optimal" for f in result["environmental_factors"])
    assert result["recommendations"] == []


def test_growth_predictor_off_optimum():
    result = GrowthPredictorCalculator().calculate({
        "species": "Tilapia",
        "initial_weight": 10,
        "water_temperature": 18,
        "feeding_rate": 5,
        "culture_period": 30,
        "stocking_density": 40,
        "fcr": 2.0,
        "feed_cost": 1.5,
    })
    # temp effect floors at 0.5, density effect 1 - 20/20*0.3 = 0.7
    assert result["efficiency_score"] == pytest.approx(35)
    assert len(result["recommendations"]) == 4
    assert result["feed_cost"] == pytest.approx(result["feed_consumption"] * 1.5)


# ============================================================
# Growth benchmark
# ============================================================

def _benchmark_fields(**overrides):
    fields = {
        "species": "Tilapia",
        "stocking_date": "2024-01-01",
        "as_of": "2024-04-10",
        "stocking_weight": 10,
        "current_weight": 360,
        "water_temperature": 28,
        "stocking_density": 30,
        "feed_type": "Commercial Pellets - Standard",
    }
    fields.update(overrides)
    return fields


def test_benchmark_on_target():
    """100 days at 3.5 g/day matches the tilapia base rate exactly."""
    result = GrowthBenchmarkCalculator().calculate(_benchmark_fields())
    assert result["days_since_stocking"] == 100
    assert result["actual_growth_rate"] == pytest.approx(3.5)
    assert result["expected_growth_rate"] == pytest.approx(3.5)
    assert result["performance_score"] == pytest.approx(100)
    assert result["status"] == "On Target"
    assert result["feed_efficiency"] == "Excellent"


def test_benchmark_below_target():
    result = GrowthBenchmarkCalculator().calculate(_benchmark_fields(current_weight=110))
    assert result["status"] == "Below Target"
    assert result["feed_efficiency"] == "Poor"
    assert "Check for signs of disease or stress" in result["recommendations"]


def test_benchmark_requires_elapsed_days():
    with pytest.raises(CalculationError) as exc:
        GrowthBenchmarkCalculator().calculate(_benchmark_fields(as_of="2024-01-01"))
    assert exc.value.field == "stocking_date"


# ============================================================
# Harvest timing
# ============================================================

def _harvest_fields(**overrides):
    fields = {
        "species": "tilapia",
        "current_weight": 200,
        "target_weight": 500,
        "growth_rate": 3,
        "market_price": 4,
        "production_costs": 1.5,
        "survival_rate": 90,
        "water_quality": "Good",
        "seasonal_pricing": "Normal",
        "as_of": "2024-01-01",
    }
    fields.update(overrides)
    return fields


def test_harvest_date_and_economics():
    result = HarvestTimingCalculator().calculate(_harvest_fields())
    assert result["days_to_harvest"] == 100
    assert result["optimal_harvest_date"] == "2024-04-10"
    assert result["confidence"] == "medium"
    assert result["economics"]["revenue"] == pytest.approx(1800)
    assert result["economics"]["cost"] == pytest.approx(150)
    assert result["economics"]["profit"] == pytest.approx(1650)
    assert result["recommendations"][-1] == "Optimal harvest window: 2024-04-10 (±10 days)"


def test_harvest_weekly_projection():
    """Weeks 1..ceil(days / 7), priced at the market price."""
    result = HarvestTimingCalculator().calculate(_harvest_fields())
    projection = result["growth_projection"]
    assert len(projection) == 15
    assert projection[0]["week"] == 1
    assert projection[0]["weight"] == pytest.approx(221)
    assert all(p["price"] == 4 for p in projection)


def test_harvest_off_season_poor_water():
    result = HarvestTimingCalculator().calculate(_harvest_fields(
        water_quality="Poor", seasonal_pricing="Off Season",
    ))
    assert result["confidence"] == "low"
    assert result["economics"]["revenue"] == pytest.approx(1440)
    factors = [r["factor"] for r in result["risk_factors"]]
    assert factors == ["Water Quality", "Market Timing"]
    assert "Consider partial harvesting strategy" in result["recommendations"]


# ============================================================
# Species suitability
# ============================================================

def test_suitability_default_site_scores():
    """Default site: tilapia misses the temperature points, trout misses most."""
    result = SpeciesSuitabilityCalculator().calculate({})
    assert result["scores"] == {"Tilapia": 50, "Rainbow Trout": 14}
    assert result["recommended_species"] == []


def test_suitability_recommends_tilapia():
    result = SpeciesSuitabilityCalculator().calculate({
        "temperature_min": 25,
        "temperature_max": 30,
        "ph_min": 7,
        "ph_max": 8,
        "dissolved_oxygen": 7,
        "water_depth": 2,
        "experience": "beginner",
        "growth_rate": "fast",
        "disease_resistance": "high",
        "market_preference": "medium",
    })
    assert result["scores"]["Tilapia"] == 95
    assert result["scores"]["Rainbow Trout"] == 49
    names = [s["name"] for s in result["recommended_species"]]
    assert names == ["Tilapia"]
    assert result["recommended_species"][0]["scientific_name"] == "Oreochromis niloticus"


def test_suitability_inverted_range_rejected():
    with pytest.raises(CalculationError):
        SpeciesSuitabilityCalculator().calculate({"temperature_min": 30, "temperature_max": 20})
