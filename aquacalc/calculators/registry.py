"""
Calculator registry: maps calculator slugs to calculator classes.

The registry doubles as the tool catalog: each class carries its title,
category and legacy page path.
"""

import logging

from .base import BaseCalculator
from .aeration import AerationCalculator
from .disease_prevention import DiseasePreventionCalculator
from .disease_risk import DiseaseRiskCalculator
from .energy_efficiency import EnergyEfficiencyCalculator
from .environmental_monitor import EnvironmentalMonitorCalculator
from .fcr import FcrCalculator
from .fcr_optimizer import FcrOptimizerCalculator
from .feed_management import FeedManagementCalculator
from .feeding import FeedingCalculator
from .fish_production import FishProductionCalculator
from .fish_stocking import FishStockingCalculator
from .fish_stress import FishStressCalculator
from .fish_yield import FishYieldCalculator
from .growth_benchmark import GrowthBenchmarkCalculator
from .growth_predictor import GrowthPredictorCalculator
from .growth_tracker import GrowthTrackerCalculator
from .harvest_timing import HarvestTimingCalculator
from .inventory import InventoryCalculator
from .market_analysis import MarketAnalysisCalculator
from .pond_evaporation import PondEvaporationCalculator
from .pond_liming import PondLimingCalculator
from .pond_lining import PondLiningCalculator
from .pond_sediment import PondSedimentCalculator
from .profitability import ProfitabilityCalculator
from .species_suitability import SpeciesSuitabilityCalculator
from .waste_fertilizer import WasteFertilizerCalculator
from .water_quality import WaterQualityCalculator
from .water_quality_monitor import WaterQualityMonitorCalculator
from .water_quality_predictor import WaterQualityPredictorCalculator
from .weather_impact import WeatherImpactCalculator

logger = logging.getLogger(__name__)

CALCULATOR_REGISTRY: dict[str, type] = {
    # Water management
    "water_quality": WaterQualityCalculator,
    "water_quality_monitor": WaterQualityMonitorCalculator,
    "water_quality_predictor": WaterQualityPredictorCalculator,
    "pond_evaporation": PondEvaporationCalculator,
    "pond_liming": PondLimingCalculator,
    "pond_lining": PondLiningCalculator,
    "pond_sediment": PondSedimentCalculator,
    # Fish management
    "fish_production": FishProductionCalculator,
    "fish_stocking": FishStockingCalculator,
    "fish_yield": FishYieldCalculator,
    "fish_stress": FishStressCalculator,
    "growth_tracker": GrowthTrackerCalculator,
    "growth_predictor": GrowthPredictorCalculator,
    "growth_benchmark": GrowthBenchmarkCalculator,
    "harvest_timing": HarvestTimingCalculator,
    "species_suitability": SpeciesSuitabilityCalculator,
    # Feed management
    "feeding": FeedingCalculator,
    "fcr": FcrCalculator,
    "fcr_optimizer": FcrOptimizerCalculator,
    "feed_management": FeedManagementCalculator,
    # Health management
    "disease_prevention": DiseasePreventionCalculator,
    "disease_risk": DiseaseRiskCalculator,
    "waste_fertilizer": WasteFertilizerCalculator,
    # Environment
    "aeration": AerationCalculator,
    "environmental_monitor": EnvironmentalMonitorCalculator,
    "energy_efficiency": EnergyEfficiencyCalculator,
    "weather_impact": WeatherImpactCalculator,
    # Business tools
    "market_analysis": MarketAnalysisCalculator,
    "profitability": ProfitabilityCalculator,
    "inventory": InventoryCalculator,
}


def get_calculator(slug: str) -> BaseCalculator:
    """Returns an instance of the calculator for a slug, or raises ValueError."""
    if slug not in CALCULATOR_REGISTRY:
        logger.warning(f"Calculator lookup miss: {slug}")
        raise ValueError(
            f"No calculator registered for slug: {slug}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[slug]()


def has_calculator(slug: str) -> bool:
    """Check if a calculator exists for a slug."""
    return slug in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered calculator slugs."""
    return list(CALCULATOR_REGISTRY.keys())


def catalog_entry(slug: str) -> dict:
    """Catalog metadata for one calculator. Raises ValueError for unknown slugs."""
    if slug not in CALCULATOR_REGISTRY:
        raise ValueError(f"No calculator registered for slug: {slug}")
    cls = CALCULATOR_REGISTRY[slug]
    return {
        "slug": slug,
        "title": cls.TITLE,
        "category": cls.CATEGORY,
        "path": cls.PATH,
        "description": cls.DESCRIPTION,
    }


def catalog() -> list[dict]:
    """The full tool catalog, in navigation order."""
    return [catalog_entry(slug) for slug in CALCULATOR_REGISTRY]
