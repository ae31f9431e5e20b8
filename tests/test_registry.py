"""
Calculator registry and tool catalog.

Tests:
1-3. Registry lookups
4-6. Catalog metadata
"""

import pytest

from aquacalc.calculators.base import BaseCalculator
from aquacalc.calculators.registry import (
    CALCULATOR_REGISTRY,
    catalog,
    catalog_entry,
    get_calculator,
    has_calculator,
    list_calculators,
)
from aquacalc.models import Category


# ============================================================
# Registry lookups
# ============================================================

def test_registry_has_all_calculators():
    """All 30 calculators are registered."""
    assert len(list_calculators()) == 30
    for slug in ["fcr", "feeding", "water_quality", "pond_sediment", "disease_risk",
                 "energy_efficiency", "profitability", "harvest_timing",
                 "disease_prevention", "environmental_monitor", "growth_tracker",
                 "feed_management", "market_analysis", "inventory"]:
        assert has_calculator(slug), f"{slug} not in registry"


def test_get_calculator_returns_fresh_instances():
    first = get_calculator("fcr")
    second = get_calculator("fcr")
    assert isinstance(first, BaseCalculator)
    assert first is not second


def test_get_calculator_unknown_slug():
    with pytest.raises(ValueError, match="No calculator registered"):
        get_calculator("salmon_counter")
    assert not has_calculator("salmon_counter")


# ============================================================
# Catalog metadata
# ============================================================

def test_every_calculator_has_catalog_metadata():
    for slug, cls in CALCULATOR_REGISTRY.items():
        assert cls.SLUG == slug
        assert cls.TITLE
        assert isinstance(cls.CATEGORY, Category)
        assert cls.PATH.startswith("/")


def test_catalog_paths_are_unique():
    paths = [entry["path"] for entry in catalog()]
    assert len(paths) == len(set(paths))


def test_catalog_entry_contents():
    entry = catalog_entry("pond_sediment")
    assert entry["title"] == "Pond Sediment Manager"
    assert entry["category"] == Category.WATER
    assert entry["path"] == "/pond-sediment"
    with pytest.raises(ValueError):
        catalog_entry("nope")
