"""
Species suitability.

Each candidate species is scored out of 100 against the site's temperature and
pH ranges, oxygen, depth, the farmer's experience and their growth, disease
resistance and market preferences. Species scoring 60 or more are recommended.
"""

from .base import BaseCalculator, CalculationError
from ..models import Category

SPECIES_DATA = [
    {
        "name": "Tilapia",
        "scientific_name": "Oreochromis niloticus",
        "temperature_range": (24, 32),
        "ph_range": (6.0, 8.5),
        "min_oxygen": 4,
        "min_depth": 1,
        "growth_rate": 4.5,
        "disease_resistance": 4,
        "market_value": 3,
        "difficulty": 2,
        "regulations": [
            "Common aquaculture species in most regions",
            "May require permits for commercial farming",
            "Some restrictions on non-native species",
        ],
        "characteristics": [
            "Hardy and adaptable",
            "Fast growth rate",
            "Efficient feed conversion",
            "Tolerant of poor water quality",
        ],
        "care": [
            "Regular water quality monitoring",
            "Maintain water temperature above 24°C",
            "Feed 2-3 times daily",
            "Stock at appropriate density",
        ],
        "market_trends": {
            "demand": "High",
            "price_range": "$2-4/kg",
            "seasonality": "Year-round demand",
        },
    },
    {
        "name": "Rainbow Trout",
        "scientific_name": "Oncorhynchus mykiss",
        "temperature_range": (10, 18),
        "ph_range": (6.5, 8.0),
        "min_oxygen": 6,
        "min_depth": 1.5,
        "growth_rate": 3.5,
        "disease_resistance": 3,
        "market_value": 4,
        "difficulty": 4,
        "regulations": [
            "Strict environmental regulations",
            "Water discharge permits required",
            "Regular health inspections mandatory",
        ],
        "characteristics": [
            "Cold water species",
            "High protein requirement",
            "Sensitive to water quality",
            "Premium market value",
        ],
        "care": [
            "Maintain high oxygen levels",
            "Regular water quality testing",
            "Temperature control essential",
            "High-quality feed required",
        ],
        "market_trends": {
            "demand": "High",
            "price_range": "$6-10/kg",
            "seasonality": "Peak demand in winter",
        },
    },
]

EXPERIENCE_LEVELS = {"beginner": 1, "intermediate": 2, "advanced": 3}

MIN_RECOMMENDED_SCORE = 60


def _preference_points(preference, value):
    """high/medium/low preference against a 1-5 species rating."""
    if preference == "high" and value >= 4:
        return 10
    if preference == "medium" and value >= 3:
        return 8
    if preference == "low":
        return 6
    return 0


class SpeciesSuitabilityCalculator(BaseCalculator):

    SLUG = "species_suitability"
    TITLE = "Species Suitability"
    CATEGORY = Category.FISH
    PATH = "/species-suitability"
    DESCRIPTION = "Ranks candidate species for a site and a farmer's preferences."

    def calculate(self, fields: dict) -> dict:
        site = {
            "temp_min": self.optional_number(fields, "temperature_min", 20.0),
            "temp_max": self.optional_number(fields, "temperature_max", 30.0),
            "ph_min": self.optional_number(fields, "ph_min", 6.5, minimum=0, maximum=14),
            "ph_max": self.optional_number(fields, "ph_max", 8.5, minimum=0, maximum=14),
            "oxygen": self.optional_number(fields, "dissolved_oxygen", 5.0, minimum=0),
            "depth": self.optional_number(fields, "water_depth", 2.0, minimum=0),
        }
        if site["temp_min"] > site["temp_max"]:
            raise CalculationError(
                "temperature_min must not exceed temperature_max", field="temperature_min"
            )
        if site["ph_min"] > site["ph_max"]:
            raise CalculationError("ph_min must not exceed ph_max", field="ph_min")

        preferences = {
            "experience": str(fields.get("experience") or "").strip().lower(),
            "growth_rate": str(fields.get("growth_rate") or "").strip().lower(),
            "disease_resistance": str(fields.get("disease_resistance") or "").strip().lower(),
            "market_preference": str(fields.get("market_preference") or "").strip().lower(),
        }

        scores = {s["name"]: self.score_species(s, site, preferences) for s in SPECIES_DATA}
        ranked = sorted(SPECIES_DATA, key=lambda s: scores[s["name"]], reverse=True)
        recommended = [
            {
                "name": s["name"],
                "scientific_name": s["scientific_name"],
                "score": scores[s["name"]],
                "regulations": list(s["regulations"]),
                "characteristics": list(s["characteristics"]),
                "care": list(s["care"]),
                "market_trends": dict(s["market_trends"]),
            }
            for s in ranked
            if scores[s["name"]] >= MIN_RECOMMENDED_SCORE
        ]

        return {"recommended_species": recommended, "scores": scores}

    def score_species(self, species: dict, site: dict, preferences: dict) -> int:
        score = 0
        t_low, t_high = species["temperature_range"]
        if site["temp_min"] >= t_low and site["temp_max"] <= t_high:
            score += 20
        ph_low, ph_high = species["ph_range"]
        if site["ph_min"] >= ph_low and site["ph_max"] <= ph_high:
            score += 15
        if site["oxygen"] >= species["min_oxygen"]:
            score += 15
        if site["depth"] >= species["min_depth"]:
            score += 10

        experience = EXPERIENCE_LEVELS.get(preferences["experience"], 2)
        score += max(0, 10 - abs(experience - species["difficulty"]) * 3)

        growth = preferences["growth_rate"]
        if growth == "fast" and species["growth_rate"] >= 4:
            score += 10
        elif growth == "medium" and species["growth_rate"] >= 3:
            score += 8
        elif growth == "slow":
            score += 6

        score += _preference_points(preferences["disease_resistance"], species["disease_resistance"])
        score += _preference_points(preferences["market_preference"], species["market_value"])
        return score
