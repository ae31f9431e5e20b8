"""
Fish stress assessment.

Five sub-scores, each in [0, 1] where 1 is unstressed:
  water quality  - deviation of six parameters from the species optimum
  behaviour      - summed severity of observed behaviours
  feeding        - severity of the feeding response
  environment    - stocking density, water flow, turbidity
  physiological  - mean of behaviour and feeding
The overall score is their mean; > 0.7 is Low stress, > 0.4 Moderate,
anything else High.
"""

import logging

from .base import BaseCalculator
from ..models import Category

logger = logging.getLogger(__name__)

SPECIES_PARAMETERS = {
    "tilapia": {
        "description": "Hardy species with good stress tolerance",
        "temperature": (25, 32, 28),
        "dissolved_oxygen": (3, 8, 5),
        "ph": (6.5, 8.5, 7.5),
        "ammonia_max": 0.5,
        "nitrite_max": 0.3,
        "salinity": (0, 15, 0),
    },
    "carp": {
        "description": "Adaptable to various water conditions",
        "temperature": (20, 28, 25),
        "dissolved_oxygen": (4, 8, 6),
        "ph": (6.5, 8.5, 7.2),
        "ammonia_max": 0.4,
        "nitrite_max": 0.2,
        "salinity": (0, 5, 0),
    },
    "catfish": {
        "description": "Tolerant of poor water quality",
        "temperature": (24, 30, 27),
        "dissolved_oxygen": (3, 7, 5),
        "ph": (6, 8.5, 7),
        "ammonia_max": 0.5,
        "nitrite_max": 0.3,
        "salinity": (0, 8, 0),
    },
    "trout": {
        "description": "Sensitive to water quality changes",
        "temperature": (10, 20, 15),
        "dissolved_oxygen": (6, 10, 8),
        "ph": (6.5, 8.5, 7.5),
        "ammonia_max": 0.2,
        "nitrite_max": 0.1,
        "salinity": (0, 30, 0),
    },
}

# behaviour -> severity (1..3)
BEHAVIOR_SEVERITY = {
    "gasping": 3,
    "erratic": 2,
    "lethargy": 3,
    "crowding": 2,
    "rubbing": 2,
    "color": 2,
    "isolation": 1,
    "aggression": 1,
    "flashing": 2,
    "clamped": 2,
}

FEEDING_SEVERITY = {"normal": 0, "reduced": 2, "none": 3, "aggressive": 1}

ECONOMIC_IMPACT = {
    "High": {"growth_reduction": 0.3, "mortality_risk": 0.2, "treatment_cost": 500},
    "Moderate": {"growth_reduction": 0.15, "mortality_risk": 0.1, "treatment_cost": 200},
    "Low": {"growth_reduction": 0.05, "mortality_risk": 0.02, "treatment_cost": 50},
}

LONG_TERM_ACTIONS = [
    "Implement regular water quality monitoring schedule",
    "Develop emergency response protocols",
    "Train staff in stress recognition and management",
    "Upgrade water treatment systems if necessary",
    "Review and optimize feeding protocols",
]

MONITORING_PLAN = [
    "Daily water quality checks",
    "Twice daily behavior observations",
    "Weekly growth sampling",
    "Monthly health assessment",
    "Regular stress indicator monitoring",
]


class FishStressCalculator(BaseCalculator):

    SLUG = "fish_stress"
    TITLE = "Fish Stress Assessment"
    CATEGORY = Category.FISH
    PATH = "/fish-stress"
    DESCRIPTION = "Stress level from water quality, behaviour, feeding and environment."

    def calculate(self, fields: dict) -> dict:
        species_name = self.require_choice(fields, "species", SPECIES_PARAMETERS)
        params = SPECIES_PARAMETERS[species_name]

        readings = {
            "temperature": self.require_number(fields, "temperature"),
            "dissolved_oxygen": self.require_number(fields, "dissolved_oxygen", minimum=0),
            "ph": self.require_number(fields, "ph", minimum=0, maximum=14),
            "ammonia": self.require_number(fields, "ammonia", minimum=0),
            "nitrite": self.require_number(fields, "nitrite", minimum=0),
            "salinity": self.optional_number(fields, "salinity", 0.0, minimum=0),
        }
        behaviors = self.parse_list(fields.get("behaviors"))
        feeding_response = str(fields.get("feeding_response") or "").strip()
        density = self.optional_number(fields, "stocking_density", 0.0, minimum=0)
        flow = self.optional_number(fields, "water_flow", 2.0, minimum=0)
        turbidity = self.optional_number(fields, "turbidity", 0.0, minimum=0)

        water_quality = self._water_quality_score(readings, params)
        behavior = self._behavior_score(behaviors)
        feeding = self._feeding_score(feeding_response)
        environment = self._environment_score(density, flow, turbidity)
        physiological = (behavior + feeding) / 2

        scores = {
            "water_quality": water_quality,
            "behavior": behavior,
            "feeding": feeding,
            "environment": environment,
            "physiological": physiological,
        }
        overall = sum(scores.values()) / len(scores)
        level = self.stress_level(overall)
        logger.debug(f"fish_stress {species_name}: overall={overall:.3f} level={level}")

        causes = []
        recommendations = []
        if water_quality < 0.6:
            causes.append("Poor water quality parameters")
            recommendations.append(
                f"Optimize water parameters for {species_name} "
                f"(Temp: {params['temperature'][2]}°C, DO: {params['dissolved_oxygen'][2]} mg/L)"
            )
        if behavior < 0.6:
            causes.append("Abnormal behavior patterns")
            recommendations.append("Monitor fish behavior closely and identify specific stressors")
        if feeding < 0.6:
            causes.append("Reduced feeding response")
            recommendations.append("Adjust feeding regime and monitor feed consumption")
        if environment < 0.6:
            causes.append("Suboptimal environmental conditions")
            recommendations.append("Improve environmental conditions (water flow, stocking density)")
        if physiological < 0.6:
            causes.append("Physiological stress indicators")

        # Each action follows its own sub-score, not the overall level
        immediate_actions = []
        if water_quality < 0.4:
            immediate_actions.append("Perform emergency water exchange")
        if behavior < 0.4:
            immediate_actions.append("Isolate affected fish if possible")
        if feeding < 0.4:
            immediate_actions.append("Temporarily reduce feeding rate")
        if environment < 0.4:
            immediate_actions.append("Increase aeration immediately")

        return {
            "species_description": params["description"],
            "stress_level": level,
            "overall_score": overall,
            "scores": scores,
            "primary_causes": causes,
            "recommendations": recommendations,
            "immediate_actions": immediate_actions,
            "long_term_actions": list(LONG_TERM_ACTIONS),
            "monitoring_plan": list(MONITORING_PLAN),
            "economic_impact": dict(ECONOMIC_IMPACT[level]),
        }

    @staticmethod
    def stress_level(score: float) -> str:
        if score > 0.7:
            return "Low"
        if score > 0.4:
            return "Moderate"
        return "High"

    def _water_quality_score(self, readings, params):
        score = 100.0

        t_min, t_max, t_opt = params["temperature"]
        score -= abs(readings["temperature"] - t_opt) / (t_max - t_min) * 30

        do_min, _, do_opt = params["dissolved_oxygen"]
        if readings["dissolved_oxygen"] < do_min:
            score -= 30
        elif readings["dissolved_oxygen"] < do_opt:
            score -= 15

        score -= abs(readings["ph"] - params["ph"][2]) * 10
        score -= readings["ammonia"] / params["ammonia_max"] * 20
        score -= readings["nitrite"] / params["nitrite_max"] * 20

        s_min, s_max, s_opt = params["salinity"]
        score -= abs(readings["salinity"] - s_opt) / (s_max - s_min) * 10

        return self.clamp(score, 0, 100) / 100

    def _behavior_score(self, behaviors):
        total = sum(BEHAVIOR_SEVERITY.get(b, 0) for b in behaviors)
        return max(0.0, 1 - total / (len(BEHAVIOR_SEVERITY) * 3))

    def _feeding_score(self, response):
        if response not in FEEDING_SEVERITY:
            return 1.0
        return 1 - FEEDING_SEVERITY[response] / 3

    def _environment_score(self, density, flow, turbidity):
        score = 100.0
        if density > 50:
            score -= 30
        elif density > 30:
            score -= 15
        if flow < 1:
            score -= 30
        elif flow < 2:
            score -= 15
        if turbidity > 50:
            score -= 20
        elif turbidity > 30:
            score -= 10
        return self.clamp(score, 0, 100) / 100
