"""
Disease prevention early warning.

Additive risk points from water quality, abnormal behaviours, visible
symptoms and feeding response. The reported risk is capped at 100; the
treatment (> 50) and emergency (> 70) thresholds use the uncapped total.
"""

import logging

from .base import BaseCalculator, CalculationError
from ..models import Category

logger = logging.getLogger(__name__)

BEHAVIORS = [
    "Normal",
    "Lethargy",
    "Erratic Swimming",
    "Surface Gasping",
    "Bottom Sitting",
    "Flashing",
    "Rubbing Against Objects",
]

SYMPTOMS = [
    "No Visible Symptoms",
    "Skin Lesions",
    "White Spots",
    "Red Spots",
    "Fin Rot",
    "Swollen Abdomen",
    "Cloudy Eyes",
    "Gill Damage",
    "Scale Loss",
    "Body Deformities",
]

FEEDING_RESPONSES = ["Normal", "Reduced Appetite", "No Appetite", "Aggressive Feeding"]

QUARANTINE_STATUSES = [
    "No Quarantine",
    "New Stock Quarantined",
    "Disease Outbreak Quarantine",
    "Preventive Quarantine",
]

BIOSECURITY_LEVELS = ["Basic", "Standard", "Advanced", "Comprehensive"]

# Symptom that flags a disease -> disease profile
SYMPTOM_DISEASES = {
    "White Spots": {
        "name": "White Spot Disease",
        "probability": 80,
        "severity": "High",
        "symptoms": ["White spots on body", "Flashing", "Lethargy"],
        "treatments": [
            "Increase temperature gradually to 30°C",
            "Salt treatment (0.15-0.3%)",
            "Commercial ich treatment",
        ],
        "prevention": [
            "Maintain optimal water quality",
            "Quarantine new fish",
            "Regular health monitoring",
        ],
    },
    "Gill Damage": {
        "name": "Bacterial Gill Disease",
        "probability": 70,
        "severity": "High",
        "symptoms": ["Gill damage", "Surface gasping", "Lethargy"],
        "treatments": [
            "Antibiotic treatment under veterinary guidance",
            "Improve aeration",
            "Reduce stocking density",
        ],
        "prevention": [
            "Maintain good water quality",
            "Regular gill checks",
            "Proper stocking density",
        ],
    },
}

TREATMENT_THRESHOLD = 50
EMERGENCY_THRESHOLD = 70


class DiseasePreventionCalculator(BaseCalculator):

    SLUG = "disease_prevention"
    TITLE = "Disease Prevention System"
    CATEGORY = Category.HEALTH
    PATH = "/disease-prevention"
    DESCRIPTION = "Early warning risk score with biosecurity, quarantine and treatment advice."

    def calculate(self, fields: dict) -> dict:
        temp = self.require_number(fields, "temperature")
        do = self.require_number(fields, "dissolved_oxygen", minimum=0)
        ph = self.require_number(fields, "ph", minimum=0, maximum=14)
        ammonia = self.require_number(fields, "ammonia", minimum=0)
        nitrite = self.require_number(fields, "nitrite", minimum=0)
        behaviors = self._choices(fields, "behavior", BEHAVIORS)
        symptoms = self._choices(fields, "symptoms", SYMPTOMS)
        feeding = self.optional_choice(fields, "feeding_response", FEEDING_RESPONSES)
        quarantine = self.optional_choice(fields, "quarantine_status", QUARANTINE_STATUSES)
        biosecurity = self.optional_choice(fields, "biosecurity_level", BIOSECURITY_LEVELS)

        risk = 0
        if temp < 25 or temp > 32:
            risk += 20
        if do < 5:
            risk += 25
        if ph < 6.5 or ph > 8.5:
            risk += 15
        if ammonia > 0.5:
            risk += 25
        if nitrite > 0.1:
            risk += 20

        risk += 10 * len([b for b in behaviors if b != "Normal"])
        risk += 15 * len([s for s in symptoms if s != "No Visible Symptoms"])

        emergency_actions = []
        if feeding == "No Appetite":
            risk += 30
            emergency_actions.append("Immediate health assessment required")
        elif feeding == "Reduced Appetite":
            risk += 15

        disease_risks = [
            {**SYMPTOM_DISEASES[s], "symptoms": list(SYMPTOM_DISEASES[s]["symptoms"])}
            for s in SYMPTOM_DISEASES if s in symptoms
        ]

        biosecurity_recommendations = []
        if biosecurity == "Basic":
            biosecurity_recommendations = [
                "Implement basic disinfection protocols",
                "Establish visitor log and control",
                "Install footbaths at entry points",
            ]

        quarantine_recommendations = []
        if quarantine == "No Quarantine":
            quarantine_recommendations = [
                "Establish quarantine protocol for new stock",
                "Set up dedicated quarantine facilities",
                "Implement observation period of 2-4 weeks",
            ]

        treatment_protocols = []
        if risk > TREATMENT_THRESHOLD:
            treatment_protocols = [
                "Daily water quality monitoring",
                "Increase water exchange rate",
                "Prepare medication stock",
            ]

        if risk > EMERGENCY_THRESHOLD:
            emergency_actions += [
                "Contact aquatic veterinarian",
                "Prepare treatment equipment",
                "Isolate affected stock",
            ]

        logger.debug(f"disease_prevention: raw risk={risk}")
        return {
            "overall_risk": min(risk, 100),
            "disease_risks": disease_risks,
            "biosecurity_recommendations": biosecurity_recommendations,
            "quarantine_recommendations": quarantine_recommendations,
            "treatment_protocols": treatment_protocols,
            "emergency_actions": emergency_actions,
        }

    def _choices(self, fields, name, allowed):
        values = self.parse_list(fields.get(name))
        unknown = [v for v in values if v not in allowed]
        if unknown:
            raise CalculationError(
                f"Unknown {name}: {', '.join(unknown)}. Available: {allowed}", field=name
            )
        return values
