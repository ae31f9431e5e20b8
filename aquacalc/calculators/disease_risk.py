"""
Disease risk assessment.

Seven weighted risk factors (0 / 50 / 100 each) give an overall risk score.
Every known disease (or only the one named in `disease`) is then scored:
    +30 if temperature falls in its critical window
    +20 if dissolved oxygen falls in its window
    +20 if pH falls in its window
    +30 x share of its symptoms that were observed
"""

import logging

from .base import BaseCalculator
from ..models import Category

logger = logging.getLogger(__name__)

# Critical windows are (min, max); a max of None means "at or above min".
DISEASES = [
    {
        "name": "White Spot Disease (Ich)",
        "symptoms": ["White spots on skin", "Flashing behavior", "Rapid breathing"],
        "treatments": [
            "Increase temperature to 30°C gradually",
            "Salt treatment (0.15-0.3%)",
            "Commercial ich treatment",
            "Formalin bath treatment",
        ],
        "prevention": [
            "Quarantine new fish",
            "Maintain optimal water quality",
            "Regular health monitoring",
        ],
        "risk_factors": ["Low temperature", "Stressed fish", "Poor water quality"],
        "critical": {"temperature": (24, 26), "ph": (6.5, 8.0), "do": (5, 8)},
    },
    {
        "name": "Bacterial Gill Disease",
        "symptoms": ["Red/inflamed gills", "Gasping at surface", "Excess mucus production"],
        "treatments": [
            "Antibiotic treatment under veterinary guidance",
            "Potassium permanganate bath",
            "Improve aeration",
        ],
        "prevention": [
            "Maintain good water quality",
            "Avoid overcrowding",
            "Regular gill checks",
        ],
        "risk_factors": ["High ammonia", "Low oxygen", "High organic load"],
        "critical": {"temperature": (20, 28), "do": (6, 9)},
    },
    {
        "name": "Columnaris Disease",
        "symptoms": ["Skin lesions", "Cotton-like growth", "Fin rot"],
        "treatments": [
            "Antibiotic treatment",
            "Salt bath treatment",
            "Copper sulfate treatment",
        ],
        "prevention": [
            "Reduce stress factors",
            "Maintain clean environment",
            "Regular water changes",
        ],
        "risk_factors": ["High temperature", "Poor water quality", "Physical injury"],
        "critical": {"temperature": (20, 30), "ph": (6.0, 8.0)},
    },
    {
        "name": "Saprolegniasis (Fungal Infection)",
        "symptoms": ["Cotton-like growth", "Scale loss", "Lethargy"],
        "treatments": [
            "Salt bath treatment",
            "Malachite green treatment",
            "Remove infected tissue",
        ],
        "prevention": [
            "Avoid physical damage",
            "Maintain water quality",
            "Proper handling",
        ],
        "risk_factors": ["Low temperature", "Physical injury", "Stress"],
        "critical": {"temperature": (10, 20), "ph": (6.5, 7.5)},
    },
    {
        "name": "Aeromonas Infection",
        "symptoms": ["Ulcers", "Hemorrhages", "Pop-eye condition"],
        "treatments": [
            "Antibiotic treatment",
            "Wound disinfection",
            "Salt bath treatment",
        ],
        "prevention": [
            "Good sanitation",
            "Stress reduction",
            "Regular health checks",
        ],
        "risk_factors": ["Poor water quality", "High organic matter", "Temperature fluctuation"],
        "critical": {"temperature": (25, 30), "do": (5, 8)},
    },
    {
        "name": "Trichodiniasis",
        "symptoms": ["Excess mucus production", "Lethargy", "Scale loss", "Rapid breathing"],
        "treatments": [
            "Formalin bath treatment",
            "Salt treatment (2-3%)",
            "Potassium permanganate bath",
        ],
        "prevention": [
            "Regular water quality monitoring",
            "Avoid overcrowding",
            "Quarantine new fish",
        ],
        "risk_factors": ["Poor water quality", "High organic load", "Overcrowding"],
        "critical": {"temperature": (20, 28), "ph": (6.5, 8.0), "do": (5, None)},
        "treatment_cost": {"low": 50, "high": 150},
    },
    {
        "name": "Streptococcosis",
        "symptoms": ["Erratic swimming", "Pop-eye condition", "Hemorrhages", "Dark body color"],
        "treatments": [
            "Antibiotic treatment under veterinary guidance",
            "Increase water exchange",
            "Reduce feeding rate",
        ],
        "prevention": [
            "Maintain optimal water temperature",
            "Regular disinfection",
            "Proper feed storage",
        ],
        "risk_factors": ["High temperature", "Poor water quality", "Stress"],
        "critical": {"temperature": (25, 32), "ph": (6.5, 7.5), "do": (6, None)},
        "treatment_cost": {"low": 100, "high": 300},
    },
]

SEASONAL_PATTERNS = {
    "Summer": {
        "common_diseases": ["Columnaris Disease", "Streptococcosis", "Aeromonas Infection"],
        "preventive_measures": [
            "Increase aeration",
            "Reduce feeding rate during peak temperature",
            "More frequent water quality monitoring",
        ],
        "risk_level": "High",
    },
    "Winter": {
        "common_diseases": ["White Spot Disease", "Saprolegniasis"],
        "preventive_measures": [
            "Maintain stable temperature",
            "Monitor dissolved oxygen levels",
            "Adjust feeding rate according to metabolism",
        ],
        "risk_level": "Moderate",
    },
    "Rainy": {
        "common_diseases": ["Bacterial Gill Disease", "Trichodiniasis"],
        "preventive_measures": [
            "Monitor water turbidity",
            "Increase water exchange rate",
            "Check pH fluctuations",
        ],
        "risk_level": "High",
    },
    "Spring": {
        "common_diseases": ["Columnaris Disease", "Aeromonas Infection"],
        "preventive_measures": [
            "Gradual temperature adaptation",
            "Regular health monitoring",
            "Balanced feeding regime",
        ],
        "risk_level": "Moderate",
    },
}

DISEASE_NAMES = [d["name"] for d in DISEASES]

HIGH_RISK_BEHAVIORS = {"Lethargic", "Erratic swimming", "Surface breathing"}

STATUS_BY_VALUE = {100: "high", 50: "medium", 0: "low"}


def _in_window(value, window):
    low, high = window
    if high is None:
        return value >= low
    return low <= value <= high


def _factor(name, value, weight):
    return {"name": name, "value": value, "weight": weight, "status": STATUS_BY_VALUE[value]}


class DiseaseRiskCalculator(BaseCalculator):

    SLUG = "disease_risk"
    TITLE = "Disease Risk Assessment"
    CATEGORY = Category.HEALTH
    PATH = "/disease-risk"
    DESCRIPTION = "Weighted risk factors and likely diseases from water readings and symptoms."

    def calculate(self, fields: dict) -> dict:
        temp = self.require_number(fields, "temperature")
        do = self.require_number(fields, "dissolved_oxygen", minimum=0)
        ph = self.require_number(fields, "ph", minimum=0, maximum=14)
        ammonia = self.require_number(fields, "ammonia", minimum=0)
        density = self.optional_number(fields, "stocking_density", 0.0, minimum=0)
        mortality = self.optional_number(fields, "mortality_rate", 0.0, minimum=0, maximum=100)
        behaviors = self.parse_list(fields.get("behavior"))
        symptoms = self.parse_list(fields.get("symptoms"))
        season = str(fields.get("season") or "").strip()
        disease = self.optional_choice(fields, "disease", DISEASE_NAMES)

        factors = self.risk_factors(temp, do, ph, ammonia, density, mortality, behaviors)
        overall = sum(f["value"] * f["weight"] for f in factors)
        diseases = self.disease_risks(temp, do, ph, symptoms, only=disease)
        logger.debug(f"disease_risk: overall={overall} diseases={len(diseases)}")

        return {
            "overall_risk_score": overall,
            "risk_factors": factors,
            "disease_risks": diseases,
            "seasonal_pattern": SEASONAL_PATTERNS.get(season),
        }

    def risk_factors(self, temp, do, ph, ammonia, density, mortality, behaviors):
        if temp < 20 or temp > 32:
            temp_value = 100
        elif temp < 25 or temp > 30:
            temp_value = 50
        else:
            temp_value = 0

        if ph < 6 or ph > 9:
            ph_value = 100
        elif ph < 6.5 or ph > 8.5:
            ph_value = 50
        else:
            ph_value = 0

        if HIGH_RISK_BEHAVIORS.intersection(behaviors):
            behavior_value = 100
        elif "Bottom sitting" in behaviors:
            behavior_value = 50
        else:
            behavior_value = 0

        return [
            _factor("Temperature", temp_value, 0.2),
            _factor("Oxygen", 100 if do < 3 else 50 if do < 5 else 0, 0.15),
            _factor("pH", ph_value, 0.1),
            _factor("Ammonia", 100 if ammonia > 1 else 50 if ammonia > 0.5 else 0, 0.15),
            _factor("Density", 100 if density > 50 else 50 if density > 30 else 0, 0.1),
            _factor("Mortality", 100 if mortality > 5 else 50 if mortality > 2 else 0, 0.2),
            _factor("Behavior", behavior_value, 0.1),
        ]

    def disease_risks(self, temp, do, ph, symptoms, only=""):
        """Likelihood per disease; `only` restricts scoring to one named disease."""
        observed = set(symptoms)
        risks = []
        for disease in DISEASES:
            if only and disease["name"] != only:
                continue
            critical = disease["critical"]
            probability = 0.0
            if "temperature" in critical and _in_window(temp, critical["temperature"]):
                probability += 30
            if "do" in critical and _in_window(do, critical["do"]):
                probability += 20
            if "ph" in critical and _in_window(ph, critical["ph"]):
                probability += 20
            matching = [s for s in disease["symptoms"] if s in observed]
            probability += len(matching) / len(disease["symptoms"]) * 30

            if probability > 70:
                severity = "high"
            elif probability > 40:
                severity = "medium"
            else:
                severity = "low"

            risks.append({
                "disease": disease["name"],
                "probability": probability,
                "severity": severity,
                "symptoms": matching,
                "preventive_measures": list(disease["prevention"]),
                "treatments": list(disease["treatments"]),
                "treatment_cost": disease.get("treatment_cost"),
            })

        risks.sort(key=lambda r: r["probability"], reverse=True)
        return risks
