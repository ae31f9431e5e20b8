"""
Fish waste to fertilizer calculator.

Daily waste = feed x species waste rate x (feed protein / 32%). Waste collected
over the collection interval is processed at the method's efficiency; the
nutrients retained depend on processing and storage losses.
"""

from .base import BaseCalculator
from ..models import Category

SPECIES_DATA = {
    "tilapia": {"waste_rate": 0.35, "nutrient_richness": 1.0,
                "description": "Moderate waste production with balanced nutrient content"},
    "carp": {"waste_rate": 0.4, "nutrient_richness": 1.1,
             "description": "High waste production with rich nutrient content"},
    "catfish": {"waste_rate": 0.3, "nutrient_richness": 0.9,
                "description": "Lower waste production with standard nutrient content"},
    "trout": {"waste_rate": 0.25, "nutrient_richness": 1.2,
              "description": "Low waste production but nutrient-rich content"},
}

PROCESSING_METHODS = {
    "composting": {"efficiency": 0.7, "nutrient_retention": 0.8, "processing_time": 30,
                   "description": "Traditional composting with regular turning"},
    "vermicomposting": {"efficiency": 0.85, "nutrient_retention": 0.9, "processing_time": 45,
                        "description": "Using earthworms for enhanced decomposition"},
    "biodigestion": {"efficiency": 0.6, "nutrient_retention": 0.75, "processing_time": 20,
                     "description": "Anaerobic digestion with biogas production"},
    "drying": {"efficiency": 0.5, "nutrient_retention": 0.6, "processing_time": 7,
               "description": "Sun drying with periodic turning"},
}

STORAGE_CONDITIONS = {
    "indoor": {"nutrient_loss": 0.05, "max_duration": 180,
               "description": "Protected from elements, temperature controlled"},
    "covered": {"nutrient_loss": 0.15, "max_duration": 90,
                "description": "Protected from rain but exposed to temperature variations"},
    "outdoor": {"nutrient_loss": 0.3, "max_duration": 30,
                "description": "Exposed to elements, requires frequent monitoring"},
}

CROP_TYPES = {
    "vegetables": {"application_rate": 1.0, "frequency": "Weekly"},
    "grains": {"application_rate": 0.7, "frequency": "Monthly"},
    "fruits": {"application_rate": 0.8, "frequency": "Bi-weekly"},
    "fodder": {"application_rate": 1.2, "frequency": "Weekly"},
}

# USD per kg
NUTRIENT_VALUES = {"nitrogen": 2.5, "phosphorus": 3.0, "potassium": 2.0, "organic_matter": 0.5}
DISPOSAL_SAVINGS_PER_KG = 0.3


class WasteFertilizerCalculator(BaseCalculator):

    SLUG = "waste_fertilizer"
    TITLE = "Waste to Fertilizer Calculator"
    CATEGORY = Category.HEALTH
    PATH = "/waste-fertilizer"
    DESCRIPTION = "Fertilizer yield, nutrients and value recovered from fish waste."

    def calculate(self, fields: dict) -> dict:
        species_key = self.require_choice(fields, "fish_species", SPECIES_DATA)
        method_key = self.require_choice(fields, "processing_method", PROCESSING_METHODS)
        storage_key = self.require_choice(fields, "storage_conditions", STORAGE_CONDITIONS)
        crop_key = self.require_choice(fields, "crop_type", CROP_TYPES)
        feed_rate = self.require_number(fields, "feeding_rate", minimum=0)  # kg/day
        frequency = self.require_number(fields, "collection_frequency", positive=True)  # days
        pond_size = self.require_number(fields, "pond_size", positive=True)  # m2
        protein = self.require_number(fields, "feed_protein", minimum=0, maximum=100)

        species = SPECIES_DATA[species_key]
        method = PROCESSING_METHODS[method_key]
        storage = STORAGE_CONDITIONS[storage_key]
        crop = CROP_TYPES[crop_key]

        daily_waste = feed_rate * species["waste_rate"] * (protein / 32)
        fertilizer = daily_waste * frequency * method["efficiency"]
        application_rate = fertilizer / (pond_size / 10000) * 7 * crop["application_rate"]

        retention = method["nutrient_retention"] * (1 - storage["nutrient_loss"])
        factor = species["nutrient_richness"] * retention
        nutrients = {
            "nitrogen": fertilizer * 0.05 * factor,
            "phosphorus": fertilizer * 0.02 * factor,
            "potassium": fertilizer * 0.01 * factor,
            "organic_matter": fertilizer * 0.4 * factor,
        }

        fertilizer_value = sum(nutrients[k] * NUTRIENT_VALUES[k] for k in NUTRIENT_VALUES)
        disposal_savings = fertilizer * DISPOSAL_SAVINGS_PER_KG
        annual = fertilizer * 52

        return {
            "daily_waste": daily_waste,
            "fertilizer": fertilizer,
            "application_rate": application_rate,
            "nutrient_content": nutrients,
            "economic_value": {
                "fertilizer_value": fertilizer_value,
                "disposal_savings": disposal_savings,
                "total_benefit": fertilizer_value + disposal_savings,
            },
            "recommendations": [
                f"Collect waste every {frequency:g} days to maintain optimal nutrient content",
                f"Use {method_key} method with {method['processing_time']} days processing time",
                f"Apply fertilizer {crop['frequency'].lower()} for {crop_key}",
                "Monitor soil nutrient levels and adjust application rates accordingly",
                f"Maintain proper {storage_key} storage conditions",
            ],
            "storage_requirements": [
                f"Maximum storage duration: {storage['max_duration']} days",
                f"Expected nutrient loss during storage: {storage['nutrient_loss'] * 100:.1f}%",
                storage["description"],
                "Keep storage area well-ventilated",
                "Monitor moisture levels regularly",
            ],
            "environmental_benefits": [
                f"Reduces waste disposal by {annual:.0f} kg annually",
                f"Saves approximately {annual * 0.5:.0f} kg CO2 emissions per year",
                "Promotes circular economy in aquaculture",
                "Reduces chemical fertilizer dependency",
                "Improves soil organic matter content",
            ],
        }
