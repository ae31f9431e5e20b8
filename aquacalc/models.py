from sqlalchemy import Column, Integer, String, Float, DateTime, Text, JSON
from datetime import datetime
from .database import Base
import enum


class ThemeMode(str, enum.Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


# Calculator categories, mirroring the navigation groups of the tool catalog.

class Category(str, enum.Enum):
    WATER = "water_management"
    FISH = "fish_management"
    FEED = "feed_management"
    HEALTH = "health_management"
    ENVIRONMENT = "environment"
    BUSINESS = "business_tools"


class ThemePreference(Base):
    """One row per browser/client; replaces the localStorage 'themeMode' key."""
    __tablename__ = "theme_preferences"

    client_id = Column(String, primary_key=True)
    mode = Column(String, nullable=False, default=ThemeMode.SYSTEM.value)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class FeedingLog(Base):
    """A feeding event recorded from the feeding calculator."""
    __tablename__ = "feeding_logs"

    id = Column(Integer, primary_key=True, index=True)
    species = Column(String, nullable=True)
    growth_stage = Column(String, nullable=True)
    amount_kg = Column(Float, nullable=False)
    notes = Column(Text, default="")
    fed_at = Column(DateTime, default=datetime.utcnow)


class CalculationRecord(Base):
    """Stored calculator run: inputs as submitted, result as returned."""
    __tablename__ = "calculation_records"

    id = Column(Integer, primary_key=True, index=True)
    calculator = Column(String, nullable=False, index=True)  # registry slug
    inputs_json = Column(JSON, default=dict)
    result_json = Column(JSON, default=dict)
    created_at = Column(DateTime, default=datetime.utcnow)
