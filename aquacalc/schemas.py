from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from .models import ThemeMode, Category


class CatalogEntry(BaseModel):
    slug: str
    title: str
    category: Category
    path: str
    description: str = ""


class CalculationRequest(BaseModel):
    fields: dict = Field(default_factory=dict)  # {field_name: value, ...}
    save: bool = True


class CalculationResponse(BaseModel):
    calculator: str
    result: dict
    record_id: Optional[int] = None


class CalculationRecord(BaseModel):
    id: int
    calculator: str
    inputs_json: dict
    result_json: dict
    created_at: datetime
    class Config:
        from_attributes = True


class ThemePreferenceUpdate(BaseModel):
    mode: ThemeMode


class ThemePreference(BaseModel):
    client_id: str
    mode: ThemeMode
    resolved: str  # 'light' | 'dark'
    palette: dict = Field(default_factory=dict)


class FeedingLogBase(BaseModel):
    species: Optional[str] = None
    growth_stage: Optional[str] = None
    amount_kg: float = Field(gt=0)
    notes: str = ""

class FeedingLogCreate(FeedingLogBase):
    fed_at: Optional[datetime] = None

class FeedingLogUpdate(BaseModel):
    amount_kg: Optional[float] = Field(default=None, gt=0)
    notes: Optional[str] = None

class FeedingLog(FeedingLogBase):
    id: int
    fed_at: datetime
    class Config:
        from_attributes = True


class ReminderSchedule(BaseModel):
    species: str
    growth_stage: str
    feedings_per_day: int
    interval_hours: float
    reminders: List[datetime]
    message: str


class ReportRequest(BaseModel):
    type: str
    title: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None
    sections: List[str] = []
    format: str = "PDF"
