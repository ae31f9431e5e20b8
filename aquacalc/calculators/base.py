"""
Abstract base class for all aquaculture calculators.

Input: plain dict of form fields (strings or numbers, as the client sent them)
Output: plain result dict of numbers plus recommendation string lists
"""

import logging
import math
from abc import ABC, abstractmethod
from datetime import date, datetime

logger = logging.getLogger(__name__)


class CalculationError(ValueError):
    """Raised when a calculator cannot produce a finite result from its inputs."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field


class BaseCalculator(ABC):
    """All calculators inherit from this."""

    # Catalog metadata, every subclass overrides these
    SLUG = ""
    TITLE = ""
    CATEGORY = None
    PATH = ""
    DESCRIPTION = ""

    @abstractmethod
    def calculate(self, fields: dict) -> dict:
        """
        Takes the submitted form fields.
        Returns a result dict with numbers and recommendation lists.
        """
        pass

    # --- Parsing helpers ---

    def parse_number(self, value, default: float = 0.0) -> float:
        """Parse a numeric value from user input. Blank or junk gives the default."""
        if value is None:
            return default
        try:
            number = float(str(value).strip())
        except (ValueError, TypeError):
            return default
        if not math.isfinite(number):
            return default
        return number

    def parse_int(self, value, default: int = 0) -> int:
        """Parse an integer from user input."""
        return int(self.parse_number(value, default))

    def require_number(self, fields: dict, name: str, minimum: float = None,
                       maximum: float = None, positive: bool = False) -> float:
        """
        Parse a required numeric field. Raises CalculationError when it is
        missing, not a number, not finite or outside the allowed range.
        """
        raw = fields.get(name)
        if raw is None or str(raw).strip() == "":
            raise CalculationError(f"{name} is required", field=name)
        try:
            number = float(str(raw).strip())
        except (ValueError, TypeError):
            raise CalculationError(f"{name} must be a number, got {raw!r}", field=name)
        if not math.isfinite(number):
            raise CalculationError(f"{name} must be finite", field=name)
        if positive and number <= 0:
            raise CalculationError(f"{name} must be greater than 0", field=name)
        if minimum is not None and number < minimum:
            raise CalculationError(f"{name} must be at least {minimum}", field=name)
        if maximum is not None and number > maximum:
            raise CalculationError(f"{name} must be at most {maximum}", field=name)
        return number

    def optional_number(self, fields: dict, name: str, default: float, **limits) -> float:
        """Like require_number, but a blank field gives the default."""
        raw = fields.get(name)
        if raw is None or str(raw).strip() == "":
            return default
        return self.require_number(fields, name, **limits)

    def require_choice(self, fields: dict, name: str, choices) -> str:
        """Required categorical field; the value must be a key of `choices`."""
        value = fields.get(name)
        if value is None or str(value).strip() == "":
            raise CalculationError(f"{name} is required", field=name)
        value = str(value).strip()
        if value not in choices:
            raise CalculationError(
                f"Unknown {name}: {value}. Available: {list(choices)}", field=name
            )
        return value

    def optional_choice(self, fields: dict, name: str, choices) -> str:
        """Like require_choice, but a blank field gives an empty string."""
        if str(fields.get(name) or "").strip() == "":
            return ""
        return self.require_choice(fields, name, choices)

    def require_text(self, fields: dict, name: str) -> str:
        value = str(fields.get(name) or "").strip()
        if not value:
            raise CalculationError(f"{name} is required", field=name)
        return value

    def require_date(self, fields: dict, name: str) -> date:
        """Required ISO date field (YYYY-MM-DD). A full timestamp is truncated to its date."""
        raw = fields.get(name)
        if raw is None or str(raw).strip() == "":
            raise CalculationError(f"{name} is required", field=name)
        if isinstance(raw, datetime):
            return raw.date()
        if isinstance(raw, date):
            return raw
        text = str(raw).strip()
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            raise CalculationError(f"{name} must be an ISO date, got {raw!r}", field=name)

    def optional_date(self, fields: dict, name: str, default: date) -> date:
        raw = fields.get(name)
        if raw is None or str(raw).strip() == "":
            return default
        return self.require_date(fields, name)

    def parse_flag(self, value) -> bool:
        """Checkbox-style input: true/yes/1/on."""
        if isinstance(value, bool):
            return value
        return str(value or "").strip().lower() in ("true", "yes", "1", "on")

    def parse_list(self, value) -> list:
        """Multi-select input: list as-is, or a comma-separated string."""
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(v).strip() for v in value if str(v).strip()]
        return [v.strip() for v in str(value).split(",") if v.strip()]

    def require_records(self, fields: dict, name: str, min_count: int = 1) -> list:
        """Table input: a list of row dicts with at least `min_count` rows."""
        raw = fields.get(name)
        if not isinstance(raw, (list, tuple)):
            raise CalculationError(f"{name} must be a list", field=name)
        if len(raw) < min_count:
            raise CalculationError(f"{name} needs at least {min_count} entries", field=name)
        for index, row in enumerate(raw):
            if not isinstance(row, dict):
                raise CalculationError(f"{name}[{index}] must be an object", field=name)
        return list(raw)

    # --- Math helpers ---

    def divide(self, numerator: float, denominator: float, what: str) -> float:
        """Division that refuses a zero denominator instead of producing inf/NaN."""
        if denominator == 0:
            raise CalculationError(f"Cannot compute {what}: division by zero")
        return numerator / denominator

    def clamp(self, value: float, low: float = 0.0, high: float = 1.0) -> float:
        return max(low, min(high, value))

    def round2(self, value: float) -> float:
        """Two decimals, the precision results are displayed at."""
        return round(value, 2)
