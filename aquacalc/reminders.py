"""
Feeding reminder schedule.

Reminders are spaced evenly across the day at 24 / (optimal feedings per day)
hours, starting from the requested time. The service only computes the
schedule; delivering the notifications is up to the client.
"""

import logging
from datetime import datetime, timedelta

from .calculators.feeding import SPECIES_DATA, feedings_per_day

logger = logging.getLogger(__name__)

MAX_REMINDERS = 100


def reminder_interval_hours(species: str, growth_stage: str) -> float:
    """Hours between feedings. Raises ValueError for an unknown species or stage."""
    try:
        frequency = feedings_per_day(species, growth_stage)
    except KeyError:
        raise ValueError(
            f"No feeding schedule for {species} / {growth_stage}. "
            f"Available species: {list(SPECIES_DATA.keys())}"
        )
    return 24 / frequency


def reminder_schedule(species: str, growth_stage: str, start: datetime = None,
                      count: int = None) -> dict:
    """
    Build the reminder schedule for one species and growth stage.

    count defaults to one day's worth of feedings.
    """
    interval = reminder_interval_hours(species, growth_stage)
    frequency = feedings_per_day(species, growth_stage)
    if start is None:
        start = datetime.utcnow().replace(microsecond=0)
    if count is None:
        count = frequency
    if count < 1 or count > MAX_REMINDERS:
        raise ValueError(f"count must be between 1 and {MAX_REMINDERS}")

    reminders = [start + timedelta(hours=interval * i) for i in range(count)]
    logger.debug(f"Reminder schedule: {species}/{growth_stage} every {interval}h x {count}")

    return {
        "species": species,
        "growth_stage": growth_stage,
        "feedings_per_day": frequency,
        "interval_hours": interval,
        "reminders": reminders,
        "message": f"Time to feed your {species}!",
    }
