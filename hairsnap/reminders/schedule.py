"""Reminder planning: works out which daily photo reminders a user should get.

Delivery is left to the host platform; this module only decides what to schedule.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from hairsnap.models.config import ReminderSettings

logger = logging.getLogger(__name__)


@dataclass
class Reminder:
    hour: int
    minute: int
    title: str
    body: str
    repeats: bool = True

    @property
    def time_of_day(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def _parse_time(value: str) -> tuple[int, int]:
    hours, minutes = value.split(":")
    return int(hours), int(minutes)


def _greet(settings: ReminderSettings, body: str) -> str:
    if settings.username:
        return f"Hi {settings.username}! {body}"
    return body


def plan_reminders(settings: ReminderSettings) -> list[Reminder]:
    """Build the set of daily reminders implied by the user's settings."""
    if not settings.notifications_enabled:
        logger.debug("Notifications disabled, no reminders planned")
        return []

    reminders = []
    if settings.morning_time:
        hour, minute = _parse_time(settings.morning_time)
        reminders.append(Reminder(
            hour=hour, minute=minute,
            title="HairSnap Reminder",
            body=_greet(settings, "Time to take your morning hair photo! Track your progress consistently."),
        ))

    if settings.frequency == "twice-daily" and settings.evening_time:
        hour, minute = _parse_time(settings.evening_time)
        reminders.append(Reminder(
            hour=hour, minute=minute,
            title="HairSnap Evening Reminder",
            body=_greet(settings, "Don't forget to take your evening hair photo to monitor changes."),
        ))

    return reminders


def next_reminder(settings: ReminderSettings, now: datetime) -> datetime | None:
    """Return the next time any planned reminder fires, at or after ``now``."""
    candidates = []
    for r in plan_reminders(settings):
        fire = now.replace(hour=r.hour, minute=r.minute, second=0, microsecond=0)
        if fire < now:
            fire += timedelta(days=1)
        candidates.append(fire)
    return min(candidates) if candidates else None
