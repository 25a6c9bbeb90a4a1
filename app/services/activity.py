from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import date, timedelta

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

_days_adapter = TypeAdapter(list[date])


def record_activity(days: Iterable[date], today: date) -> list[date]:
    return sorted(set(days) | {today})


def days_active(days: Iterable[date]) -> int:
    """Length of the run of consecutive days ending at the latest recorded day."""
    ordered = sorted(set(days), reverse=True)
    if not ordered:
        return 0
    streak = 1
    for prev, cur in zip(ordered, ordered[1:]):
        if prev - cur != timedelta(days=1):
            break
        streak += 1
    return streak


def load_days(raw: str | None) -> list[date]:
    if raw is None:
        return []
    try:
        return sorted(set(_days_adapter.validate_json(raw)))
    except ValidationError as e:
        logger.warning("Stored activity days are malformed (%s errors); starting empty", e.error_count())
        return []


def dump_days(days: Iterable[date]) -> str:
    return json.dumps([d.isoformat() for d in sorted(set(days))])
