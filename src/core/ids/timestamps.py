"""
Timestamps — Текущее время и интерпретация целочисленных timestamp

Все даты возвращаются timezone-aware в UTC.
"""

import math
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Final, Optional

from src.core.math.numbers import is_signed_int

# Timestamp больше этого значения считается заданным в миллисекундах
TS_MILLISECONDS_THRESHOLD: Final[int] = 999_999_999_999


def get_now_seconds() -> int:
    """Текущее время UTC в целых секундах с epoch."""
    return math.floor(time.time())


def assume_date_from_ts(ts: Any) -> Optional[datetime]:
    """
    Дата по целочисленному timestamp с автоопределением единиц.

    Правила:
    - ts <= 0: относительное смещение в секундах от текущего момента
    - 0 < ts <= 999999999999: секунды с epoch
    - ts > 999999999999: миллисекунды с epoch

    Args:
        ts: Целочисленный timestamp

    Returns:
        datetime (UTC) или None, если ts не целое число

    Examples:
        >>> assume_date_from_ts(1_000_000_000).year
        2001
        >>> assume_date_from_ts(1.5) is None
        True
    """
    if not is_signed_int(ts):
        return None

    if ts <= 0:
        return datetime.now(timezone.utc) + timedelta(seconds=ts)
    if ts > TS_MILLISECONDS_THRESHOLD:
        return datetime.fromtimestamp(ts / 1000, tz=timezone.utc)
    return datetime.fromtimestamp(ts, tz=timezone.utc)
