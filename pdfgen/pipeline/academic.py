from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from .. import config


# the academic year rolls over after this month
ROLLOVER_MONTH = 6


def academic_year(now: datetime, tz: Optional[tzinfo] = None) -> str:
    """
    Academic year label for now, e.g. "2025-2026".

    With tz, an aware timestamp is converted into tz and a naive one is taken
    as already local to tz.
    """
    if tz is not None:
        now = now.replace(tzinfo=tz) if now.tzinfo is None else now.astimezone(tz)
    if now.month > ROLLOVER_MONTH:
        return f"{now.year}-{now.year + 1}"
    return f"{now.year - 1}-{now.year}"


def current_academic_year(tz_name: Optional[str] = None) -> str:
    tz = ZoneInfo(tz_name or config.TIMEZONE)
    return academic_year(datetime.now(tz).replace(microsecond=0))
