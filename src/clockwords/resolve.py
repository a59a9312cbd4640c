"""Date and time resolution for relative expressions.

Pure functions that turn a reference instant plus an offset or selector into
a concrete UTC point or range. Each function returns ``None`` when the
requested time does not exist or cannot be represented (hour 27, inverted
ranges, dates beyond ``datetime.max``); callers treat ``None`` as "no match".
Nothing in this module raises for numeric input.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from clockwords.models import ResolvedPoint, ResolvedRange


ONE_DAY = timedelta(days=1)

LAST_UNIT_DURATIONS = {
    "hour": timedelta(hours=1),
    "minute": timedelta(minutes=1),
}

# Weekday indices follow datetime.weekday(): Monday == 0 ... Sunday == 6
MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)
_RELATIVEDELTA_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)

THIS_WEEK = 0
NEXT_WEEK = 1
LAST_WEEK = -1


def normalize_now(now: datetime) -> Optional[datetime]:
    """Return ``now`` as an aware UTC datetime.

    Naive datetimes are taken to already be in UTC.
    """
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    try:
        return now.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        return None


# ---------------------------------------------------------------------------
# Days
# ---------------------------------------------------------------------------


def start_of_day(offset_days: int, now: datetime) -> Optional[datetime]:
    """Midnight of the day ``offset_days`` away from ``now``."""
    try:
        target = now + timedelta(days=offset_days)
    except OverflowError:
        return None
    return target.replace(hour=0, minute=0, second=0, microsecond=0)


def resolve_relative_day(offset_days: int, now: datetime) -> Optional[ResolvedRange]:
    """Full calendar day ``[midnight, next midnight)`` at ``offset_days`` from now.

    0 = today, 1 = tomorrow, -1 = yesterday.
    """
    start = start_of_day(offset_days, now)
    if start is None:
        return None
    try:
        end = start + ONE_DAY
    except OverflowError:
        return None
    return ResolvedRange(start=start, end=end)


def resolve_day_offset(n_days: int, direction: int, now: datetime) -> Optional[ResolvedRange]:
    """Full day ``n_days`` into the future (direction 1) or past (direction -1)."""
    if direction not in (1, -1):
        return None
    return resolve_relative_day(n_days * direction, now)


# ---------------------------------------------------------------------------
# Times of day
# ---------------------------------------------------------------------------


def _valid_clock(hour: int, minute: int = 0) -> bool:
    return 0 <= hour <= 23 and 0 <= minute <= 59


def to_24h(hour: int, meridiem: str) -> int:
    """Convert a 12-hour clock reading to 24-hour.

    3pm -> 15, 12am -> 0; anything else is returned unchanged.
    """
    meridiem = meridiem.lower().replace(".", "")
    if meridiem == "pm" and hour < 12:
        return hour + 12
    if meridiem == "am" and hour == 12:
        return 0
    return hour


def resolve_time_on_date(date: datetime, hour: int, minute: int = 0) -> Optional[ResolvedPoint]:
    """``hour:minute:00`` on the calendar date of ``date``."""
    if not _valid_clock(hour, minute):
        return None
    return ResolvedPoint(date.replace(hour=hour, minute=minute, second=0, microsecond=0))


def resolve_time_of_day(hour: int, minute: int, now: datetime) -> Optional[ResolvedPoint]:
    """``hour:minute:00`` today."""
    return resolve_time_on_date(now, hour, minute)


def resolve_time_range_on_date(
    date: datetime, start_hour: int, end_hour: int
) -> Optional[ResolvedRange]:
    """Whole-hour range on the calendar date of ``date``.

    There is no wraparound past midnight: ``end_hour < start_hour`` declines.
    """
    if not (_valid_clock(start_hour) and _valid_clock(end_hour)):
        return None
    if end_hour < start_hour:
        return None
    base = date.replace(minute=0, second=0, microsecond=0)
    return ResolvedRange(start=base.replace(hour=start_hour), end=base.replace(hour=end_hour))


def resolve_time_range(
    start_hour: int, end_hour: int, now: datetime, day_offset: int = 0
) -> Optional[ResolvedRange]:
    """Whole-hour range on the day ``day_offset`` away from ``now``."""
    date = start_of_day(day_offset, now)
    if date is None:
        return None
    return resolve_time_range_on_date(date, start_hour, end_hour)


# ---------------------------------------------------------------------------
# Trailing windows
# ---------------------------------------------------------------------------


def resolve_relative_range(duration: timedelta, now: datetime) -> Optional[ResolvedRange]:
    """The window ``[now - duration, now)``, e.g. "the last hour"."""
    if duration < timedelta(0):
        return None
    try:
        start = now - duration
    except OverflowError:
        return None
    return ResolvedRange(start=start, end=now)


def resolve_last_unit(unit: str, now: datetime) -> Optional[ResolvedRange]:
    """Trailing window of one ``"hour"`` or ``"minute"``."""
    duration = LAST_UNIT_DURATIONS.get(unit)
    if duration is None:
        return None
    return resolve_relative_range(duration, now)


# ---------------------------------------------------------------------------
# Weekdays
# ---------------------------------------------------------------------------


def weekday_start(weekday: int, direction: int, now: datetime) -> Optional[datetime]:
    """Midnight of a weekday relative to ``now``.

    ``direction``:
    - ``THIS_WEEK`` (0): today if it is that weekday, otherwise the coming one
    - ``NEXT_WEEK`` (1): one week after this week's occurrence
    - ``LAST_WEEK`` (-1): one week before this week's occurrence
    """
    if direction not in (THIS_WEEK, NEXT_WEEK, LAST_WEEK) or not 0 <= weekday <= 6:
        return None
    try:
        target = now + relativedelta(weeks=direction, weekday=_RELATIVEDELTA_WEEKDAYS[weekday](+1))
    except (OverflowError, ValueError):
        return None
    return target.replace(hour=0, minute=0, second=0, microsecond=0)


def resolve_weekday(weekday: int, direction: int, now: datetime) -> Optional[ResolvedRange]:
    """Full-day range of a relative weekday ("next Friday")."""
    start = weekday_start(weekday, direction, now)
    if start is None:
        return None
    try:
        end = start + ONE_DAY
    except OverflowError:
        return None
    return ResolvedRange(start=start, end=end)
