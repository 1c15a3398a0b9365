"""
Pace Setter

Decides from instants alone which puzzle is current, how long until the next
one, whether saved state still belongs to the current period, and whether
two instants fall in consecutive periods (streaks).

Every method takes "now" from the caller; nothing here reads the clock.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Protocol, Union
from zoneinfo import ZoneInfo

from ..utils.helpers import as_utc

_ONE_MICROSECOND = timedelta(microseconds=1)
_UTC_OFFSET = re.compile(r'^UTC([+-]\d{1,2})$')


class PaceSetter(Protocol):
    """Contract shared by the calendar-day and fixed-bucket strategies."""

    def epoch_index(self, now: datetime) -> int:
        ...

    def next_rollover(self, now: datetime) -> datetime:
        ...

    def remaining_ttl(self, now: datetime) -> timedelta:
        ...

    def is_fresh(self, ref: datetime, now: datetime) -> bool:
        ...

    def is_consecutive(self, first: datetime, second: datetime) -> bool:
        ...


def gregorian(hour_offset_from_utc: int = 0) -> tzinfo:
    """Fixed-offset timezone, e.g. gregorian(1) for UTC+1."""
    if hour_offset_from_utc == 0:
        return timezone.utc
    return timezone(timedelta(hours=hour_offset_from_utc))


def parse_timezone(name: str) -> tzinfo:
    """
    Resolve "UTC", "UTC+1"/"UTC-5" or an IANA name such as "Europe/Paris".

    Raises:
        ValueError: If the name is not a known timezone
    """
    name = (name or 'UTC').strip()
    if name.upper() == 'UTC':
        return timezone.utc
    match = _UTC_OFFSET.match(name.upper())
    if match:
        return gregorian(int(match.group(1)))
    try:
        return ZoneInfo(name)
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown timezone '{name}'") from e


@dataclass(frozen=True)
class CalendarDailyPaceSetter:
    """
    One puzzle per calendar day, rolling over at local midnight in ``tz``.

    Freshness and streak adjacency both use ``tz`` so that a day boundary
    means the same thing everywhere.
    """
    start: datetime
    tz: tzinfo = timezone.utc

    def _local_date(self, instant: datetime) -> date:
        return as_utc(instant).astimezone(self.tz).date()

    def epoch_index(self, now: datetime) -> int:
        return (self._local_date(now) - self._local_date(self.start)).days

    def next_rollover(self, now: datetime) -> datetime:
        next_day = self._local_date(now) + timedelta(days=1)
        return datetime.combine(next_day, time(0, 0), tzinfo=self.tz)

    def remaining_ttl(self, now: datetime) -> timedelta:
        # Aware datetimes sharing a tzinfo subtract as wall clock time, so
        # compare in UTC to stay correct across DST changes
        return as_utc(self.next_rollover(now)) - as_utc(now)

    def is_fresh(self, ref: datetime, now: datetime) -> bool:
        return self._local_date(ref) == self._local_date(now)

    def is_consecutive(self, first: datetime, second: datetime) -> bool:
        return (self._local_date(second) - self._local_date(first)).days == 1


@dataclass(frozen=True)
class BucketPaceSetter:
    """
    One puzzle per fixed-length bucket starting at ``start``. Handy for
    testing rollovers every few seconds.
    """
    start: datetime
    bucket: timedelta

    def __post_init__(self):
        if self.bucket <= timedelta(0):
            raise ValueError("Bucket length must be positive")

    def _elapsed(self, now: datetime) -> int:
        return (as_utc(now) - as_utc(self.start)) // _ONE_MICROSECOND

    def _bucket_us(self) -> int:
        return self.bucket // _ONE_MICROSECOND

    def epoch_index(self, now: datetime) -> int:
        return self._elapsed(now) // self._bucket_us()

    def next_rollover(self, now: datetime) -> datetime:
        """Smallest boundary at or after ``now``; ``start`` when now precedes it."""
        elapsed = self._elapsed(now)
        if elapsed <= 0:
            return as_utc(self.start)
        buckets = -(-elapsed // self._bucket_us())
        return as_utc(self.start) + self.bucket * buckets

    def remaining_ttl(self, now: datetime) -> timedelta:
        return self.next_rollover(now) - as_utc(now)

    def is_fresh(self, ref: datetime, now: datetime) -> bool:
        return as_utc(now) - as_utc(ref) < self.bucket

    def is_consecutive(self, first: datetime, second: datetime) -> bool:
        """True iff ``second`` lies strictly inside the bucket after ``first``'s."""
        open_border = as_utc(self.start) + self.bucket * (self.epoch_index(first) + 1)
        close_border = open_border + self.bucket
        return open_border < as_utc(second) < close_border


AnyPaceSetter = Union[CalendarDailyPaceSetter, BucketPaceSetter]


def create_pace_setter(config_class) -> AnyPaceSetter:
    """
    Build the strategy named by ``config_class.PACE``.

    Raises:
        ValueError: If the pace, start instant or timezone is invalid
    """
    start = as_utc(datetime.fromisoformat(config_class.EPOCH_START))
    pace = config_class.PACE.lower()

    if pace == 'daily':
        return CalendarDailyPaceSetter(start=start, tz=parse_timezone(config_class.TIMEZONE))
    if pace == 'bucket':
        return BucketPaceSetter(start=start, bucket=timedelta(seconds=config_class.BUCKET_SECONDS))

    raise ValueError(f"Unknown pace '{config_class.PACE}'. Must be \"daily\" or \"bucket\"")
