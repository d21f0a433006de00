"""
Zone handle model for zoned-time.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import total_ordering
from zoneinfo import ZoneInfo


@total_ordering
@dataclass(frozen=True)
class TimeZone:
    """A resolved timezone: display name, standard offset and IANA rules."""

    name: str
    utc_offset: int  # standard offset in seconds, DST excluded
    tzinfo: ZoneInfo

    @property
    def key(self) -> str:
        """IANA key of the underlying rules."""
        return self.tzinfo.key

    def formatted_offset(self, colon: bool = True) -> str:
        """
        Format the standard offset for display.

        Args:
            colon: Separate hours and minutes with a colon

        Returns:
            Offset string such as '-10:00' or '+0530'
        """
        sign = '-' if self.utc_offset < 0 else '+'
        hours, minutes = divmod(abs(self.utc_offset) // 60, 60)
        separator = ':' if colon else ''
        return f"{sign}{hours:02d}{separator}{minutes:02d}"

    def utc_to_local(self, instant: datetime) -> datetime:
        """Render an instant in this zone. Naive values are taken as UTC."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(self.tzinfo)

    def local_to_zoned(self, wall_clock: datetime) -> datetime:
        """
        Attach this zone to the wall-clock fields of a datetime.

        Ambiguous wall times take their first occurrence. Wall times skipped
        by a DST transition move forward to the first valid time after it.
        """
        zoned = wall_clock.replace(tzinfo=self.tzinfo, fold=0)
        round_trip = zoned.astimezone(timezone.utc).astimezone(self.tzinfo)
        if round_trip.replace(tzinfo=None) == zoned.replace(tzinfo=None):
            return zoned
        return self._end_of_gap(zoned)

    def _end_of_gap(self, zoned: datetime) -> datetime:
        # fold=1 reads the wall time with the later offset, which lands before
        # the transition; fold=0 lands after it
        before = math.floor(zoned.replace(fold=1).timestamp())
        after = math.floor(zoned.timestamp())
        target = datetime.fromtimestamp(after, self.tzinfo).utcoffset()

        while after - before > 1:
            middle = (before + after) // 2
            if datetime.fromtimestamp(middle, self.tzinfo).utcoffset() == target:
                after = middle
            else:
                before = middle

        return datetime.fromtimestamp(after, self.tzinfo)

    def now(self) -> datetime:
        """Current time in this zone."""
        return datetime.now(self.tzinfo)

    def __lt__(self, other):
        if not isinstance(other, TimeZone):
            return NotImplemented
        return (self.utc_offset, self.name) < (other.utc_offset, other.name)

    def __str__(self) -> str:
        return f"(GMT{self.formatted_offset()}) {self.name}"


def standard_offset(tz: ZoneInfo, year: int | None = None) -> int:
    """
    Work out the non-DST offset of a zone, in seconds.

    Samples January and July of the given year (default: current year) and
    returns the offset of whichever sample is outside daylight saving time.

    Args:
        tz: Zone rules to sample
        year: Reference year

    Returns:
        Standard UTC offset in seconds
    """
    if year is None:
        year = datetime.now(timezone.utc).year

    offsets = []
    for month in (1, 7):
        sample = datetime(year, month, 1, tzinfo=tz)
        offset = int(sample.utcoffset().total_seconds())
        dst = sample.dst()
        if dst is not None and not dst:
            return offset
        offsets.append(offset)

    return min(offsets)
