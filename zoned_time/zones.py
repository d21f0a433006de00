"""
Default-zone context and the datetime conversion entry points.

Two ways to move a datetime into a zone:

- convert: keep the absolute instant, change the displayed wall clock
- reinterpret: keep the wall clock, change the absolute instant

Example:
    >>> from datetime import datetime, timezone
    >>> t = datetime(2000, 1, 1, tzinfo=timezone.utc)
    >>> convert_to_zone(t, 'Hawaii').isoformat()
    '1999-12-31T14:00:00-10:00'
    >>> reinterpret_in_zone(t, 'Hawaii').isoformat()
    '2000-01-01T00:00:00-10:00'
"""

import logging
import threading
from datetime import datetime
from numbers import Real
from typing import Optional, Union
from zoneinfo import ZoneInfo

from zoned_time import registry
from zoned_time.models import TimeZone

logger = logging.getLogger(__name__)

ZoneArg = Union[TimeZone, ZoneInfo, str, Real]


class NoDefaultZoneError(ValueError):
    """Raised when a current-zone conversion runs with no default zone set."""

    def __init__(self, message: str = "No default time zone is set"):
        super().__init__(message)


class ZoneContext:
    """Holds a default zone and converts datetimes into zones."""

    def __init__(self, default_zone: Optional[ZoneArg] = None):
        """
        Initialize the context.

        Args:
            default_zone: Optional zone to start with (resolved immediately)
        """
        self._lock = threading.Lock()
        self._default_zone = None
        if default_zone is not None:
            self.set_default_zone(default_zone)

    def get_default_zone(self) -> Optional[TimeZone]:
        """Return the default zone, or None when unset."""
        with self._lock:
            return self._default_zone

    def set_default_zone(self, zone: ZoneArg) -> TimeZone:
        """
        Resolve a zone and make it the default.

        Args:
            zone: TimeZone, ZoneInfo, display name, IANA key or numeric offset

        Returns:
            The stored TimeZone

        Raises:
            UnknownZoneError: If the zone cannot be resolved
        """
        resolved = self.resolve(zone)
        with self._lock:
            self._default_zone = resolved
        logger.debug("Default time zone set to %s", resolved)
        return resolved

    def reset_default_zone(self) -> None:
        """Clear the default zone."""
        with self._lock:
            self._default_zone = None
        logger.debug("Default time zone reset")

    def resolve(self, zone: Optional[ZoneArg]) -> TimeZone:
        """
        Turn a zone argument into a TimeZone.

        Args:
            zone: TimeZone (returned as is), ZoneInfo, display name,
                  IANA key or numeric offset

        Returns:
            Resolved TimeZone

        Raises:
            NoDefaultZoneError: If zone is None
            UnknownZoneError: If the registry has no match, or a ZoneInfo has no key
            TypeError: For any other argument type
        """
        if isinstance(zone, TimeZone):
            return zone
        if zone is None:
            raise NoDefaultZoneError()
        if isinstance(zone, ZoneInfo):
            # ZoneInfo.from_file() objects carry no key to name or hand to pandas
            if zone.key is None:
                raise registry.UnknownZoneError(zone)
            return TimeZone(name=zone.key, utc_offset=registry.zone_offset(zone), tzinfo=zone)
        if isinstance(zone, str):
            return registry.lookup(zone)
        if isinstance(zone, Real) and not isinstance(zone, bool):
            return registry.lookup(zone)
        raise TypeError(f"Cannot resolve time zone from {type(zone).__name__}: {zone!r}")

    def convert_to_zone(self, instant: datetime, zone: ZoneArg) -> datetime:
        """
        Render the same instant in another zone.

        Naive datetimes are taken as UTC.
        """
        return self.resolve(zone).utc_to_local(instant)

    def convert_to_current_zone(self, instant: datetime) -> datetime:
        """convert_to_zone() using the default zone."""
        return self.convert_to_zone(instant, self.require_default_zone())

    def reinterpret_in_zone(self, instant: datetime, zone: ZoneArg) -> datetime:
        """
        Keep the wall-clock fields of a datetime and attach another zone.

        The absolute instant moves by the difference in offsets. Wall times
        that are ambiguous or skipped in the target zone resolve with fold=0.
        """
        return self.resolve(zone).local_to_zoned(instant)

    def reinterpret_in_current_zone(self, instant: datetime) -> datetime:
        """reinterpret_in_zone() using the default zone."""
        return self.reinterpret_in_zone(instant, self.require_default_zone())

    def require_default_zone(self) -> TimeZone:
        """Return the default zone, raising NoDefaultZoneError when unset."""
        zone = self.get_default_zone()
        if zone is None:
            raise NoDefaultZoneError()
        return zone

    def __repr__(self) -> str:
        return f"ZoneContext(default_zone={self.get_default_zone()!r})"


default_context = ZoneContext()


def get_default_zone() -> Optional[TimeZone]:
    return default_context.get_default_zone()


def set_default_zone(zone: ZoneArg) -> TimeZone:
    return default_context.set_default_zone(zone)


def reset_default_zone() -> None:
    default_context.reset_default_zone()


def resolve(zone: Optional[ZoneArg]) -> TimeZone:
    return default_context.resolve(zone)


def convert_to_zone(instant: datetime, zone: ZoneArg) -> datetime:
    return default_context.convert_to_zone(instant, zone)


def convert_to_current_zone(instant: datetime) -> datetime:
    return default_context.convert_to_current_zone(instant)


def reinterpret_in_zone(instant: datetime, zone: ZoneArg) -> datetime:
    return default_context.reinterpret_in_zone(instant, zone)


def reinterpret_in_current_zone(instant: datetime) -> datetime:
    return default_context.reinterpret_in_current_zone(instant)
