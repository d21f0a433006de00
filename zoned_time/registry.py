"""
Zone registry: resolves display names, IANA keys and numeric offsets to TimeZone handles.

Display names follow the familiar "(GMT-08:00) Pacific Time (US & Canada)"
style list; each maps to an IANA key served by zoneinfo/tzdata.
"""

import math
from functools import lru_cache
from numbers import Real
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from zoned_time.models import TimeZone, standard_offset


HOUR = 3600

# (display name, standard offset in seconds, IANA key)
ZONE_TABLE = [
    ("International Date Line West", -12 * HOUR, "Etc/GMT+12"),
    ("American Samoa", -11 * HOUR, "Pacific/Pago_Pago"),
    ("Midway Island", -11 * HOUR, "Pacific/Midway"),
    ("Hawaii", -10 * HOUR, "Pacific/Honolulu"),
    ("Alaska", -9 * HOUR, "America/Juneau"),
    ("Pacific Time (US & Canada)", -8 * HOUR, "America/Los_Angeles"),
    ("Tijuana", -8 * HOUR, "America/Tijuana"),
    ("Arizona", -7 * HOUR, "America/Phoenix"),
    ("Mazatlan", -7 * HOUR, "America/Mazatlan"),
    ("Mountain Time (US & Canada)", -7 * HOUR, "America/Denver"),
    ("Central America", -6 * HOUR, "America/Guatemala"),
    ("Central Time (US & Canada)", -6 * HOUR, "America/Chicago"),
    ("Guadalajara", -6 * HOUR, "America/Mexico_City"),
    ("Mexico City", -6 * HOUR, "America/Mexico_City"),
    ("Monterrey", -6 * HOUR, "America/Monterrey"),
    ("Saskatchewan", -6 * HOUR, "America/Regina"),
    ("Bogota", -5 * HOUR, "America/Bogota"),
    ("Eastern Time (US & Canada)", -5 * HOUR, "America/New_York"),
    ("Indiana (East)", -5 * HOUR, "America/Indiana/Indianapolis"),
    ("Lima", -5 * HOUR, "America/Lima"),
    ("Quito", -5 * HOUR, "America/Lima"),
    ("Atlantic Time (Canada)", -4 * HOUR, "America/Halifax"),
    ("Caracas", -4 * HOUR, "America/Caracas"),
    ("Georgetown", -4 * HOUR, "America/Guyana"),
    ("La Paz", -4 * HOUR, "America/La_Paz"),
    ("Santiago", -4 * HOUR, "America/Santiago"),
    ("Newfoundland", -12600, "America/St_Johns"),
    ("Brasilia", -3 * HOUR, "America/Sao_Paulo"),
    ("Buenos Aires", -3 * HOUR, "America/Argentina/Buenos_Aires"),
    ("Montevideo", -3 * HOUR, "America/Montevideo"),
    ("Mid-Atlantic", -2 * HOUR, "Atlantic/South_Georgia"),
    ("Azores", -1 * HOUR, "Atlantic/Azores"),
    ("Cape Verde Is.", -1 * HOUR, "Atlantic/Cape_Verde"),
    ("Dublin", 0, "Europe/Dublin"),
    ("Edinburgh", 0, "Europe/London"),
    ("Lisbon", 0, "Europe/Lisbon"),
    ("London", 0, "Europe/London"),
    ("Monrovia", 0, "Africa/Monrovia"),
    ("UTC", 0, "Etc/UTC"),
    ("Amsterdam", 1 * HOUR, "Europe/Amsterdam"),
    ("Belgrade", 1 * HOUR, "Europe/Belgrade"),
    ("Berlin", 1 * HOUR, "Europe/Berlin"),
    ("Bern", 1 * HOUR, "Europe/Zurich"),
    ("Bratislava", 1 * HOUR, "Europe/Bratislava"),
    ("Brussels", 1 * HOUR, "Europe/Brussels"),
    ("Budapest", 1 * HOUR, "Europe/Budapest"),
    ("Copenhagen", 1 * HOUR, "Europe/Copenhagen"),
    ("Ljubljana", 1 * HOUR, "Europe/Ljubljana"),
    ("Madrid", 1 * HOUR, "Europe/Madrid"),
    ("Paris", 1 * HOUR, "Europe/Paris"),
    ("Prague", 1 * HOUR, "Europe/Prague"),
    ("Rome", 1 * HOUR, "Europe/Rome"),
    ("Sarajevo", 1 * HOUR, "Europe/Sarajevo"),
    ("Skopje", 1 * HOUR, "Europe/Skopje"),
    ("Stockholm", 1 * HOUR, "Europe/Stockholm"),
    ("Vienna", 1 * HOUR, "Europe/Vienna"),
    ("Warsaw", 1 * HOUR, "Europe/Warsaw"),
    ("West Central Africa", 1 * HOUR, "Africa/Algiers"),
    ("Zagreb", 1 * HOUR, "Europe/Zagreb"),
    ("Athens", 2 * HOUR, "Europe/Athens"),
    ("Bucharest", 2 * HOUR, "Europe/Bucharest"),
    ("Cairo", 2 * HOUR, "Africa/Cairo"),
    ("Harare", 2 * HOUR, "Africa/Harare"),
    ("Helsinki", 2 * HOUR, "Europe/Helsinki"),
    ("Jerusalem", 2 * HOUR, "Asia/Jerusalem"),
    ("Kyiv", 2 * HOUR, "Europe/Kiev"),
    ("Pretoria", 2 * HOUR, "Africa/Johannesburg"),
    ("Riga", 2 * HOUR, "Europe/Riga"),
    ("Sofia", 2 * HOUR, "Europe/Sofia"),
    ("Tallinn", 2 * HOUR, "Europe/Tallinn"),
    ("Vilnius", 2 * HOUR, "Europe/Vilnius"),
    ("Baghdad", 3 * HOUR, "Asia/Baghdad"),
    ("Istanbul", 3 * HOUR, "Europe/Istanbul"),
    ("Kuwait", 3 * HOUR, "Asia/Kuwait"),
    ("Minsk", 3 * HOUR, "Europe/Minsk"),
    ("Moscow", 3 * HOUR, "Europe/Moscow"),
    ("Nairobi", 3 * HOUR, "Africa/Nairobi"),
    ("Riyadh", 3 * HOUR, "Asia/Riyadh"),
    ("St. Petersburg", 3 * HOUR, "Europe/Moscow"),
    ("Tehran", 12600, "Asia/Tehran"),
    ("Abu Dhabi", 4 * HOUR, "Asia/Muscat"),
    ("Baku", 4 * HOUR, "Asia/Baku"),
    ("Muscat", 4 * HOUR, "Asia/Muscat"),
    ("Tbilisi", 4 * HOUR, "Asia/Tbilisi"),
    ("Yerevan", 4 * HOUR, "Asia/Yerevan"),
    ("Kabul", 16200, "Asia/Kabul"),
    ("Ekaterinburg", 5 * HOUR, "Asia/Yekaterinburg"),
    ("Islamabad", 5 * HOUR, "Asia/Karachi"),
    ("Karachi", 5 * HOUR, "Asia/Karachi"),
    ("Tashkent", 5 * HOUR, "Asia/Tashkent"),
    ("Chennai", 19800, "Asia/Kolkata"),
    ("Kolkata", 19800, "Asia/Kolkata"),
    ("Mumbai", 19800, "Asia/Kolkata"),
    ("New Delhi", 19800, "Asia/Kolkata"),
    ("Sri Jayawardenepura", 19800, "Asia/Colombo"),
    ("Kathmandu", 20700, "Asia/Kathmandu"),
    ("Dhaka", 6 * HOUR, "Asia/Dhaka"),
    ("Urumqi", 6 * HOUR, "Asia/Urumqi"),
    ("Rangoon", 23400, "Asia/Yangon"),
    ("Bangkok", 7 * HOUR, "Asia/Bangkok"),
    ("Hanoi", 7 * HOUR, "Asia/Bangkok"),
    ("Jakarta", 7 * HOUR, "Asia/Jakarta"),
    ("Krasnoyarsk", 7 * HOUR, "Asia/Krasnoyarsk"),
    ("Novosibirsk", 7 * HOUR, "Asia/Novosibirsk"),
    ("Beijing", 8 * HOUR, "Asia/Shanghai"),
    ("Chongqing", 8 * HOUR, "Asia/Shanghai"),
    ("Hong Kong", 8 * HOUR, "Asia/Hong_Kong"),
    ("Irkutsk", 8 * HOUR, "Asia/Irkutsk"),
    ("Kuala Lumpur", 8 * HOUR, "Asia/Kuala_Lumpur"),
    ("Perth", 8 * HOUR, "Australia/Perth"),
    ("Singapore", 8 * HOUR, "Asia/Singapore"),
    ("Taipei", 8 * HOUR, "Asia/Taipei"),
    ("Ulaanbaatar", 8 * HOUR, "Asia/Ulaanbaatar"),
    ("Osaka", 9 * HOUR, "Asia/Tokyo"),
    ("Sapporo", 9 * HOUR, "Asia/Tokyo"),
    ("Seoul", 9 * HOUR, "Asia/Seoul"),
    ("Tokyo", 9 * HOUR, "Asia/Tokyo"),
    ("Yakutsk", 9 * HOUR, "Asia/Yakutsk"),
    ("Adelaide", 34200, "Australia/Adelaide"),
    ("Darwin", 34200, "Australia/Darwin"),
    ("Brisbane", 10 * HOUR, "Australia/Brisbane"),
    ("Canberra", 10 * HOUR, "Australia/Melbourne"),
    ("Guam", 10 * HOUR, "Pacific/Guam"),
    ("Hobart", 10 * HOUR, "Australia/Hobart"),
    ("Melbourne", 10 * HOUR, "Australia/Melbourne"),
    ("Port Moresby", 10 * HOUR, "Pacific/Port_Moresby"),
    ("Sydney", 10 * HOUR, "Australia/Sydney"),
    ("Vladivostok", 10 * HOUR, "Asia/Vladivostok"),
    ("Magadan", 11 * HOUR, "Asia/Magadan"),
    ("New Caledonia", 11 * HOUR, "Pacific/Noumea"),
    ("Solomon Is.", 11 * HOUR, "Pacific/Guadalcanal"),
    ("Auckland", 12 * HOUR, "Pacific/Auckland"),
    ("Fiji", 12 * HOUR, "Pacific/Fiji"),
    ("Kamchatka", 12 * HOUR, "Asia/Kamchatka"),
    ("Marshall Is.", 12 * HOUR, "Pacific/Majuro"),
    ("Wellington", 12 * HOUR, "Pacific/Auckland"),
    ("Nuku'alofa", 13 * HOUR, "Pacific/Tongatapu"),
]

_ZONE_ENTRIES = {name: (offset, key) for name, offset, key in ZONE_TABLE}
_KEY_OFFSETS = {key: offset for _, offset, key in ZONE_TABLE}


class UnknownZoneError(ValueError):
    """Raised when an identifier or offset matches no known zone."""

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Unknown time zone: {identifier!r}")


@lru_cache(maxsize=None)
def all_zones() -> tuple[TimeZone, ...]:
    """
    Get every named zone, ordered by standard offset then name.

    Returns:
        Tuple of TimeZone handles
    """
    zones = [
        TimeZone(name=name, utc_offset=offset, tzinfo=ZoneInfo(key))
        for name, offset, key in ZONE_TABLE
    ]
    return tuple(sorted(zones))


def zone_names() -> list[str]:
    """Display names of all named zones, in all_zones() order."""
    return [zone.name for zone in all_zones()]


def zone_offset(tz: ZoneInfo) -> int:
    """
    Standard offset of a zone, in seconds.

    Keys listed in the zone table use the table offset; others go through
    standard_offset(). tzdata models some zones (Europe/Dublin) with a
    negative DST, which the rules alone would report as the summer offset.
    """
    if tz.key in _KEY_OFFSETS:
        return _KEY_OFFSETS[tz.key]
    return standard_offset(tz)


def lookup(identifier: str | Real) -> TimeZone:
    """
    Resolve an identifier to a TimeZone.

    Strings are matched against the display names first, then treated as
    IANA keys. Numbers are UTC offsets: hours when abs(value) <= 13,
    seconds otherwise; the first zone with that standard offset wins.

    Args:
        identifier: Display name, IANA key, or numeric offset

    Returns:
        Matching TimeZone

    Raises:
        UnknownZoneError: If nothing matches
        TypeError: If the identifier is neither a string nor a number
    """
    if isinstance(identifier, str):
        return _lookup_name(identifier)
    if isinstance(identifier, Real) and not isinstance(identifier, bool):
        if not math.isfinite(identifier):
            raise UnknownZoneError(identifier)
        return _lookup_offset(identifier)
    raise TypeError(f"Invalid zone identifier: {identifier!r}")


@lru_cache(maxsize=256)
def _lookup_name(name: str) -> TimeZone:
    entry = _ZONE_ENTRIES.get(name)
    if entry is not None:
        offset, key = entry
        return TimeZone(name=name, utc_offset=offset, tzinfo=ZoneInfo(key))

    try:
        tz = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise UnknownZoneError(name) from e

    return TimeZone(name=name, utc_offset=zone_offset(tz), tzinfo=tz)


@lru_cache(maxsize=64)
def _lookup_offset(offset: Real) -> TimeZone:
    seconds = offset * HOUR if abs(offset) <= 13 else offset
    seconds = int(round(seconds))

    for zone in all_zones():
        if zone.utc_offset == seconds:
            return zone

    raise UnknownZoneError(offset)
