"""
zoned-time

Timezone-aware conversions for datetime values and pandas columns, with a
default zone consulted when no explicit zone is given.
"""

from zoned_time.config_loader import ConfigLoader, load_default_zone
from zoned_time.data_processing import (
    convert_series_to_current_zone,
    convert_series_to_zone,
    reinterpret_series_in_current_zone,
    reinterpret_series_in_zone,
)
from zoned_time.models import TimeZone
from zoned_time.registry import UnknownZoneError, all_zones, lookup, zone_names
from zoned_time.zones import (
    NoDefaultZoneError,
    ZoneContext,
    convert_to_current_zone,
    convert_to_zone,
    default_context,
    get_default_zone,
    reinterpret_in_current_zone,
    reinterpret_in_zone,
    reset_default_zone,
    resolve,
    set_default_zone,
)

__version__ = "0.1.0"
__all__ = [
    "TimeZone",
    "ZoneContext",
    "UnknownZoneError",
    "NoDefaultZoneError",
    "ConfigLoader",
    "load_default_zone",
    "lookup",
    "all_zones",
    "zone_names",
    "default_context",
    "get_default_zone",
    "set_default_zone",
    "reset_default_zone",
    "resolve",
    "convert_to_zone",
    "convert_to_current_zone",
    "reinterpret_in_zone",
    "reinterpret_in_current_zone",
    "convert_series_to_zone",
    "convert_series_to_current_zone",
    "reinterpret_series_in_zone",
    "reinterpret_series_in_current_zone",
]
