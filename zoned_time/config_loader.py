"""
Configuration loader for zoned-time.

Supports loading the default time zone from:
1. config.ini file, [Settings] default_zone
2. Environment variables (ZONED_TIME_DEFAULT_ZONE, then TZ)
"""

import configparser
import logging
import os
from typing import Optional

from zoned_time.models import TimeZone
from zoned_time.registry import UnknownZoneError
from zoned_time.zones import ZoneContext, default_context

logger = logging.getLogger(__name__)

DEFAULT_ZONE_ENV = 'ZONED_TIME_DEFAULT_ZONE'
SYSTEM_TZ_ENV = 'TZ'
SYSTEM_TZ_SOURCE = f"environment variable {SYSTEM_TZ_ENV}"


class ConfigLoader:
    """Load configuration from various sources."""

    def __init__(self, config_file: str = "config.ini"):
        """
        Initialize config loader.

        Args:
            config_file: Path to config file (default: config.ini)
        """
        self.config_file = config_file
        self.config = None

    def load_from_file(self) -> bool:
        """
        Load configuration from INI file.

        Returns:
            True if file was loaded successfully, False otherwise
        """
        if not os.path.exists(self.config_file):
            return False

        self.config = configparser.ConfigParser()
        self.config.read(self.config_file)
        return True

    def get_default_zone_source(self) -> tuple[Optional[str], Optional[str]]:
        """
        Find the configured default zone and where it came from.

        Returns:
            Tuple of (zone name, source description); both None when unset
        """
        # Try config file first
        if self.config and self.config.has_section('Settings'):
            name = self.config.get('Settings', 'default_zone', fallback='').strip()
            if name:
                return name, f"{self.config_file} [Settings] default_zone"

        # Try environment variables
        name = (os.environ.get(DEFAULT_ZONE_ENV) or '').strip()
        if name:
            return name, f"environment variable {DEFAULT_ZONE_ENV}"

        # TZ may carry glibc's ':' prefix (':UTC', ':/etc/localtime')
        name = (os.environ.get(SYSTEM_TZ_ENV) or '').strip().lstrip(':')
        if name:
            return name, SYSTEM_TZ_SOURCE

        return None, None

    def get_default_zone_name(self) -> Optional[str]:
        """Configured default zone name, or None."""
        name, _ = self.get_default_zone_source()
        return name


def load_default_zone(
    config_file: str = "config.ini",
    context: Optional[ZoneContext] = None
) -> Optional[TimeZone]:
    """
    Convenience function to apply the configured default zone.

    Args:
        config_file: Path to config file
        context: ZoneContext to update (default: module context)

    Returns:
        The zone that was set, or None if nothing is configured

    Raises:
        ValueError: If the configured zone is not a known time zone. An
            unresolvable TZ value counts as not configured instead.
    """
    loader = ConfigLoader(config_file)
    loader.load_from_file()

    name, source = loader.get_default_zone_source()
    if name is None:
        logger.debug("No default time zone configured")
        return None

    context = context or default_context
    try:
        zone = context.set_default_zone(name)
    except UnknownZoneError as e:
        if source == SYSTEM_TZ_SOURCE:
            # POSIX rule strings and file paths are valid TZ values but not zone names
            logger.debug("Ignoring unresolvable %s value %r", SYSTEM_TZ_ENV, name)
            return None
        raise ValueError(f"Invalid time zone {name!r} from {source}") from e

    logger.debug("Loaded default time zone %s from %s", zone, source)
    return zone
