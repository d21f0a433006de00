"""
Column-wise zone conversions for pandas data.
"""

from datetime import timezone
from typing import Optional

import numpy as np
import pandas as pd

from zoned_time.zones import ZoneArg, ZoneContext, default_context


def _as_datetime_series(values) -> pd.Series:
    """
    Coerce input to a datetime64 Series.

    Numeric values are read as Unix timestamps in seconds.
    """
    series = values if isinstance(values, pd.Series) else pd.Series(values)

    if pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series):
        return pd.to_datetime(series, unit='s')
    if not pd.api.types.is_datetime64_any_dtype(series):
        return pd.to_datetime(series)
    return series


def convert_series_to_zone(
    values,
    zone: ZoneArg,
    context: Optional[ZoneContext] = None
) -> pd.Series:
    """
    Render every instant of a column in another zone.

    Args:
        values: Series (or array-like) of datetimes, strings, or Unix timestamps
        zone: Target zone
        context: ZoneContext used to resolve the zone (default: module context)

    Returns:
        Timezone-aware Series with the same instants and index
    """
    tz = (context or default_context).resolve(zone)
    series = _as_datetime_series(values)

    if series.dt.tz is None:
        series = series.dt.tz_localize(timezone.utc)

    return series.dt.tz_convert(tz.key)


def reinterpret_series_in_zone(
    values,
    zone: ZoneArg,
    context: Optional[ZoneContext] = None
) -> pd.Series:
    """
    Keep every wall-clock value of a column and attach another zone.

    Ambiguous wall times take their first occurrence; wall times skipped by a
    DST transition are shifted forward to the first valid time.

    Args:
        values: Series (or array-like) of datetimes, strings, or Unix timestamps
        zone: Target zone
        context: ZoneContext used to resolve the zone (default: module context)

    Returns:
        Timezone-aware Series with the same wall-clock values and index
    """
    tz = (context or default_context).resolve(zone)
    series = _as_datetime_series(values)

    if series.dt.tz is not None:
        series = series.dt.tz_localize(None)

    # True marks the DST reading, i.e. the first occurrence of a repeated hour
    first_occurrence = np.ones(len(series), dtype=bool)
    return series.dt.tz_localize(
        tz.key,
        ambiguous=first_occurrence,
        nonexistent='shift_forward'
    )


def convert_series_to_current_zone(values, context: Optional[ZoneContext] = None) -> pd.Series:
    """convert_series_to_zone() using the context's default zone."""
    context = context or default_context
    return convert_series_to_zone(values, context.require_default_zone(), context)


def reinterpret_series_in_current_zone(values, context: Optional[ZoneContext] = None) -> pd.Series:
    """reinterpret_series_in_zone() using the context's default zone."""
    context = context or default_context
    return reinterpret_series_in_zone(values, context.require_default_zone(), context)
