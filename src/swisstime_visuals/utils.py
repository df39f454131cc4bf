"""
Utility functions for the SwissTime visual-physics core.

This module provides scalar/array interop and time conversion helpers shared
by the solar, terminator and clock modules.
"""

import functools
import inspect
from datetime import datetime

import numpy as np
import pytz


def is_scalar_input(*values):
    """
    Detect if all inputs are plain scalars (no arrays).

    Args:
        *values: Variable number of numbers or arrays to check

    Returns:
        bool: True if no value has ndim > 0
    """
    return all(np.ndim(v) == 0 for v in values)


def unwrap_scalar(result, was_scalar):
    """
    Convert a 0-d array result back to a Python float if the inputs were scalar.

    Args:
        result: Scalar or array produced by a vectorized computation
        was_scalar: Boolean indicating if the original inputs were scalars

    Returns:
        float when was_scalar, otherwise the array unchanged
    """
    if not was_scalar:
        return result
    return float(np.asarray(result))


def _is_numeric(value):
    return isinstance(value, (int, float, np.ndarray, np.number, list)) and not isinstance(value, bool)


def scalar_compatible(func):
    """
    Decorator to make vectorized functions return floats for scalar inputs.

    Numeric arguments, positional or keyword, are converted to float arrays
    before the call, so the wrapped function can always rely on numpy semantics.

    Usage:
        @scalar_compatible
        def some_function(x, y):
            # Function always receives arrays
            return array_result
        # Function returns a float if x and y were plain numbers
    """
    signature = inspect.signature(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        bound = signature.bind(*args, **kwargs)
        numeric = [v for v in bound.arguments.values() if _is_numeric(v)]
        was_scalar = is_scalar_input(*numeric)

        for name, value in bound.arguments.items():
            if _is_numeric(value):
                bound.arguments[name] = np.asarray(value, dtype=float)

        result = func(*bound.args, **bound.kwargs)
        return unwrap_scalar(result, was_scalar)

    return wrapper


def to_utc_datetime(instant):
    """
    Normalize an instant to an aware UTC datetime.

    Args:
        instant: Aware datetime, naive datetime (taken as UTC) or POSIX seconds

    Returns:
        datetime with tzinfo=UTC
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            return pytz.utc.localize(instant)
        return instant.astimezone(pytz.utc)
    return datetime.fromtimestamp(float(instant), tz=pytz.utc)


def to_zone(instant, zone):
    """
    Convert an instant to civil time in the given zone.

    Args:
        instant: Anything accepted by to_utc_datetime
        zone: pytz timezone object or IANA identifier

    Returns:
        Aware datetime in that zone
    """
    if isinstance(zone, str):
        zone = pytz.timezone(zone)
    return to_utc_datetime(instant).astimezone(zone)


def instant_key(instant):
    """Hashable POSIX-seconds key for an instant (used by render caches)."""
    return to_utc_datetime(instant).timestamp()
