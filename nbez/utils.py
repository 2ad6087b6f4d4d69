"""
Utility functions for parameter checks, dtype handling and number formatting.
"""

import math

import numpy as np

from .constants import DEFAULT_DTYPE
from .exceptions import DomainError


def check_t_bounds(t):
    """
    Ensure a curve parameter lies in the closed unit interval.

    Args:
        t: Curve parameter

    Raises:
        DomainError: If t is outside [0, 1] or NaN
    """
    # NaN fails both comparisons
    if not (0 <= t <= 1):
        raise DomainError(t)


def check_t_array_bounds(ts):
    """Array version of check_t_bounds; reports the first offending value."""
    ts = np.asarray(ts)
    bad = ~((ts >= 0) & (ts <= 1))
    if np.any(bad):
        raise DomainError(ts[bad].flat[0].item())


def resolve_dtype(values, dtype=None):
    """
    Pick the floating dtype used to store control points.

    Args:
        values: Array of the caller's input values
        dtype: Explicit dtype, or None to infer one from values

    Returns:
        np.dtype: A floating dtype (integers and booleans promote to float64)
    """
    if dtype is not None:
        dtype = np.dtype(dtype)
        if dtype.kind != 'f':
            raise TypeError(f"curve dtype must be a floating type, got {dtype}")
        return dtype
    values = np.asarray(values)
    if values.dtype.kind == 'f':
        return values.dtype
    return np.dtype(DEFAULT_DTYPE)


def format_number(value, format_spec='.3g'):
    """
    Format a number with a proper Unicode minus sign for plot labels.

    Args:
        value: Numeric value to format
        format_spec: Format specification (e.g., '.1f', '.2f')

    Returns:
        str: Formatted string with proper minus sign
    """
    if isinstance(value, (int, float, np.floating, np.integer)) and not math.isnan(value):
        if value < 0:
            # U+2212 instead of hyphen-minus
            return '−' + format(abs(value), format_spec)
        return format(value, format_spec)
    return str(value)
