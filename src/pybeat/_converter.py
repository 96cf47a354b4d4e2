"""Conversion of Unix millisecond timestamps to Internet Time.

Each layer builds on the one before it:

* length conversion treats a timestamp as an elapsed span and only changes units;
* daily conversion shifts an instant into the UTC+01:00 frame and wraps it to
  a single day at the requested decimal precision;
* display formatting renders a daily conversion as a fixed-width string.
"""

from __future__ import annotations

import numbers
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from fractions import Fraction

from pybeat._constants import (
    BEAT,
    BEAT_DIGITS,
    BEATS_PER_DAY,
    CENTIBEAT,
    DETAIL_BEATS,
    DETAIL_CENTIBEATS,
    UTC_OFFSET,
)
from pybeat._errors import ERR_MSG_INVALID_TIMESTAMP, InvalidTimestampError
from pybeat._utils import (
    Timestamp,
    exact_timestamp,
    log_rejection,
    validate_detail,
    validate_timestamp,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


# --- Length conversion ---


def _in_units(timestamp: Timestamp, unit: int) -> float | Fraction | Decimal:
    validate_timestamp(timestamp)
    if isinstance(timestamp, numbers.Integral):
        try:
            return int(timestamp) / unit
        except OverflowError:
            # quotient past float range; stay exact instead
            return Fraction(int(timestamp), unit)
    return timestamp / unit


def in_beats(timestamp: Timestamp) -> float | Fraction | Decimal:
    """Express a duration in milliseconds as a fractional number of beats.

    No timezone shift or wrapping is applied. The result keeps the numeric
    family of the input: ints and floats give a float, ``Fraction`` and
    ``Decimal`` give the same type back. Integers too large for a float
    quotient give an exact ``Fraction``.
    """
    return _in_units(timestamp, BEAT)


def in_centibeats(timestamp: Timestamp) -> float | Fraction | Decimal:
    """Express a duration in milliseconds as a fractional number of centibeats."""
    return _in_units(timestamp, CENTIBEAT)


# --- Daily conversion ---


def convert(detail: int, timestamp: Timestamp) -> int:
    """Convert an instant to its Internet Time of day at ``10**-detail`` beat precision.

    Args:
        detail: Number of sub-beat decimal digits folded into the result.
            0 yields beats, 2 yields centibeats.
        timestamp: Milliseconds since the Unix epoch.

    Returns:
        An integer in ``[0, 1000 * 10**detail)``.

    Raises:
        InvalidDetailError: If detail is not a non-negative int.
        InvalidTimestampError: If timestamp is not a finite real number.
    """
    validate_detail(detail)
    exact = exact_timestamp(timestamp)
    scale = 10**detail
    # floor division and % are both floored, so pre-epoch instants stay in range
    return ((exact + UTC_OFFSET) * scale // BEAT) % (BEATS_PER_DAY * scale)


def convert_beats(timestamp: Timestamp) -> int:
    return convert(DETAIL_BEATS, timestamp)


def convert_centibeats(timestamp: Timestamp) -> int:
    return convert(DETAIL_CENTIBEATS, timestamp)


# --- Display formatting ---


def display(detail: int, timestamp: Timestamp) -> str:
    """Render the Internet Time of day as a zero-padded string.

    The digit string is always ``3 + detail`` characters wide. When detail is
    positive a ``.`` separates whole beats from the fractional digits, so
    ``display(2, t)`` looks like ``"333.25"``.
    """
    digits = str(convert(detail, timestamp)).zfill(BEAT_DIGITS + detail)
    if detail == 0:
        return digits
    return f"{digits[:-detail]}.{digits[-detail:]}"


def display_beats(timestamp: Timestamp) -> str:
    return display(DETAIL_BEATS, timestamp)


def display_centibeats(timestamp: Timestamp) -> str:
    return display(DETAIL_CENTIBEATS, timestamp)


def display_at(detail: int, timestamp: Timestamp) -> str:
    """Render the conventional ``@``-prefixed form, e.g. ``"@333"``."""
    return "@" + display(detail, timestamp)


# --- Interop ---


def timestamp_ms(dt: datetime) -> int:
    """Convert a datetime to whole milliseconds since the Unix epoch.

    Naive datetimes are taken to be UTC. Sub-millisecond precision is floored.
    """
    if not isinstance(dt, datetime):
        raise log_rejection(InvalidTimestampError(
            ERR_MSG_INVALID_TIMESTAMP,
            f"expected datetime, got {type(dt).__name__}",
        ))
    if dt.utcoffset() is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - _EPOCH) // _MILLISECOND
