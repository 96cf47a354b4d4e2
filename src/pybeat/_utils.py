"""Argument validation and exact-number coercion helpers."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from fractions import Fraction

from loguru import logger

from pybeat._errors import (
    ERR_MSG_INVALID_DETAIL,
    ERR_MSG_INVALID_TIMESTAMP,
    InternetTimeError,
    InvalidDetailError,
    InvalidTimestampError,
)

Timestamp = numbers.Real | Decimal
"""Milliseconds since the Unix epoch."""


def log_rejection(error: InternetTimeError) -> InternetTimeError:
    """Log the internal details of a rejected argument and return the error."""
    logger.debug("rejected argument: {}", error.internal())
    return error


def validate_detail(detail: int) -> None:
    """Validate a detail level (number of sub-beat decimal digits)."""
    if isinstance(detail, bool) or not isinstance(detail, int):
        raise log_rejection(InvalidDetailError(
            ERR_MSG_INVALID_DETAIL,
            f"detail level {detail!r} has type {type(detail).__name__}, expected int",
        ))
    if detail < 0:
        raise log_rejection(InvalidDetailError(
            ERR_MSG_INVALID_DETAIL,
            f"detail level {detail} is negative",
        ))


def validate_timestamp(timestamp: Timestamp) -> None:
    """Reject non-numeric and non-finite timestamps."""
    if isinstance(timestamp, bool) or not isinstance(timestamp, (numbers.Real, Decimal)):
        raise log_rejection(InvalidTimestampError(
            ERR_MSG_INVALID_TIMESTAMP,
            f"timestamp {timestamp!r} has type {type(timestamp).__name__}, expected a real number",
        ))

    # Rationals are always finite; floats and decimals may be NaN or infinite
    if isinstance(timestamp, numbers.Rational):
        return
    if isinstance(timestamp, Decimal):
        finite = timestamp.is_finite()
    else:
        finite = math.isfinite(timestamp)
    if not finite:
        raise log_rejection(InvalidTimestampError(
            ERR_MSG_INVALID_TIMESTAMP,
            f"timestamp {timestamp!r} is not finite",
        ))


def exact_timestamp(timestamp: Timestamp) -> int | Fraction:
    """Return the timestamp as an exact ``int`` or ``Fraction``.

    Integral values stay integers; every other real is converted without
    rounding, so a float contributes exactly the binary value it holds.
    """
    validate_timestamp(timestamp)
    if isinstance(timestamp, numbers.Integral):
        return int(timestamp)
    try:
        return Fraction(timestamp)
    except (TypeError, ValueError, OverflowError) as exc:
        raise log_rejection(InvalidTimestampError(
            ERR_MSG_INVALID_TIMESTAMP,
            f"timestamp {timestamp!r} cannot be represented exactly",
            wrapped=exc,
        )) from exc
