"""pybeat - Convert Unix timestamps to Internet Time beats."""

from __future__ import annotations

try:
    from pybeat._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from loguru import logger

from pybeat._constants import BEAT, CENTIBEAT, DETAIL_BEATS, DETAIL_CENTIBEATS
from pybeat._converter import (
    convert,
    convert_beats,
    convert_centibeats,
    display,
    display_at,
    display_beats,
    display_centibeats,
    in_beats,
    in_centibeats,
    timestamp_ms,
)
from pybeat._errors import InternetTimeError, InvalidDetailError, InvalidTimestampError

__all__ = [
    "BEAT",
    "CENTIBEAT",
    "DETAIL_BEATS",
    "DETAIL_CENTIBEATS",
    "convert",
    "convert_beats",
    "convert_centibeats",
    "display",
    "display_at",
    "display_beats",
    "display_centibeats",
    "in_beats",
    "in_centibeats",
    "timestamp_ms",
    "InternetTimeError",
    "InvalidDetailError",
    "InvalidTimestampError",
]

# Silent unless the application calls logger.enable("pybeat")
logger.disable("pybeat")
