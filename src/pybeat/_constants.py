"""Unit constants for Internet Time conversion.

All durations are expressed in milliseconds, the unit of the input timestamps.
"""

DAY = 24 * 60 * 60 * 1000
"""Milliseconds in one mean solar day."""

BEATS_PER_DAY = 1000

BEAT = DAY // BEATS_PER_DAY
"""Milliseconds in one beat (86 400)."""

CENTIBEAT = BEAT // 100
"""Milliseconds in one centibeat (864)."""

UTC_OFFSET = 60 * 60 * 1000
"""Shift from UTC to the UTC+01:00 Internet Time reference frame."""

BEAT_DIGITS = 3
"""Width of the whole-beat part of a display string."""

DETAIL_BEATS = 0
DETAIL_CENTIBEATS = 2
