"""Conversion constants for time spans."""

SECONDS_PER_MINUTE = 60.0
"""Length of one minute in seconds."""

SECONDS_PER_HOUR = 3600.0
"""Length of one hour in seconds."""

HOURS_TOKEN = "%h"
"""Format template token replaced with the hours component."""

MINUTES_TOKEN = "%m"
"""Format template token replaced with the minutes component."""

SECONDS_TOKEN = "%s"
"""Format template token replaced with the seconds component."""
