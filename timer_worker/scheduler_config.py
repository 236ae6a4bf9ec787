"""
Scheduler Configuration for Interval Timers

Policy constants shared by the decision logic and the alarm runtime.
"""

# Re-check period of the repeating alarm (ms). A due timer is late by at most one tick.
ALARM_REPEAT_MILLIS = 300000  # 5 minutes

# Past this time of day a timer is no longer held in the night window (seconds of day)
FORCE_WAKE_TIME = ((11 * 60) + 30) * 60  # 11:30

# Added to every reset so a fire never lands exactly on a window boundary (ms)
RESET_EPSILON_MILLIS = 3

# Minimum time the wake assertion stays held around a notification (seconds)
WAKE_HOLD_SECONDS = 1.0

# How often stored timers are reconciled with the alarm facility (seconds)
SYNC_INTERVAL_SECONDS = 60

# Defaults for a new timer
DEFAULT_INTERVAL_SECS = 4 * 60 * 60
DEFAULT_NIGHT_START = 0
DEFAULT_NIGHT_STOP = 8 * 60 * 60
DEFAULT_NAME = "Timer"

# Indicator light profile used when a notification asks for it
INDICATOR_ON_MS = 250
INDICATOR_OFF_MS = 1250
INDICATOR_ARGB = 0xff2222ff

SECONDS_PER_DAY = 24 * 60 * 60
