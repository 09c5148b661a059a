# Time arithmetic
MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR

# Zone that never needs a tz database lookup
UTC_ZONE_ID = "UTC"

# Daytime window, civil hours [start, end)
DAYTIME_START_HOUR = 6
DAYTIME_END_HOUR = 18

# Degrees of longitude per hour of offset for open-ocean estimates
DEGREES_PER_OFFSET_HOUR = 15

# UNIX timestamps with exactly this many digits are seconds, others millis
UNIX_SECONDS_DIGITS = 10

# Years 1-9999 with a day of margin for zone offsets
MIN_PLAUSIBLE_EPOCH_MILLIS = -62135510400000
MAX_PLAUSIBLE_EPOCH_MILLIS = 253402214399999

# Display placeholders
INVALID_INPUT_TEXT = "invalid input"
INVALID_TIME_TEXT = "--:--:--"
INVALID_DATE_TEXT = "--"
SYNCED_LABEL = "synced"
ELAPSED_LABEL = "elapsed"

# Default civil time offered by the converter
DEFAULT_CONVERTER_TIME = "08:00"

# Converter source zones: label, IANA id, abbreviation
COMMON_TIMEZONES = [
    {"label": "Pacific Time (PT)", "value": "America/Los_Angeles", "abbr": "PST/PDT"},
    {"label": "Mountain Time (MT)", "value": "America/Denver", "abbr": "MST/MDT"},
    {"label": "Central Time (CT)", "value": "America/Chicago", "abbr": "CST/CDT"},
    {"label": "Eastern Time (ET)", "value": "America/New_York", "abbr": "EST/EDT"},
    {"label": "Beijing Time (CST)", "value": "Asia/Shanghai", "abbr": "CST"},
    {"label": "Tokyo Time (JST)", "value": "Asia/Tokyo", "abbr": "JST"},
    {"label": "Seoul Time (KST)", "value": "Asia/Seoul", "abbr": "KST"},
    {"label": "London Time (GMT)", "value": "Europe/London", "abbr": "GMT/BST"},
    {"label": "Paris Time (CET)", "value": "Europe/Paris", "abbr": "CET/CEST"},
    {"label": "UTC", "value": "UTC", "abbr": "UTC"},
]
