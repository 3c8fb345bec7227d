"""Utility constants for elapsed.

Time unit constants represent durations in milliseconds.
Months and years are fixed approximations (30 days, 12 months).
"""

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60000
HOUR = 3600000
DAY = 86400000
MONTH = 2592000000
YEAR = 31104000000
