"""Application-wide constants.

This module centralizes magic numbers used by the reporting layer.
For environment-specific configuration, see config.py.
"""

# =============================================================================
# Date Ranges
# =============================================================================

# Last instant of a reporting day: 23:59:59.999
END_OF_DAY_MICROSECOND: int = 999_000

# Monthly windows end on the requested day and start this many days earlier
MONTHLY_WINDOW_DAYS: int = 31

# Separators accepted between day, month and year, in order of preference
DATE_SEPARATORS: tuple[str, ...] = ("-", "/")

# Years must be written out in full; "01-01-23" is not year 23 or 1923
MIN_YEAR: int = 1000

# =============================================================================
# Metric Formatting
# =============================================================================

# Decimal places for ratios, percentages and averages
METRIC_DECIMALS: int = 2
