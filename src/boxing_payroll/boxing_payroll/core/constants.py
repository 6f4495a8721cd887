"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PERCENT_DIVISOR = 100
CURRENCY_SYMBOL = "$"
