"""Domain constants for savings-rate analytics."""

DEFAULT_COMMODITY = "USD"

DEFAULT_EXPENSE_PREFIX = "Expenses"
DEFAULT_INCOME_PREFIX = "Income"
DEFAULT_LIABILITY_PREFIX = "Liabilities"

# Months are modeled uniformly; span boundaries are never read.
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365

FIRE_MULTIPLE = 25

# Wealth benchmark: income * 2.3, halved for AAW and doubled for PAW.
WEALTH_FACTOR_NUMERATOR = 23
WEALTH_FACTOR_DENOMINATOR = 10
AAW_DIVISOR = 2
PAW_MULTIPLIER = 2

CAUTION_RATE_FLOOR = 0.0
AFFIRMATIVE_RATE_FLOOR = 50.0


__all__ = [
    "DEFAULT_COMMODITY",
    "DEFAULT_EXPENSE_PREFIX",
    "DEFAULT_INCOME_PREFIX",
    "DEFAULT_LIABILITY_PREFIX",
    "DAYS_PER_MONTH",
    "DAYS_PER_YEAR",
    "FIRE_MULTIPLE",
    "WEALTH_FACTOR_NUMERATOR",
    "WEALTH_FACTOR_DENOMINATOR",
    "AAW_DIVISOR",
    "PAW_MULTIPLIER",
    "CAUTION_RATE_FLOOR",
    "AFFIRMATIVE_RATE_FLOOR",
]
