"""Goal defaults and tunables shared by the projection engine."""

from datetime import date

# The default goal, in base-currency (USD) units.
TARGET_AMOUNT_USD = 1_000_000

TARGET_DATE = date(2035, 1, 1)

# Long-run equity average, annual percent.
DEFAULT_INVESTMENT_INTEREST_RATE = 8.0

# Contributions are monthly; compounding defaults to the same cadence.
PERIODS_PER_YEAR = 12

DAYS_PER_YEAR = 365.25

# Bisection bounds for years_to_target.
YEARS_TO_TARGET_HORIZON = 100.0
YEARS_TO_TARGET_TOLERANCE = 0.01

# "On track" when the needed monthly contribution is below this share of
# current net worth. Business heuristic, not a derived threshold.
ON_TRACK_CONTRIBUTION_RATIO = 0.1

MILESTONES = (
    10_000,
    25_000,
    50_000,
    100_000,
    250_000,
    500_000,
    750_000,
    1_000_000,
)
