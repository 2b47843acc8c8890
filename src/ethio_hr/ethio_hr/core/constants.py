"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

EARTH_RADIUS_METERS = 6_371_000
DEFAULT_SITE_RADIUS_METERS = 100.0

DEFAULT_WORKDAY_END = time(18, 0)

EMPLOYEE_PENSION_RATE = 0.07
EMPLOYER_PENSION_RATE = 0.11

# Deduction units charged per reconciled day.
FULL_DAY_DEDUCTION = 1.0
HALF_DAY_DEDUCTION = 0.5
NO_DEDUCTION = 0.0

