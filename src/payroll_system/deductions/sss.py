"""SSS employee contribution.

The schedule is a step function over monthly salary: below 3,250 the
contribution is 135.00, each following 500-wide bracket adds 22.50 and
from 24,750 up the contribution stays at 1,125.00.
"""

from __future__ import annotations

from bisect import bisect_right

from ..common.validators import require_non_negative_salary

# (bracket_lower_bound, contribution), ordered by lower bound.
# A salary falls into the last row whose lower bound is <= salary.
SSS_TABLE: tuple[tuple[float, float], ...] = (
    (0.0, 135.00),
    (3_250.0, 157.50),
    (3_750.0, 180.00),
    (4_250.0, 202.50),
    (4_750.0, 225.00),
    (5_250.0, 247.50),
    (5_750.0, 270.00),
    (6_250.0, 292.50),
    (6_750.0, 315.00),
    (7_250.0, 337.50),
    (7_750.0, 360.00),
    (8_250.0, 382.50),
    (8_750.0, 405.00),
    (9_250.0, 427.50),
    (9_750.0, 450.00),
    (10_250.0, 472.50),
    (10_750.0, 495.00),
    (11_250.0, 517.50),
    (11_750.0, 540.00),
    (12_250.0, 562.50),
    (12_750.0, 585.00),
    (13_250.0, 607.50),
    (13_750.0, 630.00),
    (14_250.0, 652.50),
    (14_750.0, 675.00),
    (15_250.0, 697.50),
    (15_750.0, 720.00),
    (16_250.0, 742.50),
    (16_750.0, 765.00),
    (17_250.0, 787.50),
    (17_750.0, 810.00),
    (18_250.0, 832.50),
    (18_750.0, 855.00),
    (19_250.0, 877.50),
    (19_750.0, 900.00),
    (20_250.0, 922.50),
    (20_750.0, 945.00),
    (21_250.0, 967.50),
    (21_750.0, 990.00),
    (22_250.0, 1_012.50),
    (22_750.0, 1_035.00),
    (23_250.0, 1_057.50),
    (23_750.0, 1_080.00),
    (24_250.0, 1_102.50),
    (24_750.0, 1_125.00),
)

_LOWER_BOUNDS = tuple(lower for lower, _ in SSS_TABLE)


def calculate_sss_contribution(monthly_salary: float) -> float:
    """Return the employee's SSS contribution for a monthly basic salary."""
    salary = require_non_negative_salary(monthly_salary)
    index = bisect_right(_LOWER_BOUNDS, salary) - 1
    return SSS_TABLE[index][1]
