"""Statutory deduction calculators.

Each calculator is a pure function of the monthly basic salary and rejects
negative input with ``InvalidArgumentError``.
"""

from .pagibig import PagIbigContribution, calculate_pagibig_contribution
from .philhealth import calculate_employee_share, calculate_employer_share, calculate_monthly_premium
from .sss import calculate_sss_contribution
from .withholding_tax import calculate_withholding_tax

__all__ = [
    "PagIbigContribution",
    "calculate_employee_share",
    "calculate_employer_share",
    "calculate_monthly_premium",
    "calculate_pagibig_contribution",
    "calculate_sss_contribution",
    "calculate_withholding_tax",
]
