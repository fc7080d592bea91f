"""calc - Salary breakup computation.

Scope:
- Percentage-of-amount primitive with half-up cent rounding (amounts.py)
- Earning component amounts, HRA as a share of Basic (earnings.py)
- PF and ESIC employee/employer shares with wage ceilings (statutory.py)
- Net pay and cost-to-company totals (aggregate.py)
- Display rows and chart series for a full breakup (breakup.py)

Constraints:
- Pure calculation - no config file or template file access
- Every output is a function of (template, monthly gross, StatutoryConfig)
- Yearly figures are monthly x 12; ceilings apply at monthly granularity only

Known limitation:
    Only "PF" and "ESIC" deductions are computed. Any other deduction name
    in a template is skipped unless a StatutoryRule is registered for it.

Usage:
    from salarycalc.sdk.calc import compute_breakup

    breakup = compute_breakup(template, gross_monthly=20000)
    breakup.summary.net_pay  # -> Decimal("17550.00")
"""

from .amounts import (
    amount_from_percentage,
    format_percentage,
    monthly_from_yearly,
    round2,
    to_decimal,
    yearly_from_monthly,
)
from .earnings import compute_earning_amounts
from .statutory import (
    DEFAULT_RULES,
    ESICRule,
    PFRule,
    StatutoryContext,
    StatutoryRule,
    compute_deductions,
    compute_employer_contributions,
    compute_statutory,
    pf_base,
)
from .aggregate import summarize
from .breakup import compute_breakup

__all__ = [
    # Amounts
    "amount_from_percentage",
    "format_percentage",
    "monthly_from_yearly",
    "round2",
    "to_decimal",
    "yearly_from_monthly",
    # Earnings
    "compute_earning_amounts",
    # Statutory
    "DEFAULT_RULES",
    "ESICRule",
    "PFRule",
    "StatutoryContext",
    "StatutoryRule",
    "compute_deductions",
    "compute_employer_contributions",
    "compute_statutory",
    "pf_base",
    # Totals
    "summarize",
    "compute_breakup",
]
