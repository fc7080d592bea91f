"""Totals: net pay and cost to company."""

from decimal import Decimal
from typing import Mapping, Optional

from ..schemas import DeductionResult, Summary
from .amounts import ZERO, Number, round2, to_decimal, yearly_from_monthly


def summarize(
    gross_monthly: Optional[Number],
    deduction_results: Mapping[str, DeductionResult],
) -> Summary:
    """Combine statutory results with gross into the breakup totals.

    Yearly CTC is monthly CTC x 12. Ceilings and the ESIC cliff are applied
    once, at monthly granularity, and never re-evaluated per year.

    Returns:
        Summary with every figure rounded to cents. All zeros when there
        is no gross.
    """
    gross_monthly = to_decimal(gross_monthly)
    if not gross_monthly:
        return Summary.zero()

    total_deduction: Decimal = sum(
        (r.employee_amount for r in deduction_results.values()), ZERO
    )
    total_employer: Decimal = sum(
        (r.employer_amount for r in deduction_results.values()), ZERO
    )
    monthly_ctc = gross_monthly + total_employer

    return Summary(
        total_deduction=round2(total_deduction),
        total_employer_contribution=round2(total_employer),
        net_pay=round2(gross_monthly - total_deduction),
        monthly_ctc=round2(monthly_ctc),
        yearly_ctc=round2(yearly_from_monthly(monthly_ctc)),
    )
