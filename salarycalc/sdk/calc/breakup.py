"""Full salary breakup: earnings, statutory amounts, totals and display rows."""

import logging
from decimal import Decimal
from typing import List, Mapping, Optional

from ..schemas import (
    ChartSeries,
    CompensationTemplate,
    DeductionResult,
    DeductionRow,
    EarningRow,
    SalaryBreakup,
    StatutoryConfig,
)
from .aggregate import summarize
from .amounts import Number, format_percentage, to_decimal, yearly_from_monthly
from .earnings import compute_earning_amounts
from .statutory import StatutoryRule, compute_statutory

logger = logging.getLogger(__name__)


def compute_breakup(
    template: Optional[CompensationTemplate],
    gross_monthly: Optional[Number],
    config: Optional[StatutoryConfig] = None,
    rules: Optional[Mapping[str, StatutoryRule]] = None,
) -> SalaryBreakup:
    """Compute the complete breakup for a template and monthly gross.

    Pure function of its inputs. No template or no gross gives an empty
    breakup with zero totals. Negative gross is not rejected; it flows
    through the arithmetic as-is.

    Args:
        template: Compensation template (None if none selected yet)
        gross_monthly: Monthly gross pay
        config: Wage ceilings (default: StatutoryConfig())
        rules: Deduction name -> rule (default: PF and ESIC)

    Returns:
        SalaryBreakup view model
    """
    gross_monthly = to_decimal(gross_monthly)
    gross_yearly = yearly_from_monthly(gross_monthly) if gross_monthly is not None else None

    if template is None or not gross_monthly:
        return SalaryBreakup(
            template=template.name if template else None,
            gross_monthly=gross_monthly,
            gross_yearly=gross_yearly,
        )

    if gross_monthly < 0:
        logger.warning(f"Negative gross {gross_monthly} for {template.name}; computing as entered")

    earning_amounts = compute_earning_amounts(template, gross_monthly)
    deduction_results = compute_statutory(template, gross_monthly, earning_amounts, config, rules)

    return SalaryBreakup(
        template=template.name,
        gross_monthly=gross_monthly,
        gross_yearly=gross_yearly,
        earning_amounts=earning_amounts,
        deduction_results=deduction_results,
        earnings=build_earning_rows(template, earning_amounts),
        deductions=build_deduction_rows(deduction_results, employer=False),
        employer_contributions=build_deduction_rows(deduction_results, employer=True),
        summary=summarize(gross_monthly, deduction_results),
        chart=build_chart_series(earning_amounts, deduction_results),
    )


def build_earning_rows(
    template: CompensationTemplate,
    earning_amounts: Mapping[str, Decimal],
) -> List[EarningRow]:
    components = {c.name: c for c in template.earning_components}
    rows = []
    for name, amount in earning_amounts.items():
        component = components.get(name)
        rows.append(EarningRow(
            name=name,
            percentage_label=format_percentage(component.percentage if component else None),
            monthly_amount=amount,
            yearly_amount=yearly_from_monthly(amount),
        ))
    return rows


def build_deduction_rows(
    deduction_results: Mapping[str, DeductionResult],
    employer: bool = False,
) -> List[DeductionRow]:
    """Rows for the employee deductions, or the employer contributions."""
    rows = []
    for name, result in deduction_results.items():
        if employer:
            label, amount = result.employer_percentage_label, result.employer_amount
        else:
            label, amount = result.percentage_label, result.employee_amount
        rows.append(DeductionRow(
            name=name,
            percentage_label=label,
            monthly_amount=amount,
            yearly_amount=yearly_from_monthly(amount),
        ))
    return rows


def build_chart_series(
    earning_amounts: Mapping[str, Decimal],
    deduction_results: Mapping[str, DeductionResult],
) -> ChartSeries:
    """Pie chart series: every earning, then every employee deduction."""
    labels = [name.upper() for name in earning_amounts]
    values = list(earning_amounts.values())

    labels += [name.upper() for name in deduction_results]
    values += [result.employee_amount for result in deduction_results.values()]

    return ChartSeries(labels=labels, values=values)
