"""Statutory deductions (PF, ESIC) for the employee and employer sides.

Each deduction kind is a StatutoryRule that computes both shares from a
shared StatutoryContext. Rules are looked up by the exact deduction name
configured in the template. Names without a rule are not computed: a
template may list them, but they contribute nothing to the breakup.

PF:
    Base is Basic plus every other earning except HRA. HRA never counts
    toward PF. A base above the PF ceiling is replaced by the ceiling for
    both shares.

ESIC:
    All-or-nothing. Gross at or below the ESIC ceiling pays the full
    percentage of gross; one rupee above it pays nothing. Both shares use
    the same threshold.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Mapping, Optional

from ..schemas import CompensationTemplate, DeductionComponent, DeductionResult, StatutoryConfig
from .amounts import ZERO, Number, amount_from_percentage, format_percentage, to_decimal
from .earnings import BASIC, HRA, is_component

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatutoryContext:
    """Inputs every statutory rule computes from."""

    gross_monthly: Decimal
    earning_amounts: Mapping[str, Decimal]
    config: StatutoryConfig = field(default_factory=StatutoryConfig)


class StatutoryRule:
    """A statutory deduction with an employee share and an employer share."""

    name: str = ""

    def wage_base(self, context: StatutoryContext) -> Decimal:
        """Wage the share percentages apply to (after any ceiling)."""
        raise NotImplementedError

    def compute_employee_amount(self, component: DeductionComponent, context: StatutoryContext) -> Decimal:
        return amount_from_percentage(component.employee_share_percentage, self.wage_base(context))

    def compute_employer_amount(self, component: DeductionComponent, context: StatutoryContext) -> Decimal:
        return amount_from_percentage(component.employer_share_percentage, self.wage_base(context))

    def compute(self, component: DeductionComponent, context: StatutoryContext) -> DeductionResult:
        return DeductionResult(
            name=component.name,
            employee_amount=self.compute_employee_amount(component, context),
            employer_amount=self.compute_employer_amount(component, context),
            percentage_label=format_percentage(component.employee_share_percentage),
            employer_percentage_label=format_percentage(component.employer_share_percentage),
        )


def pf_base(earning_amounts: Mapping[str, Decimal]) -> Decimal:
    """Basic plus all other earnings except HRA.

    A missing Basic component contributes 0.

    Example:
        pf_base({"Basic": 5000, "HRA": 2000, "Other": 3000})  # -> 8000
    """
    basic = ZERO
    others = ZERO
    for name, amount in earning_amounts.items():
        if is_component(name, BASIC):
            basic += amount
        elif not is_component(name, HRA):
            others += amount
    return basic + others


class PFRule(StatutoryRule):
    """Provident Fund: percentage of the PF base, capped at the PF ceiling."""

    name = "PF"

    def wage_base(self, context: StatutoryContext) -> Decimal:
        base = pf_base(context.earning_amounts)
        limit = context.config.pf_employee_limit
        if base > limit:
            return limit
        return base


class ESICRule(StatutoryRule):
    """ESIC: percentage of gross, only when gross is within the ceiling."""

    name = "ESIC"

    def wage_base(self, context: StatutoryContext) -> Decimal:
        if context.gross_monthly <= context.config.esic_employee_limit:
            return context.gross_monthly
        return ZERO


DEFAULT_RULES: Dict[str, StatutoryRule] = {
    PFRule.name: PFRule(),
    ESICRule.name: ESICRule(),
}


def compute_statutory(
    template: CompensationTemplate,
    gross_monthly: Optional[Number],
    earning_amounts: Mapping[str, Decimal],
    config: Optional[StatutoryConfig] = None,
    rules: Optional[Mapping[str, StatutoryRule]] = None,
) -> Dict[str, DeductionResult]:
    """Compute employee and employer shares for each configured deduction.

    Args:
        template: Template whose deduction components to compute
        gross_monthly: Monthly gross pay
        earning_amounts: Output of compute_earning_amounts()
        config: Wage ceilings (default: StatutoryConfig())
        rules: Deduction name -> rule (default: PF and ESIC)

    Returns:
        Dict of deduction name -> DeductionResult, in template order.
        Empty when there is no gross. Deductions without a rule are omitted.
    """
    gross_monthly = to_decimal(gross_monthly)
    if not gross_monthly:
        return {}

    context = StatutoryContext(
        gross_monthly=gross_monthly,
        earning_amounts=earning_amounts,
        config=config or StatutoryConfig(),
    )
    rules = DEFAULT_RULES if rules is None else rules

    results = {}
    for component in template.deduction_components:
        rule = rules.get(component.name)
        if rule is None:
            logger.debug(f"No statutory rule for deduction '{component.name}' in {template.name}, skipping")
            continue
        results[component.name] = rule.compute(component, context)

    return results


def compute_deductions(
    template: CompensationTemplate,
    gross_monthly: Optional[Number],
    earning_amounts: Mapping[str, Decimal],
    config: Optional[StatutoryConfig] = None,
    rules: Optional[Mapping[str, StatutoryRule]] = None,
) -> Dict[str, Decimal]:
    """Employee-side amount per deduction name."""
    results = compute_statutory(template, gross_monthly, earning_amounts, config, rules)
    return {name: result.employee_amount for name, result in results.items()}


def compute_employer_contributions(
    template: CompensationTemplate,
    gross_monthly: Optional[Number],
    earning_amounts: Mapping[str, Decimal],
    config: Optional[StatutoryConfig] = None,
    rules: Optional[Mapping[str, StatutoryRule]] = None,
) -> Dict[str, Decimal]:
    """Employer-side amount per deduction name."""
    results = compute_statutory(template, gross_monthly, earning_amounts, config, rules)
    return {name: result.employer_amount for name, result in results.items()}
