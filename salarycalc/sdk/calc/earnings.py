"""Earning breakdown: monthly amount per earning component of a template."""

from decimal import Decimal
from typing import Dict, Optional

from ..schemas import CompensationTemplate
from .amounts import Number, amount_from_percentage, to_decimal

BASIC = "Basic"
HRA = "HRA"


def is_component(name: str, wanted: str) -> bool:
    """Case-insensitive component name match."""
    return name.lower() == wanted.lower()


def compute_earning_amounts(
    template: CompensationTemplate,
    gross_monthly: Optional[Number],
) -> Dict[str, Decimal]:
    """Resolve the monthly amount of every earning component.

    HRA is a percentage of the Basic component's amount, not of gross.
    Every other component is a percentage of gross. A template without a
    Basic component gets an HRA of 0.

    Args:
        template: Template whose earning components to resolve
        gross_monthly: Monthly gross pay (None or 0 means nothing entered)

    Returns:
        Dict of component name -> monthly amount, in template order.
        Empty when there is no gross.

    Example:
        # Basic 50%, HRA 40%, gross 10000
        compute_earning_amounts(t, 10000)  # -> {"Basic": 5000.00, "HRA": 2000.00}
    """
    gross_monthly = to_decimal(gross_monthly)
    if not gross_monthly:
        return {}

    basic = template.find_earning(BASIC)
    basic_amount = amount_from_percentage(basic.percentage if basic else None, gross_monthly)

    amounts = {}
    for component in template.earning_components:
        if is_component(component.name, HRA):
            amounts[component.name] = amount_from_percentage(component.percentage, basic_amount)
        else:
            amounts[component.name] = amount_from_percentage(component.percentage, gross_monthly)

    return amounts
