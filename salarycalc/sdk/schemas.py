"""Pydantic schemas for salary-calc data validation.

Template schemas use extra='forbid' to reject unknown fields, ensuring
typos in templates.yaml cause clear errors rather than silent ignoring.
"""

from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# Template Schemas - what templates.yaml and the built-in templates contain
# =============================================================================


class EarningComponent(BaseModel):
    """Single earning line of a template (e.g., Basic at 50% of gross)."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Component name (e.g., 'Basic', 'HRA')")
    percentage: Decimal = Field(
        ..., ge=0,
        description=(
            "Percentage of monthly gross. For HRA this is a percentage of the "
            "Basic component's amount instead."
        ),
    )


class DeductionComponent(BaseModel):
    """Statutory deduction with employee and employer shares."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Deduction name ('PF' or 'ESIC')")
    employee_share_percentage: Decimal = Field(..., ge=0)
    employer_share_percentage: Decimal = Field(..., ge=0)


class CompensationTemplate(BaseModel):
    """Named set of earning and statutory-deduction rules."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    earning_components: List[EarningComponent] = Field(default_factory=list)
    deduction_components: List[DeductionComponent] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_components(self) -> "CompensationTemplate":
        """Component names key the computed amounts, so they must be unique."""
        errors = []
        for label, components in (
            ("earning", self.earning_components),
            ("deduction", self.deduction_components),
        ):
            seen = set()
            for component in components:
                if component.name in seen:
                    errors.append(f"duplicate {label} component '{component.name}'")
                seen.add(component.name)

        if errors:
            raise ValueError("; ".join(errors))

        return self

    def find_earning(self, name: str) -> Optional[EarningComponent]:
        """Find an earning component by case-insensitive name."""
        wanted = name.lower()
        for component in self.earning_components:
            if component.name.lower() == wanted:
                return component
        return None


class StatutoryConfig(BaseModel):
    """Wage ceilings for the statutory deductions.

    Immutable once built; pass a different instance for another jurisdiction.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    pf_employee_limit: Decimal = Field(
        default=Decimal("15000"), ge=0,
        description="PF wage ceiling. A PF base above this is capped to it.",
    )
    esic_employee_limit: Decimal = Field(
        default=Decimal("21000"), ge=0,
        description="ESIC eligibility ceiling. Gross above this pays no ESIC at all.",
    )


# =============================================================================
# Gross Amount
# =============================================================================

GrossUnit = Literal["monthly", "yearly"]


class GrossAmount(BaseModel):
    """Gross pay as one canonical value plus the unit it was entered in.

    The other unit is always derived, never stored, so monthly and yearly
    cannot drift apart.
    """

    model_config = ConfigDict(frozen=True)

    value: Decimal
    unit: GrossUnit = "monthly"

    @property
    def monthly(self) -> Decimal:
        from .calc.amounts import monthly_from_yearly

        if self.unit == "monthly":
            return self.value
        return monthly_from_yearly(self.value)

    @property
    def yearly(self) -> Decimal:
        from .calc.amounts import yearly_from_monthly

        if self.unit == "yearly":
            return self.value
        return yearly_from_monthly(self.value)


# =============================================================================
# Results
# =============================================================================


class DeductionResult(BaseModel):
    """Employee and employer amounts for one statutory deduction."""

    model_config = ConfigDict(extra="forbid")

    name: str
    employee_amount: Decimal = Decimal("0.00")
    employer_amount: Decimal = Decimal("0.00")
    percentage_label: str = Field(..., description="Employee share label, e.g. '12%'")
    employer_percentage_label: str = Field(..., description="Employer share label, e.g. '0.75%'")


class EarningRow(BaseModel):
    """Display row for an earning component."""

    name: str
    percentage_label: str
    monthly_amount: Decimal
    yearly_amount: Decimal


class DeductionRow(BaseModel):
    """Display row for a deduction (employee side) or contribution (employer side)."""

    name: str
    percentage_label: str
    monthly_amount: Decimal
    yearly_amount: Decimal


class Summary(BaseModel):
    """Totals shown next to the breakup tables."""

    total_deduction: Decimal = Decimal("0.00")
    total_employer_contribution: Decimal = Decimal("0.00")
    net_pay: Decimal = Decimal("0.00")
    monthly_ctc: Decimal = Decimal("0.00")
    yearly_ctc: Decimal = Decimal("0.00")

    @classmethod
    def zero(cls) -> "Summary":
        """Create a zero Summary (no gross entered yet)."""
        return cls()


class ChartSeries(BaseModel):
    """Parallel labels/values for a pie chart of the breakup."""

    labels: List[str] = Field(default_factory=list)
    values: List[Decimal] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_parallel(self) -> "ChartSeries":
        if len(self.labels) != len(self.values):
            raise ValueError(
                f"labels ({len(self.labels)}) and values ({len(self.values)}) differ in length"
            )
        return self


class SalaryBreakup(BaseModel):
    """Everything a presentation layer needs to show one salary breakup."""

    template: Optional[str] = None
    gross_monthly: Optional[Decimal] = None
    gross_yearly: Optional[Decimal] = None
    earning_amounts: Dict[str, Decimal] = Field(default_factory=dict)
    deduction_results: Dict[str, DeductionResult] = Field(default_factory=dict)
    earnings: List[EarningRow] = Field(default_factory=list)
    deductions: List[DeductionRow] = Field(default_factory=list)
    employer_contributions: List[DeductionRow] = Field(default_factory=list)
    summary: Summary = Field(default_factory=Summary.zero)
    chart: ChartSeries = Field(default_factory=ChartSeries)

    @property
    def is_empty(self) -> bool:
        """True when there was nothing to compute (no template or no gross)."""
        return not self.earning_amounts and not self.deduction_results
