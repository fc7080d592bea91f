"""Tests for totals (summarize) and the breakup view model (compute_breakup)."""

from decimal import Decimal

import pytest

from salarycalc.sdk.calc import compute_breakup, summarize
from salarycalc.sdk.calc.breakup import build_deduction_rows, build_earning_rows
from salarycalc.sdk.schemas import ChartSeries, DeductionResult, DeductionRow, EarningRow
from salarycalc.sdk.templates import BUILTIN_TEMPLATES, parse_templates


@pytest.fixture
def templates():
    """Built-in templates only."""
    return {t.name: t for t in parse_templates(BUILTIN_TEMPLATES)}


def result(name, employee, employer):
    return DeductionResult(
        name=name,
        employee_amount=Decimal(employee),
        employer_amount=Decimal(employer),
        percentage_label="-",
        employer_percentage_label="-",
    )


class TestSummarize:
    """Net pay and CTC arithmetic."""

    def test_totals(self):
        summary = summarize(20000, {
            "PF": result("PF", "1800.00", "1800.00"),
            "ESIC": result("ESIC", "650.00", "150.00"),
        })

        assert summary.total_deduction == Decimal("2450.00")
        assert summary.total_employer_contribution == Decimal("1950.00")
        assert summary.net_pay == Decimal("17550.00")
        assert summary.monthly_ctc == Decimal("21950.00")
        assert summary.yearly_ctc == Decimal("263400.00")

    def test_yearly_ctc_is_monthly_times_12(self):
        summary = summarize("8333.33", {"PF": result("PF", "999.99", "999.99")})
        assert summary.yearly_ctc == summary.monthly_ctc * 12

    def test_no_deductions(self):
        summary = summarize(10000, {})

        assert summary.net_pay == Decimal("10000.00")
        assert summary.monthly_ctc == Decimal("10000.00")
        assert summary.total_deduction == Decimal("0")

    @pytest.mark.parametrize("gross", [None, 0])
    def test_no_gross_is_zero(self, gross):
        summary = summarize(gross, {"PF": result("PF", "1", "1")})
        assert summary.net_pay == Decimal("0")
        assert summary.yearly_ctc == Decimal("0")


class TestComputeBreakup:
    """compute_breakup() assembles rows, totals and chart series."""

    def test_template_2_at_10000(self, templates):
        breakup = compute_breakup(templates["Template 2"], 10000)

        # Basic 6000, HRA 30% of 6000, Special 10% of gross
        assert breakup.earning_amounts == {
            "Basic": Decimal("6000.00"),
            "HRA": Decimal("1800.00"),
            "Special Allowance": Decimal("1000.00"),
        }
        # PF base 7000 (below ceiling), ESIC on 10000
        assert breakup.deduction_results["PF"].employee_amount == Decimal("840.00")
        assert breakup.deduction_results["ESIC"].employee_amount == Decimal("325.00")
        assert breakup.deduction_results["ESIC"].employer_amount == Decimal("75.00")

        assert breakup.summary.total_deduction == Decimal("1165.00")
        assert breakup.summary.total_employer_contribution == Decimal("915.00")
        assert breakup.summary.net_pay == Decimal("8835.00")
        assert breakup.summary.monthly_ctc == Decimal("10915.00")
        assert breakup.summary.yearly_ctc == Decimal("130980.00")

    def test_earning_rows(self, templates):
        breakup = compute_breakup(templates["Template 1"], 20000)

        hra = breakup.earnings[1]
        assert hra.name == "HRA"
        assert hra.percentage_label == "40%"
        assert hra.monthly_amount == Decimal("4000.00")
        assert hra.yearly_amount == Decimal("48000.00")

    def test_deduction_and_contribution_rows(self, templates):
        breakup = compute_breakup(templates["Template 1"], 20000)

        esic_employee = breakup.deductions[1]
        esic_employer = breakup.employer_contributions[1]

        assert (esic_employee.name, esic_employee.percentage_label) == ("ESIC", "3.25%")
        assert esic_employee.monthly_amount == Decimal("650.00")
        assert esic_employee.yearly_amount == Decimal("7800.00")

        assert (esic_employer.name, esic_employer.percentage_label) == ("ESIC", "0.75%")
        assert esic_employer.monthly_amount == Decimal("150.00")
        assert esic_employer.yearly_amount == Decimal("1800.00")

    def test_row_builders_return_typed_rows(self, templates):
        earnings = build_earning_rows(templates["Template 2"], {"Basic": Decimal("6000.00")})
        deductions = build_deduction_rows({"PF": result("PF", "720", "780")}, employer=True)

        assert [type(row) for row in earnings] == [EarningRow]
        assert earnings[0].yearly_amount == Decimal("72000.00")
        assert [type(row) for row in deductions] == [DeductionRow]
        assert deductions[0].monthly_amount == Decimal("780")

    def test_chart_series_spans_earnings_and_deductions(self, templates):
        breakup = compute_breakup(templates["Template 1"], 20000)

        assert breakup.chart.labels == ["BASIC", "HRA", "OTHER ALLOWANCE", "PF", "ESIC"]
        assert breakup.chart.values == [
            Decimal("10000.00"),
            Decimal("4000.00"),
            Decimal("6000.00"),
            Decimal("1800.00"),
            Decimal("650.00"),
        ]

    def test_gross_units(self, templates):
        breakup = compute_breakup(templates["Template 1"], 20000)
        assert breakup.gross_monthly == Decimal("20000")
        assert breakup.gross_yearly == Decimal("240000")

    @pytest.mark.parametrize("gross", [None, 0])
    def test_no_gross_is_empty(self, templates, gross):
        breakup = compute_breakup(templates["Template 1"], gross)

        assert breakup.is_empty
        assert breakup.earnings == []
        assert breakup.deductions == []
        assert breakup.chart.labels == []
        assert breakup.summary.net_pay == Decimal("0")
        assert breakup.template == "Template 1"

    def test_no_template_is_empty(self):
        breakup = compute_breakup(None, 20000)

        assert breakup.is_empty
        assert breakup.template is None
        assert breakup.summary.monthly_ctc == Decimal("0")

    def test_negative_gross_passes_through(self, templates, caplog):
        breakup = compute_breakup(templates["Template 1"], -1000)

        assert breakup.earning_amounts["Basic"] == Decimal("-500.00")
        assert breakup.summary.net_pay == breakup.gross_monthly - breakup.summary.total_deduction
        assert "Negative gross" in caplog.text

    def test_pure_function(self, templates):
        """Same inputs, same output; no state carried between calls."""
        first = compute_breakup(templates["Template 1"], 20000)
        compute_breakup(templates["Template 1"], 50000)
        again = compute_breakup(templates["Template 1"], 20000)

        assert first == again


class TestChartSeries:
    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValueError):
            ChartSeries(labels=["A", "B"], values=[Decimal("1")])
