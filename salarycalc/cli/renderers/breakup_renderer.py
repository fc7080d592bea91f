"""Rich renderer for salary breakups.

Transforms SDK SalaryBreakup output into formatted Rich tables.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from salarycalc.sdk.calc import format_percentage
from salarycalc.sdk.calc.earnings import HRA, is_component
from salarycalc.sdk.schemas import CompensationTemplate, SalaryBreakup


def render_breakup(console: Console, breakup: SalaryBreakup) -> None:
    """Render a salary breakup as Rich tables.

    Args:
        console: Rich Console instance
        breakup: SDK output from compute_breakup()
    """
    console.print(Panel(
        f"Template: [bold]{breakup.template}[/bold]\n"
        f"Monthly gross: {_money(breakup.gross_monthly)}   "
        f"Yearly gross: {_money(breakup.gross_yearly)}",
        title="Salary Calculation Breakup",
        border_style="dim",
    ))

    if breakup.is_empty:
        console.print(Panel(
            "[yellow]Enter a non-zero gross amount to see the breakup.[/yellow]",
            title="Note",
            border_style="yellow",
        ))
        return

    console.print(_rows_table("Earnings", [
        (row.name.upper(), row.percentage_label, row.monthly_amount, row.yearly_amount)
        for row in breakup.earnings
    ]))
    console.print(_rows_table("Deductions", [
        (row.name, row.percentage_label, row.monthly_amount, row.yearly_amount)
        for row in breakup.deductions
    ]))
    console.print(_rows_table("Employer Contributions", [
        (row.name, row.percentage_label, row.monthly_amount, row.yearly_amount)
        for row in breakup.employer_contributions
    ]))

    _render_summary(console, breakup)


def _rows_table(title: str, rows: list) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAD, title_justify="left")
    table.add_column("Description")
    table.add_column("Percentage", justify="right")
    table.add_column("Monthly Amount", justify="right")
    table.add_column("Annual Amount", justify="right")

    for name, label, monthly, yearly in rows:
        table.add_row(name, label, _money(monthly), _money(yearly))

    return table


def _render_summary(console: Console, breakup: SalaryBreakup) -> None:
    summary = breakup.summary
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("label", style="dim")
    table.add_column("value", justify="right")

    table.add_row("Total Deduction from Your Gross", _money(summary.total_deduction))
    table.add_row("Total Contribution from Employer", _money(summary.total_employer_contribution))
    table.add_row("Net Pay Salary", f"[bold green]{_money(summary.net_pay)}[/bold green]")
    table.add_row("Monthly CTC Including PF (Both Shares)", _money(summary.monthly_ctc))
    table.add_row("Yearly CTC Including PF (Both Shares)", _money(summary.yearly_ctc))

    console.print(Panel(table, title="Summary", border_style="green"))


def render_template(console: Console, template: CompensationTemplate) -> None:
    """Render a template's earning and deduction rules."""
    earnings = Table(title=f"{template.name} - Earnings", box=box.SIMPLE_HEAD, title_justify="left")
    earnings.add_column("Component")
    earnings.add_column("Percentage", justify="right")
    earnings.add_column("Of")
    for component in template.earning_components:
        base = "Basic" if is_component(component.name, HRA) else "Gross"
        earnings.add_row(component.name, format_percentage(component.percentage), base)
    console.print(earnings)

    deductions = Table(title=f"{template.name} - Deductions", box=box.SIMPLE_HEAD, title_justify="left")
    deductions.add_column("Deduction")
    deductions.add_column("Employee", justify="right")
    deductions.add_column("Employer", justify="right")
    for component in template.deduction_components:
        deductions.add_row(
            component.name,
            format_percentage(component.employee_share_percentage),
            format_percentage(component.employer_share_percentage),
        )
    console.print(deductions)


def _money(amount) -> str:
    if amount is None:
        return "-"
    return f"{amount:.2f}"
