"""Salary Calc CLI - Command-line interface for salary breakups."""

import json
import logging
import os
from decimal import Decimal, InvalidOperation
from pathlib import Path

import click
from rich.console import Console

from salarycalc import __version__
from salarycalc.sdk import (
    ConfigError,
    SalaryCalculator,
    TemplateNotFoundError,
    TemplateValidationError,
    get_setting,
    load_statutory_config,
    load_templates,
)

from .renderers.breakup_renderer import render_breakup, render_template
from .settings_commands import settings as settings_group

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.WARNING),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)


class DecimalAmount(click.ParamType):
    """Click parameter that parses an exact decimal amount."""

    name = "amount"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            return value
        try:
            amount = Decimal(str(value).replace(",", ""))
        except InvalidOperation:
            self.fail(f"'{value}' is not a number", param, ctx)
        if not amount.is_finite():
            self.fail(f"'{value}' is not a finite number", param, ctx)
        return amount


AMOUNT = DecimalAmount()


def _load_templates(templates_file):
    try:
        return load_templates(Path(templates_file) if templates_file else None)
    except (TemplateValidationError, FileNotFoundError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="salary-calc")
def cli():
    """Salary Calc - Salary breakup from gross pay and a compensation template.

    Splits gross pay into earning components (Basic, HRA, allowances),
    computes PF and ESIC for employee and employer, and reports net pay
    and cost to company.

    Configuration is loaded from (in order):

    \b
    1. SALARY_CALC_CONFIG_PATH environment variable
    2. ~/.config/salary-calc/ (XDG default)

    Run 'salary-calc settings show' to see the effective settings.
    """
    pass


cli.add_command(settings_group)


@cli.command("breakup")
@click.argument("template", required=False)
@click.option("--monthly", "gross_monthly", type=AMOUNT, help="Monthly gross amount")
@click.option("--yearly", "gross_yearly", type=AMOUNT, help="Yearly gross amount")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
@click.option("--templates-file", type=click.Path(exists=True, dir_okay=False),
              help="Templates YAML file (default: from settings)")
def breakup(template, gross_monthly, gross_yearly, output_format, templates_file):
    """Show the salary breakup for TEMPLATE at a gross amount.

    TEMPLATE defaults to the 'default_template' setting. Give exactly one
    of --monthly or --yearly; the other is derived.

    Examples:
        salary-calc breakup "Template 1" --monthly 20000
        salary-calc breakup "Template 2" --yearly 600000 --format json
    """
    if (gross_monthly is None) == (gross_yearly is None):
        raise click.UsageError("Give exactly one of --monthly or --yearly.")

    template = template or get_setting("default_template")
    if not template:
        raise click.UsageError("No TEMPLATE given and no default_template setting.")

    try:
        config = load_statutory_config()
    except ConfigError as e:
        raise click.ClickException(str(e))

    calc = SalaryCalculator(templates=_load_templates(templates_file), config=config)
    try:
        calc.select_template(template)
    except TemplateNotFoundError as e:
        raise click.ClickException(str(e))

    if gross_monthly is not None:
        calc.set_gross_monthly(gross_monthly)
    else:
        calc.set_gross_yearly(gross_yearly)

    result = calc.breakup

    if output_format == "json":
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    render_breakup(Console(), result)


@cli.group("templates")
def templates_group():
    """List and inspect compensation templates."""
    pass


@templates_group.command("list")
@click.option("--templates-file", type=click.Path(exists=True, dir_okay=False),
              help="Templates YAML file (default: from settings)")
def templates_list(templates_file):
    """List available template names."""
    templates = _load_templates(templates_file)
    default = get_setting("default_template")
    for name in templates:
        marker = " (default)" if name == default else ""
        click.echo(f"{name}{marker}")


@templates_group.command("show")
@click.argument("name")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
@click.option("--templates-file", type=click.Path(exists=True, dir_okay=False),
              help="Templates YAML file (default: from settings)")
def templates_show(name, output_format, templates_file):
    """Show the earning and deduction rules of template NAME."""
    templates = _load_templates(templates_file)
    template = templates.get(name)
    if template is None:
        raise click.ClickException(str(TemplateNotFoundError(name, list(templates))))

    if output_format == "json":
        click.echo(json.dumps(template.model_dump(mode="json"), indent=2))
        return

    render_template(Console(), template)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
