"""Settings CLI commands for Salary Calc.

Manages settings.json - statutory ceilings, templates file, default template.
"""

import click

from salarycalc.sdk import (
    ConfigError,
    SETTING_KEYS,
    get_settings_path,
    get_templates_path,
    load_settings,
    load_statutory_config,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    \b
    Available settings:
    - pf_employee_limit: PF wage ceiling (default 15000)
    - esic_employee_limit: ESIC eligibility ceiling (default 21000)
    - templates: path to a templates YAML file
    - default_template: template used when none is given
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and the effective statutory ceilings."""
    settings_path = get_settings_path()

    try:
        current = load_settings()
        statutory = load_statutory_config(current)
    except ConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective values:")
    click.echo(f"  pf_employee_limit: {statutory.pf_employee_limit}")
    click.echo(f"  esic_employee_limit: {statutory.esic_employee_limit}")
    click.echo(f"  templates: {get_templates_path()}")


@settings.command("set")
@click.argument("key", type=click.Choice(sorted(SETTING_KEYS)))
@click.argument("value")
def settings_set(key, value):
    """Set a setting value.

    Examples:
        salary-calc settings set pf_employee_limit 15000
        salary-calc settings set default_template "Template 2"
    """
    try:
        path = set_setting(key, value)
    except ConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key} = {value}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key", type=click.Choice(sorted(SETTING_KEYS)))
def settings_unset(key):
    """Clear a setting, reverting to its default."""
    if unset_setting(key):
        click.echo(f"Cleared {key}.")
    else:
        click.echo(f"{key} was not set.")
