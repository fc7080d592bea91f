"""Salary Calc MCP Server - FastMCP implementation for salary breakup tools."""

import logging
import math
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from salarycalc.sdk import (
    ConfigError,
    SalaryCalculator,
    TemplateNotFoundError,
    TemplateValidationError,
    load_statutory_config,
    load_templates,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("salary-calc")


# --- Tools ---

@mcp.tool()
async def list_templates() -> dict[str, Any]:
    """List compensation templates with their earning and deduction percentages."""
    try:
        templates = load_templates()
        return {
            "templates": [t.model_dump(mode="json") for t in templates.values()],
            "count": len(templates),
        }
    except (TemplateValidationError, FileNotFoundError) as e:
        return {"error": str(e), "templates": []}


@mcp.tool()
async def salary_breakup(
    template: str = Field(..., description="Template name (e.g., 'Template 1')"),
    gross_monthly: float | None = Field(default=None, description="Monthly gross amount"),
    gross_yearly: float | None = Field(default=None, description="Yearly gross amount (used if gross_monthly is not given)"),
) -> dict[str, Any]:
    """Compute a salary breakup: earnings, PF/ESIC deductions, employer contributions, net pay and CTC."""
    if gross_monthly is None and gross_yearly is None:
        return {"error": "Provide gross_monthly or gross_yearly", "breakup": None}
    amount = gross_monthly if gross_monthly is not None else gross_yearly
    if not math.isfinite(amount):
        return {"error": f"Gross amount must be a finite number, got {amount}", "breakup": None}

    try:
        calc = SalaryCalculator(templates=load_templates(), config=load_statutory_config())
        calc.select_template(template)
        if gross_monthly is not None:
            calc.set_gross_monthly(gross_monthly)
        else:
            calc.set_gross_yearly(gross_yearly)
        return {"breakup": calc.breakup.model_dump(mode="json")}

    except TemplateNotFoundError as e:
        return {"error": str(e), "available": e.available, "breakup": None}
    except (ConfigError, TemplateValidationError, FileNotFoundError) as e:
        logger.error(f"Error computing breakup: {e}")
        return {"error": str(e), "breakup": None}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
