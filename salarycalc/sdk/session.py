"""Interactive salary calculator state.

Holds the current template and gross pay for a UI (or the MCP server) and
recomputes the breakup from scratch whenever either changes.

Gross is stored once, in the unit the caller last entered. Setting the
monthly value makes yearly a derived view and vice versa, so updating one
unit never feeds back into the other.
"""

import logging
from decimal import Decimal
from typing import Dict, Mapping, Optional

from .calc import StatutoryRule, compute_breakup, to_decimal
from .schemas import CompensationTemplate, GrossAmount, SalaryBreakup, StatutoryConfig
from .templates import TemplateNotFoundError, load_templates

logger = logging.getLogger(__name__)


class SalaryCalculator:
    """Current (template, gross) pair and its salary breakup.

    Example:
        calc = SalaryCalculator()
        calc.select_template("Template 1")
        calc.set_gross_yearly(240000)
        calc.gross_monthly              # -> Decimal("20000")
        calc.breakup.summary.net_pay    # -> Decimal("17550.00")
    """

    def __init__(
        self,
        templates: Optional[Dict[str, CompensationTemplate]] = None,
        config: Optional[StatutoryConfig] = None,
        rules: Optional[Mapping[str, StatutoryRule]] = None,
    ):
        self.templates = templates if templates is not None else load_templates()
        self.config = config or StatutoryConfig()
        self.rules = rules
        self.template: Optional[CompensationTemplate] = None
        self.gross: Optional[GrossAmount] = None
        self._cache_key = None
        self._cache: Optional[SalaryBreakup] = None

    def select_template(self, name: str) -> CompensationTemplate:
        """Make the named template current.

        Raises:
            TemplateNotFoundError: If unknown. The current template is kept.
        """
        template = self.templates.get(name)
        if template is None:
            raise TemplateNotFoundError(name, list(self.templates))
        self.template = template
        logger.debug(f"Selected template {name}")
        return template

    def set_gross_monthly(self, amount) -> None:
        """Enter gross as a monthly amount; yearly becomes monthly x 12."""
        self._set_gross(amount, "monthly")

    def set_gross_yearly(self, amount) -> None:
        """Enter gross as a yearly amount; monthly becomes yearly / 12."""
        self._set_gross(amount, "yearly")

    def clear_gross(self) -> None:
        self.gross = None

    def _set_gross(self, amount, unit: str) -> None:
        value = to_decimal(amount)
        self.gross = GrossAmount(value=value, unit=unit) if value is not None else None

    @property
    def gross_monthly(self) -> Optional[Decimal]:
        return self.gross.monthly if self.gross else None

    @property
    def gross_yearly(self) -> Optional[Decimal]:
        return self.gross.yearly if self.gross else None

    @property
    def breakup(self) -> SalaryBreakup:
        """Breakup for the current template and gross (memoised per state)."""
        key = (
            self.template.name if self.template else None,
            id(self.template),
            self.gross,
            self.config,
        )
        if self._cache is None or key != self._cache_key:
            breakup = compute_breakup(self.template, self.gross_monthly, self.config, self.rules)
            # Report yearly gross exactly as entered, not re-derived from monthly
            self._cache = breakup.model_copy(update={"gross_yearly": self.gross_yearly})
            self._cache_key = key
        return self._cache
