"""Salary Calc SDK - Core functionality for salary breakups."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    validate_setting,
    get_templates_path,
    load_statutory_config,
    ConfigError,
    SETTING_KEYS,
)

from .schemas import (
    EarningComponent,
    DeductionComponent,
    CompensationTemplate,
    StatutoryConfig,
    GrossAmount,
    DeductionResult,
    EarningRow,
    DeductionRow,
    Summary,
    ChartSeries,
    SalaryBreakup,
)

from .templates import (
    BUILTIN_TEMPLATES,
    load_templates,
    load_templates_file,
    list_templates,
    select_template,
    TemplateNotFoundError,
    TemplateValidationError,
)

from .calc import (
    amount_from_percentage,
    compute_earning_amounts,
    compute_deductions,
    compute_employer_contributions,
    compute_statutory,
    compute_breakup,
    summarize,
    pf_base,
    StatutoryRule,
    StatutoryContext,
    PFRule,
    ESICRule,
    DEFAULT_RULES,
)

from .session import SalaryCalculator

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "validate_setting",
    "get_templates_path",
    "load_statutory_config",
    "ConfigError",
    "SETTING_KEYS",
    # Schemas
    "EarningComponent",
    "DeductionComponent",
    "CompensationTemplate",
    "StatutoryConfig",
    "GrossAmount",
    "DeductionResult",
    "EarningRow",
    "DeductionRow",
    "Summary",
    "ChartSeries",
    "SalaryBreakup",
    # Templates
    "BUILTIN_TEMPLATES",
    "load_templates",
    "load_templates_file",
    "list_templates",
    "select_template",
    "TemplateNotFoundError",
    "TemplateValidationError",
    # Calculation
    "amount_from_percentage",
    "compute_earning_amounts",
    "compute_deductions",
    "compute_employer_contributions",
    "compute_statutory",
    "compute_breakup",
    "summarize",
    "pf_base",
    "StatutoryRule",
    "StatutoryContext",
    "PFRule",
    "ESICRule",
    "DEFAULT_RULES",
    # Session
    "SalaryCalculator",
]
