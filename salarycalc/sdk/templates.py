"""Compensation template loading and lookup.

Built-in templates ship with the package. Users can add or replace
templates in templates.yaml (see config.get_templates_path()):

    templates:
      - name: Template 3
        earning_components:
          - {name: Basic, percentage: 40}
          - {name: HRA, percentage: 50}
        deduction_components:
          - {name: PF, employee_share_percentage: 12, employer_share_percentage: 12}

A user template with the same name as a built-in one replaces it.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import ValidationError

from .config import get_setting, get_templates_path
from .schemas import CompensationTemplate

logger = logging.getLogger(__name__)


class TemplateNotFoundError(Exception):
    """Raised when a template name is not known."""

    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.name = name
        self.available = available or []
        message = f"Template not found: '{name}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class TemplateValidationError(Exception):
    """Raised when a templates file cannot be parsed or validated."""
    pass


_STATUTORY_DEFAULTS = [
    {"name": "PF", "employee_share_percentage": "12", "employer_share_percentage": "12"},
    {"name": "ESIC", "employee_share_percentage": "3.25", "employer_share_percentage": "0.75"},
]

BUILTIN_TEMPLATES = [
    {
        "name": "Template 1",
        "earning_components": [
            {"name": "Basic", "percentage": "50"},
            {"name": "HRA", "percentage": "40"},
            {"name": "Other Allowance", "percentage": "30"},
        ],
        "deduction_components": _STATUTORY_DEFAULTS,
    },
    {
        "name": "Template 2",
        "earning_components": [
            {"name": "Basic", "percentage": "60"},
            {"name": "HRA", "percentage": "30"},
            {"name": "Special Allowance", "percentage": "10"},
        ],
        "deduction_components": _STATUTORY_DEFAULTS,
    },
]


def parse_templates(entries: list, source: str = "<templates>") -> List[CompensationTemplate]:
    """Validate raw template mappings.

    Raises:
        TemplateValidationError: On schema errors or duplicate names within source
    """
    if not isinstance(entries, list):
        raise TemplateValidationError(f"{source}: 'templates' must be a list")

    templates = []
    seen = set()
    for i, entry in enumerate(entries):
        try:
            template = CompensationTemplate.model_validate(entry)
        except ValidationError as e:
            raise TemplateValidationError(f"{source}: template #{i + 1} is invalid:\n{e}") from e

        if template.name in seen:
            raise TemplateValidationError(f"{source}: duplicate template name '{template.name}'")
        seen.add(template.name)
        templates.append(template)

    return templates


def load_templates_file(path: Path) -> List[CompensationTemplate]:
    """Load templates from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        TemplateValidationError: If the file is not valid
    """
    if not path.exists():
        raise FileNotFoundError(f"Templates file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise TemplateValidationError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        return []
    if not isinstance(data, dict) or "templates" not in data:
        raise TemplateValidationError(f"{path}: expected a top-level 'templates' key")

    return parse_templates(data["templates"], source=str(path))


def load_templates(path: Optional[Path] = None) -> Dict[str, CompensationTemplate]:
    """Load built-in templates merged with user templates.

    Args:
        path: Templates YAML file. Defaults to config.get_templates_path();
            a missing colocated templates.yaml is not an error.

    Returns:
        Dict of template name -> template, built-ins first

    Raises:
        FileNotFoundError: If the file set via the "templates" setting is missing
    """
    templates = {t.name: t for t in parse_templates(BUILTIN_TEMPLATES, source="built-in")}

    if path is None:
        path = get_templates_path()
        if not path.exists():
            if get_setting("templates"):
                raise FileNotFoundError(
                    f"Templates not found at configured path: {path}\n\n"
                    f"Update with: salary-calc settings set templates /path/to/templates.yaml"
                )
            return templates

    for template in load_templates_file(path):
        if template.name in templates:
            logger.warning(f"{path.name}: '{template.name}' overrides the built-in template")
        templates[template.name] = template

    return templates


def list_templates(templates: Optional[Dict[str, CompensationTemplate]] = None) -> List[str]:
    """Names of all available templates."""
    if templates is None:
        templates = load_templates()
    return list(templates)


def select_template(
    name: str,
    templates: Optional[Dict[str, CompensationTemplate]] = None,
) -> CompensationTemplate:
    """Look up a template by exact name.

    Raises:
        TemplateNotFoundError: If no template has that name
    """
    if templates is None:
        templates = load_templates()

    template = templates.get(name)
    if template is None:
        raise TemplateNotFoundError(name, list(templates))
    return template
