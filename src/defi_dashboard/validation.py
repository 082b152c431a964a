"""Input validation for the dashboard node.

Template mode stops at the first broken rule; execution mode collects every
problem.
"""

from typing import Any

import structlog

from defi_dashboard.base import ValidationResult
from defi_dashboard.constants import VALID_COMPONENTS, VALID_LAYOUTS, VALID_THEMES
from defi_dashboard.errors import TemplateValidationError
from defi_dashboard.modes import ExecutionMode

logger = structlog.get_logger()


def _one_of(field_name: str, allowed: tuple[str, ...]) -> str:
    return f"{field_name} must be one of: {', '.join(allowed)}"


def check_template_config(inputs: dict[str, Any]) -> None:
    """Check template-mode inputs, raising on the first violation.

    Raises:
        TemplateValidationError: With the message of the rule that failed
    """
    components = inputs.get("default_components")
    if components:
        if not isinstance(components, list):
            raise TemplateValidationError("default_components must be an array")
        invalid = [c for c in components if c not in VALID_COMPONENTS]
        if invalid:
            raise TemplateValidationError(
                f"Invalid components: {', '.join(str(c) for c in invalid)}"
            )

    theme = inputs.get("default_theme")
    if theme and theme not in VALID_THEMES:
        raise TemplateValidationError(_one_of("default_theme", VALID_THEMES))

    layout = inputs.get("default_layout")
    if layout and layout not in VALID_LAYOUTS:
        raise TemplateValidationError(_one_of("default_layout", VALID_LAYOUTS))

    enable_branding = inputs.get("enable_branding")
    if enable_branding is not None and not isinstance(enable_branding, bool):
        raise TemplateValidationError("enable_branding must be a boolean")


def validate_template_inputs(inputs: dict[str, Any]) -> ValidationResult:
    """Validate template-mode inputs, reporting at most one error."""
    try:
        check_template_config(inputs)
    except TemplateValidationError as e:
        return ValidationResult(valid=False, errors=[str(e)])
    return ValidationResult.ok()


def collect_execution_errors(inputs: dict[str, Any]) -> list[str]:
    """Return every problem found in execution-mode inputs."""
    errors: list[str] = []

    if not inputs.get("dashboard_name"):
        errors.append("dashboard_name is required")

    components = inputs.get("components")
    if components and not isinstance(components, list):
        errors.append("components must be an array")

    theme = inputs.get("theme")
    if theme and theme not in VALID_THEMES:
        errors.append(_one_of("theme", VALID_THEMES))

    layout = inputs.get("layout")
    if layout and layout not in VALID_LAYOUTS:
        errors.append(_one_of("layout", VALID_LAYOUTS))

    return errors


def validate_execution_inputs(inputs: dict[str, Any]) -> ValidationResult:
    """Validate execution-mode inputs, accumulating all errors."""
    return ValidationResult.from_errors(collect_execution_errors(inputs))


def validate_inputs(inputs: dict[str, Any], mode: ExecutionMode) -> ValidationResult:
    """Validate inputs for an already resolved mode."""
    if mode is ExecutionMode.TEMPLATE:
        result = validate_template_inputs(inputs)
    else:
        result = validate_execution_inputs(inputs)

    logger.debug(
        "Dashboard inputs validated",
        mode=mode.value,
        valid=result.valid,
        error_count=len(result.errors),
    )
    return result
