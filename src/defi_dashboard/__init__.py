"""DeFi Dashboard node - dashboard configuration and mock generation for workflows."""

from defi_dashboard.base import (
    ExecutionContext,
    NodeExecutionResult,
    NodeExecutor,
    ValidationResult,
)
from defi_dashboard.config import (
    DashboardNodeConfig,
    load_config,
    parse_config,
)
from defi_dashboard.errors import (
    DashboardError,
    DashboardGenerationError,
    TemplateValidationError,
)
from defi_dashboard.executor import DeFiDashboardExecutor
from defi_dashboard.generator import DashboardGenerator
from defi_dashboard.models import (
    BrandColors,
    Branding,
    DashboardConfig,
    DashboardLayout,
    DashboardResult,
    DashboardStatus,
    DashboardTheme,
    GeneratedFiles,
    Integrations,
)
from defi_dashboard.modes import ExecutionMode, resolve_mode
from defi_dashboard.validation import (
    check_template_config,
    collect_execution_errors,
    validate_execution_inputs,
    validate_inputs,
    validate_template_inputs,
)

__all__ = [
    # Host contract
    "ExecutionContext",
    "NodeExecutionResult",
    "NodeExecutor",
    "ValidationResult",
    # Configuration
    "DashboardNodeConfig",
    "load_config",
    "parse_config",
    # Errors
    "DashboardError",
    "DashboardGenerationError",
    "TemplateValidationError",
    # Executor
    "DeFiDashboardExecutor",
    "DashboardGenerator",
    # Models
    "BrandColors",
    "Branding",
    "DashboardConfig",
    "DashboardLayout",
    "DashboardResult",
    "DashboardStatus",
    "DashboardTheme",
    "GeneratedFiles",
    "Integrations",
    # Modes
    "ExecutionMode",
    "resolve_mode",
    # Validation
    "check_template_config",
    "collect_execution_errors",
    "validate_execution_inputs",
    "validate_inputs",
    "validate_template_inputs",
]
