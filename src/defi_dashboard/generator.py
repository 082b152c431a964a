"""Dashboard record builders for template and execution modes.

No files are written. Both builders return placeholder file lists standing
in for what a real code generator would emit.
"""

import time
from typing import Any, Callable

import structlog

from defi_dashboard.constants import (
    DEFAULT_BRAND_NAME,
    DEFAULT_CHAINS,
    DEFAULT_COLORS,
    DEFAULT_COMPONENTS,
    DEFAULT_FEATURES,
    DEFAULT_ID_PREFIX,
    DEFAULT_LAYOUT,
    DEFAULT_THEME,
    DEFAULT_WALLETS,
    EXECUTION_BACKEND_FILES,
    EXECUTION_CHAINS,
    EXECUTION_CONFIG_FILES,
    EXECUTION_FEATURES,
    EXECUTION_FRONTEND_FILES,
    EXECUTION_PROTOCOLS,
    EXECUTION_WALLETS,
    TEMPLATE_BACKEND_FILES,
    TEMPLATE_CONFIG_FILES,
    TEMPLATE_FRONTEND_FILES,
    TEMPLATE_PROTOCOLS,
    VALID_LAYOUTS,
    VALID_THEMES,
)
from defi_dashboard.errors import DashboardGenerationError
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

logger = structlog.get_logger()

Clock = Callable[[], float]


def _theme(value: Any) -> DashboardTheme:
    if value not in VALID_THEMES:
        raise DashboardGenerationError(f"Unsupported theme: {value}")
    return DashboardTheme(value)


def _layout(value: Any) -> DashboardLayout:
    if value not in VALID_LAYOUTS:
        raise DashboardGenerationError(f"Unsupported layout: {value}")
    return DashboardLayout(value)


def _string_list(value: Any, field_name: str) -> list[str]:
    if not isinstance(value, (list, tuple)):
        raise DashboardGenerationError(f"{field_name} must be an array")
    return list(value)


def _chain_list(value: Any, field_name: str) -> list[int]:
    if not isinstance(value, (list, tuple)):
        raise DashboardGenerationError(f"{field_name} must be an array")
    invalid = [c for c in value if isinstance(c, bool) or not isinstance(c, int)]
    if invalid:
        raise DashboardGenerationError(
            f"{field_name} must contain integer chain ids, got: "
            f"{', '.join(repr(c) for c in invalid)}"
        )
    return list(value)


class DashboardGenerator:
    """Builds dashboard configurations and mock generation results.

    Args:
        clock: Returns the current time in seconds; drives dashboard ids
        id_prefix: Prefix for generated dashboard ids
        default_name: Brand name used when template inputs give none
    """

    def __init__(
        self,
        clock: Clock | None = None,
        id_prefix: str = DEFAULT_ID_PREFIX,
        default_name: str = DEFAULT_BRAND_NAME,
    ) -> None:
        self.clock = clock or time.time
        self.id_prefix = id_prefix
        self.default_name = default_name

    def new_dashboard_id(self) -> str:
        """Derive a dashboard id from the current timestamp in milliseconds."""
        return f"{self.id_prefix}-{int(self.clock() * 1000)}"

    def build_template_config(self, inputs: dict[str, Any]) -> DashboardConfig:
        """Build a full configuration from template overrides and defaults."""
        colors = BrandColors(
            primary=inputs.get("primary_color") or DEFAULT_COLORS["primary"],
            secondary=inputs.get("secondary_color") or DEFAULT_COLORS["secondary"],
            accent=inputs.get("accent_color") or DEFAULT_COLORS["accent"],
        )
        return DashboardConfig(
            theme=_theme(inputs.get("default_theme") or DEFAULT_THEME),
            layout=_layout(inputs.get("default_layout") or DEFAULT_LAYOUT),
            components=_string_list(
                inputs.get("default_components") or DEFAULT_COMPONENTS,
                "default_components",
            ),
            features=_string_list(
                inputs.get("default_features") or DEFAULT_FEATURES,
                "default_features",
            ),
            branding=Branding(
                name=inputs.get("default_name") or self.default_name,
                colors=colors,
            ),
            integrations=Integrations(
                wallets=_string_list(
                    inputs.get("supported_wallets") or DEFAULT_WALLETS,
                    "supported_wallets",
                ),
                chains=_chain_list(
                    inputs.get("supported_chains") or DEFAULT_CHAINS,
                    "supported_chains",
                ),
                protocols=list(TEMPLATE_PROTOCOLS),
            ),
        )

    def generate_template(self, inputs: dict[str, Any]) -> DashboardResult:
        """Build the mock dashboard returned in template mode."""
        config = self.build_template_config(inputs)
        result = DashboardResult(
            dashboard_id=self.new_dashboard_id(),
            config=config,
            generated_files=GeneratedFiles(
                frontend=list(TEMPLATE_FRONTEND_FILES),
                backend=list(TEMPLATE_BACKEND_FILES),
                config=list(TEMPLATE_CONFIG_FILES),
            ),
            status=DashboardStatus.GENERATED,
        )
        logger.debug(
            "Template dashboard assembled",
            dashboard_id=result.dashboard_id,
            components=len(config.components),
        )
        return result

    def generate_dashboard(self, inputs: dict[str, Any]) -> DashboardResult:
        """Build a dashboard result from execution-mode parameters.

        Stands in for a real generator: features and integrations are a
        fixed subset and the file lists are placeholders.

        Raises:
            DashboardGenerationError: If the parameters cannot form a config
        """
        # Branding.name is a required str, so a missing name fails here even
        # when execute() runs without validate_before_execute.
        dashboard_name = inputs.get("dashboard_name")
        if not dashboard_name:
            raise DashboardGenerationError("dashboard_name is required")

        components = inputs.get("components")
        if components is None:
            components = []

        branding = inputs.get("branding")
        if branding is None:
            branding = {}
        if not isinstance(branding, dict):
            raise DashboardGenerationError("branding must be an object")

        config = DashboardConfig(
            theme=_theme(inputs.get("theme") or DEFAULT_THEME),
            layout=_layout(inputs.get("layout") or DEFAULT_LAYOUT),
            components=_string_list(components, "components"),
            features=list(EXECUTION_FEATURES),
            branding=Branding(
                name=str(dashboard_name),
                logo=branding.get("logo"),
                colors=BrandColors(
                    primary=branding.get("primary") or DEFAULT_COLORS["primary"],
                    secondary=branding.get("secondary") or DEFAULT_COLORS["secondary"],
                    accent=branding.get("accent") or DEFAULT_COLORS["accent"],
                ),
            ),
            integrations=Integrations(
                wallets=list(EXECUTION_WALLETS),
                chains=list(EXECUTION_CHAINS),
                protocols=list(EXECUTION_PROTOCOLS),
            ),
        )

        result = DashboardResult(
            dashboard_id=self.new_dashboard_id(),
            config=config,
            generated_files=GeneratedFiles(
                frontend=list(EXECUTION_FRONTEND_FILES),
                backend=list(EXECUTION_BACKEND_FILES),
                config=list(EXECUTION_CONFIG_FILES),
            ),
            status=DashboardStatus.GENERATED,
        )
        logger.debug(
            "Dashboard assembled",
            dashboard_id=result.dashboard_id,
            name=config.branding.name,
        )
        return result
