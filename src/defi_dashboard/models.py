"""Data models for dashboard configuration and generation results."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from defi_dashboard.constants import (
    DEFAULT_COLORS,
    DEFAULT_LAYOUT,
    DEFAULT_THEME,
)


class DashboardTheme(str, Enum):
    """Colour scheme of the generated dashboard."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class DashboardLayout(str, Enum):
    """Arrangement of dashboard components."""

    GRID = "grid"
    FLEX = "flex"
    TABS = "tabs"


class DashboardStatus(str, Enum):
    """Lifecycle state of a generated dashboard."""

    GENERATED = "generated"
    BUILDING = "building"
    DEPLOYED = "deployed"
    ERROR = "error"


class _Record(BaseModel):
    """Immutable record serialized with camelCase aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the engine's JSON shape."""
        return self.model_dump(mode="json", by_alias=True)


class BrandColors(_Record):
    """Primary, secondary and accent colour codes."""

    primary: str = DEFAULT_COLORS["primary"]
    secondary: str = DEFAULT_COLORS["secondary"]
    accent: str = DEFAULT_COLORS["accent"]


class Branding(_Record):
    """Name, logo and colours shown on the dashboard."""

    name: str
    logo: str | None = None
    colors: BrandColors = Field(default_factory=BrandColors)


class Integrations(_Record):
    """Wallets, chain ids and protocols wired into the dashboard."""

    wallets: list[str] = Field(default_factory=list)
    chains: list[int] = Field(default_factory=list)
    protocols: list[str] = Field(default_factory=list)


class DashboardConfig(_Record):
    """Complete dashboard configuration."""

    theme: DashboardTheme = DashboardTheme(DEFAULT_THEME)
    layout: DashboardLayout = DashboardLayout(DEFAULT_LAYOUT)
    components: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    branding: Branding
    integrations: Integrations = Field(default_factory=Integrations)


class GeneratedFiles(_Record):
    """File paths a generator would emit, grouped by target."""

    frontend: list[str] = Field(default_factory=list)
    backend: list[str] = Field(default_factory=list)
    config: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.frontend) + len(self.backend) + len(self.config)


class DashboardResult(_Record):
    """Outcome of a dashboard generation run."""

    dashboard_id: str = Field(alias="dashboardId")
    config: DashboardConfig
    generated_files: GeneratedFiles = Field(alias="generatedFiles")
    deployment_url: str | None = Field(default=None, alias="deploymentUrl")
    status: DashboardStatus = DashboardStatus.GENERATED
