"""DeFi dashboard node executor."""

import time
from typing import Any

import structlog

from defi_dashboard.base import (
    ExecutionContext,
    NodeExecutionResult,
    NodeExecutor,
    ValidationResult,
)
from defi_dashboard.config import DashboardNodeConfig
from defi_dashboard.constants import SUPPORTED_FEATURES
from defi_dashboard.errors import DashboardGenerationError
from defi_dashboard.generator import Clock, DashboardGenerator
from defi_dashboard.models import DashboardResult
from defi_dashboard.modes import ExecutionMode, resolve_mode
from defi_dashboard.validation import validate_inputs


class DeFiDashboardExecutor(NodeExecutor):
    """Workflow node that configures and mock-generates DeFi dashboards.

    Template mode returns the default configuration together with a mock
    dashboard. Execution mode builds a dashboard record from the caller's
    parameters. ``execute`` does not validate unless
    ``config.validate_before_execute`` is set; the host is expected to call
    ``validate`` first.
    """

    type = "defiDashboard"
    name = "DeFi Dashboard Generator"
    description = "Generate complete DeFi dashboard with all integrated components and features"

    def __init__(
        self,
        logger: Any = None,
        config: DashboardNodeConfig | None = None,
        clock: Clock | None = None,
        timer: Clock | None = None,
    ) -> None:
        self.config = config or DashboardNodeConfig()
        self.logger = logger or structlog.get_logger()
        self.generator = DashboardGenerator(
            clock=clock,
            id_prefix=self.config.id_prefix,
            default_name=self.config.default_name,
        )
        # Elapsed time uses a monotonic timer; an injected clock stands in for
        # both when no timer is given.
        self._timer = timer or clock or time.monotonic

    def _elapsed_ms(self, start: float) -> int:
        return int((self._timer() - start) * 1000)

    async def validate(self, inputs: dict[str, Any]) -> ValidationResult:
        """Validate inputs for whichever mode they select."""
        return validate_inputs(inputs, resolve_mode(inputs))

    async def execute(
        self,
        inputs: dict[str, Any],
        context: ExecutionContext,
    ) -> NodeExecutionResult:
        """Run the node, converting any generation failure into a result."""
        start = self._timer()
        mode = resolve_mode(inputs)

        try:
            if self.config.validate_before_execute:
                validation = validate_inputs(inputs, mode)
                if not validation.valid:
                    raise DashboardGenerationError("; ".join(validation.errors))

            if mode is ExecutionMode.TEMPLATE:
                return self._run_template_mode(inputs, start)

            dashboard = self.generator.generate_dashboard(inputs)
            return NodeExecutionResult(
                success=True,
                outputs=self._execution_outputs(dashboard),
                logs=self._execution_logs(dashboard),
                execution_time=self._elapsed_ms(start),
            )

        except Exception as e:
            self.logger.error(
                "DeFi dashboard generation failed",
                mode=mode.value,
                error=str(e),
            )
            return NodeExecutionResult(
                success=False,
                outputs={},
                error=str(e),
                logs=[f"❌ Failed to generate dashboard: {e}"],
                execution_time=self._elapsed_ms(start),
            )

    async def execute_template_mode(
        self,
        inputs: dict[str, Any],
        context: ExecutionContext,
    ) -> NodeExecutionResult:
        """Configure the generator for template creation.

        Unlike ``execute``, failures propagate to the caller.
        """
        return self._run_template_mode(inputs, self._timer())

    def _run_template_mode(self, inputs: dict[str, Any], start: float) -> NodeExecutionResult:
        self.logger.info("Configuring DeFi dashboard generator for template creation")

        mock_dashboard = self.generator.generate_template(inputs)
        config = mock_dashboard.config

        logs = ["🎨 DeFi dashboard generator configured"]
        if self.config.log_summary:
            logs.extend([
                f"📱 Components: {len(config.components)} available",
                f"🎯 Features: {len(config.features)} enabled",
                f"🔗 Chains: {len(config.integrations.chains)} supported",
                f"💼 Wallets: {len(config.integrations.wallets)} integrated",
                f"🎨 Theme: {config.theme.value}, Layout: {config.layout.value}",
                f"🏷️ Branding: {config.branding.name}",
            ])

        return NodeExecutionResult(
            success=True,
            outputs={
                "dashboard_config": config.to_dict(),
                "mock_dashboard": mock_dashboard.to_dict(),
                "supported_features": list(SUPPORTED_FEATURES),
            },
            logs=logs,
            execution_time=self._elapsed_ms(start),
        )

    def _execution_outputs(self, dashboard: DashboardResult) -> dict[str, Any]:
        return {
            "dashboard": dashboard.to_dict(),
            "dashboard_id": dashboard.dashboard_id,
            "config": dashboard.config.to_dict(),
            "generated_files": dashboard.generated_files.to_dict(),
            "deployment_url": dashboard.deployment_url,
            "status": dashboard.status.value,
        }

    def _execution_logs(self, dashboard: DashboardResult) -> list[str]:
        config = dashboard.config
        logs = [f"🎨 DeFi dashboard generated: {config.branding.name}"]
        if self.config.log_summary:
            logs.extend([
                f"📱 Components: {len(config.components)} integrated",
                f"🔗 Chains: {len(config.integrations.chains)} supported",
                f"💼 Wallets: {len(config.integrations.wallets)} connected",
                f"🎯 Features: {len(config.features)} enabled",
                f"📁 Files: {dashboard.generated_files.total} generated",
            ])
        logs.append(f"🚀 Status: {dashboard.status.value}")
        return logs
