"""Tests for the DeFi dashboard node executor."""
import time

import pytest
from unittest.mock import Mock, patch

from defi_dashboard.base import ExecutionContext, NodeExecutor
from defi_dashboard.config import DashboardNodeConfig
from defi_dashboard.executor import DeFiDashboardExecutor


@pytest.fixture
def logger():
    return Mock()


@pytest.fixture
def executor(logger):
    """Executor with a mock logger and a frozen clock."""
    return DeFiDashboardExecutor(
        logger=logger,
        config=DashboardNodeConfig(validate_before_execute=False),
        clock=lambda: 1700000000.0,
    )


@pytest.fixture
def context():
    return ExecutionContext(execution_id="exec-1", workflow_id="wf-1", node_id="node-1")


class TestExecutorContract:
    """Tests for the node contract."""

    def test_is_node_executor(self, executor):
        assert isinstance(executor, NodeExecutor)

    def test_identifiers(self):
        assert DeFiDashboardExecutor.type == "defiDashboard"
        assert DeFiDashboardExecutor.name == "DeFi Dashboard Generator"
        assert "DeFi dashboard" in DeFiDashboardExecutor.description

    def test_default_logger(self):
        """A structlog logger is used when none is injected."""
        assert DeFiDashboardExecutor().logger is not None


class TestValidate:
    """Tests for DeFiDashboardExecutor.validate."""

    @pytest.mark.asyncio
    async def test_template_theme_example(self, executor):
        result = await executor.validate({"mode": "template", "default_theme": "neon"})
        assert result.valid is False
        assert result.errors == ["default_theme must be one of: light, dark, auto"]

    @pytest.mark.asyncio
    async def test_template_invalid_components(self, executor):
        result = await executor.validate({
            "template_creation_mode": True,
            "default_components": ["analytics", "yield-farm", "bridge"],
        })
        assert result.errors == ["Invalid components: yield-farm, bridge"]

    @pytest.mark.asyncio
    async def test_execution_requires_name(self, executor):
        result = await executor.validate({"components": ["swap-interface"]})
        assert result.valid is False
        assert result.errors == ["dashboard_name is required"]

    @pytest.mark.asyncio
    async def test_execution_valid(self, executor):
        result = await executor.validate({"dashboard_name": "MySuite", "theme": "dark"})
        assert result.valid is True
        assert result.to_dict() == {"valid": True, "errors": []}


class TestExecuteTemplateMode:
    """Tests for template-mode execution."""

    @pytest.mark.asyncio
    async def test_defaults(self, executor, context, logger):
        result = await executor.execute({"config_only": True}, context)

        assert result.success is True
        assert result.error is None
        config = result.outputs["dashboard_config"]
        assert len(config["components"]) == 9
        assert config["theme"] == "auto"
        assert config["layout"] == "grid"
        assert len(result.outputs["supported_features"]) == 6
        logger.info.assert_called_once()

    @pytest.mark.asyncio
    async def test_mock_dashboard_shape(self, executor, context):
        result = await executor.execute({"mode": "template"}, context)

        mock_dashboard = result.outputs["mock_dashboard"]
        assert mock_dashboard["dashboardId"] == "dashboard-1700000000000"
        assert mock_dashboard["status"] == "generated"
        assert mock_dashboard["deploymentUrl"] is None
        assert len(mock_dashboard["generatedFiles"]["frontend"]) == 10
        assert len(mock_dashboard["generatedFiles"]["backend"]) == 7
        assert len(mock_dashboard["generatedFiles"]["config"]) == 4
        assert mock_dashboard["config"] == result.outputs["dashboard_config"]

    @pytest.mark.asyncio
    async def test_logs(self, executor, context):
        result = await executor.execute({
            "template_creation_mode": True,
            "default_theme": "dark",
            "default_layout": "tabs",
            "default_name": "Acme",
        }, context)

        assert result.logs == [
            "🎨 DeFi dashboard generator configured",
            "📱 Components: 9 available",
            "🎯 Features: 9 enabled",
            "🔗 Chains: 6 supported",
            "💼 Wallets: 3 integrated",
            "🎨 Theme: dark, Layout: tabs",
            "🏷️ Branding: Acme",
        ]

    @pytest.mark.asyncio
    async def test_idempotent(self, executor, context):
        inputs = {"mode": "template", "supported_wallets": ["metamask"]}
        first = await executor.execute(inputs, context)
        second = await executor.execute(inputs, context)
        assert first.outputs["dashboard_config"] == second.outputs["dashboard_config"]

    @pytest.mark.asyncio
    async def test_execute_template_mode_directly(self, executor, context):
        result = await executor.execute_template_mode({}, context)
        assert result.success is True
        assert len(result.outputs["dashboard_config"]["components"]) == 9

    @pytest.mark.asyncio
    async def test_template_failure_is_contained(self, executor, context, logger):
        result = await executor.execute(
            {"mode": "template", "supported_chains": ["mainnet"]}, context
        )
        assert result.success is False
        assert result.outputs == {}
        assert result.error
        logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_string_chains_fail_instead_of_splitting(self, executor, context):
        """A bare chain id string is a failure, not a list of digits."""
        result = await executor.execute(
            {"mode": "template", "supported_chains": "137"}, context
        )
        assert result.success is False
        assert result.outputs == {}
        assert result.error == "supported_chains must be an array"


class TestExecuteExecutionMode:
    """Tests for execution-mode execution."""

    @pytest.mark.asyncio
    async def test_example(self, executor, context):
        result = await executor.execute(
            {"dashboard_name": "MySuite", "components": ["swap-interface"]}, context
        )

        assert result.success is True
        outputs = result.outputs
        assert outputs["config"]["components"] == ["swap-interface"]
        assert outputs["status"] == "generated"
        assert outputs["dashboard_id"] == "dashboard-1700000000000"
        assert outputs["deployment_url"] is None
        assert outputs["dashboard"]["dashboardId"] == outputs["dashboard_id"]
        assert outputs["generated_files"]["frontend"] == ["index.tsx", "components/...", "styles/..."]
        assert outputs["config"]["branding"]["name"] == "MySuite"

    @pytest.mark.asyncio
    async def test_logs(self, executor, context):
        result = await executor.execute({"dashboard_name": "MySuite"}, context)
        assert result.logs == [
            "🎨 DeFi dashboard generated: MySuite",
            "📱 Components: 0 integrated",
            "🔗 Chains: 4 supported",
            "💼 Wallets: 3 connected",
            "🎯 Features: 3 enabled",
            "📁 Files: 9 generated",
            "🚀 Status: generated",
        ]

    @pytest.mark.asyncio
    async def test_summary_lines_can_be_disabled(self, context):
        executor = DeFiDashboardExecutor(
            logger=Mock(),
            config=DashboardNodeConfig(log_summary=False),
            clock=lambda: 0.0,
        )
        result = await executor.execute({"dashboard_name": "MySuite"}, context)
        assert result.logs == [
            "🎨 DeFi dashboard generated: MySuite",
            "🚀 Status: generated",
        ]

    @pytest.mark.asyncio
    async def test_does_not_validate_by_default(self, executor, context):
        """Validation is left to the host; valid-looking records still build."""
        with patch("defi_dashboard.executor.validate_inputs") as mock_validate:
            result = await executor.execute({"dashboard_name": "MySuite"}, context)
        assert result.success is True
        mock_validate.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("inputs", [
        {},
        {"dashboard_name": "Suite", "components": "swap-interface"},
        {"dashboard_name": "Suite", "theme": "neon"},
        {"dashboard_name": "Suite", "branding": ["#fff"]},
    ])
    async def test_malformed_input_never_raises(self, executor, context, logger, inputs):
        result = await executor.execute(inputs, context)

        assert result.success is False
        assert result.outputs == {}
        assert result.error
        assert result.logs == [f"❌ Failed to generate dashboard: {result.error}"]
        assert result.execution_time == 0
        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["error"] == result.error

    @pytest.mark.asyncio
    async def test_unexpected_errors_are_contained(self, executor, context):
        with patch.object(
            executor.generator, "generate_dashboard", side_effect=RuntimeError("disk full")
        ):
            result = await executor.execute({"dashboard_name": "Suite"}, context)

        assert result.success is False
        assert result.error == "disk full"
        assert result.to_dict()["error"] == "disk full"

    @pytest.mark.asyncio
    async def test_validate_before_execute(self, context):
        executor = DeFiDashboardExecutor(
            logger=Mock(),
            config=DashboardNodeConfig(validate_before_execute=True),
            clock=lambda: 0.0,
        )
        result = await executor.execute({"theme": "neon", "layout": "masonry"}, context)

        assert result.success is False
        assert result.error == (
            "dashboard_name is required; "
            "theme must be one of: light, dark, auto; "
            "layout must be one of: grid, flex, tabs"
        )


class TestExecutionTime:
    """Tests for elapsed-time reporting."""

    @pytest.mark.asyncio
    async def test_elapsed_milliseconds(self, context):
        ticks = iter([10.0, 10.25, 10.5])
        executor = DeFiDashboardExecutor(logger=Mock(), clock=lambda: next(ticks))

        # start, dashboard id, end
        result = await executor.execute({"dashboard_name": "Suite"}, context)

        assert result.execution_time == 500
        assert result.outputs["dashboard_id"] == "dashboard-10250"
        assert result.to_dict()["executionTime"] == 500
        assert "error" not in result.to_dict()

    @pytest.mark.asyncio
    async def test_timer_is_separate_from_id_clock(self, context):
        """Elapsed time comes from the timer even when wall-clock time jumps back."""
        wall = iter([500.0])
        ticks = iter([3.0, 3.125])
        executor = DeFiDashboardExecutor(
            logger=Mock(),
            config=DashboardNodeConfig(validate_before_execute=False),
            clock=lambda: next(wall),
            timer=lambda: next(ticks),
        )

        result = await executor.execute({"dashboard_name": "Suite"}, context)

        assert result.outputs["dashboard_id"] == "dashboard-500000"
        assert result.execution_time == 125

    def test_default_timer_is_monotonic(self):
        executor = DeFiDashboardExecutor(logger=Mock())
        assert executor._timer is time.monotonic
        assert executor.generator.clock is time.time
