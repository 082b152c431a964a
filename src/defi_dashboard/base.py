"""Node executor contract shared with the host workflow framework."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ExecutionContext:
    """Context handed to a node by the workflow engine.

    The dashboard node passes it through without reading it.
    """

    execution_id: str = ""
    workflow_id: str | None = None
    node_id: str | None = None
    user_id: str | None = None
    variables: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, context: dict[str, Any]) -> "ExecutionContext":
        """Create an ExecutionContext from the engine's dict payload."""
        return cls(
            execution_id=context.get("execution_id", context.get("executionId", "")),
            workflow_id=context.get("workflow_id", context.get("workflowId")),
            node_id=context.get("node_id", context.get("nodeId")),
            user_id=context.get("user_id", context.get("userId")),
            variables=context.get("variables", {}),
            metadata={k: v for k, v in context.items() if k not in {
                "execution_id", "executionId", "workflow_id", "workflowId",
                "node_id", "nodeId", "user_id", "userId", "variables",
            }},
        )


@dataclass
class ValidationResult:
    """Outcome of validating a node's inputs."""

    valid: bool
    errors: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True, errors=[])

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        return cls(valid=not errors, errors=list(errors))

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors)}


@dataclass
class NodeExecutionResult:
    """Result returned to the workflow engine after a node runs."""

    success: bool
    outputs: dict[str, Any] = field(default_factory=dict)
    logs: list[str] = field(default_factory=list)
    execution_time: int = 0  # milliseconds
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the engine's wire shape."""
        result: dict[str, Any] = {
            "success": self.success,
            "outputs": self.outputs,
            "logs": list(self.logs),
            "executionTime": self.execution_time,
        }
        if self.error is not None:
            result["error"] = self.error
        return result


class NodeExecutor(ABC):
    """Base class for workflow nodes.

    Subclasses declare ``type``, ``name`` and ``description`` and implement
    ``validate`` and ``execute``.
    """

    type: str = ""
    name: str = ""
    description: str = ""

    @abstractmethod
    async def validate(self, inputs: dict[str, Any]) -> ValidationResult:
        """
        Check node inputs before execution.

        Args:
            inputs: Raw node parameters

        Returns:
            ValidationResult carrying every reported problem as data
        """
        pass

    @abstractmethod
    async def execute(
        self,
        inputs: dict[str, Any],
        context: ExecutionContext,
    ) -> NodeExecutionResult:
        """
        Run the node.

        Args:
            inputs: Raw node parameters
            context: Workflow execution context

        Returns:
            NodeExecutionResult with outputs on success or an error message
        """
        pass
