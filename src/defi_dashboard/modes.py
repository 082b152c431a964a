"""Invocation mode resolution."""

from enum import Enum
from typing import Any

from defi_dashboard.constants import TEMPLATE_MODE_FLAGS, TEMPLATE_MODE_VALUE


class ExecutionMode(str, Enum):
    """How a node invocation should be handled."""

    TEMPLATE = "template"  # Defaults and schema only
    EXECUTION = "execution"  # Dashboard built from caller parameters


def resolve_mode(inputs: dict[str, Any]) -> ExecutionMode:
    """Pick the invocation mode from raw node inputs.

    Template mode is selected when ``mode`` is ``"template"`` or any of the
    template flags is truthy.
    """
    if inputs.get("mode") == TEMPLATE_MODE_VALUE:
        return ExecutionMode.TEMPLATE
    if any(inputs.get(flag) for flag in TEMPLATE_MODE_FLAGS):
        return ExecutionMode.TEMPLATE
    return ExecutionMode.EXECUTION
