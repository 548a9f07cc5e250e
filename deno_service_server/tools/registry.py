"""Tool registry and dispatcher.

The registry advertises the available tools (name, description, parameter
schema) and routes each invocation: unknown names and malformed arguments are
raised as protocol errors, while anything a handler raises is converted into
a flagged ``ToolResult`` so it never escapes.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

from deno_service_server.config import ProcessConfig
from deno_service_server.errors import MethodNotFoundError
from deno_service_server.scaffolder import ServiceGenerator

from .handlers import ServiceTools, error_message
from .results import ToolResult
from .validation import (
    CREATE_SERVICE_PARAMS,
    RENDER_CONFIG_PARAMS,
    ParamSpec,
    input_schema,
    validate_create_service,
    validate_render_config,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """Public description of one tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: tuple[ParamSpec, ...]

    @property
    def input_schema(self) -> dict[str, Any]:
        return input_schema(self.parameters)


CREATE_SERVICE_TOOL = ToolDescriptor(
    name="create_deno_service",
    description="Create a new Deno web service project with best practices",
    parameters=CREATE_SERVICE_PARAMS,
)

RENDER_CONFIG_TOOL = ToolDescriptor(
    name="generate_render_config",
    description=(
        "Generate render.yaml configuration for deployment. "
        "Optionally link to existing render.com services using serviceId."
    ),
    parameters=RENDER_CONFIG_PARAMS,
)


@dataclass(frozen=True)
class RegisteredTool:
    descriptor: ToolDescriptor
    validate: Callable[[Any], BaseModel]
    handler: Callable[[Any], Awaitable[ToolResult]]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class ToolRegistry:
    """Ordered collection of tools with a single ``dispatch`` entry point."""

    def __init__(self) -> None:
        self._tools: dict[str, RegisteredTool] = {}

    def register(
        self,
        descriptor: ToolDescriptor,
        validate: Callable[[Any], BaseModel],
        handler: Callable[[Any], Awaitable[ToolResult]],
    ) -> None:
        """Add a tool.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """
        if descriptor.name in self._tools:
            raise ValueError(f"Tool '{descriptor.name}' is already registered")
        self._tools[descriptor.name] = RegisteredTool(descriptor, validate, handler)

    def list_tools(self) -> list[ToolDescriptor]:
        """Return the registered tools in registration order."""
        return [tool.descriptor for tool in self._tools.values()]

    def get(self, name: str) -> RegisteredTool:
        """Look up a tool by name.

        Raises:
            MethodNotFoundError: If no tool is registered under *name*.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise MethodNotFoundError(f"Unknown tool: {name}") from None

    async def dispatch(self, name: str, arguments: Any) -> ToolResult:
        """Validate *arguments* and run the named tool.

        Raises:
            MethodNotFoundError: If *name* is not registered.
            InvalidParamsError: If *arguments* fail validation.
        """
        tool = self.get(name)
        params = tool.validate(arguments)
        logger.info("Dispatching %s", name)
        try:
            return await tool.handler(params)
        except Exception as exc:
            logger.exception("Tool %s raised", name)
            return ToolResult.failure(f"Internal error in {name}: {error_message(exc)}")


def build_registry(
    process_config: ProcessConfig,
    generator: ServiceGenerator | None = None,
) -> ToolRegistry:
    """Create the registry holding both Deno service tools."""
    tools = ServiceTools(process_config, generator)
    registry = ToolRegistry()
    registry.register(CREATE_SERVICE_TOOL, validate_create_service, tools.create_deno_service)
    registry.register(RENDER_CONFIG_TOOL, validate_render_config, tools.generate_render_config)
    return registry
