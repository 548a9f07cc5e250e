"""Handlers for the ``create_deno_service`` and ``generate_render_config`` tools.

Each handler receives already-validated arguments, performs one stateless
generation, and reports the outcome as a ``ToolResult``.  Any failure while
rendering or writing is turned into a flagged result rather than raised.
"""

from __future__ import annotations

import logging

from deno_service_server.config import ProcessConfig
from deno_service_server.errors import WriteError
from deno_service_server.scaffolder import ServiceGenerator

from .results import ToolResult
from .validation import CreateServiceParams, RenderConfigParams

logger = logging.getLogger(__name__)

API_KEY_PRESENT_NOTE = "Using global render.com configuration from MCP settings."
API_KEY_MISSING_NOTE = (
    "Note: No global render.com API key found. "
    "You may need to configure this in your MCP settings."
)


def error_message(exc: BaseException) -> str:
    """Human-readable text for *exc*, with a fallback for empty messages."""
    if isinstance(exc, WriteError):
        return exc.message
    return str(exc) or "Unknown error occurred"


class ServiceTools:
    """Tool handlers bound to the process configuration.

    Attributes:
        process_config: Settings loaded once at startup.
        generator: Renders and writes the generated files.
    """

    def __init__(
        self,
        process_config: ProcessConfig,
        generator: ServiceGenerator | None = None,
    ) -> None:
        self.process_config = process_config
        self.generator = generator or ServiceGenerator()

    async def create_deno_service(self, params: CreateServiceParams) -> ToolResult:
        """Scaffold a Deno service under ``<path>/<name>``."""
        try:
            project_path = await self.generator.generate_service(params)
        except Exception as exc:
            logger.error("create_deno_service failed for %r: %s", params.name, exc)
            return ToolResult.failure(f"Failed to create service: {error_message(exc)}")
        return ToolResult.success(f"Successfully created Deno service at {project_path}")

    async def generate_render_config(self, params: RenderConfigParams) -> ToolResult:
        """Write ``render.yaml`` for the service at ``params.path``."""
        try:
            config_path = await self.generator.generate_render_config(
                params, self.process_config
            )
        except Exception as exc:
            logger.error("generate_render_config failed for %r: %s", params.name, exc)
            return ToolResult.failure(f"Failed to generate render config: {error_message(exc)}")

        note = API_KEY_PRESENT_NOTE if self.process_config.api_key_present else API_KEY_MISSING_NOTE
        return ToolResult.success(f"Generated render.yaml configuration at {config_path}\n{note}")
