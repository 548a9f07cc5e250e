"""Main scaffolding orchestrator.

Takes validated tool arguments, renders the service files and the Render
deployment descriptor, and persists them with the filesystem writer.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from deno_service_server.config import ProcessConfig
from deno_service_server.tools.validation import CreateServiceParams, RenderConfigParams

from .deploy_gen import DESCRIPTOR_FILE, render_deployment_descriptor, render_descriptor_files
from .templates import TemplateRenderer, render_service_files
from .writer import materialize

logger = logging.getLogger(__name__)


class ServiceGenerator:
    """Generates Deno service projects and their deployment descriptors.

    The generator owns a single ``TemplateRenderer`` so templates are parsed
    once per process.
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    async def generate_service(self, params: CreateServiceParams) -> Path:
        """Generate a service project under ``<path>/<name>``.

        Args:
            params: Validated ``create_deno_service`` arguments.

        Returns:
            Absolute path to the generated project root.

        Raises:
            WriteError: If the project directory or a file cannot be written.
        """
        project_root = Path(os.path.abspath(os.path.join(params.path, params.name)))
        files = render_service_files(params, self.renderer)
        await materialize(project_root, files)
        logger.info("Generated Deno service %r at %s", params.name, project_root)
        return project_root

    async def generate_render_config(
        self,
        params: RenderConfigParams,
        process_config: ProcessConfig,
    ) -> Path:
        """Write ``render.yaml`` into ``params.path``.

        Returns:
            Path of the written descriptor file.

        Raises:
            WriteError: If the descriptor cannot be written.
        """
        descriptor = render_deployment_descriptor(params, process_config)
        target_dir = Path(os.path.abspath(params.path))
        await materialize(target_dir, render_descriptor_files(descriptor))
        config_path = target_dir / DESCRIPTOR_FILE
        logger.info(
            "Generated render config for %r (region=%s, plan=%s)",
            params.name,
            descriptor.region,
            descriptor.plan,
        )
        return config_path
