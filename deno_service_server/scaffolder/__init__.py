"""Deno service scaffolder -- renders and writes generated files.

Renders a minimal Oak web service (``main.ts``, ``deno.json``, ``README.md``)
and a Render deployment descriptor (``render.yaml``) from validated tool
arguments.

Quick usage::

    from deno_service_server.scaffolder import ServiceGenerator
    from deno_service_server.tools.validation import validate_create_service

    params = validate_create_service({"name": "svc", "path": "/tmp"})
    project_path = await ServiceGenerator().generate_service(params)
"""

from deno_service_server.scaffolder.deploy_gen import (
    DeploymentDescriptor,
    render_deployment_descriptor,
)
from deno_service_server.scaffolder.generator import ServiceGenerator
from deno_service_server.scaffolder.templates import TemplateRenderer, render_service_files
from deno_service_server.scaffolder.writer import materialize

__all__ = [
    "DeploymentDescriptor",
    "ServiceGenerator",
    "TemplateRenderer",
    "materialize",
    "render_deployment_descriptor",
    "render_service_files",
]
