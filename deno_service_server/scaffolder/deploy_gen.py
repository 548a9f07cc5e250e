"""Render.com deployment descriptor generation.

Builds the ``render.yaml`` descriptor for a Deno web service.  The file keeps
the name Render looks for, but its content is JSON, which every YAML parser
also accepts.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from deno_service_server.config import DEFAULT_PLAN, DEFAULT_REGION, ProcessConfig
from deno_service_server.tools.validation import RenderConfigParams
from deno_service_server.utils import dump_json

from .templates import START_COMMAND

DESCRIPTOR_FILE = "render.yaml"


class DeploymentDescriptor(BaseModel):
    """One service entry of a Render blueprint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["web"] = "web"
    name: str
    env: Literal["deno"] = "deno"
    region: str
    plan: str
    build_command: None = Field(default=None, alias="buildCommand")
    start_command: str = Field(default=START_COMMAND, alias="startCommand")
    env_vars: dict[str, str] = Field(default_factory=dict, alias="envVars")
    id: str | None = None
    team_id: str | None = Field(default=None, alias="teamId")

    def to_blueprint(self) -> dict[str, Any]:
        """Return the ``{"services": [...]}`` document for this service.

        ``buildCommand`` is always emitted as ``null``; ``id`` and ``teamId``
        only when set.
        """
        service = self.model_dump(by_alias=True, exclude={"id", "team_id"})
        if self.id:
            service["id"] = self.id
        if self.team_id:
            service["teamId"] = self.team_id
        return {"services": [service]}


def render_deployment_descriptor(
    params: RenderConfigParams,
    process_config: ProcessConfig,
) -> DeploymentDescriptor:
    """Compose the descriptor, applying argument > process > literal defaults.

    A ``service_id`` links the descriptor to an existing Render service
    (update in place); without one Render creates a new service.
    """
    return DeploymentDescriptor(
        name=params.name,
        region=params.region or process_config.default_region or DEFAULT_REGION,
        plan=params.plan or DEFAULT_PLAN,
        env_vars=dict(params.env_vars or {}),
        id=params.service_id,
        team_id=params.team_id or process_config.team_id,
    )


def render_descriptor_files(descriptor: DeploymentDescriptor) -> dict[str, str]:
    """Return ``{"render.yaml": <json>}`` for *descriptor*."""
    return {DESCRIPTOR_FILE: dump_json(descriptor.to_blueprint())}
