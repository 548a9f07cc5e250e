"""Argument validation for tool invocations.

Each tool declares its parameters as a tuple of ``ParamSpec`` entries.  The
same declarations drive both the JSON Schema advertised on ``tools/list`` and
the validation of incoming ``tools/call`` arguments, so the two never drift.

Validation policy:

* Arguments that are not a mapping, and required fields that are missing or
  of the wrong type, raise ``InvalidParamsError``.
* Optional fields of the wrong type are dropped as if they were absent, so
  their default applies.  Empty strings are treated the same way.
* Optional enumerated fields with a value outside their enumeration raise
  ``InvalidParamsError``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from deno_service_server.config import DEFAULT_PLAN, DEFAULT_PORT, DEFAULT_REGION, PLANS, REGIONS
from deno_service_server.errors import InvalidParamsError

logger = logging.getLogger(__name__)

ParamType = Literal["string", "number", "object"]

_TYPE_NAMES: dict[str, str] = {
    "string": "a string",
    "number": "a number",
    "object": "an object",
}


# ---------------------------------------------------------------------------
# Parameter declarations
# ---------------------------------------------------------------------------


class ParamSpec(BaseModel):
    """One accepted field of a tool's arguments."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name on the wire")
    type: ParamType
    description: str = ""
    required: bool = False
    enum: tuple[str, ...] | None = None
    default: Any = None
    attr: str | None = Field(default=None, description="Attribute name on the params model")

    @property
    def field_name(self) -> str:
        return self.attr or self.name

    def json_schema(self) -> dict[str, Any]:
        """Return the JSON Schema fragment describing this field."""
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.type == "object":
            schema["additionalProperties"] = {"type": "string"}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.default is not None:
            schema["default"] = self.default
        return schema

    def accepts(self, value: Any) -> bool:
        """Return ``True`` if *value* has this field's primitive type.

        ``"number"`` accepts whole numbers only (``9000`` or ``9000.0``);
        a fractional value such as ``8080.5`` is rejected, as are booleans.
        ``"object"`` accepts a mapping of string keys to string values.
        """
        if self.type == "string":
            return isinstance(value, str)
        if self.type == "number":
            # bool is an int subclass but never a number on the wire
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            return float(value).is_integer()
        if self.type == "object":
            return isinstance(value, Mapping) and all(
                isinstance(k, str) and isinstance(v, str) for k, v in value.items()
            )
        return False


def input_schema(params: tuple[ParamSpec, ...]) -> dict[str, Any]:
    """Build the ``inputSchema`` object for a tool from its parameters."""
    return {
        "type": "object",
        "properties": {spec.name: spec.json_schema() for spec in params},
        "required": [spec.name for spec in params if spec.required],
    }


def validate_arguments(params: tuple[ParamSpec, ...], raw: Any) -> dict[str, Any]:
    """Check *raw* against *params* and return the accepted values.

    The returned dict is keyed by attribute name and only contains fields
    that were present and well-formed.

    Raises:
        InvalidParamsError: If *raw* is not a mapping, a required field is
            missing or mistyped, or an enumerated field has an unknown value.
    """
    if not isinstance(raw, Mapping):
        raise InvalidParamsError("Arguments must be an object")

    values: dict[str, Any] = {}
    for spec in params:
        value = raw.get(spec.name)
        if spec.required:
            if value is None or not spec.accepts(value):
                raise InvalidParamsError(f"{spec.name} must be {_TYPE_NAMES[spec.type]}")
            values[spec.field_name] = value
            continue

        if value is None:
            continue
        if not spec.accepts(value):
            logger.debug("Ignoring malformed optional argument %r", spec.name)
            continue
        if value == "":
            continue
        if spec.enum is not None and value not in spec.enum:
            raise InvalidParamsError(
                f"{spec.name} must be one of: {', '.join(spec.enum)}"
            )
        values[spec.field_name] = dict(value) if spec.type == "object" else value
    return values


# ---------------------------------------------------------------------------
# create_deno_service
# ---------------------------------------------------------------------------


CREATE_SERVICE_PARAMS: tuple[ParamSpec, ...] = (
    ParamSpec(name="name", type="string", description="Service name", required=True),
    ParamSpec(
        name="path",
        type="string",
        description="Directory to create the service in",
        required=True,
    ),
    ParamSpec(
        name="port",
        type="number",
        description="Port number for the service",
        default=DEFAULT_PORT,
    ),
    ParamSpec(name="description", type="string", description="Service description"),
)


class CreateServiceParams(BaseModel):
    """Validated arguments of ``create_deno_service``."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    port: int | None = None
    description: str | None = None

    @property
    def effective_port(self) -> int:
        """The port the generated service listens on (0 counts as unset)."""
        return self.port or DEFAULT_PORT


def validate_create_service(raw: Any) -> CreateServiceParams:
    """Validate raw ``create_deno_service`` arguments."""
    return CreateServiceParams(**validate_arguments(CREATE_SERVICE_PARAMS, raw))


# ---------------------------------------------------------------------------
# generate_render_config
# ---------------------------------------------------------------------------


RENDER_CONFIG_PARAMS: tuple[ParamSpec, ...] = (
    ParamSpec(name="name", type="string", description="Service name", required=True),
    ParamSpec(
        name="path",
        type="string",
        description="Path to service directory",
        required=True,
    ),
    ParamSpec(
        name="envVars",
        type="object",
        description="Environment variables for deployment",
        attr="env_vars",
    ),
    ParamSpec(
        name="serviceId",
        type="string",
        description="Existing render.com service ID (e.g., srv-xxxxx) for updates",
        attr="service_id",
    ),
    ParamSpec(
        name="teamId",
        type="string",
        description="Render.com team ID (overrides global setting)",
        attr="team_id",
    ),
    ParamSpec(
        name="region",
        type="string",
        description="Deployment region (overrides global setting)",
        enum=REGIONS,
        default=DEFAULT_REGION,
    ),
    ParamSpec(
        name="plan",
        type="string",
        description="Service plan type",
        enum=PLANS,
        default=DEFAULT_PLAN,
    ),
)


class RenderConfigParams(BaseModel):
    """Validated arguments of ``generate_render_config``."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    env_vars: dict[str, str] | None = None
    service_id: str | None = None
    team_id: str | None = None
    region: str | None = None
    plan: str | None = None


def validate_render_config(raw: Any) -> RenderConfigParams:
    """Validate raw ``generate_render_config`` arguments."""
    return RenderConfigParams(**validate_arguments(RENDER_CONFIG_PARAMS, raw))
