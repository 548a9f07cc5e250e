"""Deno Service Server configuration.

Process-wide settings are read once from the environment when the server
starts and then passed, unchanged, to every handler that needs them.  The
models use Pydantic v2 so values are validated at construction time.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Render.com enumerations
# ---------------------------------------------------------------------------

REGIONS: tuple[str, ...] = ("oregon", "ohio", "frankfurt", "singapore")
PLANS: tuple[str, ...] = ("free", "individual", "team", "business")

DEFAULT_REGION = "oregon"
DEFAULT_PLAN = "free"
DEFAULT_PORT = 8000

# Environment variable names
ENV_API_KEY = "RENDER_API_KEY"
ENV_REGION = "RENDER_REGION"
ENV_TEAM_ID = "RENDER_TEAM_ID"
ENV_LOG_LEVEL = "DENO_SERVICE_LOG_LEVEL"


class ProcessConfig(BaseModel):
    """Process-wide settings for the tool handlers.

    Only the *presence* of the Render API key is recorded; its value is never
    kept, logged or written into generated files.
    """

    model_config = ConfigDict(frozen=True)

    api_key_present: bool = Field(default=False, description="Whether RENDER_API_KEY is set")
    default_region: str = Field(default=DEFAULT_REGION, description="Fallback deployment region")
    team_id: str | None = Field(default=None, description="Render team applied to descriptors")
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls) -> "ProcessConfig":
        """Build a ``ProcessConfig`` from environment variables.

        Recognised variables (all optional):
            RENDER_API_KEY, RENDER_REGION, RENDER_TEAM_ID,
            DENO_SERVICE_LOG_LEVEL.
        """
        return cls(
            api_key_present=bool(os.environ.get(ENV_API_KEY)),
            default_region=os.environ.get(ENV_REGION) or DEFAULT_REGION,
            team_id=os.environ.get(ENV_TEAM_ID) or None,
            log_level=(os.environ.get(ENV_LOG_LEVEL) or "INFO").upper(),
        )
