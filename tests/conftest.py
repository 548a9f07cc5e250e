"""Shared pytest fixtures for the Deno Service Server test suite.

Provides reusable fixtures for:
- Process configuration with and without a Render API key
- A fully wired tool registry
- Output locations that cannot be written to
"""

from __future__ import annotations

from pathlib import Path

import pytest

from deno_service_server.config import ProcessConfig
from deno_service_server.tools.registry import ToolRegistry, build_registry


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def process_config() -> ProcessConfig:
    """Configuration as loaded from an environment without any Render variables."""
    return ProcessConfig()


@pytest.fixture
def keyed_config() -> ProcessConfig:
    """Configuration with an API key present and a non-default region."""
    return ProcessConfig(api_key_present=True, default_region="frankfurt")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@pytest.fixture
def registry(process_config: ProcessConfig) -> ToolRegistry:
    """Registry holding both tools, bound to ``process_config``."""
    return build_registry(process_config)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def blocked_dir(tmp_path: Path) -> Path:
    """A path that exists as a regular file, so nothing can be created below it.

    Unlike ``chmod``-based fixtures this also fails when the suite runs as root.
    """
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory\n", encoding="utf-8")
    return blocker
