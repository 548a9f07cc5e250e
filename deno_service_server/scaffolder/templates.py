"""Jinja2 template rendering for Deno service scaffolding.

Provides the ``TemplateRenderer`` class, which loads templates from the
``deno_service_server/scaffolder/templates/`` directory, and
``render_service_files``, which turns validated ``create_deno_service``
arguments into the literal contents of every generated file.  Nothing here
writes to disk; see :mod:`deno_service_server.scaffolder.writer`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from deno_service_server.tools.validation import CreateServiceParams
from deno_service_server.utils import dump_json


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

ENTRYPOINT_FILE = "main.ts"
MANIFEST_FILE = "deno.json"
README_FILE = "README.md"

START_COMMAND = "deno run --allow-net main.ts"

DENO_TASKS: dict[str, str] = {
    "start": START_COMMAND,
    "dev": "deno run --allow-net --watch main.ts",
    "test": "deno test --allow-net",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for service scaffolding.

    Templates are rendered with a context dictionary holding the service
    metadata (name, port, description).
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"main.ts.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Service files
# ---------------------------------------------------------------------------


def build_deno_manifest() -> dict[str, Any]:
    """Return the ``deno.json`` task, formatter and linter settings."""
    return {
        "tasks": dict(DENO_TASKS),
        "fmt": {
            "files": {"include": ["**/*.ts"]},
            "options": {"lineWidth": 100, "indentWidth": 2},
        },
        "lint": {
            "files": {"include": ["**/*.ts"]},
            "rules": {"tags": ["recommended"]},
        },
    }


def render_service_files(
    params: CreateServiceParams,
    renderer: TemplateRenderer | None = None,
) -> dict[str, str]:
    """Render every file of a new Deno service.

    Output is deterministic: the same *params* always yield the same
    contents.

    Returns:
        Mapping of path relative to the service root -> file content.
    """
    renderer = renderer or TemplateRenderer()
    context = {
        "name": params.name,
        "description": params.description or "",
        "port": params.effective_port,
    }
    return {
        ENTRYPOINT_FILE: renderer.render("main.ts.j2", context),
        MANIFEST_FILE: dump_json(build_deno_manifest()),
        README_FILE: renderer.render("README.md.j2", context),
    }
