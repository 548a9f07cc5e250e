"""Tests for service file rendering.

Covers:
- Exactly three files are produced
- main.ts port interpolation and default
- Middleware order in main.ts
- deno.json tasks, fmt and lint settings
- README description handling and task instructions
- Determinism
"""

from __future__ import annotations

import json

import pytest

from deno_service_server.scaffolder.templates import (
    DENO_TASKS,
    TemplateRenderer,
    build_deno_manifest,
    render_service_files,
)
from deno_service_server.tools.validation import CreateServiceParams


EXPECTED_MAIN_TS = """\
import { Application } from "https://deno.land/x/oak/mod.ts";

const app = new Application();
const port = 9000;

// Logger middleware
app.use(async (ctx, next) => {
  await next();
  const rt = ctx.response.headers.get("X-Response-Time");
  console.log(`${ctx.request.method} ${ctx.request.url} - ${rt}`);
});

// Response time middleware
app.use(async (ctx, next) => {
  const start = Date.now();
  await next();
  const ms = Date.now() - start;
  ctx.response.headers.set("X-Response-Time", `${ms}ms`);
});

// Routes
app.use((ctx) => {
  ctx.response.body = { message: "Welcome to your Deno service!" };
});

console.log(`Server running on http://localhost:${port}`);
await app.listen({ port });"""


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def params() -> CreateServiceParams:
    return CreateServiceParams(name="svc", path="/tmp", port=9000, description="Orders API")


# ---------------------------------------------------------------------------
# render_service_files
# ---------------------------------------------------------------------------


class TestRenderServiceFiles:
    def test_three_files(self, params, renderer):
        files = render_service_files(params, renderer)
        assert set(files) == {"main.ts", "deno.json", "README.md"}

    def test_deterministic(self, params):
        first = render_service_files(params)
        second = render_service_files(params)
        assert first == second

    def test_default_renderer(self, params):
        assert render_service_files(params) == render_service_files(params, TemplateRenderer())


# ---------------------------------------------------------------------------
# main.ts
# ---------------------------------------------------------------------------


class TestEntrypoint:
    def test_exact_contents(self, params, renderer):
        main_ts = render_service_files(params, renderer)["main.ts"]
        assert main_ts == EXPECTED_MAIN_TS

    def test_no_trailing_newline(self, params, renderer):
        main_ts = render_service_files(params, renderer)["main.ts"]
        assert main_ts.endswith("await app.listen({ port });")

    def test_port_interpolated(self, params, renderer):
        main_ts = render_service_files(params, renderer)["main.ts"]
        assert "const port = 9000;" in main_ts
        assert "await app.listen({ port });" in main_ts

    def test_default_port(self, renderer):
        main_ts = render_service_files(
            CreateServiceParams(name="svc", path="/tmp"), renderer
        )["main.ts"]
        assert "const port = 8000;" in main_ts

    def test_zero_port_uses_default(self, renderer):
        main_ts = render_service_files(
            CreateServiceParams(name="svc", path="/tmp", port=0), renderer
        )["main.ts"]
        assert "const port = 8000;" in main_ts

    def test_imports_oak(self, params, renderer):
        main_ts = render_service_files(params, renderer)["main.ts"]
        assert main_ts.startswith('import { Application } from "https://deno.land/x/oak/mod.ts";')

    def test_middleware_order(self, params, renderer):
        main_ts = render_service_files(params, renderer)["main.ts"]
        logger_at = main_ts.index("// Logger middleware")
        timing_at = main_ts.index("// Response time middleware")
        routes_at = main_ts.index("// Routes")
        assert logger_at < timing_at < routes_at

    def test_response_time_header(self, params, renderer):
        main_ts = render_service_files(params, renderer)["main.ts"]
        assert 'ctx.response.headers.get("X-Response-Time")' in main_ts
        assert 'ctx.response.headers.set("X-Response-Time", `${ms}ms`);' in main_ts
        assert "console.log(`${ctx.request.method} ${ctx.request.url} - ${rt}`);" in main_ts

    def test_welcome_payload(self, params, renderer):
        main_ts = render_service_files(params, renderer)["main.ts"]
        assert 'ctx.response.body = { message: "Welcome to your Deno service!" };' in main_ts

    def test_no_template_syntax_left(self, params, renderer):
        main_ts = render_service_files(params, renderer)["main.ts"]
        assert "{{" not in main_ts
        assert "{%" not in main_ts


# ---------------------------------------------------------------------------
# deno.json
# ---------------------------------------------------------------------------


class TestManifest:
    def test_valid_json(self, params, renderer):
        manifest = json.loads(render_service_files(params, renderer)["deno.json"])
        assert manifest == build_deno_manifest()

    def test_tasks(self):
        tasks = build_deno_manifest()["tasks"]
        assert tasks == {
            "start": "deno run --allow-net main.ts",
            "dev": "deno run --allow-net --watch main.ts",
            "test": "deno test --allow-net",
        }

    def test_fmt_options(self):
        fmt = build_deno_manifest()["fmt"]
        assert fmt["files"]["include"] == ["**/*.ts"]
        assert fmt["options"] == {"lineWidth": 100, "indentWidth": 2}

    def test_lint_rules(self):
        lint = build_deno_manifest()["lint"]
        assert lint["files"]["include"] == ["**/*.ts"]
        assert lint["rules"]["tags"] == ["recommended"]

    def test_two_space_indent(self, params, renderer):
        text = render_service_files(params, renderer)["deno.json"]
        assert text.startswith('{\n  "tasks": {\n    "start": ')

    def test_manifest_is_a_copy(self):
        build_deno_manifest()["tasks"]["start"] = "changed"
        assert DENO_TASKS["start"] == "deno run --allow-net main.ts"


# ---------------------------------------------------------------------------
# README.md
# ---------------------------------------------------------------------------


class TestReadme:
    def test_with_description(self, params, renderer):
        readme = render_service_files(params, renderer)["README.md"]
        assert readme.startswith("# svc\n\nOrders API\n\n## Development\n")

    def test_without_description(self, renderer):
        readme = render_service_files(
            CreateServiceParams(name="svc", path="/tmp"), renderer
        )["README.md"]
        assert readme.startswith("# svc\n\n## Development\n")

    def test_empty_description_omitted(self, renderer):
        readme = render_service_files(
            CreateServiceParams(name="svc", path="/tmp", description=""), renderer
        )["README.md"]
        assert readme.startswith("# svc\n\n## Development\n")

    def test_mirrors_task_names(self, params, renderer):
        readme = render_service_files(params, renderer)["README.md"]
        for task in DENO_TASKS:
            assert f"deno task {task}" in readme

    def test_api_reference(self, params, renderer):
        readme = render_service_files(params, renderer)["README.md"]
        assert readme.rstrip().endswith("- `GET /` - Welcome message")
