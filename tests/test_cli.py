"""Tests for the CLI commands."""
from __future__ import annotations

import json

import httpx
import pytest
from typer.testing import CliRunner

from rigbuilder.cli.main import CliContext, app

from conftest import BASE_URL, FakeBackend, generate_mock_components

runner = CliRunner()


@pytest.fixture
def cli_obj(settings, backend: FakeBackend) -> CliContext:
    return CliContext(settings=settings, transport=backend.transport)


def test_health_success(cli_obj, backend):
    backend.reply(200, json={"message": "Backend is running"})

    result = runner.invoke(app, ["health"], obj=cli_obj)

    assert result.exit_code == 0, result.output
    assert "Health" in result.output
    assert "Backend is running" in result.output


def test_health_empty_message(cli_obj, backend):
    backend.reply(200, json={"message": ""})

    result = runner.invoke(app, ["health"], obj=cli_obj)

    assert result.exit_code == 0
    assert "No message available" in result.output


def test_health_http_error(cli_obj, backend):
    backend.reply(500, json={"error": "boom"})

    result = runner.invoke(app, ["health"], obj=cli_obj)

    assert result.exit_code == 1
    assert "Error: HTTP 500: Internal Server Error" in result.output


def test_health_network_error(cli_obj, backend):
    backend.fail(httpx.ConnectError("Network error"))

    result = runner.invoke(app, ["health"], obj=cli_obj)

    assert result.exit_code == 1
    assert "Error: Network error" in result.output


def test_components_list_json(cli_obj, backend):
    backend.reply(200, json=generate_mock_components(2))

    result = runner.invoke(app, ["components", "list", "--json"], obj=cli_obj)

    assert result.exit_code == 0, result.output
    assert str(backend.last_request.url) == f"{BASE_URL}/components?page=1"
    assert [item["id"] for item in json.loads(result.output)] == ["1", "2"]


def test_components_list_by_brand(cli_obj, backend):
    backend.reply(200, json=generate_mock_components(1))

    result = runner.invoke(
        app, ["components", "list", "-c", "gpu", "-b", "NVIDIA", "-p", "2", "--json"], obj=cli_obj
    )

    assert result.exit_code == 0, result.output
    assert str(backend.last_request.url) == f"{BASE_URL}/components/gpu/NVIDIA?page=2"


def test_components_list_table(cli_obj, backend):
    backend.reply(200, json=generate_mock_components(1))

    result = runner.invoke(app, ["components", "list", "--category", "cpu"], obj=cli_obj)

    assert result.exit_code == 0, result.output
    assert "Intel" in result.output


def test_components_list_output_file(cli_obj, backend, tmp_path):
    backend.reply(200, json=generate_mock_components(3))
    out = tmp_path / "components.json"

    result = runner.invoke(app, ["components", "list", "--output", str(out)], obj=cli_obj)

    assert result.exit_code == 0, result.output
    assert len(json.loads(out.read_text(encoding="utf-8"))) == 3


def test_brand_requires_category(cli_obj, backend):
    result = runner.invoke(app, ["components", "list", "--brand", "Intel"], obj=cli_obj)

    assert result.exit_code != 0
    assert backend.requests == []


def test_invalid_page(cli_obj, backend):
    result = runner.invoke(app, ["components", "list", "--page", "0"], obj=cli_obj)

    assert result.exit_code != 0
    assert backend.requests == []


def test_components_get_fallback_id(cli_obj, backend):
    backend.reply(404, json={"error": "Component not found"})

    result = runner.invoke(app, ["components", "get", "404", "--json"], obj=cli_obj)

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"error": "Component not found", "id": "404"}


def test_components_transport_error(cli_obj, backend):
    backend.fail(httpx.ConnectError("connection refused"))

    result = runner.invoke(app, ["components", "list", "--json"], obj=cli_obj)

    assert result.exit_code == 1
    assert "connection refused" in result.output


def test_backend_url_override(cli_obj, backend):
    backend.reply(200, json={"message": "ok"})

    result = runner.invoke(app, ["--backend-url", "http://other:9000", "health"], obj=cli_obj)

    assert result.exit_code == 0, result.output
    assert str(backend.last_request.url) == "http://other:9000/health"


def test_doctor_reports_backend_health(cli_obj, backend):
    backend.reply(200, json={"message": "Backend is running"})

    result = runner.invoke(app, ["doctor", "run"], obj=cli_obj)

    assert result.exit_code == 0, result.output
    assert "Backend health" in result.output


def test_doctor_fails_when_backend_down(cli_obj, backend):
    backend.fail(httpx.ConnectError("refused"))

    result = runner.invoke(app, ["doctor", "run"], obj=cli_obj)

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_setup_backend_writes_user_env(monkeypatch, tmp_path, cli_obj):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setattr("sys.platform", "linux")

    result = runner.invoke(app, ["doctor", "setup-backend"], input="http://builder.lan:8080/\n", obj=cli_obj)

    assert result.exit_code == 0, result.output
    env_file = tmp_path / "rigbuilder" / ".env"
    assert "RIGBUILDER_BACKEND_URL=http://builder.lan:8080" in env_file.read_text(encoding="utf-8")


def test_bracketed_backend_values_render_literally(cli_obj, backend):
    backend.reply(
        200,
        json=[{"id": 3, "category": "cooler", "brand": "Cooler Master", "model": "Hyper [/x] 212", "specs": {}}],
    )

    result = runner.invoke(app, ["components", "list", "--category", "[red]cooler"], obj=cli_obj)

    assert result.exit_code == 0, result.output
    assert "[/x]" in result.output
    assert "[red]cooler" in result.output


def test_bracketed_error_body_renders_literally(cli_obj, backend):
    backend.reply(404, json={"error": "no match for [/item]"})

    result = runner.invoke(app, ["components", "get", "7"], obj=cli_obj)

    assert result.exit_code == 0, result.output
    assert "[/item]" in result.output


def test_bracketed_transport_error_renders_literally(cli_obj, backend):
    backend.fail(httpx.ConnectError("refused [/proxy]"))

    result = runner.invoke(app, ["components", "list", "--json"], obj=cli_obj)

    assert result.exit_code == 1
    assert "Error: refused [/proxy]" in result.output


def test_invalid_log_level_is_reported_as_configuration_error(monkeypatch, backend):
    monkeypatch.setenv("RIGBUILDER_LOG_LEVEL", "verbose")

    result = runner.invoke(app, ["health"])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
    assert backend.requests == []
