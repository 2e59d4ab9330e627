"""rigbuilder CLI (Typer + Rich).

Commands:
- `rigbuilder health`
- `rigbuilder components list [--category C] [--brand B] [--page N] [--json] [--output PATH]`
- `rigbuilder components get ID [--page N] [--json]`
- `rigbuilder doctor run | setup-backend`
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import httpx
import pydantic
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from rigbuilder.adapters.backend_api import BackendApi
from rigbuilder.adapters.http_client import build_async_client
from rigbuilder.adapters.json_exporter import dumps_records, export_records_json
from rigbuilder.cli import doctor
from rigbuilder.cli.ui_components import (
    build_components_table,
    build_health_panel,
    print_banner,
)
from rigbuilder.core.config import AppSettings
from rigbuilder.core.errors import RigBuilderError
from rigbuilder.core.services.query import QueryState, run_query

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Desktop-builder backend client.")
components_app = typer.Typer(no_args_is_help=True, help="Browse components.")
app.add_typer(components_app, name="components")
app.add_typer(doctor.app, name="doctor")

_console = Console()

# Failures a command renders as `Error: ...` instead of a traceback.
_RENDERED_ERRORS = (RigBuilderError, httpx.HTTPError, json.JSONDecodeError)


@dataclass
class CliContext:
    """Shared state handed to every command through `ctx.obj`."""

    settings: AppSettings
    transport: httpx.AsyncBaseTransport | None = None


def configure_logging(level: str) -> None:
    """Send package logs to stderr through Rich; the root logger is left alone."""

    package_logger = logging.getLogger("rigbuilder")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@app.callback()
def main(
    ctx: typer.Context,
    backend_url: Optional[str] = typer.Option(
        None, "--backend-url", help="Override RIGBUILDER_BACKEND_URL for this run."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if ctx.obj is None:
        try:
            ctx.obj = CliContext(settings=AppSettings())
        except pydantic.ValidationError as exc:
            _console.print(Text.assemble(("Invalid configuration: ", "bold red"), str(exc)))
            raise typer.Exit(code=2) from exc
    if backend_url:
        ctx.obj.settings = ctx.obj.settings.model_copy(update={"backend_url": backend_url})
    configure_logging("DEBUG" if verbose else ctx.obj.settings.log_level)


def _call_api(obj: CliContext, call: Callable[[BackendApi], Awaitable[Any]]) -> Any:
    async def _go() -> Any:
        async with build_async_client(obj.settings, transport=obj.transport) as client:
            api = BackendApi(obj.settings, client=client)
            return await call(api)

    try:
        return asyncio.run(_go())
    except pydantic.ValidationError as exc:
        raise typer.BadParameter(exc.errors(include_url=False)[0]["msg"]) from exc
    except _RENDERED_ERRORS as exc:
        logger.debug("request failed", exc_info=True)
        _console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
        raise typer.Exit(code=1) from exc


def _emit(payload: Any, *, as_json: bool, output: Path | None, title: str) -> None:
    if output is not None:
        path = export_records_json(payload=payload, output_path=output)
        _console.print(Text.assemble(("Saved JSON to: ", "green"), str(path)))
    if as_json:
        typer.echo(dumps_records(payload))
    elif output is None:
        rows = payload if isinstance(payload, list) else [payload]
        _console.print(build_components_table(rows, title=title))


@app.command()
def health(ctx: typer.Context) -> None:
    """Check that the backend is up."""

    obj: CliContext = ctx.obj

    def _log_transition(state: QueryState[Any]) -> None:
        logger.debug("health query -> %s", state.status.value)

    async def _go() -> QueryState[Any]:
        async with build_async_client(obj.settings, transport=obj.transport) as client:
            api = BackendApi(obj.settings, client=client)
            return await run_query("health", api.health, on_change=_log_transition)

    with _console.status("Loading..."):
        state = asyncio.run(_go())

    _console.print(build_health_panel(state))
    if state.error is not None:
        raise typer.Exit(code=1)


@components_app.command("list")
def list_components(
    ctx: typer.Context,
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Filter by category."),
    brand: Optional[str] = typer.Option(None, "--brand", "-b", help="Filter by brand (needs --category)."),
    page: str = typer.Option("1", "--page", "-p", help="Page number."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the result to a JSON file."),
) -> None:
    """List components, optionally by category and brand."""

    if brand and not category:
        raise typer.BadParameter("--brand requires --category")

    obj: CliContext = ctx.obj
    if not as_json:
        print_banner(_console)

    if category and brand:
        title = f"{category} / {brand}"
        result = _call_api(obj, lambda api: api.components_by_brand(category, brand, page=page))
    elif category:
        title = category
        result = _call_api(obj, lambda api: api.components_by_category(category, page=page))
    else:
        title = "Components"
        result = _call_api(obj, lambda api: api.components(page=page))

    _emit(result, as_json=as_json, output=output, title=f"{title} (page {page})")


@components_app.command("get")
def get_component(
    ctx: typer.Context,
    id: str = typer.Argument(..., help="Component id."),
    page: str = typer.Option("1", "--page", "-p"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
) -> None:
    """Show a single component."""

    obj: CliContext = ctx.obj
    result = _call_api(obj, lambda api: api.component(id, page=page))
    _emit(result, as_json=as_json, output=None, title=f"Component {id}")


def run() -> None:
    app()
