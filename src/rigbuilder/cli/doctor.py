"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from rigbuilder.adapters.backend_api import BackendApi
from rigbuilder.adapters.http_client import build_async_client
from rigbuilder.core.config import AppSettings, get_user_env_file, write_user_env_vars
from rigbuilder.core.errors import RigBuilderError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_backend(
    settings: AppSettings, transport: httpx.AsyncBaseTransport | None = None
) -> tuple[bool, str]:
    try:
        async with build_async_client(settings, transport=transport) as client:
            health = await BackendApi(settings, client=client).health()
        return True, health.message
    except (RigBuilderError, httpx.HTTPError, ValueError) as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    obj = ctx.find_root().obj
    settings = obj.settings if obj is not None else AppSettings()
    transport = obj.transport if obj is not None else None

    table = Table(title="rigbuilder doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", Text(str(env_file)))
    table.add_row("Backend URL", "OK", Text(settings.backend_url))
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    ok, detail = asyncio.run(_check_backend(settings, transport))
    table.add_row("Backend health", "OK" if ok else "FAIL", Text(detail))

    _console.print(table)

    if not ok:
        _console.print(
            "\n[yellow]Note:[/yellow] start the backend or point RIGBUILDER_BACKEND_URL at it "
            "(`rigbuilder doctor setup-backend`)."
        )
        raise typer.Exit(code=1)


@app.command(name="setup-backend")
def setup_backend() -> None:
    """Interactive backend setup (stores config in the user config .env)."""

    current = AppSettings().backend_url
    backend_url = typer.prompt("Backend URL", default=current, show_default=True).strip()

    if not backend_url.startswith(("http://", "https://")):
        raise typer.BadParameter("backend URL must start with http:// or https://")

    env_path = write_user_env_vars({"RIGBUILDER_BACKEND_URL": backend_url.rstrip("/")})

    _console.print(Text.assemble(("Saved backend config to: ", "green"), str(env_path)))
