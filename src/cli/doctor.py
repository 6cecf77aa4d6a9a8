"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.command()
def run() -> None:
    """Show the resolved configuration and where it is read from."""

    settings = AppSettings()
    user_env = get_user_env_file()

    table = Table(title="PLAN-IMPORT Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("User .env", "OK" if user_env.exists() else "OPTIONAL", str(user_env))
    table.add_row("Output dir", "OK", str(settings.output_dir))
    table.add_row("JSON indent", "OK", str(settings.json_indent))
    table.add_row("Banner", "OK", "on" if settings.show_banner else "off")

    _console.print(table)
