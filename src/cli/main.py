"""CLI principal (Typer).

Por qué la CLI es delgada:
- Toda la decisión "¿es un plan?" vive en `core.services.plan_parser`.
- Aquí solo se lee el texto, se presenta el resultado y se elige el exit code.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from adapters.json_exporter import export_plan_json
from adapters.text_source import read_input_text
from cli import doctor
from cli.ui_components import build_itineraries_table, build_unrecognized_panel, print_banner
from core.config import AppSettings
from core.domain.models import PlanResponse
from core.services.plan_parser import parse_plan_response
from core.services.plan_summary import summarize_plan

app = typer.Typer(
    no_args_is_help=True,
    help="Inspect and import debug plan responses pasted from the clipboard.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

def _load_text(path: Path | None, text: str | None) -> str:
    if text is not None:
        return text
    try:
        return read_input_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"cannot read {path}: {exc}", param_hint="PATH") from exc


def _require_plan(raw: str) -> PlanResponse:
    plan = parse_plan_response(raw)
    if plan is None:
        _console.print(build_unrecognized_panel())
        raise typer.Exit(code=1)
    return plan


@app.command()
def inspect(
    path: Path | None = typer.Argument(None, help="File with the pasted text; omit or use - for stdin."),
    text: str | None = typer.Option(None, "--text", "-t", help="Pasted text given inline."),
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON."),
) -> None:
    """Check whether the text is an importable plan and summarize it."""

    settings = AppSettings()
    raw = _load_text(path, text)

    if as_json:
        plan = parse_plan_response(raw)
        if plan is None:
            typer.echo("null")
            raise typer.Exit(code=1)
        typer.echo(summarize_plan(plan).model_dump_json(indent=2))
        return

    if settings.show_banner:
        print_banner(_console)
    plan = _require_plan(raw)
    _console.print(build_itineraries_table(summarize_plan(plan)))


@app.command()
def export(
    path: Path | None = typer.Argument(None, help="File with the pasted text; omit or use - for stdin."),
    text: str | None = typer.Option(None, "--text", "-t", help="Pasted text given inline."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Destination JSON file (default: <output_dir>/plan.json).",
    ),
) -> None:
    """Write a recognized plan payload to a JSON file, unchanged."""

    settings = AppSettings()
    plan = _require_plan(_load_text(path, text))
    output_path = output or settings.output_dir / "plan.json"
    written = export_plan_json(plan=plan, output_path=output_path, indent=settings.json_indent)
    _console.print(f"[green]Exported {len(plan['itineraries'])} itineraries to:[/green] {written}")


def run() -> None:
    app()
