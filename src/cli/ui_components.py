"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import PlanSummary


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (se omite en modo `--json`)."""

    title = Text("PLAN-IMPORT", style="bold cyan")
    subtitle = Text("Debug plan import • itineraries", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _fmt(value: object) -> str:
    return "-" if value is None else str(value)


def build_itineraries_table(summary: PlanSummary) -> Table:
    """Tabla Rich con una fila por itinerario."""

    table = Table(title=f"Itineraries ({summary.itinerary_count})")
    table.add_column("#", style="cyan", no_wrap=True)
    table.add_column("Legs", style="white")
    table.add_column("Duration (s)", style="green")
    table.add_column("Transfers", style="magenta")
    for item in summary.itineraries:
        table.add_row(str(item.index), _fmt(item.legs), _fmt(item.duration), _fmt(item.transfers))
    return table


def build_unrecognized_panel() -> Panel:
    """Panel genérico: el texto no es un plan importable."""

    body = Text("The input is not an importable plan payload.\n", style="bold")
    body.append("Expected a JSON object with an `itineraries` array.", style="dim")
    return Panel(body, title=Text("Unrecognized", style="bold yellow"), border_style="yellow")
