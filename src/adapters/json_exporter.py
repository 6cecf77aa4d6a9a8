"""Exportación JSON del payload importado.

Por qué JSON:
- El payload se re-escribe tal cual para reutilizarlo en el visor o en tests.
- No se ordenan claves: el orden original del plan se conserva.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import PlanResponse


def _serialize(plan: PlanResponse, indent: int) -> bytes:
    text = json.dumps(plan, ensure_ascii=False, indent=indent) + "\n"
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        # Surrogates sueltos ("\ud800") no son UTF-8: se dejan como escapes JSON.
        return (json.dumps(plan, ensure_ascii=True, indent=indent) + "\n").encode("ascii")


def export_plan_json(*, plan: PlanResponse, output_path: Path, indent: int = 2) -> Path:
    """Exporta `plan` a JSON UTF-8 con formato estable.

    El destino solo se abre cuando la serialización ya terminó.
    """

    data = _serialize(plan, indent)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return output_path
