"""Lectura del texto candidato (fichero o stdin).

Los errores de lectura no son fallos del parser: se propagan (`OSError`)
para que la CLI los muestre como parámetro inválido.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO


def read_input_text(path: Path | None = None, *, stdin: TextIO | None = None) -> str:
    """Lee `path` como UTF-8; sin ruta (o `-`) lee de stdin."""

    if path is None or str(path) == "-":
        stream = stdin if stdin is not None else sys.stdin
        return stream.read()
    return path.read_text(encoding="utf-8")
