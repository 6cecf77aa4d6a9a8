"""Decodificador JSON (adaptador por defecto).

Por qué un adaptador:
- Aísla `json` del Core y traduce sus excepciones a `DecodeError`.
- Solo JSON estricto: `NaN`, `Infinity` y `-Infinity` no son JSON y se rechazan.
"""

from __future__ import annotations

import json
from typing import Any

from core.errors import DecodeError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


class JsonDecoder:
    """Implementa `StructuredDecoder` sobre `json.loads`."""

    def decode(self, text: str) -> Any:
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except RecursionError as exc:
            # Anidamiento extremo (p.ej. "[[[[...").
            raise DecodeError("input is nested too deeply") from exc
        except ValueError as exc:
            raise DecodeError(str(exc)) from exc
