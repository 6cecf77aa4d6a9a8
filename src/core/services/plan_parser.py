"""Parser defensivo de payloads de planificación.

Contexto:
- El usuario pega en la herramienta (o importa desde fichero) un texto que
  *quizá* sea una respuesta /plan serializada. Solo nos interesa un sí/no:
  ¿se puede usar como plan?

Reglas:
- Nunca lanza excepciones: vacío, sintaxis inválida y forma incorrecta
  colapsan en `None`.
- No transforma nada: si el valor decodificado cumple la forma, se devuelve
  ese mismo objeto tipado como `PlanResponse`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeGuard, cast

from adapters.json_decoder import JsonDecoder
from core.domain.models import PlanResponse
from core.errors import DecodeError
from core.interfaces.decoder import StructuredDecoder

_DEFAULT_DECODER = JsonDecoder()


def has_itineraries_array(value: Any) -> TypeGuard[PlanResponse]:
    """`True` si `value` es un objeto con una clave propia `itineraries` de tipo lista."""

    if value is None or not isinstance(value, Mapping):
        return False
    if "itineraries" not in value:
        return False
    return isinstance(value["itineraries"], list)


def _as_text(raw: Any) -> str | None:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError:
            return None
    return None


def parse_plan_response(
    text: Any,
    *,
    decoder: StructuredDecoder | None = None,
) -> PlanResponse | None:
    """Devuelve el payload si `text` es una respuesta /plan usable, si no `None`.

    Pasos (corta en el primero que falle):
    1) texto vacío tras `strip()` -> None
    2) decodificar; cualquier `DecodeError` -> None
    3) aplicar `has_itineraries_array`
    4) devolver el mismo valor decodificado

    Solo se absorbe `DecodeError`. Un `decoder` propio que lance otra
    excepción rompe su contrato y esa excepción se propaga.
    """

    candidate_text = _as_text(text)
    if candidate_text is None or not candidate_text.strip():
        return None

    decoder = decoder if decoder is not None else _DEFAULT_DECODER
    try:
        parsed = decoder.decode(candidate_text)
    except DecodeError:
        return None

    if not has_itineraries_array(parsed):
        return None
    return cast(PlanResponse, parsed)
