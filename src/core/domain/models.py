"""Modelos del dominio.

Por qué dos estilos de modelo:
- `PlanResponse` es un `TypedDict`: el payload pegado se devuelve tal cual
  (mismo objeto, sin copia) y el tipo solo "estrecha" lo que el decoder
  produjo. El contenido de los itinerarios es opaco para nosotros.
- `PlanSummary` es Pydantic v2: es un artefacto nuestro, validado y fácil de
  serializar para la CLI (`--json`).
"""

from __future__ import annotations

from typing import Any, TypedDict

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Campos opcionales que suele traer una respuesta /plan de MOTIS.
# Solo se listan en el resumen; nunca se validan.
KNOWN_PLAN_FIELDS = (
    "requestParameters",
    "debugOutput",
    "from",
    "to",
    "direct",
    "itineraries",
    "previousPageCursor",
    "nextPageCursor",
)


class PlanResponse(TypedDict):
    """Payload de planificación identificado por su secuencia `itineraries`.

    En runtime es el `dict` decodificado; puede traer cualquier otra clave.
    """

    itineraries: list[Any]


class ItinerarySummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Posición dentro de `itineraries`.")
    legs: int | None = Field(
        default=None,
        ge=0,
        description="Número de tramos si el itinerario trae una lista `legs`.",
    )
    duration: int | float | None = Field(
        default=None,
        description="Duración (segundos) si el itinerario la declara.",
    )
    transfers: int | None = Field(
        default=None,
        description="Transbordos si el itinerario los declara.",
    )


class PlanSummary(BaseModel):
    """Resumen presentable de un `PlanResponse`.

    Por qué existe:
    - La CLI necesita algo tabulable sin asumir el esquema completo de MOTIS.
    """

    model_config = ConfigDict(frozen=True)

    itinerary_count: int = Field(..., ge=0)
    itineraries: list[ItinerarySummary] = Field(default_factory=list)
    keys: list[str] = Field(
        default_factory=list,
        description="Claves de primer nivel del payload, en orden original.",
    )
    unknown_keys: list[str] = Field(
        default_factory=list,
        description="Claves que no forman parte de una respuesta /plan habitual.",
    )
    has_debug_output: bool = False
