"""Resumen de un `PlanResponse` para presentación.

Solo lee el payload; nunca lo modifica.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.domain.models import (
    KNOWN_PLAN_FIELDS,
    ItinerarySummary,
    PlanResponse,
    PlanSummary,
)


def _number(value: Any) -> int | float | None:
    # bool es subclase de int: no cuenta como número aquí.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _summarize_itinerary(index: int, itinerary: Any) -> ItinerarySummary:
    if not isinstance(itinerary, Mapping):
        return ItinerarySummary(index=index)

    legs = itinerary.get("legs")
    transfers = _number(itinerary.get("transfers"))
    return ItinerarySummary(
        index=index,
        legs=len(legs) if isinstance(legs, list) else None,
        duration=_number(itinerary.get("duration")),
        transfers=transfers if isinstance(transfers, int) and transfers >= 0 else None,
    )


def _display_key(key: object) -> str:
    # Claves con surrogates sueltos no se pueden serializar a UTF-8.
    return str(key).encode("utf-8", "backslashreplace").decode("utf-8")


def summarize_plan(plan: PlanResponse) -> PlanSummary:
    itineraries = plan["itineraries"]
    keys = [_display_key(k) for k in plan.keys()]
    return PlanSummary(
        itinerary_count=len(itineraries),
        itineraries=[_summarize_itinerary(i, it) for i, it in enumerate(itineraries)],
        keys=keys,
        unknown_keys=[k for k in keys if k not in KNOWN_PLAN_FIELDS],
        has_debug_output=plan.get("debugOutput") is not None,
    )
