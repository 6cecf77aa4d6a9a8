"""Contrato del decodificador de texto estructurado.

Por qué Protocol:
- El parser de planes solo necesita "texto -> valor anidado genérico".
- Permite sustituir JSON por otro formato (o un stub en tests) sin tocar
  la lógica de validación.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class StructuredDecoder(Protocol):
    """Contrato mínimo de decodificación.

    Reglas de diseño:
    - `decode` es síncrono y puro (sin I/O).
    - Ante sintaxis inválida lanza `core.errors.DecodeError`.
    - Devuelve valores genéricos: dict, list, str, int/float, bool o None.
    """

    def decode(self, text: str) -> Any:
        """Decodifica `text` y devuelve el valor estructurado."""

        ...
