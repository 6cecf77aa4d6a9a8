"""Errores del Core.

Por qué un módulo propio:
- Los adaptadores (decoders) y el Core comparten una única excepción de
  decodificación sin depender de `json` en las capas superiores.
"""

from __future__ import annotations


class DecodeError(ValueError):
    """El texto no pudo decodificarse como valor estructurado."""
