"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos del payload y su resumen.
- El dominio no conoce I/O, CLI ni formatos de texto.
"""
