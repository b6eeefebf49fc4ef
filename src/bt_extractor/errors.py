from __future__ import annotations


class ExtractionError(Exception):
    """No se pudo leer el PDF o extraer su texto."""
