from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .layout import StatementLayout


@dataclass(frozen=True)
class StatementLine:
    index: int
    raw: str                        # linea original, con la indentacion
    text: str                       # linea sin espacios al inicio/fin
    is_noise: bool                  # encabezado/pie de pagina o vacia


def is_noise(text: str, layout: StatementLayout) -> bool:
    if not text:
        return True
    return any(p.search(text) for p in layout.noise_patterns)


def split_lines(text: str, layout: StatementLayout) -> List[StatementLine]:
    """
    Parte el texto extraido en lineas, marcando las que no deben aportar
    nada (vacias, membrete, avisos legales, numeros de pagina "N / M").
    """
    out: List[StatementLine] = []
    for i, raw in enumerate(text.splitlines()):
        stripped = raw.strip()
        out.append(StatementLine(index=i, raw=raw, text=stripped, is_noise=is_noise(stripped, layout)))
    return out


def lookahead(lines: List[StatementLine], index: int) -> Optional[str]:
    """
    Linea inmediatamente siguiente (i+1), sin saltar nada.
    Si es ruido o no existe devuelve None: la etiqueta queda sin valor.
    """
    if index + 1 >= len(lines):
        return None
    nxt = lines[index + 1]
    if nxt.is_noise:
        return None
    return nxt.text
