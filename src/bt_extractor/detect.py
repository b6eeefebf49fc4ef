from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union

import pdfplumber
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import PdfminerException

from .errors import ExtractionError
from .layout import MONEY


log = logging.getLogger(__name__)

PdfSource = Union[str, Path, bytes]

MONEY_TOKEN_RE = re.compile(rf"^-?{MONEY}$")
DATE_TOKEN_RE = re.compile(r"^\d{2}/\d{2}/\d{4}$")

# separacion (en anchos de caracter) que corta una fila en columnas
GAP_CHARS = 3


@dataclass(frozen=True)
class DocumentText:
    text: str
    pages: int
    metadata: Dict[str, str] = field(default_factory=dict)
    is_digital: bool = True


def _open(source: PdfSource):
    if isinstance(source, bytes):
        return pdfplumber.open(io.BytesIO(source))
    return pdfplumber.open(str(source))


def _group_words_by_line(words: List[Dict], y_tol: float = 2.0) -> List[List[Dict]]:
    """
    Agrupa palabras por línea usando coordenada 'top' con tolerancia.
    """
    if not words:
        return []

    words = sorted(words, key=lambda w: (w["top"], w["x0"]))
    lines: List[List[Dict]] = []
    current: List[Dict] = [words[0]]
    current_y = words[0]["top"]

    for w in words[1:]:
        if abs(w["top"] - current_y) <= y_tol:
            current.append(w)
        else:
            lines.append(sorted(current, key=lambda z: z["x0"]))
            current = [w]
            current_y = w["top"]

    lines.append(sorted(current, key=lambda z: z["x0"]))
    return lines


def _is_money(seg: List[Dict]) -> bool:
    return all(MONEY_TOKEN_RE.match(w["text"]) for w in seg)


def _split_columns(line_words: List[Dict], gap: float) -> List[List[Dict]]:
    """
    Corta una fila en segmentos separados por huecos grandes. Los montos
    seguidos (debito + credito de un RULAJ) quedan juntos, y una fecha
    pegada a "RULAJ ZI" tambien.
    """
    segments: List[List[Dict]] = [[line_words[0]]]
    for w in line_words[1:]:
        if w["x0"] - segments[-1][-1]["x1"] > gap:
            segments.append([w])
        else:
            segments[-1].append(w)

    merged: List[List[Dict]] = []
    for seg in segments:
        prev = merged[-1] if merged else None
        if prev is not None and _is_money(prev) and _is_money(seg):
            prev.extend(seg)
        elif (
            prev is not None
            and len(prev) == 1
            and DATE_TOKEN_RE.match(prev[0]["text"])
            and seg[0]["text"].startswith("RULAJ")
        ):
            prev.extend(seg)
        else:
            merged.append(seg)
    return merged


def _char_width(words: List[Dict]) -> float:
    widths = sorted((w["x1"] - w["x0"]) / len(w["text"]) for w in words if w["text"])
    if not widths:
        return 5.0
    return widths[len(widths) // 2] or 5.0


def _render(pages_words: List[List[Dict]]) -> List[str]:
    """
    Reconstruye el texto linea a linea. Solo las lineas de monto llevan
    indentacion: un espacio por ancho de caracter entre el borde derecho del
    monto y la columna de montos mas a la izquierda (debito). Asi la columna
    de debito queda en 0 y la de credito bien a la derecha.
    """
    all_words = [w for words in pages_words for w in words]
    char_width = _char_width(all_words)
    gap = GAP_CHARS * char_width

    pages_segments = [
        [seg for line in _group_words_by_line(words) for seg in _split_columns(line, gap)]
        for words in pages_words
    ]

    money_edges = [seg[0]["x1"] for segs in pages_segments for seg in segs if _is_money(seg)]
    base = min(money_edges) if money_edges else 0.0

    chunks = []
    for segs in pages_segments:
        out = []
        for seg in segs:
            text = " ".join(w["text"] for w in seg)
            if _is_money(seg):
                indent = max(0, round((seg[0]["x1"] - base) / char_width))
                text = " " * indent + text
            out.append(text)
        chunks.append("\n".join(out))
    return chunks


def extract_text(source: PdfSource) -> DocumentText:
    """
    Extrae el texto de todas las paginas, unido por saltos de linea.

    El texto se arma desde las palabras y sus coordenadas: cada columna de
    una fila sale en su propia linea y las lineas de monto se indentan segun
    su columna (el parser decide debito/credito por esa indentacion).
    """
    if not isinstance(source, bytes) and not Path(source).is_file():
        raise ExtractionError(f"No existe el archivo: {source}")

    try:
        with _open(source) as pdf:
            pages = len(pdf.pages)
            pages_words = [page.extract_words() for page in pdf.pages]
            metadata = {str(k): str(v) for k, v in (pdf.metadata or {}).items()}
    except (PdfminerException, PDFSyntaxError) as exc:
        raise ExtractionError(f"PDF ilegible: {exc}") from exc

    text = "\n".join(_render(pages_words))

    # Heuristica digital: hay texto suficiente
    is_digital = len(text.strip()) > 200
    if not is_digital:
        log.warning("El PDF casi no tiene texto extraible (%d paginas); puede ser escaneado", pages)

    log.info("Texto extraido: %d paginas, %d lineas", pages, text.count("\n") + 1)
    return DocumentText(text=text, pages=pages, metadata=metadata, is_digital=is_digital)
