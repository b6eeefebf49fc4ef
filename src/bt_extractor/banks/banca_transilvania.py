from __future__ import annotations

from typing import Tuple

from ..detect import DocumentText, PdfSource, extract_text
from ..layout import BT_LAYOUT
from ..models import ExtractionResult
from ..parse import parse_statement


def extract(source: PdfSource) -> Tuple[ExtractionResult, DocumentText]:
    """
    PDF -> texto -> datos de cuenta + transacciones.
    Devuelve tambien el documento para poder guardar el texto crudo.
    """
    doc = extract_text(source)
    result = parse_statement(doc.text, BT_LAYOUT)
    return result, doc
