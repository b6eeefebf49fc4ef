from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from re import Pattern
from typing import List, Optional


_WS_RE = re.compile(r"\s+")


def parse_money(s: str) -> Optional[Decimal]:
    # Formato del extracto: 1,234.56 (miles con coma, decimales con punto)
    s = (s or "").strip().replace(",", "")
    if not s:
        return None
    try:
        return Decimal(s)
    except InvalidOperation:
        return None


def find_amounts(line: str, money: Pattern[str]) -> List[Decimal]:
    vals = []
    for m in money.findall(line):
        v = parse_money(m)
        if v is not None:
            vals.append(v)
    return vals


def collapse_whitespace(s: str) -> str:
    return _WS_RE.sub(" ", s).strip()


def to_iso_date(ddmmyyyy: str) -> str:
    """
    DD/MM/YYYY -> YYYY-MM-DD reordenando campos, sin validar calendario
    (31/13/2025 -> 2025-13-31).
    """
    parts = ddmmyyyy.strip().split("/")
    if len(parts) != 3:
        return ddmmyyyy
    dd, mm, yyyy = parts
    return f"{yyyy}-{mm}-{dd}"


def leading_spaces(raw: str) -> int:
    return len(raw) - len(raw.lstrip())


def classify_amount_line(raw: str, income_indent: int = 6) -> str:
    """
    El extracto tiene dos columnas (debito / credito); la de credito esta
    mas indentada. Se cuenta el espacio inicial de la linea sin recortar.
    """
    return "income" if leading_spaces(raw) >= income_indent else "expense"
