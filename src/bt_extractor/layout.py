"""
Configuracion del layout del extracto Banca Transilvania.

Todo lo que depende del formato del PDF (marcadores, palabras clave,
regex, umbral de indentacion) vive aqui para que el parser no tenga
literales sueltos.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from re import Pattern
from typing import Tuple


MONEY = r"(?:\d{1,3}(?:,\d{3})+|\d+)\.\d{2}"


def _compile(pattern: str, flags: int = 0) -> Pattern[str]:
    return re.compile(pattern, flags)


@dataclass(frozen=True)
class StatementLayout:
    """
    Reglas de un layout de extracto.

    Attributes:
        name: nombre legible del layout
        noise_patterns: encabezados/pies de pagina; nunca aportan datos
        transaction_keywords: inicio de descripcion de una transaccion
        section_start: activa la seccion de transacciones
        day_end_markers: cierran la transaccion abierta
        income_indent: espacios iniciales a partir de los cuales el monto es credito
    """

    name: str
    noise_patterns: Tuple[Pattern[str], ...]
    transaction_keywords: Tuple[str, ...]
    section_start: Pattern[str]
    day_end_markers: Tuple[str, ...] = ("RULAJ ZI", "SOLD FINAL ZI")
    income_indent: int = 6

    date_line: Pattern[str] = _compile(r"^(\d{2})/(\d{2})/(\d{4})$")
    amount_line: Pattern[str] = _compile(rf"^({MONEY})$")
    money: Pattern[str] = _compile(rf"-?{MONEY}")
    reference_marker: str = "REF:"
    owner_capture: Pattern[str] = _compile(r";\s*([^;]+?)\s*;\s*$")

    owner_client: Pattern[str] = _compile(r"^(?P<owner>[^\W\d_][^\d:;]*?)\s+Client:\s*(?P<client>\d+)")
    iban: Pattern[str] = _compile(r"Cod IBAN:?\s*(?P<iban>[A-Z]{2}\d{2}[A-Z0-9]{11,30})")
    currency_label: str = "Valuta"
    currency: Pattern[str] = _compile(r"^([A-Z]{3})\b")
    final_balance_label: str = "SOLD FINAL CONT"
    total_turnover_label: str = "RULAJ TOTAL CONT"
    daily_turnover: Pattern[str] = _compile(r"^(\d{2}/\d{2}/\d{4})\s*RULAJ ZI")

    blocked_start: str = "SUME BLOCATE"
    blocked_end: str = "TOTAL DISPONIBIL"
    blocked_amount: Pattern[str] = _compile(
        rf"^-\s*(?P<amount>{MONEY})\s+RON\s+aferenta tranzactiei\s+(?P<description>.+)$",
        re.IGNORECASE,
    )

    @property
    def transaction_start(self) -> Pattern[str]:
        alternatives = "|".join(re.escape(k) for k in self.transaction_keywords)
        return re.compile(rf"^(?:{alternatives})\b", re.IGNORECASE)


BT_LAYOUT = StatementLayout(
    name="Banca Transilvania - extras de cont",
    noise_patterns=(
        _compile(r"BANCA TRANSILVANIA", re.IGNORECASE),
        _compile(r"www\.bancatransilvania\.ro", re.IGNORECASE),
        _compile(r"^\d+\s*/\s*\d+$"),
        _compile(r"Capital social", re.IGNORECASE),
        _compile(r"Nr\. Inreg\.|Reg\. Com\.|C\.U\.I\.|\bRB-PJS\b", re.IGNORECASE),
        _compile(r"Tiparit|Emis de|Extras generat", re.IGNORECASE),
        _compile(r"Call Center|\b0800\s?80\s?2273\b|\*8028|contact@bancatransilvania", re.IGNORECASE),
        _compile(r"Fondul de Garantare|garantate de FGDB", re.IGNORECASE),
        _compile(r"^Pagina\s+\d+", re.IGNORECASE),
    ),
    transaction_keywords=(
        "Plata",
        "Incasare",
        "P2P",
        "Transfer",
        "Constituire depozit",
        "Lichidare depozit",
        "Maturitate depozit",
        "Taxa procesare",
        "Comision",
    ),
    section_start=_compile(r"^(?:CONT\b|SOLD ANTERIOR)"),
)
