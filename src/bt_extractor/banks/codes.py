from __future__ import annotations

from typing import FrozenSet


# Codigos BIC (4 letras) de bancos romanos conocidos; solo para avisos
ROMANIAN_BANK_CODES: FrozenSet[str] = frozenset(
    {
        "RNCB",
        "BRDE",
        "BTRL",
        "INGB",
        "RZBR",
        "BFER",
        "CECE",
        "CARP",
        "PIRB",
        "BACX",
        "OTPV",
        "CRCO",
        "FTSB",
        "ALBZ",
        "UGBI",
        "BPOS",
        "VNBC",
        "TREZ",
        "VIRL",
        "DAFB",
        "MMEB",
        "SBIU",
        "BREL",
        "PORL",
        "REVO",
    }
)


def is_known_bank(code: str) -> bool:
    return code.upper() in ROMANIAN_BANK_CODES
