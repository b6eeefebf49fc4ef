"""
Validacion de IBAN rumanos (ISO 13616, checksum ISO 7064 MOD 97-10).

Ninguna funcion de validacion lanza excepciones por entrada mal formada:
el resultado siempre es un IbanCheck (o un bool) con el motivo.
"""
from __future__ import annotations

import re

from .banks.codes import is_known_bank
from .models import IbanCheck


IBAN_LENGTH = 24
COUNTRY = "RO"

_CLEAN_RE = re.compile(r"[\s-]")
_CHECK_DIGITS_RE = re.compile(r"^[0-9]{2}$")
_BANK_CODE_RE = re.compile(r"^[A-Z]{4}$")
_ACCOUNT_RE = re.compile(r"^[A-Z0-9]{16}$")
_ALNUM_RE = re.compile(r"^[A-Z0-9]*$")


def clean_iban(iban: str) -> str:
    return _CLEAN_RE.sub("", iban or "").upper()


def format_iban(iban: str) -> str:
    """Grupos de 4 caracteres separados por espacio."""
    cleaned = clean_iban(iban)
    return " ".join(cleaned[i : i + 4] for i in range(0, len(cleaned), 4))


def letter_to_digits(s: str) -> str:
    # A=10 ... Z=35; los digitos pasan tal cual
    return "".join(str(ord(ch) - ord("A") + 10) if "A" <= ch <= "Z" else ch for ch in s)


def mod97_checksum(numeric: str) -> int:
    """
    Resto modulo 97 digito a digito, de izquierda a derecha.
    Lanza ValueError si la cadena tiene algo que no sea un digito.
    """
    remainder = 0
    for ch in numeric:
        if not "0" <= ch <= "9":
            raise ValueError(f"Caracter no numerico en {numeric!r}: {ch!r}")
        remainder = (remainder * 10 + int(ch)) % 97
    return remainder


def _rearranged_remainder(iban: str) -> int:
    return mod97_checksum(letter_to_digits(iban[4:] + iban[:4]))


def validate_structure(iban: str) -> IbanCheck:
    cleaned = clean_iban(iban)

    if len(cleaned) != IBAN_LENGTH:
        return IbanCheck(valid=False, error=f"IBAN must be 24 characters long (current: {len(cleaned)})")
    if not cleaned.startswith(COUNTRY):
        return IbanCheck(valid=False, error="IBAN must start with RO for Romanian accounts")
    if not _CHECK_DIGITS_RE.match(cleaned[2:4]):
        return IbanCheck(valid=False, error="Check digits (positions 3-4) must be numeric")
    if not _BANK_CODE_RE.match(cleaned[4:8]):
        return IbanCheck(valid=False, error="Bank code (positions 5-8) must be 4 uppercase letters")
    if not _ACCOUNT_RE.match(cleaned[8:]):
        return IbanCheck(valid=False, error="Account identifier must be 16 alphanumeric characters")

    return IbanCheck(valid=True)


def validate_checksum(iban: str) -> bool:
    cleaned = clean_iban(iban)
    if len(cleaned) < 5 or not _ALNUM_RE.match(cleaned):
        return False
    return _rearranged_remainder(cleaned) == 1


def calculate_check_digits(country: str, bank_code: str, account_id: str) -> str:
    candidate = f"{country}00{bank_code}{account_id}".upper()
    return f"{98 - _rearranged_remainder(candidate):02d}"


def validate_iban(iban: str) -> IbanCheck:
    if not iban:
        return IbanCheck(valid=False, error="IBAN is required")

    cleaned = clean_iban(iban)

    structure = validate_structure(cleaned)
    if not structure.valid:
        return structure

    if not validate_checksum(cleaned):
        return IbanCheck(valid=False, error="Invalid IBAN checksum")

    bank_code = cleaned[4:8]
    warning = None
    if not is_known_bank(bank_code):
        warning = f"Bank code {bank_code} is not in our dataset of known Romanian banks"

    return IbanCheck(valid=True, warning=warning, bank_code=bank_code, formatted=format_iban(cleaned))


def validate_iban_realtime(partial: str) -> IbanCheck:
    """
    Validacion incremental mientras se escribe: solo se comprueba lo que
    ya se puede comprobar con los caracteres presentes; el checksum recien
    con los 24.
    """
    if not partial:
        return IbanCheck(valid=True)

    cleaned = clean_iban(partial)
    n = len(cleaned)

    if n >= 2 and not cleaned.startswith(COUNTRY):
        return IbanCheck(valid=False, error="IBAN must start with RO")
    if n >= 4 and not _CHECK_DIGITS_RE.match(cleaned[2:4]):
        return IbanCheck(valid=False, error="Check digits must be numeric")
    if n >= 8 and not _BANK_CODE_RE.match(cleaned[4:8]):
        return IbanCheck(valid=False, error="Bank code must be 4 uppercase letters")
    if n > 8 and not _ALNUM_RE.match(cleaned[8:]):
        return IbanCheck(valid=False, error="Account identifier can only contain letters and numbers")
    if n > IBAN_LENGTH:
        return IbanCheck(valid=False, error="IBAN cannot exceed 24 characters")
    if n == IBAN_LENGTH:
        return validate_iban(cleaned)

    return IbanCheck(valid=True)
