from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from re import Pattern
from typing import List, Optional, Tuple

from .layout import BT_LAYOUT, StatementLayout
from .metadata import parse_blocked_amount, run_extractors
from .models import AccountInfo, ExtractionResult, Transaction
from .normalize import classify_amount_line, collapse_whitespace, parse_money, to_iso_date
from .segment import StatementLine, lookahead, split_lines


log = logging.getLogger(__name__)


class Phase(str, Enum):
    BEFORE_TRANSACTIONS = "before-transactions"
    BETWEEN_TRANSACTIONS = "between-transactions"
    ACCUMULATING = "accumulating-transaction"


@dataclass(frozen=True)
class PendingTransaction:
    date: str                       # DD/MM/YYYY tal como aparece en el extracto
    description: str
    amount: Optional[Decimal] = None
    type: Optional[str] = None
    reference: Optional[str] = None
    account_owner: Optional[str] = None


@dataclass(frozen=True)
class ParserState:
    phase: Phase = Phase.BEFORE_TRANSACTIONS
    current_date: Optional[str] = None
    pending: Optional[PendingTransaction] = None
    in_blocked: bool = False


Step = Tuple[ParserState, Optional[Transaction]]


def finalize(state: ParserState) -> Step:
    """
    Cierra la transaccion abierta. Solo se emite si tiene monto; si no, se
    descarta sin error.
    """
    pending = state.pending
    if pending is None:
        return state, None

    state = replace(state, phase=Phase.BETWEEN_TRANSACTIONS, pending=None)
    if pending.amount is None:
        log.debug("Transaccion sin monto descartada (%s): %s", pending.date, pending.description)
        return state, None

    tx = Transaction(
        date=to_iso_date(pending.date),
        description=collapse_whitespace(pending.description),
        amount=pending.amount,
        type=pending.type,
        reference=pending.reference,
        account_owner=pending.account_owner,
    )
    log.debug("Transaccion %s %s %s", tx.date, tx.type, tx.amount)
    return state, tx


def _open_transaction(text: str, date: str, layout: StatementLayout) -> PendingTransaction:
    reference = None
    marker = layout.reference_marker
    if marker in text:
        text, ref = text.split(marker, 1)
        reference = ref.strip() or None
    return PendingTransaction(date=date, description=text, reference=reference)


def _extend(state: ParserState, line: StatementLine, layout: StatementLayout) -> Step:
    """Una linea dentro de la transaccion abierta (no es inicio de otra)."""
    pending = state.pending
    text = line.text

    # a) monto: gana la primera linea; la columna sale de la indentacion
    if layout.amount_line.match(text):
        if pending.amount is None:
            pending = replace(
                pending,
                amount=parse_money(text),
                type=classify_amount_line(line.raw, layout.income_indent),
            )
        return replace(state, pending=pending), None

    # b) referencia
    marker = layout.reference_marker
    if marker in text:
        ref = text.split(marker, 1)[1].strip()
        return replace(state, pending=replace(pending, reference=ref or None)), None

    # c) titular "; NOMBRE ;" (la linea sigue a d)
    owner = layout.owner_capture.search(text)
    if owner:
        pending = replace(pending, account_owner=owner.group(1).strip())

    # d) fin de dia o continuacion de la descripcion
    state = replace(state, pending=pending)
    if any(m in text for m in layout.day_end_markers):
        return finalize(state)
    return replace(state, pending=replace(pending, description=pending.description + " " + text)), None


def step_transactions(
    state: ParserState,
    line: StatementLine,
    layout: StatementLayout,
    start_re: Pattern[str],
) -> Step:
    text = line.text

    if state.phase is Phase.BEFORE_TRANSACTIONS:
        if layout.section_start.search(text):
            log.debug("Inicio de seccion de transacciones en linea %d", line.index)
            return replace(state, phase=Phase.BETWEEN_TRANSACTIONS), None
        return state, None

    if layout.date_line.match(text):
        return replace(state, current_date=text), None

    if state.current_date is not None and start_re.match(text):
        state, done = finalize(state)
        pending = _open_transaction(text, state.current_date, layout)
        return replace(state, phase=Phase.ACCUMULATING, pending=pending), done

    if state.pending is None:
        return state, None

    return _extend(state, line, layout)


def step_blocked(state: ParserState, text: str, info: AccountInfo, layout: StatementLayout) -> ParserState:
    if layout.blocked_start in text:
        log.debug("Inicio de sume blocate")
        return replace(state, in_blocked=True)
    if layout.blocked_end in text:
        return replace(state, in_blocked=False)
    if state.in_blocked:
        entry = parse_blocked_amount(text, layout)
        if entry is not None:
            info.blocked_amounts.append(entry)
    return state


def parse_statement(text: str, layout: StatementLayout = BT_LAYOUT) -> ExtractionResult:
    """
    Parser de una sola pasada sobre el texto del extracto:
    - los extractores de datos de cuenta se prueban en cada linea (linea + siguiente)
    - sume blocate se controla con su propio flag
    - las transacciones siguen la maquina de estados de `step_transactions`
    Nunca lanza excepciones por formato: lo que no coincide queda vacio.

    Antes de una linea "CONT" o "SOLD ANTERIOR" ninguna regla de
    transacciones se aplica: un bloque fecha/descripcion/monto suelto, sin
    ese marcador delante, no produce transacciones.
    """
    lines = split_lines(text, layout)
    start_re = layout.transaction_start

    info = AccountInfo()
    txs: List[Transaction] = []
    state = ParserState()

    for line in lines:
        if line.is_noise:
            continue

        run_extractors(info, line.text, lookahead(lines, line.index), layout)
        state = step_blocked(state, line.text, info, layout)

        state, done = step_transactions(state, line, layout, start_re)
        if done is not None:
            txs.append(done)

    # flush final
    state, done = finalize(state)
    if done is not None:
        txs.append(done)

    return ExtractionResult(account_info=info, transactions=txs)
