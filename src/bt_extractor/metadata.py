"""
Extractores de datos de cuenta.

Cada extractor recibe la linea actual y la siguiente (lookahead) y
completa AccountInfo si encuentra su patron. Son independientes entre si y
del estado de transacciones; si no hay coincidencia no hacen nada. En los
campos simples gana la primera coincidencia.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

from .layout import StatementLayout
from .models import AccountInfo, BlockedAmount, DailyTurnover
from .normalize import collapse_whitespace, find_amounts, parse_money, to_iso_date


Extractor = Callable[[AccountInfo, str, Optional[str], StatementLayout], None]


def extract_owner_client(info: AccountInfo, line: str, _next: Optional[str], layout: StatementLayout) -> None:
    if info.account_owner is not None:
        return
    m = layout.owner_client.match(line)
    if m:
        info.account_owner = collapse_whitespace(m.group("owner"))
        info.client_number = m.group("client")


def extract_iban(info: AccountInfo, line: str, _next: Optional[str], layout: StatementLayout) -> None:
    if info.iban is not None:
        return
    m = layout.iban.search(line)
    if m:
        info.iban = m.group("iban")


def extract_currency(info: AccountInfo, line: str, nxt: Optional[str], layout: StatementLayout) -> None:
    if info.currency is not None or nxt is None or layout.currency_label not in line:
        return
    m = layout.currency.match(nxt)
    if m:
        info.currency = m.group(1)


def extract_final_balance(info: AccountInfo, line: str, nxt: Optional[str], layout: StatementLayout) -> None:
    if info.final_balance is not None or nxt is None or layout.final_balance_label not in line:
        return
    amounts = find_amounts(nxt, layout.money)
    if amounts:
        info.final_balance = amounts[0]


def extract_total_turnover(info: AccountInfo, line: str, nxt: Optional[str], layout: StatementLayout) -> None:
    total = info.turnover.total
    if total.debit is not None or nxt is None or layout.total_turnover_label not in line:
        return
    amounts = find_amounts(nxt, layout.money)
    if len(amounts) >= 2:
        total.debit, total.credit = amounts[0], amounts[1]


def extract_daily_turnover(info: AccountInfo, line: str, nxt: Optional[str], layout: StatementLayout) -> None:
    m = layout.daily_turnover.match(line)
    if not m:
        return
    # Una entrada por marcador; sin los dos montos quedan en None
    amounts = find_amounts(nxt, layout.money) if nxt is not None else []
    entry = DailyTurnover(date=to_iso_date(m.group(1)))
    if len(amounts) >= 2:
        entry.debit, entry.credit = amounts[0], amounts[1]
    info.turnover.daily.append(entry)


EXTRACTORS: Tuple[Extractor, ...] = (
    extract_owner_client,
    extract_iban,
    extract_currency,
    extract_final_balance,
    extract_total_turnover,
    extract_daily_turnover,
)


def run_extractors(info: AccountInfo, line: str, nxt: Optional[str], layout: StatementLayout) -> None:
    for extractor in EXTRACTORS:
        extractor(info, line, nxt, layout)


def parse_blocked_amount(line: str, layout: StatementLayout) -> Optional[BlockedAmount]:
    m = layout.blocked_amount.match(line)
    if not m:
        return None
    amount = parse_money(m.group("amount"))
    if amount is None:
        return None
    return BlockedAmount(amount=amount, description=collapse_whitespace(m.group("description")))
