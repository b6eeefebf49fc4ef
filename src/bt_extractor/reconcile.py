from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .models import ExtractionResult


TOLERANCE = Decimal("0.01")


@dataclass(frozen=True)
class ReconciliationReport:
    """
    Suma de transacciones vs RULAJ TOTAL CONT.
    debit_ok / credit_ok quedan en None si el extracto no trae el total.
    """

    tx_count: int
    expense_sum: Decimal
    income_sum: Decimal
    total_debit: Optional[Decimal]
    total_credit: Optional[Decimal]
    debit_ok: Optional[bool]
    credit_ok: Optional[bool]


def _close(a: Decimal, b: Optional[Decimal]) -> Optional[bool]:
    if b is None:
        return None
    return abs(a - b) <= TOLERANCE


def reconcile(result: ExtractionResult) -> ReconciliationReport:
    expense = sum((t.amount for t in result.transactions if t.type == "expense"), Decimal("0"))
    income = sum((t.amount for t in result.transactions if t.type == "income"), Decimal("0"))
    total = result.account_info.turnover.total

    return ReconciliationReport(
        tx_count=len(result.transactions),
        expense_sum=expense,
        income_sum=income,
        total_debit=total.debit,
        total_credit=total.credit,
        debit_ok=_close(expense, total.debit),
        credit_ok=_close(income, total.credit),
    )
