from __future__ import annotations

from decimal import Decimal
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


# Decimal en memoria, numero en el JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Transaction(_CamelModel):
    date: str = Field(..., description="ISO date YYYY-MM-DD")
    description: str
    amount: Optional[Money] = None
    type: Optional[Literal["income", "expense"]] = None
    reference: Optional[str] = None
    account_owner: Optional[str] = None


class DailyTurnover(_CamelModel):
    date: str = Field(..., description="ISO date YYYY-MM-DD")
    debit: Optional[Money] = None
    credit: Optional[Money] = None


class TotalTurnover(_CamelModel):
    debit: Optional[Money] = None
    credit: Optional[Money] = None


class Turnover(_CamelModel):
    total: TotalTurnover = Field(default_factory=TotalTurnover)
    daily: List[DailyTurnover] = Field(default_factory=list)


class BlockedAmount(_CamelModel):
    amount: Money
    description: str


class AccountInfo(_CamelModel):
    account_owner: Optional[str] = None
    client_number: Optional[str] = None
    iban: Optional[str] = None
    currency: Optional[str] = None
    final_balance: Optional[Money] = None
    turnover: Turnover = Field(default_factory=Turnover)
    blocked_amounts: List[BlockedAmount] = Field(default_factory=list)


class ExtractionResult(_CamelModel):
    account_info: AccountInfo = Field(default_factory=AccountInfo)
    transactions: List[Transaction] = Field(default_factory=list)


class IbanCheck(_CamelModel):
    valid: bool
    error: Optional[str] = None
    warning: Optional[str] = None
    bank_code: Optional[str] = None
    formatted: Optional[str] = None
