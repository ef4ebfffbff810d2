from __future__ import annotations

from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


ZERO_NGN = "NGN 0.00"


class TransactionType(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    UNKNOWN = "UNKNOWN"


class AccountInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    account_name: str = Field("", alias="accountName")
    account_number: str = Field("", alias="accountNumber")
    statement_period: str = Field("", alias="statementPeriod", description="Texto libre, ej. 2025-04-01 - 2025-04-30")
    opening_balance: str = Field("", alias="openingBalance")
    closing_balance: str = Field("", alias="closingBalance")


class MonthlyTotal(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    year: str
    month: str
    total_credit: str = Field(..., alias="totalCredit")
    total_debit: str = Field(..., alias="totalDebit")


class Transaction(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., description="ISO date YYYY-MM-DD")
    time: str = Field(..., description="HH:MM:SS")
    credit: str = ZERO_NGN
    debit: str = ZERO_NGN
    transaction_type: TransactionType = Field(TransactionType.UNKNOWN, alias="transactionType")
    category: str = ""
    to_from: str = Field("", alias="toFrom")
    description: str = ""
    balance: str = Field("", description="Balance luego de la transacción")


class ExtractionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    account_info: AccountInfo = Field(..., alias="accountInfo")
    totals: List[MonthlyTotal] = Field(default_factory=list)
    transactions: List[Transaction] = Field(default_factory=list)
    message: str = ""


class ExtractionFailure(BaseModel):
    error: Literal[True] = True
    message: str
