from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import ExtractionResult
from .money import parse_amount


@dataclass(frozen=True)
class BalanceCheck:
    opening: Optional[float]
    closing: Optional[float]
    total_credit: float
    total_debit: float
    expected_closing: Optional[float]
    ok: bool


def _money_close(a: float, b: float, tol: float = 0.01) -> bool:
    return abs(a - b) <= tol


def check_balances(result: ExtractionResult) -> BalanceCheck:
    """
    Chequeo contable: opening + sum(credit) - sum(debit) == closing.
    Si falta opening o closing, ok=False.
    """
    opening = parse_amount(result.account_info.opening_balance)
    closing = parse_amount(result.account_info.closing_balance)

    total_credit = round(sum(parse_amount(t.credit) or 0.0 for t in result.transactions), 2)
    total_debit = round(sum(parse_amount(t.debit) or 0.0 for t in result.transactions), 2)

    expected = None
    ok = False
    if opening is not None:
        expected = round(opening + total_credit - total_debit, 2)
        if closing is not None:
            ok = _money_close(expected, closing)

    return BalanceCheck(
        opening=opening,
        closing=closing,
        total_credit=total_credit,
        total_debit=total_debit,
        expected_closing=expected,
        ok=ok,
    )
