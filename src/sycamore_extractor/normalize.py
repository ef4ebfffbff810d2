from __future__ import annotations

from typing import List

from .models import ZERO_NGN, Transaction, TransactionType
from .money import find_amounts, format_ngn, parse_amount


def clean_category(category: str) -> str:
    # "XYZ NGN 100.00NGN 0.00Wallet Transfer In" -> "Wallet Transfer In"
    idx = category.find("Wallet")
    if idx < 0:
        return category.strip()
    return category[idx:].strip()


def resolve_unknown_types(transactions: List[Transaction]) -> List[Transaction]:
    """
    Última pasada sobre las transacciones que siguen en UNKNOWN:
    si la categoría trae dos montos, el segundo es débito cuando es mayor
    (o el primero es cero); si no, el primero es crédito.
    Las transacciones con tipo ya determinado no se tocan.
    """
    out: List[Transaction] = []
    for t in transactions:
        if t.transaction_type is not TransactionType.UNKNOWN:
            out.append(t)
            continue

        update = {"category": clean_category(t.category)}
        amounts = find_amounts(t.category)
        if len(amounts) >= 2:
            a1 = parse_amount(amounts[0]) or 0.0
            a2 = parse_amount(amounts[1]) or 0.0
            if a1 == 0 and a2 == 0:
                pass
            elif a2 > a1 or a1 == 0:
                update.update(credit=ZERO_NGN, debit=format_ngn(a2), transaction_type=TransactionType.DEBIT)
            else:
                update.update(credit=format_ngn(a1), debit=ZERO_NGN, transaction_type=TransactionType.CREDIT)

        out.append(t.model_copy(update=update))

    return out


def sort_chronologically(transactions: List[Transaction]) -> List[Transaction]:
    # sorted() es estable: mismo date+time conserva el orden de extracción
    return sorted(transactions, key=lambda t: (t.date, t.time))
