from __future__ import annotations

import logging
from typing import Optional, Tuple

from .models import ZERO_NGN, Transaction, TransactionType
from .money import format_ngn, parse_amount


logger = logging.getLogger(__name__)

BALANCE_TOLERANCE = 1e-9


def classify_pair(first: str, second: str) -> Tuple[TransactionType, str, str]:
    """
    Par de montos (crédito, débito) tal como aparece en la categoría.
    Devuelve (tipo, credit, debit); si ambos son > 0 gana el mayor.
    """
    a = parse_amount(first) or 0.0
    b = parse_amount(second) or 0.0

    if a > 0 and b == 0:
        return TransactionType.CREDIT, format_ngn(a), ZERO_NGN
    if a == 0 and b > 0:
        return TransactionType.DEBIT, ZERO_NGN, format_ngn(b)
    if a > 0 and b > 0:
        if a > b:
            return TransactionType.CREDIT, format_ngn(a), ZERO_NGN
        return TransactionType.DEBIT, ZERO_NGN, format_ngn(b)
    return TransactionType.UNKNOWN, ZERO_NGN, ZERO_NGN


def reconcile(
    tx: Transaction,
    current_balance: Optional[float],
    last_balance: Optional[float],
) -> Tuple[Transaction, Optional[float]]:
    """
    Paso del fold de balances: corrige/deriva crédito o débito a partir de
    la diferencia con el balance anterior. Devuelve la transacción (posiblemente
    actualizada) y el nuevo last_balance para la siguiente llamada.

    Un tipo ya fijado con el signo opuesto no se pisa; solo se registra.
    """
    if current_balance is None:
        return tx, last_balance

    if last_balance is not None:
        delta = current_balance - last_balance
        if abs(delta) > BALANCE_TOLERANCE:
            if delta > 0:
                if tx.transaction_type in (TransactionType.UNKNOWN, TransactionType.CREDIT):
                    tx = tx.model_copy(update={
                        "credit": format_ngn(delta),
                        "debit": ZERO_NGN,
                        "transaction_type": TransactionType.CREDIT,
                    })
                else:
                    _log_discrepancy(tx, delta)
            else:
                if tx.transaction_type in (TransactionType.UNKNOWN, TransactionType.DEBIT):
                    tx = tx.model_copy(update={
                        "credit": ZERO_NGN,
                        "debit": format_ngn(delta),
                        "transaction_type": TransactionType.DEBIT,
                    })
                else:
                    _log_discrepancy(tx, delta)

    return tx, current_balance


def _log_discrepancy(tx: Transaction, delta: float) -> None:
    logger.warning(
        "Signo inconsistente %s %s: tipo %s pero el balance varió %+.2f",
        tx.date,
        tx.time,
        tx.transaction_type.value,
        delta,
    )
