from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from .models import Transaction
from .money import parse_amount
from .normalize import clean_category
from .reconcile import classify_pair, reconcile
from .segment import DaySection, time_entries


logger = logging.getLogger(__name__)

FIELD_SPLIT_RE = re.compile(r"\s{2,}|\n")
BALANCE_FIELD_RE = re.compile(r"NGN\s+[\d,.]+$")
# "NGN 0.00NGN 5,000.00Wallet ..." -> (crédito, débito)
CATEGORY_PAIR_RE = re.compile(r"NGN\s+([\d,.]+)\s*NGN\s+([\d,.]+)\s*Wallet")


def split_fields(stream: str) -> List[str]:
    return [f.strip() for f in FIELD_SPLIT_RE.split(stream.strip())]


def build_transaction(date: str, time: str, fields: List[str]) -> Transaction:
    """
    Asigna cada campo (en orden) al primer slot libre cuyo predicado cumple:
    category ("Wallet"), toFrom ("/" o "Limited"), description ("TXT-"),
    balance ("NGN <monto>" al final). Un slot ocupado no se reasigna.
    """
    slots = {"category": None, "to_from": None, "description": None, "balance": None}
    used = set()

    for i, field in enumerate(fields):
        if not field:
            continue
        if "Wallet" in field and slots["category"] is None:
            slots["category"] = i
        elif ("/" in field or "Limited" in field) and slots["to_from"] is None:
            slots["to_from"] = i
        elif "TXT-" in field and slots["description"] is None:
            slots["description"] = i
        elif BALANCE_FIELD_RE.search(field) and slots["balance"] is None:
            slots["balance"] = i
        else:
            continue
        used.add(i)

    # contraparte sin "/" ni "Limited" (ej. un teléfono): primer campo libre
    # entre la categoría y la descripción/balance
    if slots["to_from"] is None:
        lo = slots["category"] if slots["category"] is not None else -1
        bounds = [slots[k] for k in ("description", "balance") if slots[k] is not None]
        hi = min(bounds) if bounds else len(fields)
        for i in range(lo + 1, hi):
            if fields[i] and i not in used:
                slots["to_from"] = i
                break

    def value(name: str) -> str:
        idx = slots[name]
        return fields[idx] if idx is not None else ""

    tx = Transaction(
        date=date,
        time=time,
        category=value("category"),
        to_from=value("to_from"),
        description=value("description"),
        balance=value("balance"),
    )

    m = CATEGORY_PAIR_RE.search(tx.category)
    if m:
        kind, credit, debit = classify_pair(m.group(1), m.group(2))
        tx = tx.model_copy(update={"transaction_type": kind, "credit": credit, "debit": debit})

    return tx


def parse_day_section(section: DaySection, last_balance: Optional[float]):
    """
    Transacciones de una sección de día. Recibe y devuelve el last_balance
    para encadenar la reconciliación entre secciones.
    """
    txs: List[Transaction] = []
    content = section.content
    entries = time_entries(content)

    for n, (time, line_start) in enumerate(entries):
        end = entries[n + 1][1] if n + 1 < len(entries) else len(content)
        pos = content.find(time, line_start, end)
        if pos < 0:
            continue
        fields = split_fields(content[pos + len(time):end])

        tx = build_transaction(section.date, time, fields)
        tx, last_balance = reconcile(tx, parse_amount(tx.balance), last_balance)
        tx = tx.model_copy(update={"category": clean_category(tx.category)})
        txs.append(tx)

    return txs, last_balance


def parse_transactions_from_sections(sections: Iterable[DaySection]) -> List[Transaction]:
    txs: List[Transaction] = []
    last_balance: Optional[float] = None

    for section in sections:
        found, last_balance = parse_day_section(section, last_balance)
        logger.debug("%s: %d transacciones", section.date, len(found))
        txs.extend(found)

    return txs
