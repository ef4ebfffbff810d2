from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .models import ZERO_NGN, Transaction
from .money import NGN_AMOUNT_RE, find_amounts, parse_amount
from .normalize import clean_category
from .reconcile import classify_pair, reconcile
from .segment import LOOSE_DATE_HEADER_RE, TIME_RE, DateHeader, iso_date, iter_date_headers


logger = logging.getLogger(__name__)

# tolerancia (en caracteres) después del header para asociarle una línea
HEADER_WINDOW = 20
# category, toFrom, description, balance
LOOKAHEAD = 4


def _lines_with_offsets(text: str) -> List[Tuple[str, int]]:
    """
    (línea sin espacios, offset del primer carácter visible en el texto).
    """
    out: List[Tuple[str, int]] = []
    offset = 0
    for raw in text.split("\n"):
        stripped = raw.strip()
        lead = len(raw) - len(raw.lstrip())
        out.append((stripped, offset + lead))
        offset += len(raw) + 1
    return out


def header_for_offset(
    headers: Sequence[Tuple[DateHeader, str]],
    pos: int,
    window: int = HEADER_WINDOW,
) -> Optional[str]:
    """
    Fecha del último header ya pasado cuya ventana
    [start, start + largo + window) contiene la posición.
    """
    found = None
    for h, date in headers:
        if h.start > pos:
            break
        if pos < h.start + h.length + window:
            found = date
    return found


def scan_lines(text: str, year: int) -> List[Transaction]:
    """
    Extracción de respaldo línea por línea: cada línea HH:MM:SS abre una
    transacción y las 4 líneas siguientes son, sin validar, categoría,
    contraparte, descripción y balance.
    """
    headers = []
    for h in iter_date_headers(text, LOOSE_DATE_HEADER_RE):
        date = iso_date(year, h.month, h.day)
        if date is not None:
            headers.append((h, date))
    logger.debug("Fallback: %d headers de fecha", len(headers))

    lines = _lines_with_offsets(text)
    txs: List[Transaction] = []
    current_date: Optional[str] = None
    last_balance: Optional[float] = None

    def line_at(j: int) -> str:
        return lines[j][0] if j < len(lines) else ""

    i = 0
    while i < len(lines):
        line, pos = lines[i]

        date = header_for_offset(headers, pos)
        if date is not None:
            current_date = date

        tm = TIME_RE.match(line)
        if not (tm and current_date):
            i += 1
            continue

        category = line_at(i + 1)
        tx = Transaction(
            date=current_date,
            time=tm.group(1),
            to_from=line_at(i + 2),
            description=line_at(i + 3),
            balance=ZERO_NGN,
        )

        amounts = find_amounts(category)
        if len(amounts) >= 2:
            kind, credit, debit = classify_pair(amounts[0], amounts[1])
            tx = tx.model_copy(update={"transaction_type": kind, "credit": credit, "debit": debit})
        tx = tx.model_copy(update={"category": clean_category(category)})

        current_balance = None
        bm = NGN_AMOUNT_RE.search(line_at(i + 4))
        if bm:
            tx = tx.model_copy(update={"balance": f"NGN {bm.group(1)}"})
            current_balance = parse_amount(bm.group(1))
        tx, last_balance = reconcile(tx, current_balance, last_balance)

        txs.append(tx)
        i += 1 + LOOKAHEAD

    return txs
