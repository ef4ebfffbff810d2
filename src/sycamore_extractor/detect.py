from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Pattern, Union

import pdfplumber

from .models import AccountInfo, MonthlyTotal


logger = logging.getLogger(__name__)

DEFAULT_YEAR = 2025

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
MONTHS_ALT = "|".join(MONTHS)

ACCOUNT_NAME_RE = re.compile(r"^([A-Z][A-Z\s\-]+)[\r\n]", re.MULTILINE)
ACCOUNT_NUMBER_RE = re.compile(r"Account Number\s*(\d+)")
STATEMENT_PERIOD_RE = re.compile(r"Statement Period\s*([^\r\n]+)")
OPENING_BALANCE_RE = re.compile(r"Opening Balance\s*(NGN [0-9,.]+)")
CLOSING_BALANCE_RE = re.compile(r"Closing Balance\s*(NGN [0-9,.]+)")

MONTHLY_TOTAL_RE = re.compile(
    rf"(20\d{{2}})\s+({MONTHS_ALT})\s+NGN\s+([\d,.]+)\s+NGN\s+([\d,.]+)"
)

_PERIOD_YEAR_RE = re.compile(r"(\d{4})-\d{2}-\d{2}")


def _first_group(text: str, pattern: Pattern[str]) -> str:
    m = pattern.search(text)
    return m.group(1).strip() if m else ""


def extract_account_info(text: str) -> AccountInfo:
    """
    Cada campo se busca por separado; si no aparece queda en "".
    """
    return AccountInfo(
        account_name=_first_group(text, ACCOUNT_NAME_RE),
        account_number=_first_group(text, ACCOUNT_NUMBER_RE),
        statement_period=_first_group(text, STATEMENT_PERIOD_RE),
        opening_balance=_first_group(text, OPENING_BALANCE_RE),
        closing_balance=_first_group(text, CLOSING_BALANCE_RE),
    )


def extract_monthly_totals(text: str) -> List[MonthlyTotal]:
    return [
        MonthlyTotal(
            year=m.group(1),
            month=m.group(2),
            total_credit=f"NGN {m.group(3)}",
            total_debit=f"NGN {m.group(4)}",
        )
        for m in MONTHLY_TOTAL_RE.finditer(text)
    ]


def statement_year(info: AccountInfo, default_year: int = DEFAULT_YEAR) -> int:
    # el año sale del periodo (yyyy-mm-dd); si no, fallback fijo
    m = _PERIOD_YEAR_RE.search(info.statement_period)
    if m:
        return int(m.group(1))
    logger.debug("Periodo sin año (%r), usando %s", info.statement_period, default_year)
    return default_year


def read_pdf_text(pdf_path: Union[str, Path]) -> str:
    """
    Texto plano de todas las páginas, separadas por salto de línea.
    Los errores de lectura (archivo inexistente, PDF corrupto) se propagan.
    """
    with pdfplumber.open(pdf_path) as pdf:
        return "\n".join((page.extract_text() or "") for page in pdf.pages)
