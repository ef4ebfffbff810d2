from __future__ import annotations

import re
from typing import List, Optional

from .models import ZERO_NGN


# Monto con prefijo de moneda: "NGN 12,345.00"
NGN_AMOUNT_RE = re.compile(r"NGN\s+([\d,.]+)")


def parse_amount(s: str) -> Optional[float]:
    """
    "NGN 1,234.56" / "1,234.56" -> 1234.56. Devuelve None si no hay número.
    """
    s = (s or "").strip()
    if s.startswith("NGN"):
        s = s[3:]
    # "45,000.00." -> el punto final es puntuación, no decimal
    s = s.strip().rstrip(".,").replace(",", "")
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        return None


def format_ngn(value: float) -> str:
    value = round(abs(value), 2)
    if value == 0:
        return ZERO_NGN
    return f"NGN {value:,.2f}"


def find_amounts(text: str) -> List[str]:
    # solo la parte numérica de cada "NGN <monto>"
    return NGN_AMOUNT_RE.findall(text or "")
