from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Pattern, Tuple

from .detect import MONTHS, MONTHS_ALT


logger = logging.getLogger(__name__)

# "April 3" en la misma línea (puede venir pegado al texto previo: "NGN 900.00April 4");
# el día no puede continuar en otro dígito
DATE_HEADER_RE = re.compile(rf"({MONTHS_ALT})[ \t]+(\d{{1,2}})(?!\d)")
# variante tolerante para el scanner de respaldo: "April\n3", "April3"
LOOSE_DATE_HEADER_RE = re.compile(rf"({MONTHS_ALT})\s*(\d{{1,2}})(?!\d)")

TIME_RE = re.compile(r"^(\d{2}:\d{2}:\d{2})")


@dataclass(frozen=True)
class DateHeader:
    month: str
    day: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class DaySection:
    date: str                       # yyyy-mm-dd
    header: DateHeader
    content: str                    # texto hasta el próximo header (o fin)


def iso_date(year: int, month: str, day: str) -> Optional[str]:
    try:
        return datetime.date(year, MONTHS.index(month) + 1, int(day)).isoformat()
    except ValueError:
        logger.debug("Fecha inválida descartada: %s %s %s", month, day, year)
        return None


def iter_date_headers(text: str, pattern: Pattern[str] = DATE_HEADER_RE) -> Iterator[DateHeader]:
    for m in pattern.finditer(text):
        yield DateHeader(month=m.group(1), day=m.group(2), start=m.start(), end=m.end())


def iter_day_sections(text: str, year: int) -> Iterator[DaySection]:
    """
    Parte el texto en secciones por día: cada header "Month D" abre una
    sección que llega hasta el siguiente header o el final del texto.
    """
    headers = list(iter_date_headers(text))
    for i, h in enumerate(headers):
        end = headers[i + 1].start if i + 1 < len(headers) else len(text)
        date = iso_date(year, h.month, h.day)
        if date is None:
            continue
        yield DaySection(date=date, header=h, content=text[h.end:end])


def time_entries(content: str) -> List[Tuple[str, int]]:
    """
    (hora, offset de inicio de línea) para cada línea que empieza con HH:MM:SS.
    """
    out: List[Tuple[str, int]] = []
    offset = 0
    for line in content.split("\n"):
        m = TIME_RE.match(line.strip())
        if m:
            out.append((m.group(1), offset))
        offset += len(line) + 1
    return out
