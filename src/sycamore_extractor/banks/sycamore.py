from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..detect import DEFAULT_YEAR, extract_account_info, extract_monthly_totals, read_pdf_text, statement_year
from ..fallback import scan_lines
from ..models import ExtractionFailure, ExtractionResult
from ..normalize import resolve_unknown_types, sort_chronologically
from ..parse import parse_transactions_from_sections
from ..segment import iter_day_sections


logger = logging.getLogger(__name__)


def _extract(text: str, source: Optional[str], default_year: int) -> ExtractionResult:
    logger.debug("Muestra del texto: %r", text[:500])

    info = extract_account_info(text)
    totals = extract_monthly_totals(text)
    year = statement_year(info, default_year)

    txs = parse_transactions_from_sections(iter_day_sections(text, year))

    if not txs:
        logger.info("Sin transacciones por sección de día, intentando escaneo por líneas")
        txs = scan_lines(text, year)

    txs = resolve_unknown_types(txs)
    txs = sort_chronologically(txs)

    logger.info("Transacciones detectadas: %d", len(txs))

    message = f"Successfully extracted {len(txs)} transactions"
    if source:
        message += f" from {source}"

    return ExtractionResult(
        account_info=info,
        totals=totals,
        transactions=txs,
        message=message,
    )


def extract(
    text: str,
    source: Optional[str] = None,
    default_year: int = DEFAULT_YEAR,
) -> Union[ExtractionResult, ExtractionFailure]:
    """
    Reconstruye el extracto (cuenta, totales mensuales, transacciones) a partir
    del texto ya extraído del PDF. Nunca lanza: un error fatal se devuelve
    como ExtractionFailure.
    """
    try:
        return _extract(text, source, default_year)
    except Exception as e:
        logger.exception("Error en la extracción")
        return ExtractionFailure(message=f"Error extracting bank statement: {e}")


def extract_pdf(
    pdf_path: Union[str, Path],
    default_year: int = DEFAULT_YEAR,
) -> Union[ExtractionResult, ExtractionFailure]:
    # errores de lectura del PDF se propagan al llamador
    text = read_pdf_text(pdf_path)
    return extract(text, source=str(pdf_path), default_year=default_year)
