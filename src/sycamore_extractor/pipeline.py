from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .banks.sycamore import extract, extract_pdf
from .detect import DEFAULT_YEAR
from .models import ExtractionFailure
from .validate import check_balances


def setup_logging(console: Console, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sycamore Bank Statement Extractor")
    parser.add_argument("file", help="Ruta al PDF (o .txt con el texto ya extraído)")
    parser.add_argument("--out", default="", help="Ruta de salida JSON (opcional)")
    parser.add_argument("--default-year", type=int, default=DEFAULT_YEAR,
                        help="Año a usar si el periodo del extracto no lo trae")
    parser.add_argument("--check", action="store_true", help="Validar opening + créditos - débitos == closing")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    src_path = Path(args.file)
    if not src_path.exists():
        raise SystemExit(f"No existe el archivo: {src_path}")

    console = Console(stderr=True)
    setup_logging(console, args.verbose)
    console.print(f"Procesando: {src_path}", style="bold")

    if src_path.suffix.lower() == ".txt":
        text = src_path.read_text(encoding="utf-8")
        result = extract(text, source=str(src_path), default_year=args.default_year)
    else:
        result = extract_pdf(src_path, default_year=args.default_year)

    payload = result.model_dump(by_alias=True, mode="json")

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        console.print(f"OK -> {out_path}", style="bold green")
    else:
        print(json.dumps(payload, ensure_ascii=False, indent=2))

    if isinstance(result, ExtractionFailure):
        console.print(result.message, style="bold red")
        return 1

    console.print(f"Transacciones detectadas: {len(result.transactions)}", style="bold cyan")

    if args.check:
        chk = check_balances(result)
        style = "bold green" if chk.ok else "bold red"
        console.print(
            f"opening={chk.opening} credit={chk.total_credit} debit={chk.total_debit} "
            f"expected_closing={chk.expected_closing} closing={chk.closing} -> "
            f"{'OK' if chk.ok else 'MISMATCH'}",
            style=style,
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
