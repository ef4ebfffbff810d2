from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .detect import read_pdf_text
from .segment import LOOSE_DATE_HEADER_RE, iter_date_headers, time_entries


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("file", help="PDF (o .txt) a inspeccionar")
    ap.add_argument("--head", type=int, default=120, help="cantidad de líneas a mostrar")
    args = ap.parse_args(argv)

    path = Path(args.file)
    if path.suffix.lower() == ".txt":
        text = path.read_text(encoding="utf-8")
    else:
        text = read_pdf_text(path)

    console = Console(highlight=False)
    lines = text.splitlines()
    console.print(f"{path.name}: {len(text)} caracteres, {len(lines)} líneas")

    console.print(f"\n--- TEXT (first {args.head} lines) ---")
    for i, line in enumerate(lines[: args.head], start=1):
        console.print(f"{i:03d}: {line}", markup=False)

    console.print("\n--- DATE HEADERS ---")
    strict = list(iter_date_headers(text))
    for h in strict:
        console.print(f"{h.month} {h.day:>2}  offset={h.start}")
    strict_starts = {h.start for h in strict}
    loose = [h for h in iter_date_headers(text, LOOSE_DATE_HEADER_RE) if h.start not in strict_starts]
    console.print(f"headers: {len(strict)} (solo tolerantes: {len(loose)})")

    console.print("\n--- TIME ENTRIES ---")
    entries = time_entries(text)
    for t, offset in entries:
        console.print(f"{t}  offset={offset}")
    console.print(f"time entries: {len(entries)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
