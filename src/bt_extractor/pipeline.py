from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .banks.banca_transilvania import extract as extract_bt
from .errors import ExtractionError
from .reconcile import ReconciliationReport, reconcile


def _setup_logging(console: Console, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bt-extract",
        description="Extractor de extractos Banca Transilvania (PDF -> JSON)",
    )
    parser.add_argument("file", nargs="?", help="Ruta al PDF (input-file.pdf)")
    parser.add_argument("-o", "--output", default="", help="Ruta de salida JSON (opcional; por defecto stdout)")
    parser.add_argument("-t", "--text", action="store_true", help="Guardar tambien el texto extraido en un .txt junto al PDF")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log de depuracion")
    return parser


def _print_report(console: Console, report: ReconciliationReport) -> None:
    console.print(f"Transacciones detectadas: {report.tx_count}", style="bold cyan")
    for label, total, found, ok in (
        ("Debit", report.total_debit, report.expense_sum, report.debit_ok),
        ("Credit", report.total_credit, report.income_sum, report.credit_ok),
    ):
        if ok is None:
            continue
        status = "OK" if ok else "MISMATCH"
        console.print(f"{label}: sum={found} total={total} -> {status}", style="green" if ok else "yellow")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.file:
        parser.print_help()
        return 0

    pdf_path = Path(args.file)
    if not pdf_path.is_file():
        raise SystemExit(f"No existe el archivo: {pdf_path}")

    console = Console(stderr=True)
    _setup_logging(console, args.verbose)
    console.print(f"Procesando: {pdf_path}", style="bold", markup=False)

    try:
        result, doc = extract_bt(pdf_path)
    except ExtractionError as exc:
        console.print(f"Error: {exc}", style="bold red", markup=False)
        return 1

    payload = result.model_dump(by_alias=True, mode="json")
    dumped = json.dumps(payload, ensure_ascii=False, indent=2)

    try:
        if args.text:
            txt_path = pdf_path.with_suffix(".txt")
            txt_path.write_text(doc.text, encoding="utf-8")
            console.print(f"Texto -> {txt_path}", style="bold green", markup=False)

        if args.output:
            out_path = Path(args.output)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(dumped, encoding="utf-8")
            console.print(f"OK -> {out_path}", style="bold green", markup=False)
        else:
            print(dumped)
    except OSError as exc:
        console.print(f"Error: {exc}", style="bold red", markup=False)
        return 1

    _print_report(console, reconcile(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
