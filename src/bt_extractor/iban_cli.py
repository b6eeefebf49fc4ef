from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from .iban import calculate_check_digits, format_iban, validate_checksum, validate_iban


EPILOG = """examples:
  bt-iban validate RO49AAAA1B31007593840000
  bt-iban format RO49AAAA1B31007593840000
  bt-iban calculate RO BTRL 0075938400001234
"""


class _Parser(argparse.ArgumentParser):
    # errores de uso -> exit 1 (argparse usa 2)
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="bt-iban",
        description="IBAN Validation Tool",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", metavar="command")

    p = sub.add_parser("validate", help="Validate a complete IBAN")
    p.add_argument("iban")

    p = sub.add_parser("format", help="Format an IBAN with spaces")
    p.add_argument("iban")

    p = sub.add_parser("calculate", help="Calculate check digits for IBAN parts")
    p.add_argument("country")
    p.add_argument("bank")
    p.add_argument("account")
    return parser


def _validate(console: Console, iban: str) -> None:
    res = validate_iban(iban)
    if not res.valid:
        console.print(f"❌ Invalid IBAN: {res.error}", markup=False)
        return
    console.print("✅ Valid IBAN")
    console.print(f"Formatted: {res.formatted}")
    console.print(f"Bank Code: {res.bank_code}")
    if res.warning:
        console.print(f"⚠️ Warning: {res.warning}", markup=False)


def _calculate(console: Console, country: str, bank: str, account: str) -> int:
    country, bank, account = country.upper(), bank.upper(), account.upper()
    try:
        digits = calculate_check_digits(country, bank, account)
    except ValueError as exc:
        console.print(f"Error: {exc}", markup=False, style="bold red")
        return 1

    iban = f"{country}{digits}{bank}{account}"
    console.print(f"Check digits: {digits}")
    console.print(f"Complete IBAN: {iban}")
    console.print(f"Formatted: {format_iban(iban)}")
    if validate_checksum(iban):
        console.print("✅ Checksum verification passed")
    else:
        console.print("❌ Checksum verification failed")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    console = Console(soft_wrap=True, highlight=False)

    if args.command == "validate":
        _validate(console, args.iban)
    elif args.command == "format":
        console.print(format_iban(args.iban))
    elif args.command == "calculate":
        return _calculate(console, args.country, args.bank, args.account)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
