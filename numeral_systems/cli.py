import argparse
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from numeral_systems.converter import (
    SUPPORTED_BASES,
    InvalidArgumentError,
    convert,
    convert_all,
)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

BASE_NAMES = {8: "Octal", 10: "Decimal", 16: "Hexadecimal"}


def parse_base(value: str) -> int:
    try:
        base = int(value)
    except ValueError:
        raise InvalidArgumentError("Base must be an integer.")

    if base not in SUPPORTED_BASES:
        raise InvalidArgumentError(
            f"Only these bases are supported: {', '.join(map(str, SUPPORTED_BASES))}."
        )
    return base


def parse_number(value: str) -> int:
    try:
        return int(value, 10)
    except ValueError:
        raise InvalidArgumentError(f"'{value}' is not a valid decimal integer.")


def build_table(number: int, results: dict[int, str]) -> Table:
    table = Table(title=f"{number}", box=box.ROUNDED)
    table.add_column("Base", style="cyan", justify="right")
    table.add_column("Name", style="magenta")
    table.add_column("Value", style="green")

    for radix, text in results.items():
        table.add_row(str(radix), BASE_NAMES[radix], text)
    return table


def print_error(e: Exception) -> None:
    err_console.print(f"[red]Error:[/red] {escape(str(e))}")


def interactive_mode(signed: bool = False) -> None:
    mode = "signed" if signed else "positive"
    console.print(f"[bold]=== Radix Converter (8 / 10 / 16, {mode}) ===[/bold]")
    console.print("Type 'q' in any field to exit.\n")

    while True:
        try:
            base_str = input("Target base (8/10/16): ").strip()
            if base_str.lower() == "q":
                console.print("Exiting.")
                return

            num_str = input("Number: ").strip()
            if num_str.lower() == "q":
                console.print("Exiting.")
                return
        except (EOFError, KeyboardInterrupt):
            console.print("\nExiting.")
            return

        try:
            base = parse_base(base_str)
            result = convert(parse_number(num_str), base, signed)
        except InvalidArgumentError as e:
            print_error(e)
            console.print()
            continue

        console.print(f"Result (10 → {base}): {escape(result)}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numeral-systems",
        description="Convert an integer to octal, decimal or hexadecimal text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  numeral-systems 255 16            # FF
  numeral-systems -255 16 --signed  # -FF
  numeral-systems 255 --all         # table with every base
  numeral-systems                   # interactive mode
        """
    )
    parser.add_argument("number", nargs="?", help="Decimal integer to convert")
    parser.add_argument("radix", nargs="?", help="Target base (8, 10 or 16)")
    parser.add_argument("--all", action="store_true", help="Show the number in every supported base")
    parser.add_argument(
        "--signed",
        action="store_true",
        help="Accept negative numbers and render zero as 0",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.number is None:
        interactive_mode(args.signed)
        return

    if args.radix is None and not args.all:
        parser.error("radix is required unless --all is given")

    try:
        number = parse_number(args.number)
        if args.all:
            console.print(build_table(number, convert_all(number, args.signed)))
            return
        result = convert(number, parse_base(args.radix), args.signed)
    except InvalidArgumentError as e:
        print_error(e)
        sys.exit(1)

    console.print(escape(result))


if __name__ == "__main__":
    main()
