"""CLI for sorting text lines with composed comparators.

Why: Thin interface layer. Options are mapped onto domain factories
     (keyed, ranking, reverse, join); all ordering logic lives in domain.
"""

import argparse
import logging
import sys
from collections.abc import Callable, Iterable

from ordkit.config.composition import build_ranking, configure_logging
from ordkit.config.settings import OrdkitSettings
from ordkit.domain.errors import DomainError
from ordkit.domain.ordering import Ordering, ordering
from ordkit.domain.primitives import (
    by_code_unit,
    by_number,
    by_string,
    by_string_case_insensitive,
)
from ordkit.domain.services.composition import describe

logger = logging.getLogger(__name__)

COMPARATORS = {
    "string": by_string,
    "casefold": by_string_case_insensitive,
    "code": by_code_unit,
    "number": by_number,
}


def field_extractor(field: int | None, delimiter: str | None) -> Callable[[str], str]:
    """Projection from a line to its 1-based ``field`` (whole line if None).

    Missing fields project to the empty string.
    """
    if field is None:
        return str

    index = field - 1

    def line_field(line: str) -> str:
        parts = line.split(delimiter)
        return parts[index] if index < len(parts) else ""

    return line_field


def to_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"not a number: {text!r}") from None


def build_line_ordering(args: argparse.Namespace, settings: OrdkitSettings) -> Ordering[str]:
    """Map parsed options onto a composed ordering of lines."""
    extract = field_extractor(args.field, args.delimiter)

    if args.rank is not None:
        result = ordering(build_ranking(args.rank.split(","), settings)).on(extract)
    elif args.by == "number":

        def numeric_key(line: str) -> float:
            return to_number(extract(line))

        result = ordering(by_number).on(numeric_key)
    else:
        result = ordering(COMPARATORS[args.by]).on(extract)

    if args.reverse:
        result = result.reversed()
    if args.stable_tiebreak:
        result = result.join(by_code_unit)
    return result


def read_lines(path: str | None) -> list[str]:
    if path is None or path == "-":
        return _strip_newlines(sys.stdin)
    with open(path, encoding="utf-8") as fh:
        return _strip_newlines(fh)


def _strip_newlines(lines: Iterable[str]) -> list[str]:
    return [line.rstrip("\r\n") for line in lines]


def cmd_sort(args: argparse.Namespace, settings: OrdkitSettings) -> int:
    """Sort input lines and print them.

    Returns:
        Exit code (0=success, 2=bad input or options)
    """
    try:
        lines = read_lines(args.path)
        order = build_line_ordering(args, settings)
        logger.debug("Sorting %d lines by %s", len(lines), order.label)
        result = sorted(lines, key=order.key())
    except (DomainError, ValueError, OSError) as ex:
        print(f"✗ Error: {ex}", file=sys.stderr)
        return 2

    for line in result:
        print(line)
    return 0


def cmd_explain(args: argparse.Namespace, settings: OrdkitSettings) -> int:
    """Print the label of the ordering the options would build."""
    try:
        order = build_line_ordering(args, settings)
    except DomainError as ex:
        print(f"✗ Error: {ex}", file=sys.stderr)
        return 2
    print(describe(order))
    return 0


def _add_order_options(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--by",
        choices=sorted(COMPARATORS),
        default="string",
        help="Key comparator (default: string, locale collation)",
    )
    p.add_argument("--field", type=int, help="1-based field used as sort key (default: whole line)")
    p.add_argument("--delimiter", help="Field delimiter (default: whitespace)")
    p.add_argument("--rank", help="Comma-separated rank order for the key; unknown keys go first")
    p.add_argument("--reverse", action="store_true", help="Reverse the ordering")
    p.add_argument(
        "--stable-tiebreak",
        action="store_true",
        help="Break ties by comparing whole lines by UTF-16 code unit",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands.

    Subcommands:
    - sort: Sort lines from a file or stdin
    - explain: Show the composed comparator for the given options

    Returns:
        Exit code (0=success, 1=usage, 2=bad input)
    """
    parser = argparse.ArgumentParser(
        prog="ordkit",
        description="Sort text lines with composable comparators",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    p_sort = subparsers.add_parser("sort", help="Sort lines")
    p_sort.add_argument("path", nargs="?", help="Input file (default: stdin)")
    _add_order_options(p_sort)

    p_explain = subparsers.add_parser("explain", help="Describe the ordering")
    _add_order_options(p_explain)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1
    if args.field is not None and args.field < 1:
        parser.error("--field must be >= 1")

    settings = OrdkitSettings()
    configure_logging(settings)

    if args.command == "sort":
        return cmd_sort(args, settings)
    elif args.command == "explain":
        return cmd_explain(args, settings)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
