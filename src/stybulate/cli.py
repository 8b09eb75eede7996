"""CLI entry point: tabulate whitespace-separated data with style."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from stybulate.config import Config
from stybulate.ingest import read_table
from stybulate.style import STYLES, ansi_paint, check_align, get_format
from stybulate.table import Table

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None, config: Config | None = None) -> argparse.Namespace:
    config = config or Config.from_env()
    parser = argparse.ArgumentParser(prog="stybulate", description="tabulate with style")
    parser.add_argument("path", nargs="?", help="The path to the file to read, stdin if not present")
    parser.add_argument("-o", "--output", help="Print table to outputfile, stdout if not present")
    parser.add_argument(
        "-1",
        "--header",
        action="store_true",
        default=config.header,
        help="Use the first row of data as a table header",
    )
    parser.add_argument(
        "-f",
        "--fmt",
        default=config.fmt,
        help=f"Set output table format. Supported formats: {', '.join(STYLES)}. "
        f"Defaults to {config.fmt}.",
    )
    parser.add_argument("--str-align", default=config.str_align, help="Alignment of text columns (left, center, right)")
    parser.add_argument(
        "--num-align", default=config.num_align, help="Alignment of numeric columns (left, center, right, decimal)"
    )
    parser.add_argument("--border-style", default=config.border_style, help="SGR parameters for the borders (e.g. '1;32')")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def render(args: argparse.Namespace, reader: TextIO) -> str:
    fmt = get_format(args.fmt)
    check_align(args.str_align)
    check_align(args.num_align)

    contents, headers = read_table(reader, header=args.header)
    logger.info("Read %d rows (header: %s)", len(contents), headers is not None)
    table = Table(fmt, contents, headers)
    table.set_align(args.str_align, args.num_align)
    if args.border_style:
        table.set_border_style(ansi_paint(args.border_style))
    return table.tabulate()


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.path:
            with open(args.path, encoding="utf-8") as reader:
                output = render(args, reader)
        else:
            output = render(args, sys.stdin)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Could not read input file: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as writer:
                writer.write(output + "\n")
        except OSError as e:
            print(f"Error: Could not write to specified output file: {e}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
