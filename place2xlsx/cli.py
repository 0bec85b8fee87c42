#!/usr/bin/env python3
"""
Command-line interface for the place2xlsx package.
Usage:
  python -m place2xlsx [-s place_txt.txt] [-o output.xlsx] [options]

Every outcome, including failures, exits with status 0; failures are
reported on stderr only.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from ._convert_impl import ENGINES, SourceReadError, WorkbookWriteError, convert, default_engine
from .tools import ensure_xlsx_extension, generate_output_path

logger = logging.getLogger(__name__)

PROG = "place2xlsx"
DEFAULT_SOURCE = "place_txt.txt"
ABOUT = "Convert a '!'-delimited component placement report into an xlsx workbook"
AUTHOR = "WenJun"
COPYRIGHT = f"Copyright (c) 2025 {AUTHOR}. All rights reserved."
LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


class ZeroExitArgumentParser(argparse.ArgumentParser):
	"""ArgumentParser that reports usage errors without a failing exit status."""

	def error(self, message):
		sys.stderr.write(f"{self.prog}: error: {message}\n")
		self.print_help()
		self.exit(0)


def build_parser() -> argparse.ArgumentParser:
	parser = ZeroExitArgumentParser(
		prog=PROG,
		description=(
			f"{ABOUT}\n"
			f"Program: {PROG}\n"
			f"Version: {__version__}\n"
			f"Author: {AUTHOR}"
		),
		epilog=COPYRIGHT,
		formatter_class=argparse.RawDescriptionHelpFormatter,
	)
	parser.add_argument('--source', '-s', default=DEFAULT_SOURCE,
				   help=f'Input file path (default: {DEFAULT_SOURCE})')
	parser.add_argument('--output', '-o',
				   help='Output file path (optional, if not specified, use input filename)')
	parser.add_argument('--metadata', '-m', action='store_true',
				   help="Keep the lines before the first '#' line as metadata rows above the header")
	parser.add_argument('--engine', choices=ENGINES, help='Backend engine to use')
	parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
	parser.add_argument('--version', '-V', action='version', version=f'{PROG} {__version__}')
	return parser


def resolve_output_path(source: Path, output: Optional[str]) -> Path:
	if output:
		return ensure_xlsx_extension(Path(output))
	return generate_output_path(source)


def main(argv: Optional[List[str]] = None) -> None:
	parser = build_parser()
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format=LOG_FORMAT,
	)

	engine = args.engine or default_engine()
	source_file = Path(args.source)
	try:
		output_file = resolve_output_path(source_file, args.output)
	except ValueError as e:
		parser.error(str(e))

	try:
		convert(source_file, output_file, with_metadata=args.metadata, engine=engine)
	except SourceReadError as e:
		print(f"Error reading input file '{e.path}': {e.cause}", file=sys.stderr)
		return
	except WorkbookWriteError as e:
		logger.debug("Write failed", exc_info=e.cause)
		print(f"Error writing to xlsx file '{e.path}': {e.cause}", file=sys.stderr)
		return

	print(f"Placement data has been successfully converted to xlsx file: {output_file}")


if __name__ == "__main__":
	main()
