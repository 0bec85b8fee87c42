#!/usr/bin/env python3
import logging
import platform
from pathlib import Path
from typing import Optional, Sequence

from .openpyxl_writer import OpenpyxlPlacementWriter
from .placement import PlacementRecord, parse_placement

logger = logging.getLogger(__name__)

ENGINES = ("openpyxl", "xlwings")


def default_engine() -> str:
	# Excel automation is only available where Excel itself runs
	return "xlwings" if platform.system().lower().startswith("win") else "openpyxl"


def get_writer_class(engine: str):
	if engine == "openpyxl":
		return OpenpyxlPlacementWriter
	if engine == "xlwings":
		from .xlwings_writer import XlwingsPlacementWriter
		return XlwingsPlacementWriter
	raise ValueError(f"Unknown engine '{engine}', expected one of: {', '.join(ENGINES)}")


class ConversionError(Exception):
	"""A conversion step failed; cause holds the original exception."""

	def __init__(self, path: Path, cause: BaseException):
		super().__init__(str(cause))
		self.path = Path(path)
		self.cause = cause


class SourceReadError(ConversionError):
	pass


class WorkbookWriteError(ConversionError):
	pass


def load_text(source: Path) -> str:
	with Path(source).open("r", encoding="utf-8") as f:
		return f.read()


def write_to_xlsx(
	records: Sequence[PlacementRecord],
	headers: Sequence[str],
	output_file: Path,
	metadata: Optional[Sequence[str]] = None,
	engine: str = "openpyxl",
) -> None:
	WriterCls = get_writer_class(engine)
	with WriterCls(str(output_file)) as writer:
		writer.write_rows(records, headers, metadata)
		writer.save()


def convert(source: Path, output: Path, with_metadata: bool = False, engine: str = "openpyxl") -> int:
	"""
	Read, parse and write one report.

	Returns:
		Number of records written

	Raises:
		SourceReadError: the source could not be read or is not UTF-8
		WorkbookWriteError: building or saving the workbook failed
	"""
	try:
		content = load_text(source)
	except (OSError, UnicodeDecodeError) as e:
		raise SourceReadError(source, e) from e
	records, headers, metadata = parse_placement(content, with_metadata=with_metadata)
	logger.info("Parsed %d record(s) from %s", len(records), source)
	try:
		write_to_xlsx(records, headers, output, metadata=metadata, engine=engine)
	except Exception as e:
		raise WorkbookWriteError(output, e) from e
	return len(records)
