#!/usr/bin/env python3
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

XLSX_SUFFIX = ".xlsx"
TEMP_SUFFIX = ".xlsxtmp"


def _drop_empty_extension(name: str) -> str:
	# "foo." has an empty extension, not part of the stem
	return name[:-1] if name.endswith(".") else name


def generate_output_path(input_path: Path) -> Path:
	"""Workbook path next to the input, with the input's extension replaced."""
	input_path = Path(input_path)
	if not input_path.name:
		raise ValueError(f"Cannot derive an output file name from '{input_path}'")
	stem = Path(_drop_empty_extension(input_path.name)).stem
	return input_path.with_name(f"{stem}{XLSX_SUFFIX}")


def ensure_xlsx_extension(path: Path) -> Path:
	path = Path(path)
	if not path.name:
		raise ValueError(f"Invalid output file name: '{path}'")
	path = path.with_name(_drop_empty_extension(path.name))
	if path.suffix != XLSX_SUFFIX:
		path = path.with_suffix(XLSX_SUFFIX)
	return path


def temporary_artifact_path(output_file: Path) -> Path:
	return Path(output_file).with_suffix(TEMP_SUFFIX)


def remove_partial_artifact(path: Path) -> bool:
	"""Delete a leftover temporary file. Failures are logged, never raised."""
	path = Path(path)
	if not path.exists():
		return False
	try:
		path.unlink()
	except OSError as e:
		logger.error("Unable to delete temporary file %s: %s", path, e)
		return False
	logger.debug("Removed temporary file %s", path)
	return True
