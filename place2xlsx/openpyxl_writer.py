#!/usr/bin/env python3
"""
OpenPyXL-based workbook writer for cross-platform environments without local Excel.
Every value is stored as a string cell; nothing is interpreted as a number or formula.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE, TYPE_STRING
from openpyxl.worksheet.worksheet import Worksheet

from .layout import SHEET_NAME, iter_sheet_cells
from .placement import PlacementRecord
from .tools import remove_partial_artifact, temporary_artifact_path

logger = logging.getLogger(__name__)


def escape_control_characters(value: str) -> str:
	"""Encode characters the sheet XML cannot hold as _xHHHH_, which Excel decodes back."""
	return ILLEGAL_CHARACTERS_RE.sub(lambda m: "_x{:04X}_".format(ord(m.group(0))), value)


class OpenpyxlPlacementWriter:
	"""Build a single-sheet placement workbook with openpyxl."""

	def __init__(self, output_file: str):
		self.output_file = Path(output_file)
		self.workbook: Optional[Workbook] = None
		self.worksheet: Optional[Worksheet] = None

	def __enter__(self):
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close_workbook()

	def open_workbook(self) -> None:
		self.workbook = Workbook()
		# Rename the default sheet so the file holds exactly one
		self.worksheet = self.workbook.active
		self.worksheet.title = SHEET_NAME

	def close_workbook(self) -> None:
		if self.workbook:
			self.workbook.close()
		self.workbook = None
		self.worksheet = None

	def set_text(self, row: int, column: int, value: str) -> None:
		cell = self.worksheet.cell(row=row, column=column)
		cell.value = escape_control_characters(value)
		# openpyxl binds "=..." strings as formulas
		if cell.data_type != TYPE_STRING:
			cell.data_type = TYPE_STRING

	def write_rows(
		self,
		records: Sequence[PlacementRecord],
		headers: Sequence[str],
		metadata: Optional[Sequence[str]] = None,
	) -> None:
		for row, column, value in iter_sheet_cells(records, headers, metadata):
			self.set_text(row, column, value)
		logger.debug(
			"Filled sheet %s: %d metadata row(s), %d record(s)",
			self.worksheet.title, len(metadata or []), len(records),
		)

	def save(self) -> None:
		"""
		Save through a temporary sibling file, then move it into place.
		On failure the temporary file is removed and the original error re-raised.
		"""
		tmp_path = temporary_artifact_path(self.output_file)
		try:
			self.workbook.save(str(tmp_path))
			tmp_path.replace(self.output_file)
		except Exception:
			remove_partial_artifact(tmp_path)
			raise
		logger.info("Saved workbook: %s", self.output_file)
