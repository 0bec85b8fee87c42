#!/usr/bin/env python3
"""
Placement workbook writer using xlwings
Drives a hidden local Excel instance (Windows / macOS) to build and save the sheet
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

import xlwings as xw

from .layout import SHEET_NAME, sheet_dimensions, sheet_rows
from .placement import PlacementRecord
from .tools import remove_partial_artifact, temporary_artifact_path

logger = logging.getLogger(__name__)

TEXT_NUMBER_FORMAT = "@"
QUOTE_PREFIX = "'"


def keep_quote_prefix(value: str) -> str:
	"""Excel swallows one leading apostrophe as its prefix character, so double it"""
	return QUOTE_PREFIX + value if value.startswith(QUOTE_PREFIX) else value


class XlwingsPlacementWriter:
	"""Write placement rows to an Excel workbook using xlwings"""

	def __init__(self, output_file: str):
		"""
		Args:
			output_file (str): Path of the workbook to create
		"""
		self.output_file = Path(output_file)
		self.app = None
		self.workbook = None
		self.worksheet = None

	def __enter__(self):
		"""Context manager entry"""
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		"""Context manager exit"""
		self.close_workbook()

	def open_workbook(self):
		"""Start Excel and create a workbook holding only the placement sheet"""
		try:
			self.app = xw.App(visible=False, add_book=False)
			self.workbook = self.app.books.add()
		except Exception as e:
			logger.error("Error starting Excel: %s", e)
			self.close_workbook()
			raise

		# New books follow the user's "sheets in new workbook" setting
		sheets = list(self.workbook.sheets)
		for extra in sheets[1:]:
			extra.delete()
		self.worksheet = sheets[0]
		self.worksheet.name = SHEET_NAME

	def close_workbook(self):
		"""Close the workbook and quit the Excel instance"""
		try:
			if self.workbook:
				self.workbook.close()
			if self.app:
				self.app.quit()
		except Exception as e:
			logger.warning("Error closing Excel workbook: %s", e)
		finally:
			self.workbook = None
			self.worksheet = None
			self.app = None

	def write_rows(
		self,
		records: Sequence[PlacementRecord],
		headers: Sequence[str],
		metadata: Optional[Sequence[str]] = None,
	):
		"""
		Fill the sheet in a single range assignment

		The range is formatted as text first so Excel keeps values such as
		"1.0" or "0402" exactly as given.
		"""
		rows, cols = sheet_dimensions(records, headers, metadata)
		target = self.worksheet.range((1, 1), (rows, cols))
		target.number_format = TEXT_NUMBER_FORMAT
		target.value = [
			[keep_quote_prefix(value) for value in row]
			for row in sheet_rows(records, headers, metadata)
		]
		logger.debug("Filled range of %d x %d cells", rows, cols)

	def save(self):
		"""Save to the output path, removing Excel's temporary file on failure"""
		try:
			self.workbook.save(str(self.output_file.resolve()))
		except Exception:
			remove_partial_artifact(temporary_artifact_path(self.output_file))
			raise
		logger.info("Saved workbook: %s", self.output_file)
