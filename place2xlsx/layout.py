#!/usr/bin/env python3
from typing import Iterator, List, Optional, Sequence, Tuple

from .placement import PlacementRecord

SHEET_NAME = "Placement"


def header_row_index(metadata: Optional[Sequence[str]]) -> int:
	return len(metadata or []) + 1


def iter_sheet_cells(
	records: Sequence[PlacementRecord],
	headers: Sequence[str],
	metadata: Optional[Sequence[str]] = None,
) -> Iterator[Tuple[int, int, str]]:
	"""Yield (row, column, text) for every non-empty cell, 1-based."""
	for row, line in enumerate(metadata or [], start=1):
		yield row, 1, line

	header_row = header_row_index(metadata)
	for col, name in enumerate(headers, start=1):
		yield header_row, col, name

	for offset, record in enumerate(records, start=1):
		for col, value in enumerate(record.as_row(), start=1):
			yield header_row + offset, col, value


def sheet_dimensions(
	records: Sequence[PlacementRecord],
	headers: Sequence[str],
	metadata: Optional[Sequence[str]] = None,
) -> Tuple[int, int]:
	"""Number of (rows, columns) the layout occupies."""
	rows = header_row_index(metadata) + len(records)
	cols = max(len(headers), 1)
	return rows, cols


def sheet_rows(
	records: Sequence[PlacementRecord],
	headers: Sequence[str],
	metadata: Optional[Sequence[str]] = None,
) -> List[List[str]]:
	"""The same layout as a dense list of rows, padded with empty strings."""
	rows, cols = sheet_dimensions(records, headers, metadata)
	grid = [[""] * cols for _ in range(rows)]
	for row, col, value in iter_sheet_cells(records, headers, metadata):
		grid[row - 1][col - 1] = value
	return grid
