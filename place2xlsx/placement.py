#!/usr/bin/env python3
"""
Parser for '!'-delimited component placement reports.

A data line looks like:
	Designator!MidX!MidY!Rotation!Mirror!Footprint[!...]

Lines starting with VERSION, '#' or '---' are structural markers and are
skipped. In metadata mode every non-empty line before the first '#' line is
kept verbatim so it can be re-emitted above the header row.
"""

import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)

HEADERS = ["Designator", "Mid x", "Mid y", "Rotation", "Layer", "Footprint"]

LEAD_IN_TOKENS = ("VERSION", "#", "---")
BODY_SKIP_TOKENS = ("#", "---")
METADATA_TERMINATOR = "#"

FIELD_SEPARATOR = "!"
MIN_FIELDS = 6

# Forces spreadsheet consumers to keep the footprint as text ("0402" stays "0402")
TEXT_MARKER = "'"

LAYER_TOP = "T"
LAYER_BOTTOM = "B"


class PlacementRecord:
	"""One placed component, all values kept as text."""

	__slots__ = ("designator", "mid_x", "mid_y", "rotation", "layer", "footprint")

	def __init__(self, designator: str, mid_x: str, mid_y: str, rotation: str, layer: str, footprint: str):
		self.designator = designator
		self.mid_x = mid_x
		self.mid_y = mid_y
		self.rotation = rotation
		self.layer = layer
		self.footprint = footprint

	def as_row(self) -> List[str]:
		"""Values in HEADERS order."""
		return [self.designator, self.mid_x, self.mid_y, self.rotation, self.layer, self.footprint]

	def __eq__(self, other):
		if not isinstance(other, PlacementRecord):
			return NotImplemented
		return self.as_row() == other.as_row()

	def __repr__(self) -> str:
		return "PlacementRecord(%s)" % ", ".join(repr(v) for v in self.as_row())


def layer_from_mirror(mirror: str) -> str:
	return LAYER_BOTTOM if mirror.strip() else LAYER_TOP


def parse_record(line: str):
	"""
	Extract a PlacementRecord from a single data line.

	Args:
		line (str): Raw line without its terminator

	Returns:
		PlacementRecord, or None when the line has fewer than six fields
	"""
	parts = line.split(FIELD_SEPARATOR)
	if len(parts) < MIN_FIELDS:
		return None

	designator = parts[0].strip()
	mid_x = parts[1].strip()
	mid_y = parts[2].strip()
	rotation = parts[3].strip()
	mirror = parts[4].strip()
	footprint = TEXT_MARKER + parts[5].strip()

	return PlacementRecord(
		designator=designator,
		mid_x=mid_x,
		mid_y=mid_y,
		rotation=rotation,
		layer=layer_from_mirror(mirror),
		footprint=footprint,
	)


def split_lines(content: str) -> List[str]:
	"""Split on "\\n" only, dropping a trailing "\\r" from each line."""
	return [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]


def _split_metadata(lines: List[str]) -> Tuple[List[str], int]:
	# Returns the metadata lines and the index of the first body line
	metadata: List[str] = []
	for index, line in enumerate(lines):
		stripped = line.strip()
		if stripped.startswith(METADATA_TERMINATOR):
			return metadata, index + 1
		if stripped:
			metadata.append(line)
	return metadata, len(lines)


def parse_placement(content: str, with_metadata: bool = False) -> Tuple[List[PlacementRecord], List[str], List[str]]:
	"""
	Parse the full text of a placement report.

	Args:
		content (str): Whole file contents
		with_metadata (bool): Keep the lines preceding the first '#' line as a
			metadata block instead of treating them as data

	Returns:
		Tuple of (records, headers, metadata). metadata is always empty when
		with_metadata is False.
	"""
	lines = split_lines(content)
	headers = list(HEADERS)

	if with_metadata:
		metadata, start = _split_metadata(lines)
		skip_tokens = BODY_SKIP_TOKENS
		logger.debug("Collected %d metadata line(s)", len(metadata))
	else:
		metadata, start = [], 0
		skip_tokens = LEAD_IN_TOKENS

	records: List[PlacementRecord] = []
	for line_no in range(start, len(lines)):
		line = lines[line_no]
		stripped = line.strip()
		if not stripped or stripped.startswith(skip_tokens):
			continue
		record = parse_record(line)
		if record is None:
			logger.debug("Dropping line %d: fewer than %d fields", line_no + 1, MIN_FIELDS)
			continue
		records.append(record)

	logger.debug("Parsed %d placement record(s)", len(records))
	return records, headers, metadata
