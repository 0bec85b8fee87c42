# tests/test_placement.py
from place2xlsx.placement import HEADERS, PlacementRecord, layer_from_mirror, parse_placement, parse_record


def test_top_side_record():
	records, headers, metadata = parse_placement("R1!1.0!2.0!90!!0402\n")
	assert records == [PlacementRecord("R1", "1.0", "2.0", "90", "T", "'0402")]
	assert headers == HEADERS
	assert metadata == []


def test_bottom_side_record():
	records, _, _ = parse_placement("R2!3.0!4.0!180!TOP!0603\n")
	assert len(records) == 1
	assert records[0].layer == "B"
	assert records[0].footprint == "'0603"


def test_comments_only_gives_header_and_no_records():
	records, headers, metadata = parse_placement("# comment\n---\n\n")
	assert records == []
	assert headers == ["Designator", "Mid x", "Mid y", "Rotation", "Layer", "Footprint"]
	assert metadata == []


def test_fields_are_trimmed_and_extra_fields_ignored():
	record = parse_record("  C7 ! 10.25 !-3.5!  270 ! !  SOT-23-5  !extra!more")
	assert record.as_row() == ["C7", "10.25", "-3.5", "270", "T", "'SOT-23-5"]


def test_short_lines_are_dropped():
	content = "\n".join([
		"U1!1!2!0!!QFN",
		"U2!1!2!0!",
		"garbage",
		"U3!5!6!90!M!0805",
	])
	records, _, _ = parse_placement(content)
	assert [r.designator for r in records] == ["U1", "U3"]


def test_whitespace_mirror_is_top():
	assert layer_from_mirror("   ") == "T"
	assert layer_from_mirror("") == "T"
	assert layer_from_mirror("x") == "B"


def test_footprint_keeps_leading_zeros():
	record = parse_record("R9!0!0!0!!  007  ")
	assert record.footprint == "'007"


def test_simple_variant_skips_markers_anywhere():
	content = (
		"VERSION 2.1\n"
		"# Designator!X!Y!Rot!Mirror!Footprint\n"
		"R1!1!1!0!!0402\n"
		"   # indented comment\n"
		"--- separator ---\n"
		"\n"
		"R2!2!2!0!!0402\n"
		"VERSION!a!b!c!d!e\n"
	)
	records, _, metadata = parse_placement(content)
	assert [r.designator for r in records] == ["R1", "R2"]
	assert metadata == []


def test_crlf_line_endings():
	records, _, _ = parse_placement("R1!1!2!3!!0402\r\nR2!1!2!3!Y!0603\r\n")
	assert [r.as_row() for r in records] == [
		["R1", "1", "2", "3", "T", "'0402"],
		["R2", "1", "2", "3", "B", "'0603"],
	]


def test_metadata_block_collected_until_first_hash_line():
	content = (
		"Board: demo\n"
		"\n"
		"  Units: mm  \n"
		"# Designator!X!Y!Rot!Mirror!Footprint\n"
		"R1!1!2!0!!0402\n"
		"---\n"
		"# trailing comment\n"
		"R2!3!4!0!B!0603\n"
	)
	records, headers, metadata = parse_placement(content, with_metadata=True)
	assert metadata == ["Board: demo", "  Units: mm  "]
	assert headers == HEADERS
	assert [r.designator for r in records] == ["R1", "R2"]


def test_metadata_mode_parses_version_lines_in_body():
	content = "# header\nVERSION!1!2!0!!0402\n"
	records, _, metadata = parse_placement(content, with_metadata=True)
	assert metadata == []
	assert [r.designator for r in records] == ["VERSION"]


def test_metadata_mode_without_terminator_has_no_records():
	content = "VERSION 1\nR1!1!2!0!!0402\n"
	records, _, metadata = parse_placement(content, with_metadata=True)
	assert records == []
	assert metadata == ["VERSION 1", "R1!1!2!0!!0402"]


def test_empty_input():
	assert parse_placement("") == ([], HEADERS, [])
	assert parse_placement("", with_metadata=True) == ([], HEADERS, [])
