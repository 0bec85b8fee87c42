# tests/test_tools.py
import logging
from pathlib import Path

import pytest

from place2xlsx.tools import (
	ensure_xlsx_extension,
	generate_output_path,
	remove_partial_artifact,
	temporary_artifact_path,
)


@pytest.mark.parametrize("source, expected", [
	("foo.txt", "foo.xlsx"),
	("foo", "foo.xlsx"),
	("boards/rev_b/place.txt", "boards/rev_b/place.xlsx"),
	("foo.", "foo.xlsx"),
])
def test_generate_output_path(source, expected):
	assert generate_output_path(Path(source)) == Path(expected)


@pytest.mark.parametrize("output, expected", [
	("bar", "bar.xlsx"),
	("bar.txt", "bar.xlsx"),
	("bar.xlsx", "bar.xlsx"),
	("out/bar.XLSX", "out/bar.xlsx"),
	("bar.", "bar.xlsx"),
	("bar.xlsx.", "bar.xlsx"),
])
def test_ensure_xlsx_extension(output, expected):
	assert ensure_xlsx_extension(Path(output)) == Path(expected)


def test_temporary_artifact_path():
	assert temporary_artifact_path(Path("out/bar.xlsx")) == Path("out/bar.xlsxtmp")


def test_remove_partial_artifact(tmp_path):
	leftover = tmp_path / "bar.xlsxtmp"
	leftover.write_bytes(b"PK")
	assert remove_partial_artifact(leftover) is True
	assert not leftover.exists()
	assert remove_partial_artifact(leftover) is False


def test_remove_partial_artifact_logs_failure(tmp_path, monkeypatch, caplog):
	leftover = tmp_path / "bar.xlsxtmp"
	leftover.write_bytes(b"PK")

	def refuse(self, *args, **kwargs):
		raise PermissionError("locked")

	monkeypatch.setattr(Path, "unlink", refuse)
	with caplog.at_level(logging.ERROR, logger="place2xlsx.tools"):
		assert remove_partial_artifact(leftover) is False
	assert "Unable to delete temporary file" in caplog.text
	assert "locked" in caplog.text
