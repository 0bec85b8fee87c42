__version__ = "0.1.0"

from .placement import HEADERS, PlacementRecord, parse_placement
from ._convert_impl import ConversionError, SourceReadError, WorkbookWriteError, convert, write_to_xlsx
from .openpyxl_writer import OpenpyxlPlacementWriter

__all__ = [
	"HEADERS", "PlacementRecord", "parse_placement", "convert", "write_to_xlsx", "OpenpyxlPlacementWriter",
	"ConversionError", "SourceReadError", "WorkbookWriteError",
]
