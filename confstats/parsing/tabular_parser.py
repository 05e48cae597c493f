# ==============================================
# TabularParser
# ==============================================
#
# PURPOSE:
#   Turn the raw text of one CSV export into an ordered list of
#   Raw Records (dict column name -> typed value), plus the list
#   of problems found on the way. Never raises on a bad row.
#
# CLASSES:
# --------
# - ParseResult (dataclass)
#     records: list[dict]       → one Raw Record per data row
#     errors: list[ParseError]  → problems found (rows are kept or skipped)
#     fields: list[str]         → header that was applied
#     rows: list[int]           → data-row index of each record (skipped rows keep their number)
#
# - TabularParser
#     Stateless apart from its ParserConfig.
#
#     Methods:
#     --------
#     - parse(text, layout=None) -> ParseResult
#         Header handling follows layout.header_mode:
#           OVERRIDE → drop first physical line, use layout names
#           NONE     → use layout names, every line is data
#           FILE     → first row is the header (also when layout is None)
#
#     - drop_first_line(text) -> str  (staticmethod)
#
# NOTES:
# ------
#   - Quoted cells may contain raw line breaks; the csv module keeps
#     them inside one cell as long as the text is read with newline="".
#   - Rows shorter/longer than the header are reported and kept
#     (missing columns absent, extra cells dropped).
#
# ==============================================

import csv
import io
import re
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from confstats.config import ParserConfig
from .errors import ParseError
from .layouts import ColumnKind, HeaderMode, RecordLayout
from .type_detector import TypeDetector


FIRST_LINE_BREAK = re.compile(r'\r\n|\r|\n')


@dataclass
class ParseResult:
    records: List[Dict[str, Any]] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)
    fields: List[str] = field(default_factory=list)
    rows: List[int] = field(default_factory=list)

    def log_errors(self, source: str) -> None:
        """Print collected problems to stderr (stdout is kept for results)."""
        if not self.errors:
            return
        print(f"⚠ Parsing {source} has issues: {len(self.errors)} problem(s)", file=sys.stderr)
        for error in self.errors:
            print(f"   ✗ {error}", file=sys.stderr)


class TabularParser:
    """
    CSV text -> Raw Records, driven by a RecordLayout.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

    def parse(self, text: str, layout: Optional[RecordLayout] = None) -> ParseResult:
        """
        Parse an export into Raw Records.

        Args:
            text: Decoded file content
            layout: Column contract; None means "read the header from the file"

        Returns:
            ParseResult with records in file order and any problems found
        """
        header_mode = layout.header_mode if layout else HeaderMode.FILE
        result = ParseResult()

        if header_mode == HeaderMode.OVERRIDE:
            text = self.drop_first_line(text)

        header: Optional[List[str]] = None
        if header_mode != HeaderMode.FILE:
            header = layout.column_names

        reader = csv.reader(io.StringIO(text, newline=""))
        row_index = 0

        while True:
            try:
                row = next(reader)
            except StopIteration:
                break
            except csv.Error as e:
                result.errors.append(ParseError("MalformedRow", str(e), row_index))
                row_index += 1
                continue

            if self.config.skip_empty_lines and self._is_empty(row):
                continue

            if header is None:
                header = [self._header_name(name) for name in row]
                continue

            if len(row) != len(header):
                code = "TooFewFields" if len(row) < len(header) else "TooManyFields"
                result.errors.append(ParseError(
                    code,
                    f"expected {len(header)} fields but parsed {len(row)}",
                    row_index,
                ))

            result.records.append(self._build_record(row, header, layout))
            result.rows.append(row_index)
            row_index += 1

        result.fields = list(header or [])
        return result

    @staticmethod
    def drop_first_line(text: str) -> str:
        """Remove the first physical line, whatever its line terminator."""
        parts = FIRST_LINE_BREAK.split(text, maxsplit=1)
        return parts[1] if len(parts) > 1 else ""

    def _build_record(self, row: List[str], header: List[str], layout: Optional[RecordLayout]) -> Dict[str, Any]:
        record: Dict[str, Any] = {}
        for name, cell in zip(header, row):
            record[name] = self._convert(cell, name, layout)
        return record

    def _convert(self, cell: str, name: str, layout: Optional[RecordLayout]) -> Any:
        if not self.config.type_inference:
            return cell.strip()

        column = layout.column(name) if layout else None
        if column is not None and column.kind == ColumnKind.TEXT:
            return cell.strip()

        value, _ = TypeDetector.coerce(cell)
        return value

    def _header_name(self, name: str) -> str:
        return name.strip() if self.config.trim_headers else name

    @staticmethod
    def _is_empty(row: List[str]) -> bool:
        return len(row) == 0 or (len(row) == 1 and row[0] == "")
