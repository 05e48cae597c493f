from dataclasses import dataclass
from typing import Optional


class MalformedRecordError(ValueError):
    """Raised when a row cannot be turned into a typed record."""

    def __init__(self, message: str, code: str = "MalformedRecord", field: Optional[str] = None):
        super().__init__(message)
        self.code = code
        self.field = field


@dataclass(frozen=True)
class ParseError:
    """
    One problem found while reading an export.

    `row` is the zero-based index of the data row (header excluded),
    or None when the problem is not tied to a row.
    """
    code: str
    message: str
    row: Optional[int] = None

    def __str__(self) -> str:
        where = f"row {self.row}" if self.row is not None else "file"
        return f"[{self.code}] {where}: {self.message}"
