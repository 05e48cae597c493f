# ==============================================
# Layouts (Record-layout descriptors)
# ==============================================
#
# PURPOSE:
#   Describe the column positions of every export the system reads,
#   and the line positions inside the review "scores" block.
#   The parser and the typed records consume these descriptors
#   instead of hard-coding column names inline.
#
# WHY THIS FILE EXISTS:
#   The exports either carry an unreliable header (author.csv,
#   submission.csv) or no header at all (review.csv). The column
#   order is therefore the real contract, and it lives here.
#
# ENUMS:
# ------
# - HeaderMode(Enum): FILE, OVERRIDE, NONE
#     FILE:     first row is the header
#     OVERRIDE: first physical line is dropped, layout names are used
#     NONE:     every line is data, layout names are used
#
# - ColumnKind(Enum): AUTO, TEXT
#     AUTO cells go through type inference, TEXT cells stay strings.
#
# CLASSES:
# --------
# - Column (dataclass)          → name, kind, required
# - RecordLayout (dataclass)    → ordered columns + header mode
# - BlockField (dataclass)      → one "Label: value" line of a text block
# - BlockLayout (dataclass)     → ordered block fields, parse(text) -> dict
#
# LAYOUTS:
# --------
# - AUTHOR_LAYOUT, REVIEW_LAYOUT, SUBMISSION_LAYOUT
# - SCORE_BLOCK_LAYOUT
#
# ==============================================

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .errors import MalformedRecordError
from .type_detector import TypeDetector


class HeaderMode(Enum):
    FILE = "file"
    OVERRIDE = "override"
    NONE = "none"


class ColumnKind(Enum):
    AUTO = "auto"
    TEXT = "text"


@dataclass(frozen=True)
class Column:
    name: str
    kind: ColumnKind = ColumnKind.AUTO
    required: bool = False  # Must be present and non-empty


@dataclass(frozen=True)
class RecordLayout:
    """Ordered column contract of one export file."""

    name: str
    columns: Tuple[Column, ...]
    header_mode: HeaderMode = HeaderMode.OVERRIDE

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    @property
    def required_columns(self) -> List[str]:
        return [column.name for column in self.columns if column.required]

    def column(self, name: str) -> Optional[Column]:
        for column in self.columns:
            if column.name == name:
                return column
        return None


@dataclass(frozen=True)
class BlockField:
    """
    One line of a multi-line "Label: value" block.

    kind:
        "number" → numeric value, MalformedRecordError if not a numeral
        "flag"   → 1 when the value equals `truthy`, 0 otherwise
    """

    name: str
    kind: str = "number"
    required: bool = True
    default: Any = None
    truthy: str = "yes"


@dataclass(frozen=True)
class BlockLayout:
    """Fixed-order lines inside a single text cell."""

    name: str
    fields: Tuple[BlockField, ...]
    separator: str = ": "

    LINE_SPLIT = re.compile(r'[\r\n]+')

    def parse(self, text: Any) -> Dict[str, Any]:
        """
        Read the block's values by line position.

        Args:
            text: Raw cell content, e.g. "Overall evaluation: 2\\nReviewer's confidence: 4"

        Returns:
            Dictionary field name -> parsed value (optional fields get their default)

        Raises:
            MalformedRecordError: if a required line is missing or a value is unreadable
        """
        if not isinstance(text, str) or not text.strip():
            raise MalformedRecordError(
                f"{self.name} block is empty", code="MalformedScores", field=self.name
            )

        lines = [line for line in self.LINE_SPLIT.split(text) if line.strip()]
        values: Dict[str, Any] = {}

        for position, block_field in enumerate(self.fields):
            if position >= len(lines):
                if block_field.required:
                    raise MalformedRecordError(
                        f"{self.name} block has no line {position + 1} ({block_field.name})",
                        code="MalformedScores",
                        field=block_field.name,
                    )
                values[block_field.name] = block_field.default
                continue

            line = lines[position]
            if self.separator not in line:
                raise MalformedRecordError(
                    f"{self.name} line {position + 1} is not 'Label{self.separator}value': {line!r}",
                    code="MalformedScores",
                    field=block_field.name,
                )
            raw_value = line.split(self.separator, 1)[1].strip()
            values[block_field.name] = self._read_value(block_field, raw_value)

        return values

    def _read_value(self, block_field: BlockField, raw_value: str) -> Any:
        if block_field.kind == "flag":
            return 1 if raw_value == block_field.truthy else 0

        try:
            return TypeDetector.to_number(raw_value)
        except ValueError:
            raise MalformedRecordError(
                f"{self.name} {block_field.name} is not a number: {raw_value!r}",
                code="MalformedScores",
                field=block_field.name,
            )


# ---------------------------------------------------------------------------
# Export layouts

AUTHOR_LAYOUT = RecordLayout(
    name="author",
    header_mode=HeaderMode.OVERRIDE,
    columns=(
        Column("submissionId"),
        Column("firstName", ColumnKind.TEXT),
        Column("lastName", ColumnKind.TEXT),
        Column("email", ColumnKind.TEXT),
        Column("country", ColumnKind.TEXT),
        Column("affiliation", ColumnKind.TEXT),
        Column("page", ColumnKind.TEXT),
        Column("personId"),
        Column("corresponding"),
    ),
)

# review.csv has no header; the unnamed columns are numbered placeholders
REVIEW_LAYOUT = RecordLayout(
    name="review",
    header_mode=HeaderMode.NONE,
    columns=(
        Column("reviewId"),
        Column("paperId", required=True),
        Column("reviewerId"),
        Column("reviewerName", ColumnKind.TEXT),
        Column("unknown1", ColumnKind.TEXT),
        Column("text", ColumnKind.TEXT),
        Column("scores", ColumnKind.TEXT, required=True),
        Column("overallScore"),
        Column("unknown2", ColumnKind.TEXT),
        Column("unknown3", ColumnKind.TEXT),
        Column("unknown4", ColumnKind.TEXT),
        Column("unknown5"),
        Column("date", ColumnKind.TEXT),
        Column("time", ColumnKind.TEXT),
        Column("recommend", ColumnKind.TEXT),
    ),
)

SUBMISSION_LAYOUT = RecordLayout(
    name="submission",
    header_mode=HeaderMode.OVERRIDE,
    columns=(
        Column("submissionId"),
        Column("trackId"),
        Column("trackName", ColumnKind.TEXT),
        Column("title", ColumnKind.TEXT),
        Column("authors", ColumnKind.TEXT),
        Column("submitTime", ColumnKind.TEXT, required=True),
        Column("lastUpdateTime", ColumnKind.TEXT),
        Column("formFields", ColumnKind.TEXT),
        Column("keywords", ColumnKind.TEXT, required=True),
        Column("decision", ColumnKind.TEXT),
        Column("notified"),
        Column("reviewsSent"),
        Column("abstract", ColumnKind.TEXT),
    ),
)

# Sample: "Overall evaluation: -3\nReviewer's confidence: 5\nRecommend for best paper: no"
SCORE_BLOCK_LAYOUT = BlockLayout(
    name="scores",
    fields=(
        BlockField("score", kind="number"),
        BlockField("confidence", kind="number"),
        BlockField("recommend", kind="flag", required=False, default=0),
    ),
)
