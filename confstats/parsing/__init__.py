# ==============================================
# TOPIC 1: PARSING
# ==============================================
#
# This package turns the raw text of a conference-management
# CSV export into typed, validated records BEFORE any
# statistics are computed.
#
# Modules:
# --------
# - type_detector.py   → Infer int / float / bool from cell text
# - layouts.py         → Column contracts and the score-block layout
# - tabular_parser.py  → CSV text -> Raw Records + ParseErrors
# - records.py         → Raw Records -> typed records (skip + report bad rows)
# - errors.py          → ParseError, MalformedRecordError
#
# ==============================================

from .errors import MalformedRecordError, ParseError
from .layouts import (
    AUTHOR_LAYOUT,
    REVIEW_LAYOUT,
    SCORE_BLOCK_LAYOUT,
    SUBMISSION_LAYOUT,
    BlockField,
    BlockLayout,
    Column,
    ColumnKind,
    HeaderMode,
    RecordLayout,
)
from .records import AuthorRecord, ReviewRecord, ScoreBlock, SubmissionRecord, build_records
from .tabular_parser import ParseResult, TabularParser
from .type_detector import TypeDetector

__all__ = [
    "AUTHOR_LAYOUT",
    "REVIEW_LAYOUT",
    "SCORE_BLOCK_LAYOUT",
    "SUBMISSION_LAYOUT",
    "AuthorRecord",
    "BlockField",
    "BlockLayout",
    "Column",
    "ColumnKind",
    "HeaderMode",
    "MalformedRecordError",
    "ParseError",
    "ParseResult",
    "RecordLayout",
    "ReviewRecord",
    "ScoreBlock",
    "SubmissionRecord",
    "TabularParser",
    "TypeDetector",
    "build_records",
]
