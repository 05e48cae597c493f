# ==============================================
# Typed Records
# ==============================================
#
# PURPOSE:
#   Validate Raw Records (dicts from the TabularParser) into typed,
#   immutable records with the fields each analyzer actually uses.
#
# WHY THIS FILE EXISTS:
#   Analyzers should never poke at optional dict keys. A row that
#   lacks a required column, or whose score block is unreadable,
#   fails here with MalformedRecordError and is reported + skipped
#   by build_records() instead of crashing the whole analysis.
#
# CLASSES:
# --------
# - AuthorRecord (dataclass)      → one line of author.csv
# - ScoreBlock (dataclass)        → score / confidence / recommend of one review
# - ReviewRecord (dataclass)      → one line of review.csv
# - SubmissionRecord (dataclass)  → one line of submission.csv
#
# FUNCTION:
# ---------
# - build_records(parsed, factory) -> list
#     Convert every raw record, append a ParseError for each rejected row.
#
# ==============================================

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple, TypeVar

from .errors import MalformedRecordError, ParseError
from .layouts import (
    AUTHOR_LAYOUT,
    REVIEW_LAYOUT,
    SCORE_BLOCK_LAYOUT,
    SUBMISSION_LAYOUT,
    RecordLayout,
)
from .tabular_parser import ParseResult

RecordT = TypeVar("RecordT")

KEYWORD_SPLIT = re.compile(r'[\r\n]+')


def _require(raw: Dict[str, Any], layout: RecordLayout) -> None:
    """Raise MalformedRecordError if a required column is absent or empty."""
    for name in layout.required_columns:
        value = raw.get(name)
        if value is None or (isinstance(value, str) and value == ""):
            raise MalformedRecordError(
                f"{layout.name} row is missing required field '{name}'",
                code="MissingField",
                field=name,
            )


def _text(raw: Dict[str, Any], name: str) -> str:
    # Absent cells read as "" so counting keeps them under the empty label
    value = raw.get(name)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class AuthorRecord:
    submission_id: Any
    first_name: str
    last_name: str
    email: str
    country: str
    affiliation: str

    @property
    def full_name(self) -> str:
        # Not trimmed: a missing part leaves its separating space in place
        return self.first_name + " " + self.last_name

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "AuthorRecord":
        _require(raw, AUTHOR_LAYOUT)
        return cls(
            submission_id=raw.get("submissionId"),
            first_name=_text(raw, "firstName"),
            last_name=_text(raw, "lastName"),
            email=_text(raw, "email"),
            country=_text(raw, "country"),
            affiliation=_text(raw, "affiliation"),
        )


@dataclass(frozen=True)
class ScoreBlock:
    score: float
    confidence: float
    recommend: int = 0

    @classmethod
    def parse(cls, text: Any) -> "ScoreBlock":
        values = SCORE_BLOCK_LAYOUT.parse(text)
        return cls(
            score=values["score"],
            confidence=values["confidence"],
            recommend=values["recommend"],
        )


@dataclass(frozen=True)
class ReviewRecord:
    review_id: Any
    paper_id: Any
    reviewer_name: str
    scores: ScoreBlock

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "ReviewRecord":
        _require(raw, REVIEW_LAYOUT)
        return cls(
            review_id=raw.get("reviewId"),
            paper_id=raw["paperId"],
            reviewer_name=_text(raw, "reviewerName"),
            scores=ScoreBlock.parse(raw["scores"]),
        )


@dataclass(frozen=True)
class SubmissionRecord:
    submission_id: Any
    track_name: str
    title: str
    authors: Tuple[str, ...]
    submit_time: str
    last_update_time: str
    keywords: Tuple[str, ...]
    decision: str

    ACCEPT = "accept"
    REJECT = "reject"

    @property
    def is_accepted(self) -> bool:
        return self.decision == self.ACCEPT

    @property
    def is_rejected(self) -> bool:
        return self.decision == self.REJECT

    @property
    def submit_date(self) -> str:
        return self.submit_time.split(" ")[0]

    @property
    def last_update_date(self) -> str:
        return self.last_update_time.split(" ")[0]

    @staticmethod
    def split_authors(text: str) -> Tuple[str, ...]:
        """
        "A, B and C" -> ("A", "B", "C").

        Only the first " and " is treated as a separator.
        """
        return tuple(name.strip() for name in text.replace(" and ", ",", 1).split(","))

    @staticmethod
    def split_keywords(text: str) -> Tuple[str, ...]:
        """One keyword per line, lower-cased."""
        return tuple(keyword.lower() for keyword in KEYWORD_SPLIT.split(text))

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "SubmissionRecord":
        _require(raw, SUBMISSION_LAYOUT)
        submit_time = _text(raw, "submitTime")
        # Rows never edited after submission carry no update time
        last_update_time = _text(raw, "lastUpdateTime") or submit_time
        return cls(
            submission_id=raw.get("submissionId"),
            track_name=_text(raw, "trackName"),
            title=_text(raw, "title"),
            authors=cls.split_authors(_text(raw, "authors")),
            submit_time=submit_time,
            last_update_time=last_update_time,
            keywords=cls.split_keywords(_text(raw, "keywords")),
            decision=_text(raw, "decision"),
        )


def build_records(parsed: ParseResult, factory: Callable[[Dict[str, Any]], RecordT]) -> List[RecordT]:
    """
    Convert raw records with `factory`, skipping and reporting bad rows.

    Args:
        parsed: Output of TabularParser.parse(); its error list is extended in place
        factory: e.g. AuthorRecord.from_raw

    Returns:
        Typed records in file order
    """
    records: List[RecordT] = []
    for index, raw in enumerate(parsed.records):
        try:
            records.append(factory(raw))
        except MalformedRecordError as e:
            row = parsed.rows[index] if index < len(parsed.rows) else index
            parsed.errors.append(ParseError(e.code, str(e), row))
    return records
