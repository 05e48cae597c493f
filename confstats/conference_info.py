# ==============================================
# ConferenceInfo — Orchestrator
# ==============================================
#
# PURPOSE:
#   The class callers (the upload endpoint, the CLI) talk to.
#   Takes one uploaded file, decodes it, runs the matching analyzer
#   and wraps the result as {"infoType": ..., "infoData": ...}.
#
# HOW IT CONNECTS THE 2 TOPICS:
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                    ConferenceInfo                        │
#   │                                                          │
#   │   file.buffer (bytes) ──decode──▶ text                   │
#   │                 │                                        │
#   │                 ▼                                        │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ TOPIC 1: PARSING                             │        │
#   │  │  TabularParser → build_records()             │        │
#   │  └──────────────┬───────────────────────────────┘        │
#   │                 │ typed records                          │
#   │                 ▼                                        │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ TOPIC 2: ANALYSIS                            │        │
#   │  │  Author / Review / Submission Analyzer       │        │
#   │  └──────────────┬───────────────────────────────┘        │
#   │                 │ infoData                               │
#   │                 ▼                                        │
#   │        {"infoType": ..., "infoData": ...}                │
#   └──────────────────────────────────────────────────────────┘
#
# CLASS: ConferenceInfo
# ---------------------
#   - __init__(config: AppConfig | None = None)
#   - get_author_info(file) -> dict
#   - get_review_info(file) -> dict
#   - get_submission_info(file) -> dict
#   - get_info(info_type, file) -> dict
#
# MODULE FUNCTIONS:
# -----------------
#   get_author_info / get_review_info / get_submission_info
#   use a ConferenceInfo built from get_config().
#
# Every call is a pure function of the file bytes (and the config):
# no state is kept between calls.
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from confstats.analysis import AuthorAnalyzer, ReviewAnalyzer, SubmissionAnalyzer
from confstats.config import AppConfig, get_config
from confstats.parsing import TabularParser

INFO_TYPES = ("author", "review", "submission")


class UploadedFile(Protocol):
    buffer: bytes


@dataclass(frozen=True)
class CsvUpload:
    """Minimal UploadedFile: raw bytes of one export."""
    buffer: bytes
    filename: str = ""


class ConferenceInfo:
    """
    Entry point for the three analyzers.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Args:
            config: Optional configuration. If None, loads from environment.
        """
        self._config = config or get_config()
        parser = TabularParser(self._config.parser)
        self._author_analyzer = AuthorAnalyzer(parser)
        self._review_analyzer = ReviewAnalyzer(parser, self._config.review_scale)
        self._submission_analyzer = SubmissionAnalyzer(parser, self._config.comparable_rates)

    def get_author_info(self, file: UploadedFile) -> Dict[str, Any]:
        return {"infoType": "author", "infoData": self._author_analyzer.analyze(self._decode(file))}

    def get_review_info(self, file: UploadedFile) -> Dict[str, Any]:
        return {"infoType": "review", "infoData": self._review_analyzer.analyze(self._decode(file))}

    def get_submission_info(self, file: UploadedFile) -> Dict[str, Any]:
        return {"infoType": "submission", "infoData": self._submission_analyzer.analyze(self._decode(file))}

    def get_info(self, info_type: str, file: UploadedFile) -> Dict[str, Any]:
        """
        Dispatch on the export kind.

        Args:
            info_type: "author", "review" or "submission"
            file: Object exposing the uploaded bytes as `.buffer`

        Returns:
            {"infoType": info_type, "infoData": {...}}
        """
        if info_type == "author":
            return self.get_author_info(file)
        if info_type == "review":
            return self.get_review_info(file)
        if info_type == "submission":
            return self.get_submission_info(file)
        raise ValueError(f"Unknown info type '{info_type}', expected one of {', '.join(INFO_TYPES)}")

    def _decode(self, file: UploadedFile) -> str:
        return bytes(file.buffer).decode(self._config.parser.encoding)


def get_author_info(file: UploadedFile) -> Dict[str, Any]:
    return ConferenceInfo().get_author_info(file)


def get_review_info(file: UploadedFile) -> Dict[str, Any]:
    return ConferenceInfo().get_review_info(file)


def get_submission_info(file: UploadedFile) -> Dict[str, Any]:
    return ConferenceInfo().get_submission_info(file)
