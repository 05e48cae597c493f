# ==============================================
# SubmissionAnalyzer
# ==============================================
#
# PURPOSE:
#   Acceptance rates, keyword frequencies, top accepted authors and
#   cumulative submission time series over a submission.csv export,
#   overall and per track.
#
# INPUT COLUMNS (header override):
#   submissionId | trackId | trackName | title | authors | submitTime |
#   lastUpdateTime | formFields | keywords | decision | notified |
#   reviewsSent | abstract
#
# RULES:
# ------
#   - decision "accept" / "reject" (exact match); anything else only
#     counts towards the totals
#   - keywords: one per line, lower-cased
#   - authors: "A, B and C" → A, B, C
#   - time series: date part of the timestamp, cumulative per day
#   - tracks listed in the ComparableRates reference data get this
#     year's acceptance rate appended to their historical series
#
# OUTPUT:
#   acceptanceRate, overallKeywordMap, overallKeywordList,
#   acceptedKeywordMap, acceptedKeywordList, rejectedKeywordMap,
#   rejectedKeywordList, keywordsByTrack, acceptanceRateByTrack,
#   topAcceptedAuthors, topAuthorsByTrack, timeSeries, lastEditSeries,
#   comparableAcceptanceRate
#
# ==============================================

from typing import Any, Dict, Iterable, List, Optional

from confstats.config import ComparableRates
from confstats.parsing import SUBMISSION_LAYOUT, SubmissionRecord, TabularParser, build_records
from .aggregation import (
    count_by,
    cumulative_series,
    ratio,
    sorted_by_count_desc,
    split_pairs,
)


def _keywords(submissions: Iterable[SubmissionRecord]) -> List[str]:
    return [keyword for submission in submissions for keyword in submission.keywords]


def _authors(submissions: Iterable[SubmissionRecord]) -> List[str]:
    return [name for submission in submissions for name in submission.authors]


def _top_authors(submissions: Iterable[SubmissionRecord]) -> Dict[str, List[Any]]:
    accepted = [s for s in submissions if s.is_accepted]
    return split_pairs(sorted_by_count_desc(count_by(_authors(accepted))), "names", "counts")


class SubmissionAnalyzer:
    """Acceptance, keyword, author and timeline statistics over submission.csv."""

    def __init__(
        self,
        parser: Optional[TabularParser] = None,
        comparable_rates: Optional[ComparableRates] = None,
    ):
        self.parser = parser or TabularParser()
        self.comparable_rates = comparable_rates or ComparableRates()

    def analyze(self, text: str) -> Dict[str, Any]:
        parsed = self.parser.parse(text, SUBMISSION_LAYOUT)
        submissions = build_records(parsed, SubmissionRecord.from_raw)
        parsed.log_errors("submission.csv")

        accepted = [s for s in submissions if s.is_accepted]
        rejected = [s for s in submissions if s.is_rejected]

        overall_keyword_map = count_by(_keywords(submissions))
        accepted_keyword_map = count_by(_keywords(accepted))
        rejected_keyword_map = count_by(_keywords(rejected))

        tracks = self.analyze_tracks(submissions)

        return {
            "acceptanceRate": ratio(len(accepted), len(submissions)),
            "overallKeywordMap": overall_keyword_map,
            "overallKeywordList": sorted_by_count_desc(overall_keyword_map),
            "acceptedKeywordMap": accepted_keyword_map,
            "acceptedKeywordList": sorted_by_count_desc(accepted_keyword_map),
            "rejectedKeywordMap": rejected_keyword_map,
            "rejectedKeywordList": sorted_by_count_desc(rejected_keyword_map),
            "keywordsByTrack": tracks["keywordsByTrack"],
            "acceptanceRateByTrack": tracks["acceptanceRateByTrack"],
            "topAcceptedAuthors": _top_authors(submissions),
            "topAuthorsByTrack": tracks["topAuthorsByTrack"],
            "timeSeries": cumulative_series(count_by(s.submit_date for s in submissions)),
            "lastEditSeries": cumulative_series(count_by(s.last_update_date for s in submissions)),
            "comparableAcceptanceRate": self.comparable_acceptance_rate(tracks["acceptanceRateByTrack"]),
        }

    def analyze_tracks(self, submissions: List[SubmissionRecord]) -> Dict[str, Dict[str, Any]]:
        """
        Keyword list, accepted-author ranking and acceptance rate per track.

        Returns:
            {"keywordsByTrack": {...}, "topAuthorsByTrack": {...}, "acceptanceRateByTrack": {...}}
        """
        keywords_by_track: Dict[str, Any] = {}
        top_authors_by_track: Dict[str, Any] = {}
        acceptance_rate_by_track: Dict[str, Optional[float]] = {}

        for track_name, group in self.group_by_track(submissions).items():
            accepted_count = sum(1 for s in group if s.is_accepted)
            keywords_by_track[track_name] = sorted_by_count_desc(count_by(_keywords(group)))
            top_authors_by_track[track_name] = _top_authors(group)
            acceptance_rate_by_track[track_name] = ratio(accepted_count, len(group))

        return {
            "keywordsByTrack": keywords_by_track,
            "acceptanceRateByTrack": acceptance_rate_by_track,
            "topAuthorsByTrack": top_authors_by_track,
        }

    def comparable_acceptance_rate(self, rate_by_track: Dict[str, Optional[float]]) -> Dict[str, Any]:
        """Historical series with this year's rate appended for every known track."""
        payload = self.comparable_rates.to_dict()
        for track_name, rate in rate_by_track.items():
            if track_name in self.comparable_rates.series:
                payload[track_name].append(rate)
        return payload

    @staticmethod
    def group_by_track(submissions: List[SubmissionRecord]) -> Dict[str, List[SubmissionRecord]]:
        groups: Dict[str, List[SubmissionRecord]] = {}
        for submission in submissions:
            groups.setdefault(submission.track_name, []).append(submission)
        return groups
