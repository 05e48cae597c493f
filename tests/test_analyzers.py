# ==============================================
# Tests for Analysis Module
# ==============================================
#
# AuthorAnalyzer, ReviewAnalyzer and SubmissionAnalyzer on small
# exports built by the conftest fixtures.
# ==============================================

import math

import pytest

from confstats.analysis import AuthorAnalyzer, ReviewAnalyzer, SubmissionAnalyzer
from confstats.config import ComparableRates, ReviewScaleConfig
from conftest import review_row, score_block, submission_row


AUTHOR_HEADER = ["#", "first", "last", "email", "country", "affiliation", "page", "person", "corr"]
SUBMISSION_HEADER = ["#"] * 13


# ==============================================
# Author Analyzer Tests
# ==============================================

class TestAuthorAnalyzer:

    def test_same_author_twice(self, make_csv):
        rows = [
            [1, "Jane", "Doe", "", "US", "MIT", "", 1, "yes"],
            [2, "Jane", "Doe", "", "US", "MIT", "", 1, "yes"],
        ]
        result = AuthorAnalyzer().analyze(make_csv(rows, header=AUTHOR_HEADER))

        assert result["topAuthors"] == {"labels": ["Jane Doe"], "data": [2]}
        assert result["topCountries"] == {"labels": ["US"], "data": [2]}
        assert result["topAffiliations"] == {"labels": ["MIT"], "data": [2]}

    def test_rankings(self, author_csv):
        result = AuthorAnalyzer().analyze(author_csv)

        assert result["topAuthors"] == {
            "labels": ["Jane Doe", "Wei Zhang", "Ana Silva", "Tom Lee"],
            "data": [2, 2, 1, 1],
        }
        assert result["topCountries"] == {
            "labels": ["Singapore", "United States", "Brazil"],
            "data": [3, 2, 1],
        }
        assert result["topAffiliations"]["labels"] == ["NUS", "MIT", "USP"]

    def test_missing_name_parts_and_country(self, make_csv):
        rows = [
            [1, "", "Doe", "", "", "", "", 1, "no"],
            [2, "Plato", "", "", "", "Academy", "", 2, "no"],
        ]
        result = AuthorAnalyzer().analyze(make_csv(rows, header=AUTHOR_HEADER))

        assert result["topAuthors"]["labels"] == [" Doe", "Plato "]
        assert result["topCountries"] == {"labels": [""], "data": [2]}
        assert result["topAffiliations"] == {"labels": ["", "Academy"], "data": [1, 1]}

    def test_empty_export(self):
        result = AuthorAnalyzer().analyze("header only\r\n")
        assert result["topAuthors"] == {"labels": [], "data": []}


# ==============================================
# Review Analyzer Tests
# ==============================================

class TestReviewAnalyzer:

    def test_confidence_weighted_scenario(self, make_csv):
        text = make_csv([
            review_row(1, 7, "Alice", score_block(2, 4, "yes")),
            review_row(2, 7, "Bob", score_block(-1, 2, "no")),
        ])
        result = ReviewAnalyzer().analyze(text)

        assert result["IDReviewMap"][7]["score"] == pytest.approx(1.0)
        assert result["IDReviewMap"][7]["recommend"] == pytest.approx(0.667, abs=1e-3)
        assert result["meanConfidence"] == pytest.approx(3.0)

    def test_aggregates(self, review_csv):
        result = ReviewAnalyzer().analyze(review_csv)

        assert list(result["IDReviewMap"]) == [1, 2, 3]
        assert result["scoreList"] == pytest.approx([1.0, 3.0, -2.5])
        assert result["recommendList"] == pytest.approx([4 / 6, 0.0, 0.0])
        # mean of per-submission values, not re-weighted
        assert result["meanScore"] == pytest.approx(0.5)
        assert result["meanConfidence"] == pytest.approx(11 / 3)

    def test_distributions(self, review_csv):
        result = ReviewAnalyzer().analyze(review_csv)
        score_counts = result["scoreDistribution"]["counts"]
        recommend_counts = result["recommendDistribution"]["counts"]

        assert len(score_counts) == 24
        assert score_counts[16] == 1   # 1.0
        assert score_counts[23] == 1   # 3.0, clamped into the last bucket
        assert score_counts[2] == 1    # -2.5
        assert sum(score_counts) == 3

        assert len(recommend_counts) == 10
        assert recommend_counts[6] == 1
        assert recommend_counts[0] == 2

    def test_malformed_review_is_skipped(self, make_csv, capsys):
        text = make_csv([
            review_row(1, 1, "Alice", score_block(2, 4)),
            review_row(2, 1, "Bob", "Overall evaluation: 3"),
        ])
        result = ReviewAnalyzer().analyze(text)

        assert result["IDReviewMap"][1]["score"] == pytest.approx(2.0)
        assert "MalformedScores" in capsys.readouterr().err

    def test_zero_confidence_group(self, make_csv):
        text = make_csv([
            review_row(1, 1, "Alice", score_block(2, 0)),
            review_row(2, 2, "Bob", score_block(1, 2)),
        ])
        result = ReviewAnalyzer().analyze(text)

        assert result["IDReviewMap"][1] == {"score": None, "recommend": None}
        assert result["scoreList"] == [1.0]
        assert sum(result["scoreDistribution"]["counts"]) == 1

    def test_empty_export(self):
        result = ReviewAnalyzer().analyze("")

        assert result["IDReviewMap"] == {}
        assert result["meanScore"] is None
        assert result["meanConfidence"] is None
        assert sum(result["scoreDistribution"]["counts"]) == 0

    def test_custom_scale(self, review_csv):
        scale = ReviewScaleConfig(score_min=-3, score_max=3, score_step=1.0)
        result = ReviewAnalyzer(scale=scale).analyze(review_csv)

        assert len(result["scoreDistribution"]["counts"]) == 6
        assert result["scoreDistribution"]["labels"][0] == "-3 ~ -2"


# ==============================================
# Submission Analyzer Tests
# ==============================================

class TestSubmissionAnalyzer:

    def test_acceptance_rate_by_track_scenario(self, make_csv):
        rows = [
            submission_row(1, "Demos", "A", "2020-01-01 10:00", "x", "accept"),
            submission_row(2, "Demos", "B", "2020-01-01 11:00", "y", "reject"),
        ]
        result = SubmissionAnalyzer().analyze(make_csv(rows, header=SUBMISSION_HEADER))

        assert result["acceptanceRateByTrack"]["Demos"] == 0.5

    def test_time_series_scenario(self, make_csv):
        rows = [
            submission_row(1, "T", "A", "2020-01-01 10:00", "x", "accept"),
            submission_row(2, "T", "A", "2020-01-01 11:00", "x", "accept"),
            submission_row(3, "T", "A", "2020-01-02 09:00", "x", "accept"),
        ]
        result = SubmissionAnalyzer().analyze(make_csv(rows, header=SUBMISSION_HEADER))

        assert result["timeSeries"] == [
            {"x": "2020-01-01", "y": 2},
            {"x": "2020-01-02", "y": 3},
        ]

    def test_overall_statistics(self, submission_csv):
        result = SubmissionAnalyzer().analyze(submission_csv)

        assert result["acceptanceRate"] == 0.5
        assert result["overallKeywordMap"] == {
            "digital libraries": 1, "metadata": 2, "search": 2, "archives": 1,
        }
        assert result["overallKeywordList"] == [
            ("metadata", 2), ("search", 2), ("digital libraries", 1), ("archives", 1),
        ]
        assert result["acceptedKeywordMap"] == {"digital libraries": 1, "metadata": 1, "search": 1}
        assert result["rejectedKeywordList"] == [("metadata", 1), ("search", 1)]
        assert result["topAcceptedAuthors"] == {
            "names": ["Jane Doe", "Wei Zhang", "Ana Silva"],
            "counts": [2, 1, 1],
        }

    def test_per_track_statistics(self, submission_csv):
        result = SubmissionAnalyzer().analyze(submission_csv)

        assert result["acceptanceRateByTrack"] == {
            "Full Papers": 0.5, "Short Papers": 1.0, "Posters": 0.0,
        }
        assert result["keywordsByTrack"]["Full Papers"] == [
            ("metadata", 2), ("digital libraries", 1), ("search", 1),
        ]
        assert result["topAuthorsByTrack"]["Full Papers"] == {
            "names": ["Jane Doe", "Wei Zhang", "Ana Silva"],
            "counts": [1, 1, 1],
        }
        assert result["topAuthorsByTrack"]["Posters"] == {"names": [], "counts": []}

    def test_series(self, submission_csv):
        result = SubmissionAnalyzer().analyze(submission_csv)

        assert result["timeSeries"] == [
            {"x": "2018-01-01", "y": 2},
            {"x": "2018-01-02", "y": 3},
            {"x": "2018-01-03", "y": 4},
        ]
        # built from the last-update column, falling back to the submit time
        assert result["lastEditSeries"] == [
            {"x": "2018-01-01", "y": 1},
            {"x": "2018-01-02", "y": 2},
            {"x": "2018-01-03", "y": 4},
        ]

    def test_comparable_acceptance_rate(self, submission_csv):
        rates = ComparableRates()
        analyzer = SubmissionAnalyzer(comparable_rates=rates)
        comparable = analyzer.analyze(submission_csv)["comparableAcceptanceRate"]

        assert comparable["year"][-1] == 2018
        assert len(comparable["Full Papers"]) == 9
        assert comparable["Full Papers"][-1] == 0.5
        assert comparable["Short Papers"][-1] == 1.0
        assert "Posters" not in comparable
        # reference data is not modified
        assert len(rates.series["Full Papers"]) == 8

    def test_injected_reference_data(self, submission_csv):
        rates = ComparableRates(years=[2017, 2018], series={"Posters": [0.8]})
        comparable = SubmissionAnalyzer(comparable_rates=rates).analyze(submission_csv)["comparableAcceptanceRate"]

        assert comparable == {"year": [2017, 2018], "Posters": [0.8, 0.0]}

    def test_rejected_row_without_authors_still_counts(self, make_csv):
        rows = [
            submission_row(1, "Full Papers", "A", "2020-01-01 10:00", "x", "accept"),
            submission_row(2, "Full Papers", "", "2020-01-01 11:00", "y", "reject"),
        ]
        result = SubmissionAnalyzer().analyze(make_csv(rows, header=SUBMISSION_HEADER))

        assert result["acceptanceRateByTrack"]["Full Papers"] == 0.5
        assert result["rejectedKeywordMap"] == {"y": 1}
        assert result["timeSeries"] == [{"x": "2020-01-01", "y": 2}]
        assert result["topAcceptedAuthors"] == {"names": ["A"], "counts": [1]}

    def test_blank_track_still_counts_overall(self, make_csv):
        rows = [
            submission_row(1, "Full Papers", "A", "2020-01-01 10:00", "x", "accept"),
            submission_row(2, "", "B", "2020-01-01 11:00", "y", "reject"),
        ]
        result = SubmissionAnalyzer().analyze(make_csv(rows, header=SUBMISSION_HEADER))

        assert result["acceptanceRate"] == 0.5
        assert result["acceptanceRateByTrack"] == {"Full Papers": 1.0, "": 0.0}
        assert result["keywordsByTrack"][""] == [("y", 1)]

    def test_row_without_keywords_is_skipped(self, make_csv, capsys):
        rows = [
            submission_row(1, "T", "A", "2020-01-01 10:00", "x", "accept"),
            submission_row(2, "T", "B", "2020-01-01 11:00", "", "reject"),
        ]
        result = SubmissionAnalyzer().analyze(make_csv(rows, header=SUBMISSION_HEADER))

        assert result["acceptanceRate"] == 1.0
        assert "MissingField" in capsys.readouterr().err

    def test_empty_export(self):
        result = SubmissionAnalyzer().analyze("header\r\n")

        assert result["acceptanceRate"] is None
        assert result["timeSeries"] == []
        assert result["comparableAcceptanceRate"]["Full Papers"] == [
            0.29, 0.28, 0.27, 0.29, 0.29, 0.30, 0.29, 0.30,
        ]

    def test_rates_stay_in_unit_interval(self, submission_csv):
        result = SubmissionAnalyzer().analyze(submission_csv)
        rates = list(result["acceptanceRateByTrack"].values()) + [result["acceptanceRate"]]
        assert all(0 <= rate <= 1 and not math.isnan(rate) for rate in rates)
