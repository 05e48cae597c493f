# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - make_csv            → build export text from rows (csv-quoted, CRLF)
# - author_csv          → author.csv text with its exported header line
# - review_csv          → review.csv text, no header
# - submission_csv      → submission.csv text with its exported header line
# - app_config          → AppConfig with default parser / scale / rates
# - clean_config        → reset the get_config() singleton around a test
#
# ==============================================

import csv
import io

import pytest

from confstats.config import AppConfig, ComparableRates, ParserConfig, ReviewScaleConfig, reset_config


def score_block(score, confidence, recommend=None):
    lines = [f"Overall evaluation: {score}", f"Reviewer's confidence: {confidence}"]
    if recommend is not None:
        lines.append(f"Recommend for best paper: {recommend}")
    return "\n".join(lines)


def review_row(review_id, paper_id, reviewer, scores, text="Solid work."):
    return [
        review_id, paper_id, 100 + review_id, reviewer, "",
        text, scores, "", "", "", "", "",
        "2018-03-01", "10:00", "",
    ]


def submission_row(submission_id, track, authors, submit_time, keywords, decision, last_update=""):
    return [
        submission_id, 1, track, f"Paper {submission_id}", authors,
        submit_time, last_update, "", keywords, decision, "no", "no",
        "An abstract\nspanning two lines.",
    ]


@pytest.fixture
def make_csv():
    def _make(rows, header=None):
        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\r\n")
        if header is not None:
            writer.writerow(header)
        for row in rows:
            writer.writerow(row)
        return out.getvalue()
    return _make


@pytest.fixture
def author_csv(make_csv) -> str:
    header = ["submission #", "first name", "last name", "email", "country",
              "affiliation", "Web page", "person #", "corresponding?"]
    rows = [
        [1, "Jane", "Doe", "jane@mit.edu", "United States", "MIT", "", 11, "yes"],
        [2, "Jane", "Doe", "jane@mit.edu", "United States", "MIT", "", 11, "no"],
        [2, "Wei", "Zhang", "wei@nus.edu.sg", "Singapore", "NUS", "", 12, "yes"],
        [3, "Ana", "Silva", "ana@usp.br", "Brazil", "USP", "", 13, "yes"],
        [3, "Wei", "Zhang", "wei@nus.edu.sg", "Singapore", "NUS", "", 12, "no"],
        [4, "Tom", "Lee", "tom@nus.edu.sg", "Singapore", "NUS", "", 14, "yes"],
    ]
    return make_csv(rows, header=header)


@pytest.fixture
def review_csv(make_csv) -> str:
    rows = [
        review_row(1, 1, "Alice", score_block(2, 4, "yes")),
        review_row(2, 1, "Bob", score_block(-1, 2, "no")),
        review_row(3, 2, "Carol", score_block(3, 5)),
        review_row(4, 3, "Dan", score_block(-3, 3, "no")),
        review_row(5, 3, "Eve", score_block(-2, 3, "no")),
    ]
    return make_csv(rows)


@pytest.fixture
def submission_csv(make_csv) -> str:
    header = ["#", "track #", "track name", "title", "authors", "submitted",
              "last updated", "form fields", "keywords", "decision",
              "notified", "reviews sent", "abstract"]
    rows = [
        submission_row(1, "Full Papers", "Jane Doe, Wei Zhang and Ana Silva",
                       "2018-01-01 10:00", "Digital Libraries\nMetadata", "accept",
                       last_update="2018-01-03 09:00"),
        submission_row(2, "Full Papers", "Wei Zhang and Tom Lee",
                       "2018-01-01 11:00", "metadata\nSearch", "reject"),
        submission_row(3, "Short Papers", "Jane Doe",
                       "2018-01-02 09:00", "Search", "accept"),
        submission_row(4, "Posters", "Ana Silva",
                       "2018-01-03 12:00", "Archives", "undecided"),
    ]
    return make_csv(rows, header=header)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        parser=ParserConfig(),
        review_scale=ReviewScaleConfig(),
        comparable_rates=ComparableRates(),
    )


@pytest.fixture
def clean_config():
    reset_config()
    yield
    reset_config()
