# ==============================================
# TOPIC 2: ANALYSIS
# ==============================================
#
# This package turns typed records into the aggregate views the
# dashboard charts consume. The three analyzers are independent:
# each one parses its own export and never reads another's output.
#
# Modules:
# --------
# - aggregation.py          → Counting, ordering, bucketing, folds
# - author_analyzer.py      → author.csv     → top authors / countries / affiliations
# - review_analyzer.py      → review.csv     → weighted scores + distributions
# - submission_analyzer.py  → submission.csv → acceptance, keywords, timelines
#
# ==============================================

from .author_analyzer import AuthorAnalyzer
from .review_analyzer import ReviewAnalyzer
from .submission_analyzer import SubmissionAnalyzer

__all__ = ["AuthorAnalyzer", "ReviewAnalyzer", "SubmissionAnalyzer"]
