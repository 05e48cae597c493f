# ==============================================
# ReviewAnalyzer
# ==============================================
#
# PURPOSE:
#   Aggregate review.csv into one confidence-weighted score and
#   one best-paper recommendation value per submission, plus
#   global distributions of both.
#
# INPUT COLUMNS (no header in the file):
#   reviewId | paperId | reviewerId | reviewerName | unknown | text |
#   scores | overallScore | unknown x4 | date | time | recommend
#
#   "scores" is a block such as:
#     Overall evaluation: -3
#     Reviewer's confidence: 5
#     Recommend for best paper: no        (optional line)
#
# PER SUBMISSION:
#   score     = Σ(score · confidence) / Σ(confidence)
#   recommend = Σ(recommend · confidence) / Σ(confidence)   (yes = 1, else 0)
#   confidence = Σ(confidence) / number of reviews
#
# OUTPUT:
#   IDReviewMap, scoreList, meanScore, meanConfidence, recommendList,
#   scoreDistribution, recommendDistribution
#
#   meanScore / meanConfidence are plain means of the per-submission
#   values (mean of means, not re-weighted across submissions).
#
# ==============================================

import sys
from typing import Any, Dict, List, Optional

from confstats.config import ReviewScaleConfig
from confstats.parsing import REVIEW_LAYOUT, ReviewRecord, TabularParser, build_records
from .aggregation import bucketize, mean, ratio, total


class ReviewAnalyzer:
    """Confidence-weighted review aggregates over review.csv."""

    def __init__(self, parser: Optional[TabularParser] = None, scale: Optional[ReviewScaleConfig] = None):
        self.parser = parser or TabularParser()
        self.scale = scale or ReviewScaleConfig()

    def analyze(self, text: str) -> Dict[str, Any]:
        parsed = self.parser.parse(text, REVIEW_LAYOUT)
        reviews = build_records(parsed, ReviewRecord.from_raw)
        parsed.log_errors("review.csv")

        id_review_map: Dict[Any, Dict[str, Optional[float]]] = {}
        score_list: List[float] = []
        recommend_list: List[float] = []
        confidence_list: List[float] = []

        for paper_id, group in self.group_by_paper(reviews).items():
            summary = self.summarize_group(group)
            id_review_map[paper_id] = {"score": summary["score"], "recommend": summary["recommend"]}

            if summary["score"] is None:
                print(f"⚠ Submission {paper_id}: reviewer confidences sum to 0, "
                      f"left out of the distributions", file=sys.stderr)
                continue

            score_list.append(summary["score"])
            recommend_list.append(summary["recommend"])
            confidence_list.append(summary["confidence"])

        scale = self.scale
        return {
            "IDReviewMap": id_review_map,
            "scoreList": score_list,
            "meanScore": mean(score_list),
            "meanConfidence": mean(confidence_list),
            "recommendList": recommend_list,
            "scoreDistribution": bucketize(
                score_list, scale.score_min, scale.score_max, scale.score_step
            ),
            "recommendDistribution": bucketize(
                recommend_list, scale.recommend_min, scale.recommend_max, scale.recommend_step
            ),
        }

    @staticmethod
    def group_by_paper(reviews: List[ReviewRecord]) -> Dict[Any, List[ReviewRecord]]:
        """Group reviews by submission id, keeping first-seen submission order."""
        groups: Dict[Any, List[ReviewRecord]] = {}
        for review in reviews:
            groups.setdefault(review.paper_id, []).append(review)
        return groups

    @staticmethod
    def summarize_group(group: List[ReviewRecord]) -> Dict[str, Optional[float]]:
        """
        Weighted score / recommend and average confidence of one submission.

        Args:
            group: All reviews of a single submission (non-empty)

        Returns:
            {"score": ..., "recommend": ..., "confidence": ...}
            score and recommend are None when the confidences sum to 0.
        """
        confidences = [review.scores.confidence for review in group]
        confidence_sum = total(confidences)

        weighted_score = total(r.scores.score * r.scores.confidence for r in group)
        weighted_recommend = total(r.scores.recommend * r.scores.confidence for r in group)

        return {
            "score": ratio(weighted_score, confidence_sum),
            "recommend": ratio(weighted_recommend, confidence_sum),
            "confidence": mean(confidences),
        }
