# ==============================================
# Aggregation Utilities
# ==============================================
#
# PURPOSE:
#   Small, pure helpers shared by the three analyzers:
#   frequency counting, ordering, histogram bucketing, folds.
#
# FUNCTIONS:
# ----------
# - count_by(items, key_fn=None) -> dict[label, int]
#     Frequency Map; insertion order = first occurrence.
#
# - sorted_by_count_desc(freq_map) -> list[(label, count)]
#     Descending by count; ties keep first-seen order (stable sort).
#
# - sorted_by_key_asc(freq_map) -> list[(key, count)]
#     Ascending by key ("2020-01-02" sorts after "2020-01-01").
#
# - bucketize(values, low, high, step) -> {"labels": [...], "counts": [...]}
#     Fixed-width histogram; out-of-range values are clamped into
#     the first / last bucket, never dropped.
#
# - total(values) -> number                 (empty -> 0)
# - ratio(numerator, denominator) -> float | None   (None on zero denominator)
# - mean(values) -> float | None
# - split_pairs(pairs, label_key, count_key) -> {label_key: [...], count_key: [...]}
# - cumulative_series(freq_map) -> [{"x": key, "y": running_total}, ...]
#
# ==============================================

import math
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

FrequencyMap = Dict[Hashable, int]
Pair = Tuple[Hashable, int]


def count_by(items: Iterable[Any], key_fn: Optional[Callable[[Any], Hashable]] = None) -> FrequencyMap:
    counts: FrequencyMap = {}
    for item in items:
        key = key_fn(item) if key_fn else item
        counts[key] = counts.get(key, 0) + 1
    return counts


def sorted_by_count_desc(freq_map: FrequencyMap) -> List[Pair]:
    # sorted() is stable, so equal counts stay in first-seen order
    return sorted(freq_map.items(), key=lambda pair: pair[1], reverse=True)


def sorted_by_key_asc(freq_map: FrequencyMap) -> List[Pair]:
    return sorted(freq_map.items(), key=lambda pair: pair[0])


def bucket_count(low: float, high: float, step: float) -> int:
    if step <= 0 or high <= low:
        raise ValueError(f"Invalid bucket range [{low}, {high}] with step {step}")
    return int(round((high - low) / step))


def bucket_index(value: float, low: float, high: float, step: float) -> int:
    """
    Bucket of `value`: floor((value - low) / step), clamped to [0, count - 1].

    The quotient is rounded to 9 places first so that e.g. 0.3 / 0.1
    lands in bucket 3 rather than 2.
    """
    last = bucket_count(low, high, step) - 1
    index = math.floor(round((value - low) / step, 9))
    return min(max(index, 0), last)


def bucket_labels(low: float, high: float, step: float) -> List[str]:
    bounds = [low + i * step for i in range(bucket_count(low, high, step) + 1)]
    return [f"{_format_bound(lower)} ~ {_format_bound(upper)}" for lower, upper in zip(bounds, bounds[1:])]


def bucketize(values: Iterable[float], low: float, high: float, step: float) -> Dict[str, List[Any]]:
    counts = [0] * bucket_count(low, high, step)
    for value in values:
        counts[bucket_index(value, low, high, step)] += 1
    return {"labels": bucket_labels(low, high, step), "counts": counts}


def total(values: Iterable[float]) -> float:
    return sum(values, 0)


def ratio(numerator: float, denominator: float) -> Optional[float]:
    """numerator / denominator, or None when the denominator is zero."""
    if denominator == 0:
        return None
    return numerator / denominator


def mean(values: Sequence[float]) -> Optional[float]:
    return ratio(total(values), len(values))


def split_pairs(pairs: Iterable[Pair], label_key: str = "labels", count_key: str = "data") -> Dict[str, List[Any]]:
    """[(label, count), ...] -> {label_key: [labels...], count_key: [counts...]}"""
    labels: List[Any] = []
    counts: List[int] = []
    for label, count in pairs:
        labels.append(label)
        counts.append(count)
    return {label_key: labels, count_key: counts}


def cumulative_series(freq_map: FrequencyMap) -> List[Dict[str, Any]]:
    series = []
    running = 0
    for key, count in sorted_by_key_asc(freq_map):
        running += count
        series.append({"x": key, "y": running})
    return series


def _format_bound(value: float) -> str:
    # -3.0 -> "-3", 0.30000000000000004 -> "0.3"
    return f"{round(value, 9) + 0.0:g}"
