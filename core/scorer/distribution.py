#!/usr/bin/env python3
"""
Score Distribution - Bucket stored auto scores for reporting.
"""

from typing import Any, Dict, Iterable, List, Optional

SCORE_BUCKETS = (
    ('0-20', 0, 20),
    ('21-40', 21, 40),
    ('41-60', 41, 60),
    ('61-80', 61, 80),
    ('81-100', 81, 100),
)


def score_distribution(auto_scores: Iterable[Optional[int]]) -> List[Dict[str, Any]]:
    """
    Count scores per bucket.

    Unscored applications (None or 0) are ignored and empty buckets are
    omitted, so an all-unscored input yields an empty list.
    """
    counts = {name: 0 for name, _, _ in SCORE_BUCKETS}

    for score in auto_scores:
        if not score or score <= 0:
            continue
        for name, low, high in SCORE_BUCKETS:
            if low <= score <= high:
                counts[name] += 1
                break

    return [
        {'name': name, 'min': low, 'max': high, 'count': counts[name]}
        for name, low, high in SCORE_BUCKETS
        if counts[name] > 0
    ]
