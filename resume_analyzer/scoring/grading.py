from __future__ import annotations

import math
from typing import Iterable

from resume_analyzer.schemas.analysis import SubScore

from .subscores import clamp_score

GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, "A+"),
    (85, "A"),
    (80, "A-"),
    (75, "B+"),
    (70, "B"),
    (65, "B-"),
    (60, "C+"),
    (55, "C"),
    (50, "C-"),
    (45, "D+"),
    (40, "D"),
)
FAILING_GRADE = "F"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def overall_score(sub_scores: Iterable[SubScore]) -> int:
    values = [score.value for score in sub_scores]
    if not values:
        return 0
    return clamp_score(round_half_up(sum(values) / len(values)))


def grade_for(score: int) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE
