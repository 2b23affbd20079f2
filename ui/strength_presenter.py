# -*- coding: utf-8 -*-
"""
ui/strength_presenter.py
==========================
Turns a StrengthResult into the texts and colors the widget shows.
Pure functions, zero Qt dependency, so the view logic is testable headless.
"""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Union

from constants import CriterionLabels, FeedbackMessages, LevelColors
from utils.password_utils import Criterion, StrengthConfig, StrengthLevel, StrengthResult


class ChecklistRow(NamedTuple):
    key: str
    label: str
    active: bool


_STATIC_LABELS = {
    Criterion.UPPERCASE: CriterionLabels.UPPERCASE,
    Criterion.LOWERCASE: CriterionLabels.LOWERCASE,
    Criterion.NUMBERS: CriterionLabels.NUMBERS,
    Criterion.SPECIAL_CHARS: CriterionLabels.SPECIAL_CHARS,
    Criterion.NO_REPEATED_CHARS: CriterionLabels.NO_REPEATED_CHARS,
    Criterion.NO_COMMON_PATTERNS: CriterionLabels.NO_COMMON_PATTERNS,
}

_LEVEL_COLORS = {
    StrengthLevel.WEAK: LevelColors.WEAK,
    StrengthLevel.MEDIUM: LevelColors.MEDIUM,
    StrengthLevel.STRONG: LevelColors.STRONG,
}


def criterion_label(criterion: Criterion, config: Optional[StrengthConfig] = None) -> str:
    if Criterion(criterion) is Criterion.LENGTH:
        config = config or StrengthConfig()
        return CriterionLabels.LENGTH_TEMPLATE.format(min_length=config.min_length)
    return _STATIC_LABELS[Criterion(criterion)]


def feedback_lines(result: StrengthResult) -> List[str]:
    """Feedback strings, or the single placeholder prompt when there are none."""
    if not result.feedback:
        return [FeedbackMessages.PLACEHOLDER]
    return list(result.feedback)


def checklist_rows(result: StrengthResult, config: Optional[StrengthConfig] = None) -> List[ChecklistRow]:
    return [
        ChecklistRow(criterion.value, criterion_label(criterion, config), passed)
        for criterion, passed in result.criteria.items()
    ]


def level_color(level: Union[StrengthLevel, str]) -> str:
    try:
        return _LEVEL_COLORS[StrengthLevel(level)]
    except ValueError:
        return LevelColors.UNKNOWN


def strength_caption(result: StrengthResult) -> str:
    return f"Strength: {result.level.value}"
