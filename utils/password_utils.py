# -*- coding: utf-8 -*-
"""
utils/password_utils.py
=========================
Pure password strength evaluation — zero Qt dependency.

Seven independent rules are checked, every one of them on every call:

    length            len(password) >= min_length
    uppercase         at least one A-Z
    lowercase         at least one a-z
    numbers           at least one 0-9
    specialChars      at least one of  ! @ # $ % ^ & * ( ) , . ? " : { } | < >
    noRepeatedChars   no character repeated 3+ times in a row (case-sensitive)
    noCommonPatterns  none of COMMON_PATTERNS inside the lowercased password

score = number of passing rules (0-7), whatever the configuration says.
The configuration only decides which failures produce feedback text.

    score >= 6  → Strong
    score >= 4  → Medium
    otherwise   → Weak
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from constants import (
    COMMON_PATTERNS,
    DEFAULT_MIN_LENGTH,
    MAX_SCORE,
    MEDIUM_THRESHOLD,
    REPEAT_RUN_LENGTH,
    SPECIAL_CHARACTERS,
    STRONG_THRESHOLD,
    CriterionKeys as CK,
    FeedbackMessages,
)
from exceptions import InvalidValueError

logger = logging.getLogger(__name__)

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_REPEAT = re.compile(r"(.)\1{%d,}" % (REPEAT_RUN_LENGTH - 1))


class Criterion(str, Enum):
    LENGTH = CK.LENGTH
    UPPERCASE = CK.UPPERCASE
    LOWERCASE = CK.LOWERCASE
    NUMBERS = CK.NUMBERS
    SPECIAL_CHARS = CK.SPECIAL_CHARS
    NO_REPEATED_CHARS = CK.NO_REPEATED_CHARS
    NO_COMMON_PATTERNS = CK.NO_COMMON_PATTERNS


class StrengthLevel(str, Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"


# camelCase option name → StrengthConfig field
_CONFIG_ALIASES = {
    "minLength": "min_length",
    "requireUppercase": "require_uppercase",
    "requireLowercase": "require_lowercase",
    "requireNumbers": "require_numbers",
    "requireSpecialChars": "require_special_chars",
    "preventRepeatedChars": "prevent_repeated_chars",
    "preventCommonPatterns": "prevent_common_patterns",
}


@dataclass(frozen=True)
class StrengthConfig:
    min_length: int = DEFAULT_MIN_LENGTH
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = True
    prevent_repeated_chars: bool = True
    prevent_common_patterns: bool = True

    def __post_init__(self):
        # bool is an int subclass; True is not a length
        if isinstance(self.min_length, bool) or not isinstance(self.min_length, int):
            raise InvalidValueError("min_length", self.min_length, "must be an integer")
        if self.min_length < 0:
            raise InvalidValueError("min_length", self.min_length, "must not be negative")
        for f in fields(self):
            if f.name == "min_length":
                continue
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise InvalidValueError(f.name, value, "must be a boolean")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "StrengthConfig":
        """
        Build a config from a dict of options.

        Keys may be field names (``min_length``) or the camelCase option
        names (``minLength``). Missing keys keep their defaults.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            name = _CONFIG_ALIASES.get(key, key)
            if name not in known:
                raise InvalidValueError(key, value, "unknown option")
            kwargs[name] = value
        return cls(**kwargs)

    def is_enforced(self, criterion: Criterion) -> bool:
        """Whether a failure of ``criterion`` produces feedback."""
        return {
            Criterion.LENGTH: True,
            Criterion.UPPERCASE: self.require_uppercase,
            Criterion.LOWERCASE: self.require_lowercase,
            Criterion.NUMBERS: self.require_numbers,
            Criterion.SPECIAL_CHARS: self.require_special_chars,
            Criterion.NO_REPEATED_CHARS: self.prevent_repeated_chars,
            Criterion.NO_COMMON_PATTERNS: self.prevent_common_patterns,
        }[Criterion(criterion)]


_FIELD_BY_CRITERION = {
    Criterion.LENGTH: "length",
    Criterion.UPPERCASE: "uppercase",
    Criterion.LOWERCASE: "lowercase",
    Criterion.NUMBERS: "numbers",
    Criterion.SPECIAL_CHARS: "special_chars",
    Criterion.NO_REPEATED_CHARS: "no_repeated_chars",
    Criterion.NO_COMMON_PATTERNS: "no_common_patterns",
}


@dataclass(frozen=True)
class CriteriaResult:
    length: bool
    uppercase: bool
    lowercase: bool
    numbers: bool
    special_chars: bool
    no_repeated_chars: bool
    no_common_patterns: bool

    def get(self, criterion) -> bool:
        return getattr(self, _FIELD_BY_CRITERION[Criterion(criterion)])

    def items(self) -> Iterator[Tuple[Criterion, bool]]:
        """(criterion, passed) pairs in the fixed display order."""
        for criterion in Criterion:
            yield criterion, self.get(criterion)

    def passed_count(self) -> int:
        return sum(1 for _, passed in self.items() if passed)

    def to_dict(self) -> Dict[str, bool]:
        return {criterion.value: passed for criterion, passed in self.items()}


@dataclass(frozen=True)
class StrengthResult:
    level: StrengthLevel
    score: int
    criteria: CriteriaResult
    feedback: Tuple[str, ...] = ()
    max_score: int = MAX_SCORE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level.value,
            "score": self.score,
            "maxScore": self.max_score,
            "criteria": self.criteria.to_dict(),
            "feedback": list(self.feedback),
        }


# ─── rule checks ─────────────────────────────────────────────────────────────

def has_special_char(password: str) -> bool:
    return any(c in SPECIAL_CHARACTERS for c in password)


def has_repeated_run(password: str) -> bool:
    """True if any character appears REPEAT_RUN_LENGTH+ times in a row."""
    return _REPEAT.search(password) is not None


def contains_common_pattern(password: str) -> bool:
    lowered = password.lower()
    return any(pattern in lowered for pattern in COMMON_PATTERNS)


def check_criteria(password: str, min_length: int = DEFAULT_MIN_LENGTH) -> CriteriaResult:
    return CriteriaResult(
        length=len(password) >= min_length,
        uppercase=_UPPER.search(password) is not None,
        lowercase=_LOWER.search(password) is not None,
        numbers=_DIGIT.search(password) is not None,
        special_chars=has_special_char(password),
        no_repeated_chars=not has_repeated_run(password),
        no_common_patterns=not contains_common_pattern(password),
    )


def level_for_score(score: int) -> StrengthLevel:
    if score >= STRONG_THRESHOLD:
        return StrengthLevel.STRONG
    if score >= MEDIUM_THRESHOLD:
        return StrengthLevel.MEDIUM
    return StrengthLevel.WEAK


def feedback_for(criteria: CriteriaResult, config: StrengthConfig) -> Tuple[str, ...]:
    messages = {
        Criterion.LENGTH: FeedbackMessages.LENGTH_TEMPLATE.format(min_length=config.min_length),
        Criterion.UPPERCASE: FeedbackMessages.UPPERCASE,
        Criterion.LOWERCASE: FeedbackMessages.LOWERCASE,
        Criterion.NUMBERS: FeedbackMessages.NUMBERS,
        Criterion.SPECIAL_CHARS: FeedbackMessages.SPECIAL_CHARS,
        Criterion.NO_REPEATED_CHARS: FeedbackMessages.NO_REPEATED_CHARS,
        Criterion.NO_COMMON_PATTERNS: FeedbackMessages.NO_COMMON_PATTERNS,
    }
    return tuple(
        messages[criterion]
        for criterion, passed in criteria.items()
        if not passed and config.is_enforced(criterion)
    )


def evaluate_password(password: str, config: Optional[StrengthConfig] = None) -> StrengthResult:
    """
    Score ``password`` against all seven rules.

    Never raises for a str input. The placeholder prompt for empty feedback
    is left to the view.
    """
    config = config or StrengthConfig()
    criteria = check_criteria(password, config.min_length)
    score = criteria.passed_count()
    level = level_for_score(score)

    logger.debug(f"Password evaluated: score={score}/{MAX_SCORE} level={level.value}")

    return StrengthResult(
        level=level,
        score=score,
        criteria=criteria,
        feedback=feedback_for(criteria, config),
    )
