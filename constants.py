"""
PASSMETER Constants - Single Source of Truth
============================================

Static fact tables used by the evaluator, the input filter and the widget.
Everything here is immutable (tuples, frozensets, plain strings); nothing is
modified at runtime.

Usage:
    from constants import CriterionLabels, FeedbackMessages, COMMON_PATTERNS
"""

# ==================== Input limits ====================

MAX_PASSWORD_INPUT_LENGTH = 25
MAX_ASCII_CODE_POINT = 127

# ==================== Scoring ====================

MAX_SCORE = 7
STRONG_THRESHOLD = 6
MEDIUM_THRESHOLD = 4
DEFAULT_MIN_LENGTH = 8

# Substrings checked against the lowercased password
COMMON_PATTERNS = (
    "123456",
    "password",
    "qwerty",
    "abc123",
    "abcdefghijklmnopqrstuvwxyz",
    "123456789",
)

SPECIAL_CHARACTERS = frozenset('!@#$%^&*(),.?":{}|<>')

# A run of this many identical characters fails the repetition rule
REPEAT_RUN_LENGTH = 3


class CriterionKeys:
    """
    Canonical criterion names, in display/feedback order.

    Usage:
        from constants import CriterionKeys as CK
        CK.ORDER  # ("length", "uppercase", ...)
    """

    LENGTH = "length"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SPECIAL_CHARS = "specialChars"
    NO_REPEATED_CHARS = "noRepeatedChars"
    NO_COMMON_PATTERNS = "noCommonPatterns"

    ORDER = (
        LENGTH,
        UPPERCASE,
        LOWERCASE,
        NUMBERS,
        SPECIAL_CHARS,
        NO_REPEATED_CHARS,
        NO_COMMON_PATTERNS,
    )


class CriterionLabels:
    """Checklist labels shown next to each indicator."""

    LENGTH_TEMPLATE = "Minimum Length ({min_length})"
    UPPERCASE = "Uppercase Letters"
    LOWERCASE = "Lowercase Letters"
    NUMBERS = "Numbers"
    SPECIAL_CHARS = "Special Characters"
    NO_REPEATED_CHARS = "No repeated characters"
    NO_COMMON_PATTERNS = "No common patterns"


class FeedbackMessages:
    """Hint strings for unmet, enabled criteria."""

    LENGTH_TEMPLATE = "Minimum {min_length} characters"
    UPPERCASE = "Add uppercase letters"
    LOWERCASE = "Add lowercase letters"
    NUMBERS = "Add numbers"
    SPECIAL_CHARS = "Add special characters"
    NO_REPEATED_CHARS = "Avoid repeated characters"
    NO_COMMON_PATTERNS = "Avoid common patterns"

    # Rendered by the view when the evaluator returns no feedback
    PLACEHOLDER = "Please enter a password"


class LevelColors:
    """Strength label colors (hex)."""

    WEAK = "#EF4444"
    MEDIUM = "#F59E0B"
    STRONG = "#10B981"
    UNKNOWN = "#94A3B8"

    INDICATOR_ACTIVE = "#10B981"
    INDICATOR_INACTIVE = "#CCCCCC"


class SettingKeys:
    """Environment / JSON configuration keys."""

    MIN_LENGTH = "PASSMETER_MIN_LENGTH"
    REQUIRE_UPPERCASE = "PASSMETER_REQUIRE_UPPERCASE"
    REQUIRE_LOWERCASE = "PASSMETER_REQUIRE_LOWERCASE"
    REQUIRE_NUMBERS = "PASSMETER_REQUIRE_NUMBERS"
    REQUIRE_SPECIAL_CHARS = "PASSMETER_REQUIRE_SPECIAL_CHARS"
    PREVENT_REPEATED_CHARS = "PASSMETER_PREVENT_REPEATED_CHARS"
    PREVENT_COMMON_PATTERNS = "PASSMETER_PREVENT_COMMON_PATTERNS"
    DATA_DIR = "PASSMETER_DATA_DIR"
    LOG_LEVEL = "LOG_LEVEL"
