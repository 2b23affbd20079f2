"""
exceptions.py
=============
PASSMETER — Hierarchical Exception System

All application exceptions inherit from PassmeterError so callers
can catch the full hierarchy with a single except clause when needed.

The evaluator and the input filter never raise: a weak password or a
rejected keystroke is a result, not an error. Exceptions only come from
building or loading configuration.

Structure
---------
PassmeterError
├── ValidationError
│   └── InvalidValueError
└── ConfigurationError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class PassmeterError(Exception):
    """Base exception for all PASSMETER errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "CFG_INVALID"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(PassmeterError):
    """Raised when caller-provided options fail validation."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class InvalidValueError(ValidationError):
    """Raised when an option value is out of range or has the wrong type."""

    def __init__(self, field: str, value=None, reason: str = "", **kwargs):
        msg = f"Invalid value for field '{field}'"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, field=field, **kwargs)
        self.value = value
        self.reason = reason


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(PassmeterError):
    """Raised when the application configuration is invalid or incomplete."""
