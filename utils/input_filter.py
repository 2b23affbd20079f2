# -*- coding: utf-8 -*-
"""
utils/input_filter.py
=======================
Gate applied to every candidate password before it reaches the evaluator.

A candidate is rejected when it is longer than MAX_PASSWORD_INPUT_LENGTH
characters or contains anything outside ASCII (code points 0-127).
Rejected input is never truncated or transliterated; the previous value
simply stays in place.
"""
import logging

from constants import MAX_ASCII_CODE_POINT, MAX_PASSWORD_INPUT_LENGTH

logger = logging.getLogger(__name__)


def is_ascii_only(text: str) -> bool:
    return all(ord(c) <= MAX_ASCII_CODE_POINT for c in text)


def accept_password_input(candidate: str) -> bool:
    """Return True if ``candidate`` may replace the current password."""
    if len(candidate) > MAX_PASSWORD_INPUT_LENGTH:
        return False
    return is_ascii_only(candidate)


class PasswordInputGate:
    """Holds the last accepted password and filters new candidates."""

    def __init__(self, initial: str = ""):
        self._value = initial if accept_password_input(initial) else ""

    @property
    def value(self) -> str:
        return self._value

    def offer(self, candidate: str) -> bool:
        """
        Adopt ``candidate`` if it passes the filter.

        Returns False (and keeps the previous value) on rejection.
        """
        if not accept_password_input(candidate):
            logger.debug(
                f"Password input rejected (length={len(candidate)}, "
                f"ascii={is_ascii_only(candidate)})"
            )
            return False
        self._value = candidate
        return True
