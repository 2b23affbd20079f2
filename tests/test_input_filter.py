# -*- coding: utf-8 -*-
"""
tests/test_input_filter.py
============================
Tests for utils.input_filter — the gate in front of the evaluator.
"""
import pytest
from utils.input_filter import PasswordInputGate, accept_password_input, is_ascii_only


class TestAcceptPasswordInput:

    def test_max_length_accepted(self):
        assert accept_password_input("a" * 25) is True

    def test_over_max_length_rejected(self):
        assert accept_password_input("a" * 26) is False

    def test_empty_accepted(self):
        assert accept_password_input("") is True

    @pytest.mark.parametrize("candidate", [
        "P@ss🚀Wørd123",
        "café",
        "пароль",
        "\u00a0",
    ])
    def test_non_ascii_rejected(self, candidate):
        assert accept_password_input(candidate) is False

    def test_control_chars_are_ascii(self):
        assert is_ascii_only("\t\x7f") is True
        assert accept_password_input("tab\there") is True


class TestPasswordInputGate:

    def test_initial_value(self):
        assert PasswordInputGate().value == ""

    def test_accept_replaces_value(self):
        gate = PasswordInputGate()
        assert gate.offer("Hello1!") is True
        assert gate.value == "Hello1!"

    def test_rejection_keeps_previous(self):
        gate = PasswordInputGate()
        gate.offer("Valid#1")
        assert gate.offer("a" * 26) is False
        assert gate.value == "Valid#1"
        assert gate.offer("P@ss🚀Wørd123") is False
        assert gate.value == "Valid#1"

    def test_rejected_candidate_not_truncated(self):
        gate = PasswordInputGate("abc")
        gate.offer("x" * 30)
        assert gate.value == "abc"

    def test_invalid_initial_value_ignored(self):
        assert PasswordInputGate("é").value == ""
