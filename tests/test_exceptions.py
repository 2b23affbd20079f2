# -*- coding: utf-8 -*-
"""
tests/test_exceptions.py
==========================
Tests for the PASSMETER hierarchical exception system.
All pure Python — no Qt needed.
"""
import pytest
from exceptions import (
    PassmeterError,
    ValidationError, InvalidValueError,
    ConfigurationError,
)


class TestInheritance:

    def test_all_inherit_from_passmeter_error(self):
        for err_cls in (ValidationError, InvalidValueError, ConfigurationError):
            assert issubclass(err_cls, PassmeterError), f"{err_cls} must inherit PassmeterError"

    def test_validation_chain(self):
        assert issubclass(InvalidValueError, ValidationError)

    def test_catch_all(self):
        with pytest.raises(PassmeterError):
            raise InvalidValueError("min_length", -1)


class TestPassmeterError:

    def test_message_stored(self):
        e = PassmeterError("test message")
        assert e.message == "test message"
        assert str(e) == "test message"

    def test_code_stored(self):
        assert PassmeterError("msg", code="CFG_001").code == "CFG_001"

    def test_str_with_detail(self):
        s = str(PassmeterError("main message", detail="detail info"))
        assert "main message" in s
        assert "detail info" in s


class TestInvalidValueError:

    def test_field_value_reason(self):
        e = InvalidValueError("min_length", -1, "must not be negative")
        assert e.field == "min_length"
        assert e.value == -1
        assert e.reason == "must not be negative"
        assert "min_length" in str(e)
        assert "-1" in str(e)

    def test_without_value(self):
        e = InvalidValueError("min_length")
        assert str(e) == "Invalid value for field 'min_length'"
