# ABOUTME: Unit tests for the flyweight exception hierarchy
# ABOUTME: Tests message, code, and details handling plus InvalidKeyError specifics

import pytest

from flyweight.exceptions import (
    FlyweightException,
    ValidationException,
    InvalidKeyError,
    ConfigurationException,
)


class TestFlyweightException:
    """Test cases for FlyweightException base class."""

    @pytest.mark.unit
    def test_with_message_only(self):
        exception = FlyweightException("Test error message")

        assert exception.message == "Test error message"
        assert exception.code is None
        assert exception.details == {}
        assert str(exception) == "Test error message"

    @pytest.mark.unit
    def test_with_all_parameters(self):
        details = {"key": "value", "number": 42}
        exception = FlyweightException("Test error message", "TEST_ERROR", details)

        assert exception.code == "TEST_ERROR"
        assert exception.details == details

    @pytest.mark.unit
    def test_details_are_copied(self):
        """Test that mutating the original dict does not affect the exception."""
        details = {"key": "value"}
        exception = FlyweightException("msg", details=details)

        details["key"] = "changed"

        assert exception.details == {"key": "value"}

    @pytest.mark.unit
    def test_can_be_raised_and_caught(self):
        with pytest.raises(FlyweightException) as exc_info:
            raise FlyweightException("boom", "BOOM")

        assert exc_info.value.code == "BOOM"


class TestExceptionHierarchy:
    """Test inheritance between exception classes."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "exception_class",
        [ValidationException, InvalidKeyError, ConfigurationException],
    )
    def test_subclasses_of_base(self, exception_class):
        assert issubclass(exception_class, FlyweightException)
        assert issubclass(exception_class, Exception)

    @pytest.mark.unit
    def test_invalid_key_is_validation_error(self):
        assert issubclass(InvalidKeyError, ValidationException)
        assert not issubclass(ConfigurationException, ValidationException)


class TestInvalidKeyError:
    """Test cases for InvalidKeyError."""

    @pytest.mark.unit
    def test_defaults(self):
        exception = InvalidKeyError("Key must be a non-empty string", key="")

        assert exception.code == "INVALID_KEY"
        assert exception.key == ""
        assert exception.details == {"key": "''"}
        assert str(exception) == "Key must be a non-empty string"

    @pytest.mark.unit
    def test_none_key_recorded(self):
        exception = InvalidKeyError("Key must not be None")

        assert exception.key is None
        assert exception.details["key"] == "None"

    @pytest.mark.unit
    def test_extra_details_merged(self):
        exception = InvalidKeyError("too long", key="abcd", code="KEY_TOO_LONG", details={"max_key_length": 3})

        assert exception.code == "KEY_TOO_LONG"
        assert exception.details == {"key": "'abcd'", "max_key_length": 3}
