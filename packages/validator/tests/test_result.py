"""Tests for ValidationResult, EvaluationContext and the exception types."""

import pytest

from dataknobs_common import (
    ConfigurationError as BaseConfigurationError,
    DataknobsError,
    ValidationError as BaseValidationError,
)

from dataknobs_validator import (
    ConfigurationError,
    EvaluationContext,
    ValidationError,
    ValidationResult,
    ValidatorError,
)


class TestValidationResult:
    """Test ValidationResult functionality."""

    def test_ok_result(self):
        """Test creating a successful result."""
        result = ValidationResult.ok()
        assert result.valid is True
        assert result.message is None
        assert result.error is None
        assert bool(result) is True
        result.raise_for_error()

    def test_failed_result(self):
        """Test creating a failed result."""
        result = ValidationResult.failed("Error 1, Error 2")
        assert result.valid is False
        assert result.message == "Error 1, Error 2"
        assert bool(result) is False

    def test_error_carries_message(self):
        """Test that the error holds exactly the aggregated message."""
        error = ValidationResult.failed("bad").error
        assert isinstance(error, ValidationError)
        assert str(error) == "bad"
        assert error.context == {}

    def test_raise_for_error(self):
        """Test raising the aggregated error."""
        with pytest.raises(ValidationError, match="^bad input$"):
            ValidationResult.failed("bad input").raise_for_error()

    def test_results_are_immutable(self):
        """Test that results cannot be modified."""
        result = ValidationResult.failed("x")
        with pytest.raises(AttributeError):
            result.message = "y"


class TestEvaluationContext:
    """Test message collection during one evaluation."""

    def test_messages_kept_in_order(self):
        """Test messages are appended in order."""
        context = EvaluationContext("entity")
        assert not context.has_messages
        context.add_message("first")
        context.add_message("second")
        assert context.has_messages
        assert context.messages == ["first", "second"]

    def test_render_with_prefix(self):
        """Test joining messages behind a prefix."""
        context = EvaluationContext("entity", ["a", "b"])
        assert context.render() == "a, b"
        assert context.render("Bad: ") == "Bad: a, b"

    def test_contexts_do_not_share_messages(self):
        """Test that each context starts with its own list."""
        first = EvaluationContext(1)
        second = EvaluationContext(2)
        first.add_message("only first")
        assert second.messages == []


class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        """Test that package errors share one base."""
        assert issubclass(ValidationError, ValidatorError)
        assert issubclass(ConfigurationError, ValidatorError)
        assert issubclass(ValidatorError, Exception)

    def test_dataknobs_ancestry(self):
        """Test that package errors are dataknobs common errors."""
        assert issubclass(ValidatorError, DataknobsError)
        assert issubclass(ValidationError, BaseValidationError)
        assert issubclass(ConfigurationError, BaseConfigurationError)

        with pytest.raises(BaseValidationError):
            ValidationResult.failed("bad").raise_for_error()
        with pytest.raises(DataknobsError):
            raise ConfigurationError("bad", context={"key": "value"})

    def test_context_and_details(self):
        """Test context dictionaries and the details alias."""
        error = ConfigurationError("bad", context={"key": "value"})
        assert error.context == {"key": "value"}
        assert error.details is error.context

    def test_details_takes_precedence(self):
        """Test that details overrides context."""
        error = ValidatorError("x", context={"k": 1}, details={"k": 2})
        assert error.context == {"k": 2}

    def test_validation_error_message_attribute(self):
        """Test the message attribute of ValidationError."""
        error = ValidationError("aggregated", context={"entity": "Person"})
        assert error.message == "aggregated"
        assert error.context == {"entity": "Person"}
