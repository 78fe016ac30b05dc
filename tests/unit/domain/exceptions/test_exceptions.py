"""Tests for domain/exceptions."""

import pytest

from staticize.domain.exceptions import (
    ConfigurationError,
    ParsingError,
    StaticizeError,
    SyntaxTreeError,
)


class TestHierarchy:
    """All errors derive from StaticizeError."""

    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, StaticizeError)

    def test_parsing_errors(self) -> None:
        assert issubclass(ParsingError, StaticizeError)
        assert issubclass(SyntaxTreeError, ParsingError)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_message(self) -> None:
        error = ConfigurationError("fully_qualified_class_name", "must not be empty")
        assert str(error) == "Invalid option 'fully_qualified_class_name': must not be empty"
        assert error.option == "fully_qualified_class_name"
        assert error.reason == "must not be empty"

    def test_empty_option_raises(self) -> None:
        with pytest.raises(ValueError, match="option must not be empty"):
            ConfigurationError("", "reason")

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            ConfigurationError("option", "")


class TestParsingError:
    """Tests for ParsingError and SyntaxTreeError."""

    def test_message(self) -> None:
        error = ParsingError("A.java", "file not found")
        assert str(error) == "Failed to parse A.java: file not found"
        assert error.source == "A.java"

    def test_none_source_raises(self) -> None:
        with pytest.raises(TypeError, match="source must not be None"):
            ParsingError(None, "reason")  # type: ignore[arg-type]

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must be non-empty string"):
            ParsingError("A.java", "")

    def test_syntax_error_position(self) -> None:
        error = SyntaxTreeError("A.java", 3, 7, "syntax error")
        assert str(error) == "Failed to parse A.java: syntax error at 3:7"
        assert error.line == 3
        assert error.column == 7

    def test_syntax_error_invalid_line(self) -> None:
        with pytest.raises(ValueError, match="line must be >= 1"):
            SyntaxTreeError("A.java", 0, 0, "syntax error")

    def test_syntax_error_invalid_column(self) -> None:
        with pytest.raises(ValueError, match="column must be >= 0"):
            SyntaxTreeError("A.java", 1, -1, "syntax error")
