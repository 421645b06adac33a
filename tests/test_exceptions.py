"""Tests for the redactcheck exception hierarchy."""

from __future__ import annotations

import pytest

from redactcheck.core.exceptions import (
    ConfigError,
    EmptyTargetError,
    FileReadError,
    OutputError,
    RedactCheckError,
    RuleCompilationError,
    ScanError,
    TargetNotFoundError,
    UsageError,
)


class TestRedactCheckError:
    """Tests for the base exception."""

    def test_message_only(self) -> None:
        """Test that str() is the message when there is no context."""
        error = RedactCheckError("something failed")
        assert str(error) == "something failed"
        assert error.context == {}

    def test_context_is_appended(self) -> None:
        """Test that str() includes the context."""
        error = RedactCheckError("something failed", context={"path": "/tmp/x"})
        assert str(error) == "something failed (path='/tmp/x')"


class TestSubclasses:
    """Tests for the specific exception types."""

    @pytest.mark.parametrize(
        "error",
        [
            UsageError("bad"),
            TargetNotFoundError("bad"),
            EmptyTargetError("bad"),
            FileReadError("bad"),
            RuleCompilationError("bad"),
            ConfigError("bad"),
            OutputError("bad"),
            ScanError("bad"),
        ],
    )
    def test_all_inherit_from_base(self, error: RedactCheckError) -> None:
        """Test that every error can be caught as RedactCheckError."""
        assert isinstance(error, RedactCheckError)

    def test_empty_target_is_target_error(self) -> None:
        """Test that an empty target is a target-resolution failure."""
        assert isinstance(EmptyTargetError("empty"), TargetNotFoundError)

    def test_usage_error_records_option(self) -> None:
        """Test that the misused option is kept and added to the context."""
        error = UsageError("Missing argument", option="TARGET")
        assert error.option == "TARGET"
        assert error.context["option"] == "TARGET"

    def test_file_read_error_permission_flag(self) -> None:
        """Test that read errors record whether access was denied."""
        error = FileReadError("denied", path="a.txt", permission_denied=True)
        assert error.permission_denied is True
        assert error.path == "a.txt"
        assert FileReadError("io").permission_denied is False

    def test_rule_compilation_error_label(self) -> None:
        """Test that the failing rule label is recorded."""
        error = RuleCompilationError("bad regex", label="PASSWORD")
        assert error.label == "PASSWORD"
        assert "label='PASSWORD'" in str(error)

    def test_config_error_key(self) -> None:
        """Test that the offending config key is recorded."""
        assert ConfigError("bad", config_key="workers").config_key == "workers"

    def test_output_error_path(self) -> None:
        """Test that the output path is recorded."""
        assert OutputError("bad", output_path="r.txt").output_path == "r.txt"
