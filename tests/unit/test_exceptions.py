"""Tests for custom exception classes."""

from pathlib import Path

import pytest

from collabrank.exceptions import (
    CollabRankError,
    ConfigurationError,
    GraphLoadError,
    RenderError,
    ValidationError,
    check_config_keys,
)


class TestCollabRankError:
    """Test base error formatting."""

    def test_message_only(self):
        """Test a bare message."""
        error = CollabRankError("Something broke")
        assert str(error) == "Error: Something broke"
        assert error.hint is None
        assert error.details is None

    def test_full_format(self):
        """Test message, hint and details all render."""
        error = CollabRankError(
            message="Bad input",
            hint="Try again",
            details={"field": "top_k", "value": -1},
        )
        text = str(error)
        assert text.startswith("Error: Bad input")
        assert "\nHint: Try again" in text
        assert "\nDetails:\n  field: top_k\n  value: -1" in text

    @pytest.mark.parametrize(
        "error_class", [ConfigurationError, ValidationError, RenderError]
    )
    def test_subclasses(self, error_class):
        """Test subclasses share the base formatting."""
        error = error_class("oops")
        assert isinstance(error, CollabRankError)
        assert str(error) == "Error: oops"


class TestGraphLoadError:
    """Test GraphLoadError."""

    def test_is_os_error(self):
        """Test it can be caught as an OSError."""
        with pytest.raises(OSError):
            raise GraphLoadError(Path("/data/missing.txt"))

    def test_default_reason(self):
        """Test the message without a reason."""
        error = GraphLoadError(Path("/data/missing.txt"))
        assert error.message == "Failed to load graph: cannot read file"
        assert error.details == {"path": "/data/missing.txt"}
        assert error.original_error is None

    def test_with_original_error(self):
        """Test details include the wrapped OS error."""
        original = PermissionError(13, "Permission denied")
        error = GraphLoadError(
            "/data/locked.txt", reason="Permission denied", original_error=original
        )
        assert error.path == "/data/locked.txt"
        assert error.original_error is original
        assert "Failed to load graph: Permission denied" in str(error)
        assert error.details["original_error"].startswith("PermissionError")
        assert "readable" in error.hint


class TestCheckConfigKeys:
    """Test configuration key checks."""

    def test_valid_keys_pass(self):
        """Test that correct keys raise nothing."""
        check_config_keys({"top_k": 5, "eigenvector_tolerance": 1e-4})

    @pytest.mark.parametrize(
        ("wrong", "correct"),
        [
            ("top", "top_k"),
            ("k", "top_k"),
            ("max_iterations", "eigenvector_max_iterations"),
            ("tolerance", "eigenvector_tolerance"),
            ("output", "output_dir"),
            ("parallel", "parallel_metrics"),
        ],
    )
    def test_common_mistakes(self, wrong, correct):
        """Test each misspelled key points at the right one."""
        with pytest.raises(ConfigurationError) as exc_info:
            check_config_keys({wrong: 1})

        error = exc_info.value
        assert f"'{wrong}'" in error.message
        assert error.hint == f"Use '{correct}' instead of '{wrong}'"
        assert error.details["correct_key"] == correct
