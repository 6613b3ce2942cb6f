"""Custom exception hierarchy for collabrank with helpful error messages."""

from __future__ import annotations

from typing import Any


class CollabRankError(Exception):
    """Base exception with helpful formatting for all collabrank errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class GraphLoadError(CollabRankError, OSError):
    """Dataset file is missing or unreadable.

    Also an ``OSError`` so callers treating this as a plain I/O failure
    keep working.
    """

    def __init__(
        self,
        path: Any,
        reason: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize load error.

        Args:
            path: Path of the dataset that could not be read
            reason: Short description of the failure
            original_error: The underlying OS error, if any
        """
        self.path = path
        self.original_error = original_error
        details: dict[str, Any] = {"path": str(path)}
        if original_error is not None:
            details["original_error"] = (
                f"{type(original_error).__name__}: {original_error}"
            )
        super().__init__(
            message=f"Failed to load graph: {reason or 'cannot read file'}",
            hint="Check that the dataset path exists and is readable",
            details=details,
        )


class ConfigurationError(CollabRankError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class ValidationError(CollabRankError):
    """Input validation errors with details about what was expected."""

    pass


class RenderError(CollabRankError):
    """Errors writing the graph image to disk."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "top": "top_k",
        "k": "top_k",
        "max_iterations": "eigenvector_max_iterations",
        "tolerance": "eigenvector_tolerance",
        "output": "output_dir",
        "parallel": "parallel_metrics",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
