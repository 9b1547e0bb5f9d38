"""Custom exceptions for git diff handling."""

from typing import Any


class GitDiffError(Exception):
    """Base exception for git diff operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class GitDiffOptionError(GitDiffError):
    """Raised when a patch is built from options that cannot be understood."""
