"""Custom exceptions for dev-start"""

from typing import Optional


class DevStartError(Exception):
    """Base exception for all dev-start errors."""
    pass


class NotARepositoryError(DevStartError):
    """Exception raised when the project is not inside a Git working tree."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not a git repository: {path}")


class RepositoryQueryError(DevStartError):
    """Exception raised when a Git query fails."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Git query '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
