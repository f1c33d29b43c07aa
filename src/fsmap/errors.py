"""Error handling utilities for fsmap.

Provides exception classes and validation helpers for the layout
engine, the directory provider and the file launcher.
"""

from pathlib import Path


class FsmapError(Exception):
    """Base exception for fsmap errors."""

    pass


class ProviderError(FsmapError):
    """Exception raised when a directory cannot be listed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        """Initialize provider error.

        Args:
            path: Directory that failed to list
            reason: Reason for failure
        """
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to list {path}: {reason}")


class AccessError(ProviderError):
    """The directory exists but cannot be read."""

    pass


class NotFoundError(ProviderError):
    """The directory vanished or never existed."""

    pass


class MeasurementError(FsmapError):
    """Exception raised when a label cannot be measured."""

    def __init__(self, label: str, reason: str) -> None:
        """Initialize measurement error.

        Args:
            label: Label that failed to measure
            reason: Reason for failure
        """
        self.label = label
        self.reason = reason
        super().__init__(f"Cannot measure {label!r}: {reason}")


class LayoutError(FsmapError):
    """Exception raised when the layout configuration is unusable."""

    def __init__(self, reason: str) -> None:
        """Initialize layout error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Layout calculation failed: {reason}")


class ValidationError(FsmapError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


class LaunchError(FsmapError):
    """Raised when a file cannot be opened with the OS default application."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize LaunchError.

        Args:
            path: File that could not be opened
            reason: Reason for failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open file {path}: {reason}")


def safe_path(path: Path | str) -> Path:
    """Convert to an absolute Path object.

    Args:
        path: Path to convert

    Returns:
        Absolute Path object

    Raises:
        ValidationError: If path is invalid
    """
    try:
        return Path(path).expanduser().resolve()
    except (OSError, RuntimeError, ValueError) as e:
        raise ValidationError("path", path, f"valid path: {e}") from e


def validate_directory(path: Path) -> None:
    """Validate that a path is a directory.

    Raises:
        ValidationError: If path is not a directory
    """
    if not path.is_dir():
        raise ValidationError("path", path, "directory")


def validate_range(value: int | float, min_val: int | float, max_val: int | float, name: str = "value") -> None:
    """Validate that a value is within range.

    Args:
        value: Value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value
        name: Name of the value for error messages

    Raises:
        ValidationError: If value is out of range
    """
    if not (min_val <= value <= max_val):
        raise ValidationError(name, value, f"value between {min_val} and {max_val}")
