"""Error types for element-copier.

The export core never raises to its caller: malformed fragments and
unmappable values are recovered where they occur. The structured
``CopierError`` family is raised by the host-side adapters (snapshot
loading, configuration, CLI) and carries a recovery suggestion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Categories of host-side errors."""

    FILE_SYSTEM = "file_system"  # Missing or unreadable input files
    INPUT = "input"  # Invalid markup or style snapshot
    CONFIGURATION = "configuration"  # Invalid config file or values


class FallbackReason(Enum):
    """Why a declaration was emitted as an arbitrary-value token."""

    UNMAPPABLE_VALUE = "unmappable_value"
    UNMATCHED_COLOR = "unmatched_color"


class MalformedFragmentError(Exception):
    """Raised inside the pretty-printer when a fragment cannot be parsed."""


@dataclass
class CopierError(Exception):
    """Base class for structured errors with recovery suggestions.

    Attributes:
        category: Error category for grouping.
        message: Human-readable error message.
        suggestion: Optional actionable recovery suggestion.
        details: Optional additional details dict.
        exit_code: Exit code to use when this error terminates the CLI.
    """

    category: ErrorCategory
    message: str
    suggestion: str | None = None
    details: dict[str, Any] | None = field(default_factory=dict)
    exit_code: int = 1

    def __post_init__(self) -> None:
        """Initialize the exception with the message."""
        super().__init__(self.message)

    def format(self, use_color: bool = True) -> str:
        """Format the error for display.

        Args:
            use_color: Whether to include ANSI color codes.

        Returns:
            Formatted error string with suggestion if available.
        """
        red = "\033[91m" if use_color else ""
        cyan = "\033[96m" if use_color else ""
        dim = "\033[2m" if use_color else ""
        reset = "\033[0m" if use_color else ""

        lines = [f"{red}Error:{reset} {self.message}"]

        if self.suggestion:
            lines.append(f"{cyan}Suggestion:{reset} {self.suggestion}")

        if self.details:
            for key, value in self.details.items():
                lines.append(f"{dim}  {key}: {value}{reset}")

        return "\n".join(lines)

    def __str__(self) -> str:
        """Return the formatted error message."""
        return self.format(use_color=False)


class InputFileNotFoundError(CopierError):
    """Error when an input markup or snapshot file doesn't exist."""

    def __init__(self, path: str):
        super().__init__(
            category=ErrorCategory.FILE_SYSTEM,
            message=f"Input file not found: {path}",
            suggestion="Verify the path exists and you have read permissions",
            details={"path": path},
            exit_code=1,
        )


class InvalidSnapshotError(CopierError):
    """Error when a style snapshot or markup file cannot be interpreted."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(
            category=ErrorCategory.INPUT,
            message=message,
            suggestion=(
                "The style snapshot must be a JSON list with one "
                "{property: value} object per element, in document order"
            ),
            details={"source": source} if source else None,
            exit_code=2,
        )


class SnapshotMismatchError(CopierError):
    """Error when the snapshot does not cover every element of the markup."""

    def __init__(self, element_count: int, style_count: int):
        super().__init__(
            category=ErrorCategory.INPUT,
            message=(
                f"Style snapshot has {style_count} entries but the markup "
                f"contains {element_count} elements"
            ),
            suggestion="Capture the snapshot from the same subtree as the markup",
            details={"elements": element_count, "styles": style_count},
            exit_code=2,
        )


class ConfigurationError(CopierError):
    """Error in configuration file or settings."""

    def __init__(
        self,
        message: str,
        config_file: str | None = None,
        suggestion: str | None = None,
    ):
        default_suggestion = (
            "Check your configuration file syntax and required fields"
        )
        super().__init__(
            category=ErrorCategory.CONFIGURATION,
            message=message,
            suggestion=suggestion or default_suggestion,
            details={"config_file": config_file} if config_file else None,
            exit_code=1,
        )
