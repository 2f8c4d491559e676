"""Custom exception hierarchy for cheatview.

Exception Hierarchy:
    CheatviewError (base)
    ├── LoadError - anything that stops a sheet or sheet list from loading
    │   ├── SheetReadError
    │   ├── SheetParseError
    │   └── DiscoveryError
    └── ConfigurationError - Settings/configuration issues

Only LoadError reaches the view state machine. It is converted to an
ErrorInfo and freezes the UI until the user quits.

Usage:
    from cheatview.exceptions import SheetReadError

    try:
        text = path.read_text()
    except OSError as e:
        raise SheetReadError("Cannot read cheat sheet", path=str(path)) from e
"""

from typing import Any, Optional


class CheatviewError(Exception):
    """Base exception for all cheatview errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Load Errors
# =============================================================================


class LoadError(CheatviewError):
    """Base exception for sheet loading and discovery."""

    kind = "load"

    def __init__(
        self,
        message: str = "Failed to load cheat sheet",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.path = path
        if path:
            context["path"] = path
        super().__init__(message, **context)


class SheetReadError(LoadError):
    """A sheet file could not be read."""

    kind = "read"

    def __init__(self, message: str = "Failed to read cheat sheet", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class SheetParseError(LoadError):
    """A sheet file is not valid YAML or has the wrong structure."""

    kind = "parse"

    def __init__(self, message: str = "Malformed cheat sheet", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class DiscoveryError(LoadError):
    """The sheet directory could not be scanned."""

    kind = "discovery"

    def __init__(
        self, message: str = "Failed to scan cheat sheet directory", **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(CheatviewError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
