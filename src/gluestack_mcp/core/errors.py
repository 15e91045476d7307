"""
Error types for the gluestack component catalog.
"""

from pathlib import Path


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with hint if available."""
        if self.hint:
            return f"{self.message} ({self.hint})"
        return self.message


class RemoteUnavailable(CatalogError):
    """
    Raised when the remote directory listing cannot be retrieved.

    Examples:
    - Non-success HTTP status (rate limit, missing ref, outage)
    - Connection failure before any status was received
    """

    def __init__(self, status_code: int | None, reason: str, url: str | None = None):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        status = status_code if status_code is not None else "no response"
        hint = None
        if status_code in (403, 429):
            hint = "set GITHUB_TOKEN to raise the API rate limit"
        super().__init__(f"GitHub API returned {status}: {reason}", hint)


class UnknownComponent(CatalogError):
    """Raised when a name is not part of the current catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Component not found: {name}",
            "use list_gluestack_components to see available names",
        )


class MissingLocalAssets(CatalogError):
    """
    Raised when the catalog lists a component whose local directory is absent.

    This is a consistency violation between the upstream listing and the
    local mirror.
    """

    def __init__(self, name: str, path: Path):
        self.name = name
        self.path = path
        super().__init__(f"Local sources for {name} are missing at {path}")


class ParseFailure(CatalogError):
    """
    Raised when a component entry file cannot be read or parsed.

    Examples:
    - Entry file missing from the component directory
    - File is not valid UTF-8
    - Syntax errors in the source
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse {path}: {reason}")


class ConfigError(CatalogError):
    """Raised when gluestack-mcp.toml or an environment override is invalid."""

    pass
