"""Exception hierarchy for dockhand."""


class DockhandError(Exception):
    """Base exception for all dockhand errors."""

    exit_code = 1

    def __init__(self, message: str, exit_code: int | None = None, hint: str | None = None):
        """
        Initialize exception with optional exit code and hint.

        Args:
            message: Error message
            exit_code: Override default exit code
            hint: Helpful hint for resolving the error (uses Python 3.11+ __notes__)
        """
        super().__init__(message)
        if exit_code:
            self.exit_code = exit_code
        if hint:
            if hasattr(self, "add_note"):
                self.add_note(hint)


class ResourceError(DockhandError):
    """External resources unavailable (engine API, network, files)."""

    exit_code = 75


class ConfigError(DockhandError):
    """Configuration-related errors (.env, config.yaml, bad values)."""

    exit_code = 78


class LookupFailedError(ResourceError):
    """A name lookup against the engine API failed (network, HTTP status, payload)."""

    def __init__(self, resource: str, reason: str, status_code: int | None = None):
        message = f"Could not list {resource}: {reason}"
        hint = None
        if status_code is None:
            hint = "Is the engine running? Check DOCKHAND_HOST or api.base_url in config.yaml"
        super().__init__(message, hint=hint)
        self.resource = resource
        self.status_code = status_code
