"""Exception types raised by the runner.

Nothing here is caught internally; every error propagates to the CLI and
terminates the run. Filesystem failures surface as the builtin ``OSError``.
"""


class A11yRunnerError(Exception):
    """Base class for all runner errors."""


class ConfigError(A11yRunnerError):
    """Configuration is missing, unreadable or incomplete."""


class MissingEnvironmentError(A11yRunnerError):
    """A required environment variable is not set."""


class AuditError(A11yRunnerError):
    """The external auditing engine failed for a test URL."""

    def __init__(self, url: str, message: str):
        super().__init__(f"Audit failed for {url}: {message}")
        self.url = url


__all__ = ["A11yRunnerError", "ConfigError", "MissingEnvironmentError", "AuditError"]
