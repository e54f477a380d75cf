"""Exception hierarchy for zkwalker.

Processors signal walk-fatal conditions simply by raising; the walker never
wraps or swallows what they raise. The classes here cover the failures that
originate in zkwalker itself.
"""


class WalkerError(Exception):
    """Base class for errors raised by zkwalker."""


class WalkerConnectionError(WalkerError, ConnectionError):
    """Raised when a session with the ZooKeeper ensemble can't be established."""


class AuthenticationError(WalkerError):
    """Raised when attaching a credential to the session fails."""

    def __init__(self, scheme: str, message: str):
        self.scheme = scheme
        super().__init__(f"{scheme} auth failed: {message}")


class ChildrenListingError(WalkerError):
    """Raised by strict children processors when a listing fails."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        super().__init__(f"Can't list children of {path}: {cause}")


class ConfigError(WalkerError, ValueError):
    """Raised for invalid walker configuration."""
