"""Exceptions raised by kno core operations."""

from __future__ import annotations


class KnoError(Exception):
    """Base exception for kno operations."""

    pass


class InvalidAddress(KnoError):
    """Raised when an address is malformed or would escape the notes root."""

    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"Invalid address '{address}': {reason}")


class NotFound(KnoError):
    """Raised when a directory to list or resolve does not exist."""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"Not found: {path}")


class IOFailure(KnoError):
    """Raised when a filesystem operation fails.

    The underlying ``OSError`` is kept on ``cause`` and chained with ``from``.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class EditorError(KnoError):
    """Raised when the editor cannot be launched."""

    pass


class ConfigError(KnoError):
    """Raised when the configuration file cannot be parsed."""

    pass
