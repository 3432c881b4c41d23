"""Error types raised by ixset."""

from __future__ import annotations


class Error(Exception):
    """Base class for every ixset error. Renders as "{kind}: {msg}"."""

    kind = "Error"

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(msg)

    def __str__(self) -> str:
        return f"{self.kind}: {self.msg}"


class IoError(Error):
    """Wraps an OSError raised while reading or writing."""

    kind = "Io"

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(str(error))

    @classmethod
    def from_os_error(cls, error: OSError) -> "IoError":
        return cls(error)


class DomainError(Error):
    """Raised when a domain is empty."""

    kind = "DomainError"


class JoinError(Error):
    """Raised when a URL cannot be joined into a string."""

    kind = "JoinError"


class ParamError(Error):
    """Raised when a parameter key, value or list is unusable."""

    kind = "ParamError"


class PathError(Error):
    """Raised when an image path is empty."""

    kind = "PathError"
