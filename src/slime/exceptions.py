"""
Exceptions for the slime bot.

Startup can fail in exactly two ways: the environment could not provide the
token, or the Discord client library refused to build or run the connection.
Both surface at the process boundary as a ``SlimeError`` tagged with its kind.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Discriminant for the two startup failure variants."""

    VAR = "var"
    CLIENT = "client"


class SlimeError(Exception):
    """Base error raised at the process boundary."""

    kind: ErrorKind

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(cause)

    def __str__(self) -> str:
        if self.kind is ErrorKind.VAR:
            return f"SlimeError::Var({self.cause})"
        return f"SlimeError::Client({self.cause})"

    def __repr__(self) -> str:
        if self.kind is ErrorKind.VAR:
            return f'Slime says: "Variable error: {self.cause!r}"'
        return f'Slime says: "Client error: {self.cause!r}"'


class ConfigError(SlimeError):
    """Raised when the environment cannot supply a usable configuration."""

    kind = ErrorKind.VAR


class ClientError(SlimeError):
    """Raised when the Discord client fails to build, log in, or keep running."""

    kind = ErrorKind.CLIENT
