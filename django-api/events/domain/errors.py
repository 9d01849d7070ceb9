"""Error taxonomy shared by the event service and the REST handlers."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    DATABASE_ERROR = "DATABASE_ERROR"


@dataclass(eq=False)
class DomainError(Exception):
    """Domain error with code and user-safe message.

    The wrapped cause, when there is one, travels on the standard exception
    chain (``raise DomainError.database_error(...) from exc``).
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    @classmethod
    def invalid_argument(cls, message: str) -> Self:
        return cls(code=ErrorCode.INVALID_ARGUMENT, message=message)

    @classmethod
    def not_found(cls, message: str) -> Self:
        return cls(code=ErrorCode.NOT_FOUND, message=message)

    @classmethod
    def conflict(cls, message: str) -> Self:
        return cls(code=ErrorCode.CONFLICT, message=message)

    @classmethod
    def database_error(cls, message: str) -> Self:
        return cls(code=ErrorCode.DATABASE_ERROR, message=message)
