"""Internal result types for vault operations.

Core operations never raise on filesystem failures. They return either
:class:`Ok` carrying the payload or :class:`Err` carrying a classified
:class:`ErrorKind`. Tool adapters decide, per operation, whether an ``Err``
becomes a descriptive text payload or a raised :class:`VaultOperationError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Classification of a failed filesystem action."""

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    OUTSIDE_VAULT = "outside_vault"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    """A failed operation.

    ``detail`` is a short human-readable reason (the OS error description,
    never a path or traceback).
    """

    kind: ErrorKind
    detail: str


OperationResult = Union[Ok[T], Err]


class VaultOperationError(Exception):
    """Raised by tools whose failures propagate to the MCP caller."""

    def __init__(self, operation: str, error: Err) -> None:
        self.operation = operation
        self.error = error
        super().__init__(f"{operation} failed ({error.kind.value}): {error.detail}")


def classify_os_error(exc: OSError) -> Err:
    """Map an :class:`OSError` to an :class:`Err` without leaking its path."""
    if isinstance(exc, FileNotFoundError):
        kind = ErrorKind.NOT_FOUND
    elif isinstance(exc, PermissionError):
        kind = ErrorKind.PERMISSION_DENIED
    elif isinstance(exc, NotADirectoryError):
        kind = ErrorKind.NOT_A_DIRECTORY
    elif isinstance(exc, IsADirectoryError):
        kind = ErrorKind.IS_A_DIRECTORY
    else:
        kind = ErrorKind.IO_ERROR

    detail = exc.strerror or exc.__class__.__name__
    return Err(kind=kind, detail=detail)


def unwrap(result: OperationResult[T], operation: str) -> T:
    """Return the payload of ``result`` or raise :class:`VaultOperationError`."""
    if isinstance(result, Err):
        raise VaultOperationError(operation, result)
    return result.value
