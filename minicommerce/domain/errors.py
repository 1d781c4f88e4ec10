# minicommerce/domain/errors.py
from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    BAD_REQUEST = "BAD_REQUEST"


class DomainError(Exception):
    """
    Blad biznesowy rzucany przez serwisy.
    Warstwa HTTP tlumaczy `kind` na kod statusu, serwisy nie wiedza nic o HTTP.
    """

    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class ConflictError(DomainError):
    kind = ErrorKind.CONFLICT


class BadRequestError(DomainError):
    kind = ErrorKind.BAD_REQUEST
