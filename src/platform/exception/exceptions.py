from enum import StrEnum


class ErrorKind(StrEnum):
    EMPTY_BODY = 'empty_body'
    DECODE_FAILURE = 'decode_failure'
    VALIDATION_FAILURE = 'validation_failure'
    UNAUTHENTICATED = 'unauthenticated'
    AUTHORIZATION_DENIED = 'authorization_denied'
    MISSING_CLAIM = 'missing_claim'
    BAD_CREDENTIALS = 'bad_credentials'
    DOMAIN_OPERATION_FAILURE = 'domain_operation_failure'
    NOT_FOUND = 'not_found'
    UNEXPECTED = 'unexpected'


# Single source of truth for the HTTP status of every error kind
ERROR_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.EMPTY_BODY: 400,
    ErrorKind.DECODE_FAILURE: 400,
    ErrorKind.VALIDATION_FAILURE: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.AUTHORIZATION_DENIED: 403,
    ErrorKind.MISSING_CLAIM: 500,
    ErrorKind.BAD_CREDENTIALS: 400,
    ErrorKind.DOMAIN_OPERATION_FAILURE: 422,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNEXPECTED: 500,
}


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return ERROR_KIND_STATUS[self.kind]


class DomainError(CustomBaseError):
    kind = ErrorKind.DOMAIN_OPERATION_FAILURE


class PlaceTakenError(DomainError):
    def __init__(self, message: str = 'place is already taken') -> None:
        super().__init__(message)


class NotFoundError(CustomBaseError):
    kind = ErrorKind.NOT_FOUND


class ForbiddenError(CustomBaseError):
    kind = ErrorKind.AUTHORIZATION_DENIED

    def __init__(self, message: str = 'access was denied') -> None:
        super().__init__(message)


class AuthenticationError(CustomBaseError):
    kind = ErrorKind.UNAUTHENTICATED


class MissingClaimError(CustomBaseError):
    kind = ErrorKind.MISSING_CLAIM


class LoginError(CustomBaseError):
    kind = ErrorKind.BAD_CREDENTIALS

    def __init__(self, message: str = 'invalid login or password') -> None:
        super().__init__(message)


class StorageError(CustomBaseError):
    """Raised by repositories; carries the operation tag, never shown to callers."""

    kind = ErrorKind.DOMAIN_OPERATION_FAILURE

    def __init__(self, op: str, cause: Exception) -> None:
        self.op = op
        super().__init__(f'{op}: {type(cause).__name__}: {cause}')
