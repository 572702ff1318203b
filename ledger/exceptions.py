"""Custom exception hierarchy for the ledger service."""


class LedgerError(Exception):
    """Base exception for all ledger errors."""


class EntityNotFoundError(LedgerError):
    """Raised when a customer, company or transaction does not exist."""


class InvalidInputError(LedgerError):
    """Raised when caller-supplied data is malformed or fails validation."""


class DuplicateEntityError(InvalidInputError):
    """Raised when a natural key (CPF/CNPJ) is already registered."""


class InvalidEntityStateError(LedgerError):
    """Raised when an entity is in an invalid state for the operation."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class NotificationError(LedgerError):
    """Raised when a callback or email could not be delivered."""


HTTP_STATUS = {
    EntityNotFoundError: 404,
    InvalidInputError: 400,
    InvalidEntityStateError: 400,
}


def http_status_for(exc: BaseException) -> int:
    """Map an exception to the HTTP status an API boundary should return."""
    for exc_type, status in HTTP_STATUS.items():
        if isinstance(exc, exc_type):
            return status
    return 500


def error_body(exc: BaseException) -> dict[str, object]:
    """Build the JSON error body returned to API clients."""
    status = http_status_for(exc)
    message = str(exc)
    if status == 500:
        message = f"Erro inesperado: {message}"
    return {"errorMessage": message, "errorCode": status}
