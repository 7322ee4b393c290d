"""
Service-layer errors for the ledger subsystem.

Services raise these; routes translate them into HTTP responses.
"""


class LedgerError(Exception):
    """Base class for ledger service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(LedgerError):
    """A referenced trip does not exist."""


class ValidationFailedError(LedgerError):
    """Malformed settlement input. The message names the failed precondition."""


class StorageFailureError(LedgerError):
    """The database could not complete a read or write.

    The message is deliberately generic; the underlying driver error is
    chained as ``__cause__`` and logged, never shown to the caller.
    """
