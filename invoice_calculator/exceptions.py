"""
Failure kinds raised below the repository.

The repository turns every one of these into an ``Error`` result, so nothing here
ever reaches the presentation layer as a raised exception.
"""


class InvoiceCalculatorError(Exception):
    """Base class for all invoice pipeline failures."""


class TransportError(InvoiceCalculatorError):
    """The network call could not complete (timeout, connection failure)."""


class ProtocolError(InvoiceCalculatorError):
    """The remote answered with a non-success status code."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code} {reason}".strip())


class EmptyBodyError(InvoiceCalculatorError):
    """The response succeeded but carried no decodable payload."""

    def __init__(self, message: str = "Response body is null"):
        super().__init__(message)


class AggregationFault(InvoiceCalculatorError):
    """Unexpected failure while computing invoice totals."""


class UnknownError(InvoiceCalculatorError):
    """Fallback when a failure carries no description."""

    def __init__(self, message: str = "Unknown error"):
        super().__init__(message)
