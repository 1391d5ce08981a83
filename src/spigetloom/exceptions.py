"""Custom exception classes for the spigetloom library."""

import httpx


class SpigetError(Exception):
    """Base exception class for all spigetloom errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            url_info = self.request.url if self.request is not None else "N/A"
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class CommunicationError(SpigetError):
    """Raised when a call to the Spiget API did not succeed.

    Covers both transport failures (connection refused, timeout, DNS or TLS
    failure, malformed response) and responses whose status code falls outside
    the 2xx range. The two cases are told apart through ``code``: it holds the
    HTTP status for the latter and ``0`` for the former.
    """

    def __init__(
        self,
        message: str,
        code: int = 0,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the CommunicationError.

        Args:
            message: The error message, including the response body text when
                there is one.
            code: The HTTP status code, or 0 when no response was received.
            response: The non-success httpx.Response, if any.
            request: The httpx.Request that was being sent.
        """
        super().__init__(message, response=response, request=request)
        self.code = code

    @classmethod
    def wrap(
        cls, exc: Exception, *, request: httpx.Request | None = None
    ) -> "CommunicationError":
        """Builds a CommunicationError from a transport-level exception.

        The original exception is kept as ``__cause__``.
        """
        error = cls(str(exc) or type(exc).__name__, 0, request=request)
        error.__cause__ = exc
        return error


class DecodeError(SpigetError):
    """Raised when a successful response does not carry valid JSON."""


class ValidationError(SpigetError):
    """Represents a client-side validation error raised before any request is sent.

    Examples are an unknown operation id or a missing path parameter.
    """

    def __init__(self, message: str):
        super().__init__(message, response=None)
