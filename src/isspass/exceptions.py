"""Custom exception hierarchy for isspass."""

from __future__ import annotations


class IssPassError(Exception):
    """Base exception for all isspass errors."""


class IssPassConfigError(IssPassError):
    """Invalid or missing configuration."""


class IssPassTransportError(IssPassError):
    """The HTTP call could not complete (DNS, connectivity, TLS, timeout).

    The underlying transport exception is kept as ``__cause__``.
    """

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class IssPassRemoteStatusError(IssPassError):
    """The remote service answered but reported a failure.

    Either the HTTP status was not 200 (``status_code`` is set) or the
    body carried a falsy success flag (``status_code`` may be ``None``).
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class IssPassDecodeError(IssPassError):
    """Response body is not JSON or lacks an expected field."""

    def __init__(self, message: str, *, endpoint: str = "", body: str = "") -> None:
        self.endpoint = endpoint
        self.body = body
        super().__init__(message)
