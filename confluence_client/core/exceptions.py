"""
Custom exceptions for Confluence client operations.

This module defines a small, closed hierarchy of exceptions covering the
three ways an operation against the Confluence REST API can fail:
the request never produced a response, the server rejected it, or the
server accepted it but returned a body that could not be decoded.

None of these errors are retried by the client.
"""


class ConfluenceClientError(Exception):
    """
    Base exception for all Confluence client errors.

    All exceptions raised by the Confluence client inherit from this class,
    allowing for broad exception handling if needed.

    Examples:
        >>> try:
        ...     session.get_page_by_id(123)
        ... except ConfluenceClientError as e:
        ...     print(f"Confluence error: {e}")
    """

    pass


class TransportError(ConfluenceClientError):
    """
    Raised when a request fails before any response is received.

    Covers connection failures, DNS errors, TLS errors and timeouts.
    The underlying ``requests`` exception is chained as ``__cause__``.
    """

    pass


class RemoteError(ConfluenceClientError):
    """
    Raised when the server answers with a 4xx or 5xx status.

    Version conflicts on page updates, duplicate titles and unknown
    ancestors all surface as this error; inspect ``status_code`` and
    ``response_body`` to tell them apart.

    Attributes:
        status_code: HTTP status code of the failed response.
        response_body: Raw response body text, kept for diagnostics.

    Examples:
        >>> try:
        ...     session.update_page("DOC", 42, new_version=3, title="Stale")
        ... except RemoteError as e:
        ...     if e.status_code == 409:
        ...         print("Someone else edited the page first")
    """

    def __init__(self, message: str, status_code: int = None, response_body: str = None):
        """
        Initialize remote error.

        Args:
            message: Error message describing the failure.
            status_code: HTTP status code from the failed request.
            response_body: Response body text from the failed request.
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class DecodeError(ConfluenceClientError):
    """
    Raised when a successful response body does not match the expected schema.

    Note that for write operations the remote change may already have been
    applied: a page can exist on the server even though ``add_new_page``
    raised this error. Look the page up before creating it again.

    Attributes:
        cause: The exception raised while decoding, if any.
    """

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause
