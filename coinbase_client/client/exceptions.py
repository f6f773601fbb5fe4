"""Custom exceptions for the Coinbase client."""

from typing import Optional, Dict, Any, List


class CoinbaseError(Exception):
    """Base exception for all Coinbase client errors."""
    pass


class CredentialsError(CoinbaseError):
    """Raised when credentials are missing or used in the wrong auth mode."""
    pass


class HTTPStatusError(CoinbaseError):
    """Raised for any non-2xx response that is not a recoverable token expiry."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        response_data: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body or ""
        self.response_data = response_data if response_data is not None else {}

    @property
    def errors(self) -> List[Dict[str, Any]]:
        """Entries of the API's ``{"errors": [...]}`` envelope, if present."""
        if isinstance(self.response_data, dict):
            return self.response_data.get("errors") or []
        return []


class ValidationError(HTTPStatusError):
    """Raised when request validation fails (400)."""
    pass


class AuthenticationError(HTTPStatusError):
    """Raised when authentication fails (401)."""
    pass


class AuthExpiredError(AuthenticationError):
    """Raised when an OAuth access token is rejected (401 in OAuth mode)."""
    pass


class AuthorizationError(HTTPStatusError):
    """Raised when authorization fails (403)."""
    pass


class NotFoundError(HTTPStatusError):
    """Raised when resource is not found (404)."""
    pass


class RateLimitError(HTTPStatusError):
    """Raised when rate limit is exceeded (429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(HTTPStatusError):
    """Raised when server returns 5xx error."""
    pass


class InvalidResponseError(CoinbaseError):
    """Raised when a successful response does not have the expected shape."""
    pass


class RefreshFailureError(CoinbaseError):
    """Raised when the OAuth token refresh itself fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body or ""


class TransportError(CoinbaseError):
    """Base class for network level failures."""
    pass


class TimeoutError(TransportError):
    """Raised when request times out."""
    pass


class ConnectionError(TransportError):
    """Raised when connection fails."""
    pass


def create_http_error(
    status_code: int,
    body: str,
    response_data: Optional[Dict[str, Any]] = None,
    oauth: bool = False,
    retry_after: Optional[int] = None,
) -> HTTPStatusError:
    """Create appropriate HTTP error based on status code."""

    message = f"HTTP error {status_code} {body}"

    if status_code == 401 and oauth:
        return AuthExpiredError(
            message=message,
            status_code=status_code,
            body=body,
            response_data=response_data,
        )

    if status_code == 429:
        return RateLimitError(
            message=message,
            retry_after=retry_after,
            status_code=status_code,
            body=body,
            response_data=response_data,
        )

    error_classes = {
        400: ValidationError,
        401: AuthenticationError,
        403: AuthorizationError,
        404: NotFoundError,
    }

    if status_code in error_classes:
        error_class = error_classes[status_code]
    elif 500 <= status_code < 600:
        error_class = ServerError
    else:
        error_class = HTTPStatusError

    return error_class(
        message=message,
        status_code=status_code,
        body=body,
        response_data=response_data,
    )
