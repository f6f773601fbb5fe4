"""Authenticated request pipeline for the Coinbase API."""

import asyncio
import inspect
import time
from typing import Any, Callable, Dict, Optional

import httpx

from coinbase_client.auth.api_key import APIKeyAuth
from coinbase_client.auth.base import AuthStrategy, encode_body
from coinbase_client.auth.oauth import OAuthAuth
from coinbase_client.client.exceptions import (
    CoinbaseError,
    CredentialsError,
    HTTPStatusError,
    RefreshFailureError,
    create_http_error,
)
from coinbase_client.client.http_client import HTTPClient
from coinbase_client.client.request import (
    build_request_params,
    decode_response,
    default_headers,
    unwrap_envelope,
)
from coinbase_client.config.logging import get_logger
from coinbase_client.config.settings import settings
from coinbase_client.models.credentials import (
    APIKeyCredentials,
    ClientCredentials,
    OAuthCredentials,
)
from coinbase_client.models.responses import TokenRefreshResult

logger = get_logger(__name__)

TOKEN_REFRESHED_EVENT = "token_refreshed"
EVENTS = (TOKEN_REFRESHED_EVENT,)

TOKEN_PATH = "/oauth/token"
REVOKE_PATH = "/oauth/revoke"


class AuthenticatedHTTPClient:
    """Sends signed or bearer-authenticated requests to the Coinbase API.

    The auth mode is fixed at construction: an ``access_token`` selects OAuth,
    otherwise ``api_key``/``api_secret`` are required. In OAuth mode a 401
    triggers one token refresh followed by one retry of the original request.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        accept_language: Optional[str] = None,
        timeout: Optional[float] = None,
        clock: Callable[[], float] = time.time,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_key: API key (API key mode)
            api_secret: API secret (API key mode)
            client_id: OAuth2 client ID (OAuth mode)
            client_secret: OAuth2 client secret (OAuth mode)
            access_token: OAuth2 access token; its presence selects OAuth mode
            refresh_token: OAuth2 refresh token (OAuth mode)
            base_url: API base URL (defaults to env var)
            api_version: Value of the ``CB-VERSION`` header (defaults to env var)
            accept_language: Value of the ``Accept-Language`` header
            timeout: Request timeout in seconds
            clock: Time source used for request signatures
            transport: Optional httpx transport

        Raises:
            CredentialsError: If neither an access token nor a full API key pair is given
        """
        if access_token:
            self.credentials: ClientCredentials = OAuthCredentials(
                client_id=client_id,
                client_secret=client_secret,
                access_token=access_token,
                refresh_token=refresh_token,
            )
            self.auth: AuthStrategy = OAuthAuth(self.credentials)
        elif api_key and api_secret:
            self.credentials = APIKeyCredentials(api_key=api_key, api_secret=api_secret)
            self.auth = APIKeyAuth(self.credentials, clock=clock)
        else:
            raise CredentialsError(
                "Either access_token or both api_key and api_secret are required"
            )

        self.http_client = HTTPClient(base_url=base_url, timeout=timeout, transport=transport)
        self.base_headers = default_headers(
            api_version or settings.coinbase_api_version,
            accept_language or settings.coinbase_accept_language,
        )

        self._events: Dict[str, Callable[[TokenRefreshResult], Any]] = {}
        self._refresh_lock = asyncio.Lock()

        logger.info(f"Coinbase client initialized in {'OAuth' if self.is_oauth else 'API key'} mode")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the underlying HTTP client."""
        await self.http_client.close()

    @property
    def is_oauth(self) -> bool:
        return isinstance(self.credentials, OAuthCredentials)

    def on(self, event_name: str, handler: Callable[[TokenRefreshResult], Any]) -> None:
        """Register the handler for a lifecycle event.

        Only one handler is kept per event; registering again replaces it.
        The handler may be a coroutine function.

        Raises:
            ValueError: If the event name is unknown
        """
        if event_name not in EVENTS:
            raise ValueError(f"Unknown event: {event_name}. Must be one of {list(EVENTS)}")
        self._events[event_name] = handler

    async def _emit(self, event_name: str, payload: Any) -> None:
        handler = self._events.get(event_name)
        if handler is None:
            return
        result = handler(payload)
        if inspect.isawaitable(result):
            await result

    def build_request_params(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Build URL, headers and body for a request with fresh auth headers."""
        return build_request_params(
            auth=self.auth,
            base_headers=self.base_headers,
            base_url=self.http_client.base_url,
            method=method,
            path=path,
            body=body,
            headers=headers,
        )

    async def _send(self, params: Dict[str, Any]) -> httpx.Response:
        body = params.get("body")
        return await self.http_client.send(
            method=params["method"],
            url=params["url"],
            headers=params["headers"],
            body=body,
            content=encode_body(body) if body else None,
        )

    def _is_token_expired(self, response: httpx.Response) -> bool:
        return self.auth.supports_refresh and response.status_code == 401

    def _handle_response(self, response: httpx.Response) -> Any:
        """Unwrap a successful response or raise the matching status error."""
        payload = decode_response(response)

        if response.status_code >= 300:
            retry_after = response.headers.get("Retry-After")
            raise create_http_error(
                status_code=response.status_code,
                body=response.text,
                response_data=payload if isinstance(payload, dict) else {"content": payload},
                oauth=self.is_oauth,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )

        return unwrap_envelope(payload)

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        refresh: bool = True,
    ) -> Any:
        """Make an authenticated request to an API path.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path, e.g. ``/v2/accounts``
            body: Optional JSON body; empty bodies are not sent
            headers: Optional extra headers; they cannot override auth headers
            refresh: Whether a 401 in OAuth mode may trigger a token refresh

        Returns:
            The ``data`` member of the response envelope, or the whole response

        Raises:
            HTTPStatusError: For any status code >= 300 that is not recovered
            RefreshFailureError: When the token refresh fails
            TransportError: When the request cannot be sent
        """
        params = self.build_request_params(method, path, body, headers)
        sent_token = self.credentials.access_token if self.is_oauth else None

        response = await self._send(params)

        if refresh and self._is_token_expired(response):
            logger.warning(f"{params['method']} {path} rejected with 401, refreshing access token")
            await self._refresh_expired_token(sent_token)

            # Retry exactly once; a second 401 is terminal
            params = self.build_request_params(method, path, body, headers)
            response = await self._send(params)

        return self._handle_response(response)

    async def get(self, path: str, headers: Optional[Dict[str, str]] = None, refresh: bool = True) -> Any:
        """Make GET request."""
        return await self.request("GET", path, headers=headers, refresh=refresh)

    async def post(
        self,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        refresh: bool = True,
    ) -> Any:
        """Make POST request."""
        return await self.request("POST", path, body=body, headers=headers, refresh=refresh)

    async def put(
        self,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        refresh: bool = True,
    ) -> Any:
        """Make PUT request."""
        return await self.request("PUT", path, body=body, headers=headers, refresh=refresh)

    async def delete(self, path: str, headers: Optional[Dict[str, str]] = None, refresh: bool = True) -> Any:
        """Make DELETE request."""
        return await self.request("DELETE", path, headers=headers, refresh=refresh)

    async def _refresh_expired_token(self, expired_token: Optional[str]) -> None:
        """Refresh once per expired token, even with concurrent callers."""
        async with self._refresh_lock:
            if self.credentials.access_token != expired_token:
                logger.debug("Access token already refreshed by a concurrent request")
                return
            await self.refresh_token()

    async def refresh_token(self) -> TokenRefreshResult:
        """Exchange the refresh token for a new token pair.

        Updates the client credentials and notifies the ``token_refreshed``
        handler. Handler errors propagate unchanged.

        Raises:
            CredentialsError: If the client is not in OAuth mode
            RefreshFailureError: If the refresh request fails
        """
        if not self.is_oauth:
            raise CredentialsError("Token refresh is only available in OAuth mode")

        body = {
            "grant_type": "refresh_token",
            "client_id": self.credentials.client_id,
            "client_secret": self.credentials.client_secret,
            "refresh_token": self.credentials.refresh_token,
        }

        try:
            response = await self.post(TOKEN_PATH, body, refresh=False)
            result = TokenRefreshResult(**response)
        except HTTPStatusError as e:
            logger.error(f"Token refresh failed with status {e.status_code}")
            raise RefreshFailureError(
                f"Token refresh failed: {e}", status_code=e.status_code, body=e.body
            ) from e
        except CoinbaseError as e:
            logger.error(f"Token refresh failed: {e}")
            raise RefreshFailureError(f"Token refresh failed: {e}") from e
        except (TypeError, ValueError) as e:
            logger.error(f"Token refresh returned an invalid response: {e}")
            raise RefreshFailureError(f"Invalid token refresh response: {e}") from e

        self.credentials = self.credentials.with_tokens(result.access_token, result.refresh_token)
        self.auth.update_credentials(self.credentials)

        logger.info(f"Access token refreshed, expires in {result.expires_in}s")

        await self._emit(TOKEN_REFRESHED_EVENT, result)
        return result

    async def revoke_token(self) -> Any:
        """Revoke the current access token."""
        if not self.is_oauth:
            raise CredentialsError("Token revocation is only available in OAuth mode")

        response = await self.post(
            REVOKE_PATH, {"token": self.credentials.access_token}, refresh=False
        )
        logger.info("Access token revoked")
        return response
