"""Request parameter building and response decoding."""

from typing import Dict, Any, Optional

import httpx

from coinbase_client.auth.base import AuthStrategy


def default_headers(api_version: str, accept_language: str = "en") -> Dict[str, str]:
    """Headers sent with every API request."""
    return {
        "CB-VERSION": api_version,
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Accept-Language": accept_language,
    }


def merge_headers(headers: Dict[str, str], layer: Dict[str, str]) -> None:
    """Apply a header layer, replacing existing names regardless of case."""
    names = {name.lower() for name in layer}
    for name in [n for n in headers if n.lower() in names]:
        del headers[name]
    headers.update(layer)


def build_request_params(
    auth: AuthStrategy,
    base_headers: Dict[str, str],
    base_url: str,
    method: str,
    path: str,
    body: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Compose the parameters of one outgoing request.

    Headers are layered in a fixed order, later layers winning:
    ``base_headers``, then caller ``headers``, then auth headers.
    Header names are compared case-insensitively.
    The ``body`` key is only present when ``body`` is non-empty.
    """
    method = method.upper()

    request_headers = dict(base_headers)
    if headers:
        merge_headers(request_headers, headers)
    merge_headers(request_headers, auth.get_auth_headers(path, method, body or None))

    params: Dict[str, Any] = {
        "method": method,
        "url": f"{base_url}/{path.lstrip('/')}",
        "headers": request_headers,
    }
    if body:
        params["body"] = body

    return params


def decode_response(response: httpx.Response) -> Any:
    """Decode a response body, falling back to raw text."""
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return {"content": response.text}


def unwrap_envelope(payload: Any) -> Any:
    """Return the ``data`` member of a response envelope, or the payload itself."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload
