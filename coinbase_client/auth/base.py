"""Authentication strategy interface."""

import json
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


def encode_body(body: Optional[Dict[str, Any]]) -> str:
    """Encode a request body exactly as it is signed and sent.

    Empty or missing bodies encode to an empty string.
    """
    if not body:
        return ""
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


class AuthStrategy(ABC):
    """Builds authentication headers for a single request."""

    #: Whether a 401 from the API means the credential can be refreshed.
    supports_refresh: bool = False

    @abstractmethod
    def get_auth_headers(
        self,
        path: str,
        method: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        """Return authentication headers for a request.

        Args:
            path: Request path including the API version prefix, e.g. ``/v2/user``
            method: Upper-case HTTP method
            body: JSON body that will be sent, if any

        Returns:
            Header name to value mapping
        """
        pass
