"""User and price operations for the Coinbase API."""

from decimal import Decimal
from typing import Any, Dict

from coinbase_client.config.logging import get_logger
from coinbase_client.client.authenticated_client import AuthenticatedHTTPClient
from coinbase_client.client.exceptions import InvalidResponseError
from coinbase_client.models.responses import Price

logger = get_logger(__name__)

PRICE_TYPES = ("buy", "sell", "spot")


class UserOperations:
    """Handle user and price lookups."""

    def __init__(self, client: AuthenticatedHTTPClient):
        self.client = client

    async def get_price(self, currency_pair: str = "BTC-USD", price_type: str = "spot") -> Price:
        """Get the buy, sell or spot price of a currency pair.

        Args:
            currency_pair: Pair such as ``BTC-USD``
            price_type: One of ``buy``, ``sell``, ``spot``

        Raises:
            ValueError: If the price type is unknown
            InvalidResponseError: If the response is not a price
        """
        if price_type not in PRICE_TYPES:
            raise ValueError(f"Invalid price type: {price_type}. Must be one of {list(PRICE_TYPES)}")

        response = await self.client.get(f"/v2/prices/{currency_pair.lower()}/{price_type}")
        try:
            return Price(**response)
        except (TypeError, ValueError) as e:
            raise InvalidResponseError(f"Invalid price response for {currency_pair}: {e}") from e

    async def get_bitcoin_price(self, price_type: str = "spot") -> Decimal:
        price = await self.get_price("BTC-USD", price_type)
        return price.amount

    async def get_user(self, user_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/v2/users/{user_id}")

    async def get_current_user(self) -> Dict[str, Any]:
        return await self.client.get("/v2/user")

    async def get_user_auth(self) -> Dict[str, Any]:
        """Get the current user's auth method and scopes."""
        return await self.client.get("/v2/user/auth")

    async def update_current_user(self, params: Dict[str, Any]) -> Dict[str, Any]:
        response = await self.client.put("/v2/user", params)
        logger.info("Updated current user")
        return response
