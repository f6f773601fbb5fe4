"""Account and address operations for the Coinbase API."""

from typing import Any, Dict, List, Optional

from coinbase_client.config.logging import get_logger
from coinbase_client.client.authenticated_client import AuthenticatedHTTPClient

logger = get_logger(__name__)


class AccountOperations:
    """Handle account operations with the Coinbase API."""

    def __init__(self, client: AuthenticatedHTTPClient):
        """Initialize account operations.

        Args:
            client: Authenticated client used for API requests
        """
        self.client = client

    async def list_accounts(self) -> List[Dict[str, Any]]:
        return await self.client.get("/v2/accounts")

    async def get_account(self, account_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/v2/accounts/{account_id}")

    async def create_account(self, params: Dict[str, Any]) -> Dict[str, Any]:
        response = await self.client.post("/v2/accounts", params)
        logger.info(f"Created account {params.get('name')!r}")
        return response

    async def set_primary_account(self, account_id: str) -> Dict[str, Any]:
        return await self.client.post(f"/v2/accounts/{account_id}/primary")

    async def update_account(self, account_id: str, params: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/v2/accounts/{account_id}", params)

    async def delete_account(self, account_id: str) -> Any:
        response = await self.client.delete(f"/v2/accounts/{account_id}")
        logger.info(f"Deleted account {account_id}")
        return response

    async def find_account_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        """Find the first account with the given name.

        Only the first page of accounts is searched.
        """
        accounts = await self.list_accounts()
        for account in accounts:
            if account.get("name") == name:
                return account
        return None

    async def find_or_create_account(self, name: str) -> Dict[str, Any]:
        """Return the account with the given name, creating it if missing."""
        account = await self.find_account_by_name(name)
        if account is None:
            logger.debug(f"Account {name!r} not found, creating it")
            return await self.create_account({"name": name})
        return account


class AddressOperations:
    """Handle address operations with the Coinbase API."""

    def __init__(self, client: AuthenticatedHTTPClient):
        self.client = client

    async def list_addresses(self, account_id: str) -> List[Dict[str, Any]]:
        return await self.client.get(f"/v2/accounts/{account_id}/addresses")

    async def get_address(self, account_id: str, address_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/v2/accounts/{account_id}/addresses/{address_id}")

    async def list_address_transactions(self, account_id: str, address_id: str) -> List[Dict[str, Any]]:
        return await self.client.get(
            f"/v2/accounts/{account_id}/addresses/{address_id}/transactions"
        )

    async def create_address(self, account_id: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self.client.post(f"/v2/accounts/{account_id}/addresses", params)
