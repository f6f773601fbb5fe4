"""High level Coinbase client."""

from decimal import Decimal
from typing import Any, Dict, List, Optional

from coinbase_client.client.authenticated_client import AuthenticatedHTTPClient
from coinbase_client.config.settings import Settings, settings as default_settings
from coinbase_client.models.responses import Price
from coinbase_client.operations import (
    AccountOperations,
    AddressOperations,
    TransactionOperations,
    UserOperations,
)


class CoinbaseClient(AuthenticatedHTTPClient):
    """Coinbase API client.

    Endpoints are grouped under ``users``, ``accounts``, ``addresses`` and
    ``transactions``; the most used ones are also available directly on the
    client::

        async with CoinbaseClient(api_key="...", api_secret="...") as client:
            accounts = await client.list_accounts()
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.users = UserOperations(self)
        self.accounts = AccountOperations(self)
        self.addresses = AddressOperations(self)
        self.transactions = TransactionOperations(self)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "CoinbaseClient":
        """Create a client from environment configuration.

        Keyword arguments override values read from settings.
        """
        settings = settings or default_settings
        options = {
            "api_key": settings.coinbase_api_key,
            "api_secret": settings.coinbase_api_secret,
            "client_id": settings.coinbase_client_id,
            "client_secret": settings.coinbase_client_secret,
            "access_token": settings.coinbase_access_token,
            "refresh_token": settings.coinbase_refresh_token,
            "base_url": settings.coinbase_base_url,
            "api_version": settings.coinbase_api_version,
            "accept_language": settings.coinbase_accept_language,
            "timeout": settings.coinbase_timeout,
        }
        options.update(kwargs)
        return cls(**options)

    # Prices and users

    async def get_price(self, currency_pair: str = "BTC-USD", price_type: str = "spot") -> Price:
        return await self.users.get_price(currency_pair, price_type)

    async def get_bitcoin_price(self, price_type: str = "spot") -> Decimal:
        return await self.users.get_bitcoin_price(price_type)

    async def get_user(self, user_id: str) -> Dict[str, Any]:
        return await self.users.get_user(user_id)

    async def get_current_user(self) -> Dict[str, Any]:
        return await self.users.get_current_user()

    async def get_user_auth(self) -> Dict[str, Any]:
        return await self.users.get_user_auth()

    async def update_current_user(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return await self.users.update_current_user(params)

    # Accounts

    async def list_accounts(self) -> List[Dict[str, Any]]:
        return await self.accounts.list_accounts()

    async def get_account(self, account_id: str) -> Dict[str, Any]:
        return await self.accounts.get_account(account_id)

    async def create_account(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return await self.accounts.create_account(params)

    async def set_primary_account(self, account_id: str) -> Dict[str, Any]:
        return await self.accounts.set_primary_account(account_id)

    async def update_account(self, account_id: str, params: Dict[str, Any]) -> Dict[str, Any]:
        return await self.accounts.update_account(account_id, params)

    async def delete_account(self, account_id: str) -> Any:
        return await self.accounts.delete_account(account_id)

    async def find_account_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        return await self.accounts.find_account_by_name(name)

    async def find_or_create_account(self, name: str) -> Dict[str, Any]:
        return await self.accounts.find_or_create_account(name)

    # Addresses

    async def list_addresses(self, account_id: str) -> List[Dict[str, Any]]:
        return await self.addresses.list_addresses(account_id)

    async def get_address(self, account_id: str, address_id: str) -> Dict[str, Any]:
        return await self.addresses.get_address(account_id, address_id)

    async def list_address_transactions(self, account_id: str, address_id: str) -> List[Dict[str, Any]]:
        return await self.addresses.list_address_transactions(account_id, address_id)

    async def create_address(self, account_id: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self.addresses.create_address(account_id, params)

    # Transactions

    async def list_transactions(self, account_id: str) -> List[Dict[str, Any]]:
        return await self.transactions.list_transactions(account_id)

    async def get_transaction(self, account_id: str, transaction_id: str) -> Dict[str, Any]:
        return await self.transactions.get_transaction(account_id, transaction_id)

    async def send_money(
        self,
        account_id: str,
        params: Dict[str, Any],
        two_factor_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.transactions.send_money(account_id, params, two_factor_token)

    async def transfer_money(self, account_id: str, params: Dict[str, Any]) -> Dict[str, Any]:
        return await self.transactions.transfer_money(account_id, params)

    async def request_money(self, account_id: str, params: Dict[str, Any]) -> Dict[str, Any]:
        return await self.transactions.request_money(account_id, params)

    async def complete_request_money(self, account_id: str, transaction_id: str) -> Dict[str, Any]:
        return await self.transactions.complete_request_money(account_id, transaction_id)

    async def resend_request_money(self, account_id: str, transaction_id: str) -> Dict[str, Any]:
        return await self.transactions.resend_request_money(account_id, transaction_id)

    async def cancel_request_money(self, account_id: str, transaction_id: str) -> Any:
        return await self.transactions.cancel_request_money(account_id, transaction_id)

    async def find_transaction(self, account_id: str, description: str) -> Optional[Dict[str, Any]]:
        return await self.transactions.find_transaction(account_id, description)
