"""Transaction operations for the Coinbase API."""

from typing import Any, Dict, List, Optional

from coinbase_client.config.logging import get_logger
from coinbase_client.client.authenticated_client import AuthenticatedHTTPClient

logger = get_logger(__name__)

TWO_FACTOR_HEADER = "CB-2FA-TOKEN"


class TransactionOperations:
    """Handle transaction operations with the Coinbase API."""

    def __init__(self, client: AuthenticatedHTTPClient):
        """Initialize transaction operations.

        Args:
            client: Authenticated client used for API requests
        """
        self.client = client

    def _transactions_path(self, account_id: str) -> str:
        return f"/v2/accounts/{account_id}/transactions"

    async def _create_transaction(
        self,
        account_id: str,
        transaction_type: str,
        params: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        body = {**params, "type": transaction_type}
        response = await self.client.post(self._transactions_path(account_id), body, headers=headers)
        logger.info(f"Created {transaction_type} transaction on account {account_id}")
        return response

    async def list_transactions(self, account_id: str) -> List[Dict[str, Any]]:
        return await self.client.get(self._transactions_path(account_id))

    async def get_transaction(self, account_id: str, transaction_id: str) -> Dict[str, Any]:
        return await self.client.get(f"{self._transactions_path(account_id)}/{transaction_id}")

    async def send_money(
        self,
        account_id: str,
        params: Dict[str, Any],
        two_factor_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Send funds to an email or crypto address.

        Args:
            account_id: Account to send from
            params: Transaction fields such as ``to``, ``amount``, ``currency``
            two_factor_token: Optional token answering a two-factor challenge
        """
        headers = {TWO_FACTOR_HEADER: two_factor_token} if two_factor_token else None
        return await self._create_transaction(account_id, "send", params, headers=headers)

    async def transfer_money(self, account_id: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Transfer funds between two of the user's accounts."""
        return await self._create_transaction(account_id, "transfer", params)

    async def request_money(self, account_id: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Request funds from an email address."""
        return await self._create_transaction(account_id, "request", params)

    async def complete_request_money(self, account_id: str, transaction_id: str) -> Dict[str, Any]:
        return await self.client.post(
            f"{self._transactions_path(account_id)}/{transaction_id}/complete"
        )

    async def resend_request_money(self, account_id: str, transaction_id: str) -> Dict[str, Any]:
        return await self.client.post(
            f"{self._transactions_path(account_id)}/{transaction_id}/resend"
        )

    async def cancel_request_money(self, account_id: str, transaction_id: str) -> Any:
        response = await self.client.delete(
            f"{self._transactions_path(account_id)}/{transaction_id}"
        )
        logger.info(f"Cancelled money request {transaction_id}")
        return response

    async def find_transaction(self, account_id: str, description: str) -> Optional[Dict[str, Any]]:
        """Find the first transaction with the given description.

        Only the first page of transactions is searched.
        """
        transactions = await self.list_transactions(account_id)
        for transaction in transactions:
            if transaction.get("description") == description:
                return transaction
        return None
