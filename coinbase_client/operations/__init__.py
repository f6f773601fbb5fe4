"""Endpoint operations for the Coinbase client."""

from coinbase_client.operations.account_operations import AccountOperations, AddressOperations
from coinbase_client.operations.transaction_operations import TransactionOperations
from coinbase_client.operations.user_operations import UserOperations

__all__ = ["AccountOperations", "AddressOperations", "TransactionOperations", "UserOperations"]
