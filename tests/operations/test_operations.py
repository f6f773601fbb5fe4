import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

from coinbase_client.operations.account_operations import AccountOperations, AddressOperations
from coinbase_client.operations.transaction_operations import TransactionOperations
from coinbase_client.operations.user_operations import UserOperations
from coinbase_client.models.responses import Price
from coinbase_client.client.exceptions import CoinbaseError, InvalidResponseError


@pytest.fixture
def mock_client():
    """Mock authenticated client."""
    return AsyncMock()


@pytest.fixture
def user_operations(mock_client):
    return UserOperations(mock_client)


@pytest.fixture
def account_operations(mock_client):
    return AccountOperations(mock_client)


@pytest.fixture
def address_operations(mock_client):
    return AddressOperations(mock_client)


@pytest.fixture
def transaction_operations(mock_client):
    return TransactionOperations(mock_client)


@pytest.fixture
def sample_accounts():
    return [
        {"id": "acc1", "name": "BTC Wallet", "currency": "BTC"},
        {"id": "acc2", "name": "Savings", "currency": "USD"},
    ]


class TestUserOperations:

    @pytest.mark.asyncio
    async def test_get_price(self, user_operations, mock_client):
        """Test price lookup."""
        mock_client.get.return_value = {"amount": "43210.55", "currency": "usd", "base": "BTC"}

        result = await user_operations.get_price("ETH-USD", "buy")

        assert isinstance(result, Price)
        assert result.amount == Decimal("43210.55")
        assert result.currency == "USD"
        mock_client.get.assert_called_once_with("/v2/prices/eth-usd/buy")

    @pytest.mark.asyncio
    async def test_malformed_price_response(self, user_operations, mock_client):
        mock_client.get.return_value = {"amount": "not-a-number", "currency": "USD"}

        with pytest.raises(InvalidResponseError) as exc_info:
            await user_operations.get_price("BTC-USD")

        assert isinstance(exc_info.value, CoinbaseError)

    @pytest.mark.asyncio
    async def test_non_object_price_response(self, user_operations, mock_client):
        mock_client.get.return_value = ["1015.00"]

        with pytest.raises(InvalidResponseError):
            await user_operations.get_bitcoin_price()

    @pytest.mark.asyncio
    async def test_get_bitcoin_price(self, user_operations, mock_client):
        mock_client.get.return_value = {"amount": "1020.25", "currency": "USD"}

        result = await user_operations.get_bitcoin_price()

        assert result == Decimal("1020.25")
        mock_client.get.assert_called_once_with("/v2/prices/btc-usd/spot")

    @pytest.mark.asyncio
    async def test_invalid_price_type(self, user_operations, mock_client):
        with pytest.raises(ValueError):
            await user_operations.get_price("BTC-USD", "mid")

        mock_client.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_user_endpoints(self, user_operations, mock_client):
        mock_client.get.return_value = {"id": "u1"}

        await user_operations.get_user("u1")
        await user_operations.get_current_user()
        await user_operations.get_user_auth()

        assert [c.args for c in mock_client.get.call_args_list] == [
            ("/v2/users/u1",),
            ("/v2/user",),
            ("/v2/user/auth",),
        ]

    @pytest.mark.asyncio
    async def test_update_current_user(self, user_operations, mock_client):
        mock_client.put.return_value = {"id": "u1", "name": "Satoshi"}

        result = await user_operations.update_current_user({"name": "Satoshi"})

        assert result["name"] == "Satoshi"
        mock_client.put.assert_called_once_with("/v2/user", {"name": "Satoshi"})


class TestAccountOperations:

    @pytest.mark.asyncio
    async def test_account_endpoints(self, account_operations, mock_client):
        await account_operations.list_accounts()
        await account_operations.get_account("acc1")
        await account_operations.create_account({"name": "New"})
        await account_operations.set_primary_account("acc1")
        await account_operations.update_account("acc1", {"name": "Renamed"})
        await account_operations.delete_account("acc1")

        assert [c.args for c in mock_client.get.call_args_list] == [("/v2/accounts",), ("/v2/accounts/acc1",)]
        assert [c.args for c in mock_client.post.call_args_list] == [
            ("/v2/accounts", {"name": "New"}),
            ("/v2/accounts/acc1/primary",),
        ]
        mock_client.put.assert_called_once_with("/v2/accounts/acc1", {"name": "Renamed"})
        mock_client.delete.assert_called_once_with("/v2/accounts/acc1")

    @pytest.mark.asyncio
    async def test_find_account_by_name(self, account_operations, mock_client, sample_accounts):
        mock_client.get.return_value = sample_accounts

        assert (await account_operations.find_account_by_name("Savings"))["id"] == "acc2"
        assert await account_operations.find_account_by_name("Missing") is None

    @pytest.mark.asyncio
    async def test_find_or_create_existing(self, account_operations, mock_client, sample_accounts):
        mock_client.get.return_value = sample_accounts

        result = await account_operations.find_or_create_account("BTC Wallet")

        assert result["id"] == "acc1"
        mock_client.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_or_create_missing(self, account_operations, mock_client, sample_accounts):
        mock_client.get.return_value = sample_accounts
        mock_client.post.return_value = {"id": "acc3", "name": "Trips"}

        result = await account_operations.find_or_create_account("Trips")

        assert result["id"] == "acc3"
        mock_client.post.assert_called_once_with("/v2/accounts", {"name": "Trips"})


class TestAddressOperations:

    @pytest.mark.asyncio
    async def test_address_endpoints(self, address_operations, mock_client):
        await address_operations.list_addresses("acc1")
        await address_operations.get_address("acc1", "addr1")
        await address_operations.list_address_transactions("acc1", "addr1")
        await address_operations.create_address("acc1", {"name": "Deposit"})

        assert [c.args for c in mock_client.get.call_args_list] == [
            ("/v2/accounts/acc1/addresses",),
            ("/v2/accounts/acc1/addresses/addr1",),
            ("/v2/accounts/acc1/addresses/addr1/transactions",),
        ]
        mock_client.post.assert_called_once_with("/v2/accounts/acc1/addresses", {"name": "Deposit"})


class TestTransactionOperations:

    @pytest.mark.asyncio
    async def test_send_money(self, transaction_operations, mock_client):
        """Test send merges the transaction type into the caller's params."""
        params = {"to": "1AUJ8z5RuHRTqD1eikyfUUetzGmdWLGkpT", "amount": "0.1", "currency": "BTC"}
        mock_client.post.return_value = {"id": "tx1", "type": "send"}

        result = await transaction_operations.send_money("acc1", params)

        assert result["id"] == "tx1"
        mock_client.post.assert_called_once_with(
            "/v2/accounts/acc1/transactions",
            {**params, "type": "send"},
            headers=None,
        )
        assert "type" not in params

    @pytest.mark.asyncio
    async def test_send_money_with_two_factor_token(self, transaction_operations, mock_client):
        await transaction_operations.send_money("acc1", {"to": "a@b.com", "amount": "1"}, two_factor_token="123456")

        assert mock_client.post.call_args.kwargs["headers"] == {"CB-2FA-TOKEN": "123456"}

    @pytest.mark.asyncio
    async def test_type_overrides_caller_value(self, transaction_operations, mock_client):
        await transaction_operations.transfer_money("acc1", {"to": "acc2", "amount": "1", "type": "send"})

        body = mock_client.post.call_args.args[1]
        assert body == {"to": "acc2", "amount": "1", "type": "transfer"}

    @pytest.mark.asyncio
    async def test_request_money(self, transaction_operations, mock_client):
        await transaction_operations.request_money("acc1", {"to": "a@b.com", "amount": "1"})

        assert mock_client.post.call_args.args == (
            "/v2/accounts/acc1/transactions",
            {"to": "a@b.com", "amount": "1", "type": "request"},
        )

    @pytest.mark.asyncio
    async def test_request_lifecycle_endpoints(self, transaction_operations, mock_client):
        await transaction_operations.complete_request_money("acc1", "tx1")
        await transaction_operations.resend_request_money("acc1", "tx1")
        await transaction_operations.cancel_request_money("acc1", "tx1")

        assert [c.args for c in mock_client.post.call_args_list] == [
            ("/v2/accounts/acc1/transactions/tx1/complete",),
            ("/v2/accounts/acc1/transactions/tx1/resend",),
        ]
        mock_client.delete.assert_called_once_with("/v2/accounts/acc1/transactions/tx1")

    @pytest.mark.asyncio
    async def test_list_and_get(self, transaction_operations, mock_client):
        await transaction_operations.list_transactions("acc1")
        await transaction_operations.get_transaction("acc1", "tx1")

        assert [c.args for c in mock_client.get.call_args_list] == [
            ("/v2/accounts/acc1/transactions",),
            ("/v2/accounts/acc1/transactions/tx1",),
        ]

    @pytest.mark.asyncio
    async def test_find_transaction(self, transaction_operations, mock_client):
        mock_client.get.return_value = [
            {"id": "tx1", "description": "Rent"},
            {"id": "tx2", "description": "Coffee"},
        ]

        assert (await transaction_operations.find_transaction("acc1", "Coffee"))["id"] == "tx2"
        assert await transaction_operations.find_transaction("acc1", "Lunch") is None
