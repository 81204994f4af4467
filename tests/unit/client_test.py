from unittest.mock import MagicMock

import pytest
from stellar_sdk import Account, Keypair, Server
from stellar_sdk.exceptions import BadRequestError, ConnectionError, NotFoundError

from stellar_preauth.account.account_snapshot import AccountSnapshot
from stellar_preauth.client import HorizonClient
from stellar_preauth.errors import AccountLookupError, SubmissionError
from stellar_preauth.transaction.pre_auth_transaction import build_add_signer
from stellar_preauth.transaction.transaction_response import TransactionResponse
from tests.unit.mock_horizon import horizon_error

pytestmark = pytest.mark.unit


@pytest.fixture
def server():
    return MagicMock()


@pytest.fixture
def client(network_config, server):
    return HorizonClient(network_config, server=server)


@pytest.fixture
def envelope(network_config):
    sender = Keypair.random()
    tx = build_add_signer(Account(sender.public_key, 1), bytes(range(32)), network_config)
    tx.sign(sender)
    return tx


def test_default_server_uses_configured_url(network_config):
    """Test a Server for the configured Horizon URL is created when none is injected."""
    client = HorizonClient(network_config)

    assert isinstance(client.server, Server)


def test_load_account_returns_sdk_account(client, server):
    """Test load_account delegates to the Horizon server."""
    account = Account(Keypair.random().public_key, 42)
    server.load_account.return_value = account

    assert client.load_account(account.account.account_id) is account
    server.load_account.assert_called_once_with(account.account.account_id)


def test_load_account_missing_raises(client, server):
    """Test a 404 from Horizon becomes AccountLookupError."""
    server.load_account.side_effect = horizon_error(NotFoundError, 404, "Resource Missing")

    with pytest.raises(AccountLookupError) as exc_info:
        client.load_account("GMISSING")

    assert exc_info.value.public_key == "GMISSING"
    assert isinstance(exc_info.value.__cause__, NotFoundError)


def test_account_detail_returns_snapshot(client, server):
    """Test account_detail parses the Horizon account record."""
    public_key = Keypair.random().public_key
    server.accounts.return_value.account_id.return_value.call.return_value = {
        "account_id": public_key,
        "sequence": "17",
        "balances": [{"balance": "10000.0000000", "asset_type": "native"}],
        "signers": [{"weight": 1, "key": public_key, "type": "ed25519_public_key"}],
    }

    snapshot = client.account_detail(public_key)

    assert isinstance(snapshot, AccountSnapshot)
    assert snapshot.sequence == 17
    assert snapshot.balance == "10000.0000000"
    server.accounts.return_value.account_id.assert_called_once_with(public_key)


def test_account_detail_connection_error_raises(client, server):
    """Test a transport failure while reading an account becomes AccountLookupError."""
    server.accounts.return_value.account_id.return_value.call.side_effect = ConnectionError("offline")

    with pytest.raises(AccountLookupError, match="offline"):
        client.account_detail("GOFFLINE")


def test_submit_returns_transaction_response(client, server, envelope):
    """Test submit returns the parsed Horizon response."""
    server.submit_transaction.return_value = {
        "hash": envelope.hash_hex(),
        "ledger": 123,
        "successful": True,
        "envelope_xdr": envelope.to_xdr(),
        "result_xdr": "AAAA",
    }

    response = client.submit(envelope)

    assert isinstance(response, TransactionResponse)
    assert response.hash == envelope.hash_hex()
    assert response.ledger == 123
    server.submit_transaction.assert_called_once_with(envelope)


def test_submit_rejection_carries_result_codes(client, server, envelope):
    """Test a Horizon rejection becomes SubmissionError with the result codes."""
    result_codes = {"transaction": "tx_bad_auth"}
    server.submit_transaction.side_effect = horizon_error(
        BadRequestError, 400, "Transaction Failed", {"result_codes": result_codes}
    )

    with pytest.raises(SubmissionError, match="Transaction Failed") as exc_info:
        client.submit(envelope)

    assert exc_info.value.result_codes == result_codes
    assert isinstance(exc_info.value.__cause__, BadRequestError)


def test_submit_connection_error_raises(client, server, envelope):
    """Test a transport failure during submission becomes SubmissionError."""
    server.submit_transaction.side_effect = ConnectionError("timed out")

    with pytest.raises(SubmissionError, match="timed out") as exc_info:
        client.submit(envelope)

    assert exc_info.value.result_codes is None
