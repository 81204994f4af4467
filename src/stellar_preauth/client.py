"""
client.py
~~~~~~~~~

Thin wrapper around the Horizon server used by the demo. It loads accounts,
reads account records and submits transactions, translating SDK errors into
stellar_preauth errors.
"""
import logging
from typing import Optional

from stellar_sdk import Account, Server, TransactionEnvelope
from stellar_sdk.exceptions import BaseHorizonError, BaseRequestError

from stellar_preauth.account.account_snapshot import AccountSnapshot
from stellar_preauth.config import NetworkConfig
from stellar_preauth.errors import AccountLookupError, SubmissionError
from stellar_preauth.transaction.transaction_response import TransactionResponse

logger = logging.getLogger(__name__)


class HorizonClient:
    """
    Horizon client bound to one network.

    Example:
        >>> client = HorizonClient(NetworkConfig())
        >>> snapshot = client.account_detail(public_key)
        >>> print(snapshot.to_display())
    """

    def __init__(self, config: NetworkConfig, server: Optional[Server] = None) -> None:
        """
        Args:
            config (NetworkConfig): Network settings.
            server (Server): Optional pre-built Horizon server; one is created for
                ``config.horizon_url`` if omitted.
        """
        self.config = config
        self.server = server or Server(horizon_url=config.horizon_url)

    def load_account(self, public_key: str) -> Account:
        """
        Load an account with its current sequence number, ready for a transaction builder.

        Raises:
            AccountLookupError: If Horizon does not return the account.
        """
        logger.debug("Loading account %s", public_key)
        try:
            return self.server.load_account(public_key)
        except BaseRequestError as exc:
            raise AccountLookupError(f"Failed to load account {public_key}: {exc}", public_key) from exc

    def account_detail(self, public_key: str) -> AccountSnapshot:
        """
        Fetch the Horizon account record.

        Args:
            public_key (str): The account to query.

        Returns:
            AccountSnapshot: Sequence number, balances and signers of the account.

        Raises:
            AccountLookupError: If Horizon does not return the account.
        """
        logger.debug("Fetching account record for %s", public_key)
        try:
            record = self.server.accounts().account_id(public_key).call()
        except BaseRequestError as exc:
            raise AccountLookupError(f"Failed to fetch account {public_key}: {exc}", public_key) from exc
        return AccountSnapshot.from_record(record)

    def submit(self, envelope: TransactionEnvelope) -> TransactionResponse:
        """
        Submit a transaction envelope to Horizon and wait for it to be applied.

        Args:
            envelope (TransactionEnvelope): The transaction to submit. It is sent as-is,
                so a pre-authorized transaction may carry no signatures.

        Returns:
            TransactionResponse: The applied transaction.

        Raises:
            SubmissionError: If Horizon rejects the transaction or cannot be reached.
        """
        logger.debug("Submitting transaction %s", envelope.hash_hex())
        try:
            data = self.server.submit_transaction(envelope)
        except BaseHorizonError as exc:
            extras = exc.extras or {}
            raise SubmissionError(
                f"Transaction {envelope.hash_hex()} was rejected: {exc.title or exc.status}",
                result_codes=extras.get("result_codes"),
                result_xdr=exc.result_xdr,
            ) from exc
        except BaseRequestError as exc:
            raise SubmissionError(f"Failed to submit transaction {envelope.hash_hex()}: {exc}") from exc
        return TransactionResponse.from_horizon(data)
