"""
pre_auth_transaction.py
~~~~~~~~~~~~~~~~~~~~~~~

Builders for the two transactions of the pre-authorization pattern:

* the *future* payment, built now but submitted later without a signature;
* the set-options transaction that registers the future transaction's hash
  as a signer on the sender account.
"""
import logging
from typing import Optional, Union

from stellar_sdk import Account, Asset, Keypair, TransactionBuilder, TransactionEnvelope

from stellar_preauth.config import NetworkConfig

logger = logging.getLogger(__name__)

# max_time 0 means the transaction never expires
TIMEOUT_INFINITE = 0


def generate_keypair() -> Keypair:
    """Generate a new random keypair."""
    return Keypair.random()


def build_future_payment(
    sender_account: Account,
    destination: str,
    config: NetworkConfig,
    amount: Optional[str] = None,
) -> TransactionEnvelope:
    """
    Build the unsigned payment that will later be submitted as a pre-authorized transaction.

    The sender's sequence number is bumped once here and once more by the builder,
    so the payment uses ``current + 2``. That leaves ``current + 1`` free for the
    transaction that adds the pre-auth signer.

    Args:
        sender_account (Account): The sender, loaded with its current sequence number.
            Its sequence number is advanced by two.
        destination (str): The receiving account.
        config (NetworkConfig): Network passphrase and base fee.
        amount (str): Amount of XLM to send. Defaults to ``config.payment_amount``.

    Returns:
        TransactionEnvelope: The unsigned future transaction.
    """
    amount = amount or config.payment_amount

    sender_account.increment_sequence_number()
    logger.info("Sender sequence number incremented to: %s", sender_account.sequence)

    return (
        TransactionBuilder(
            source_account=sender_account,
            network_passphrase=config.network_passphrase,
            base_fee=config.base_fee,
        )
        .append_payment_op(
            destination=destination,
            asset=Asset.native(),
            amount=amount,
            source=sender_account.account.account_id,
        )
        .add_time_bounds(0, TIMEOUT_INFINITE)
        .build()
    )


def build_add_signer(
    sender_account: Account,
    pre_auth_hash: Union[bytes, str],
    config: NetworkConfig,
    weight: int = 1,
) -> TransactionEnvelope:
    """
    Build the unsigned set-options transaction that adds a pre-auth signer to the sender.

    Args:
        sender_account (Account): The sender, loaded with its current sequence number.
        pre_auth_hash (bytes | str): Hash of the future transaction, raw or hex encoded.
        config (NetworkConfig): Network passphrase and base fee.
        weight (int): Signer weight.

    Returns:
        TransactionEnvelope: The unsigned transaction; the caller signs it with the sender key.
    """
    return (
        TransactionBuilder(
            source_account=sender_account,
            network_passphrase=config.network_passphrase,
            base_fee=config.base_fee,
        )
        .add_time_bounds(0, TIMEOUT_INFINITE)
        .append_pre_auth_tx_signer(pre_auth_tx_hash=pre_auth_hash, weight=weight)
        .build()
    )
