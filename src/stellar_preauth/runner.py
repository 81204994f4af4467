"""
Demonstrates the pre-authorized transaction pattern on the Stellar test network.

1. Generate and fund a sender and a receiver account.
2. Build a future payment from sender to receiver with the sender's sequence number + 2.
3. Add the hash of the future payment as a signer on the sender account.
4. Submit the future payment without signing it.

python -m stellar_preauth
stellar-preauth
"""
import logging
import sys
from typing import Optional, Tuple

from stellar_sdk import Keypair

from stellar_preauth.account.account_snapshot import AccountSnapshot
from stellar_preauth.client import HorizonClient
from stellar_preauth.config import NetworkConfig
from stellar_preauth.errors import describe_error
from stellar_preauth.faucet import Friendbot
from stellar_preauth.logger import configure_logging
from stellar_preauth.transaction.pre_auth_transaction import (
    build_add_signer,
    build_future_payment,
    generate_keypair,
)

logger = logging.getLogger(__name__)


def create_funded_account(
    client: HorizonClient, faucet: Friendbot, label: str
) -> Tuple[Keypair, AccountSnapshot]:
    """
    Generate a keypair, fund it through the faucet and read the new account back.

    Args:
        client (HorizonClient): Horizon client used to read the account.
        faucet (Friendbot): Faucet used to create the account.
        label (str): Name used in the log, e.g. ``"sender"``.

    Returns:
        tuple: The keypair and a snapshot of the funded account.
    """
    keypair = generate_keypair()
    logger.info("Generated %s account: %s", label, keypair.public_key)
    logger.info("Funding account...")
    faucet.fund_account(keypair.public_key)
    snapshot = client.account_detail(keypair.public_key)
    logger.info("%s: %s", label.capitalize(), snapshot.to_display())
    return keypair, snapshot


def create_pre_auth_payment(client: HorizonClient, faucet: Friendbot, config: NetworkConfig) -> None:
    """
    Run the whole demo. Any failure propagates to the caller and stops the remaining steps.
    """
    logger.info("Start script...")

    sender_kp, _ = create_funded_account(client, faucet, "sender")
    receiver_kp, _ = create_funded_account(client, faucet, "receiver")

    logger.info(
        "Building future payment operation. Send %sXLM to receiver...", config.payment_amount
    )
    sender_account = client.load_account(sender_kp.public_key)
    future_tx = build_future_payment(sender_account, receiver_kp.public_key, config)
    logger.info("futureTx XDR: %s", future_tx.to_xdr())

    logger.info("Add the hash of the future tx as a signer on sender ...")
    # Reload so the add-signer tx takes the sequence number skipped by the future tx
    current_sender = client.load_account(sender_kp.public_key)
    add_signer_tx = build_add_signer(current_sender, future_tx.hash(), config)
    add_signer_tx.sign(sender_kp)
    client.submit(add_signer_tx)
    logger.info("signer successfully added.")

    logger.info("Check sender for extra signer...")
    sender_detail = client.account_detail(sender_kp.public_key)
    logger.info("Sender: %s", sender_detail.to_display(show_signers=True))
    if not sender_detail.has_pre_auth_signer(future_tx.hash()):
        logger.warning("Pre-auth signer %s is not listed on the sender yet", future_tx.hash_hex())

    logger.info("Submit pre-authorized tx...")
    # No signature: the hash registered above authorizes this transaction
    response = client.submit(future_tx)
    logger.info("pre-authorized tx successful")
    logger.debug("Pre-authorized tx %s applied in ledger %s", response.hash, response.ledger)

    logger.info("Checking sender account....")
    sender_detail = client.account_detail(sender_kp.public_key)
    logger.info("Sender: %s", sender_detail.to_display(show_signers=True))

    logger.info("Checking receiver account....")
    receiver_detail = client.account_detail(receiver_kp.public_key)
    logger.info("Receiver: %s", receiver_detail.to_display())

    logger.info("End script.")


def run(
    config: NetworkConfig,
    client: Optional[HorizonClient] = None,
    faucet: Optional[Friendbot] = None,
) -> bool:
    """
    Run the demo, logging any error instead of raising it.

    Args:
        config (NetworkConfig): Network settings.
        client (HorizonClient): Optional Horizon client; built from ``config`` if omitted.
        faucet (Friendbot): Optional faucet; built from ``config`` if omitted.

    Returns:
        bool: True if every step completed, False if one failed.
    """
    client = client or HorizonClient(config)
    faucet = faucet or Friendbot(config.friendbot_url, timeout=config.request_timeout)

    try:
        create_pre_auth_payment(client, faucet, config)
    except Exception as exc:
        logger.error("An error occurred: %s", describe_error(exc))
        logger.debug("Run aborted", exc_info=True)
        return False
    return True


def main():
    """
    Load the configuration from the environment, set up logging and run the demo.

    Exits with status 1 if the configuration is invalid or any step fails.
    """
    try:
        config = NetworkConfig.from_env()
    except ValueError as exc:
        configure_logging()
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    configure_logging(config.log_level)
    logger.info("Using %s network at %s", config.network, config.horizon_url)

    if not run(config):
        sys.exit(1)


if __name__ == "__main__":
    main()
