"""
stellar_preauth

Pre-authorized transactions on the Stellar test network: build a payment now,
register its hash as a signer, and submit it later without a signature.
"""

from .account.account_snapshot import AccountSnapshot
from .client import HorizonClient
from .config import NETWORK_PRESETS, NetworkConfig
from .errors import (
    AccountLookupError,
    FaucetError,
    PreAuthError,
    SubmissionError,
    describe_error,
)
from .faucet import Friendbot
from .logger import configure_logging
from .runner import run
from .transaction.pre_auth_transaction import (
    build_add_signer,
    build_future_payment,
    generate_keypair,
)
from .transaction.transaction_response import TransactionResponse

__version__ = "0.1.0"
__all__ = [
    # Core classes
    "HorizonClient",
    "Friendbot",
    "NetworkConfig",
    "NETWORK_PRESETS",
    "AccountSnapshot",
    "TransactionResponse",
    # Operations
    "generate_keypair",
    "build_future_payment",
    "build_add_signer",
    "run",
    "configure_logging",
    # Errors
    "PreAuthError",
    "FaucetError",
    "AccountLookupError",
    "SubmissionError",
    "describe_error",
]
