"""
config.py
~~~~~~~~~

Network configuration for the pre-authorized transaction demo.

Values come from the environment (optionally populated from a local ``.env``
file) and fall back to the Stellar testnet endpoints.
"""
import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, Tuple

from dotenv import load_dotenv
from stellar_sdk import Network

NETWORK_PRESETS: Dict[str, Tuple[str, str, str]] = {
    "testnet": (
        "https://horizon-testnet.stellar.org",
        "https://friendbot.stellar.org",
        Network.TESTNET_NETWORK_PASSPHRASE,
    ),
    "futurenet": (
        "https://horizon-futurenet.stellar.org",
        "https://friendbot-futurenet.stellar.org",
        Network.FUTURENET_NETWORK_PASSPHRASE,
    ),
}

DEFAULT_NETWORK = "testnet"

# amounts are int64 stroops (1 XLM = 10**7 stroops)
AMOUNT_DECIMAL_PLACES = 7
MAX_AMOUNT = Decimal("922337203685.4775807")


def _network_name(raw: str) -> str:
    name = raw.strip().lower()
    if name not in NETWORK_PRESETS:
        known = ", ".join(sorted(NETWORK_PRESETS))
        raise ValueError(f"NETWORK must be one of: {known}, got: '{name}'")
    return name


def _parse_positive_int(env_name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{env_name} must be a valid integer, got: '{raw}'") from exc
    if value <= 0:
        raise ValueError(f"{env_name} must be greater than 0, got: {value}")
    return value


def _parse_amount(env_name: str, raw: str) -> str:
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"{env_name} must be a decimal amount, got: '{raw}'") from exc
    if not value.is_finite() or value <= 0:
        raise ValueError(f"{env_name} must be a positive amount, got: '{raw}'")
    if -value.as_tuple().exponent > AMOUNT_DECIMAL_PLACES:
        raise ValueError(
            f"{env_name} must have at most {AMOUNT_DECIMAL_PLACES} digits after the decimal, got: '{raw}'"
        )
    if value > MAX_AMOUNT:
        raise ValueError(f"{env_name} must be at most {MAX_AMOUNT}, got: '{raw}'")
    return raw.strip()


@dataclass
class NetworkConfig:
    """
    Endpoints and transaction settings used for a demo run.

    Endpoints left empty are filled from the preset named by ``network``.
    """
    network: str = field(default_factory=lambda: os.getenv("NETWORK", DEFAULT_NETWORK))
    horizon_url: str = field(default_factory=lambda: os.getenv("HORIZON_URL", ""))
    friendbot_url: str = field(default_factory=lambda: os.getenv("FRIENDBOT_URL", ""))
    network_passphrase: str = field(default_factory=lambda: os.getenv("NETWORK_PASSPHRASE", ""))
    base_fee: int = field(
        default_factory=lambda: _parse_positive_int("BASE_FEE", os.getenv("BASE_FEE", "100"))
    )
    payment_amount: str = field(
        default_factory=lambda: _parse_amount("PAYMENT_AMOUNT", os.getenv("PAYMENT_AMOUNT", "5000"))
    )
    request_timeout: int = field(
        default_factory=lambda: _parse_positive_int("REQUEST_TIMEOUT", os.getenv("REQUEST_TIMEOUT", "30"))
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    def __post_init__(self) -> None:
        self.network = _network_name(self.network)
        horizon_url, friendbot_url, network_passphrase = NETWORK_PRESETS[self.network]
        self.horizon_url = self.horizon_url or horizon_url
        self.friendbot_url = self.friendbot_url or friendbot_url
        self.network_passphrase = self.network_passphrase or network_passphrase
        self.payment_amount = _parse_amount("PAYMENT_AMOUNT", str(self.payment_amount))

    @classmethod
    def from_env(cls) -> "NetworkConfig":
        """
        Load a ``.env`` file (if any) into the environment and build a config from it.

        Returns:
            NetworkConfig: The resolved configuration.

        Raises:
            ValueError: If NETWORK names an unknown preset or a numeric setting is invalid.
        """
        load_dotenv()
        return cls()
