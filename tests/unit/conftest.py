import pytest

from stellar_preauth.config import NetworkConfig

CONFIG_ENV_VARS = (
    "NETWORK",
    "HORIZON_URL",
    "FRIENDBOT_URL",
    "NETWORK_PASSPHRASE",
    "BASE_FEE",
    "PAYMENT_AMOUNT",
    "REQUEST_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every configuration variable so defaults apply."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def network_config(clean_env):
    """A testnet config built from defaults."""
    return NetworkConfig()
