from dataclasses import dataclass

import pytest
from dotenv import load_dotenv

from stellar_preauth.client import HorizonClient
from stellar_preauth.config import NetworkConfig
from stellar_preauth.faucet import Friendbot

load_dotenv(override=True)


@dataclass
class IntegrationTestEnv:
    """Live network clients shared by the integration tests."""
    config: NetworkConfig
    client: HorizonClient
    faucet: Friendbot


@pytest.fixture
def env():
    """Integration test environment with client and faucet for the configured test network."""
    config = NetworkConfig()
    faucet = Friendbot(config.friendbot_url, timeout=config.request_timeout)
    yield IntegrationTestEnv(config=config, client=HorizonClient(config), faucet=faucet)
    faucet.session.close()
