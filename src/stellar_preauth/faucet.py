"""
faucet.py
~~~~~~~~~

Client for Friendbot, the test-network faucet that creates and funds new
accounts.
"""
import logging
from typing import Any, Dict, Optional

import requests

from stellar_preauth.errors import FaucetError

logger = logging.getLogger(__name__)


class Friendbot:
    """
    Funds test-network accounts through a Friendbot endpoint.

    Example:
        >>> faucet = Friendbot("https://friendbot.stellar.org")
        >>> faucet.fund_account(keypair.public_key)
    """

    def __init__(
        self,
        url: str,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            url (str): Friendbot endpoint.
            timeout (int): Request timeout in seconds.
            session (requests.Session): Optional session to reuse.
        """
        self.url = url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fund_account(self, public_key: str) -> Dict[str, Any]:
        """
        Ask Friendbot to create and fund ``public_key``.

        Args:
            public_key (str): The account to fund (``G...`` StrKey).

        Returns:
            dict: Friendbot's JSON response (the funding transaction record).

        Raises:
            FaucetError: If the request fails, Friendbot answers with an error status,
                or the body is not JSON.
        """
        logger.debug("Requesting funds from %s for %s", self.url, public_key)
        try:
            response = self.session.get(
                self.url,
                params={"addr": public_key},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise FaucetError(f"Failed to reach faucet at {self.url}: {exc}") from exc

        if not response.ok:
            raise FaucetError(
                f"Faucet refused to fund {public_key} (HTTP {response.status_code})",
                status_code=response.status_code,
                detail=_problem_detail(response),
            )

        try:
            return response.json()
        except ValueError as exc:
            raise FaucetError(
                f"Faucet returned a non-JSON response for {public_key}",
                status_code=response.status_code,
            ) from exc


def _problem_detail(response: requests.Response) -> Any:
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict):
        return body.get("detail") or body.get("title") or body
    return body
