"""
AccountSnapshot class.
"""
from typing import Any, Dict, List, Optional, Union

from stellar_sdk import StrKey

PRE_AUTH_TX_SIGNER_TYPE = "preauth_tx"


class AccountSnapshot:
    """
    A point-in-time view of an account as reported by Horizon.

    Only the fields the demo reports on are kept: the sequence number,
    the balances and the signers.
    """

    def __init__(
        self,
        account_id: str,
        sequence: int,
        balances: Optional[List[Dict[str, Any]]] = None,
        signers: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        """
        Initialize a new AccountSnapshot instance.
        Args:
            account_id (str): The account's public key.
            sequence (int): The account's current sequence number.
            balances (list[dict]): Horizon balance entries.
            signers (list[dict]): Horizon signer entries (``key``, ``type``, ``weight``).
        """
        self.account_id = account_id
        self.sequence = sequence
        self.balances = balances or []
        self.signers = signers or []

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "AccountSnapshot":
        """
        Build a snapshot from a Horizon account record.

        Args:
            record (dict): The JSON body of ``GET /accounts/{account_id}``.

        Returns:
            AccountSnapshot: The parsed snapshot.
        """
        return cls(
            account_id=record.get("account_id") or record.get("id", ""),
            sequence=int(record["sequence"]),
            balances=list(record.get("balances", [])),
            signers=list(record.get("signers", [])),
        )

    @property
    def balance(self) -> Optional[str]:
        """The native (XLM) balance, or the first listed balance if there is no native entry."""
        for entry in self.balances:
            if entry.get("asset_type") == "native":
                return entry.get("balance")
        if self.balances:
            return self.balances[0].get("balance")
        return None

    def to_display(self, show_signers: bool = False) -> Dict[str, Any]:
        """
        Summarize the account for the log.

        Args:
            show_signers (bool): Whether to include the signer list.

        Returns:
            dict: ``sequence`` and ``balance``, plus ``signers`` when requested.
        """
        summary: Dict[str, Any] = {
            "sequence": self.sequence,
            "balance": self.balance,
        }
        if show_signers:
            summary["signers"] = self.signers
        return summary

    def has_pre_auth_signer(self, tx_hash: Union[bytes, str]) -> bool:
        """
        Check whether a pre-authorized transaction hash is registered as a signer.

        Args:
            tx_hash (bytes | str): The transaction hash, raw or hex encoded.

        Returns:
            bool: True if the account lists the matching ``preauth_tx`` signer.
        """
        if isinstance(tx_hash, str):
            tx_hash = bytes.fromhex(tx_hash)
        expected_key = StrKey.encode_pre_auth_tx(tx_hash)
        return any(
            signer.get("type") == PRE_AUTH_TX_SIGNER_TYPE and signer.get("key") == expected_key
            for signer in self.signers
        )

    def __repr__(self) -> str:
        return f"AccountSnapshot(account_id={self.account_id!r}, sequence={self.sequence})"
