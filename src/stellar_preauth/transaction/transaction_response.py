"""
transaction_response.py
~~~~~~~~~~~~~~~~~~~~~~~

Parsed body of a successful Horizon ``POST /transactions`` call.
"""
from typing import Any, Dict, Optional


class TransactionResponse:
    """
    The transaction record Horizon returns once a submitted transaction is applied.

    Keeps the hash, ledger and XDR fields of the ``POST /transactions`` body,
    plus the whole body in ``raw``.
    """

    def __init__(self) -> None:
        """
        Start with an empty record; use ``from_horizon`` to fill it.
        """
        self.hash: str = ""
        self.ledger: Optional[int] = None
        self.successful: bool = False
        self.envelope_xdr: Optional[str] = None
        self.result_xdr: Optional[str] = None
        self.raw: Dict[str, Any] = {}

    @classmethod
    def from_horizon(cls, data: Dict[str, Any]) -> "TransactionResponse":
        """
        Build a response from the JSON body Horizon returns for ``POST /transactions``.

        Args:
            data (dict): The Horizon transaction record.

        Returns:
            TransactionResponse: The parsed response.
        """
        response = cls()
        response.hash = data.get("hash", "")
        ledger = data.get("ledger")
        response.ledger = int(ledger) if ledger is not None else None
        # Horizon only answers 200 for applied transactions; older versions omit the flag
        response.successful = bool(data.get("successful", True))
        response.envelope_xdr = data.get("envelope_xdr")
        response.result_xdr = data.get("result_xdr")
        response.raw = data
        return response

    def __repr__(self) -> str:
        return (
            f"TransactionResponse(hash={self.hash!r}, ledger={self.ledger}, "
            f"successful={self.successful})"
        )
