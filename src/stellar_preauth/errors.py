"""
errors.py
~~~~~~~~~

Exceptions raised by the pre-authorized transaction demo, and a helper that
renders them for the log.
"""
from typing import Any, Optional


class PreAuthError(Exception):
    """Base class for all errors raised by stellar_preauth."""


class FaucetError(PreAuthError):
    """
    The faucet could not fund an account.

    Attributes:
        status_code (Optional[int]): HTTP status returned by the faucet, if any.
        detail (Any): Problem document returned by the faucet, if any.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class AccountLookupError(PreAuthError):
    """Horizon could not return the requested account."""

    def __init__(self, message: str, public_key: str) -> None:
        super().__init__(message)
        self.public_key = public_key


class SubmissionError(PreAuthError):
    """
    Horizon rejected a submitted transaction.

    Attributes:
        result_codes (Optional[dict]): ``extras.result_codes`` from the Horizon problem response.
        result_xdr (Optional[str]): Base64 ``TransactionResult`` XDR, when Horizon returned one.
    """

    def __init__(
        self,
        message: str,
        result_codes: Optional[dict] = None,
        result_xdr: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.result_codes = result_codes
        self.result_xdr = result_xdr


def describe_error(exc: BaseException) -> str:
    """
    Render an exception for the log, including any detail the network sent back.

    Args:
        exc (BaseException): The exception to describe.

    Returns:
        str: A single-line description.
    """
    message = str(exc) or type(exc).__name__

    if isinstance(exc, SubmissionError) and exc.result_codes:
        return f"{message} (result codes: {exc.result_codes})"
    if isinstance(exc, FaucetError) and exc.detail:
        return f"{message} (faucet response: {exc.detail})"
    return message
