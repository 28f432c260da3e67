"""
Error types raised by the interest payer.

Startup problems raise ConfigError and end the process. Everything raised
while a payment tick is running (TransportError, DecodeError, SubmitError) is
caught by the interest loop and reported; the loop keeps going.
"""


class InterestPayerError(Exception):
    """Base class for all interest payer errors."""


class ConfigError(InterestPayerError):
    """Invalid or missing startup configuration (keypair, vault, duration)."""


class TransportError(InterestPayerError):
    """RPC endpoint unreachable, timed out, or returned a malformed/error response."""


class DecodeError(InterestPayerError):
    """Vault account is missing or its payload is shorter than the layout."""


class AccountNotFoundError(DecodeError):
    """The requested account does not exist on-chain."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Account {address} not found")


class SubmitError(InterestPayerError):
    """Transaction rejected, expired, or failed on-chain."""
