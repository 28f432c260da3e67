"""
Payer keypair loading.

Keypairs come either from a solana-keygen JSON file (an array of 64 ints) or
from a Base58 encoded secret key held in the environment.
"""

import json
import os

import base58
from solders.keypair import Keypair

from interest_payer.core.errors import ConfigError


def get_keypair_from_path(path: str) -> Keypair:
    """Load a solana-keygen keypair file, expanding a leading ``~``."""
    expanded = os.path.expanduser(path)
    try:
        with open(expanded, encoding="utf-8") as f:
            secret = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Could not read keypair {expanded}: {e}") from e

    if not isinstance(secret, list) or len(secret) != 64:
        raise ConfigError(f"Invalid keypair file {expanded}: expected 64 bytes")
    try:
        return Keypair.from_bytes(bytes(secret))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid keypair file {expanded}: {e}") from e


def get_keypair_from_base58(private_key: str) -> Keypair:
    """Load a keypair from a Base58 encoded 64-byte secret key."""
    try:
        secret_key = base58.b58decode(private_key)
        return Keypair.from_bytes(secret_key)
    except ValueError as e:
        raise ConfigError(f"Invalid payer private key: {e}") from e
