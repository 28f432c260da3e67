"""
Interest payer test configuration.

Shared fixtures: a payer keypair, vault addresses, a raw vault account and a
fake chain reader that stands in for the Solana RPC.
"""

import json
import os
import sys
from types import SimpleNamespace
from unittest.mock import AsyncMock

# Add project root to path FIRST
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from solders.hash import Hash
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from interest_payer.core.errors import AccountNotFoundError


class FakeReader:
    """In-memory ChainReader with an AsyncMock RPC client."""

    def __init__(self, account=None, blockhash=None, account_error=None, blockhash_error=None):
        self.account = account
        self.blockhash = blockhash or Hash.new_unique()
        self.account_error = account_error
        self.blockhash_error = blockhash_error
        self.client = make_client()
        self.account_calls = []
        self.blockhash_calls = 0
        self.opened = 0
        self.closed = 0

    async def __aenter__(self):
        self.opened += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed += 1

    async def get_account(self, address):
        self.account_calls.append(address)
        if self.account_error is not None:
            raise self.account_error
        if self.account is None:
            raise AccountNotFoundError(address)
        return self.account

    async def get_latest_blockhash(self):
        self.blockhash_calls += 1
        if self.blockhash_error is not None:
            raise self.blockhash_error
        return self.blockhash


def make_client(status_err=None):
    """AsyncMock AsyncClient whose send_transaction echoes the tx signature."""
    client = AsyncMock()

    async def _send(tx, opts=None):
        return SimpleNamespace(value=tx.signatures[0])

    client.send_transaction.side_effect = _send
    client.confirm_transaction.return_value = SimpleNamespace(
        value=[SimpleNamespace(err=status_err)]
    )
    return client


@pytest.fixture
def payer():
    return Keypair()


@pytest.fixture
def vault():
    return Pubkey.new_unique()


@pytest.fixture
def mint():
    return Pubkey.new_unique()


@pytest.fixture
def token_vault_ac():
    return Pubkey.new_unique()


@pytest.fixture
def vault_account(mint, token_vault_ac):
    """200-byte vault account: tag, mint at 8..40, token account at 40..72."""
    tag = bytes([211, 8, 232, 43, 2, 152, 117, 119])
    data = tag + bytes(mint) + bytes(token_vault_ac)
    return data + bytes(200 - len(data))


@pytest.fixture
def reader(vault_account):
    return FakeReader(account=vault_account)


@pytest.fixture
def keypair_file(tmp_path, payer):
    path = tmp_path / "payer.json"
    path.write_text(json.dumps(list(bytes(payer))), encoding="utf-8")
    return path
