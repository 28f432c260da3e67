"""
Solana chain reader.

Wraps solana-py's AsyncClient. A reader is opened for one payment tick and
closed at the end of it; nothing read through it outlives the tick.
"""

import logging
from typing import Optional

import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import RPCException
from solders.hash import Hash
from solders.pubkey import Pubkey

from interest_payer.blockchain.base import BlockchainType, ChainReader
from interest_payer.core.config import settings
from interest_payer.core.errors import AccountNotFoundError, TransportError

logger = logging.getLogger(__name__)

# Errors solana-py lets through for a dead or misbehaving endpoint
RPC_ERRORS = (SolanaRpcException, RPCException, httpx.HTTPError, OSError, ValueError)


class SolanaChainReader(ChainReader):
    """Solana JSON-RPC chain reader."""

    def __init__(self, rpc_url: str):
        self._rpc_url = rpc_url
        self._client: Optional[AsyncClient] = None

    @property
    def chain_type(self) -> BlockchainType:
        return BlockchainType.SOLANA

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    @property
    def client(self) -> AsyncClient:
        if self._client is None:
            raise RuntimeError("SolanaChainReader is not connected")
        return self._client

    async def connect(self) -> None:
        if self._client is None:
            logger.debug(f"solana: opening RPC connection to {self._rpc_url}")
            self._client = AsyncClient(self._rpc_url, **settings.rpc_timeout_kwargs)

    async def disconnect(self) -> None:
        if self._client:
            await self._client.close()
            self._client = None

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            await self.connect()
        return self._client

    async def get_account(self, address: str) -> bytes:
        client = await self._get_client()
        pubkey = Pubkey.from_string(address)
        try:
            response = await client.get_account_info(pubkey)
        except RPC_ERRORS as e:
            raise TransportError(f"getAccountInfo {address} failed: {e}") from e

        if response.value is None:
            raise AccountNotFoundError(address)
        return bytes(response.value.data)

    async def get_latest_blockhash(self) -> Hash:
        client = await self._get_client()
        try:
            response = await client.get_latest_blockhash()
        except RPC_ERRORS as e:
            raise TransportError(f"getLatestBlockhash failed: {e}") from e
        return response.value.blockhash
