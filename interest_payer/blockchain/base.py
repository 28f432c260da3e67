"""
Abstract base classes for chain access.

The interest loop only needs two reads from the chain: raw account data and
the latest blockhash. Keeping them behind an interface lets tests and other
RPC providers stand in for the Solana JSON-RPC client.
"""

from abc import ABC, abstractmethod
from enum import Enum

from solders.hash import Hash


class BlockchainType(str, Enum):
    """Supported blockchain types."""
    SOLANA = "solana"


class ChainReader(ABC):
    """
    Abstract base class for chain reads.

    Implementations must not cache between calls: every call goes to the
    chain. Failures are raised as TransportError, a missing account as
    AccountNotFoundError.
    """

    @property
    @abstractmethod
    def chain_type(self) -> BlockchainType:
        """Return the blockchain type."""
        pass

    @abstractmethod
    async def connect(self) -> None:
        """Establish connection to the RPC endpoint."""
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the RPC connection."""
        pass

    @abstractmethod
    async def get_account(self, address: str) -> bytes:
        """Fetch raw account data."""
        pass

    @abstractmethod
    async def get_latest_blockhash(self) -> Hash:
        """Fetch the most recent blockhash accepted by the chain."""
        pass

    async def __aenter__(self) -> "ChainReader":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()
