from interest_payer.blockchain.base import (
    BlockchainType,
    ChainReader,
)
from interest_payer.blockchain.chains.solana import SolanaChainReader

__all__ = [
    "BlockchainType",
    "ChainReader",
    "SolanaChainReader",
]
