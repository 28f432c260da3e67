DEVNET_URL = "https://api.devnet.solana.com"
MAINNET_URL = "https://api.mainnet-beta.solana.com"
LOCALNET_URL = "http://localhost:8899"

# ── Cluster aliases ────────────────────────────────────────────
CLUSTERS = {
    "devnet": DEVNET_URL,
    "dev": DEVNET_URL,
    "d": DEVNET_URL,
    "mainnet": MAINNET_URL,
    "main": MAINNET_URL,
    "m": MAINNET_URL,
    "mainnet-beta": MAINNET_URL,
    "localnet": LOCALNET_URL,
    "localhost": LOCALNET_URL,
    "l": LOCALNET_URL,
}


def resolve_network(network: str) -> str:
    """Map a cluster alias to its RPC URL; anything else is returned as-is."""
    return CLUSTERS.get(network, network)
