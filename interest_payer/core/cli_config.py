"""
Solana CLI config file support.

The Solana CLI keeps its defaults in ``~/.config/solana/cli/config.yml``.
Only ``json_rpc_url`` and ``keypair_path`` are consumed here. A missing or
broken file is never fatal: the built-in defaults are used instead.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_JSON_RPC_URL = "https://api.mainnet-beta.solana.com"
DEFAULT_KEYPAIR_PATH = "~/.config/solana/id.json"


def default_config_file() -> Optional[Path]:
    """Return the OS-default config file location, or None without a home dir."""
    home = os.path.expanduser("~")
    if home == "~":
        return None
    return Path(home) / ".config" / "solana" / "cli" / "config.yml"


@dataclass
class CliConfig:
    """Subset of the Solana CLI config used by the payer."""
    json_rpc_url: str = DEFAULT_JSON_RPC_URL
    keypair_path: str = DEFAULT_KEYPAIR_PATH

    @classmethod
    def load(cls, path: Path) -> "CliConfig":
        """Parse a config file. Raises OSError / yaml.YAMLError / ValueError."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} is not a mapping")

        config = cls()
        if data.get("json_rpc_url"):
            config.json_rpc_url = str(data["json_rpc_url"])
        if data.get("keypair_path"):
            config.keypair_path = str(data["keypair_path"])
        return config


def load_cli_config(path: Optional[Path] = None) -> CliConfig:
    """Load the Solana CLI config, falling back to defaults on any failure."""
    config_file = path if path is not None else default_config_file()
    if config_file is None:
        return CliConfig()

    try:
        return CliConfig.load(config_file)
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"Failed to load config file: {config_file}")
        logger.warning(f"cli_config: using defaults, could not load {config_file}: {e}")
        return CliConfig()
