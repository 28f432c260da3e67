"""
Tests for core configuration helpers

Tests cover:
- Cluster alias resolution
- Solana CLI config loading and fallback
- Keypair loading
"""

import json

import base58
import pytest
from solders.keypair import Keypair

from interest_payer.core.cli_config import (
    DEFAULT_JSON_RPC_URL,
    DEFAULT_KEYPAIR_PATH,
    CliConfig,
    load_cli_config,
)
from interest_payer.core.errors import ConfigError
from interest_payer.core.keypair import get_keypair_from_base58, get_keypair_from_path
from interest_payer.core.networks import CLUSTERS, resolve_network


class TestResolveNetwork:
    """Test URL alias resolution."""

    @pytest.mark.parametrize("alias", ["devnet", "dev", "d"])
    def test_devnet(self, alias):
        assert resolve_network(alias) == "https://api.devnet.solana.com"

    @pytest.mark.parametrize("alias", ["mainnet", "main", "m", "mainnet-beta"])
    def test_mainnet(self, alias):
        assert resolve_network(alias) == "https://api.mainnet-beta.solana.com"

    @pytest.mark.parametrize("alias", ["localnet", "localhost", "l"])
    def test_localnet(self, alias):
        assert resolve_network(alias) == "http://localhost:8899"

    def test_literal_url_passes_through(self):
        assert resolve_network("http://my.node:8899") == "http://my.node:8899"

    def test_unknown_string_passes_through(self):
        assert resolve_network("testnet-ish") == "testnet-ish"

    def test_idempotent(self):
        for value in list(CLUSTERS) + ["http://my.node:8899", "whatever"]:
            assert resolve_network(resolve_network(value)) == resolve_network(value)


class TestCliConfig:
    """Test Solana CLI config loading."""

    def test_loads_values(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text(
            "---\n"
            "json_rpc_url: https://api.devnet.solana.com\n"
            "websocket_url: ''\n"
            "keypair_path: /home/ops/.config/solana/payer.json\n"
            "commitment: confirmed\n",
            encoding="utf-8",
        )
        config = load_cli_config(path)
        assert config.json_rpc_url == "https://api.devnet.solana.com"
        assert config.keypair_path == "/home/ops/.config/solana/payer.json"

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("keypair_path: /tmp/k.json\n", encoding="utf-8")
        config = load_cli_config(path)
        assert config.json_rpc_url == DEFAULT_JSON_RPC_URL
        assert config.keypair_path == "/tmp/k.json"

    def test_missing_file_falls_back(self, tmp_path, capsys, caplog):
        path = tmp_path / "missing.yml"
        config = load_cli_config(path)

        assert config == CliConfig()
        assert config.keypair_path == DEFAULT_KEYPAIR_PATH
        assert f"Failed to load config file: {path}" in capsys.readouterr().out
        assert "using defaults" in caplog.text

    def test_unparseable_file_falls_back(self, tmp_path, capsys):
        path = tmp_path / "config.yml"
        path.write_text("json_rpc_url: [unclosed\n", encoding="utf-8")
        assert load_cli_config(path) == CliConfig()
        assert "Failed to load config file" in capsys.readouterr().out

    def test_non_mapping_falls_back(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        assert load_cli_config(path) == CliConfig()


class TestKeypair:
    """Test keypair loading."""

    def test_from_path(self, keypair_file, payer):
        assert get_keypair_from_path(str(keypair_file)).pubkey() == payer.pubkey()

    def test_tilde_expansion(self, tmp_path, monkeypatch, payer):
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "id.json").write_text(json.dumps(list(bytes(payer))), encoding="utf-8")
        assert get_keypair_from_path("~/id.json").pubkey() == payer.pubkey()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Could not read keypair"):
            get_keypair_from_path(str(tmp_path / "nope.json"))

    def test_wrong_length(self, tmp_path):
        path = tmp_path / "short.json"
        path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        with pytest.raises(ConfigError, match="64 bytes"):
            get_keypair_from_path(str(path))

    def test_not_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            get_keypair_from_path(str(path))

    def test_from_base58(self):
        keypair = Keypair()
        secret = base58.b58encode(bytes(keypair)).decode("utf-8")
        assert get_keypair_from_base58(secret).pubkey() == keypair.pubkey()

    def test_bad_base58(self):
        with pytest.raises(ConfigError):
            get_keypair_from_base58("0OIl")
