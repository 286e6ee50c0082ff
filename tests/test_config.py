"""
test_config.py — Tests for environment configuration
"""

import logging
import os

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from asset import config
from asset.config import ConfigError, get_var, load_env


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test from an empty directory with a fresh load cache."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ASSET_TEST_NODE_URL", raising=False)
    monkeypatch.delenv("ASSET_TEST_CHAIN_ID", raising=False)
    config._load_default_env.cache_clear()
    yield
    config._load_default_env.cache_clear()
    # values loaded from .env files bypass monkeypatch
    for name in ("ASSET_TEST_NODE_URL", "ASSET_TEST_CHAIN_ID"):
        os.environ.pop(name, None)


class TestGetVar:

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("ASSET_TEST_NODE_URL", "https://node.example")
        assert get_var("ASSET_TEST_NODE_URL") == "https://node.example"

    def test_missing_raises(self):
        with pytest.raises(ConfigError) as exc_info:
            get_var("ASSET_TEST_NODE_URL")
        assert exc_info.value.name == "ASSET_TEST_NODE_URL"
        assert "ASSET_TEST_NODE_URL" in str(exc_info.value)

    def test_missing_is_key_error(self):
        with pytest.raises(KeyError):
            get_var("ASSET_TEST_NODE_URL")

    def test_missing_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="asset.config"):
            with pytest.raises(ConfigError):
                get_var("ASSET_TEST_NODE_URL")
        assert "ASSET_TEST_NODE_URL" in caplog.text

    def test_default(self):
        assert get_var("ASSET_TEST_NODE_URL", "fallback") == "fallback"
        assert get_var("ASSET_TEST_NODE_URL", None) is None

    def test_empty_value_is_a_value(self, monkeypatch):
        monkeypatch.setenv("ASSET_TEST_NODE_URL", "")
        assert get_var("ASSET_TEST_NODE_URL", "fallback") == ""

    def test_reads_dotenv_from_cwd(self, tmp_path):
        (tmp_path / ".env").write_text("ASSET_TEST_NODE_URL=http://from-file\n")
        assert get_var("ASSET_TEST_NODE_URL") == "http://from-file"

    def test_process_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("ASSET_TEST_NODE_URL=http://from-file\n")
        monkeypatch.setenv("ASSET_TEST_NODE_URL", "http://from-process")
        assert get_var("ASSET_TEST_NODE_URL") == "http://from-process"


class TestLoadEnv:

    def test_explicit_path(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("ASSET_TEST_CHAIN_ID=testnet\n")
        assert load_env(env_file) is True
        assert get_var("ASSET_TEST_CHAIN_ID") == "testnet"

    def test_missing_file(self, tmp_path):
        assert load_env(tmp_path / "nope.env") is False

    def test_override(self, tmp_path, monkeypatch):
        env_file = tmp_path / "custom.env"
        env_file.write_text("ASSET_TEST_CHAIN_ID=from-file\n")
        monkeypatch.setenv("ASSET_TEST_CHAIN_ID", "from-process")

        load_env(env_file)
        assert get_var("ASSET_TEST_CHAIN_ID") == "from-process"

        load_env(env_file, override=True)
        assert get_var("ASSET_TEST_CHAIN_ID") == "from-file"
