"""
Runtime Configuration Unit Tests
Tests for merkletree/config/runtime.py
"""
import logging

import pytest

from merkletree.config import (
    MerkleSettings,
    get_default_config,
    set_default_config,
    setup_logging,
)
from merkletree.config.runtime import LOG_FORMAT
from merkletree.crypto.hashing import keccak256, sha256
from merkletree.merkle import build_tree, by_position, sort_by_digest
from merkletree.schemas.errors import ConfigurationException

from fixtures import make_items


_ENV_VARS = [
    "MERKLETREE_HASH",
    "MERKLETREE_ORDERING",
    "MERKLETREE_DIGEST_SIZE",
    "MERKLETREE_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestMerkleSettings:
    """Tests for loading settings."""

    def test_defaults(self, clean_env):
        settings = MerkleSettings.from_env()

        assert settings.hash_algorithm == "keccak256"
        assert settings.pair_ordering == "sorted"
        assert settings.digest_size == 32

    def test_from_env(self, clean_env):
        clean_env.setenv("MERKLETREE_HASH", "sha256")
        clean_env.setenv("MERKLETREE_ORDERING", "positional")
        clean_env.setenv("MERKLETREE_LOG_LEVEL", "DEBUG")

        settings = MerkleSettings.from_env()

        assert settings.hash_algorithm == "sha256"
        assert settings.pair_ordering == "positional"
        assert settings.log_level == "DEBUG"

    def test_invalid_digest_size_env(self, clean_env):
        clean_env.setenv("MERKLETREE_DIGEST_SIZE", "thirty-two")

        with pytest.raises(ConfigurationException):
            MerkleSettings.from_env()

    def test_from_dict_nested_section(self):
        settings = MerkleSettings.from_dict(
            {"merkle": {"hash_algorithm": "sha3_256"}, "extra": {"team": "audit"}}
        )

        assert settings.hash_algorithm == "sha3_256"
        assert settings.pair_ordering == "sorted"
        assert settings.extra == {"team": "audit"}

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "merkle.yaml"
        path.write_text("merkle:\n  hash_algorithm: sha256\n  pair_ordering: positional\n")

        settings = MerkleSettings.from_yaml(path)

        assert settings.hash_algorithm == "sha256"
        assert settings.pair_ordering == "positional"

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            MerkleSettings.from_yaml(tmp_path / "absent.yaml")

    def test_from_yaml_empty_section_uses_defaults(self, tmp_path):
        path = tmp_path / "merkle.yaml"
        path.write_text("merkle:\nextra:\n")

        settings = MerkleSettings.from_yaml(path)

        assert settings == MerkleSettings()

    def test_with_env_overrides(self, clean_env):
        base = MerkleSettings(hash_algorithm="sha256")
        clean_env.setenv("MERKLETREE_ORDERING", "positional")

        overridden = base.with_env_overrides()

        assert overridden.hash_algorithm == "sha256"
        assert overridden.pair_ordering == "positional"
        assert base.pair_ordering == "sorted"

    def test_to_dict_round_trip(self):
        settings = MerkleSettings(hash_algorithm="sha256", digest_size=32)

        assert MerkleSettings.from_dict(settings.to_dict()) == settings


class TestToTreeConfig:
    """Tests for resolving settings into a TreeConfig."""

    def test_default_resolution(self):
        config = MerkleSettings().to_tree_config()

        assert config.hash is keccak256
        assert config.order is sort_by_digest

    def test_custom_resolution_builds_tree(self):
        config = MerkleSettings(hash_algorithm="sha256", pair_ordering="positional").to_tree_config()
        items = make_items(2)

        tree = build_tree(items, config)

        assert config.order is by_position
        assert tree.root == sha256(items[0].digest() + items[1].digest())

    def test_unknown_hash(self):
        with pytest.raises(ConfigurationException):
            MerkleSettings(hash_algorithm="crc32").to_tree_config()


class TestDefaultConfig:
    def test_get_default_loads_once(self, clean_env, reset_default_config):
        first = get_default_config()

        assert get_default_config() is first

    def test_set_default(self, reset_default_config):
        custom = MerkleSettings(pair_ordering="positional")
        set_default_config(custom)

        assert get_default_config() is custom


class TestSetupLogging:
    """Tests for logging configuration."""

    @pytest.fixture
    def basic_config_calls(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        return calls

    def test_uses_settings_log_level(self, basic_config_calls):
        MerkleSettings(log_level="DEBUG").setup_logging()

        assert len(basic_config_calls) == 1
        assert basic_config_calls[0]["level"] == logging.DEBUG
        assert basic_config_calls[0]["format"] == LOG_FORMAT

    def test_unknown_level_falls_back_to_info(self, basic_config_calls):
        setup_logging("chatty")

        assert basic_config_calls[0]["level"] == logging.INFO

    def test_log_file_adds_file_handler(self, basic_config_calls, tmp_path):
        log_file = tmp_path / "merkle.log"

        MerkleSettings(log_level="warning").setup_logging(str(log_file))

        handlers = basic_config_calls[0]["handlers"]
        try:
            assert basic_config_calls[0]["level"] == logging.WARNING
            assert any(isinstance(h, logging.FileHandler) for h in handlers)
        finally:
            for handler in handlers:
                if isinstance(handler, logging.FileHandler):
                    handler.close()
