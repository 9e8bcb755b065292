"""
Runtime Configuration

Selects the default hash function, pair ordering and logging level for
callers that configure trees from the environment or a file rather than
in code.
"""

from __future__ import annotations

import copy
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from merkletree.merkle.tree_config import TreeConfig
from merkletree.schemas.errors import ConfigurationException

load_dotenv()


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class MerkleSettings:
    """
    Runtime settings for the merkletree library.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    hash_algorithm: str = "keccak256"
    pair_ordering: str = "sorted"
    digest_size: int = 32
    log_level: str = "INFO"
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - MERKLETREE_HASH: Hash algorithm name (keccak256, sha256, sha3_256)
        - MERKLETREE_ORDERING: Pair ordering name (sorted, positional)
        - MERKLETREE_DIGEST_SIZE: Digest length in bytes
        - MERKLETREE_LOG_LEVEL: Log level name
        """
        overrides: dict[str, Any] = {}

        if os.getenv("MERKLETREE_HASH"):
            overrides["hash_algorithm"] = os.getenv("MERKLETREE_HASH")
        if os.getenv("MERKLETREE_ORDERING"):
            overrides["pair_ordering"] = os.getenv("MERKLETREE_ORDERING")
        if os.getenv("MERKLETREE_DIGEST_SIZE"):
            raw = os.getenv("MERKLETREE_DIGEST_SIZE", "")
            try:
                overrides["digest_size"] = int(raw)
            except ValueError as e:
                raise ConfigurationException(
                    f"MERKLETREE_DIGEST_SIZE must be an integer, got {raw!r}",
                    field_path="digest_size",
                ) from e
        if os.getenv("MERKLETREE_LOG_LEVEL"):
            overrides["log_level"] = os.getenv("MERKLETREE_LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "MerkleSettings":
        """Load settings from environment variables, defaults elsewhere."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "MerkleSettings":
        """Load settings from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MerkleSettings":
        """Load settings from a dictionary (supports partial data)."""
        # Accept a nested "merkle" section as well as top-level keys
        section = data.get("merkle") or data
        defaults = cls()
        return cls(
            hash_algorithm=section.get("hash_algorithm", defaults.hash_algorithm),
            pair_ordering=section.get("pair_ordering", defaults.pair_ordering),
            digest_size=int(section.get("digest_size", defaults.digest_size)),
            log_level=section.get("log_level", defaults.log_level),
            extra=data.get("extra") or {},
        )

    def with_env_overrides(self) -> "MerkleSettings":
        """
        Return a new settings object with environment overrides applied.

        Allows loading from a file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_settings = copy.deepcopy(self)
        for key, value in overrides.items():
            setattr(new_settings, key, value)
        return new_settings

    def to_tree_config(self) -> TreeConfig:
        """
        Resolve the configured names into a TreeConfig.

        Raises:
            ConfigurationException: If the hash or ordering name is unknown
        """
        return TreeConfig.from_names(
            hash_algorithm=self.hash_algorithm,
            pair_ordering=self.pair_ordering,
            digest_size=self.digest_size,
        )

    def setup_logging(self, log_file: str | None = None) -> None:
        """Configure root logging at this settings' ``log_level``."""
        setup_logging(self.log_level, log_file)

    def to_dict(self) -> dict[str, Any]:
        return {
            "merkle": {
                "hash_algorithm": self.hash_algorithm,
                "pair_ordering": self.pair_ordering,
                "digest_size": self.digest_size,
                "log_level": self.log_level,
            },
            "extra": self.extra,
        }


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging with the library's format."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
    )


# Global default settings
_default_config: Optional[MerkleSettings] = None


def get_default_config() -> MerkleSettings:
    """Get the default settings, loading them from the environment on first use."""
    global _default_config
    if _default_config is None:
        _default_config = MerkleSettings.from_env()
    return _default_config


def set_default_config(config: Optional[MerkleSettings]) -> None:
    """Set (or with None, reset) the default settings."""
    global _default_config
    _default_config = config
