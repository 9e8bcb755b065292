"""
Runtime Configuration Module

Provides settings loading and logging setup for the merkletree library.
"""

from .runtime import (
    MerkleSettings,
    get_default_config,
    set_default_config,
    setup_logging,
)

__all__ = [
    "MerkleSettings",
    "get_default_config",
    "set_default_config",
    "setup_logging",
]
