"""
Schemas & Errors
File: __init__.py

Purpose: Export canonical serialization helpers and the error taxonomy.
"""

# Canonical serialization API
from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    canonical_equals,
    canonicalize_value,
    dumps_canonical,
    ensure_utc,
    format_datetime_canonical,
)

# Error models and exceptions
from .errors import (
    CanonicalizationException,
    ConfigurationException,
    EmptyInputException,
    ErrorCodes,
    HashException,
    InvalidDigestLengthException,
    MerkleError,
    MerkleException,
    NotFoundException,
    TypeMismatchException,
)


__all__ = [
    # Canonical
    "CANONICAL_JSON_SEPARATORS",
    "canonical_equals",
    "canonicalize_value",
    "dumps_canonical",
    "ensure_utc",
    "format_datetime_canonical",
    # Errors
    "CanonicalizationException",
    "ConfigurationException",
    "EmptyInputException",
    "ErrorCodes",
    "HashException",
    "InvalidDigestLengthException",
    "MerkleError",
    "MerkleException",
    "NotFoundException",
    "TypeMismatchException",
]
