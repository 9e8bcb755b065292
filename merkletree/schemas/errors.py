"""
Schemas & Errors
File: errors.py

Purpose: Standard error taxonomy for tree construction, proof generation
and proof verification. Defines both Pydantic models for structured error
communication and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the library."""

    # Construction Errors
    EMPTY_INPUT = "EMPTY_INPUT"
    HASH_ERROR = "HASH_ERROR"

    # Lookup Errors
    NOT_FOUND = "NOT_FOUND"

    # Verification Errors
    INVALID_DIGEST_LENGTH = "INVALID_DIGEST_LENGTH"

    # Content Errors
    TYPE_MISMATCH = "TYPE_MISMATCH"
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Configuration Errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Base error model for structured error communication.

    Lets callers pass failures across process boundaries (logs, API
    responses) without raising.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.NOT_FOUND],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "MerkleException":
        """Convert this error model to a raised exception."""
        return MerkleException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all merkletree errors.

    This exception carries structured error information and can be
    converted to/from MerkleError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyInputException(MerkleException):
    """Exception raised when a tree is built from no items."""

    def __init__(
        self,
        message: str = "Cannot build a Merkle tree without content",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_INPUT,
            details=details,
            retryable=False,
        )


class HashException(MerkleException):
    """Exception raised when a content digest or hash function call fails."""

    def __init__(
        self,
        message: str,
        item_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if item_index is not None:
            full_details["item_index"] = item_index
        super().__init__(
            message=message,
            code=ErrorCodes.HASH_ERROR,
            details=full_details,
            retryable=False,
        )


class NotFoundException(MerkleException):
    """Exception raised when a proof is requested for content not in the tree."""

    def __init__(
        self,
        message: str,
        digest: bytes | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if digest is not None:
            full_details["digest"] = "0x" + digest.hex()
        super().__init__(
            message=message,
            code=ErrorCodes.NOT_FOUND,
            details=full_details,
            retryable=False,
        )


class InvalidDigestLengthException(MerkleException):
    """Exception raised when a digest does not have the configured size."""

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if expected is not None:
            full_details["expected"] = expected
        if actual is not None:
            full_details["actual"] = actual
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_DIGEST_LENGTH,
            details=full_details,
            retryable=False,
        )


class TypeMismatchException(MerkleException):
    """Exception raised when content of incompatible kinds is compared."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.TYPE_MISMATCH,
            details=details,
            retryable=False,
        )


class CanonicalizationException(MerkleException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
            retryable=False,
        )


class ConfigurationException(MerkleException):
    """Exception raised when a hash or ordering name cannot be resolved."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIGURATION_ERROR,
            details=full_details,
            retryable=False,
        )
