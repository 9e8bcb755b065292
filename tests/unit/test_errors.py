"""
Error Taxonomy Unit Tests
Tests for merkletree/schemas/errors.py
"""
import pytest
from pydantic import ValidationError

from merkletree.schemas.errors import (
    EmptyInputException,
    ErrorCodes,
    HashException,
    InvalidDigestLengthException,
    MerkleError,
    MerkleException,
    NotFoundException,
    TypeMismatchException,
)


class TestExceptionCodes:
    """Each exception carries its stable code."""

    @pytest.mark.parametrize(
        "exc, code",
        [
            (EmptyInputException(), ErrorCodes.EMPTY_INPUT),
            (HashException("bad"), ErrorCodes.HASH_ERROR),
            (NotFoundException("missing"), ErrorCodes.NOT_FOUND),
            (InvalidDigestLengthException("short"), ErrorCodes.INVALID_DIGEST_LENGTH),
            (TypeMismatchException("apples"), ErrorCodes.TYPE_MISMATCH),
        ],
    )
    def test_codes(self, exc, code):
        assert isinstance(exc, MerkleException)
        assert exc.code == code
        assert exc.retryable is False

    def test_not_found_hex_encodes_digest(self):
        exc = NotFoundException("missing", digest=b"\xab\xcd")

        assert exc.details == {"digest": "0xabcd"}

    def test_hash_exception_records_index(self):
        exc = HashException("bad", item_index=0)

        assert exc.details == {"item_index": 0}

    def test_repr(self):
        assert repr(HashException("bad")) == "HashException(code='HASH_ERROR', message='bad')"


class TestErrorModel:
    """Tests for MerkleError <-> MerkleException conversion."""

    def test_exception_to_model(self):
        exc = InvalidDigestLengthException("short", expected=32, actual=31)

        model = exc.to_error_model()

        assert model.code == ErrorCodes.INVALID_DIGEST_LENGTH
        assert model.details == {"expected": 32, "actual": 31}
        assert model.model_dump()["message"] == "short"

    def test_model_to_exception(self):
        model = MerkleError(code=ErrorCodes.NOT_FOUND, message="missing")

        exc = model.to_exception()

        assert isinstance(exc, MerkleException)
        assert exc.code == ErrorCodes.NOT_FOUND
        assert str(exc) == "missing"

    def test_model_forbids_extra_fields(self):
        with pytest.raises(ValidationError):
            MerkleError(code="X", message="y", unexpected=True)
