"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import pytest

from mp_mcf.kernel.errors import (
    AmbiguousIdentifierError,
    BaseError,
    ConfigurationError,
    DigestError,
    EmptyIdentifierError,
    EmptyRecordError,
    EncoderLookupError,
    FieldCountMismatchError,
    FieldDecodeError,
    InfrastructureError,
    InternalInvariantError,
    InvalidEncodingError,
    InvalidHashError,
    InvalidParameterError,
    MalformedParamsError,
    MissingSeparatorError,
    NameMismatchError,
    NoEncodersRegisteredError,
    NoMatchingEncoderError,
    ParseError,
    RecordError,
    ShortSaltReadError,
    UnregisteredEncodingError,
)


class TestBaseError:
    def test_message_and_default_code(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert err.code == "base_error"
        assert str(err) == "something went wrong"

    def test_custom_code(self) -> None:
        err = BaseError("oops", code="custom")
        assert err.code == "custom"

    def test_cause_is_chained(self) -> None:
        cause = ValueError("root")
        err = BaseError("wrapped", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_to_dict(self) -> None:
        err = BaseError("boom", detail={"algorithm": "scrypt"}, cause=ValueError("x"))
        d = err.to_dict()
        assert d["code"] == "base_error"
        assert d["message"] == "boom"
        assert d["detail"] == {"algorithm": "scrypt"}
        assert "ValueError" in d["cause"]

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls,parent",
        [
            (EmptyRecordError, ParseError),
            (MissingSeparatorError, ParseError),
            (NameMismatchError, ParseError),
            (MalformedParamsError, ParseError),
            (ParseError, RecordError),
            (InvalidEncodingError, ConfigurationError),
            (EmptyIdentifierError, ConfigurationError),
            (InvalidHashError, ConfigurationError),
            (NoEncodersRegisteredError, EncoderLookupError),
            (NoMatchingEncoderError, EncoderLookupError),
            (UnregisteredEncodingError, EncoderLookupError),
            (DigestError, InfrastructureError),
            (ShortSaltReadError, InfrastructureError),
            (InternalInvariantError, BaseError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)

    def test_lookup_errors_are_not_record_errors(self) -> None:
        assert not issubclass(NoMatchingEncoderError, RecordError)
        assert not issubclass(NoMatchingEncoderError, ConfigurationError)


class TestSpecificErrors:
    def test_field_count_mismatch_carries_counts(self) -> None:
        err = FieldCountMismatchError("too few", expected=4, actual=3)
        assert err.expected == 4
        assert err.actual == 3
        assert err.code == "field_count_mismatch"

    def test_field_decode_error_carries_field(self) -> None:
        assert FieldDecodeError("bad", field="salt").field == "salt"

    def test_invalid_parameter_names_parameter_and_value(self) -> None:
        err = InvalidParameterError("n", 3, "must be a power of two greater than 1")
        assert err.name == "n"
        assert err.value == 3
        assert "parameter n has invalid value: 3" in err.message

    def test_ambiguous_identifier(self) -> None:
        err = AmbiguousIdentifierError(b"2a", b"2abc")
        assert err.identifier == b"2a"
        assert err.conflicting == b"2abc"

    def test_digest_error_context(self) -> None:
        cause = ValueError("password too long")
        err = DigestError("bcrypt", "create", cause=cause)
        assert err.algorithm == "bcrypt"
        assert err.operation == "create"
        assert err.detail == {"algorithm": "bcrypt", "operation": "create"}
        assert err.__cause__ is cause

    def test_short_salt_read_message(self) -> None:
        err = ShortSaltReadError(16, 15)
        assert err.message == "Short salt read. want: 16, got 15"

    def test_default_messages(self) -> None:
        assert NoEncodersRegisteredError().message == "No encoders registered"
        assert NoMatchingEncoderError().message == "No matching encoder found"

    def test_unregistered_encoding(self) -> None:
        err = UnregisteredEncodingError("scrypt")
        assert err.encoding == "scrypt"
        assert "scrypt" in err.message
