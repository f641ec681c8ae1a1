"""Record errors – malformed or unserialisable password records."""

from __future__ import annotations

from typing import Any

from mp_mcf.kernel.errors.base import BaseError


class RecordError(BaseError):
    """Structural or format problem with a password record."""

    default_code = "record_error"


class ParseError(RecordError):
    """An encoded record could not be parsed.

    The offending input is deliberately not kept on the exception; only
    its length and the expected algorithm name are recorded.
    """

    default_code = "parse_error"

    def __init__(
        self,
        message: str,
        *,
        expected_name: bytes | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.expected_name = expected_name


class EmptyRecordError(ParseError):
    default_code = "empty_record"


class MissingSeparatorError(ParseError):
    default_code = "missing_separator"


class FieldCountMismatchError(ParseError):
    """Splitting on the separator did not yield exactly the expected fields."""

    default_code = "field_count_mismatch"

    def __init__(self, message: str, *, expected: int, actual: int, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = actual


class NameMismatchError(ParseError):
    default_code = "name_mismatch"


class FieldDecodeError(ParseError):
    """The salt or digest field is neither valid hex nor valid base64."""

    default_code = "field_decode_error"

    def __init__(self, message: str, *, field: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field


class MalformedParamsError(ParseError):
    """The params field does not match the algorithm's parameter format."""

    default_code = "malformed_params"


class RecordSerializationError(RecordError):
    """A record is not in a state that can be serialised."""

    default_code = "record_serialization_error"

    def __init__(self, message: str, *, field: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field


class EmptyFieldError(RecordSerializationError):
    default_code = "empty_field"


class SeparatorInFieldError(RecordSerializationError):
    default_code = "separator_in_field"


__all__ = [
    "EmptyFieldError",
    "EmptyRecordError",
    "FieldCountMismatchError",
    "FieldDecodeError",
    "MalformedParamsError",
    "MissingSeparatorError",
    "NameMismatchError",
    "ParseError",
    "RecordError",
    "RecordSerializationError",
    "SeparatorInFieldError",
]
