"""Configuration errors – rejected at register / set_config time."""

from __future__ import annotations

from typing import Any

from mp_mcf.kernel.errors.base import BaseError


class ConfigurationError(BaseError):
    """Invalid encoder registration or algorithm configuration."""

    default_code = "configuration_error"


class InvalidEncodingError(ConfigurationError):
    """The algorithm id is outside the known range."""

    default_code = "invalid_encoding"

    def __init__(self, encoding: object, **kwargs: Any) -> None:
        super().__init__(f"invalid encoding: {encoding!r}", **kwargs)
        self.encoding = encoding


class EmptyIdentifierError(ConfigurationError):
    default_code = "empty_identifier"

    def __init__(self, encoding: object, **kwargs: Any) -> None:
        super().__init__(f"empty id: encoding={encoding}", **kwargs)
        self.encoding = encoding


class AmbiguousIdentifierError(ConfigurationError):
    """Two registered identifiers would be byte-prefixes of one another."""

    default_code = "ambiguous_identifier"

    def __init__(self, identifier: bytes, conflicting: bytes, **kwargs: Any) -> None:
        super().__init__(
            f"identifier {identifier!r} overlaps registered identifier {conflicting!r}",
            **kwargs,
        )
        self.identifier = identifier
        self.conflicting = conflicting


class InvalidParameterError(ConfigurationError):
    """A tunable parameter is out of range.

    ``name`` and ``value`` identify the faulty parameter.
    """

    default_code = "invalid_parameter"

    def __init__(self, name: str, value: object, reason: str | None = None, **kwargs: Any) -> None:
        message = f"parameter {name} has invalid value: {value}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, **kwargs)
        self.name = name
        self.value = value


class InvalidHashError(ConfigurationError):
    """Unknown pseudorandom function name."""

    default_code = "invalid_hash"

    def __init__(self, hash_name: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid Hash: {hash_name}", **kwargs)
        self.hash_name = hash_name


__all__ = [
    "AmbiguousIdentifierError",
    "ConfigurationError",
    "EmptyIdentifierError",
    "InvalidEncodingError",
    "InvalidHashError",
    "InvalidParameterError",
]
