"""bcrypt password encoder.

bcrypt records use bcrypt's own layout, ``$2a$<cost>$<22-char salt><31-char hash>``,
so this encoder talks to the bcrypt library directly instead of going
through the bridge.
"""
from __future__ import annotations

import re

import bcrypt

from mp_mcf.kernel.errors import (
    DigestError,
    EmptyRecordError,
    FieldCountMismatchError,
    FieldDecodeError,
    InvalidParameterError,
    MissingSeparatorError,
    NameMismatchError,
)
from mp_mcf.kernel.security import PasswordEncoder
from mp_mcf.kernel.types import SEPARATOR, AlgorithmId, as_bytes
from mp_mcf.observability.logging import get_logger
from mp_mcf.security.registry.registry import Registry

logger = get_logger(__name__)

# hashes are prefixed with "2a", not "bcrypt"
IDENTIFIER = b"2a"

# Base 2 logarithm of the work factor.
DEFAULT_COST = 12
MIN_COST = 4
MAX_COST = 31

_FIELD_COUNT = 3
_BODY_RE = re.compile(rb"[./A-Za-z0-9]{53}")


class BcryptEncoder(PasswordEncoder):
    def __init__(self, cost: int = DEFAULT_COST) -> None:
        validate_cost(cost)
        self._cost = cost

    def __repr__(self) -> str:
        return f"BcryptEncoder(cost={self._cost})"

    @property
    def identifier(self) -> bytes:
        return IDENTIFIER

    @property
    def cost(self) -> int:
        return self._cost

    def create(self, plaintext: str | bytes) -> bytes:
        salt = bcrypt.gensalt(rounds=self._cost, prefix=IDENTIFIER)
        return self._hashpw(as_bytes(plaintext), salt, "create")

    def verify(self, plaintext: str | bytes, encoded: str | bytes) -> bool:
        data = as_bytes(encoded)
        parse_cost(data)
        # checkpw compares in constant time
        try:
            return bcrypt.checkpw(as_bytes(plaintext), data)
        except ValueError as exc:
            logger.warning("digest_failed", algorithm="bcrypt", operation="verify")
            raise DigestError("bcrypt", "verify", cause=exc) from exc

    def is_current(self, encoded: str | bytes) -> bool:
        return parse_cost(as_bytes(encoded)) >= self._cost

    @staticmethod
    def _hashpw(plaintext: bytes, salt: bytes, operation: str) -> bytes:
        try:
            return bcrypt.hashpw(plaintext, salt)
        except ValueError as exc:
            logger.warning("digest_failed", algorithm="bcrypt", operation=operation)
            raise DigestError("bcrypt", operation, cause=exc) from exc


def validate_cost(cost: int) -> None:
    if not MIN_COST <= cost <= MAX_COST:
        raise InvalidParameterError("cost", cost, f"must be between {MIN_COST} and {MAX_COST}")


def parse_cost(encoded: bytes) -> int:
    """Return the cost of a ``$2a$`` record, raising a ``ParseError`` if malformed."""
    name = IDENTIFIER
    if not encoded:
        raise EmptyRecordError("2a: empty password", expected_name=name)
    if encoded[:1] != SEPARATOR:
        raise MissingSeparatorError("2a: password does not begin with separator", expected_name=name)

    parts = encoded[1:].split(SEPARATOR)
    if len(parts) != _FIELD_COUNT:
        qualifier = "few" if len(parts) < _FIELD_COUNT else "many"
        raise FieldCountMismatchError(
            f"2a: password has too {qualifier} fields",
            expected=_FIELD_COUNT,
            actual=len(parts),
            expected_name=name,
        )
    version, cost, body = parts
    if version != name:
        raise NameMismatchError("2a: unexpected password type", expected_name=name)
    if not (len(cost) == 2 and cost.isdigit()):
        raise FieldDecodeError("2a: malformed cost", field="cost", expected_name=name)
    value = int(cost)
    if not MIN_COST <= value <= MAX_COST:
        raise FieldDecodeError("2a: cost out of range", field="cost", expected_name=name)
    if _BODY_RE.fullmatch(body) is None:
        raise FieldDecodeError("2a: malformed salt or hash", field="digest", expected_name=name)
    return value


def install(registry: Registry, cost: int = DEFAULT_COST) -> BcryptEncoder:
    encoder = BcryptEncoder(cost)
    registry.register(AlgorithmId.BCRYPT, encoder)
    return encoder


def get_cost(registry: Registry | None = None) -> int:
    from mp_mcf.security.registry.default import get_default_registry

    encoder = (registry or get_default_registry()).get(AlgorithmId.BCRYPT)
    if isinstance(encoder, BcryptEncoder):
        return encoder.cost
    return DEFAULT_COST


def set_cost(cost: int, registry: Registry | None = None) -> None:
    """Set the bcrypt cost used for new records."""
    from mp_mcf.security.registry.default import get_default_registry

    install(registry or get_default_registry(), cost)


__all__ = [
    "DEFAULT_COST",
    "IDENTIFIER",
    "MAX_COST",
    "MIN_COST",
    "BcryptEncoder",
    "get_cost",
    "install",
    "parse_cost",
    "set_cost",
    "validate_cost",
]
