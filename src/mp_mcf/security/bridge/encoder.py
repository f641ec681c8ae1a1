"""Bridge – generic PasswordEncoder built from a ParameterSet factory.

Concrete algorithms only supply a :class:`ParameterSet`; record layout,
salt handling, constant-time comparison and the strength check live here.
"""
from __future__ import annotations

import hmac
from collections.abc import Callable

from mp_mcf.kernel.errors import BaseError, DigestError, FieldDecodeError
from mp_mcf.kernel.security import PasswordEncoder
from mp_mcf.kernel.types.record import (
    FieldEncoder,
    PasswordRecord,
    PasswordRecordCodec,
    as_bytes,
    encode_auto,
)
from mp_mcf.observability.logging import get_logger
from mp_mcf.security.bridge.parameters import ParameterSet

logger = get_logger(__name__)

ParameterFactory = Callable[[], ParameterSet]


class BridgeEncoder(PasswordEncoder):
    """Adapts a zero-argument ``ParameterSet`` factory to ``PasswordEncoder``.

    The factory must hand out a fresh instance per call; it captures the
    configuration that was current when the encoder was built.
    """

    def __init__(
        self,
        name: str | bytes,
        factory: ParameterFactory,
        *,
        field_encoder: FieldEncoder = encode_auto,
    ) -> None:
        self._name = as_bytes(name)
        self._factory = factory
        self._field_encoder = field_encoder

    def __repr__(self) -> str:
        return f"BridgeEncoder(name={self._name!r})"

    @property
    def identifier(self) -> bytes:
        return self._name

    def parameters(self) -> ParameterSet:
        """A fresh copy of the live configuration."""
        return self._factory()

    def _codec(self) -> PasswordRecordCodec:
        return PasswordRecordCodec(self._name, encoder=self._field_encoder)

    def create(self, plaintext: str | bytes) -> bytes:
        params = self._factory()
        salt = params.salt()
        record = PasswordRecord(
            name=self._name,
            params=params.serialize_params().encode("ascii"),
            salt=salt,
            digest=self._digest(params, as_bytes(plaintext), salt, "create"),
        )
        return self._codec().serialize(record)

    def verify(self, plaintext: str | bytes, encoded: str | bytes) -> bool:
        record, stored = self._load(encoded)
        test_digest = self._digest(stored, as_bytes(plaintext), record.salt, "verify")
        return hmac.compare_digest(record.digest, test_digest)

    def is_current(self, encoded: str | bytes) -> bool:
        record, stored = self._load(encoded)
        return stored.with_stored_salt(record.salt).at_least(self._factory())

    def _load(self, encoded: str | bytes) -> tuple[PasswordRecord, ParameterSet]:
        record = self._codec().parse(encoded)
        try:
            params_text = record.params.decode("ascii")
        except UnicodeDecodeError as exc:
            raise FieldDecodeError(
                f"{self._name.decode()}: params are not ASCII",
                field="params",
                expected_name=self._name,
                cause=exc,
            ) from exc
        return record, self._factory().deserialize_params(params_text)

    def _digest(self, params: ParameterSet, plaintext: bytes, salt: bytes, operation: str) -> bytes:
        try:
            return params.digest(plaintext, salt)
        except BaseError:
            raise
        except Exception as exc:
            logger.warning(
                "digest_failed",
                algorithm=params.algorithm,
                operation=operation,
                error_type=type(exc).__name__,
            )
            raise DigestError(params.algorithm, operation, cause=exc) from exc


__all__ = ["BridgeEncoder", "ParameterFactory"]
