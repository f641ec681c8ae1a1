"""Registry – maps AlgorithmId slots to PasswordEncoder instances.

Reads take a snapshot of an immutable slot table; writes build a new
table under a lock and swap it in, so readers see either the old or the
new encoder for a slot and never block on each other.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass

from mp_mcf.kernel.errors import (
    AmbiguousIdentifierError,
    ConfigurationError,
    EmptyIdentifierError,
    InternalInvariantError,
    NoEncodersRegisteredError,
    NoMatchingEncoderError,
    UnregisteredEncodingError,
)
from mp_mcf.kernel.security import PasswordEncoder
from mp_mcf.kernel.types import SEPARATOR, AlgorithmId, as_bytes
from mp_mcf.observability.logging import get_logger

logger = get_logger(__name__)

_SLOT_COUNT = len(AlgorithmId.valid())


@dataclass(frozen=True)
class Resolution:
    """Result of matching an encoded record to a registered encoder."""

    algorithm: AlgorithmId
    encoder: PasswordEncoder


@dataclass(frozen=True)
class _Snapshot:
    slots: tuple[PasswordEncoder | None, ...]
    default: AlgorithmId

    def with_slot(self, algorithm: AlgorithmId, encoder: PasswordEncoder) -> _Snapshot:
        slots = list(self.slots)
        slots[algorithm] = encoder
        default = self.default if self.default.is_valid else algorithm
        return _Snapshot(slots=tuple(slots), default=default)


class Registry:
    """Holds one encoder per algorithm and the default used for new records.

    The first successful registration becomes the default unless
    :meth:`set_default` picks another. Slots can be replaced but never
    emptied.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = _Snapshot(slots=(None,) * _SLOT_COUNT, default=AlgorithmId.UNKNOWN)

    def __repr__(self) -> str:
        state = self._state
        registered = [AlgorithmId(i).label for i, e in enumerate(state.slots) if e is not None]
        return f"Registry(registered={registered!r}, default={state.default.label!r})"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def register(self, algorithm: AlgorithmId | int | str, encoder: PasswordEncoder) -> None:
        """Install *encoder* in the slot for *algorithm*, replacing any previous one.

        Raises ``InvalidEncodingError`` for an unknown id,
        ``EmptyIdentifierError`` for a zero-length identifier and
        ``AmbiguousIdentifierError`` when the identifier and another
        slot's identifier are byte-prefixes of one another.
        """
        algorithm = AlgorithmId.coerce(algorithm)
        identifier = as_bytes(encoder.identifier)
        if not identifier:
            raise EmptyIdentifierError(algorithm)
        if SEPARATOR in identifier:
            raise ConfigurationError(
                f"identifier {identifier!r} contains the separator",
                code="separator_in_identifier",
            )

        with self._lock:
            state = self._state
            for slot, existing in enumerate(state.slots):
                if existing is None or slot == algorithm:
                    continue
                other = as_bytes(existing.identifier)
                if other.startswith(identifier) or identifier.startswith(other):
                    raise AmbiguousIdentifierError(identifier, other)
            self._state = state.with_slot(algorithm, encoder)
            default = self._state.default

        logger.info(
            "encoder_registered",
            algorithm=algorithm.label,
            identifier=identifier.decode("ascii", errors="replace"),
            default=default.label,
        )

    def set_default(self, algorithm: AlgorithmId | int | str) -> None:
        """Use *algorithm* for new records."""
        algorithm = AlgorithmId.coerce(algorithm)
        with self._lock:
            state = self._state
            if state.slots[algorithm] is None:
                raise UnregisteredEncodingError(algorithm)
            previous = state.default
            self._state = _Snapshot(slots=state.slots, default=algorithm)
        if previous != algorithm:
            logger.info("default_encoding_changed", previous=previous.label, current=algorithm.label)

    @property
    def default(self) -> AlgorithmId | None:
        default = self._state.default
        return default if default.is_valid else None

    def get(self, algorithm: AlgorithmId | int | str) -> PasswordEncoder | None:
        return self._state.slots[AlgorithmId.coerce(algorithm)]

    def registered(self) -> tuple[AlgorithmId, ...]:
        return tuple(AlgorithmId(i) for i, e in enumerate(self._state.slots) if e is not None)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def resolve(self, encoded: str | bytes) -> Resolution | None:
        """Find the encoder whose identifier prefixes the record after its
        leading separator. Slots are scanned in ascending id order."""
        return self._resolve(self._state, as_bytes(encoded))

    @staticmethod
    def _resolve(state: _Snapshot, encoded: bytes) -> Resolution | None:
        if not encoded:
            return None
        body = encoded[1:]
        for slot, encoder in enumerate(state.slots):
            if encoder is not None and body.startswith(as_bytes(encoder.identifier)):
                return Resolution(AlgorithmId(slot), encoder)
        return None

    def _require(self, state: _Snapshot, encoded: bytes) -> Resolution:
        resolution = self._resolve(state, encoded)
        if resolution is None:
            logger.warning("encoder_not_found", length=len(encoded))
            raise NoMatchingEncoderError()
        return resolution

    def create(self, plaintext: str | bytes) -> str:
        """Encode *plaintext* with the default encoder."""
        state = self._state
        if not state.default.is_valid:
            raise NoEncodersRegisteredError()
        encoder = state.slots[state.default]
        if encoder is None:
            raise InternalInvariantError(f"missing implementation for encoding [{state.default}]")
        return encoder.create(as_bytes(plaintext)).decode("ascii")

    def verify(self, plaintext: str | bytes, encoded: str | bytes) -> bool:
        data = as_bytes(encoded)
        resolution = self._require(self._state, data)
        return resolution.encoder.verify(as_bytes(plaintext), data)

    def is_current(self, encoded: str | bytes) -> bool:
        """True if *encoded* uses the default algorithm with parameters at
        least as strong as its live configuration.

        A record from a non-default algorithm is never current.
        """
        data = as_bytes(encoded)
        state = self._state
        resolution = self._require(state, data)
        if not resolution.encoder.is_current(data):
            return False
        return resolution.algorithm == state.default


__all__ = ["Registry", "Resolution"]
