"""Bridge – ParameterSet contract implemented once per algorithm."""
from __future__ import annotations

import abc
from typing import ClassVar, Self


class ParameterSet(abc.ABC):
    """Tunable cost/strength knobs of one algorithm plus its digest function.

    Instances are created fresh for every operation and are never shared
    or mutated; parsing a stored record yields a new instance.
    """

    algorithm: ClassVar[str]

    @abc.abstractmethod
    def validate(self) -> None:
        """Raise ``InvalidParameterError`` naming the first out-of-range knob."""

    @abc.abstractmethod
    def serialize_params(self) -> str:
        """Encode the digest-relevant parameters. Must not contain ``$``."""

    @abc.abstractmethod
    def deserialize_params(self, params: str) -> Self:
        """Inverse of :meth:`serialize_params`.

        Returns a validated copy of this instance with the parsed values;
        knobs that are not serialised keep this instance's values.
        """

    @abc.abstractmethod
    def salt(self) -> bytes:
        """Produce a new salt of the configured length."""

    @abc.abstractmethod
    def digest(self, password: bytes, salt: bytes) -> bytes:
        """Run the key-derivation primitive. Primitive errors propagate."""

    @abc.abstractmethod
    def at_least(self, other: Self) -> bool:
        """True iff no tracked strength field of ``self`` is below ``other``'s."""

    def with_stored_salt(self, salt: bytes) -> Self:
        """Account for the salt found in a stored record.

        Algorithms that track salt length override this so that
        :meth:`at_least` sees the stored length rather than the live one.
        """
        return self


__all__ = ["ParameterSet"]
