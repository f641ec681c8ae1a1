"""Kernel types – AlgorithmId."""
from __future__ import annotations

from enum import IntEnum

from mp_mcf.kernel.errors import InvalidEncodingError


class AlgorithmId(IntEnum):
    """Registry slot for a password encoder.

    Not every algorithm is implemented, installed or used in a given
    process. ``UNKNOWN`` is the sentinel and never a valid slot.
    """

    BCRYPT = 0
    SCRYPT = 1
    PBKDF2 = 2
    CRYPT = 3  # reserved
    UNKNOWN = 4

    @property
    def is_valid(self) -> bool:
        return 0 <= self.value < AlgorithmId.UNKNOWN.value

    @property
    def label(self) -> str:
        match self:
            case AlgorithmId.BCRYPT:
                return "bcrypt"
            case AlgorithmId.SCRYPT:
                return "scrypt"
            case AlgorithmId.PBKDF2:
                return "pbkdf2"
            case AlgorithmId.CRYPT:
                return "crypt"
            case _:
                return "unknown"

    def __str__(self) -> str:
        return self.label

    @classmethod
    def coerce(cls, value: AlgorithmId | int | str) -> AlgorithmId:
        """Return a valid ``AlgorithmId`` for *value* or raise ``InvalidEncodingError``.

        Accepts an enum member, its integer value or its label
        (``"scrypt"``), case-insensitively.
        """
        try:
            if isinstance(value, str):
                member = cls[value.strip().upper()]
            else:
                member = cls(value)
        except (KeyError, ValueError) as exc:
            raise InvalidEncodingError(value, cause=exc) from exc
        if not member.is_valid:
            raise InvalidEncodingError(value)
        return member

    @classmethod
    def valid(cls) -> tuple[AlgorithmId, ...]:
        return tuple(m for m in cls if m.is_valid)


__all__ = ["AlgorithmId"]
