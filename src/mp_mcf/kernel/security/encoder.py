"""Kernel security – PasswordEncoder port."""
from __future__ import annotations

import abc


class PasswordEncoder(abc.ABC):
    """Port: one password hashing scheme as seen by the registry.

    Implementations are immutable once registered; changing a
    configuration means registering a new instance.
    """

    @property
    @abc.abstractmethod
    def identifier(self) -> bytes:
        """Bytes identifying this encoder's records.

        Matches the name field of the encoded record and contains no
        separator.
        """

    @abc.abstractmethod
    def create(self, plaintext: bytes) -> bytes:
        """Encode *plaintext* with the current configuration."""

    @abc.abstractmethod
    def verify(self, plaintext: bytes, encoded: bytes) -> bool:
        """True if *plaintext* encodes to *encoded* under its stored parameters.

        A mismatch is ``False``; only structural problems raise.
        """

    @abc.abstractmethod
    def is_current(self, encoded: bytes) -> bool:
        """True if *encoded* was produced with parameters at least as strong
        as the ones this encoder would use for a new record."""


__all__ = ["PasswordEncoder"]
