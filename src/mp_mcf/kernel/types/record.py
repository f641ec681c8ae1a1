"""Kernel types – PasswordRecord and its Modular Crypt Format codec.

Canonical form::

    $<name>$<params>$<salt>$<digest>

``salt`` and ``digest`` are written as standard base64 or lowercase hex.
On decode the scheme is sniffed: a field that contains none of the
base64-only characters is read as hex, anything else as base64. A base64
value made only of hex-alphabet characters (``AAAA``) is therefore
misread as hex. The default encoder, :func:`encode_auto`, writes hex in
exactly that case so every record it produces parses back to the same
bytes, while the sniffing keeps records from other writers readable.
"""
from __future__ import annotations

import base64
import binascii
import hmac
from collections.abc import Callable
from dataclasses import dataclass

from mp_mcf.kernel.errors import (
    EmptyFieldError,
    EmptyRecordError,
    FieldCountMismatchError,
    FieldDecodeError,
    MissingSeparatorError,
    NameMismatchError,
    SeparatorInFieldError,
)

SEPARATOR = b"$"
FIELD_COUNT = 4

# Characters that occur in base64 (std or url-safe) but never in hex.
_BASE64_ONLY = frozenset(b"GHIJKLMNOPQRSTUVWXYZghijklmnopqrstuvwxyz+/-_=")

FieldEncoder = Callable[[bytes], bytes]
FieldDecoder = Callable[[bytes], bytes]


def encode_base64(raw: bytes) -> bytes:
    return base64.b64encode(raw)


def encode_hex(raw: bytes) -> bytes:
    return binascii.hexlify(raw)


def is_hex_field(encoded: bytes) -> bool:
    return not any(c in _BASE64_ONLY for c in encoded)


def encode_auto(raw: bytes) -> bytes:
    """Standard base64, unless :func:`decode_auto` would read it as hex."""
    encoded = encode_base64(raw)
    if is_hex_field(encoded):
        return encode_hex(raw)
    return encoded


def decode_auto(encoded: bytes) -> bytes:
    """Decode a hex or standard-base64 field, picking the scheme by alphabet.

    Raises ``binascii.Error`` (a ``ValueError``) on malformed input.
    """
    if is_hex_field(encoded):
        return binascii.unhexlify(encoded)
    return base64.b64decode(encoded, validate=True)


def as_bytes(value: str | bytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


@dataclass(frozen=True)
class PasswordRecord:
    """A password hash separated into its components."""

    name: bytes
    params: bytes
    salt: bytes
    digest: bytes

    def __repr__(self) -> str:
        # salt and digest are verifier material; keep them out of reprs and logs
        return (
            f"PasswordRecord(name={self.name!r}, params={self.params!r}, "
            f"salt=<{len(self.salt)} bytes>, digest=<{len(self.digest)} bytes>)"
        )


class PasswordRecordCodec:
    """Serialises and parses records for a single algorithm name.

    ``encoder`` turns raw salt/digest bytes into text; ``decoder`` reverses
    it. If you swap the encoder for something other than base64 or hex,
    swap the decoder too.
    """

    def __init__(
        self,
        name: str | bytes,
        *,
        encoder: FieldEncoder = encode_auto,
        decoder: FieldDecoder = decode_auto,
    ) -> None:
        self._name = as_bytes(name)
        self._encoder = encoder
        self._decoder = decoder

    @property
    def name(self) -> bytes:
        return self._name

    def serialize(self, record: PasswordRecord) -> bytes:
        """Produce ``$name$params$salt$digest``.

        Every field must be non-empty and ``name``/``params`` must not
        contain the separator.
        """
        for field_name in ("name", "params", "salt", "digest"):
            if not getattr(record, field_name):
                raise EmptyFieldError(f"{field_name} is empty", field=field_name)
        for field_name in ("name", "params"):
            if SEPARATOR in getattr(record, field_name):
                raise SeparatorInFieldError(
                    f"{field_name} contains the separator {SEPARATOR!r}", field=field_name
                )

        parts = (record.name, record.params, self._encoder(record.salt), self._encoder(record.digest))
        return b"".join(SEPARATOR + part for part in parts)

    def parse(self, encoded: str | bytes) -> PasswordRecord:
        """Split an encoded record into a ``PasswordRecord``.

        The name field is compared to this codec's name in constant time.
        """
        data = as_bytes(encoded)
        name = self._name

        if not data:
            raise EmptyRecordError(f"{name.decode(errors='replace')}: empty password", expected_name=name)

        if data[:1] != SEPARATOR:
            raise MissingSeparatorError(
                f"{name.decode(errors='replace')}: password does not begin with separator",
                expected_name=name,
            )

        parts = data[1:].split(SEPARATOR)
        if len(parts) != FIELD_COUNT:
            qualifier = "few" if len(parts) < FIELD_COUNT else "many"
            raise FieldCountMismatchError(
                f"{name.decode(errors='replace')}: password has too {qualifier} fields",
                expected=FIELD_COUNT,
                actual=len(parts),
                expected_name=name,
            )

        if not hmac.compare_digest(parts[0], name):
            raise NameMismatchError(
                f"{name.decode(errors='replace')}: unexpected password type",
                expected_name=name,
            )

        return PasswordRecord(
            name=parts[0],
            params=parts[1],
            salt=self._decode_field("salt", parts[2]),
            digest=self._decode_field("digest", parts[3]),
        )

    def _decode_field(self, field_name: str, value: bytes) -> bytes:
        try:
            return self._decoder(value)
        except ValueError as exc:
            raise FieldDecodeError(
                f"{self._name.decode(errors='replace')}: cannot decode {field_name}",
                field=field_name,
                expected_name=self._name,
                cause=exc,
            ) from exc


__all__ = [
    "FIELD_COUNT",
    "SEPARATOR",
    "FieldDecoder",
    "FieldEncoder",
    "PasswordRecord",
    "PasswordRecordCodec",
    "as_bytes",
    "decode_auto",
    "encode_auto",
    "encode_base64",
    "encode_hex",
    "is_hex_field",
]
