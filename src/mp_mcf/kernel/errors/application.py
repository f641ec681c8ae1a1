"""Lookup errors – no encoder could serve the request.

Kept apart from authentication outcomes so callers can tell a
misconfigured registry from a wrong password.
"""

from __future__ import annotations

from typing import Any

from mp_mcf.kernel.errors.base import BaseError


class EncoderLookupError(BaseError):
    default_code = "encoder_lookup_error"


class NoEncodersRegisteredError(EncoderLookupError):
    default_code = "no_encoders_registered"

    def __init__(self, message: str = "No encoders registered", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NoMatchingEncoderError(EncoderLookupError):
    default_code = "no_matching_encoder"

    def __init__(self, message: str = "No matching encoder found", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class UnregisteredEncodingError(EncoderLookupError):
    default_code = "unregistered_encoding"

    def __init__(self, encoding: object, **kwargs: Any) -> None:
        super().__init__(f"encoding [{encoding}] not registered", **kwargs)
        self.encoding = encoding


__all__ = [
    "EncoderLookupError",
    "NoEncodersRegisteredError",
    "NoMatchingEncoderError",
    "UnregisteredEncodingError",
]
