"""Kernel value types – public re-export surface.

Modules:
  algorithm.py – AlgorithmId
  record.py    – PasswordRecord, PasswordRecordCodec
"""

from mp_mcf.kernel.types.algorithm import AlgorithmId
from mp_mcf.kernel.types.record import (
    SEPARATOR,
    PasswordRecord,
    PasswordRecordCodec,
    as_bytes,
    decode_auto,
    encode_auto,
    encode_base64,
    encode_hex,
)

__all__ = [
    "SEPARATOR",
    "AlgorithmId",
    "PasswordRecord",
    "PasswordRecordCodec",
    "as_bytes",
    "decode_auto",
    "encode_auto",
    "encode_base64",
    "encode_hex",
]
