"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── RecordError              (domain.py)
    │   ├── ParseError
    │   │   ├── EmptyRecordError
    │   │   ├── MissingSeparatorError
    │   │   ├── FieldCountMismatchError
    │   │   ├── NameMismatchError
    │   │   ├── FieldDecodeError
    │   │   └── MalformedParamsError
    │   └── RecordSerializationError
    │       ├── EmptyFieldError
    │       └── SeparatorInFieldError
    ├── ConfigurationError       (configuration.py)
    │   ├── InvalidEncodingError
    │   ├── EmptyIdentifierError
    │   ├── AmbiguousIdentifierError
    │   ├── InvalidParameterError
    │   └── InvalidHashError
    ├── EncoderLookupError       (application.py)
    │   ├── NoEncodersRegisteredError
    │   ├── NoMatchingEncoderError
    │   └── UnregisteredEncodingError
    ├── InfrastructureError      (infrastructure.py)
    │   ├── DigestError
    │   └── ShortSaltReadError
    └── InternalInvariantError   (base.py)
"""

from mp_mcf.kernel.errors.application import (
    EncoderLookupError,
    NoEncodersRegisteredError,
    NoMatchingEncoderError,
    UnregisteredEncodingError,
)
from mp_mcf.kernel.errors.base import BaseError, InternalInvariantError
from mp_mcf.kernel.errors.configuration import (
    AmbiguousIdentifierError,
    ConfigurationError,
    EmptyIdentifierError,
    InvalidEncodingError,
    InvalidHashError,
    InvalidParameterError,
)
from mp_mcf.kernel.errors.domain import (
    EmptyFieldError,
    EmptyRecordError,
    FieldCountMismatchError,
    FieldDecodeError,
    MalformedParamsError,
    MissingSeparatorError,
    NameMismatchError,
    ParseError,
    RecordError,
    RecordSerializationError,
    SeparatorInFieldError,
)
from mp_mcf.kernel.errors.infrastructure import (
    DigestError,
    InfrastructureError,
    ShortSaltReadError,
)

__all__ = [
    "AmbiguousIdentifierError",
    "BaseError",
    "ConfigurationError",
    "DigestError",
    "EmptyFieldError",
    "EmptyIdentifierError",
    "EmptyRecordError",
    "EncoderLookupError",
    "FieldCountMismatchError",
    "FieldDecodeError",
    "InfrastructureError",
    "InternalInvariantError",
    "InvalidEncodingError",
    "InvalidHashError",
    "InvalidParameterError",
    "MalformedParamsError",
    "MissingSeparatorError",
    "NameMismatchError",
    "NoEncodersRegisteredError",
    "NoMatchingEncoderError",
    "ParseError",
    "RecordError",
    "RecordSerializationError",
    "SeparatorInFieldError",
    "ShortSaltReadError",
    "UnregisteredEncodingError",
]
