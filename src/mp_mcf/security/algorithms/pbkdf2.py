"""PBKDF2 password encoder.

Records look like ``$pbkdf2$keylen=20,iterations=2000,hmac=SHA1$<salt>$<digest>``.
The pseudorandom function is an HMAC over one of :data:`HASHES`; when it
changes, ``key_len`` usually should too.
"""
from __future__ import annotations

import dataclasses
import re
from typing import ClassVar, Self

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from mp_mcf.kernel.errors import InvalidHashError, InvalidParameterError, MalformedParamsError
from mp_mcf.kernel.security import SaltSource, generate_salt
from mp_mcf.kernel.types import AlgorithmId
from mp_mcf.security.bridge import BridgeEncoder, ParameterSet
from mp_mcf.security.registry.registry import Registry

IDENTIFIER = b"pbkdf2"

HASHES: dict[str, type[hashes.HashAlgorithm]] = {
    "SHA1": hashes.SHA1,
    "SHA224": hashes.SHA224,
    "SHA256": hashes.SHA256,
    "SHA384": hashes.SHA384,
    "SHA512": hashes.SHA512,
}


def hash_size(name: str) -> int:
    """Output length in bytes of the named hash."""
    try:
        return HASHES[name].digest_size
    except KeyError:
        raise InvalidHashError(name) from None


# The RFC recommends at least 1000 iterations and 8 bytes of salt.
DEFAULT_ITERATIONS = 2000
DEFAULT_SALT_LEN = 16
DEFAULT_PRF = "SHA1"
DEFAULT_KEY_LEN = hash_size(DEFAULT_PRF)

_PARAMS_RE = re.compile(r"keylen=(\d{1,10}),iterations=(\d{1,10}),hmac=(\S+)")


@dataclasses.dataclass(frozen=True)
class Pbkdf2Parameters(ParameterSet):
    algorithm: ClassVar[str] = "pbkdf2"

    prf: str = DEFAULT_PRF
    iterations: int = DEFAULT_ITERATIONS
    key_len: int = DEFAULT_KEY_LEN
    salt_len: int = DEFAULT_SALT_LEN
    salt_source: SaltSource | None = dataclasses.field(default=None, compare=False, repr=False)

    def validate(self) -> None:
        if self.prf not in HASHES:
            raise InvalidHashError(self.prf)
        for name in ("iterations", "key_len", "salt_len"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidParameterError(name, value)

    def serialize_params(self) -> str:
        return f"keylen={self.key_len},iterations={self.iterations},hmac={self.prf}"

    def deserialize_params(self, params: str) -> Self:
        match = _PARAMS_RE.fullmatch(params)
        if match is None:
            raise MalformedParamsError("pbkdf2: malformed params", expected_name=IDENTIFIER)
        key_len, iterations, prf = match.groups()
        parsed = dataclasses.replace(self, key_len=int(key_len), iterations=int(iterations), prf=prf)
        parsed.validate()
        return parsed

    def salt(self) -> bytes:
        return generate_salt(self.salt_len, self.salt_source)

    def digest(self, password: bytes, salt: bytes) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=HASHES[self.prf](),
            length=self.key_len,
            salt=salt,
            iterations=self.iterations,
        )
        return kdf.derive(password)

    def at_least(self, other: Pbkdf2Parameters) -> bool:
        # PRFs are ranked by output size
        return not (
            self.iterations < other.iterations
            or self.key_len < other.key_len
            or self.salt_len < other.salt_len
            or hash_size(self.prf) < hash_size(other.prf)
        )

    def with_stored_salt(self, salt: bytes) -> Self:
        return dataclasses.replace(self, salt_len=len(salt))


def install(registry: Registry, config: Pbkdf2Parameters | None = None) -> BridgeEncoder:
    """Validate *config* and register a PBKDF2 encoder built from it."""
    config = config if config is not None else Pbkdf2Parameters()
    config.validate()
    encoder = BridgeEncoder(IDENTIFIER, lambda: dataclasses.replace(config))
    registry.register(AlgorithmId.PBKDF2, encoder)
    return encoder


def get_config(registry: Registry | None = None) -> Pbkdf2Parameters:
    from mp_mcf.security.registry.default import get_default_registry

    encoder = (registry or get_default_registry()).get(AlgorithmId.PBKDF2)
    if isinstance(encoder, BridgeEncoder):
        params = encoder.parameters()
        if isinstance(params, Pbkdf2Parameters):
            return params
    return Pbkdf2Parameters()


def set_config(config: Pbkdf2Parameters, registry: Registry | None = None) -> None:
    """Establish a new PBKDF2 configuration.

    Only matters for new records while PBKDF2 is the default algorithm::

        config = pbkdf2.get_config()
        pbkdf2.set_config(dataclasses.replace(
            config, prf="SHA256", key_len=pbkdf2.hash_size("SHA256"),
        ))
    """
    from mp_mcf.security.registry.default import get_default_registry

    install(registry or get_default_registry(), config)


__all__ = [
    "DEFAULT_ITERATIONS",
    "DEFAULT_KEY_LEN",
    "DEFAULT_PRF",
    "DEFAULT_SALT_LEN",
    "HASHES",
    "IDENTIFIER",
    "Pbkdf2Parameters",
    "get_config",
    "hash_size",
    "install",
    "set_config",
]
