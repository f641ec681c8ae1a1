"""scrypt password encoder.

Records look like ``$scrypt$KeyLen=32,N=65536,R=10,P=2$<salt>$<digest>``.

Change the work factor through a copy of the live configuration::

    config = scrypt.get_config()
    scrypt.set_config(dataclasses.replace(config, n=config.n * 2))
"""
from __future__ import annotations

import dataclasses
import re
from typing import ClassVar, Self

from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from mp_mcf.kernel.errors import InvalidParameterError, MalformedParamsError
from mp_mcf.kernel.security import SaltSource, generate_salt
from mp_mcf.kernel.types import AlgorithmId
from mp_mcf.security.bridge import BridgeEncoder, ParameterSet
from mp_mcf.security.registry.registry import Registry

IDENTIFIER = b"scrypt"

# Circa 2014 work factors.
DEFAULT_KEY_LEN = 32
DEFAULT_SALT_LEN = 16
DEFAULT_N = 1 << 16
DEFAULT_R = 10
DEFAULT_P = 2

_PARAMS_RE = re.compile(r"KeyLen=(\d{1,10}),N=(\d{1,10}),R=(\d{1,10}),P=(\d{1,10})")


@dataclasses.dataclass(frozen=True)
class ScryptParameters(ParameterSet):
    """scrypt knobs.

    ``n`` is the CPU/memory cost and must be a power of two, ``r`` the
    block size and ``p`` the parallelisation factor.
    """

    algorithm: ClassVar[str] = "scrypt"

    key_len: int = DEFAULT_KEY_LEN
    salt_len: int = DEFAULT_SALT_LEN
    n: int = DEFAULT_N
    r: int = DEFAULT_R
    p: int = DEFAULT_P
    salt_source: SaltSource | None = dataclasses.field(default=None, compare=False, repr=False)

    def validate(self) -> None:
        for name in ("key_len", "salt_len", "r", "p"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidParameterError(name, value)
        if self.n <= 1 or self.n & (self.n - 1):
            raise InvalidParameterError("n", self.n, "must be a power of two greater than 1")
        if self.r * self.p >= 1 << 30:
            raise InvalidParameterError("p", self.p, "r * p must be below 2**30")

    def serialize_params(self) -> str:
        return f"KeyLen={self.key_len},N={self.n},R={self.r},P={self.p}"

    def deserialize_params(self, params: str) -> Self:
        match = _PARAMS_RE.fullmatch(params)
        if match is None:
            raise MalformedParamsError("scrypt: malformed params", expected_name=IDENTIFIER)
        key_len, n, r, p = (int(g) for g in match.groups())
        parsed = dataclasses.replace(self, key_len=key_len, n=n, r=r, p=p)
        parsed.validate()
        return parsed

    def salt(self) -> bytes:
        return generate_salt(self.salt_len, self.salt_source)

    def digest(self, password: bytes, salt: bytes) -> bytes:
        kdf = Scrypt(salt=salt, length=self.key_len, n=self.n, r=self.r, p=self.p)
        return kdf.derive(password)

    def at_least(self, other: ScryptParameters) -> bool:
        return not (
            self.n < other.n
            or self.r < other.r
            or self.p < other.p
            or self.key_len < other.key_len
            or self.salt_len < other.salt_len
        )

    def with_stored_salt(self, salt: bytes) -> Self:
        return dataclasses.replace(self, salt_len=len(salt))


def install(registry: Registry, config: ScryptParameters | None = None) -> BridgeEncoder:
    """Validate *config* and register a scrypt encoder built from it."""
    config = config if config is not None else ScryptParameters()
    config.validate()
    encoder = BridgeEncoder(IDENTIFIER, lambda: dataclasses.replace(config))
    registry.register(AlgorithmId.SCRYPT, encoder)
    return encoder


def get_config(registry: Registry | None = None) -> ScryptParameters:
    """The configuration used for new scrypt records (defaults if not registered)."""
    from mp_mcf.security.registry.default import get_default_registry

    encoder = (registry or get_default_registry()).get(AlgorithmId.SCRYPT)
    if isinstance(encoder, BridgeEncoder):
        params = encoder.parameters()
        if isinstance(params, ScryptParameters):
            return params
    return ScryptParameters()


def set_config(config: ScryptParameters, registry: Registry | None = None) -> None:
    from mp_mcf.security.registry.default import get_default_registry

    install(registry or get_default_registry(), config)


__all__ = [
    "DEFAULT_KEY_LEN",
    "DEFAULT_N",
    "DEFAULT_P",
    "DEFAULT_R",
    "DEFAULT_SALT_LEN",
    "IDENTIFIER",
    "ScryptParameters",
    "get_config",
    "install",
    "set_config",
]
