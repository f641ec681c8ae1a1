"""Kernel security – PasswordEncoder port, salt generation, sensitive fields."""
from mp_mcf.kernel.security.encoder import PasswordEncoder
from mp_mcf.kernel.security.salt import SaltSource, generate_salt

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "plaintext", "secret", "encoded", "digest", "salt",
    "hash", "token", "authorization",
})

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "PasswordEncoder",
    "SaltSource",
    "generate_salt",
]
