"""Config – password policy loaded from the environment.

Example::

    settings = EnvSettingsLoader().load(PasswordPolicySettings)
    apply_policy(settings)

``MCF_DEFAULT_ALGORITHM=scrypt MCF_SCRYPT_N=131072`` then makes every
new record scrypt with twice the default work factor, and every older
record report ``is_current() == False``.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import ClassVar

from mp_mcf.config.settings import Settings
from mp_mcf.config.validation import InvalidSettingValueError
from mp_mcf.kernel.errors import ConfigurationError
from mp_mcf.kernel.types import AlgorithmId
from mp_mcf.observability.logging import get_logger
from mp_mcf.security.algorithms import bcrypt, pbkdf2, scrypt
from mp_mcf.security.registry import Registry, get_default_registry

logger = get_logger(__name__)


@dataclasses.dataclass
class PasswordPolicySettings(Settings):
    """Algorithm choice and work factors for new password records.

    An empty ``default_algorithm`` keeps the first registered algorithm.
    A ``pbkdf2_key_len`` of 0 means "output size of ``pbkdf2_hash``".
    """

    _prefix: ClassVar[str] = "MCF"

    default_algorithm: str = ""
    bcrypt_cost: int = bcrypt.DEFAULT_COST
    scrypt_n: int = scrypt.DEFAULT_N
    scrypt_r: int = scrypt.DEFAULT_R
    scrypt_p: int = scrypt.DEFAULT_P
    scrypt_key_len: int = scrypt.DEFAULT_KEY_LEN
    scrypt_salt_len: int = scrypt.DEFAULT_SALT_LEN
    pbkdf2_iterations: int = pbkdf2.DEFAULT_ITERATIONS
    pbkdf2_hash: str = pbkdf2.DEFAULT_PRF
    pbkdf2_key_len: int = 0
    pbkdf2_salt_len: int = pbkdf2.DEFAULT_SALT_LEN

    def _validate(self) -> None:
        if self.default_algorithm:
            try:
                AlgorithmId.coerce(self.default_algorithm)
            except ConfigurationError as exc:
                raise InvalidSettingValueError(
                    "MCF_DEFAULT_ALGORITHM", self.default_algorithm, exc.message
                ) from exc
        self._check("MCF_BCRYPT_COST", self.bcrypt_cost, lambda: bcrypt.validate_cost(self.bcrypt_cost))
        self._check("MCF_SCRYPT", self.scrypt_config(), lambda: self.scrypt_config().validate())
        self._check("MCF_PBKDF2", self.pbkdf2_config(), lambda: self.pbkdf2_config().validate())

    @staticmethod
    def _check(setting: str, value: object, validate: Callable[[], None]) -> None:
        try:
            validate()
        except ConfigurationError as exc:
            raise InvalidSettingValueError(setting, value, exc.message) from exc

    @property
    def default(self) -> AlgorithmId | None:
        return AlgorithmId.coerce(self.default_algorithm) if self.default_algorithm else None

    def scrypt_config(self) -> scrypt.ScryptParameters:
        return scrypt.ScryptParameters(
            key_len=self.scrypt_key_len,
            salt_len=self.scrypt_salt_len,
            n=self.scrypt_n,
            r=self.scrypt_r,
            p=self.scrypt_p,
        )

    def pbkdf2_config(self) -> pbkdf2.Pbkdf2Parameters:
        key_len = self.pbkdf2_key_len
        if key_len == 0 and self.pbkdf2_hash in pbkdf2.HASHES:
            key_len = pbkdf2.hash_size(self.pbkdf2_hash)
        return pbkdf2.Pbkdf2Parameters(
            prf=self.pbkdf2_hash,
            iterations=self.pbkdf2_iterations,
            key_len=key_len,
            salt_len=self.pbkdf2_salt_len,
        )


def apply_policy(settings: PasswordPolicySettings, registry: Registry | None = None) -> Registry:
    """Install every built-in algorithm with *settings*' work factors, then
    select the configured default."""
    registry = registry or get_default_registry()
    bcrypt.install(registry, settings.bcrypt_cost)
    scrypt.install(registry, settings.scrypt_config())
    pbkdf2.install(registry, settings.pbkdf2_config())
    if settings.default is not None:
        registry.set_default(settings.default)
    logger.info("password_policy_applied", default=str(registry.default))
    return registry


__all__ = ["PasswordPolicySettings", "apply_policy"]
