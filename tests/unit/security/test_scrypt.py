"""Unit tests for the scrypt encoder."""

from __future__ import annotations

import dataclasses

import pytest
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from mp_mcf.kernel.errors import InvalidParameterError, MalformedParamsError
from mp_mcf.kernel.types import PasswordRecordCodec
from mp_mcf.security.algorithms import scrypt
from mp_mcf.security.algorithms.scrypt import ScryptParameters
from mp_mcf.security.registry import Registry
from mp_mcf.testing.fakes import FixedSaltSource

FAST = ScryptParameters(n=16, r=1, p=1)

# Records written by earlier releases; the second uses hex fields.
LEGACY_RECORDS = [
    (
        "yssIi0AL",
        "$scrypt$KeyLen=128,N=65536,R=10,P=2$PmxwHoNHjIILwrdOG8vA+A==$KRYMgbJr4vrYutrEjtueDDylXHQ2EoePyPoqtrDnil0jm1RfuyxT90/3gce5hw0/DTVmpcDnzkt1MWiK+zfS7+hh1EONspTZl8nGFLCsXcGiarrNKSSyRnsJN0DmSe20cfxodAB+DN1f84hxZbdmF20A2uFj36kE2ZKgTdlAYFE=",
    ),
    (
        "yssIi0AL",
        "$scrypt$KeyLen=128,N=16384,R=8,P=1$643873597251626754$e6b2da790d99bef794d6feb8ab7fda61f44251303da936ad75162454fe3017e80302ed0fdf654ade552906819aee1370278e852aa2ee9ca9b91e934c6337d6607c94a98e6c06b7279cbfc30d9c783d30e9958ae601dd90d57dcc162eebc513164bd717abe23e7b8281cc13865e0d7453ccd36ff9dbfcb7aadf2451da926c8413",
    ),
]


class TestCreate:
    def test_record_layout(self, isolated_registry: Registry) -> None:
        salt = b"0123456789abcdef"
        config = dataclasses.replace(FAST, salt_source=FixedSaltSource(salt))
        scrypt.set_config(config, isolated_registry)

        encoded = isolated_registry.create("g5Dr58dvyD")
        record = PasswordRecordCodec(scrypt.IDENTIFIER).parse(encoded)
        assert record.params == b"KeyLen=32,N=16,R=1,P=1"
        assert record.salt == salt
        expected = Scrypt(salt=salt, length=32, n=16, r=1, p=1).derive(b"g5Dr58dvyD")
        assert record.digest == expected

    def test_rfc7914_vector(self, isolated_registry: Registry) -> None:
        config = ScryptParameters(
            key_len=64, salt_len=4, n=1024, r=8, p=16, salt_source=FixedSaltSource(b"NaCl")
        )
        scrypt.set_config(config, isolated_registry)
        record = PasswordRecordCodec(scrypt.IDENTIFIER).parse(isolated_registry.create("password"))
        assert record.digest.hex() == (
            "fdbabe1c9d3472007856e7190d01e9fe7c6ad7cbc8237830e77376634b373162"
            "2eaf30d92e22a3886ff109279d9830dac727afb94a83ee6d8360cbdfa2cc0640"
        )

    def test_verify_and_is_current(self, isolated_registry: Registry) -> None:
        scrypt.set_config(FAST, isolated_registry)
        encoded = isolated_registry.create("g5Dr58dvyD")
        assert isolated_registry.verify("g5Dr58dvyD", encoded) is True
        assert isolated_registry.verify("g5Dr58dvyd", encoded) is False
        assert isolated_registry.is_current(encoded) is True

    @pytest.mark.parametrize("change", [{"n": 32}, {"r": 2}, {"p": 2}, {"key_len": 33}, {"salt_len": 17}])
    def test_stronger_config_makes_record_stale(self, isolated_registry: Registry, change: dict) -> None:
        scrypt.set_config(FAST, isolated_registry)
        encoded = isolated_registry.create("pw")
        scrypt.set_config(dataclasses.replace(FAST, **change), isolated_registry)
        assert isolated_registry.verify("pw", encoded) is True
        assert isolated_registry.is_current(encoded) is False


class TestLegacyRecords:
    @pytest.mark.parametrize(("password", "encoded"), LEGACY_RECORDS)
    def test_verify(self, isolated_registry: Registry, password: str, encoded: str) -> None:
        scrypt.set_config(FAST, isolated_registry)
        assert isolated_registry.verify(password, encoded) is True
        assert isolated_registry.verify(password.upper(), encoded) is False


class TestParameters:
    def test_defaults(self) -> None:
        config = ScryptParameters()
        assert (config.key_len, config.salt_len, config.n, config.r, config.p) == (32, 16, 65536, 10, 2)

    @pytest.mark.parametrize(
        "change",
        [{"n": 0}, {"n": 1}, {"n": 1000}, {"r": 0}, {"p": 0}, {"key_len": 0}, {"salt_len": 0}, {"r": 1 << 15, "p": 1 << 15}],
    )
    def test_validate_rejects(self, change: dict) -> None:
        with pytest.raises(InvalidParameterError):
            dataclasses.replace(FAST, **change).validate()

    def test_set_config_validates_first(self, isolated_registry: Registry) -> None:
        scrypt.set_config(FAST, isolated_registry)
        with pytest.raises(InvalidParameterError):
            scrypt.set_config(dataclasses.replace(FAST, n=15), isolated_registry)
        assert scrypt.get_config(isolated_registry) == FAST

    def test_get_config_defaults_when_not_registered(self, isolated_registry: Registry) -> None:
        assert scrypt.get_config(isolated_registry) == ScryptParameters()

    @pytest.mark.parametrize(
        "params", ["KeyLen=32,N=16,R=1", "keylen=32,N=16,R=1,P=1", "KeyLen=32,N=16,R=1,P=1,X=2", "KeyLen=-1,N=16,R=1,P=1"]
    )
    def test_deserialize_malformed(self, params: str) -> None:
        with pytest.raises(MalformedParamsError):
            FAST.deserialize_params(params)

    def test_deserialize_invalid_value(self) -> None:
        with pytest.raises(InvalidParameterError):
            FAST.deserialize_params("KeyLen=32,N=12,R=1,P=1")

    def test_deserialize_keeps_salt_source(self) -> None:
        source = FixedSaltSource(b"x" * 16)
        parsed = dataclasses.replace(FAST, salt_source=source).deserialize_params("KeyLen=64,N=1024,R=8,P=16")
        assert parsed.salt_source is source
        assert (parsed.key_len, parsed.n, parsed.r, parsed.p) == (64, 1024, 8, 16)


class TestMalformedRecords:
    @pytest.mark.parametrize(
        "params",
        [
            "KeyLen=32,N=" + "9" * 5000 + ",R=1,P=1",
            "KeyLen=" + "3" * 11 + ",N=16,R=1,P=1",
        ],
    )
    def test_oversized_numbers_are_parse_errors(self, isolated_registry: Registry, params: str) -> None:
        scrypt.set_config(FAST, isolated_registry)
        with pytest.raises(MalformedParamsError):
            isolated_registry.verify("pw", f"$scrypt${params}$c2FsdA==$c2FsdA==")
