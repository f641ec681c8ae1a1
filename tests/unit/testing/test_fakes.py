"""Unit tests for test fakes and strategies."""

from __future__ import annotations

from hypothesis import given

from mp_mcf.kernel.security import generate_salt
from mp_mcf.kernel.types import PasswordRecord, PasswordRecordCodec
from mp_mcf.kernel.types.algorithm import AlgorithmId
from mp_mcf.security.algorithms import bcrypt, pbkdf2, scrypt
from mp_mcf.security.registry import Registry
from mp_mcf.testing.fakes import CountingSaltSource, FastRegistry, FixedSaltSource, ShortSaltSource
from mp_mcf.testing.generators import password_record_strategy


class TestSaltSources:
    def test_fixed_records_requests(self) -> None:
        source = FixedSaltSource(b"abcd")
        assert generate_salt(4, source) == b"abcd"
        assert source.calls == [4]

    def test_counting(self) -> None:
        source = CountingSaltSource()
        assert source(3) == b"\x01\x01\x01"
        assert source(2) == b"\x02\x02"
        assert source.count == 2

    def test_short(self) -> None:
        assert ShortSaltSource()(8) == b"\x00" * 7
        assert ShortSaltSource()(0) == b""


class TestFastRegistry:
    def test_matches_process_layout_with_cheap_factors(self) -> None:
        registry = FastRegistry()
        assert registry.registered() == (AlgorithmId.BCRYPT, AlgorithmId.SCRYPT, AlgorithmId.PBKDF2)
        assert registry.default is AlgorithmId.BCRYPT
        assert bcrypt.get_cost(registry) == bcrypt.MIN_COST
        assert scrypt.get_config(registry).n == 16
        assert pbkdf2.get_config(registry).iterations == 10

    def test_is_a_registry(self) -> None:
        assert isinstance(FastRegistry(), Registry)

    def test_independent_instances(self) -> None:
        first, second = FastRegistry(), FastRegistry()
        first.set_default(AlgorithmId.SCRYPT)
        assert second.default is AlgorithmId.BCRYPT


class TestPasswordRecordStrategy:
    @given(password_record_strategy())
    def test_records_are_serializable(self, record: PasswordRecord) -> None:
        assert b"$" not in record.name
        assert b"$" not in record.params
        assert record.salt and record.digest
        assert PasswordRecordCodec(record.name).serialize(record).startswith(b"$" + record.name + b"$")
