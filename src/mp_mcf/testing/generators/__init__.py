"""Testing generators – Hypothesis strategies."""
from mp_mcf.testing.generators.strategies import password_record_strategy

__all__ = ["password_record_strategy"]
