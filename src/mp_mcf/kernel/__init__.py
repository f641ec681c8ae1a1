"""Kernel – errors, value types and ports shared by every layer."""
