"""Security – bridge between ParameterSet implementations and PasswordEncoder."""
from mp_mcf.security.bridge.encoder import BridgeEncoder, ParameterFactory
from mp_mcf.security.bridge.parameters import ParameterSet

__all__ = ["BridgeEncoder", "ParameterFactory", "ParameterSet"]
