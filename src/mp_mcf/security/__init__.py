"""Security – registry, bridge and built-in algorithms."""
