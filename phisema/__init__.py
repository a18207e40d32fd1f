"""Type inference primitives and source utilities for the Phi compiler front end."""

__version__ = "0.1.0"

__all__ = ["algorithms", "monotype", "source", "substitution", "type_env", "unify"]