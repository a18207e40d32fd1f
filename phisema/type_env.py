"""Typing environment binding declarations and names to type schemes."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from phisema.monotype import Polytype, TypeVar
from phisema.substitution import Substitution


class TypeEnv:
    """Maps declarations (by identity) and plain names to type schemes.

    A binding is never replaced: binding an already bound key keeps the first
    scheme.
    """

    def __init__(self) -> None:
        # Keyed by id(); the declaration is kept alongside so the id stays valid.
        self._decls: Dict[int, Tuple[Any, Polytype]] = {}
        self._names: Dict[str, Polytype] = {}

    def bind_decl(self, decl: Any, poly: Polytype) -> None:
        """Bind a declaration object to a scheme unless it is already bound."""
        self._decls.setdefault(id(decl), (decl, poly))

    def bind_name(self, name: str, poly: Polytype) -> None:
        """Bind a name to a scheme unless it is already bound."""
        self._names.setdefault(name, poly)

    def lookup_decl(self, decl: Any) -> Optional[Polytype]:
        """Return the scheme bound to ``decl``, or None."""
        entry = self._decls.get(id(decl))
        if entry is None or entry[0] is not decl:
            return None
        return entry[1]

    def lookup_name(self, name: str) -> Optional[Polytype]:
        """Return the scheme bound to ``name``, or None."""
        return self._names.get(name)

    def apply_substitution(self, subst: Substitution) -> None:
        """Apply ``subst`` to every scheme in the environment."""
        self._decls = {
            key: (decl, subst.apply(poly)) for key, (decl, poly) in self._decls.items()
        }
        self._names = {name: subst.apply(poly) for name, poly in self._names.items()}

    def free_type_vars(self) -> set[TypeVar]:
        """Free type variables of all schemes in the environment."""
        result: set[TypeVar] = set()
        for _, poly in self._decls.values():
            result |= poly.free_type_vars()
        for poly in self._names.values():
            result |= poly.free_type_vars()
        return result