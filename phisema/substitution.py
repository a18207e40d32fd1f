"""Substitutions mapping type variables to monotypes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Union, overload

from phisema.monotype import Monotype, Polytype, TypeCon, TypeFun, TypeVar


@dataclass
class Substitution:
    """A mapping from type variables to the types they stand for."""

    mapping: Dict[TypeVar, Monotype] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.mapping)

    def __len__(self) -> int:
        return len(self.mapping)

    @overload
    def apply(self, t: Monotype) -> Monotype: ...

    @overload
    def apply(self, t: Polytype) -> Polytype: ...

    def apply(self, t: Union[Monotype, Polytype]) -> Union[Monotype, Polytype]:
        """Apply the substitution; quantified variables of a scheme are untouched."""
        if isinstance(t, Polytype):
            return self._apply_poly(t)
        return self._apply_mono(t)

    def _apply_mono(self, t: Monotype) -> Monotype:
        match t:
            case TypeVar():
                bound = self.mapping.get(t)
                return t if bound is None else self._apply_mono(bound)
            case TypeCon(name=name, args=args):
                if not args:
                    return t
                return TypeCon(name, tuple(self._apply_mono(a) for a in args))
            case TypeFun(params=params, ret=ret):
                return TypeFun(
                    tuple(self._apply_mono(p) for p in params), self._apply_mono(ret)
                )
        raise TypeError(f"not a monotype: {t!r}")

    def _apply_poly(self, poly: Polytype) -> Polytype:
        if not self.mapping or not poly.quant:
            return Polytype(poly.quant, self._apply_mono(poly.body))
        quantified = set(poly.quant)
        filtered = Substitution(
            {var: t for var, t in self.mapping.items() if var not in quantified}
        )
        return Polytype(poly.quant, filtered._apply_mono(poly.body))

    def compose(self, other: Substitution) -> None:
        """Make this substitution ``other`` applied after ``self``, in place."""
        if not other:
            return
        for var, t in self.mapping.items():
            self.mapping[var] = other.apply(t)
        self.mapping.update(other.mapping)