"""Monotypes, type schemes and fresh type-variable generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

INT_TYPE_NAMES = frozenset({"i8", "i16", "i32", "i64"})
FLOAT_TYPE_NAMES = frozenset({"f32", "f64"})


class Monotype:
    """Base of all monomorphic types: variables, constructors and functions."""

    __slots__ = ()

    def free_type_vars(self) -> set[TypeVar]:
        """Return the set of type variables occurring in this type."""
        raise NotImplementedError

    def is_int_type(self) -> bool:
        """True for the built-in integer constructors."""
        return isinstance(self, TypeCon) and self.name in INT_TYPE_NAMES

    def is_float_type(self) -> bool:
        """True for the built-in floating-point constructors."""
        return isinstance(self, TypeCon) and self.name in FLOAT_TYPE_NAMES


@dataclass(frozen=True)
class TypeVar(Monotype):
    """A type variable; identity is its id, constraints list permitted types."""

    id: int
    constraints: Optional[Tuple[str, ...]] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.constraints is not None and not isinstance(self.constraints, tuple):
            object.__setattr__(self, "constraints", tuple(self.constraints))

    def free_type_vars(self) -> set[TypeVar]:
        return {self}

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class TypeCon(Monotype):
    """A named type constructor applied to zero or more argument types."""

    name: str
    args: Tuple[Monotype, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    def free_type_vars(self) -> set[TypeVar]:
        result: set[TypeVar] = set()
        for arg in self.args:
            result |= arg.free_type_vars()
        return result

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}<{', '.join(str(a) for a in self.args)}>"


@dataclass(frozen=True)
class TypeFun(Monotype):
    """A function type from parameter types to a return type."""

    params: Tuple[Monotype, ...]
    ret: Monotype

    def __post_init__(self) -> None:
        if not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))

    def free_type_vars(self) -> set[TypeVar]:
        result: set[TypeVar] = set()
        for param in self.params:
            result |= param.free_type_vars()
        return result | self.ret.free_type_vars()

    def __str__(self) -> str:
        return f"({', '.join(str(p) for p in self.params)}) -> {self.ret}"


def make_var(id: int, constraints: Optional[Iterable[str]] = None) -> TypeVar:
    """Create a type variable, optionally restricted to the given type names."""
    return TypeVar(id, None if constraints is None else tuple(constraints))


def make_con(name: str, args: Iterable[Monotype] = ()) -> TypeCon:
    """Create a type constructor."""
    return TypeCon(name, tuple(args))


def make_fun(params: Iterable[Monotype], ret: Monotype) -> TypeFun:
    """Create a function type."""
    return TypeFun(tuple(params), ret)


@dataclass(frozen=True)
class Polytype:
    """A type scheme: a monotype with universally quantified variables."""

    quant: Tuple[TypeVar, ...]
    body: Monotype

    def __post_init__(self) -> None:
        if not isinstance(self.quant, tuple):
            object.__setattr__(self, "quant", tuple(self.quant))

    def free_type_vars(self) -> set[TypeVar]:
        """Variables of the body that are not quantified."""
        return self.body.free_type_vars() - set(self.quant)


@dataclass
class TypeVarFactory:
    """Hands out consecutive fresh type-variable ids."""

    next: int = 0

    def fresh(self) -> int:
        value = self.next
        self.next += 1
        return value