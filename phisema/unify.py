"""First-order unification of monotypes."""

from __future__ import annotations

from phisema.monotype import Monotype, TypeCon, TypeFun, TypeVar
from phisema.substitution import Substitution


class UnifyError(Exception):
    """Raised when two types cannot be unified."""


def occurs(var: TypeVar, t: Monotype) -> bool:
    """True if ``var`` occurs in ``t``."""
    if isinstance(t, TypeVar):
        return t == var
    return var in t.free_type_vars()


def bind_var(var: TypeVar, t: Monotype) -> Substitution:
    """Bind ``var`` to ``t``, checking occurrence and type constraints."""
    if isinstance(t, TypeVar) and t == var:
        return Substitution()
    if occurs(var, t):
        raise UnifyError(f"occurs check failed: {var.id} in {t}")

    if var.constraints is not None:
        if isinstance(t, TypeCon):
            if t.name not in var.constraints:
                message = (
                    "type constraint violation: "
                    f"found type {t.name} cannot be "
                    "unified with expected types of: "
                )
                message += "".join(f"{possible}, " for possible in var.constraints)
                raise UnifyError(message)
        elif isinstance(t, TypeVar) and t.constraints is not None:
            if not set(var.constraints) & set(t.constraints):
                raise UnifyError("incompatible type constraints")

    return Substitution({var: t})


def _unify_pairwise(left, right) -> Substitution:
    subst = Substitution()
    for a, b in zip(left, right):
        subst.compose(unify(subst.apply(a), subst.apply(b)))
    return subst


def unify(t1: Monotype, t2: Monotype) -> Substitution:
    """Return the most general substitution making ``t1`` and ``t2`` equal."""
    if isinstance(t1, TypeVar):
        return bind_var(t1, t2)
    if isinstance(t2, TypeVar):
        return bind_var(t2, t1)

    if isinstance(t1, TypeCon) and isinstance(t2, TypeCon):
        if t1.name != t2.name or len(t1.args) != len(t2.args):
            raise UnifyError(f"cannot unify {t1} with {t2}")
        return _unify_pairwise(t1.args, t2.args)

    if isinstance(t1, TypeFun) and isinstance(t2, TypeFun):
        if len(t1.params) != len(t2.params):
            raise UnifyError(f"param length mismatch: {t1} vs {t2}")
        subst = _unify_pairwise(t1.params, t2.params)
        subst.compose(unify(subst.apply(t1.ret), subst.apply(t2.ret)))
        return subst

    raise UnifyError(f"Cannot unify {t1} with {t2}")