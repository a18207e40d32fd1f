"""Instantiation and generalisation of type schemes."""

from __future__ import annotations

from phisema.monotype import Monotype, Polytype, TypeVarFactory, make_var
from phisema.substitution import Substitution
from phisema.type_env import TypeEnv


def instantiate(poly: Polytype, factory: TypeVarFactory) -> Monotype:
    """Replace each quantified variable of ``poly`` by a fresh type variable."""
    if not poly.quant:
        return poly.body
    subst = Substitution()
    for var in poly.quant:
        fresh = make_var(factory.fresh())
        subst.mapping.setdefault(var, fresh)
    return subst.apply(poly.body)


def generalize(env: TypeEnv, t: Monotype) -> Polytype:
    """Quantify the variables of ``t`` that are not free in ``env``."""
    env_vars = env.free_type_vars()
    quant = sorted(
        (v for v in t.free_type_vars() if v not in env_vars), key=lambda v: v.id
    )
    return Polytype(tuple(quant), t)