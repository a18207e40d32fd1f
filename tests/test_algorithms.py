from hypothesis import given
from hypothesis import strategies as st

from phisema.algorithms import generalize, instantiate
from phisema.monotype import (
    Polytype,
    TypeVar,
    TypeVarFactory,
    make_con,
    make_fun,
    make_var,
)
from phisema.type_env import TypeEnv
from phisema.unify import unify

monotypes = st.recursive(
    st.one_of(
        st.builds(make_var, st.integers(min_value=0, max_value=20)),
        st.sampled_from(["i32", "f64", "bool"]).map(make_con),
    ),
    lambda children: st.one_of(
        st.builds(make_con, st.sampled_from(["array", "pair"]), st.lists(children, max_size=3)),
        st.builds(make_fun, st.lists(children, max_size=3), children),
    ),
    max_leaves=10,
)


def test_instantiate_without_quantifiers_returns_body():
    body = make_fun([make_var(0)], make_con("i32"))
    factory = TypeVarFactory()
    assert instantiate(Polytype((), body), factory) == body
    assert factory.next == 0


def test_instantiate_renames_quantified_vars():
    a, b = make_var(0), make_var(1)
    factory = TypeVarFactory(next=10)
    result = instantiate(Polytype((a,), make_fun([a], b)), factory)
    assert result.params[0] == TypeVar(10)
    assert result.ret == b
    assert factory.next == 11


def test_generalize_quantifies_vars_not_in_env():
    a, b = make_var(0), make_var(1)
    env = TypeEnv()
    env.bind_name("x", Polytype((), b))
    t = make_fun([a], b)
    poly = generalize(env, t)
    assert set(poly.quant) == {a}
    assert poly.body == t


@given(monotypes)
def test_generalize_in_empty_env_closes_type(t):
    poly = generalize(TypeEnv(), t)
    assert poly.free_type_vars() == set()
    assert set(poly.quant) == t.free_type_vars()


@given(monotypes)
def test_instantiate_generalized_gives_fresh_renaming(t):
    factory = TypeVarFactory(next=100)
    inst = instantiate(generalize(TypeEnv(), t), factory)
    assert not (inst.free_type_vars() & t.free_type_vars())
    assert len(inst.free_type_vars()) == len(t.free_type_vars())
    subst = unify(t, inst)
    assert subst.apply(t) == subst.apply(inst)