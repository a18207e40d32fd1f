from hypothesis import given
from hypothesis import strategies as st

from phisema.monotype import Polytype, make_con, make_fun, make_var
from phisema.substitution import Substitution

A, B, C = make_var(0), make_var(1), make_var(2)
I32 = make_con("i32")
BOOL = make_con("bool")


def test_empty_substitution():
    s = Substitution()
    assert not s
    assert len(s) == 0
    assert s.apply(A) == A


def test_apply_unmapped_var_is_identity():
    s = Substitution({A: I32})
    assert s.apply(B) == B


def test_apply_mapped_var():
    s = Substitution({A: I32})
    assert s.apply(A) == I32


def test_apply_follows_chains():
    s = Substitution({A: B, B: I32})
    assert s.apply(A) == I32


def test_apply_into_constructor_args():
    s = Substitution({A: I32, B: BOOL})
    t = make_con("Pair", [A, make_con("List", [B])])
    assert s.apply(t) == make_con("Pair", [I32, make_con("List", [BOOL])])


def test_apply_into_function_type():
    s = Substitution({A: I32, C: BOOL})
    t = make_fun([A, B], C)
    assert s.apply(t) == make_fun([I32, B], BOOL)


def test_apply_to_polytype_skips_quantified():
    s = Substitution({A: I32, B: BOOL})
    poly = Polytype([A], make_fun([A], B))
    result = s.apply(poly)
    assert result == Polytype([A], make_fun([A], BOOL))


def test_apply_to_polytype_without_quant_substitutes_everything():
    s = Substitution({A: I32})
    result = s.apply(Polytype([], make_con("List", [A])))
    assert result == Polytype([], make_con("List", [I32]))


def test_compose_updates_existing_values():
    s1 = Substitution({A: B})
    s1.compose(Substitution({B: I32}))
    assert s1.mapping[A] == I32
    assert s1.mapping[B] == I32


def test_compose_other_overrides():
    s1 = Substitution({A: BOOL})
    s1.compose(Substitution({A: I32}))
    assert s1.mapping[A] == I32


def test_compose_with_empty_is_noop():
    s1 = Substitution({A: B})
    s1.compose(Substitution())
    assert s1.mapping == {A: B}


_ground = st.sampled_from([make_con("i32"), make_con("bool"), make_con("f64")])
_vars = st.integers(min_value=0, max_value=3).map(make_var)
_types = st.recursive(
    _ground | _vars,
    lambda children: st.builds(
        make_con, st.sampled_from(["List", "Pair"]), st.lists(children, max_size=3)
    )
    | st.builds(make_fun, st.lists(children, max_size=3), children),
    max_leaves=8,
)
_ground_mappings = st.dictionaries(_vars, _ground, max_size=4)


@given(_types, _ground_mappings)
def test_ground_substitution_removes_mapped_vars(t, mapping):
    s = Substitution(dict(mapping))
    result = s.apply(t)
    assert result.free_type_vars() == t.free_type_vars() - set(mapping)