# phisema

Building blocks for the semantic-analysis stage of a compiler for the Phi
language. It provides Hindley-Milner style types, substitutions, unification,
generalisation and instantiation. It also has small helpers that keep source
text around for diagnostics.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Types

`phisema.monotype` defines the type language:

- `TypeVar(id, constraints=None)`: a type variable. Two variables are equal
  when their ids are equal. `constraints` is an optional tuple of the
  constructor names the variable may stand for.
- `TypeCon(name, args=())`: a named type constructor with argument types,
  such as `i32`.
- `TypeFun(params, ret)`: a function type with parameter types and a return
  type.
- `Monotype`: the common base of the three classes above. It offers
  `free_type_vars()`, `is_int_type()` (true for `i8`, `i16`, `i32`, `i64`) and
  `is_float_type()` (true for `f32`, `f64`).
- `make_var(id, constraints=None)`, `make_con(name, args=())` and
  `make_fun(params, ret)` build these types from any iterables.
- `Polytype(quant, body)`: a type scheme, meaning quantified variables over a
  monotype body. Its `free_type_vars()` excludes the quantified variables.
- `TypeVarFactory`: hands out consecutive ids, starting at 0, through
  `fresh()`.

All types are immutable and hashable. `str()` renders them as `3`, `i32`,
`pair<i32, 0>` or `(i32, 1) -> bool`.

```python
from phisema.monotype import TypeVarFactory, make_con, make_fun, make_var
from phisema.unify import unify

factory = TypeVarFactory()
a = make_var(factory.fresh(), None)
f = make_fun([a], a)
g = make_fun([make_con("i32", [])], make_var(factory.fresh(), None))

subst = unify(f, g)
print(subst.apply(g))   # (i32) -> i32
```

## Substitution and unification

`phisema.substitution.Substitution` maps type variables to monotypes through
its `mapping` dictionary. A substitution is falsy when empty, and `len()` gives
the number of bindings.

- `apply(t)` rewrites a `Monotype`, following bindings transitively. It also
  rewrites a `Polytype`, leaving the quantified variables alone.
- `compose(other)` updates the substitution in place so that it means "this,
  then `other`".

`phisema.unify` provides these functions:

- `unify(t1, t2)` returns the most general substitution that makes the two
  types equal.
- `occurs(var, t)` reports whether `var` appears in `t`.
- `bind_var(var, t)` binds a variable, running the occurs check and the
  constraint checks.

`unify` and `bind_var` raise `UnifyError` in these cases:

- a failed occurs check;
- a constructor name or arity mismatch;
- a parameter-count mismatch;
- a constructor unified with a function;
- a constrained variable bound to a constructor outside its constraints;
- a constrained variable bound to another constrained variable when the two
  constraint sets have no name in common.

## Environments and schemes

`phisema.type_env.TypeEnv` binds schemes in two ways:

- `bind_decl` and `lookup_decl` bind declaration objects, compared by
  identity;
- `bind_name` and `lookup_name` bind plain names.

A binding is never replaced: binding a key that is already bound keeps the
first scheme. Lookups return `None` for unbound keys.

`apply_substitution(subst)` rewrites every binding. `free_type_vars()` collects
the free variables of all bound schemes.

`phisema.algorithms` provides two functions:

- `instantiate(poly, factory)` replaces each quantified variable with a fresh
  unconstrained one.
- `generalize(env, t)` quantifies the variables of `t` that are not free in
  `env`, ordered by id.

## Source locations

`phisema.source` holds three classes:

- `SrcLocation(path, line, col)`: a 1-indexed position.
- `SrcSpan(start, end=None)`: inclusive start and end locations. It covers a
  single position when `end` is omitted, and offers `is_multiline()` and
  `line_count()`.
- `SrcManager`: keeps registered source files.

`SrcManager` has these methods:

- `add_src_file(path, content)` registers a file.
- `get_line(path, line_num)` returns one line, or `None` if it is out of range.
- `get_lines(path, start_line, end_line)` returns the existing lines of an
  inclusive range.
- `get_line_count(path)` returns the number of lines, or 0 for an unknown
  file.

```python
from phisema.source import SrcManager

sources = SrcManager()
sources.add_src_file("main.phi", "fun main() {\n  return 0;\n}\n")
print(sources.get_line("main.phi", 2))    # "  return 0;"
print(sources.get_line_count("main.phi")) # 3
```

## What this package does not do

This is a library of primitives only:

- It has no lexer, parser or syntax tree for Phi programs.
- It has no pass that walks a program to infer or check its types.
- It has no diagnostic printer.
- It has no code generation.
- It has no command-line tool.