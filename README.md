# aris

A library for working with formulas of propositional and first-order logic:
an immutable expression tree, a parser for ASCII and Unicode notation,
negation and conjunctive normal forms, generic rewriting, quantifier
rewrites and a set of named equivalence rules.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Parsing formulas

```python
from aris.parser import parse, try_parse, ParseError

e = parse("forall x (P(x) -> (Q & R))")
print(e)                              # (∀ x (P(x) → (Q ∧ R)))

try_parse("bad(missing, paren")       # returns None
parse("bad(missing, paren")           # raises ParseError
```

Operators are written in ASCII or Unicode: `~` / `¬`, `&` / `∧` / `/\`,
`|` / `∨` / `\/`, `->` / `→`, `<->` / `↔`, `===` / `≡`, `+`, `*`,
`forall ` / `∀`, `exists ` / `∃`, `_|_` / `⊥` and `^|^` / `⊤`. A chain of
associative operators must use one operator throughout, and an implication
takes exactly two operands; anything else needs parentheses.

`aris.macros.expand` turns typed shorthands into logic symbols:

```python
from aris.macros import expand

expand(".con -> (.taut .bicon ~P)")   # "⊥ → (⊤ ↔ ¬P)"
```

## Expressions

`aris.expr` defines the expression classes `Contra`, `Taut`, `Var`, `Apply`,
`Not`, `Impl`, `Assoc` and `Quant` (all subclasses of `Expr`), with the
operator enum `Op` and quantifier enum `QuantKind`. Expressions are frozen,
hashable and totally ordered; `~e` builds a negation and `a | b` a
disjunction.

Helpers in the same module:

- constructors `var`, `apply`, `implies`, `assoc`, `forall`, `exists` and the
  placeholders `not_place_holder`, `impl_place_holder`,
  `assoc_place_holder`, `quant_place_holder`;
- `free_vars`, `gen_var` and capture-avoiding `subst`;
- `unify`, which takes `(left, right)` pairs and returns a `Substitution`
  (or `None`), working modulo renaming of bound variables;
- `infer_arities` and `evaluate`, which evaluates a quantifier-free formula
  given a truth table for every free variable;
- `disjuncts`, `from_disjuncts`, `conjuncts`, `from_conjuncts`;
- `expressions_for_depth`, which enumerates every formula up to a depth.

```python
from aris.expr import evaluate
from aris.parser import parse

evaluate(parse("P -> Q"), {"P": [True], "Q": [False]})   # False
```

## Normal forms

`aris.normal_forms` converts quantifier-free formulas with `into_nnf`
(giving `NnfLit`, `NnfAnd`, `NnfOr`) and `into_cnf` (giving a `CnfExpr`,
whose `clauses` are tuples of `(polarity, name)` literals). Both return
`None` for quantifiers, applications, `≡` and arithmetic.

## Rewriting

- `aris.normalize`: `transform` rewrites until a fixed point,
  `transform_set` collects every reachable rewrite; also
  `sort_commutative_ops`, `combine_associative_ops`, `normalize_demorgans`,
  `normalize_halfdemorgans` and `normalize_biconditional_contraposition`.
- `aris.quantifiers`: `negate_quantifiers`, `normalize_null_quantifiers`,
  `replacing_bound_vars` (equal results mean alpha-equivalent formulas),
  `swap_quantifiers`, `normalize_prenex_laws`, `aristotelean_square`,
  `quantifier_inference` and `quantifier_distribution`.
- `aris.equivs`: named `EquivalenceRule` objects (double negation,
  distribution, identity, conditional and biconditional laws, and more),
  each holding parsed `(pattern, replacement)` pairs in `reductions`; all of
  them are returned by `all_rules()`.

## What this package does not do

It is a library only: there is no command-line tool. It does not represent
or check natural-deduction proofs, and it has no simplifications for
idempotence, absorption or complement beyond the rewrites listed above.