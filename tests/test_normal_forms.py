import itertools

import pytest

from aris.expr import evaluate, free_vars
from aris.normal_forms import (
    CnfExpr,
    NnfAnd,
    NnfLit,
    NnfOr,
    into_cnf,
    into_nnf,
    nnf_contra,
    nnf_taut,
    nnf_var,
)
from aris.parser import parse as p


def _cnf_holds(cnf, env):
    return all(any(env[name][0] == pol for pol, name in clause) for clause in cnf.clauses)


def _nnf_holds(nnf, env):
    if isinstance(nnf, NnfLit):
        return env[nnf.name][0] == nnf.polarity
    if isinstance(nnf, NnfAnd):
        return all(_nnf_holds(e, env) for e in nnf.exprs)
    return any(_nnf_holds(e, env) for e in nnf.exprs)


def _envs(expr):
    names = sorted(free_vars(expr))
    for values in itertools.product([False, True], repeat=len(names)):
        yield {n: [v] for n, v in zip(names, values)}


def test_cnf_doc_examples():
    a = CnfExpr.var("A")
    b = CnfExpr.var("B")
    assert into_cnf(p("A | B")) == CnfExpr.or_([a, b])
    assert into_cnf(p("A & B")) == CnfExpr.and_([a, b])
    assert into_cnf(p("~A")) == CnfExpr.literal(False, "A")
    assert into_cnf(p("A")) == CnfExpr.literal(True, "A")
    assert into_cnf(p("A")) == CnfExpr.var("A")


def test_cnf_constants():
    assert into_cnf(p("⊤")) == CnfExpr.taut()
    assert into_cnf(p("⊥")) == CnfExpr.contra()
    assert CnfExpr.taut().clauses == ()
    assert CnfExpr.contra().clauses == ((),)


def test_nnf_doc_examples():
    a = nnf_var("A")
    b = nnf_var("B")
    assert into_nnf(p("A | B")) == NnfOr((a, b))
    assert into_nnf(p("A & B")) == NnfAnd((a, b))
    assert into_nnf(p("~A")) == ~nnf_var("A")
    assert into_nnf(p("A -> B")) == a.implies(b)
    assert into_nnf(p("A <-> B")) == a.bicon(b)
    assert into_nnf(p("⊤")) == nnf_taut()
    assert into_nnf(p("⊥")) == nnf_contra()
    assert into_nnf(p("A")) == nnf_var("A")


def test_nnf_var_into_cnf():
    assert nnf_var("A").into_cnf() == CnfExpr.var("A")


def test_negation_pushes_inward():
    e = ~NnfAnd((nnf_var("A"), NnfOr((nnf_var("B"), ~nnf_var("C")))))
    assert e == NnfOr((NnfLit(False, "A"), NnfAnd((NnfLit(False, "B"), NnfLit(True, "C")))))
    assert ~~e == e


def test_nnf_display():
    assert str(nnf_var("A").implies(nnf_var("B"))) == "(¬A ∨ B)"


@pytest.mark.parametrize("text", ["forall x P(x)", "P(a)", "A === B", "A + B", "A * B", "~(A & P(b))"])
def test_unsupported_returns_none(text):
    assert into_nnf(p(text)) is None
    assert into_cnf(p(text)) is None


def test_or_distributes_clauses():
    left = CnfExpr.and_([CnfExpr.var("A"), CnfExpr.var("B")])
    result = CnfExpr.or_([left, CnfExpr.var("C")])
    assert result.clauses == (
        ((True, "A"), (True, "C")),
        ((True, "B"), (True, "C")),
    )


def test_or_of_nothing_is_contra():
    assert CnfExpr.or_([]) == CnfExpr.contra()
    assert CnfExpr.and_([]) == CnfExpr.taut()


def test_cnf_equality_and_hash():
    assert hash(CnfExpr.var("A")) == hash(CnfExpr.literal(True, "A"))
    assert CnfExpr.var("A") != CnfExpr.literal(False, "A")
    assert len({CnfExpr.var("A"), CnfExpr.literal(True, "A")}) == 1