import pytest

from aris.expr import (
    Apply,
    Assoc,
    Contra,
    Impl,
    Not,
    Op,
    Quant,
    QuantKind,
    Taut,
    Var,
    free_vars,
)
from aris.parser import ParseError, parse, try_parse


def test_predicate_with_spaces_in_arguments():
    assert parse("a(   b, c)") == Apply(Var("a"), (Var("b"), Var("c")))


def test_nested_predicates():
    expected = Var("z")
    for _ in range(5):
        expected = Apply(Var("s"), (expected,))
    assert parse("s(s(s(s(s(z)))))") == expected


def test_assoc_chain():
    expected = Assoc(Op.AND, (Var("a"), Var("b"), Apply(Var("c"), (Var("x"), Var("y")))))
    assert parse("a & b & c(x,y)") == expected


def test_forall_with_parenthesized_body():
    assert parse("forall a (b & c)") == Quant(
        QuantKind.FORALL, "a", Assoc(Op.AND, (Var("b"), Var("c")))
    )


def test_exists_example_free_vars():
    e = parse("exists x ((Tet(x) & SameCol(x, b)) -> ~forall x (Tet(x) -> LeftOf(x, b)))")
    assert isinstance(e, Quant)
    assert e.kind is QuantKind.EXISTS
    assert free_vars(e) == {"Tet", "SameCol", "b", "LeftOf"}


def test_nested_forall_free_vars():
    e = parse("forall a (forall b (((forall x (in(x,a) <-> in(x,b)) -> eq(a,b)))))")
    assert free_vars(e) == {"eq", "in"}


def test_good_and_bad_user_input():
    assert try_parse("good(predicate, expr)") == Apply(
        Var("good"), (Var("predicate"), Var("expr"))
    )
    assert try_parse("bad(missing, paren") is None


def test_parse_raises_on_bad_input():
    with pytest.raises(ParseError) as info:
        parse("bad(missing, paren")
    assert info.value.text == "bad(missing, paren"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("_|_", Contra()),
        ("⊥", Contra()),
        ("^|^", Taut()),
        ("⊤", Taut()),
        ("~P", Not(Var("P"))),
        ("¬P", Not(Var("P"))),
        ("~~P", Not(Not(Var("P")))),
        ("P -> Q", Impl(Var("P"), Var("Q"))),
        ("P → Q", Impl(Var("P"), Var("Q"))),
        ("P | _|_", Assoc(Op.OR, (Var("P"), Contra()))),
        ("P /\\ Q", Assoc(Op.AND, (Var("P"), Var("Q")))),
        ("P \\/ Q", Assoc(Op.OR, (Var("P"), Var("Q")))),
        ("P ∧ Q ∧ R", Assoc(Op.AND, (Var("P"), Var("Q"), Var("R")))),
        ("P <-> Q", Assoc(Op.BICON, (Var("P"), Var("Q")))),
        ("P === Q", Assoc(Op.EQUIV, (Var("P"), Var("Q")))),
        ("a + b", Assoc(Op.ADD, (Var("a"), Var("b")))),
        ("a * b", Assoc(Op.MULT, (Var("a"), Var("b")))),
        ("∀x P(x)", Quant(QuantKind.FORALL, "x", Apply(Var("P"), (Var("x"),)))),
        (
            "∀x∃y R(x, y)",
            Quant(
                QuantKind.FORALL,
                "x",
                Quant(QuantKind.EXISTS, "y", Apply(Var("R"), (Var("x"), Var("y")))),
            ),
        ),
        ("f()", Apply(Var("f"), ())),
        ("~(P -> Q)", Not(Impl(Var("P"), Var("Q")))),
    ],
)
def test_parse_values(text, expected):
    assert parse(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "a -> b -> c",
        "a & b | c",
        "forallx",
        "existsy",
        "forall x(P)",
        "",
        "(a & b",
        "a &",
        " ~P",
    ],
)
def test_malformed(text):
    assert try_parse(text) is None


def test_mixed_ops_with_parentheses():
    assert parse("(a & b) | c") == Assoc(
        Op.OR, (Assoc(Op.AND, (Var("a"), Var("b"))), Var("c"))
    )


def test_display_round_trip():
    e = parse("forall x (P(x) -> (Q & R))")
    assert str(e) == "(∀ x (P(x) → (Q ∧ R)))"