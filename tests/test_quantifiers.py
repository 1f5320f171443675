import pytest

from aris.expr import Apply, Assoc, Expr, Impl, Not, Quant, QuantKind, free_vars
from aris.parser import parse
from aris.quantifiers import (
    aristotelean_square,
    negate_quantifiers,
    normalize_null_quantifiers,
    normalize_prenex_laws,
    quantifier_distribution,
    quantifier_inference,
    replacing_bound_vars,
    swap_quantifiers,
)


def _has_negated_quantifier(expr: Expr) -> bool:
    match expr:
        case Not(Quant()):
            return True
        case Not(operand):
            return _has_negated_quantifier(operand)
        case Apply(func, args):
            return _has_negated_quantifier(func) or any(_has_negated_quantifier(a) for a in args)
        case Impl(left, right):
            return _has_negated_quantifier(left) or _has_negated_quantifier(right)
        case Assoc(_, exprs):
            return any(_has_negated_quantifier(e) for e in exprs)
        case Quant(_, _, body):
            return _has_negated_quantifier(body)
    return False


def test_negate_quantifiers_flips_kind():
    result = negate_quantifiers(parse("~forall x P(x)"))
    assert isinstance(result, Quant)
    assert result.kind is QuantKind.EXISTS
    assert result.name == "x"
    assert result.body == Not(parse("P(x)"))


@pytest.mark.parametrize(
    "text",
    ["~exists x ~forall y R(x, y)", "A & ~forall x (P(x) | ~exists y Q(y))", "~~forall z P(z)"],
)
def test_negate_quantifiers_removes_negated_quantifiers(text):
    result = negate_quantifiers(parse(text))
    assert not _has_negated_quantifier(result)
    assert negate_quantifiers(result) == result
    assert free_vars(result) == free_vars(parse(text))


def test_null_quantifiers_removed():
    assert normalize_null_quantifiers(parse("forall x P")) == parse("P")
    kept = parse("forall x P(x)")
    assert normalize_null_quantifiers(kept) == kept
    assert normalize_null_quantifiers(parse("forall x exists y P(x)")) == parse("forall x P(x)")


def test_replacing_bound_vars_alpha_equivalence():
    a = replacing_bound_vars(parse("forall x exists y R(x, y)"))
    b = replacing_bound_vars(parse("forall u exists v R(u, v)"))
    c = replacing_bound_vars(parse("forall x exists y R(y, x)"))
    assert a == b
    assert a != c


@pytest.mark.parametrize("text", ["forall x (P(x) & Q)", "A -> exists y (B(y) | y)", "A & B"])
def test_replacing_bound_vars_keeps_free_vars(text):
    expr = parse(text)
    result = replacing_bound_vars(expr)
    assert free_vars(result) == free_vars(expr)
    assert replacing_bound_vars(result) == result


def test_swap_quantifiers_sorts_same_kind_runs():
    a = swap_quantifiers(parse("forall y forall x P(x, y)"))
    b = swap_quantifiers(parse("forall x forall y P(x, y)"))
    assert a == b
    assert swap_quantifiers(a) == a


def test_swap_quantifiers_keeps_kind_order():
    result = swap_quantifiers(parse("exists y forall x P(x, y)"))
    assert isinstance(result, Quant)
    assert result.kind is QuantKind.EXISTS
    assert result.name == "y"
    assert isinstance(result.body, Quant)
    assert result.body.kind is QuantKind.FORALL


@pytest.mark.parametrize(
    "before, after",
    [
        ("(forall x P(x)) & Q", "forall x (P(x) & Q)"),
        ("(exists x P(x)) | Q", "exists x (P(x) | Q)"),
        ("(forall x P(x)) -> Q", "exists x (P(x) -> Q)"),
        ("(exists x P(x)) -> Q", "forall x (P(x) -> Q)"),
        ("Q -> forall x P(x)", "forall x (Q -> P(x))"),
        ("Q -> exists x P(x)", "exists x (Q -> P(x))"),
    ],
)
def test_prenex_laws(before, after):
    assert normalize_prenex_laws(parse(before)) == parse(after)


def test_prenex_laws_avoid_capture():
    expr = parse("(forall x P(x)) & x")
    assert normalize_prenex_laws(expr) == expr
    impl = parse("(forall x P(x)) -> x")
    assert normalize_prenex_laws(impl) == impl


@pytest.mark.parametrize(
    "before, after",
    [
        ("~forall x (P(x) -> Q(x))", "exists x (P(x) & ~Q(x))"),
        ("~exists x (P(x) & Q(x))", "forall x (P(x) -> ~Q(x))"),
    ],
)
def test_aristotelean_square(before, after):
    assert aristotelean_square(parse(before)) == parse(after)


def test_aristotelean_square_needs_two_conjuncts():
    expr = parse("~exists x (P(x) & Q(x) & R(x))")
    assert aristotelean_square(expr) == expr


@pytest.mark.parametrize(
    "before, after",
    [
        ("exists x (P(x) & Q(x))", "(exists x P(x)) & (exists x Q(x))"),
        ("(forall x P(x)) | (forall x Q(x))", "forall x (P(x) | Q(x))"),
    ],
)
def test_quantifier_inference(before, after):
    assert quantifier_inference(parse(before)) == parse(after)


def test_quantifier_inference_needs_same_names():
    expr = parse("(forall x P(x)) | (forall y Q(y))")
    assert quantifier_inference(expr) == expr


@pytest.mark.parametrize(
    "before, after",
    [
        ("forall x (P(x) & Q(x))", "(forall x P(x)) & (forall x Q(x))"),
        ("exists x (P(x) | Q(x))", "(exists x P(x)) | (exists x Q(x))"),
    ],
)
def test_quantifier_distribution(before, after):
    assert quantifier_distribution(parse(before)) == parse(after)


@pytest.mark.parametrize("text", ["forall x (P(x) | Q(x))", "exists x (P(x) & Q(x))"])
def test_quantifier_distribution_leaves_other_combinations(text):
    expr = parse(text)
    assert quantifier_distribution(expr) == expr