"""Rewrites of quantified expressions: negation, prenex laws, distribution and more."""

from __future__ import annotations

from aris.expr import (
    Apply,
    Assoc,
    Contra,
    Expr,
    Impl,
    Not,
    Op,
    Quant,
    QuantKind,
    Taut,
    Var,
    free_vars,
    subst,
)
from aris.normalize import transform

__all__ = [
    "negate_quantifiers",
    "normalize_null_quantifiers",
    "replacing_bound_vars",
    "swap_quantifiers",
    "normalize_prenex_laws",
    "aristotelean_square",
    "quantifier_inference",
    "quantifier_distribution",
]


def _opposite(kind: QuantKind) -> QuantKind:
    return QuantKind.FORALL if kind is QuantKind.EXISTS else QuantKind.EXISTS


def negate_quantifiers(expr: Expr) -> Expr:
    """Push negations inwards through quantifiers, flipping their kind."""

    def trans(e: Expr) -> tuple[Expr, bool]:
        match e:
            case Not(Quant(kind, name, body)):
                return Quant(_opposite(kind), name, Not(body)), True
        return e, False

    return transform(expr, trans)


def normalize_null_quantifiers(expr: Expr) -> Expr:
    """Remove quantifiers whose variable does not occur free in their body."""

    def trans(e: Expr) -> tuple[Expr, bool]:
        match e:
            case Quant(_, name, body) if name not in free_vars(body):
                return body, True
        return e, False

    return transform(expr, trans)


def _number_vars(expr: Expr, gamma: list[str]) -> Expr:
    match expr:
        case Var(name):
            return Var(str(gamma.index(name)))
        case Quant(kind, name, body):
            level = str(len(gamma))
            return Quant(kind, level, _number_vars(body, gamma + [name]))
        case Contra() | Taut():
            return expr
        case Apply(func, args):
            return Apply(_number_vars(func, gamma), tuple(_number_vars(a, gamma) for a in args))
        case Not(operand):
            return Not(_number_vars(operand, gamma))
        case Impl(left, right):
            return Impl(_number_vars(left, gamma), _number_vars(right, gamma))
        case Assoc(op, exprs):
            return Assoc(op, tuple(_number_vars(e, gamma) for e in exprs))
    raise TypeError(f"unknown expression type: {type(expr).__name__}")


def replacing_bound_vars(expr: Expr) -> Expr:
    """Rename bound variables to De Bruijn-style levels.

    Two expressions give equal results exactly when they are alpha-equivalent.
    """
    gamma = sorted(free_vars(expr))
    result = _number_vars(expr, gamma)
    for index, name in enumerate(gamma):
        result = subst(result, str(index), Var(name))
    return result


def swap_quantifiers(expr: Expr) -> Expr:
    """Sort variable names within each run of quantifiers of the same kind."""

    def trans(e: Expr) -> tuple[Expr, bool]:
        inner = e
        names: list[str] = []
        run_kind: QuantKind | None = None
        while isinstance(inner, Quant):
            if run_kind is not None and inner.kind != run_kind:
                break
            run_kind = inner.kind
            names.append(inner.name)
            inner = inner.body
        if run_kind is None:
            return e, False
        for name in sorted(names):
            inner = Quant(run_kind, name, inner)
        return inner, inner != e

    return transform(expr, trans)


def _hoist_from_assoc(op: Op, exprs: tuple) -> tuple[Expr, bool]:
    all_free: set[str] = set()
    for e in exprs:
        all_free |= free_vars(e)
    found: tuple[QuantKind, str] | None = None
    others: list[Expr] = []
    for e in exprs:
        match e:
            case Quant(kind, name, body) if found is None and name not in all_free:
                found = (kind, name)
                others.append(body)
            case _:
                others.append(e)
    if found is None:
        return Assoc(op, tuple(others)), False
    kind, name = found
    return Quant(kind, name, Assoc(op, tuple(others))), True


def normalize_prenex_laws(expr: Expr) -> Expr:
    """Hoist quantifiers outward where no variable capture can occur.

    ``∀x φ(x) ∧ ψ`` becomes ``∀x (φ(x) ∧ ψ)`` (likewise for ``∃`` and ``∨``),
    ``(∀x φ(x)) → ψ`` becomes ``∃x (φ(x) → ψ)`` (and ``∃`` becomes ``∀``),
    and ``ψ → Qx φ(x)`` becomes ``Qx (ψ → φ(x))``.
    """

    def trans(e: Expr) -> tuple[Expr, bool]:
        match e:
            case Assoc(op, exprs) if op in (Op.AND, Op.OR):
                return _hoist_from_assoc(op, exprs)
            case Impl(left, right):
                left_free = free_vars(left)
                right_free = free_vars(right)
                match left:
                    case Quant(kind, name, body) if name not in right_free:
                        return Quant(_opposite(kind), name, Impl(body, right)), True
                match right:
                    case Quant(kind, name, body) if name not in left_free:
                        return Quant(kind, name, Impl(left, body)), True
        return e, False

    return transform(expr, trans)


def aristotelean_square(expr: Expr) -> Expr:
    """Apply ``¬∀x (φ → ψ) ⇔ ∃x (φ ∧ ¬ψ)`` and ``¬∃x (φ ∧ ψ) ⇔ ∀x (φ → ¬ψ)``."""

    def trans(e: Expr) -> tuple[Expr, bool]:
        match e:
            case Not(Quant(kind, name, Impl(left, right))):
                return Quant(_opposite(kind), name, Assoc(Op.AND, (left, Not(right)))), True
            case Not(Quant(kind, name, Assoc(Op.AND, (first, second)))):
                return Quant(_opposite(kind), name, Impl(first, Not(second))), True
        return e, False

    return transform(expr, trans)


def quantifier_inference(expr: Expr) -> Expr:
    """Split ``∃x (P ∧ Q)`` into ``∃x P ∧ ∃x Q`` and merge ``∀x P ∨ ∀x Q`` into ``∀x (P ∨ Q)``."""

    def trans(e: Expr) -> tuple[Expr, bool]:
        match e:
            case Quant(QuantKind.EXISTS, name, Assoc(Op.AND, exprs)):
                return Assoc(Op.AND, tuple(Quant(QuantKind.EXISTS, name, x) for x in exprs)), True
            case Assoc(Op.OR, exprs) if exprs and all(
                isinstance(x, Quant) and x.kind is QuantKind.FORALL for x in exprs
            ):
                first_name = exprs[0].name
                if all(x.name == first_name for x in exprs):
                    body = Assoc(Op.OR, tuple(x.body for x in exprs))
                    return Quant(QuantKind.FORALL, first_name, body), True
        return e, False

    return transform(expr, trans)


def quantifier_distribution(expr: Expr) -> Expr:
    """Push ``∀`` into conjunctions and ``∃`` into disjunctions."""

    def trans(e: Expr) -> tuple[Expr, bool]:
        match e:
            case Quant(QuantKind.FORALL, name, Assoc(Op.AND, exprs)):
                return Assoc(Op.AND, tuple(Quant(QuantKind.FORALL, name, x) for x in exprs)), True
            case Quant(QuantKind.EXISTS, name, Assoc(Op.OR, exprs)):
                return Assoc(Op.OR, tuple(Quant(QuantKind.EXISTS, name, x) for x in exprs)), True
        return e, False

    return transform(expr, trans)