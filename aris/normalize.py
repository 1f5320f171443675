"""Generic rewriting of expressions and structural normalisations."""

from __future__ import annotations

import itertools
from typing import Callable

from aris.expr import Apply, Assoc, Expr, Impl, Not, Op, Quant

__all__ = [
    "transform",
    "transform_set",
    "sort_commutative_ops",
    "combine_associative_ops",
    "normalize_demorgans",
    "normalize_halfdemorgans",
    "normalize_biconditional_contraposition",
]

TransFn = Callable[[Expr], "tuple[Expr, bool]"]


def _transform_inner(expr: Expr, trans: TransFn) -> tuple[Expr, bool]:
    """Apply ``trans`` to ``expr`` and then to every sub-expression of the result.

    The flag reports whether anything was transformed anywhere.
    """
    result, status = trans(expr)
    changed = False
    match result:
        case Apply(func, args):
            func, func_changed = _transform_inner(func, trans)
            pairs = [_transform_inner(arg, trans) for arg in args]
            result = Apply(func, tuple(e for e, _ in pairs))
            changed = func_changed or any(flag for _, flag in pairs)
        case Not(operand):
            operand, changed = _transform_inner(operand, trans)
            result = Not(operand)
        case Impl(left, right):
            left, left_changed = _transform_inner(left, trans)
            right, right_changed = _transform_inner(right, trans)
            result = Impl(left, right)
            changed = left_changed or right_changed
        case Assoc(op, exprs):
            pairs = [_transform_inner(e, trans) for e in exprs]
            result = Assoc(op, tuple(e for e, _ in pairs))
            changed = any(flag for _, flag in pairs)
        case Quant(kind, name, body):
            body, changed = _transform_inner(body, trans)
            result = Quant(kind, name, body)
    return result, status or changed


def transform(expr: Expr, trans_fn: TransFn) -> Expr:
    """Rewrite ``expr`` everywhere with ``trans_fn`` until nothing changes.

    ``trans_fn`` returns ``(new_expr, True)`` when it rewrote its argument and
    ``(expr, False)`` otherwise. A rewrite that keeps producing matches never
    terminates.
    """
    result, status = _transform_inner(expr, trans_fn)
    while status:
        result, status = _transform_inner(result, trans_fn)
    return result


def transform_set(expr: Expr, trans_fn: TransFn) -> set[Expr]:
    """Return every expression reachable by rewriting any sub-expressions of ``expr``.

    Meant for rewrite rules that are not confluent; ``trans_fn`` has the same
    contract as in :func:`transform`.
    """
    found: set[Expr] = {expr}
    current = expr
    while True:
        current, more = trans_fn(current)
        found.add(current)
        if not more:
            break

    for level in list(found):
        match level:
            case Apply(func, args):
                funcs = transform_set(func, trans_fn)
                arg_sets = [list(transform_set(arg, trans_fn)) for arg in args]
                found.update(
                    Apply(f, choice) for f in funcs for choice in itertools.product(*arg_sets)
                )
            case Not(operand):
                found.update(Not(o) for o in transform_set(operand, trans_fn))
            case Impl(left, right):
                lefts = transform_set(left, trans_fn)
                rights = list(transform_set(right, trans_fn))
                found.update(Impl(lhs, rhs) for lhs in lefts for rhs in rights)
            case Assoc(op, exprs):
                sets = [list(transform_set(e, trans_fn)) for e in exprs]
                found.update(Assoc(op, choice) for choice in itertools.product(*sets))
            case Quant(kind, name, body):
                found.update(Quant(kind, name, b) for b in transform_set(body, trans_fn))
    return found


def _kind_applies(kind: str, op: Op) -> bool:
    return (kind == "bool" and op is not Op.BICON) or (kind == "bicon" and op is Op.BICON)


def sort_commutative_ops(expr: Expr, kind: str) -> Expr:
    """Sort operands of associative operators.

    ``kind`` selects the operators: ``"bool"`` for all but biconditional,
    ``"bicon"`` for biconditional only, ``"none"`` for every operator.
    """

    def trans(e: Expr) -> tuple[Expr, bool]:
        match e:
            case Assoc(op, exprs) if _kind_applies(kind, op) or kind == "none":
                if all(a <= b for a, b in zip(exprs, exprs[1:])):
                    return e, False
                return Assoc(op, tuple(sorted(exprs))), True
        return e, False

    return transform(expr, trans)


def combine_associative_ops(expr: Expr, kind: str) -> Expr:
    """Flatten nested associative operators of the same kind.

    ``kind`` is ``"bool"`` for all but biconditional, ``"bicon"`` for
    biconditional only.
    """

    def trans(e: Expr) -> tuple[Expr, bool]:
        match e:
            case Assoc(op, exprs) if _kind_applies(kind, op):
                result: list[Expr] = []
                combined = False
                for sub in exprs:
                    match sub:
                        case Assoc(inner_op, inner) if inner_op == op:
                            result.extend(inner)
                            combined = True
                        case _:
                            result.append(sub)
                return Assoc(op, tuple(result)), combined
        return e, False

    return transform(expr, trans)


def normalize_demorgans(expr: Expr) -> Expr:
    """Push negations through conjunctions and disjunctions (De Morgan's laws)."""

    def trans(e: Expr) -> tuple[Expr, bool]:
        match e:
            case Not(Assoc(Op.AND, exprs)):
                return Assoc(Op.OR, tuple(Not(x) for x in exprs)), True
            case Not(Assoc(Op.OR, exprs)):
                return Assoc(Op.AND, tuple(Not(x) for x in exprs)), True
            case Assoc(op, exprs) if op in (Op.AND, Op.OR):
                flat: list[Expr] = []
                for sub in exprs:
                    match sub:
                        case Assoc(inner_op, inner) if inner_op == op:
                            flat.extend(inner)
                        case _:
                            flat.append(sub)
                return Assoc(op, tuple(flat)), False
        return e, False

    return transform(expr, trans)


def _pairwise(exprs: list[Expr]) -> list[Expr]:
    return [x for a, b in itertools.combinations(exprs, 2) for x in (a, b)]


def normalize_halfdemorgans(expr: Expr) -> list[Expr]:
    """Return the possible results of rewriting ``¬(A ∨ B)`` to ``¬A`` or ``¬B``."""
    match expr:
        case Not(Assoc(Op.OR, exprs)):
            return _pairwise([Not(e) for e in exprs])
        case Not():
            return [expr]
        case Assoc(op, exprs):
            choices = [normalize_halfdemorgans(sub) for sub in exprs]
            return [Assoc(op, combo) for combo in itertools.product(*choices)]
    return [expr]


def normalize_biconditional_contraposition(expr: Expr) -> Expr:
    """Rewrite each binary ``A ↔ B`` into ``¬A ↔ ¬B`` unless both sides are negated."""

    def trans(e: Expr) -> tuple[Expr, bool]:
        match e:
            case Assoc(Op.BICON, exprs) if len(exprs) == 2:
                if all(isinstance(x, Not) for x in exprs):
                    return e, False
                return Assoc(Op.BICON, tuple(Not(x) for x in exprs)), True
        return e, False

    return transform(expr, trans)