"""Abstract syntax trees for logical expressions and basic operations on them."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, MutableMapping, Sequence


class Op(Enum):
    """Associative operators."""

    AND = "∧"
    OR = "∨"
    BICON = "↔"
    EQUIV = "≡"
    ADD = "+"
    MULT = "*"

    def __str__(self) -> str:
        return self.value


class QuantKind(Enum):
    """Kinds of quantifiers."""

    FORALL = "∀"
    EXISTS = "∃"

    def __str__(self) -> str:
        return self.value


_OP_RANK = {op: rank for rank, op in enumerate(Op)}
_QUANT_RANK = {kind: rank for rank, kind in enumerate(QuantKind)}


class Expr:
    """Base class of all logical expressions.

    Expressions are immutable, hashable and totally ordered; the order sorts
    first by kind (contradiction, tautology, variable, application, negation,
    implication, associative operation, quantifier) and then by contents.
    """

    __slots__ = ()

    def sort_key(self) -> tuple:
        """Return a tuple that orders expressions structurally."""
        match self:
            case Contra():
                return (0,)
            case Taut():
                return (1,)
            case Var(name):
                return (2, name)
            case Apply(func, args):
                return (3, func.sort_key(), tuple(a.sort_key() for a in args))
            case Not(operand):
                return (4, operand.sort_key())
            case Impl(left, right):
                return (5, left.sort_key(), right.sort_key())
            case Assoc(op, exprs):
                return (6, _OP_RANK[op], tuple(e.sort_key() for e in exprs))
            case Quant(kind, name, body):
                return (7, _QUANT_RANK[kind], name, body.sort_key())
        raise TypeError(f"unknown expression type: {type(self).__name__}")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __invert__(self) -> "Expr":
        return Not(self)

    def __or__(self, other: "Expr") -> "Expr":
        if not isinstance(other, Expr):
            return NotImplemented
        return Assoc(Op.OR, (self, other))

    def __str__(self) -> str:
        match self:
            case Contra():
                return "⊥"
            case Taut():
                return "⊤"
            case Var(name):
                return name
            case Apply(func, args):
                return f"{func}({', '.join(str(a) for a in args)})"
            case Not(operand):
                return f"¬{operand}"
            case Impl(left, right):
                return f"({left} → {right})"
            case Assoc(op, exprs):
                return "(" + f" {op} ".join(str(e) for e in exprs) + ")"
            case Quant(kind, name, body):
                return f"({kind} {name} {body})"
        raise TypeError(f"unknown expression type: {type(self).__name__}")


@dataclass(frozen=True, eq=True, repr=True)
class Contra(Expr):
    """Contradiction ``⊥``."""


@dataclass(frozen=True, eq=True, repr=True)
class Taut(Expr):
    """Tautology ``⊤``."""


@dataclass(frozen=True, eq=True, repr=True)
class Var(Expr):
    """A symbolic variable."""

    name: str


@dataclass(frozen=True, eq=True, repr=True)
class Apply(Expr):
    """A function or predicate application ``P(A, B, C)``."""

    func: Expr
    args: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True, eq=True, repr=True)
class Not(Expr):
    """Logical negation."""

    operand: Expr


@dataclass(frozen=True, eq=True, repr=True)
class Impl(Expr):
    """Logical implication ``left → right``."""

    left: Expr
    right: Expr


@dataclass(frozen=True, eq=True, repr=True)
class Assoc(Expr):
    """An associative operation over several operands."""

    op: Op
    exprs: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "exprs", tuple(self.exprs))


@dataclass(frozen=True, eq=True, repr=True)
class Quant(Expr):
    """A quantified expression."""

    kind: QuantKind
    name: str
    body: Expr


def var(name: str) -> Var:
    """Build a variable."""
    return Var(name)


def apply(func: Expr, args: Iterable[Expr]) -> Apply:
    """Build an application."""
    return Apply(func, tuple(args))


def implies(left: Expr, right: Expr) -> Impl:
    """Build an implication."""
    return Impl(left, right)


def assoc(op: Op, exprs: Iterable[Expr]) -> Assoc:
    """Build an associative operation."""
    return Assoc(op, tuple(exprs))


def forall(name: str, body: Expr) -> Quant:
    """Build a universal quantifier."""
    return Quant(QuantKind.FORALL, name, body)


def exists(name: str, body: Expr) -> Quant:
    """Build an existential quantifier."""
    return Quant(QuantKind.EXISTS, name, body)


def not_place_holder() -> Expr:
    """Placeholder used in error messages for a negation."""
    return Not(Var("_"))


def impl_place_holder() -> Expr:
    """Placeholder used in error messages for an implication."""
    return Impl(Var("_"), Var("_"))


def assoc_place_holder(op: Op) -> Expr:
    """Placeholder used in error messages for an associative operator."""
    return Assoc(op, (Var("_"), Var("_"), Var("...")))


def quant_place_holder(kind: QuantKind) -> Expr:
    """Placeholder used in error messages for a quantifier."""
    return Quant(kind, "_", Var("_"))


def free_vars(expr: Expr) -> set[str]:
    """Return the set of free variable names in ``expr``."""
    match expr:
        case Contra() | Taut():
            return set()
        case Var(name):
            return {name}
        case Apply(func, args):
            result = free_vars(func)
            for arg in args:
                result |= free_vars(arg)
            return result
        case Not(operand):
            return free_vars(operand)
        case Impl(left, right):
            return free_vars(left) | free_vars(right)
        case Assoc(_, exprs):
            result = set()
            for e in exprs:
                result |= free_vars(e)
            return result
        case Quant(_, name, body):
            return free_vars(body) - {name}
    raise TypeError(f"unknown expression type: {type(expr).__name__}")


def gen_var(prefix: str, avoid: Iterable[str]) -> str:
    """Return ``prefix`` or ``prefix`` followed by the first number not in ``avoid``."""
    avoid = set(avoid)
    if prefix not in avoid:
        return prefix
    for i in itertools.count():
        candidate = f"{prefix}{i}"
        if candidate not in avoid:
            return candidate
    raise AssertionError("unreachable")


def subst(expr: Expr, var_to_replace: str, replacement: Expr) -> Expr:
    """Replace free occurrences of a variable, avoiding capture by renaming binders."""
    match expr:
        case Var(name) if name == var_to_replace:
            return replacement
        case Contra() | Taut() | Var():
            return expr
        case Apply(func, args):
            return Apply(
                subst(func, var_to_replace, replacement),
                tuple(subst(a, var_to_replace, replacement) for a in args),
            )
        case Not(operand):
            return Not(subst(operand, var_to_replace, replacement))
        case Impl(left, right):
            return Impl(
                subst(left, var_to_replace, replacement),
                subst(right, var_to_replace, replacement),
            )
        case Assoc(op, exprs):
            return Assoc(op, tuple(subst(e, var_to_replace, replacement) for e in exprs))
        case Quant(kind, name, body):
            if name == var_to_replace:
                return expr
            new_name = gen_var(name, free_vars(replacement))
            body = subst(body, name, Var(new_name))
            body = subst(body, var_to_replace, replacement)
            return Quant(kind, new_name, body)
    raise TypeError(f"unknown expression type: {type(expr).__name__}")


@dataclass(frozen=True)
class Substitution:
    """An ordered list of (variable name, expression) replacements."""

    pairs: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairs", tuple(tuple(p) for p in self.pairs))

    def apply(self, expr: Expr) -> Expr:
        """Apply every replacement in order to ``expr``."""
        for name, replacement in self.pairs:
            expr = subst(expr, name, replacement)
        return expr


def _subst_constraints(name: str, replacement: Expr, constraints: set) -> set:
    return {(subst(a, name, replacement), subst(b, name, replacement)) for a, b in constraints}


def unify(constraints: Iterable[tuple[Expr, Expr]]) -> Substitution | None:
    """Unify equality constraints given as ``(left, right)`` pairs.

    Returns a substitution making each pair equal (modulo renaming of bound
    variables), or ``None`` if no such substitution exists.
    """
    pending = set(constraints)
    if not pending:
        return Substitution(())
    left, right = pending.pop()
    fvs, fvt = free_vars(left), free_vars(right)

    if left == right:
        return unify(pending)
    if isinstance(left, Var) and left.name not in fvt:
        inner = unify(_subst_constraints(left.name, right, pending))
        return None if inner is None else Substitution(inner.pairs + ((left.name, right),))
    if isinstance(right, Var) and right.name not in fvs:
        inner = unify(_subst_constraints(right.name, left, pending))
        return None if inner is None else Substitution(inner.pairs + ((right.name, left),))

    match left, right:
        case Not(s), Not(t):
            pending.add((s, t))
            return unify(pending)
        case Impl(sl, sr), Impl(tl, tr):
            pending.add((sl, tl))
            pending.add((sr, tr))
            return unify(pending)
        case Apply(sf, sa), Apply(tf, ta) if len(sa) == len(ta):
            pending.add((sf, tf))
            pending.update(zip(sa, ta))
            return unify(pending)
        case Assoc(so, se), Assoc(to, te) if so == to and len(se) == len(te):
            pending.update(zip(se, te))
            return unify(pending)
        case Quant(sk, sn, sb), Quant(tk, tn, tb) if sk == tk:
            uv = gen_var("__unification_var", fvs | fvt)
            pending.add((subst(sb, sn, Var(uv)), subst(tb, tn, Var(uv))))
            result = unify(pending)
            if result is None:
                return None
            if any(x == uv or uv in free_vars(y) for x, y in result.pairs):
                return None
            return result
    return None


def infer_arities(expr: Expr, arities: MutableMapping[str, int] | None = None) -> MutableMapping[str, int]:
    """Record in ``arities`` the largest arity of each free variable and return it."""
    if arities is None:
        arities = {}
    match expr:
        case Contra() | Taut():
            pass
        case Var(name):
            arities.setdefault(name, 0)
        case Apply(Var(name), args):
            arities[name] = max(arities.get(name, len(args)), len(args))
            for arg in args:
                infer_arities(arg, arities)
        case Apply():
            raise ValueError("application of a non-variable is not supported")
        case Not(operand):
            infer_arities(operand, arities)
        case Impl(left, right):
            infer_arities(left, arities)
            infer_arities(right, arities)
        case Assoc(_, exprs):
            for e in exprs:
                infer_arities(e, arities)
        case Quant(_, name, body):
            for k, v in infer_arities(body, {}).items():
                if k != name:
                    arities[k] = max(arities.get(k, v), v)
    return arities


def evaluate(expr: Expr, env: Mapping[str, Sequence[bool]]) -> bool:
    """Evaluate a quantifier-free boolean expression.

    ``env`` maps each free variable to its truth table: a variable of arity n
    has 2**n entries, indexed by its arguments as bits (first argument lowest).
    """
    match expr:
        case Contra():
            return False
        case Taut():
            return True
        case Var(name):
            return env[name][0]
        case Apply(Var(name), args):
            index = 0
            for i, arg in enumerate(args):
                index |= int(evaluate(arg, env)) << i
            return env[name][index]
        case Apply():
            raise ValueError("application of a non-variable is not supported")
        case Not(operand):
            return not evaluate(operand, env)
        case Impl(left, right):
            x, y = evaluate(left, env), evaluate(right, env)
            return (not x) or y
        case Assoc(op, exprs):
            values = [evaluate(e, env) for e in exprs]
            if op is Op.AND:
                return all(values)
            if op is Op.OR:
                return any(values)
            if op is Op.BICON:
                result = True
                for b in values:
                    result = result == b
                return result
            raise ValueError(f"cannot evaluate operator {op.name}")
        case Quant():
            raise ValueError("cannot evaluate quantifiers")
    raise TypeError(f"unknown expression type: {type(expr).__name__}")


def disjuncts(expr: Expr) -> list[Expr]:
    """Top-level disjuncts, treating contradiction as the empty disjunction."""
    match expr:
        case Contra():
            return []
        case Assoc(Op.OR, exprs):
            return list(exprs)
    return [expr]


def from_disjuncts(disjuncts: Sequence[Expr]) -> Expr:
    """Build a disjunction, using contradiction for none and the item for one."""
    if not disjuncts:
        return Contra()
    if len(disjuncts) == 1:
        return disjuncts[0]
    return Assoc(Op.OR, tuple(disjuncts))


def conjuncts(expr: Expr) -> list[Expr]:
    """Top-level conjuncts, treating tautology as the empty conjunction."""
    match expr:
        case Taut():
            return []
        case Assoc(Op.AND, exprs):
            return list(exprs)
    return [expr]


def from_conjuncts(conjuncts: Sequence[Expr]) -> Expr:
    """Build a conjunction, using tautology for none and the item for one."""
    if not conjuncts:
        return Taut()
    if len(conjuncts) == 1:
        return conjuncts[0]
    return Assoc(Op.AND, tuple(conjuncts))


def expressions_for_depth(depth: int, max_assoc: int, vars: Iterable[str]) -> list[Expr]:
    """Enumerate every expression up to ``depth`` over ``vars``, sorted and unique."""
    vars = set(vars)
    result: set[Expr] = set()
    if depth == 0:
        result.add(Contra())
        result.add(Taut())
        result.update(Var(name) for name in vars)
    else:
        smaller = expressions_for_depth(depth - 1, max_assoc, vars)
        products = [
            args for n in range(2, max_assoc + 1) for args in itertools.product(smaller, repeat=n)
        ]
        for name in sorted(vars):
            for args in products:
                result.add(Apply(Var(name), args))
        result.update(Not(e) for e in smaller)
        result.update(Impl(lhs, rhs) for lhs in smaller for rhs in smaller)
        for op in Op:
            for args in products:
                result.add(Assoc(op, args))
        bound = f"x{depth}"
        for body in expressions_for_depth(depth - 1, max_assoc, vars | {bound}):
            result.add(forall(bound, body))
            result.add(exists(bound, body))
    return sorted(result)