"""Negation normal form and conjunctive normal form of logical expressions."""

from __future__ import annotations

import functools
import itertools
from dataclasses import dataclass
from typing import Iterable

from aris.expr import Assoc, Contra, Expr, Impl, Not, Op, Taut, Var

__all__ = [
    "NnfExpr",
    "NnfLit",
    "NnfAnd",
    "NnfOr",
    "CnfExpr",
    "nnf_taut",
    "nnf_contra",
    "nnf_var",
    "into_nnf",
    "into_cnf",
]


class NnfExpr:
    """Base class of expressions in negation normal form."""

    __slots__ = ()

    def implies(self, other: "NnfExpr") -> "NnfExpr":
        """Return ``self → other`` as ``¬self ∨ other``."""
        return NnfOr((~self, other))

    def bicon(self, other: "NnfExpr") -> "NnfExpr":
        """Return ``self ↔ other`` as ``(self → other) ∧ (other → self)``."""
        return NnfAnd((self.implies(other), other.implies(self)))

    def __invert__(self) -> "NnfExpr":
        match self:
            case NnfLit(polarity, name):
                return NnfLit(not polarity, name)
            case NnfAnd(exprs):
                return NnfOr(tuple(~e for e in exprs))
            case NnfOr(exprs):
                return NnfAnd(tuple(~e for e in exprs))
        raise TypeError(f"unknown NNF expression type: {type(self).__name__}")

    def into_cnf(self) -> "CnfExpr":
        """Convert to conjunctive normal form by distributing disjunctions."""
        match self:
            case NnfLit(polarity, name):
                return CnfExpr.literal(polarity, name)
            case NnfAnd(exprs):
                return CnfExpr.and_(e.into_cnf() for e in exprs)
            case NnfOr(exprs):
                return CnfExpr.or_(e.into_cnf() for e in exprs)
        raise TypeError(f"unknown NNF expression type: {type(self).__name__}")

    def __str__(self) -> str:
        match self:
            case NnfLit(polarity, name):
                return name if polarity else f"¬{name}"
            case NnfAnd(exprs):
                return "(" + " ∧ ".join(str(e) for e in exprs) + ")"
            case NnfOr(exprs):
                return "(" + " ∨ ".join(str(e) for e in exprs) + ")"
        raise TypeError(f"unknown NNF expression type: {type(self).__name__}")


@dataclass(frozen=True)
class NnfLit(NnfExpr):
    """A possibly negated variable."""

    polarity: bool
    name: str


@dataclass(frozen=True)
class NnfAnd(NnfExpr):
    """Sub-expressions joined by conjunction; empty means tautology."""

    exprs: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "exprs", tuple(self.exprs))


@dataclass(frozen=True)
class NnfOr(NnfExpr):
    """Sub-expressions joined by disjunction; empty means contradiction."""

    exprs: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "exprs", tuple(self.exprs))


def nnf_taut() -> NnfExpr:
    """Tautology as an empty conjunction."""
    return NnfAnd(())


def nnf_contra() -> NnfExpr:
    """Contradiction as an empty disjunction."""
    return NnfOr(())


def nnf_var(name: object) -> NnfExpr:
    """A positive literal."""
    return NnfLit(True, str(name))


@dataclass(frozen=True)
class CnfExpr:
    """A conjunction of clauses; each clause is a disjunction of ``(polarity, name)`` literals."""

    clauses: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "clauses",
            tuple(tuple((bool(p), str(n)) for p, n in clause) for clause in self.clauses),
        )

    @classmethod
    def taut(cls) -> "CnfExpr":
        """The empty conjunction."""
        return cls(())

    @classmethod
    def contra(cls) -> "CnfExpr":
        """A conjunction holding one empty clause."""
        return cls(((),))

    @classmethod
    def literal(cls, polarity: bool, name: object) -> "CnfExpr":
        """A single literal."""
        return cls((((polarity, str(name)),),))

    @classmethod
    def var(cls, name: object) -> "CnfExpr":
        """A single positive literal."""
        return cls.literal(True, name)

    @classmethod
    def and_(cls, exprs: Iterable["CnfExpr"]) -> "CnfExpr":
        """Conjunction: concatenate the clauses of every operand."""
        return cls(tuple(clause for e in exprs for clause in e.clauses))

    @classmethod
    def or_(cls, exprs: Iterable["CnfExpr"]) -> "CnfExpr":
        """Disjunction: one clause for each choice of a clause from every operand."""
        clauses = tuple(
            tuple(itertools.chain.from_iterable(choice))
            for choice in itertools.product(*(e.clauses for e in exprs))
        )
        if not clauses:
            return cls.contra()
        return cls(clauses)

    def __str__(self) -> str:
        def lit(p: bool, n: str) -> str:
            return n if p else f"¬{n}"

        return "(" + " ∧ ".join(
            "(" + " ∨ ".join(lit(p, n) for p, n in clause) + ")" for clause in self.clauses
        ) + ")"


def into_nnf(expr: Expr) -> NnfExpr | None:
    """Convert to negation normal form.

    Returns ``None`` for quantifiers, applications, equivalence and arithmetic.
    """
    match expr:
        case Contra():
            return nnf_contra()
        case Taut():
            return nnf_taut()
        case Var(name):
            return nnf_var(name)
        case Not(operand):
            inner = into_nnf(operand)
            return None if inner is None else ~inner
        case Impl(left, right):
            lhs = into_nnf(left)
            if lhs is None:
                return None
            rhs = into_nnf(right)
            if rhs is None:
                return None
            return lhs.implies(rhs)
        case Assoc(op, exprs):
            if op not in (Op.AND, Op.OR, Op.BICON):
                return None
            parts = []
            for e in exprs:
                converted = into_nnf(e)
                if converted is None:
                    return None
                parts.append(converted)
            if op is Op.AND:
                return NnfAnd(tuple(parts))
            if op is Op.OR:
                return NnfOr(tuple(parts))
            if not parts:
                return None
            return functools.reduce(NnfExpr.bicon, parts)
    return None


def into_cnf(expr: Expr) -> CnfExpr | None:
    """Convert to conjunctive normal form, or ``None`` where NNF conversion fails."""
    nnf = into_nnf(expr)
    return None if nnf is None else nnf.into_cnf()