"""Equivalence rules given as pairs of patterns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from aris.expr import Expr
from aris.parser import parse

__all__ = [
    "EquivalenceRule",
    "all_rules",
    "DOUBLE_NEGATION",
    "DISTRIBUTION",
    "IDENTITY",
    "ANNIHILATION",
    "INVERSE",
    "CONDITIONAL_ABSORPTION",
    "CONDITIONAL_COMPLEMENT",
    "CONDITIONAL_IDENTITY",
    "CONDITIONAL_ANNIHILATION",
    "CONDITIONAL_IMPLICATION",
    "CONDITIONAL_CONTRAPOSITION",
    "CONDITIONAL_EXPORTATION",
    "CONDITIONAL_DISTRIBUTION",
    "CONDITIONAL_REDUCTION",
    "KNIGHTS_AND_KNAVES",
    "CONDITIONAL_IDEMPOTENCE",
    "BICONDITIONAL_EQUIVALENCE",
    "BICONDITIONAL_COMMUTATION",
    "BICONDITIONAL_ASSOCIATION",
    "BICONDITIONAL_REDUCTION",
    "BICONDITIONAL_COMPLEMENT",
    "BICONDITIONAL_IDENTITY",
    "BICONDITIONAL_NEGATION",
    "BICONDITIONAL_SUBSTITUTION",
]


@dataclass(frozen=True)
class EquivalenceRule:
    """A named set of (pattern, replacement) expression pairs."""

    name: str
    reductions: tuple[tuple[Expr, Expr], ...]

    @classmethod
    def from_patterns(cls, name: str, patterns: Iterable[tuple[str, str]]) -> "EquivalenceRule":
        """Build a rule by parsing each ``(pattern, replacement)`` string pair."""
        return cls(name, tuple((parse(lhs), parse(rhs)) for lhs, rhs in patterns))


_R = EquivalenceRule.from_patterns

# Boolean equivalences
DOUBLE_NEGATION = _R("double_negation", [("~~P", "P")])
DISTRIBUTION = _R(
    "distribution",
    [
        ("(P & Q) | (P & R)", "P & (Q | R)"),
        ("(P | Q) & (P | R)", "P | (Q & R)"),
    ],
)
IDENTITY = _R("identity", [("phi & ^|^", "phi"), ("phi | _|_", "phi")])
ANNIHILATION = _R("annihilation", [("phi & _|_", "_|_"), ("phi | ^|^", "^|^")])
INVERSE = _R("inverse", [("~^|^", "_|_"), ("~_|_", "^|^")])

# Conditional equivalences
CONDITIONAL_ABSORPTION = _R(
    "conditional_absorption",
    [("phi & (~phi -> psi)", "phi"), ("psi & (phi -> psi)", "psi")],
)
CONDITIONAL_COMPLEMENT = _R("conditional_complement", [("phi -> phi", "^|^")])
CONDITIONAL_IDENTITY = _R(
    "conditional_identity", [("phi -> _|_", "~phi"), ("^|^ -> phi", "phi")]
)
CONDITIONAL_ANNIHILATION = _R(
    "conditional_annihilation", [("phi -> ^|^", "^|^"), ("_|_ -> phi", "^|^")]
)
CONDITIONAL_IMPLICATION = _R(
    "conditional_implication",
    [("phi -> psi", "~phi | psi"), ("~(phi -> psi)", "phi & ~psi")],
)
CONDITIONAL_CONTRAPOSITION = _R("conditional_contraposition", [("~phi -> ~psi", "psi -> phi")])
CONDITIONAL_EXPORTATION = _R(
    "conditional_exportation", [("phi -> (psi -> lambda)", "(phi & psi) -> lambda")]
)
CONDITIONAL_DISTRIBUTION = _R(
    "conditional_distribution",
    [
        ("phi -> (psi & lambda)", "(phi -> psi) & (phi -> lambda)"),
        ("(phi | psi) -> lambda", "(phi -> lambda) & (psi -> lambda)"),
        ("phi -> (psi | lambda)", "(phi -> psi) | (phi -> lambda)"),
        ("(phi & psi) -> lambda", "(phi -> lambda) | (psi -> lambda)"),
    ],
)
CONDITIONAL_REDUCTION = _R(
    "conditional_reduction",
    [("phi & (phi -> psi)", "phi & psi"), ("~psi & (phi -> psi)", "~psi & ~phi")],
)
KNIGHTS_AND_KNAVES = _R(
    "knights_and_knaves",
    [("phi <-> (phi & psi)", "phi -> psi"), ("phi <-> (phi | psi)", "psi -> phi")],
)
CONDITIONAL_IDEMPOTENCE = _R(
    "conditional_idempotence", [("phi -> ~phi", "~phi"), ("~phi -> phi", "phi")]
)

# Biconditional equivalences
BICONDITIONAL_EQUIVALENCE = _R(
    "biconditional_equivalence",
    [
        ("(phi -> psi) & (psi -> phi)", "phi <-> psi"),
        ("(phi & psi) | (~phi & ~psi)", "phi <-> psi"),
    ],
)
BICONDITIONAL_COMMUTATION = _R("biconditional_commutation", [("phi <-> psi", "psi <-> phi")])
BICONDITIONAL_ASSOCIATION = _R(
    "biconditional_association", [("phi <-> (psi <-> lambda)", "(phi <-> psi) <-> lambda")]
)
BICONDITIONAL_REDUCTION = _R(
    "biconditional_reduction",
    [("phi & (phi <-> psi)", "phi & psi"), ("~phi & (phi <-> psi)", "~phi & ~psi")],
)
BICONDITIONAL_COMPLEMENT = _R(
    "biconditional_complement", [("phi <-> phi", "^|^"), ("phi <-> ~phi", "_|_")]
)
BICONDITIONAL_IDENTITY = _R(
    "biconditional_identity", [("phi <-> _|_", "~phi"), ("phi <-> ^|^", "phi")]
)
BICONDITIONAL_NEGATION = _R(
    "biconditional_negation",
    [("~phi <-> psi", "~(phi <-> psi)"), ("phi <-> ~psi", "~(phi <-> psi)")],
)
BICONDITIONAL_SUBSTITUTION = _R(
    "biconditional_substitution", [("(phi <-> psi) & S(phi)", "(phi <-> psi) & S(psi)")]
)

del _R

_ALL_RULES = (
    DOUBLE_NEGATION,
    DISTRIBUTION,
    IDENTITY,
    ANNIHILATION,
    INVERSE,
    CONDITIONAL_ABSORPTION,
    CONDITIONAL_COMPLEMENT,
    CONDITIONAL_IDENTITY,
    CONDITIONAL_ANNIHILATION,
    CONDITIONAL_IMPLICATION,
    CONDITIONAL_CONTRAPOSITION,
    CONDITIONAL_EXPORTATION,
    CONDITIONAL_DISTRIBUTION,
    CONDITIONAL_REDUCTION,
    KNIGHTS_AND_KNAVES,
    CONDITIONAL_IDEMPOTENCE,
    BICONDITIONAL_EQUIVALENCE,
    BICONDITIONAL_COMMUTATION,
    BICONDITIONAL_ASSOCIATION,
    BICONDITIONAL_REDUCTION,
    BICONDITIONAL_COMPLEMENT,
    BICONDITIONAL_IDENTITY,
    BICONDITIONAL_NEGATION,
    BICONDITIONAL_SUBSTITUTION,
)


def all_rules() -> tuple[EquivalenceRule, ...]:
    """Return every equivalence rule defined here, in definition order."""
    return _ALL_RULES