"""Parser for infix logical expressions.

The grammar accepts ASCII and Unicode spellings of the connectives:
``~``/``¬``, ``&``/``∧``/``/\\``, ``|``/``∨``/``\\/``, ``->``/``→``,
``<->``/``↔``, ``===``/``≡``, ``+``, ``*``, ``_|_``/``⊥``, ``^|^``/``⊤``,
and the quantifiers ``forall ``/``∀`` and ``exists ``/``∃``.  A chain of
associative operators must use a single operator throughout, and an
implication takes exactly two operands; anything else needs parentheses.
"""

from __future__ import annotations

import string

from aris.expr import Apply, Assoc, Contra, Expr, Impl, Not, Op, Quant, QuantKind, Taut, Var

__all__ = ["ParseError", "parse", "try_parse"]

_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_BLANKS = " \t"
_KEYWORDS = ("forall", "exists")

_QUANTIFIERS = (
    (("forall ", "∀"), QuantKind.FORALL),
    (("exists ", "∃"), QuantKind.EXISTS),
)

_OPERATORS = (
    (("&", "∧", "/\\"), Op.AND),
    (("|", "∨", "\\/"), Op.OR),
    (("<->", "↔"), Op.BICON),
    (("===", "≡"), Op.EQUIV),
    (("+",), Op.ADD),
    (("*",), Op.MULT),
)

_MISSING = object()


class ParseError(ValueError):
    """Raised when a string is not a well-formed expression."""

    def __init__(self, text: str) -> None:
        super().__init__(f"failed parsing: {text}")
        self.text = text


class _Parser:
    """Ordered-choice recursive descent parser over one input string.

    Every rule takes a position and returns ``(value, new_position)`` on
    success or ``None`` on failure.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._paren_cache: dict[int, object] = {}
        self._expr_cache: dict[int, object] = {}

    # -- lexical helpers -------------------------------------------------

    def space(self, pos: int) -> int:
        text = self.text
        while pos < len(text) and text[pos] in _BLANKS:
            pos += 1
        return pos

    def tag(self, pos: int, tags: tuple[str, ...]) -> int | None:
        for t in tags:
            if self.text.startswith(t, pos):
                return pos + len(t)
        return None

    def variable(self, pos: int) -> tuple[str, int] | None:
        text = self.text
        end = pos
        while end < len(text) and text[end] in _IDENT_CHARS:
            end += 1
        if end == pos:
            return None
        name = text[pos:end]
        if name.startswith(_KEYWORDS):
            return None
        return name, end

    def quantifier(self, pos: int) -> tuple[QuantKind, int] | None:
        for tags, kind in _QUANTIFIERS:
            end = self.tag(pos, tags)
            if end is not None:
                return kind, end
        return None

    def operator(self, pos: int) -> tuple[Op, int] | None:
        for tags, op in _OPERATORS:
            end = self.tag(pos, tags)
            if end is not None:
                return op, end
        return None

    # -- grammar rules ---------------------------------------------------

    def contradiction(self, pos: int) -> tuple[Expr, int] | None:
        end = self.tag(pos, ("_|_", "⊥"))
        return None if end is None else (Contra(), end)

    def tautology(self, pos: int) -> tuple[Expr, int] | None:
        end = self.tag(pos, ("^|^", "⊤"))
        return None if end is None else (Taut(), end)

    def arguments(self, pos: int) -> tuple[list[Expr], int]:
        first = self.expr(pos)
        if first is None:
            return [], pos
        item, pos = first
        items = [item]
        while True:
            sep = self.space(pos)
            if not self.text.startswith(",", sep):
                break
            nxt = self.expr(self.space(sep + 1))
            if nxt is None:
                break
            item, pos = nxt
            items.append(item)
        return items, pos

    def predicate(self, pos: int) -> tuple[Expr, int] | None:
        found = self.variable(self.space(pos))
        if found is None:
            return None
        name, pos = found
        pos = self.space(pos)
        if self.text.startswith("(", pos):
            args, end = self.arguments(pos + 1)
            if self.text.startswith(")", end):
                return Apply(Var(name), tuple(args)), end + 1
        return Var(name), pos

    def notterm(self, pos: int) -> tuple[Expr, int] | None:
        start = self.tag(pos, ("~", "¬"))
        if start is None:
            return None
        operand = self.paren_expr(start)
        if operand is None:
            return None
        expr, end = operand
        return Not(expr), end

    def parenthesized(self, pos: int) -> tuple[Expr, int] | None:
        pos = self.space(pos)
        if not self.text.startswith("(", pos):
            return None
        inner = self.expr(self.space(pos + 1))
        if inner is None:
            return None
        expr, pos = inner
        pos = self.space(pos)
        if not self.text.startswith(")", pos):
            return None
        return expr, self.space(pos + 1)

    def binder(self, pos: int) -> tuple[Expr, int] | None:
        quant = self.quantifier(self.space(pos))
        if quant is None:
            return None
        kind, pos = quant
        found = self.variable(self.space(pos))
        if found is None:
            return None
        name, pos = found
        if self.quantifier(pos) is not None:
            pos = self.space(pos)
        else:
            after = self.space(pos)
            if after == pos:
                return None
            pos = after
        body = self.parenthesized(pos) or self.paren_expr(pos)
        if body is None:
            return None
        expr, end = body
        return Quant(kind, name, expr), end

    def paren_expr(self, pos: int) -> tuple[Expr, int] | None:
        cached = self._paren_cache.get(pos, _MISSING)
        if cached is not _MISSING:
            return cached  # type: ignore[return-value]
        result = None
        for rule in (
            self.contradiction,
            self.tautology,
            self.predicate,
            self.notterm,
            self.binder,
            self.parenthesized,
        ):
            result = rule(pos)
            if result is not None:
                break
        self._paren_cache[pos] = result
        return result

    def impl_term(self, pos: int) -> tuple[Expr, int] | None:
        left = self.paren_expr(pos)
        if left is None:
            return None
        lhs, pos = left
        arrow = self.tag(self.space(pos), ("->", "→"))
        if arrow is None:
            return None
        right = self.paren_expr(self.space(arrow))
        if right is None:
            return None
        rhs, end = right
        return Impl(lhs, rhs), end

    def assoc_term(self, pos: int) -> tuple[Expr, int] | None:
        first = self.paren_expr(pos)
        if first is None:
            return None
        expr, pos = first
        exprs = [expr]
        ops: list[Op] = []
        while True:
            found = self.operator(self.space(pos))
            if found is None:
                break
            op, after = found
            nxt = self.paren_expr(self.space(after))
            if nxt is None:
                break
            expr, pos = nxt
            exprs.append(expr)
            ops.append(op)
        if not ops or any(op != ops[0] for op in ops):
            return None
        return Assoc(ops[0], tuple(exprs)), pos

    def expr(self, pos: int) -> tuple[Expr, int] | None:
        cached = self._expr_cache.get(pos, _MISSING)
        if cached is not _MISSING:
            return cached  # type: ignore[return-value]
        result = self.assoc_term(pos) or self.impl_term(pos) or self.paren_expr(pos)
        self._expr_cache[pos] = result
        return result


def try_parse(text: str) -> Expr | None:
    """Parse ``text`` into an expression, or return ``None`` if it is malformed."""
    source = f"{text}\n"
    result = _Parser(source).expr(0)
    if result is None:
        return None
    expr, end = result
    if not source.startswith("\n", end):
        return None
    return expr


def parse(text: str) -> Expr:
    """Parse ``text`` into an expression, raising :class:`ParseError` if malformed."""
    expr = try_parse(text)
    if expr is None:
        raise ParseError(text)
    return expr