"""Expansion of ASCII shorthands into logic symbols."""

TABLE: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("⊥", (".con", "^")),
    ("⊤", (".taut", "!")),
    ("¬", (".not", "~")),
    ("∀", ("forall", "@")),
    ("∃", ("exists", "?")),
    ("∧", (".and", "&", "/\\")),
    ("∨", (".or", "|", "\\/")),
    ("↔", (".bicon", "%", "<->")),
    ("→", (".impl", "$", "->")),
    ("≡", (".equiv", "===")),
)


def expand(text: str) -> str:
    """Replace every macro in ``text`` by its logic symbol, in table order."""
    for symbol, macros in TABLE:
        for macro in macros:
            text = text.replace(macro, symbol)
    return text