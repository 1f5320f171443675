"""Logical expressions, parsing, normal forms and equivalence rewriting."""

__version__ = "0.1.0"

__all__ = [
    "equivs",
    "expr",
    "macros",
    "normal_forms",
    "normalize",
    "parser",
    "quantifiers",
]