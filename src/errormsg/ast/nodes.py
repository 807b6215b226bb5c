"""AST node definitions for the declaration language."""

from dataclasses import dataclass

from errormsg.tokens import Position

Value = int | float | str
"""A literal value or the name of another variable."""


@dataclass(frozen=True)
class Declaration:
    """Variable declaration node (e.g., var abcd = 123;)."""

    name: str
    """Declared name, "_" for a blank declaration."""

    position: Position
    """Position of the var keyword."""

    operator: str | None = None
    """"=" or ":=", None when the declaration has no initializer."""

    value: Value | None = None
    """Initial value, None when the declaration has no initializer."""
