"""AST transformer for the declaration language.

Transform Lark parse trees into Declaration nodes, converting literal
tokens to Python values on the way.
"""

# mypy: disable-error-code="type-arg,no-any-return"

from typing import Any

from lark import Token, Transformer, Tree

from errormsg.ast.nodes import Declaration, Value
from errormsg.log import get_logger
from errormsg.tokens import Position

logger = get_logger(__name__)

INT64_MAX = 2**63 - 1
"""Largest integer literal the language accepts."""

INITIALIZER_LENGTH = 2
"""Children after the target when an initializer is present (initializer, SEMI)."""


class DeclarationBuilder(Transformer):
    """Build a Declaration from a parse tree.

    Literal conversion failures propagate out of transform() wrapped in
    lark's VisitError, whose obj is the offending token.
    """

    def start(self, items: list[Any]) -> Declaration:
        return items[0]

    def declaration(self, items: list[Any]) -> Declaration:
        var, target, *rest = items
        operator: str | None = None
        value: Value | None = None
        if len(rest) == INITIALIZER_LENGTH:
            operator, value = rest[0]
        return Declaration(
            name=str(target),
            position=Position(line=var.line, column=var.column),
            operator=operator,
            value=value,
        )

    def initializer(self, items: list[Any]) -> tuple[str, Value]:
        operator, value = items
        # Identifiers are the only values left as tokens
        if isinstance(value, Token):
            value = str(value)
        return str(operator), value

    def INT(self, token: Token) -> int:  # noqa: N802
        """Convert an integer literal.

        Raises:
            ValueError: If the literal does not fit in a signed 64-bit integer.

        """
        value = int(token)
        if value > INT64_MAX:
            msg = f"integer literal {token} out of range"
            raise ValueError(msg)
        return value

    def FLOAT(self, token: Token) -> float:  # noqa: N802
        return float(token)

    def STRING(self, token: Token) -> str:  # noqa: N802
        return str(token)[1:-1]


def transform(tree: Tree[Token]) -> Declaration:
    """Transform a parse tree into a Declaration.

    Args:
        tree: Tree produced by the declaration grammar.

    Returns:
        The declaration node.

    """
    declaration = DeclarationBuilder().transform(tree)
    logger.debug("Built declaration of %r", declaration.name)
    return declaration
