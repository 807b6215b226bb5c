"""Syntax error diagnostics.

Render a parse failure, meaning the offending token plus the grammar
symbols that would have been accepted in its place, as a single line:

    7:6: error: expected one of var, let or struct; got: "42"

When the failure wraps a lower-level error, that error's message replaces
the expected/got description:

    6:7: error: source on fire
"""

from collections.abc import Callable, Sequence
from functools import partial
from typing import Any, Final

from errormsg.log import get_logger
from errormsg.tokens import Token, TokenType

logger = get_logger(__name__)

SEVERITY: Final = "error"
"""Severity label shown in every rendered diagnostic."""

EOF_REPRESENTATION: Final = "<EOF>"
"""How an end-of-input token is shown to the user."""


def describe_expected(names: Sequence[str]) -> str:
    """Describe the symbols that were acceptable as an English phrase.

    Three names are joined without a comma before "or"; four or more get
    one. Names are used verbatim, in the order given.

    Args:
        names: Display names of the acceptable symbols.

    Returns:
        The phrase, e.g. "expected either TREE or ENT".

    """
    match len(names):
        case 0:
            return "unexpected additional tokens"
        case 1:
            return f"expected {names[0]}"
        case 2:
            return f"expected either {names[0]} or {names[1]}"
        case 3:
            return f"expected one of {names[0]}, {names[1]} or {names[2]}"
        case _:
            head = ", ".join(names[:-1])
            return f"expected one of {head}, or {names[-1]}"


def describe_token(token: Token) -> str:
    """Describe a token the way it appears after "got:" in a diagnostic."""
    match token.kind:
        case TokenType.EOF:
            return EOF_REPRESENTATION
        case TokenType.INVALID:
            return f'unknown/invalid token "{token.literal}"'
        case _:
            return f'"{token.literal}"'


class ParseError(Exception):
    """A single parse failure at a token.

    Carries the offending token and either the names of the symbols that
    were expected there or an underlying error that caused the failure.
    Instances are not modified after construction.
    """

    def __init__(
        self,
        error_token: Token,
        expected_tokens: Sequence[str] | None = None,
        *,
        err: BaseException | None = None,
    ) -> None:
        """Initialize the parse error.

        Args:
            error_token: The token at which parsing failed.
            expected_tokens: Display names of the acceptable symbols, or None
                when no expectation applies.
            err: Underlying error; its message takes precedence when rendering.

        """
        self._error_token = error_token
        self._expected_tokens = (
            tuple(expected_tokens) if expected_tokens is not None else None
        )
        self._err = err
        super().__init__(self.render())

    @property
    def error_token(self) -> Token:
        """The token at which parsing failed."""
        return self._error_token

    @property
    def expected_tokens(self) -> tuple[str, ...] | None:
        """Display names of the symbols that were acceptable, if known."""
        return self._expected_tokens

    @property
    def err(self) -> BaseException | None:
        """The wrapped underlying error, if any."""
        return self._err

    @property
    def line(self) -> int:
        return self._error_token.position.line

    @property
    def column(self) -> int:
        return self._error_token.position.column

    def describe(self) -> str:
        """Get the diagnostic text without the position and severity prefix."""
        if self._err is not None:
            return str(self._err)
        expected = describe_expected(self._expected_tokens or ())
        return f"{expected}; got: {describe_token(self._error_token)}"

    def render(self) -> str:
        """Render the full diagnostic line.

        Returns:
            "<line>:<column>: error: <description>".

        """
        return f"{self.line}:{self.column}: {SEVERITY}: {self.describe()}"

    def __str__(self) -> str:
        return self.render()

    def __reduce__(self) -> tuple[Callable[..., "ParseError"], tuple[Any, ...]]:
        # args holds only the rendered line, so rebuild from the fields
        return (
            partial(type(self), err=self._err),
            (self._error_token, self._expected_tokens),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(error_token={self._error_token!r}, "
            f"expected_tokens={self._expected_tokens!r}, err={self._err!r})"
        )
