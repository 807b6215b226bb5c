"""Parser driver for the declaration language.

Run the Lark LALR parser over a source text and report the first failure
as a ParseError, with the offending token and the terminals that were
acceptable at that point.
"""

from lark import Token as LarkToken
from lark import UnexpectedCharacters, UnexpectedToken
from lark.exceptions import VisitError
from lark.parsers.lalr_interactive_parser import InteractiveParser

from errormsg.ast.nodes import Declaration
from errormsg.ast.transformer import transform
from errormsg.errors import ParseError
from errormsg.grammar.parser import TOKEN_MAP, ParserFactory
from errormsg.log import get_logger
from errormsg.tokens import Position, Token, TokenMap, TokenType

logger = get_logger(__name__)

END_TERMINAL = "$END"
"""Name Lark gives the end-of-input terminal."""


def end_position(source: str) -> Position:
    """Get the position just past the last character of the source.

    Args:
        source: The source text.

    Returns:
        Position an end-of-input token is reported at.

    """
    line_start = source.rfind("\n") + 1
    return Position(
        line=source.count("\n") + 1,
        column=len(source) - line_start + 1,
    )


class Parser:
    """Declaration parser reporting failures as ParseError."""

    def __init__(
        self,
        parser_factory: type[ParserFactory] = ParserFactory,
        token_map: TokenMap = TOKEN_MAP,
    ) -> None:
        """Initialize the parser.

        Args:
            parser_factory: Source of configured Lark parsers.
            token_map: Kind ids and display names of the grammar terminals.

        """
        self._parser_factory = parser_factory
        self._token_map = token_map

    def parse(self, source: str) -> Declaration:
        """Parse a declaration.

        Args:
            source: The source text.

        Returns:
            The parsed declaration.

        Raises:
            ParseError: On the first token the grammar cannot accept, or when
                a literal cannot be converted.

        """
        interactive = self._parser_factory.create().parse_interactive(source)
        try:
            interactive.exhaust_lexer()
            tree = interactive.feed_eof()
        except UnexpectedToken as e:
            error = self._unexpected_token(source, e)
            logger.debug("Unexpected token: %s", error)
            raise error from e
        except UnexpectedCharacters as e:
            error = self._unexpected_characters(e, interactive)
            logger.debug("Invalid token: %s", error)
            raise error from e

        try:
            return transform(tree)
        except VisitError as e:
            if not isinstance(e.obj, LarkToken):
                raise
            error = ParseError(self._token_from_lark(e.obj), err=e.orig_exc)
            logger.debug("Invalid literal: %s", error)
            raise error from e

    def _unexpected_token(self, source: str, e: UnexpectedToken) -> ParseError:
        if e.token.type == END_TERMINAL:
            token = Token(kind=TokenType.EOF, literal="", position=end_position(source))
        else:
            token = self._token_from_lark(e.token)
        return ParseError(token, self._expected_names(e.expected))

    def _unexpected_characters(
        self,
        e: UnexpectedCharacters,
        interactive: InteractiveParser,
    ) -> ParseError:
        token = Token(
            kind=TokenType.INVALID,
            literal=e.char,
            position=Position(line=e.line, column=e.column),
        )
        return ParseError(token, self._expected_names(interactive.accepts()))

    def _expected_names(self, terminals: set[str]) -> list[str]:
        """Display names of the acceptable terminals, end of input left out."""
        return self._token_map.display_names(
            name for name in terminals if name != END_TERMINAL
        )

    def _token_from_lark(self, token: LarkToken) -> Token:
        return Token(
            kind=self._token_map.type_of(token.type),
            literal=str(token),
            position=Position(line=token.line, column=token.column),
        )


_default_parser = Parser()


def parse(source: str) -> Declaration:
    """Parse a declaration with the shared default parser.

    Args:
        source: The source text.

    Returns:
        The parsed declaration.

    Raises:
        ParseError: If the source is not a valid declaration.

    """
    return _default_parser.parse(source)
