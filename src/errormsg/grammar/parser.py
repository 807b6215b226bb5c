"""Parser factory for the declaration grammar.

Create configured Lark LALR parser instances and name the grammar's
terminals for diagnostics.
"""

from pathlib import Path

from lark import Lark

from errormsg.log import get_logger
from errormsg.tokens import TokenMap

logger = get_logger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "errormsg.lark"
"""Path to the declaration grammar file."""

TOKEN_MAP = TokenMap(
    [
        ("VAR", "var"),
        ("IDENT", "identifier"),
        ("BLANK", "_"),
        ("ASSIGN", "="),
        ("DEFINE", ":="),
        ("SEMI", ";"),
        ("INT", "int_lit"),
        ("FLOAT", "float_lit"),
        ("STRING", "string_lit"),
    ],
)
"""Kind ids and display names of the grammar terminals, in declaration order."""


class ParserFactory:
    """Factory for creating declaration parser instances.

    The production parser is cached because building the LALR tables
    is the expensive part of creating a Lark instance.
    """

    _grammar_cache: str | None = None
    """Cached grammar content to avoid repeated file reads."""

    _parser_cache: Lark | None = None
    """Cached production parser instance (non-debug mode)."""

    @classmethod
    def _load_grammar(cls) -> str:
        """Load the grammar file contents.

        Returns:
            The grammar string.

        """
        if cls._grammar_cache is None:
            logger.debug("Loading grammar from %s", GRAMMAR_PATH)
            cls._grammar_cache = GRAMMAR_PATH.read_text()
        return cls._grammar_cache

    @classmethod
    def create(cls, *, debug: bool = False) -> Lark:
        """Create a declaration parser.

        The lexer is Lark's basic lexer, so every token is classified
        independently of the parser state, as a generated scanner would.

        Args:
            debug: If True, enables Lark debug output and returns a fresh
                   parser instance (not cached).

        Returns:
            Configured Lark parser instance.

        """
        if not debug and cls._parser_cache is not None:
            return cls._parser_cache

        logger.debug("Creating lalr parser (debug=%s)", debug)

        parser = Lark(
            cls._load_grammar(),
            parser="lalr",
            lexer="basic",
            propagate_positions=True,
            maybe_placeholders=False,
            debug=debug,
        )

        if not debug:
            cls._parser_cache = parser

        return parser

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached parser state.

        Use for testing or when grammar may have changed.
        """
        cls._grammar_cache = None
        cls._parser_cache = None
