"""Token model shared by the scanner, the parser driver, and diagnostics.

Provide the position and token value types, the two sentinel token
kinds, and the token map that names grammar-specific kinds.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from errormsg.log import get_logger

logger = get_logger(__name__)


class TokenType(IntEnum):
    """Token kinds with a fixed meaning in every grammar.

    Grammar-specific kinds are any other integer, starting at FIRST_GRAMMAR_TYPE.
    """

    INVALID = 0
    """Input the scanner could not classify."""

    EOF = 1
    """End of input."""


FIRST_GRAMMAR_TYPE = 2
"""Kind id given to the first terminal of a grammar."""


@dataclass(frozen=True)
class Position:
    """Line and column of a token in the source (both 1-indexed)."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """A classified, positioned unit of input text."""

    kind: int
    """A TokenType sentinel or a grammar-specific kind id."""

    literal: str
    """Source text of the token (empty for end of input)."""

    position: Position
    """Where the token starts."""


class TokenMap:
    """Two-way mapping between kind ids, terminal names, and display names.

    Kind ids follow the order the terminals are given in, starting after
    the sentinels, so sorting by id reproduces grammar declaration order.
    """

    def __init__(self, terminals: Sequence[tuple[str, str]]) -> None:
        """Initialize the map.

        Args:
            terminals: Ordered (terminal name, display name) pairs.

        """
        self._type_by_name: dict[str, int] = {}
        self._display_by_type: dict[int, str] = {}
        for offset, (name, display) in enumerate(terminals):
            kind = FIRST_GRAMMAR_TYPE + offset
            self._type_by_name[name] = kind
            self._display_by_type[kind] = display
        logger.debug("Built token map with %d terminals", len(terminals))

    def __len__(self) -> int:
        return len(self._type_by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._type_by_name

    def type_of(self, name: str) -> int:
        """Get the kind id of a terminal.

        Args:
            name: Terminal name as used by the grammar.

        Returns:
            The kind id.

        Raises:
            KeyError: If the terminal is not part of the map.

        """
        return self._type_by_name[name]

    def name_of(self, kind: int) -> str:
        """Get the display name of a kind id.

        Args:
            kind: A sentinel or grammar-specific kind id.

        Returns:
            Sentinel name, display name, or "#<kind>" for ids the map
            does not know.

        """
        match kind:
            case TokenType.INVALID | TokenType.EOF:
                return TokenType(kind).name
            case _:
                return self._display_by_type.get(kind, f"#{kind}")

    def display_names(self, names: Iterable[str]) -> list[str]:
        """Order terminal names by kind id and return their display names.

        Args:
            names: Terminal names in any order.

        Returns:
            Display names in kind id order, followed by unknown names sorted.

        """
        known = sorted(
            (self._type_by_name[name] for name in set(names) if name in self),
        )
        unknown = sorted(name for name in set(names) if name not in self)
        if unknown:
            logger.debug("Terminals missing from token map: %s", unknown)
        return [self._display_by_type[kind] for kind in known] + unknown

    def token_string(self, token: Token) -> str:
        """Format a token for debugging output."""
        return f"{self.name_of(token.kind)}({token.kind},{token.literal})"
