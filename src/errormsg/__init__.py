"""Syntax error messages for generated parsers.

Provide the token model, the diagnostic formatters, and a Lark-backed
parser for a small declaration language that reports its failures
through them.
"""

from errormsg.ast import Declaration
from errormsg.errors import (
    EOF_REPRESENTATION,
    SEVERITY,
    ParseError,
    describe_expected,
    describe_token,
)
from errormsg.grammar import ParserFactory
from errormsg.log import get_logger, init_logging
from errormsg.parser import Parser, parse
from errormsg.tokens import Position, Token, TokenMap, TokenType

__all__ = [
    "EOF_REPRESENTATION",
    "SEVERITY",
    "Declaration",
    "ParseError",
    "Parser",
    "ParserFactory",
    "Position",
    "Token",
    "TokenMap",
    "TokenType",
    "describe_expected",
    "describe_token",
    "get_logger",
    "init_logging",
    "parse",
]
