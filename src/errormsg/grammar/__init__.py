"""Grammar package for the declaration language.

Provide the Lark grammar, its token map, and the parser factory.
"""

from errormsg.grammar.parser import GRAMMAR_PATH, TOKEN_MAP, ParserFactory

__all__ = ["GRAMMAR_PATH", "TOKEN_MAP", "ParserFactory"]
