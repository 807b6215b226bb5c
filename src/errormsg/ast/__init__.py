"""AST package for the declaration language."""

from errormsg.ast.nodes import Declaration
from errormsg.ast.transformer import DeclarationBuilder, transform

__all__ = ["Declaration", "DeclarationBuilder", "transform"]
