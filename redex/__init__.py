"""
Redex - a minimal embeddable expression language.

Source is tokenized, parsed into an AST and evaluated against script
bindings, a caller-supplied context and an optional resolver hook:

    >>> from redex import evaluate
    >>> evaluate("let x = 10\\nx * 2").result
    20
"""

from redex.version import __version__
from redex.errors import (
    RedexError,
    RedexSyntaxError,
    RedexNameError,
    EvaluationError,
)
from redex.lexer import Token, TokenKind, tokenize
from redex.nodes import (
    BinaryOp,
    Declaration,
    DeclarationKind,
    Identifier,
    NumberLiteral,
)
from redex.parser import Parser, parse
from redex.runtime import EvaluationResult, Interpreter, evaluate

__all__ = [
    "__version__",
    "RedexError",
    "RedexSyntaxError",
    "RedexNameError",
    "EvaluationError",
    "Token",
    "TokenKind",
    "tokenize",
    "BinaryOp",
    "Declaration",
    "DeclarationKind",
    "Identifier",
    "NumberLiteral",
    "Parser",
    "parse",
    "EvaluationResult",
    "Interpreter",
    "evaluate",
]
