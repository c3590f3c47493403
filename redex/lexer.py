"""
Redex Lexer

Single left-to-right scan turning source text into a flat token sequence.
The lexer never fails: characters it does not recognise become UNKNOWN
tokens and are rejected later by the parser.

Key classes:
- TokenKind: Token categories
- Token: Immutable (kind, value) pair
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union
import string


class TokenKind(Enum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"
    NEWLINE = "newline"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    value is an int or float for NUMBER tokens and the matched text otherwise.
    """
    kind: TokenKind
    value: Union[int, float, str]

    def is_operator(self, *symbols: str) -> bool:
        return self.kind == TokenKind.OPERATOR and self.value in symbols

    def is_keyword(self, *words: str) -> bool:
        return self.kind == TokenKind.KEYWORD and self.value in words


KEYWORDS = frozenset(["let", "const"])
OPERATORS = frozenset("+-*/=")

_DIGITS = frozenset(string.digits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _IDENT_START | _DIGITS
# "\n" is a statement separator, not whitespace
_WHITESPACE = frozenset(string.whitespace) - {"\n"}
# int() rejects long digit strings (3.11+ limit, never below 640 digits)
_INT_CHUNK = 512


def tokenize(source: str) -> List[Token]:
    """Convert source text into an ordered list of tokens."""
    tokens: List[Token] = []
    pos = 0
    length = len(source)

    while pos < length:
        ch = source[pos]

        if ch == "\n":
            tokens.append(Token(TokenKind.NEWLINE, ch))
            pos += 1
        elif ch in _WHITESPACE:
            pos += 1
        elif ch in _DIGITS:
            start = pos
            pos = _scan(source, pos, _DIGITS)
            # Fractional part only when a digit follows the dot
            if pos + 1 < length and source[pos] == "." and source[pos + 1] in _DIGITS:
                pos = _scan(source, pos + 1, _DIGITS)
                tokens.append(Token(TokenKind.NUMBER, float(source[start:pos])))
            else:
                tokens.append(Token(TokenKind.NUMBER, _parse_int(source[start:pos])))
        elif ch in _IDENT_START:
            start = pos
            pos = _scan(source, pos, _IDENT_CHARS)
            word = source[start:pos]
            kind = TokenKind.KEYWORD if word in KEYWORDS else TokenKind.IDENTIFIER
            tokens.append(Token(kind, word))
        elif ch in OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, ch))
            pos += 1
        elif ch == "(":
            tokens.append(Token(TokenKind.LPAREN, ch))
            pos += 1
        elif ch == ")":
            tokens.append(Token(TokenKind.RPAREN, ch))
            pos += 1
        else:
            tokens.append(Token(TokenKind.UNKNOWN, ch))
            pos += 1

    return tokens


def _scan(source: str, pos: int, allowed: frozenset) -> int:
    """Advance past a run of allowed characters."""
    while pos < len(source) and source[pos] in allowed:
        pos += 1
    return pos


def _parse_int(digits: str) -> int:
    """Convert a digit run of any length to int."""
    value = 0
    for start in range(0, len(digits), _INT_CHUNK):
        chunk = digits[start:start + _INT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value
