"""
Redex Parser

Fixed-precedence recursive-descent parser.

Grammar (lowest to highest precedence):
    program     := statement (NEWLINE statement)*
    statement   := declaration | expression
    declaration := ("let" | "const") IDENTIFIER "=" expression
    expression  := add_sub
    add_sub     := mul_div (("+" | "-") mul_div)*
    mul_div     := primary (("*" | "/") primary)*
    primary     := NUMBER | IDENTIFIER | "(" expression ")"

Blank lines are skipped. A program with a single statement parses to that
node; otherwise to a list of nodes in source order. The first error aborts
parsing with RedexSyntaxError.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from redex.errors import RedexSyntaxError
from redex.lexer import Token, TokenKind, tokenize
from redex.nodes import (
    BinaryOp,
    Declaration,
    DeclarationKind,
    Identifier,
    Node,
    NumberLiteral,
    Program,
)


def parse(source: Union[str, Sequence[Token]]) -> Program:
    """Parse source text, or an already tokenized sequence, into an AST."""
    tokens = tokenize(source) if isinstance(source, str) else list(source)
    return Parser(tokens).parse_program()


class Parser:
    """Recursive-descent parser over a token list."""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.pos = 0

    @property
    def current(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def eat(self, expected: Optional[TokenKind] = None) -> Token:
        """Consume the current token, checking its kind when one is expected."""
        token = self.current
        if expected is not None and (token is None or token.kind != expected):
            actual = token.kind.value if token else "none"
            raise RedexSyntaxError(f"expected `{expected.value}`, got `{actual}`")
        if token is None:
            raise RedexSyntaxError("unexpected end")
        self.pos += 1
        return token

    def parse_program(self) -> Program:
        statements: List[Node] = []

        self._skip_newlines()
        while self.current is not None:
            statements.append(self.parse_statement())
            token = self.current
            if token is not None and token.kind != TokenKind.NEWLINE:
                raise RedexSyntaxError(f"unexpected token `{token.kind.value}`")
            self._skip_newlines()

        if not statements:
            raise RedexSyntaxError("unexpected end")
        if len(statements) == 1:
            return statements[0]
        return statements

    def parse_statement(self) -> Node:
        token = self.current
        if token is not None and token.is_keyword("let", "const"):
            return self.parse_declaration()
        return self.parse_expression()

    def parse_declaration(self) -> Declaration:
        keyword = self.eat(TokenKind.KEYWORD)
        name = self.eat(TokenKind.IDENTIFIER)
        equals = self.eat(TokenKind.OPERATOR)
        if equals.value != "=":
            raise RedexSyntaxError(f"expected `=`, got `{equals.value}`")
        value = self.parse_expression()
        return Declaration(DeclarationKind(keyword.value), name.value, value)

    def parse_expression(self) -> Node:
        return self.parse_add_sub()

    def parse_add_sub(self) -> Node:
        node = self.parse_mul_div()
        while self.current is not None and self.current.is_operator("+", "-"):
            op = self.eat(TokenKind.OPERATOR).value
            node = BinaryOp(op, node, self.parse_mul_div())
        return node

    def parse_mul_div(self) -> Node:
        node = self.parse_primary()
        while self.current is not None and self.current.is_operator("*", "/"):
            op = self.eat(TokenKind.OPERATOR).value
            node = BinaryOp(op, node, self.parse_primary())
        return node

    def parse_primary(self) -> Node:
        token = self.current
        if token is None:
            raise RedexSyntaxError("unexpected end")

        if token.kind == TokenKind.NUMBER:
            self.eat(TokenKind.NUMBER)
            return NumberLiteral(token.value)
        if token.kind == TokenKind.IDENTIFIER:
            self.eat(TokenKind.IDENTIFIER)
            return Identifier(token.value)
        if token.kind == TokenKind.LPAREN:
            self.eat(TokenKind.LPAREN)
            node = self.parse_expression()
            self.eat(TokenKind.RPAREN)
            return node

        raise RedexSyntaxError(f"unexpected token `{token.kind.value}`")

    def _skip_newlines(self) -> None:
        while self.current is not None and self.current.kind == TokenKind.NEWLINE:
            self.pos += 1
