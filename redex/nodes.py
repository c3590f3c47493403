"""
Redex AST Nodes

The parser produces a tree of these frozen dataclasses. Children are owned
exclusively by their parent; equality is structural, so parsing the same
source twice yields equal (not identical) trees.

Node kinds:
- NumberLiteral: integer or float constant
- Identifier: name reference
- BinaryOp: arithmetic on two sub-expressions
- Declaration: let/const binding
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class DeclarationKind(Enum):
    LET = "let"
    CONST = "const"


@dataclass(frozen=True)
class NumberLiteral:
    value: Union[int, float]


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class BinaryOp:
    operator: str
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Declaration:
    kind: DeclarationKind
    name: str
    value: "Node"

    @property
    def is_const(self) -> bool:
        return self.kind == DeclarationKind.CONST


Node = Union[NumberLiteral, Identifier, BinaryOp, Declaration]

# A parsed program: one node, or one node per non-empty source line
Program = Union[Node, List[Node]]
