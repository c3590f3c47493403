"""
Redex Node Evaluator

Tree-walking evaluation of AST nodes against one Environment.

Identifier resolution order is fixed:
1. script bindings (Environment)
2. caller-supplied context
3. caller-supplied resolver, called as resolver(name, merged_view)

Key classes:
- NodeEvaluator: Evaluates nodes and enforces const and numeric rules
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from redex.errors import EvaluationError, RedexNameError
from redex.nodes import BinaryOp, Declaration, Identifier, NumberLiteral
from redex.runtime.environment import Environment, Number, Provenance, is_numeric

logger = logging.getLogger(__name__)

Resolver = Callable[[str, Dict[str, Number]], Optional[Any]]


def validate_bindings(bindings: Mapping[str, Any], source: str = "context") -> None:
    """Fail fast on any non-numeric value."""
    for key, value in bindings.items():
        if not is_numeric(value):
            raise EvaluationError(
                f"{source} value for `{key}` must be numeric, got `{type(value).__name__}`"
            )


class NodeEvaluator:
    """
    Evaluates Redex nodes.

    One instance serves one evaluation pass; it owns the environment it is
    given and never shares it across passes.
    """

    def __init__(self,
                 environment: Environment,
                 context: Optional[Mapping[str, Number]] = None,
                 resolver: Optional[Resolver] = None):
        self.context = dict(context or {})
        validate_bindings(self.context)

        self.environment = environment
        self.resolver = resolver
        self._resolved: Dict[str, Number] = {}

        for name in self.context:
            environment.record(name, Provenance.CONTEXT)

    def evaluate(self, node: Any) -> Number:
        """Evaluate a node and return its numeric value."""
        if isinstance(node, NumberLiteral):
            return node.value
        elif isinstance(node, Identifier):
            return self._eval_identifier(node)
        elif isinstance(node, BinaryOp):
            return self._eval_binary(node)
        elif isinstance(node, Declaration):
            return self._eval_declaration(node)
        else:
            raise EvaluationError(f"unknown node type `{type(node).__name__}`")

    def _eval_identifier(self, node: Identifier) -> Number:
        name = node.name

        if name in self.environment:
            return self.environment.get(name)
        if name in self.context:
            return self.context[name]
        if self.resolver is None:
            raise RedexNameError(f"undefined variable `{name}`")

        return self._resolve(name)

    def _resolve(self, name: str) -> Number:
        """Ask the resolver for a name neither the script nor the context binds."""
        if name in self._resolved:
            return self._resolved[name]

        logger.debug("Resolving `%s` through resolver", name)
        try:
            value = self.resolver(name, self.environment.merged_view(self.context))
        except (RedexNameError, EvaluationError):
            raise
        except Exception as e:
            raise EvaluationError(f"resolver error: {e}") from e

        if value is None:
            raise RedexNameError(f"undefined variable `{name}`")
        if not is_numeric(value):
            raise EvaluationError(
                f"resolver must return numeric value, got `{type(value).__name__}`"
            )

        self._resolved[name] = value
        self.environment.record(name, Provenance.RESOLVER)
        return value

    def _eval_binary(self, node: BinaryOp) -> Number:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        try:
            return self._apply(node.operator, left, right)
        except OverflowError as e:
            raise EvaluationError(f"numeric overflow: {e}") from e

    def _apply(self, op: str, left: Number, right: Number) -> Number:
        if op == "+":
            return left + right
        elif op == "-":
            return left - right
        elif op == "*":
            return left * right
        elif op == "/":
            if right == 0:
                raise EvaluationError("division by zero")
            # Integer operands keep integer (floored) division
            if isinstance(left, int) and isinstance(right, int):
                return left // right
            return left / right
        else:
            raise EvaluationError(f"unknown op `{op}`")

    def _eval_declaration(self, node: Declaration) -> Number:
        name = node.name
        if self.environment.is_const(name):
            raise EvaluationError(f"cannot reassign to const `{name}`")

        value = self.evaluate(node.value)
        if not is_numeric(value):
            raise EvaluationError(
                f"assigned value must be numeric, got `{type(value).__name__}`"
            )

        self.environment.declare(name, value, const=node.is_const)
        logger.debug("Declared %s `%s` = %r", node.kind.value, name, value)
        return value
