"""
Redex Interpreter

Facade stringing the pipeline together: tokenize, parse, evaluate.

Key classes:
- EvaluationResult: Structured result of one evaluation
- Interpreter: Runs source or pre-parsed ASTs against context and resolver
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from redex.version import __version__
from redex.nodes import Program
from redex.parser import parse
from redex.runtime.environment import Environment, Number
from redex.runtime.evaluator import NodeEvaluator, Resolver, validate_bindings

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Result of evaluating a program."""
    result: Optional[Number]
    env: Dict[str, Number] = field(default_factory=dict)
    provenance: Dict[str, str] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=lambda: {"version": __version__})

    @property
    def value(self) -> Optional[Number]:
        return self.result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "result": self.result,
            "env": dict(self.env),
            "provenance": dict(self.provenance),
            "errors": list(self.errors),
            "diagnostics": list(self.diagnostics),
            "meta": dict(self.meta),
        }


class Interpreter:
    """
    Evaluates Redex programs.

    The interpreter itself holds only the caller's context and resolver; every
    call builds a fresh Environment, so one instance may be shared between
    threads.
    """

    def __init__(self,
                 context: Optional[Mapping[str, Number]] = None,
                 resolver: Optional[Resolver] = None):
        self.context = dict(context or {})
        self.resolver = resolver
        validate_bindings(self.context)

    def evaluate(self, source: str,
                 env: Optional[Mapping[str, Number]] = None) -> EvaluationResult:
        """Parse and evaluate source text."""
        return self.evaluate_ast(parse(source), env)

    def evaluate_ast(self, program: Program,
                     env: Optional[Mapping[str, Number]] = None) -> EvaluationResult:
        """
        Evaluate a parsed program.

        Args:
            program: A single node or a list of nodes evaluated in order
            env: Optional starting bindings, treated as script-defined

        Returns:
            EvaluationResult whose result is the value of the last node
        """
        validate_bindings(env or {}, source="environment")
        environment = Environment(env)
        evaluator = NodeEvaluator(environment, self.context, self.resolver)

        statements = program if isinstance(program, list) else [program]
        result = None
        for index, node in enumerate(statements):
            logger.debug("Evaluating statement %d: %r", index, node)
            result = evaluator.evaluate(node)

        snapshot = environment.snapshot()
        return EvaluationResult(
            result=result,
            env=snapshot["env"],
            provenance=snapshot["provenance"],
        )


def evaluate(source: Union[str, Program],
             context: Optional[Mapping[str, Number]] = None,
             resolver: Optional[Resolver] = None,
             env: Optional[Mapping[str, Number]] = None) -> EvaluationResult:
    """
    Evaluate Redex source (or a pre-parsed AST).

    Raises:
        RedexSyntaxError: malformed source
        RedexNameError: an identifier nothing could resolve
        EvaluationError: arithmetic, type, const or context/resolver faults
    """
    interpreter = Interpreter(context=context, resolver=resolver)
    if isinstance(source, str):
        return interpreter.evaluate(source, env)
    return interpreter.evaluate_ast(source, env)
