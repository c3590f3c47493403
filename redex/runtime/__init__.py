"""
Redex Runtime Engine

- Environment: Script bindings, const names and provenance for one pass
- NodeEvaluator: Tree-walking node evaluation and identifier resolution
- Interpreter: Parse + evaluate facade producing EvaluationResult
"""

from redex.runtime.environment import Environment, Provenance
from redex.runtime.evaluator import NodeEvaluator
from redex.runtime.interpreter import EvaluationResult, Interpreter, evaluate

__all__ = [
    "Environment",
    "Provenance",
    "NodeEvaluator",
    "EvaluationResult",
    "Interpreter",
    "evaluate",
]
