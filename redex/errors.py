"""
Redex Error Model

Every failure raised by the pipeline is one of three kinds:
- RedexSyntaxError: malformed source, raised while parsing
- RedexNameError: an identifier no source (script, context, resolver) could supply
- EvaluationError: arithmetic, type and const faults, bad context or resolver values

None of them is recovered inside the core; the first fault aborts the call.
"""

from __future__ import annotations


class RedexError(Exception):
    """Base class for all Redex failures."""

    kind = "RedexError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.kind, "message": self.message}


class RedexSyntaxError(RedexError):
    """Malformed source text."""

    kind = "SyntaxError"


class RedexNameError(RedexError):
    """Identifier resolution exhausted script, context and resolver."""

    kind = "NameError"


class EvaluationError(RedexError):
    """Runtime fault: division by zero, non-numeric values, const reassignment."""

    kind = "EvaluationError"
