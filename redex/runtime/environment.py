"""
Redex Runtime Environment

The environment is owned by exactly one evaluation call. It accumulates
script bindings statement by statement and tracks which names are const and
where every visible value came from.

Key classes:
- Provenance: Origin of a binding (script, context, resolver)
- Environment: Script bindings, const set and provenance map
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Any, Mapping, Optional, Set, Union

Number = Union[int, float]


class Provenance(str, Enum):
    SCRIPT = "script"
    CONTEXT = "context"
    RESOLVER = "resolver"


def is_numeric(value: Any) -> bool:
    """True for int and float values; bool is not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Environment:
    """
    Mutable script environment for a single evaluation pass.

    Script bindings always win over context and resolver values: once a name
    is bound here it stays authoritative for the rest of the pass.
    """

    def __init__(self, bindings: Optional[Mapping[str, Number]] = None):
        self.bindings: Dict[str, Number] = dict(bindings or {})
        self.const_names: Set[str] = set()
        self.provenance: Dict[str, Provenance] = {
            name: Provenance.SCRIPT for name in self.bindings
        }

    def __contains__(self, name: str) -> bool:
        return name in self.bindings

    def get(self, name: str) -> Optional[Number]:
        """Get a script binding."""
        return self.bindings.get(name)

    def is_const(self, name: str) -> bool:
        return name in self.const_names

    def declare(self, name: str, value: Number, const: bool = False) -> None:
        """Bind a name from a script declaration."""
        self.bindings[name] = value
        self.provenance[name] = Provenance.SCRIPT
        if const:
            self.const_names.add(name)

    def record(self, name: str, origin: Provenance) -> None:
        """Record where a name's value came from, keeping any earlier record."""
        self.provenance.setdefault(name, origin)

    def merged_view(self, context: Mapping[str, Number]) -> Dict[str, Number]:
        """Context overlaid by the current script bindings."""
        view = dict(context)
        view.update(self.bindings)
        return view

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict copies of bindings and provenance."""
        return {
            "env": dict(self.bindings),
            "provenance": {name: origin.value for name, origin in self.provenance.items()},
        }
