"""Test fixtures for the Redex test suite."""
import pytest
import sys
from pathlib import Path
from typing import Dict, Any, Callable, List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from redex.runtime.interpreter import Interpreter


@pytest.fixture
def sample_context() -> Dict[str, Any]:
    """Static host values injected as context."""
    return {
        "max_users": 100,
        "retry_count": 3,
        "base_price": 1000,
    }


@pytest.fixture
def resolver_calls() -> List[str]:
    """Names the lookup resolver was asked for, in call order."""
    return []


@pytest.fixture
def lookup_resolver(resolver_calls) -> Callable[[str, Dict[str, Any]], Optional[Any]]:
    """Resolver answering from a fixed table and recording every call."""
    table = {"y": 10, "z": 3, "user_discount": 50, "tax_rate": 14}

    def resolve(name, merged):
        resolver_calls.append(name)
        return table.get(name)

    return resolve


@pytest.fixture
def interpreter(sample_context, lookup_resolver) -> Interpreter:
    """Interpreter wired with sample context and lookup resolver."""
    return Interpreter(context=sample_context, resolver=lookup_resolver)


@pytest.fixture
def multi_line_source() -> str:
    """Three statement program with a trailing newline."""
    return "let a = 1\nlet b = 2\na + b\n"
