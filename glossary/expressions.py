"""
Filter expressions understood by the content API.

Expressions are built as small immutable values and only turned into the
store's wire syntax (``field[operator]value`` clauses joined by ``[and]``)
when a request is issued::

    And((Equals('category', 'security'), Contains('search_title', 'fire')))
    -> 'category[equals]security[and]search_title[contains]fire'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

AND_COMBINATOR = '[and]'

# Values are sent unescaped; a bracket would be read as an operator
RESERVED_CHARS = '[]'


def _check_value(value: str) -> None:
    if any(ch in value for ch in RESERVED_CHARS):
        raise ValueError(f"Filter value must not contain '[' or ']': {value!r}")


@dataclass(frozen=True)
class Equals:
    field: str
    value: str

    def __post_init__(self):
        _check_value(self.value)

    def to_wire(self) -> str:
        return f'{self.field}[equals]{self.value}'


@dataclass(frozen=True)
class Contains:
    field: str
    value: str

    def __post_init__(self):
        _check_value(self.value)

    def to_wire(self) -> str:
        return f'{self.field}[contains]{self.value}'


@dataclass(frozen=True)
class And:
    clauses: Tuple['Expression', ...] = ()

    def to_wire(self) -> Optional[str]:
        """Join clauses with ``[and]``; an empty conjunction has no wire form."""
        parts = [c.to_wire() for c in self.clauses]
        parts = [p for p in parts if p]
        if not parts:
            return None
        return AND_COMBINATOR.join(parts)

    def __len__(self) -> int:
        return len(self.clauses)


Expression = Union[Equals, Contains, And]


def to_wire(expression: Optional[Expression]) -> Optional[str]:
    """Serialise *expression* for the ``filters`` request parameter."""
    if expression is None:
        return None
    return expression.to_wire()
