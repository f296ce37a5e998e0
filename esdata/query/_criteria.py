from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from esdata.core.exceptions import InvalidCriteriaError

from ._models import CriteriaEntry, OperationKey


class Criteria:
    """Node in a chain of filter criteria.

    Every node created from another node through ``and_`` or ``or_``
    shares its ``criteria_chain``, so any node of a chain can be handed
    to the compiler.

    Attributes:
        field: Field name.
        entries: Operation entries on the field, AND-ed together.
        boost: Relevance boost. NaN when unset.
        is_or: Node combines with the chain as OR.
        is_negating: Node combines with the chain as NOT.
        criteria_chain: All nodes of the chain in insertion order.
    """

    field: str | None
    entries: list[CriteriaEntry]
    boost: float
    is_or: bool
    is_negating: bool
    criteria_chain: list[Criteria]

    def __init__(
        self,
        field: str | None = None,
        criteria_chain: list[Criteria] | None = None,
        is_or: bool = False,
    ):
        self.field = field
        self.entries = []
        self.boost = math.nan
        self.is_or = is_or
        self.is_negating = False
        self.criteria_chain = (
            criteria_chain if criteria_chain is not None else []
        )
        self.criteria_chain.append(self)

    @staticmethod
    def where(field: str) -> Criteria:
        return Criteria(field=field)

    def and_(self, other: str | Criteria) -> Criteria:
        if isinstance(other, Criteria):
            if other.criteria_chain is self.criteria_chain:
                raise InvalidCriteriaError(
                    "Criteria is already part of this chain"
                )
            self.criteria_chain.extend(list(other.criteria_chain))
            return self
        return Criteria(field=other, criteria_chain=self.criteria_chain)

    def or_(self, other: str | Criteria) -> Criteria:
        if isinstance(other, Criteria):
            node = Criteria(
                field=other.field,
                criteria_chain=self.criteria_chain,
                is_or=True,
            )
            node.entries.extend(e.model_copy() for e in other.entries)
            node.boost = other.boost
            node.is_negating = other.is_negating
            return node
        return Criteria(
            field=other, criteria_chain=self.criteria_chain, is_or=True
        )

    def is_(self, value: Any) -> Criteria:
        return self._add(OperationKey.EQUALS, value)

    def contains(self, value: str) -> Criteria:
        self._check_no_whitespace(value)
        return self._add(OperationKey.CONTAINS, value)

    def starts_with(self, value: str) -> Criteria:
        self._check_no_whitespace(value)
        return self._add(OperationKey.STARTS_WITH, value)

    def ends_with(self, value: str) -> Criteria:
        self._check_no_whitespace(value)
        return self._add(OperationKey.ENDS_WITH, value)

    def expression(self, value: str) -> Criteria:
        return self._add(OperationKey.EXPRESSION, value)

    def between(self, lower: Any, upper: Any) -> Criteria:
        if lower is None and upper is None:
            raise InvalidCriteriaError("Range [* TO *] is not allowed")
        return self._add(OperationKey.BETWEEN, (lower, upper))

    def less_than_equal(self, upper: Any) -> Criteria:
        if upper is None:
            raise InvalidCriteriaError("Upper bound must not be None")
        return self._add(OperationKey.BETWEEN, (None, upper))

    def greater_than_equal(self, lower: Any) -> Criteria:
        if lower is None:
            raise InvalidCriteriaError("Lower bound must not be None")
        return self._add(OperationKey.BETWEEN, (lower, None))

    def fuzzy(self, value: str) -> Criteria:
        return self._add(OperationKey.FUZZY, value)

    def in_(self, values: Iterable[Any]) -> Criteria:
        if isinstance(values, (str, bytes, dict)) or not isinstance(
            values, Iterable
        ):
            raise InvalidCriteriaError(
                f"IN expects a collection of values, got {values!r}"
            )
        return self._add(OperationKey.IN, list(values))

    def not_(self) -> Criteria:
        self.is_negating = True
        return self

    def boost_by(self, boost: float) -> Criteria:
        if isinstance(boost, bool) or not isinstance(boost, (int, float)):
            raise InvalidCriteriaError(
                f"Boost must be a number, got {boost!r}"
            )
        if boost < 0:
            raise InvalidCriteriaError("Boost must not be negative")
        self.boost = float(boost)
        return self

    def has_boost(self) -> bool:
        return not math.isnan(self.boost)

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "entries": [
                {"key": e.key.value, "value": e.value} for e in self.entries
            ],
            "boost": self.boost if self.has_boost() else None,
            "or": self.is_or,
            "negating": self.is_negating,
        }

    def chain_to_list(self) -> list[dict[str, Any]]:
        return [node.to_dict() for node in self.criteria_chain]

    @staticmethod
    def from_dict(obj: dict | list[dict]) -> Criteria:
        """Build a chain from plain data.

        Accepts one node dict or a list of node dicts. Each node dict
        takes ``field``, ``entries`` (a list of ``{key, value}``),
        ``boost``, ``or`` and ``negating``. The last node of the
        chain is returned.
        """
        nodes = obj if isinstance(obj, list) else [obj]
        if len(nodes) == 0:
            raise InvalidCriteriaError("Criteria chain must not be empty")
        chain: list[Criteria] = []
        criteria = None
        for node in nodes:
            if not isinstance(node, dict):
                raise InvalidCriteriaError(
                    f"Criteria node must be a mapping, got {node!r}"
                )
            criteria = Criteria(
                field=node.get("field"),
                criteria_chain=chain,
                is_or=bool(node.get("or", False)),
            )
            entries = node.get("entries") or []
            if not isinstance(entries, list):
                raise InvalidCriteriaError(
                    f"Criteria entries must be a list, got {entries!r}"
                )
            for entry in entries:
                criteria._add_entry(entry)
            if node.get("boost") is not None:
                criteria.boost_by(node["boost"])
            if node.get("negating", False):
                criteria.not_()
        return criteria

    def _add_entry(self, entry: Any) -> Criteria:
        try:
            key = OperationKey(entry["key"])
        except (KeyError, ValueError, TypeError):
            raise InvalidCriteriaError(
                f"Criteria entry {entry!r} has no valid key"
            )
        value = entry.get("value")
        if value is None:
            # no constraint for this operation
            return self._add(key, None)
        if key is OperationKey.EQUALS:
            return self.is_(value)
        if key is OperationKey.CONTAINS:
            return self.contains(value)
        if key is OperationKey.STARTS_WITH:
            return self.starts_with(value)
        if key is OperationKey.ENDS_WITH:
            return self.ends_with(value)
        if key is OperationKey.EXPRESSION:
            return self.expression(value)
        if key is OperationKey.FUZZY:
            return self.fuzzy(value)
        if key is OperationKey.IN:
            return self.in_(value)
        if key is OperationKey.BETWEEN:
            if not isinstance(value, (list, tuple)) or len(value) != 2:
                raise InvalidCriteriaError(
                    f"BETWEEN expects [lower, upper], got {value!r}"
                )
            return self.between(value[0], value[1])
        raise InvalidCriteriaError(f"Operation {key} not supported")

    def _add(self, key: OperationKey, value: Any) -> Criteria:
        self.entries.append(CriteriaEntry(key=key, value=value))
        return self

    @staticmethod
    def _check_no_whitespace(value: Any) -> None:
        if isinstance(value, str) and any(c.isspace() for c in value):
            raise InvalidCriteriaError(
                f"Cannot construct query '{value}'. "
                "Use expression or multiple clauses instead."
            )

    def __repr__(self) -> str:
        return (
            f"Criteria(field={self.field!r}, entries={self.entries!r}, "
            f"boost={self.boost!r}, is_or={self.is_or!r}, "
            f"is_negating={self.is_negating!r})"
        )

    def __str__(self) -> str:
        prefix = "OR " if self.is_or else ""
        if self.is_negating:
            prefix = f"{prefix}NOT "
        entries = " AND ".join(str(e) for e in self.entries)
        return f"{prefix}{self.field} {entries}"
