from __future__ import annotations

import json
from enum import Enum
from typing import Any, Union

from esdata.core.data_model import DataModel


def _str_value(value: Any) -> str:
    if value is None:
        return "*"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _str_boost(boost: float | None) -> str:
    if boost is None:
        return ""
    return f"^{boost}"


class OperationKey(str, Enum):
    """Criteria operation key.

    Attributes:
        EQUALS: Field equals value.
        CONTAINS: Field contains value.
        STARTS_WITH: Field starts with value.
        ENDS_WITH: Field ends with value.
        EXPRESSION: Query string expression scoped to field.
        BETWEEN: Field within [from, to].
        FUZZY: Field fuzzy matches value.
        IN: Field equals any of the values.
    """

    EQUALS = "equals"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    EXPRESSION = "expression"
    BETWEEN = "between"
    FUZZY = "fuzzy"
    IN = "in"


class CriteriaEntry(DataModel):
    """Criteria entry.

    Attributes:
        key: Operation key.
        value:
            Operation value. A pair for BETWEEN,
            an iterable for IN, a scalar otherwise.
    """

    key: OperationKey
    value: Any = None

    def __str__(self) -> str:
        return f"{self.key.value}({_str_value(self.value)})"


class BoostableQuery(DataModel):
    """Query fragment that accepts a relevance boost.

    Attributes:
        boost: Boost.
    """

    boost: float | None = None

    def with_boost(self, boost: float) -> Any:
        return self.model_copy(update={"boost": boost})


class FieldQuery(BoostableQuery):
    """Field query.

    Attributes:
        field: Field name.
        value: Match value. May carry * wildcards.
        analyze_wildcard: Analyze wildcard terms.
    """

    field: str
    value: Any
    analyze_wildcard: bool | None = None

    def __str__(self) -> str:
        return f"{self.field}:{_str_value(self.value)}{_str_boost(self.boost)}"


class QueryStringQuery(BoostableQuery):
    """Query string query.

    Attributes:
        query: Query string.
        field: Field the query is scoped to.
    """

    query: str
    field: str | None = None

    def __str__(self) -> str:
        if self.field is None:
            return f"({self.query}){_str_boost(self.boost)}"
        return f"{self.field}:({self.query}){_str_boost(self.boost)}"


class RangeQuery(BoostableQuery):
    """Range query.

    A None bound leaves that side of the range open.

    Attributes:
        field: Field name.
        from_: Lower bound.
        to: Upper bound.
        include_lower: Lower bound is inclusive.
        include_upper: Upper bound is inclusive.
    """

    field: str
    from_: Any = None
    to: Any = None
    include_lower: bool = True
    include_upper: bool = True

    def __str__(self) -> str:
        lbracket = "[" if self.include_lower else "{"
        rbracket = "]" if self.include_upper else "}"
        return (
            f"{self.field}:{lbracket}{_str_value(self.from_)} TO "
            f"{_str_value(self.to)}{rbracket}{_str_boost(self.boost)}"
        )


class FuzzyQuery(BoostableQuery):
    """Fuzzy query.

    Attributes:
        field: Field name.
        value: Value to match within edit distance.
    """

    field: str
    value: str

    def __str__(self) -> str:
        return f"{self.field}:{self.value}~{_str_boost(self.boost)}"


class BoolQuery(BoostableQuery):
    """Bool query.

    Attributes:
        should: Clauses of which any may match.
        must_not: Clauses that must not match.
        must: Clauses that must match.
    """

    should: list[QueryExpression] = []
    must_not: list[QueryExpression] = []
    must: list[QueryExpression] = []

    def add_should(self, expr: QueryExpression) -> BoolQuery:
        self.should.append(expr)
        return self

    def add_must_not(self, expr: QueryExpression) -> BoolQuery:
        self.must_not.append(expr)
        return self

    def add_must(self, expr: QueryExpression) -> BoolQuery:
        self.must.append(expr)
        return self

    def __str__(self) -> str:
        terms = [str(e) for e in self.should]
        terms.extend(f"-{e}" for e in self.must_not)
        terms.extend(f"+{e}" for e in self.must)
        return f"({' '.join(terms)}){_str_boost(self.boost)}"


class RawQuery(DataModel):
    """Native query DSL passed through unchanged.

    Attributes:
        body: Query DSL.
    """

    body: dict[str, Any]

    def __str__(self) -> str:
        return json.dumps(self.body)


class SortDirection(str, Enum):
    """Sort direction.

    Attributes:
        ASC: Ascending.
        DESC: Descending.
    """

    ASC = "asc"
    DESC = "desc"


class SortField(DataModel):
    """Sort field.

    Attributes:
        field: Field name.
        direction: Sort direction.
    """

    field: str
    direction: SortDirection = SortDirection.ASC

    def __str__(self) -> str:
        return f"{self.field} {self.direction.value}"


QueryExpression = Union[
    FieldQuery,
    QueryStringQuery,
    RangeQuery,
    FuzzyQuery,
    BoolQuery,
    RawQuery,
]

BoolQuery.model_rebuild()
