from __future__ import annotations

from typing import Any

from esdata.core.exceptions import BadRequestError

from ._compiler import CriteriaCompiler
from ._models import (
    BoolQuery,
    FieldQuery,
    FuzzyQuery,
    QueryExpression,
    QueryStringQuery,
    RangeQuery,
    RawQuery,
    SortDirection,
    SortField,
)
from ._search_query import CriteriaQuery


class QueryConverter:
    """Renders query expressions into Elasticsearch query DSL."""

    compiler: CriteriaCompiler

    def __init__(self, compiler: CriteriaCompiler | None = None) -> None:
        self.compiler = compiler if compiler is not None else CriteriaCompiler()

    def convert_search(self, query: CriteriaQuery) -> dict:
        args: dict = {}
        if query.indices:
            args["index"] = ",".join(query.indices)
        expr = self.compiler.compile(query.criteria)
        if expr is not None:
            args["query"] = self.convert_expr(expr)
        if query.filter is not None:
            args["post_filter"] = self.convert_expr(query.filter)
        if query.fields:
            args["source"] = list(query.fields)
        if query.sort:
            args["sort"] = self.convert_sort(query.sort)
        if query.min_score is not None:
            args["min_score"] = query.min_score
        return args

    def convert_sort(self, sort: list[SortField]) -> list:
        args: list = []
        for term in sort:
            direction = (
                "desc" if term.direction == SortDirection.DESC else "asc"
            )
            args.append({term.field: {"order": direction}})
        return args

    def convert_expr(self, expr: QueryExpression | None) -> Any:
        if expr is None:
            return None
        if isinstance(expr, FieldQuery):
            return self.convert_field_query(expr)
        if isinstance(expr, QueryStringQuery):
            return self.convert_query_string(expr)
        if isinstance(expr, RangeQuery):
            return self.convert_range(expr)
        if isinstance(expr, FuzzyQuery):
            return self.convert_fuzzy(expr)
        if isinstance(expr, BoolQuery):
            return self.convert_bool(expr)
        if isinstance(expr, RawQuery):
            return expr.body
        raise BadRequestError(f"Expression {expr!r} not supported")

    def convert_field_query(self, expr: FieldQuery) -> dict[str, Any]:
        # query_string scoped by default_field replaces the old field query
        args: dict[str, Any] = {
            "query": self.convert_value(expr.value),
            "default_field": expr.field,
        }
        if expr.analyze_wildcard is not None:
            args["analyze_wildcard"] = expr.analyze_wildcard
        self._set_boost(args, expr.boost)
        return {"query_string": args}

    def convert_query_string(self, expr: QueryStringQuery) -> dict[str, Any]:
        args: dict[str, Any] = {"query": expr.query}
        if expr.field is not None:
            args["fields"] = [expr.field]
        self._set_boost(args, expr.boost)
        return {"query_string": args}

    def convert_range(self, expr: RangeQuery) -> dict[str, Any]:
        args: dict[str, Any] = {}
        if expr.from_ is not None:
            args["gte" if expr.include_lower else "gt"] = expr.from_
        if expr.to is not None:
            args["lte" if expr.include_upper else "lt"] = expr.to
        self._set_boost(args, expr.boost)
        return {"range": {expr.field: args}}

    def convert_fuzzy(self, expr: FuzzyQuery) -> dict[str, Any]:
        args: dict[str, Any] = {"value": expr.value}
        self._set_boost(args, expr.boost)
        return {"fuzzy": {expr.field: args}}

    def convert_bool(self, expr: BoolQuery) -> dict[str, Any]:
        args: dict[str, Any] = {}
        if expr.should:
            args["should"] = [self.convert_expr(e) for e in expr.should]
        if expr.must_not:
            args["must_not"] = [self.convert_expr(e) for e in expr.must_not]
        if expr.must:
            args["must"] = [self.convert_expr(e) for e in expr.must]
        self._set_boost(args, expr.boost)
        return {"bool": args}

    def convert_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return value
        return str(value)

    def _set_boost(self, args: dict[str, Any], boost: float | None) -> None:
        if boost is not None:
            args["boost"] = boost
