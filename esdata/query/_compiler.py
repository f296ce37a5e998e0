from __future__ import annotations

import math
from typing import Any, Callable

from esdata.core._log_helper import debug
from esdata.core.config import CompilerConfig
from esdata.core.exceptions import BadRequestError, InvalidFieldError

from ._criteria import Criteria
from ._models import (
    BoolQuery,
    BoostableQuery,
    FieldQuery,
    FuzzyQuery,
    OperationKey,
    QueryExpression,
    QueryStringQuery,
    RangeQuery,
)


class CriteriaCompiler:
    """Compiles a criteria chain into a bool query.

    Each node of the chain becomes one fragment. OR nodes land in
    ``should``, negating nodes in ``must_not`` and all others in ``must``.
    The compiler keeps no state between calls and never mutates the
    chain it is given.
    """

    config: CompilerConfig
    field_resolver: Callable[[str], str] | None

    def __init__(
        self,
        config: dict | CompilerConfig | None = None,
        field_resolver: Callable[[str], str] | None = None,
    ):
        """Initialize.

        Args:
            config:
                Compiler config.
            field_resolver:
                Maps a criteria field name to the document field name.
                Applied after the configured field aliases.
        """
        self.config = CompilerConfig.parse(config)
        self.field_resolver = field_resolver

    def compile(self, criteria: Criteria | None) -> QueryExpression | None:
        if criteria is None or len(criteria.entries) == 0:
            return None

        should: list[QueryExpression] = []
        must_not: list[QueryExpression] = []
        must: list[QueryExpression] = []
        for node in criteria.criteria_chain:
            fragment = self.compile_fragment(node)
            if fragment is None:
                debug("Criteria on %s contributes no clause", node.field)
                continue
            if node.is_or:
                should.append(fragment)
            elif node.is_negating:
                must_not.append(fragment)
            else:
                must.append(fragment)

        if not should and not must_not and not must:
            return None

        query = self._new_bool_query()
        for expr in should:
            query.add_should(expr)
        for expr in must_not:
            query.add_must_not(expr)
        for expr in must:
            query.add_must(expr)
        debug(
            "Compiled %d should, %d must_not, %d must clauses",
            len(should),
            len(must_not),
            len(must),
        )
        return query

    def compile_fragment(self, criteria: Criteria) -> QueryExpression | None:
        if len(criteria.entries) == 0:
            return None

        field = self.resolve_field(criteria.field)
        query: QueryExpression | None
        if len(criteria.entries) == 1:
            entry = criteria.entries[0]
            query = self.compile_entry(entry.key, entry.value, field)
        else:
            leaves = []
            for entry in criteria.entries:
                leaf = self.compile_entry(entry.key, entry.value, field)
                if leaf is not None:
                    leaves.append(leaf)
            query = BoolQuery(must=leaves) if leaves else None

        if query is None:
            return None
        return self._add_boost(query, criteria.boost)

    def compile_entry(
        self, key: OperationKey, value: Any, field: str
    ) -> QueryExpression | None:
        if value is None:
            return None

        if key is OperationKey.EQUALS:
            return FieldQuery(field=field, value=value)
        if key is OperationKey.CONTAINS:
            return FieldQuery(
                field=field,
                value=f"*{value}*",
                analyze_wildcard=self.config.analyze_wildcard,
            )
        if key is OperationKey.STARTS_WITH:
            return FieldQuery(
                field=field,
                value=f"{value}*",
                analyze_wildcard=self.config.analyze_wildcard,
            )
        if key is OperationKey.ENDS_WITH:
            return FieldQuery(
                field=field,
                value=f"*{value}",
                analyze_wildcard=self.config.analyze_wildcard,
            )
        if key is OperationKey.EXPRESSION:
            return QueryStringQuery(query=str(value), field=field)
        if key is OperationKey.BETWEEN:
            # open range on a None bound
            return RangeQuery(field=field, from_=value[0], to=value[1])
        if key is OperationKey.FUZZY:
            return FuzzyQuery(field=field, value=str(value))
        if key is OperationKey.IN:
            query = BoolQuery()
            for item in value:
                query.add_should(FieldQuery(field=field, value=item))
            return query
        raise BadRequestError(f"Operation {key} not supported")

    def resolve_field(self, field: str | None) -> str:
        if field is None:
            raise InvalidFieldError("Unknown field")
        resolved = self.config.field_aliases.get(field, field)
        if self.field_resolver is not None:
            resolved = self.field_resolver(resolved)
        if not resolved:
            raise InvalidFieldError(f"Field {field!r} resolves to no name")
        return resolved

    def _add_boost(
        self, query: QueryExpression, boost: float
    ) -> QueryExpression:
        if math.isnan(boost):
            return query
        if isinstance(query, BoostableQuery):
            return query.with_boost(boost)
        debug("Boost %s ignored on %s", boost, type(query).__name__)
        return query

    def _new_bool_query(self) -> BoolQuery:
        return BoolQuery()
