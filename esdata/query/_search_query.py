from __future__ import annotations

from typing import Any

from esdata.core.data_model import DataModel
from esdata.core.exceptions import BadRequestError

from ._criteria import Criteria
from ._models import QueryExpression, RawQuery, SortDirection, SortField


class CriteriaQuery(DataModel):
    """Search request built around a criteria chain.

    Attributes:
        criteria: Criteria chain compiled into the query.
        filter: Filter applied after scoring.
        fields: Source fields to return.
        sort: Sort fields.
        min_score: Minimum score of returned documents.
        indices: Target indices.
    """

    criteria: Criteria | None = None
    filter: QueryExpression | None = None
    fields: list[str] = []
    sort: list[SortField] = []
    min_score: float | None = None
    indices: list[str] = []

    def with_filter(
        self, filter: QueryExpression | dict[str, Any]
    ) -> CriteriaQuery:
        if isinstance(filter, dict):
            filter = RawQuery(body=filter)
        self.filter = filter
        return self

    def with_fields(self, *fields: str) -> CriteriaQuery:
        self.fields.extend(fields)
        return self

    def with_sort(
        self,
        field: str,
        direction: SortDirection | str = SortDirection.ASC,
    ) -> CriteriaQuery:
        self.sort.append(
            SortField(field=field, direction=SortDirection(direction))
        )
        return self

    def with_min_score(self, min_score: float) -> CriteriaQuery:
        if min_score < 0:
            raise BadRequestError("Min score must not be negative")
        self.min_score = min_score
        return self

    def with_indices(self, *indices: str) -> CriteriaQuery:
        self.indices.extend(indices)
        return self
