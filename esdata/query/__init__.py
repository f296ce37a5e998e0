from ._compiler import CriteriaCompiler
from ._converter import QueryConverter
from ._criteria import Criteria
from ._models import (
    BoolQuery,
    BoostableQuery,
    CriteriaEntry,
    FieldQuery,
    FuzzyQuery,
    OperationKey,
    QueryExpression,
    QueryStringQuery,
    RangeQuery,
    RawQuery,
    SortDirection,
    SortField,
)
from ._search_query import CriteriaQuery

__all__ = [
    "BoolQuery",
    "BoostableQuery",
    "Criteria",
    "CriteriaCompiler",
    "CriteriaEntry",
    "CriteriaQuery",
    "FieldQuery",
    "FuzzyQuery",
    "OperationKey",
    "QueryConverter",
    "QueryExpression",
    "QueryStringQuery",
    "RangeQuery",
    "RawQuery",
    "SortDirection",
    "SortField",
]
