import math

import pytest

from esdata.core.exceptions import InvalidCriteriaError
from esdata.query import Criteria, CriteriaEntry, OperationKey

from ._chains import mixed_chain, type_and_rate_chain


def test_where_starts_a_chain():
    criteria = Criteria.where("name")
    assert criteria.field == "name"
    assert criteria.entries == []
    assert math.isnan(criteria.boost)
    assert not criteria.is_or
    assert not criteria.is_negating
    assert criteria.criteria_chain == [criteria]


def test_and_shares_chain():
    first = Criteria.where("type").is_("hotel")
    second = first.and_("rate").less_than_equal(10)
    assert second is not first
    assert second.criteria_chain is first.criteria_chain
    assert [c.field for c in second.criteria_chain] == ["type", "rate"]
    assert not second.is_or


def test_or_marks_node():
    criteria = Criteria.where("type").is_("hotel").or_("name").is_("x")
    assert criteria.is_or
    assert not criteria.criteria_chain[0].is_or


def test_or_with_criteria_copies_node():
    other = Criteria.where("name").contains("spring").boost_by(2).not_()
    criteria = Criteria.where("type").is_("hotel").or_(other)
    assert criteria is not other
    assert criteria.is_or
    assert criteria.is_negating
    assert criteria.field == "name"
    assert criteria.boost == 2.0
    assert criteria.entries == other.entries
    assert len(criteria.criteria_chain) == 2
    assert len(other.criteria_chain) == 1


def test_and_with_criteria_appends_chain():
    other = Criteria.where("name").is_("x").and_("rate").is_(5)
    criteria = Criteria.where("type").is_("hotel").and_(other)
    assert [c.field for c in criteria.criteria_chain] == [
        "type",
        "name",
        "rate",
    ]


def test_and_with_criteria_of_same_chain_is_rejected():
    first = Criteria.where("x").is_(1)
    second = first.and_("y").is_(2)
    with pytest.raises(InvalidCriteriaError):
        second.and_(first)
    with pytest.raises(InvalidCriteriaError):
        first.and_(first)
    assert [c.field for c in first.criteria_chain] == ["x", "y"]


def test_and_with_criteria_does_not_alter_other_chain():
    other = Criteria.where("name").is_("x")
    Criteria.where("type").is_("hotel").and_(other)
    assert other.criteria_chain == [other]


def test_entries_keep_order():
    criteria = (
        Criteria.where("message").starts_with("some").ends_with("thing")
    )
    assert criteria.entries == [
        CriteriaEntry(key=OperationKey.STARTS_WITH, value="some"),
        CriteriaEntry(key=OperationKey.ENDS_WITH, value="thing"),
    ]


@pytest.mark.parametrize("method", ["contains", "starts_with", "ends_with"])
def test_wildcard_rejects_whitespace(method):
    with pytest.raises(InvalidCriteriaError):
        getattr(Criteria.where("message"), method)("some message")


def test_between_rejects_unbounded_range():
    with pytest.raises(InvalidCriteriaError):
        Criteria.where("rate").between(None, None)


def test_bound_helpers():
    criteria = (
        Criteria.where("rate").greater_than_equal(5).less_than_equal(10)
    )
    assert [e.value for e in criteria.entries] == [(5, None), (None, 10)]
    assert all(e.key is OperationKey.BETWEEN for e in criteria.entries)


@pytest.mark.parametrize("values", ["abc", b"abc", 5, {"a": 1}])
def test_in_rejects_non_collections(values):
    with pytest.raises(InvalidCriteriaError):
        Criteria.where("type").in_(values)


def test_in_materializes_iterable():
    criteria = Criteria.where("type").in_(v for v in ("a", "b"))
    assert criteria.entries[0].value == ["a", "b"]


def test_boost_rejects_negative():
    with pytest.raises(InvalidCriteriaError):
        Criteria.where("name").boost_by(-1)


def test_to_dict_reports_unset_boost_as_none():
    assert Criteria.where("name").is_("x").to_dict() == {
        "field": "name",
        "entries": [{"key": "equals", "value": "x"}],
        "boost": None,
        "or": False,
        "negating": False,
    }


def test_from_dict_builds_chain():
    data = [
        {"field": "type", "entries": [{"key": "equals", "value": "hotel"}]},
        {
            "field": "rate",
            "entries": [{"key": "between", "value": [None, 10]}],
            "boost": 1.5,
        },
        {
            "field": "name",
            "entries": [{"key": "contains", "value": "legacy"}],
            "negating": True,
        },
        {"field": "city", "entries": [{"key": "in", "value": ["a"]}], "or": True},
    ]
    criteria = Criteria.from_dict(data)
    assert criteria.field == "city"
    assert criteria.chain_to_list() == [
        {
            "field": "type",
            "entries": [{"key": "equals", "value": "hotel"}],
            "boost": None,
            "or": False,
            "negating": False,
        },
        {
            "field": "rate",
            "entries": [{"key": "between", "value": (None, 10)}],
            "boost": 1.5,
            "or": False,
            "negating": False,
        },
        {
            "field": "name",
            "entries": [{"key": "contains", "value": "legacy"}],
            "boost": None,
            "or": False,
            "negating": True,
        },
        {
            "field": "city",
            "entries": [{"key": "in", "value": ["a"]}],
            "boost": None,
            "or": True,
            "negating": False,
        },
    ]


def test_from_dict_accepts_single_node():
    criteria = Criteria.from_dict(
        {"field": "type", "entries": [{"key": "fuzzy", "value": "hotl"}]}
    )
    assert criteria.criteria_chain == [criteria]
    assert criteria.entries[0].key is OperationKey.FUZZY


@pytest.mark.parametrize(
    "data",
    [
        [],
        ["type"],
        {"field": "type", "entries": [{"key": "unknown", "value": 1}]},
        {"field": "type", "entries": [{"value": 1}]},
        {"field": "type", "entries": ["equals"]},
        {"field": "type", "entries": {"key": "equals"}},
        {"field": "type", "entries": [{"key": "in", "value": "abc"}]},
        {"field": "type", "entries": [{"key": "in", "value": 5}]},
        {"field": "rate", "entries": [{"key": "between", "value": 5}]},
        {"field": "rate", "entries": [{"key": "between", "value": [1]}]},
        {
            "field": "rate",
            "entries": [{"key": "between", "value": [None, None]}],
        },
        {
            "field": "name",
            "entries": [{"key": "contains", "value": "some message"}],
        },
        {
            "field": "name",
            "entries": [{"key": "starts_with", "value": "a b"}],
        },
        {
            "field": "name",
            "entries": [{"key": "equals", "value": "x"}],
            "boost": "high",
        },
    ],
)
def test_from_dict_rejects_bad_data(data):
    with pytest.raises(InvalidCriteriaError):
        Criteria.from_dict(data)


def test_str():
    criteria = type_and_rate_chain()
    assert str(criteria) == "rate between((None, 10))"
    assert str(mixed_chain().criteria_chain[3]) == "NOT name fuzzy(sprng)"


def test_from_dict_keeps_none_values():
    criteria = Criteria.from_dict(
        {"field": "rate", "entries": [{"key": "between", "value": None}]}
    )
    assert criteria.entries == [
        CriteriaEntry(key=OperationKey.BETWEEN, value=None)
    ]


def test_boost_rejects_non_numbers():
    with pytest.raises(InvalidCriteriaError):
        Criteria.where("name").boost_by("2")
