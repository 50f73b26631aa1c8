# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

import pytest

from criteriamap import (
    STRING_NOT_EMPTY,
    STRING_NOT_NULL_NOT_EMPTY,
    CriteriaMap,
    CriteriaSettings,
    InvalidArgumentError,
    OptionalValue,
    TypeMismatchError,
)


@pytest.fixture
def criteria():
    return CriteriaMap.create()


def test_if_present_runs_action_for_present_key(criteria):
    values = []
    criteria.put("key1", "value1")
    assert criteria.if_present("key1", values.append) is True
    assert values == ["value1"]


def test_if_present_passes_stored_none(criteria):
    values = []
    criteria.put("key1", None)
    assert criteria.if_present("key1", values.append) is True
    assert values == [None]


def test_if_present_skips_unknown_key(criteria):
    values = []
    criteria.put("key1", "value1")
    assert criteria.if_present("unknownkey", values.append) is False
    assert values == []


def test_if_present_requires_action(criteria):
    criteria.put("key1", "value1")
    with pytest.raises(InvalidArgumentError):
        criteria.if_present("key1", None)


def test_if_present_without_predicate_tolerates_none_key(criteria):
    values = []
    criteria.put("key1", "value1")
    assert criteria.if_present(None, values.append) is False
    assert values == []


def test_if_present_with_predicate(criteria):
    values = []
    criteria.put("criteria1", "value1")

    assert criteria.if_present("criteria1", values.append, CriteriaMap.NULL) is False
    assert values == []

    assert criteria.if_has("criteria1", values.append, CriteriaMap.NOT_NULL) is True
    assert values == ["value1"]

    assert criteria.if_present("missing", values.append, CriteriaMap.NOT_NULL) is False


def test_if_present_with_predicate_requires_all_arguments(criteria):
    criteria.put("key", "value")
    with pytest.raises(InvalidArgumentError):
        criteria.if_present(None, print, CriteriaMap.NOT_NULL)
    with pytest.raises(InvalidArgumentError):
        criteria.if_present("key", None, CriteriaMap.NOT_NULL)
    with pytest.raises(InvalidArgumentError):
        criteria.if_present("key", print, None)


def test_if_present_narrows_to_expected_type(criteria):
    values = []
    criteria.put("count", 3)
    assert criteria.if_present("count", values.append, lambda v: v > 2, expected_type=int) is True
    with pytest.raises(TypeMismatchError):
        criteria.if_present("count", values.append, CriteriaMap.NOT_NULL, expected_type=str)
    assert values == [3]


def test_put_if_stores_when_all_predicates_pass(criteria):
    assert criteria.put_if("criteria1", object(), CriteriaMap.NOT_NULL) is True
    assert criteria.has("criteria1")

    assert (
        criteria.put_if(
            "k",
            "value1",
            CriteriaMap.NOT_NULL,
            STRING_NOT_EMPTY,
            lambda v: v.lower() == "VALUE1".lower(),
        )
        is True
    )
    assert criteria.has("k")


def test_put_if_rejects_when_a_predicate_fails(criteria):
    assert criteria.put_if("k2", object(), CriteriaMap.NULL) is False
    assert not criteria.has("k2")

    criteria.put("k3", "original")
    assert criteria.put_if("k3", "", STRING_NOT_NULL_NOT_EMPTY) is False
    assert criteria.get("k3") == "original"


def test_put_if_without_predicates_always_stores(criteria):
    assert criteria.put_if("k", None) is True
    assert criteria.has("k")


def test_put_if_rejects_none_predicates(criteria):
    with pytest.raises(InvalidArgumentError):
        criteria.put_if("key", "value", None)
    with pytest.raises(InvalidArgumentError):
        criteria.put_if("key", "value", CriteriaMap.NOT_NULL, None, CriteriaMap.NOT_NULL)
    assert criteria.is_empty()


def test_put_if_checks_all_predicates_before_evaluating(criteria):
    calls = []

    def failing(value):
        calls.append(value)
        return False

    with pytest.raises(InvalidArgumentError):
        criteria.put_if("key", "value", failing, None)
    assert calls == []


def test_put_if_does_not_catch_predicate_errors(criteria):
    def broken(value):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        criteria.put_if("key", "value", broken)


def test_put_if_logs_rejections_when_enabled(caplog):
    criteria = CriteriaMap.create(settings=CriteriaSettings(log_rejections=True))
    with caplog.at_level(logging.DEBUG, logger="criteriamap.container"):
        criteria.put_if("k", None, CriteriaMap.NOT_NULL)
    assert "put_if rejected value for key 'k'" in caplog.text


def test_put_all_if_stores_passing_entries_independently(criteria):
    stored = criteria.put_all_if(
        {"a": "x", "b": "", "c": None, "d": "y"},
        STRING_NOT_NULL_NOT_EMPTY,
    )
    assert stored == 2
    assert list(criteria.keys()) == ["a", "d"]


def test_put_all_if_overwrites_existing_keys(criteria):
    criteria.put("a", "old")
    criteria.put_all_if({"a": "new"}, CriteriaMap.NOT_NULL)
    assert criteria.get("a") == "new"


def test_put_all_if_validates_arguments(criteria):
    with pytest.raises(InvalidArgumentError):
        criteria.put_all_if(None, CriteriaMap.NOT_NULL)
    with pytest.raises(InvalidArgumentError):
        criteria.put_all_if({"a": 1}, CriteriaMap.NOT_NULL, None)
    with pytest.raises(InvalidArgumentError):
        criteria.put_all_if({"a": 1, None: 2}, CriteriaMap.NOT_NULL)
    assert criteria.is_empty()


def test_get_optional_present_for_stored_value(criteria):
    value = object()
    criteria.put("criteria1", value)
    result = criteria.get_optional("criteria1")
    assert result.is_present()
    assert result.get() is value


def test_get_optional_empty_for_stored_none_or_absent(criteria):
    criteria.put("k", None)
    assert criteria.get_optional("k").is_empty()
    assert criteria.get("k") is None
    assert criteria.has("k") is True
    assert criteria.get_optional("missing").is_empty()
    assert criteria.get_optional(None).is_empty()


def test_get_if_filters_on_predicates(criteria):
    criteria.put("criteria1", "value1")
    assert criteria.get_if("criteria1", CriteriaMap.NOT_NULL) == OptionalValue.of("value1")
    assert criteria.get_if("criteria1", CriteriaMap.NULL).is_empty()
    assert criteria.get_if("missing", CriteriaMap.NOT_NULL).is_empty()


def test_get_if_is_present_for_stored_none_when_predicates_pass(criteria):
    criteria.put("k", None)
    result = criteria.get_if("k", CriteriaMap.NULL)
    assert result.is_present()
    assert result.get() is None
    assert criteria.get_if("k").is_present()


def test_get_if_raises_on_none_key(criteria):
    with pytest.raises(InvalidArgumentError):
        criteria.get_if(None, CriteriaMap.NOT_NULL)


def test_get_if_checks_predicates_lazily(criteria):
    criteria.put("k", "value")
    # A None predicate after a failing one is never reached.
    assert criteria.get_if("k", CriteriaMap.NULL, None).is_empty()
    with pytest.raises(InvalidArgumentError):
        criteria.get_if("k", CriteriaMap.NOT_NULL, None)


def test_get_if_expected_type(criteria):
    criteria.put("name", "alice")
    criteria.put("nothing", None)
    assert criteria.get_if("name", expected_type=str).get() == "alice"
    assert criteria.get_if("nothing", expected_type=str).is_present()
    with pytest.raises(TypeMismatchError):
        criteria.get_if("name", CriteriaMap.NOT_NULL, expected_type=int)


def test_put_all_if_accepts_another_criteria_map(criteria):
    source = CriteriaMap.from_mapping({"a": "x", "b": None, "c": "z"})
    assert criteria.put_all_if(source, CriteriaMap.NOT_NULL) == 2
    assert list(criteria.keys()) == ["a", "c"]
