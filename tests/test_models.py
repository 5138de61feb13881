"""Unit tests for the Component, SortReport and SearchResult models."""

import dataclasses

import pytest

from tower_inventory.models import Component, SearchResult, SortOrder, SortReport


def test_component_fields():
    c = Component(name="Motor", category="propulsao", priority=5)
    assert c.name == "Motor"
    assert c.category == "propulsao"
    assert c.priority == 5


def test_component_to_dict():
    c = Component("Antena", "controle", 2)
    assert c.to_dict() == {"name": "Antena", "category": "controle", "priority": 2}


@pytest.mark.parametrize("priority", [1, 10])
def test_component_accepts_range_bounds(priority):
    assert Component("x", "y", priority).priority == priority


@pytest.mark.parametrize("priority", [0, 11, -3])
def test_component_rejects_out_of_range_priority(priority):
    with pytest.raises(ValueError, match="between 1 and 10"):
        Component("x", "y", priority)


@pytest.mark.parametrize("priority", ["5", 5.0, True, None])
def test_component_rejects_non_integer_priority(priority):
    with pytest.raises(ValueError, match="integer"):
        Component("x", "y", priority)


def test_duplicate_names_are_distinct_components():
    a = Component("Motor", "propulsao", 5)
    b = Component("motor", "suporte", 9)
    assert a != b


# ---- SortReport -----------------------------------------------------------


def test_sort_report_unpacks_to_comparisons_and_elapsed():
    report = SortReport(
        algorithm="bubble", order=SortOrder.BY_NAME, comparisons=7, elapsed_seconds=0.25
    )
    comparisons, elapsed = report
    assert comparisons == 7
    assert elapsed == 0.25


def test_sort_report_to_dict_uses_order_value():
    report = SortReport("selection", SortOrder.BY_PRIORITY, 3, 0.0)
    assert report.to_dict() == {
        "algorithm": "selection",
        "order": "priority",
        "comparisons": 3,
        "elapsed_seconds": 0.0,
    }


def test_sort_order_str():
    assert str(SortOrder.UNORDERED) == "unordered"
    assert str(SortOrder.BY_CATEGORY) == "category"


def test_search_result_fields():
    c = Component("Antena", "controle", 2)
    result = SearchResult(index=0, component=c, comparisons=2)
    assert result.index == 0
    assert result.component is c
    assert result.comparisons == 2


def test_component_is_immutable():
    c = Component("Motor", "propulsao", 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.priority = 99
    assert c.priority == 5
