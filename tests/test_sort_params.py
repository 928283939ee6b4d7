import pytest

from src.pageable.core.enums import Direction
from src.pageable.services.sort_params import parse_sort_param, parse_sort_params


def _pairs(orders):
    return [(o.property, o.direction) for o in orders]


def test_single_property_defaults_to_asc():
    assert _pairs(parse_sort_param("name")) == [("name", Direction.ASC)]


def test_trailing_direction_applies_to_all_properties():
    assert _pairs(parse_sort_param("created_on,status,DESC")) == [
        ("created_on", Direction.DESC),
        ("status", Direction.DESC),
    ]


def test_blank_tokens_are_ignored():
    assert _pairs(parse_sort_param(" name , ,desc ")) == [("name", Direction.DESC)]


@pytest.mark.parametrize("raw", ["", " , ", "asc"])
def test_no_properties_gives_nothing(raw):
    assert parse_sort_param(raw) == []


def test_several_params_fold_in_order():
    sort = parse_sort_params(["created_on,status", "name,desc"])

    assert _pairs(sort.orders) == [
        ("created_on", Direction.ASC),
        ("status", Direction.ASC),
        ("name", Direction.DESC),
    ]


def test_none_gives_unsorted():
    assert not parse_sort_params(None).is_sorted()
