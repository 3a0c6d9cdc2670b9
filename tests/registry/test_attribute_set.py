from __future__ import annotations

import logging

import numpy as np
import pytest

from tabschema.registry.attribute import Attribute
from tabschema.registry.attribute_set import AttributeSet
from tabschema.registry.domains import AttributeType
from tabschema.registry.errors import (
    AttributeIdOutOfRangeError,
    DuplicateAttributeNameError,
    InvalidDomainError,
    NoClassAttributeError,
    TypeMismatchError,
    UnknownAttributeNameError,
    UnknownValueError,
)


def _snapshot(aset: AttributeSet):
    return aset.attributes, aset.names(), len(aset)


def test_ids_follow_insertion_order(weather):
    names = ["outlook", "temperature", "windy", "play"]

    assert weather.num_attributes == len(names)
    assert len(weather) == len(names)
    for i, name in enumerate(names):
        attr = weather.get_attribute_by_id(i)
        assert attr.name == name
        assert attr.id == i
    assert [attr.name for attr in weather] == names
    assert weather.names() == names


def test_name_and_id_lookups_agree(weather):
    for attr in weather.attributes:
        by_name = weather.get_attribute_by_name(attr.name)
        assert by_name is weather.get_attribute_by_id(by_name.id)
        assert weather.get_attribute(attr.name) is weather.get_attribute(attr.id)


def test_add_attribute_returns_stored_attribute():
    aset = AttributeSet()
    attr = aset.add_attribute("color", AttributeType.NOMINAL, ["red", "green", "blue"])

    assert attr is aset.get_attribute_by_name("color")
    assert attr.id == 0


@pytest.mark.parametrize("attr_id", [-1, 4, 10])
def test_get_attribute_by_id_out_of_range(weather, attr_id):
    with pytest.raises(AttributeIdOutOfRangeError):
        weather.get_attribute_by_id(attr_id)
    with pytest.raises(IndexError):
        weather.get_attribute(attr_id)


def test_get_attribute_by_unknown_name(weather):
    with pytest.raises(UnknownAttributeNameError, match="humidity"):
        weather.get_attribute_by_name("humidity")


def test_nominal_value_lookups_through_set():
    aset = AttributeSet()
    aset.add_attribute("age", AttributeType.CONTINUOUS)
    aset.add_attribute("color", AttributeType.NOMINAL, ["red", "green", "blue"])

    assert aset.get_nominal_value_id("color", "green") == 1
    assert aset.get_nominal_value_id(1, "green") == 1
    assert aset.get_nominal_value_name("color", 1) == "green"

    with pytest.raises(UnknownValueError):
        aset.get_nominal_value_id("color", "purple")
    with pytest.raises(UnknownAttributeNameError):
        aset.get_nominal_value_id("shape", "round")
    with pytest.raises(AttributeIdOutOfRangeError):
        aset.get_nominal_value_id(5, "green")
    with pytest.raises(TypeMismatchError):
        aset.get_nominal_value_id("age", "10")


def test_duplicate_name_rejected_without_mutation(weather):
    before = _snapshot(weather)

    with pytest.raises(DuplicateAttributeNameError):
        weather.add_attribute("windy", AttributeType.CONTINUOUS)
    with pytest.raises(DuplicateAttributeNameError):
        weather.add_attribute(Attribute.continuous("windy", 4))

    assert _snapshot(weather) == before
    assert weather.get_attribute_by_name("windy").is_nominal


def test_duplicate_x_keeps_first():
    aset = AttributeSet()
    first = aset.add_attribute("x", AttributeType.CONTINUOUS)

    with pytest.raises(DuplicateAttributeNameError):
        aset.add_attribute("x", AttributeType.NOMINAL, ["a"])

    assert aset.num_attributes == 1
    assert aset.get_attribute_by_name("x") is first


def test_invalid_domain_leaves_set_unchanged(weather):
    before = _snapshot(weather)

    with pytest.raises(InvalidDomainError):
        weather.add_attribute("humidity", AttributeType.CONTINUOUS, ["high"])

    assert _snapshot(weather) == before
    assert not weather.contains("humidity")


def test_add_attribute_requires_type():
    with pytest.raises(TypeError):
        AttributeSet().add_attribute("x")


def test_add_prebuilt_attribute_is_indexed_by_position():
    aset = AttributeSet()
    aset.add_attribute("a", AttributeType.CONTINUOUS)
    prebuilt = Attribute.nominal("b", 1, ["u", "v"])

    stored = aset.add_attribute(prebuilt)

    assert stored is prebuilt
    assert aset.get_attribute_by_id(1) is prebuilt
    assert aset.get_attribute_by_name("b") is prebuilt
    assert aset.get_nominal_value_id("b", "v") == 1


def test_prebuilt_attribute_with_stale_id(caplog):
    aset = AttributeSet()
    stale = Attribute.continuous("late", 7)

    with caplog.at_level(logging.WARNING, logger="tabschema.registry.attribute_set"):
        aset.add_attribute(stale)

    assert aset.get_attribute_by_id(0) is stale
    assert aset.get_attribute_by_name("late") is stale
    with pytest.raises(AttributeIdOutOfRangeError):
        aset.get_attribute_by_id(7)
    assert "claims id 7" in caplog.text


def test_prebuilt_attribute_rejects_extra_arguments():
    with pytest.raises(TypeError):
        AttributeSet().add_attribute(Attribute.continuous("a", 0), AttributeType.CONTINUOUS)


def test_class_attribute(weather):
    assert not weather.has_class()
    with pytest.raises(NoClassAttributeError):
        weather.class_attr_id
    with pytest.raises(NoClassAttributeError):
        weather.class_attr_name

    weather.set_class("play")
    assert weather.has_class()
    assert weather.class_attr_name == "play"
    assert weather.class_attr_id == 3
    assert weather.class_attribute is weather.get_attribute_by_name("play")

    weather.set_class("outlook")
    assert weather.class_attr_name == "outlook"
    assert weather.class_attr_id == 0


def test_set_class_unknown_name_keeps_designation(weather):
    weather.set_class("play")

    with pytest.raises(UnknownAttributeNameError):
        weather.set_class("age")

    assert weather.class_attr_name == "play"


def test_set_class_on_age():
    aset = AttributeSet()
    aset.add_attribute("age", AttributeType.CONTINUOUS)
    aset.set_class("age")

    assert aset.class_attr_name == "age"


def test_feature_attributes(weather):
    assert [a.name for a in weather.feature_attributes()] == [
        "outlook", "temperature", "windy", "play"
    ]
    weather.set_class("windy")
    assert [a.name for a in weather.feature_attributes()] == [
        "outlook", "temperature", "play"
    ]


def test_contains_is_append_only():
    aset = AttributeSet()
    assert not aset.contains("a")

    aset.add_attribute("a", AttributeType.CONTINUOUS)
    assert aset.contains("a")
    assert "a" in aset

    for i in range(5):
        aset.add_attribute(f"b{i}", AttributeType.NOMINAL, ["x"])
    aset.set_class("b3")
    assert aset.contains("a")
    assert not aset.contains(["unhashable"])


def test_interleaved_adds_keep_returned_ids_valid():
    aset = AttributeSet()
    first = aset.add_attribute("a", AttributeType.CONTINUOUS)
    assert aset.get_attribute_by_id(first.id) is first

    second = aset.add_attribute("b", AttributeType.NOMINAL, ["y", "n"])
    assert aset.get_attribute_by_id(first.id) is first
    assert aset.get_attribute_by_id(second.id) is second


def test_attributes_snapshot_is_read_only(weather):
    snapshot = weather.attributes

    assert isinstance(snapshot, tuple)
    weather.add_attribute("humidity", AttributeType.CONTINUOUS)
    assert len(snapshot) == 4
    assert weather.num_attributes == 5


def test_single_string_values_rejected_without_mutation(weather):
    before = _snapshot(weather)

    with pytest.raises(InvalidDomainError):
        weather.add_attribute("color", AttributeType.NOMINAL, "red")

    assert _snapshot(weather) == before
    assert not weather.contains("color")


@pytest.mark.parametrize("attr_id", [True, False, 1.5, 1.0, "1"])
def test_get_attribute_by_id_requires_integer(weather, attr_id):
    with pytest.raises(TypeError):
        weather.get_attribute_by_id(attr_id)


def test_get_attribute_by_id_accepts_numpy_integers(weather):
    assert weather.get_attribute_by_id(np.int64(2)).name == "windy"
