from __future__ import annotations

import json

import pytest

from samla.errors import MalformedPayloadError
from samla.models import (
    AppPaths,
    Bag,
    BagInfo,
    Box,
    Manufacturer,
    Product,
    ScanResult,
    SetDetails,
    SetSearchResult,
    StorageLocation,
    Tag,
    Type,
    convert_values,
)

ALL_SHAPES = [
    AppPaths,
    Bag,
    BagInfo,
    Box,
    Manufacturer,
    Product,
    ScanResult,
    SetDetails,
    SetSearchResult,
    StorageLocation,
    Tag,
    Type,
]


@pytest.mark.parametrize("shape", ALL_SHAPES, ids=lambda s: s.__name__)
def test_create_from_malformed_json_raises_decode_error(shape) -> None:
    with pytest.raises(MalformedPayloadError) as exc_info:
        shape.create_from("{not json")

    assert exc_info.value.shape == shape.__name__
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


@pytest.mark.parametrize("shape", ALL_SHAPES, ids=lambda s: s.__name__)
def test_create_from_nothing_is_zero_valued(shape) -> None:
    assert shape.create_from() == shape()
    assert shape.create_from({}) == shape()
    assert shape.create_from("{}") == shape()


def test_create_from_accepts_json_string_and_bytes() -> None:
    text = '{"id": 3, "name": "Acme"}'

    assert Manufacturer.create_from(text) == Manufacturer(id=3, name="Acme")
    assert Manufacturer.create_from(text.encode("utf-8")) == Manufacturer(id=3, name="Acme")


def test_create_from_json_that_is_not_an_object_is_rejected() -> None:
    with pytest.raises(MalformedPayloadError, match="expected an object"):
        Tag.create_from("[1, 2]")


def test_create_from_empty_string_is_malformed() -> None:
    with pytest.raises(MalformedPayloadError):
        Tag.create_from("")


def test_create_from_uncoercible_value_is_rejected() -> None:
    with pytest.raises(MalformedPayloadError) as exc_info:
        Box.create_from({"id": "not-a-number"})

    assert "id" in exc_info.value.reason


def test_create_from_accepts_snake_case_and_camel_case() -> None:
    camel = Box.create_from({"id": 1, "locationId": 7, "code": "K-1"})
    snake = Box.create_from({"id": 1, "location_id": 7, "code": "K-1"})

    assert camel == snake
    assert camel.location_id == 7


def test_create_from_ignores_unknown_fields() -> None:
    tag = Tag.create_from({"id": 2, "name": "rosen", "createdAt": "2024-01-01"})

    assert tag == Tag(id=2, name="rosen")


def test_create_from_nulls_fall_back_to_zero_values() -> None:
    loc = StorageLocation.create_from({"id": 5, "friendlyName": "Keller", "room": None, "note": None})

    assert loc.room == ""
    assert loc.note == ""
    assert loc.friendly_name == "Keller"


def test_create_from_keeps_numbers_sent_for_text_fields() -> None:
    product = Product.create_from({"id": 7, "name": 5, "kind": 1.5})

    assert product.name == "5"
    assert product.kind == "1.5"


def test_create_from_blanks_null_items_in_string_lists() -> None:
    details = SetDetails.create_from({"id": 1, "tags": ["a", None, "b"]})
    result = SetSearchResult.create_from({"setId": 1, "tags": [None]})

    assert details.tags == ["a", "", "b"]
    assert result.tags == [""]


def test_create_from_instance_returns_independent_copy() -> None:
    original = SetDetails(id=1, name="X", tags=["a"])

    copy = SetDetails.create_from(original)
    copy.tags.append("b")

    assert copy is not original
    assert original.tags == ["a"]


def test_create_from_other_record_maps_shared_wire_fields() -> None:
    bag = Bag(id=4, box_id=2, serial_no="0004")

    info = BagInfo.create_from(bag)

    assert info.id == 4
    assert info.box_id == 2
    assert info.serial_no == "0004"
    assert info.box_code == ""


def test_to_payload_uses_wire_names() -> None:
    payload = StorageLocation(id=1, friendly_name="Keller").to_payload()

    assert payload == {
        "id": 1,
        "friendlyName": "Keller",
        "room": "",
        "shelf": "",
        "compartment": "",
        "note": "",
    }


class TestConvertValues:
    def test_sequence_of_payloads(self) -> None:
        tags = convert_values([{"id": 1, "name": "a"}, '{"id": 2, "name": "b"}', None], Tag)

        assert tags == [Tag(id=1, name="a"), Tag(id=2, name="b"), Tag()]

    def test_map_semantics_preserve_keys(self) -> None:
        boxes = convert_values({"k1": {"id": 1, "code": "K-1"}, "k2": {"id": 2}}, Box, as_map=True)

        assert list(boxes) == ["k1", "k2"]
        assert boxes["k1"].code == "K-1"
        assert boxes["k2"] == Box(id=2)

    @pytest.mark.parametrize("empty", [None, [], (), "[]"])
    def test_empty_sequence_input(self, empty) -> None:
        assert convert_values(empty, Product) == []

    @pytest.mark.parametrize("empty", [None, {}, "{}"])
    def test_empty_map_input(self, empty) -> None:
        assert convert_values(empty, Product, as_map=True) == {}

    def test_json_array_text(self) -> None:
        results = convert_values('[{"setId": 9, "setName": "Rosen", "tags": null}]', SetSearchResult)

        assert results == [SetSearchResult(set_id=9, set_name="Rosen")]

    def test_malformed_json_text(self) -> None:
        with pytest.raises(MalformedPayloadError):
            convert_values("[{oops", Tag)

    def test_mapping_given_where_sequence_expected(self) -> None:
        with pytest.raises(MalformedPayloadError, match="sequence"):
            convert_values({"a": {}}, Tag)

    def test_sequence_given_where_mapping_expected(self) -> None:
        with pytest.raises(MalformedPayloadError, match="mapping"):
            convert_values([{}], Tag, as_map=True)
