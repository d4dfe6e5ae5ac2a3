import logging

import pytest
from pydantic import ValidationError

from esfilters import (
    FieldSpec,
    FieldTypeResolver,
    InvalidModel,
    ModelDescriptor,
)


def test_from_model_class(descriptor):
    assert descriptor.table == "myTable"
    assert descriptor.index == "my_table"
    assert descriptor.sortable_fields == {
        "id": FieldSpec(),
        "value": FieldSpec(),
        "othervalue": FieldSpec(type="integer"),
    }


def test_from_model_instance(model):
    descriptor = ModelDescriptor.from_model(model)
    assert descriptor.has_field("othervalue")
    assert descriptor.get_type("othervalue") == "integer"


def test_from_model_camel_case_attribute():
    class Model:
        table = "someLongTableName"
        sortableFields = {"dateCreated": {"type": "date"}}

    descriptor = ModelDescriptor.from_model(Model)
    assert descriptor.index == "some_long_table_name"
    assert descriptor.get_type("dateCreated") == "date"


@pytest.mark.parametrize("model", [None, {}, object()])
def test_from_model_empty(model):
    descriptor = ModelDescriptor.from_model(model)
    assert descriptor.sortable_fields == {}
    assert descriptor.index is None
    assert not descriptor.has_field("id")


def test_from_model_descriptor_passthrough(descriptor):
    assert ModelDescriptor.from_model(descriptor) is descriptor


@pytest.mark.parametrize(
    "model",
    [
        type("M", (), {"sortable_fields": ["id"]}),
        type("M", (), {"sortable_fields": "id"}),
        type("M", (), {"sortable_fields": {"id": "date"}}),
        type("M", (), {"table": 1, "sortable_fields": {}}),
    ],
)
def test_from_model_invalid(model):
    with pytest.raises(InvalidModel):
        ModelDescriptor.from_model(model)


def test_descriptor_is_immutable(descriptor):
    with pytest.raises(ValidationError):
        descriptor.table = "other"


def test_unknown_field_type_is_silent_on_build(caplog):
    with caplog.at_level(logging.WARNING, logger="esfilters"):
        spec = FieldSpec(type="strange")
    assert spec.type == "strange"
    assert not spec.is_known_type()
    assert caplog.records == []


def test_check_types_warns(caplog):
    descriptor = ModelDescriptor.from_model(
        {"a": {"type": "strange"}, "b": {"type": "date"}, "c": True}
    )
    with caplog.at_level(logging.WARNING, logger="esfilters"):
        unknown = descriptor.check_types()
    assert unknown == ["a"]
    assert len(caplog.records) == 1
    assert "strange" in caplog.text


def test_check_types_known(descriptor, caplog):
    with caplog.at_level(logging.WARNING, logger="esfilters"):
        assert descriptor.check_types() == []
    assert caplog.records == []


def test_resolve_suffix(descriptor):
    assert FieldTypeResolver.resolve_suffix(descriptor, "id") == "raw"
    assert FieldTypeResolver.resolve_suffix(descriptor, "othervalue") == "raw"
    assert FieldTypeResolver.resolve_suffix(descriptor, "other") == "keyword"
    assert FieldTypeResolver.resolve_suffix(None, "id") == "keyword"
    assert (
        FieldTypeResolver.resolve_suffix(ModelDescriptor(), "id") == "keyword"
    )


def test_resolve_type(descriptor):
    field_type = FieldTypeResolver.resolve_type(descriptor, "othervalue")
    assert field_type == "integer"
    assert FieldTypeResolver.resolve_type(descriptor, "id") == "text"
    assert FieldTypeResolver.resolve_type(descriptor, "missing") == "text"
    assert FieldTypeResolver.resolve_type(None, "id") == "text"


def test_resolve_field(descriptor):
    assert FieldTypeResolver.resolve_field(descriptor, "id") == "id.raw"
    assert FieldTypeResolver.resolve_field(descriptor, "x") == "x.keyword"


def test_resolver_does_not_mutate(descriptor):
    before = descriptor.to_dict()
    FieldTypeResolver.resolve_suffix(descriptor, "missing")
    FieldTypeResolver.resolve_type(descriptor, "missing")
    assert descriptor.to_dict() == before
