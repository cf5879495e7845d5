from dataclasses import dataclass
from datetime import date, datetime

import pytest

from jamsesh.models import Entity, Item, Schema, SchemaError


def test_item_entity_description():
    schema = Schema([Item])
    assert len(schema) == 1
    assert Item in schema

    entity = schema.entity_for(Item)
    assert entity.name == "Item"
    assert entity.table == "item"
    assert entity.column_names == ["timestamp"]
    assert entity.columns[0].sql_type == "TEXT"
    # persistent_id is not a stored attribute
    assert "persistent_id" not in entity.column_names


def test_create_sql_has_implicit_id():
    sql = Schema([Item]).entity_for(Item).create_sql()
    assert sql.startswith("CREATE TABLE IF NOT EXISTS item")
    assert "id INTEGER PRIMARY KEY AUTOINCREMENT" in sql
    assert "timestamp TEXT NOT NULL" in sql


def test_encode_decode_item():
    entity = Schema([Item]).entity_for(Item)
    t = datetime(2025, 11, 7, 12, 0, 1, 250)
    values = entity.encode(Item(t))
    assert values == [t.isoformat()]

    restored = entity.decode(values, persistent_id=3)
    assert restored.timestamp == t
    assert restored.persistent_id == 3


def test_encode_rejects_non_datetime_timestamp():
    entity = Schema([Item]).entity_for(Item)
    with pytest.raises(SchemaError):
        entity.encode(Item(12345))


def test_entity_for_instance_and_unknown_type():
    schema = Schema([Item, Item])
    assert len(schema) == 1
    assert schema.entity_for(Item(datetime.now())).model is Item
    with pytest.raises(SchemaError):
        schema.entity_for(str)


def test_unsupported_attribute_type():
    @dataclass
    class Blob:
        payload: bytes

    with pytest.raises(SchemaError):
        Entity.from_model(Blob)


def test_non_dataclass_model():
    class Plain:
        pass

    with pytest.raises(SchemaError):
        Schema([Plain])


def test_encode_rejects_plain_date():
    entity = Schema([Item]).entity_for(Item)
    with pytest.raises(SchemaError):
        entity.encode(Item(date(2025, 1, 1)))
