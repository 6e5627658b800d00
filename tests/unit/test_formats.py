from __future__ import annotations

import pytest
import yaml
from pydantic import BaseModel, ValidationError

from graze.formats import (
    json_deserializer,
    json_serializer,
    model_deserializer,
    model_serializer,
    yaml_deserializer,
    yaml_serializer,
)


class ServerConfig(BaseModel):
    host: str = "localhost"
    port: int = 8080


def test_json_serializer_ends_with_newline():
    serialize = json_serializer(indent=None, sort_keys=True)

    assert serialize({"b": 1, "a": "é"}) == '{"a": "é", "b": 1}\n'
    assert json_deserializer(serialize({"b": 1})) == {"b": 1}


def test_yaml_empty_document_loads_as_empty_mapping():
    assert yaml_deserializer("") == {}
    assert yaml_deserializer("# only a comment\n") == {}


def test_yaml_serializer_keeps_insertion_order():
    text = yaml_serializer()({"zeta": 1, "alpha": [1, 2]})

    assert text.index("zeta") < text.index("alpha")
    assert yaml.safe_load(text) == {"zeta": 1, "alpha": [1, 2]}


def test_yaml_deserializer_propagates_parse_errors():
    with pytest.raises(yaml.YAMLError):
        yaml_deserializer("key: [unclosed")


def test_model_codecs_validate_and_dump():
    deserialize = model_deserializer(ServerConfig, yaml_deserializer)
    serialize = model_serializer(yaml_serializer())

    config = deserialize("port: 9000\n")
    assert config == ServerConfig(port=9000)
    assert yaml.safe_load(serialize(config)) == {"host": "localhost", "port": 9000}

    with pytest.raises(ValidationError):
        deserialize("port: not-a-number\n")
