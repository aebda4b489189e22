from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from fluenthttp.app.domain.models import Response
from fluenthttp.app.infrastructure.mapping.json_mapper import JsonMapper
from fluenthttp.app.ports.response_mapper import ResponseMapper, ResponseMappingError


@dataclass
class Counter:
    a: int


class User(BaseModel):
    id: int
    name: str
    tags: list[str] = []


def _response(body: bytes | None) -> Response:
    return Response(status_code=200, status_message="OK", headers={}, body=body)


def test_decodes_json_into_dataclass():
    result = JsonMapper.for_type(Counter).map(_response(b'{"a":1}'))
    assert result == Counter(a=1)
    assert result.a == 1


def test_decodes_json_into_pydantic_model():
    user = JsonMapper.for_type(User).map(_response('{"id": 3, "name": "Zoë"}'.encode("utf-8")))
    assert user == User(id=3, name="Zoë", tags=[])


def test_decodes_json_into_builtin_containers():
    assert JsonMapper.for_type(dict[str, int]).map(_response(b'{"a": 1, "b": 2}')) == {"a": 1, "b": 2}
    assert JsonMapper.for_type(list[int]).map(_response(b"[1, 2, 3]")) == [1, 2, 3]


@pytest.mark.parametrize("response", [None, _response(None), _response(b""), _response(b"  \n")])
def test_absent_response_or_body_yields_none(response):
    assert JsonMapper.for_type(Counter).map(response) is None


def test_invalid_json_raises_mapping_error():
    with pytest.raises(ResponseMappingError):
        JsonMapper.for_type(Counter).map(_response(b"{not json"))


def test_wrong_shape_raises_mapping_error():
    with pytest.raises(ResponseMappingError):
        JsonMapper.for_type(Counter).map(_response(b'{"a": "many"}'))


def test_invalid_utf8_raises_mapping_error():
    with pytest.raises(ResponseMappingError):
        JsonMapper.for_type(Counter).map(_response(b"\xff\xfe"))


def test_json_mapper_satisfies_mapper_protocol():
    mapper = JsonMapper.for_type(Counter)
    assert isinstance(mapper, ResponseMapper)
    assert mapper.target is Counter
