"""Shared fixtures for JSON:API parameter tests."""

from typing import Any, Mapping

import pytest

from fastapi_jsonapi_params.config import JSONAPI_MEDIA_TYPE as JSONAPI_TYPE
from fastapi_jsonapi_params.parameters import ParametersFactory, ParametersParser


class FakeRequest:
    """In-memory request implementing the CurrentRequest interface."""

    def __init__(self, content_type: str | None, accept: str | None, input_: Mapping[str, Any]):
        self.headers = {"content-type": content_type, "accept": accept}
        self.input = input_

    def get_header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def get_input(self) -> Mapping[str, Any]:
        return self.input


@pytest.fixture
def parser() -> ParametersParser:
    return ParametersFactory().create_parameters_parser()


@pytest.fixture
def request_params() -> dict[str, Any]:
    return {
        "fields": {"type1": "fields1,fields2"},
        "include": "author,comments,comments.author",
        "sort": "-created,+title,name",
        "filter": {"some": "filter"},
        "page": {"size": 10, "offset": 4},
    }


@pytest.fixture
def make_request():
    def _make(content_type: str | None = JSONAPI_TYPE, accept: str | None = JSONAPI_TYPE, input_=None):
        return FakeRequest(content_type, accept, input_ or {})

    return _make
