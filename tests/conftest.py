"""Shared fixtures: a fake requests.Session and builders for RajaOngkir replies."""

from unittest.mock import Mock

import pytest
import requests

from rajaongkir.api.client import RajaOngkir

BASE_URL = "https://api.example.test"
API_KEY = "test-key"


def _make_response(payload=None, status_code: int = 200, invalid_json: bool = False) -> Mock:
    resp = Mock(spec=requests.Response)
    resp.status_code = status_code
    if invalid_json:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.json.return_value = payload
    return resp


def _envelope(results=None, code: int = 200, description: str = "OK", query=None, **extra) -> dict:
    body: dict = {"status": {"code": code, "description": description}}
    if query is not None:
        body["query"] = query
    if results is not None:
        body["results"] = results
    body.update(extra)
    return {"rajaongkir": body}


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def envelope():
    return _envelope


@pytest.fixture
def session() -> Mock:
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session: Mock) -> RajaOngkir:
    return RajaOngkir(API_KEY, BASE_URL, session)
