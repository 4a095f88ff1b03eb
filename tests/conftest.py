"""Shared fixtures: a recorded engine payload and an in-memory search client."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from keyword_trends.app import create_app


ENGINE_RESPONSE: Dict[str, Any] = {
    "took": 12,
    "timed_out": False,
    "hits": {"total": {"value": 10000, "relation": "gte"}, "max_score": None, "hits": []},
    "aggregations": {
        "first_agg": {
            "buckets": [
                {
                    "key_as_string": "2019-08-22T00:00:00.000Z",
                    "key": 1566432000000,
                    "doc_count": 5615,
                    "second_agg": {
                        "doc_count_error_upper_bound": 0,
                        "sum_other_doc_count": 0,
                        "buckets": [
                            {"key": "Online", "doc_count": 1774},
                            {"key": "TV", "doc_count": 518},
                            {"key": "Radio", "doc_count": 375},
                            {"key": "Print", "doc_count": 311},
                        ],
                    },
                }
            ]
        }
    },
}


class FakeSearchClient:
    """Stands in for the OpenSearch client; records every search call."""

    def __init__(self, response: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None, up: bool = True):
        self.response = response
        self.error = error
        self.up = up
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def search(self, index: str, body: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append({"index": index, "body": body})
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.response)

    def ping(self) -> bool:
        return self.up

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def engine_response() -> Dict[str, Any]:
    return copy.deepcopy(ENGINE_RESPONSE)


@pytest.fixture
def fake_client(engine_response):
    return FakeSearchClient(response=engine_response)


@pytest.fixture
def api(fake_client):
    return TestClient(create_app(client=fake_client))


@pytest.fixture
def make_api():
    """Build an API over a fresh fake client; returns ``(test_client, fake_client)``."""

    def _make(response: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None, up: bool = True):
        client = FakeSearchClient(response=response, error=error, up=up)
        return TestClient(create_app(client=client)), client

    return _make
