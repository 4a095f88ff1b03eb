from __future__ import annotations

from fastapi import Request
from opensearchpy import OpenSearch


def get_search_client(request: Request) -> OpenSearch:
    return request.app.state.search_client
