from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from opensearchpy import OpenSearch
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from .deps import get_search_client
from .schemas import ErrorResponse, KeywordSearchRequest, KeywordTrendsResponse
from ..errors import QueryValidationError
from ..services.search_service import ping, search_keyword_trends
from ..settings import settings

log = logging.getLogger(__name__)

router = APIRouter()


@router.get("/healthz")
def healthz(client: OpenSearch = Depends(get_search_client)):
    if not ping(client):
        return JSONResponse({"status": "down"}, status_code=HTTP_503_SERVICE_UNAVAILABLE)
    return {"status": "ok"}


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


def _search_request(
    query: Optional[str],
    after: Optional[str],
    before: Optional[str],
    interval: Optional[str],
) -> KeywordSearchRequest:
    if not query or not query.strip():
        raise QueryValidationError()
    return KeywordSearchRequest(
        query_text=query,
        after=_blank_to_none(after),
        before=_blank_to_none(before),
        interval=_blank_to_none(interval) or "1d",
    )


@router.get(
    "/results",
    response_model=KeywordTrendsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def results(
    query: Optional[str] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
    interval: Optional[str] = None,
    client: OpenSearch = Depends(get_search_client),
):
    """Document counts per time bucket, broken down by medium, for a keyword."""
    try:
        payload = _search_request(query, after, before, interval)
    except QueryValidationError as exc:
        return JSONResponse({"error": str(exc)}, status_code=HTTP_400_BAD_REQUEST)

    try:
        return search_keyword_trends(client, payload, index_name=settings.os_index)
    except Exception as exc:
        log.exception("Keyword trends search failed for query=%r", query)
        return JSONResponse({"error": str(exc)}, status_code=HTTP_500_INTERNAL_SERVER_ERROR)
