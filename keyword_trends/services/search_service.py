from __future__ import annotations

import hashlib
import logging
from typing import Any, Dict, List

from opensearchpy import OpenSearch, helpers

from ..api.schemas import KeywordSearchRequest, KeywordTrendsResponse
from ..errors import BackendError
from ..settings import Settings, settings as default_settings
from .aggregation import transform_response

log = logging.getLogger(__name__)

TIMESTAMP_FIELD = "timestamp"
MEDIUM_FIELD = "medium"
DATE_AGG = "first_agg"
MEDIUM_AGG = "second_agg"
DEFAULT_INTERVAL = "1d"


def create_client(cfg: Settings | None = None) -> OpenSearch:
    cfg = cfg or default_settings

    auth = None
    if cfg.os_user and cfg.os_password:
        auth = (cfg.os_user, cfg.os_password)

    return OpenSearch(
        hosts=[cfg.os_url],
        http_compress=True,
        http_auth=auth,
        verify_certs=cfg.os_verify_certs,
        ssl_assert_hostname=False,
        ssl_show_warn=False,
        timeout=cfg.os_timeout,
    )


def ping(client: OpenSearch) -> bool:
    try:
        return bool(client.ping())
    except Exception:
        log.warning("OpenSearch ping failed", exc_info=True)
        return False


def ensure_index(client: OpenSearch, index_name: str | None = None) -> None:
    index = index_name or default_settings.os_index
    if client.indices.exists(index=index):
        return

    body = {
        "settings": {
            "index": {"number_of_shards": 1, "number_of_replicas": 0},
        },
        "mappings": {
            "properties": {
                "id": {"type": "keyword"},
                "title": {"type": "text", "fields": {"raw": {"type": "keyword"}}},
                "content": {"type": "text"},
                "medium": {"type": "keyword"},
                "source": {"type": "keyword"},
                "timestamp": {"type": "date"},
                "url": {"type": "keyword"},
                "ingested_at": {"type": "date"},
            }
        },
    }

    client.indices.create(index=index, body=body)
    log.info("Created index %s", index)


def _doc_id(url: str) -> str:
    return hashlib.sha1(url.encode("utf-8")).hexdigest()


def index_documents(client: OpenSearch, docs: List[Dict[str, Any]], index_name: str | None = None) -> dict:
    index = index_name or default_settings.os_index
    ensure_index(client, index)

    def gen_actions():
        for d in docs:
            if not d.get("id") and d.get("url"):
                d["id"] = _doc_id(d["url"])  # mutate in place
            yield {
                "_op_type": "index",
                "_index": index,
                "_id": d.get("id"),
                "_source": d,
            }

    success, errors = helpers.bulk(client, gen_actions(), stats_only=False, raise_on_error=False)
    if errors:
        log.warning("Bulk indexing into %s reported %d errors", index, len(errors))
    # Make results visible for subsequent searches immediately (useful for tests and scripts)
    client.indices.refresh(index=index)
    return {"success": success, "errors": errors}


def build_keyword_query(request: KeywordSearchRequest) -> Dict[str, Any]:
    """Build the search body: keyword match, timestamp range, date histogram split by medium."""
    bounds: Dict[str, str] = {}
    if request.after:
        bounds["gte"] = request.after
    if request.before:
        bounds["lte"] = request.before

    return {
        "query": {
            "bool": {
                "must": [{"query_string": {"query": request.query_text}}],
                "filter": [{"range": {TIMESTAMP_FIELD: bounds}}],
            }
        },
        "aggs": {
            DATE_AGG: {
                "date_histogram": {
                    "field": TIMESTAMP_FIELD,
                    "fixed_interval": request.interval or DEFAULT_INTERVAL,
                    "min_doc_count": 1,
                },
                # No size override: the engine's default term count applies
                "aggs": {MEDIUM_AGG: {"terms": {"field": MEDIUM_FIELD}}},
            }
        },
        # Only aggregations are needed
        "size": 0,
    }


def search_keyword_trends(
    client: OpenSearch,
    request: KeywordSearchRequest,
    index_name: str | None = None,
) -> KeywordTrendsResponse:
    index = index_name or default_settings.os_index
    body = build_keyword_query(request)

    try:
        resp = client.search(index=index, body=body)
    except Exception as exc:
        raise BackendError(str(exc)) from exc

    return KeywordTrendsResponse(aggregations=transform_response(resp))
