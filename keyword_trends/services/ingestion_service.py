from __future__ import annotations

from typing import Iterable, Dict, Any, List, Set
from datetime import datetime, timezone

from opensearchpy import OpenSearch

from .search_service import index_documents

REQUIRED_FIELDS = ("timestamp", "medium", "content")


def validate_doc_shape(doc: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(doc)
    out.setdefault("ingested_at", datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"))
    missing = [k for k in REQUIRED_FIELDS if not out.get(k)]
    if missing:
        raise ValueError(f"Missing required fields: {missing}")
    out["medium"] = str(out["medium"]).strip()
    return out


def run_and_index(
    client: OpenSearch,
    source_iter: Iterable[Dict[str, Any]],
    index_name: str | None = None,
    batch_size: int = 500,
) -> Dict[str, Any]:
    batch: List[Dict[str, Any]] = []
    seen_ids: Set[str] = set()
    total = 0
    for doc in source_iter:
        clean = validate_doc_shape(doc)
        doc_id = clean.get("id") or clean.get("url")
        if doc_id:
            if doc_id in seen_ids:
                continue
            seen_ids.add(doc_id)
        batch.append(clean)
        if len(batch) >= batch_size:
            res = index_documents(client, batch, index_name=index_name)
            total += res.get("success", 0)
            batch.clear()
    if batch:
        res = index_documents(client, batch, index_name=index_name)
        total += res.get("success", 0)
    return {"indexed": total}
