from __future__ import annotations

import pytest

from keyword_trends.services import ingestion_service
from keyword_trends.services.ingestion_service import run_and_index, validate_doc_shape


def _doc(url, medium="TV"):
    return {"url": url, "medium": medium, "timestamp": "2019-08-22T10:00:00Z", "content": "Wilson speaks"}


def test_validate_doc_shape_sets_defaults():
    out = validate_doc_shape(_doc("https://example.org/1", medium=" Online "))
    assert out["medium"] == "Online"
    assert out["ingested_at"].endswith("Z")


@pytest.mark.parametrize("field", ["timestamp", "medium", "content"])
def test_validate_doc_shape_rejects_missing(field):
    doc = _doc("https://example.org/1")
    del doc[field]
    with pytest.raises(ValueError, match=field):
        validate_doc_shape(doc)


def test_run_and_index_batches_and_dedupes(monkeypatch):
    batches = []

    def fake_index(client, docs, index_name=None):
        batches.append((index_name, [d["url"] for d in docs]))
        return {"success": len(docs), "errors": []}

    monkeypatch.setattr(ingestion_service, "index_documents", fake_index)

    docs = [_doc(f"https://example.org/{i}") for i in range(5)] + [_doc("https://example.org/0")]
    res = run_and_index(object(), docs, index_name="news-test", batch_size=2)

    assert res == {"indexed": 5}
    assert [len(urls) for _, urls in batches] == [2, 2, 1]
    assert all(index == "news-test" for index, _ in batches)
