"""Load news documents from a JSON Lines file into the search index.

Each line is one document with at least ``timestamp``, ``medium`` and
``content``; ``title``, ``url`` and ``source`` are optional.

    python scripts/ingest_news.py data/news.jsonl
"""
from __future__ import annotations

import json
import os
import sys
from typing import Dict, Iterator

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from keyword_trends.services.ingestion_service import run_and_index
from keyword_trends.services.search_service import create_client, ensure_index
from keyword_trends.settings import settings


def iter_jsonl(path: str) -> Iterator[Dict]:
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                yield json.loads(line)


def main():
    if len(sys.argv) != 2:
        print("usage: ingest_news.py <file.jsonl>")
        sys.exit(2)
    path = sys.argv[1]
    batch_size = int(os.getenv("INGEST_BATCH_SIZE", "500"))

    client = create_client(settings)
    ensure_index(client)
    print(f"[news] indexing {path} into {settings.os_index} batch_size={batch_size}")
    res = run_and_index(client, iter_jsonl(path), batch_size=batch_size)
    print(f"Indexed news documents: {res['indexed']}")


if __name__ == "__main__":
    main()
