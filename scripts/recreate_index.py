from __future__ import annotations

import os
import sys

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from keyword_trends.services.search_service import create_client, ensure_index
from keyword_trends.settings import settings


def main():
    client = create_client(settings)
    index = settings.os_index
    if client.indices.exists(index=index):
        client.indices.delete(index=index)
        print(f"Deleted index: {index}")
    ensure_index(client, index)
    print(f"Recreated index: {index}")


if __name__ == "__main__":
    main()
