from __future__ import annotations

import os
import sys

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from keyword_trends.services.search_service import create_client, ensure_index, ping
from keyword_trends.settings import settings


def main():
    client = create_client(settings)
    if not ping(client):
        print(f"OpenSearch not reachable. Ensure it's running at {settings.os_url}.")
        return
    ensure_index(client)
    print(f"Index ensured: {settings.os_index}")


if __name__ == "__main__":
    main()
