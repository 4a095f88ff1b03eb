from __future__ import annotations

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load variables from .env.example first (as defaults), then .env to override
project_root = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=project_root / ".env.example", override=False)
load_dotenv(dotenv_path=project_root / ".env", override=True)


def _getenv(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key, default)
    return v


def _getbool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


def _getlist(key: str, default: str = "") -> List[str]:
    raw = _getenv(key, default) or ""
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    app_env: str = _getenv("APP_ENV", "development") or "development"
    log_level: str = (_getenv("LOG_LEVEL", "INFO") or "INFO").upper()

    # OpenSearch
    os_url: str = _getenv("OPENSEARCH_URL", "http://localhost:9200") or "http://localhost:9200"
    os_user: str | None = _getenv("OPENSEARCH_USER")
    os_password: str | None = _getenv("OPENSEARCH_PASSWORD")
    os_index: str = _getenv("OPENSEARCH_INDEX", "news") or "news"
    os_timeout: int = int(_getenv("OPENSEARCH_TIMEOUT", "20") or 20)
    os_verify_certs: bool = _getbool("OPENSEARCH_VERIFY_CERTS", False)
    # Log every request/response exchanged with the search backend
    os_log_requests: bool = _getbool("OPENSEARCH_LOG_REQUESTS", False)

    # Dashboard frontend origins allowed to call the API
    cors_origins: List[str] = field(default_factory=lambda: _getlist("CORS_ORIGINS", "http://localhost:5173"))


settings = Settings()
