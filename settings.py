from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PUCK_CDN_URL = "https://esm.sh"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    # Persistence
    data_dir: Path
    default_page_id: str

    # Editor page
    puck_cdn_url: str

    # HTTP
    cors_allow_origins: list[str]

    # Debug
    debug_log_requests: bool


def get_settings() -> Settings:
    # Relative to the working directory, like `data/puck` next to the app.
    raw_data_dir = os.getenv("PUCK_DATA_DIR")
    data_dir = Path(raw_data_dir) if raw_data_dir else Path.cwd() / "data" / "puck"

    default_page_id = (os.getenv("DEFAULT_PAGE_ID", "dashboard")).strip() or "dashboard"

    puck_cdn_url = (os.getenv("PUCK_CDN_URL", DEFAULT_PUCK_CDN_URL)).rstrip("/")

    cors_allow_origins = _env_list("CORS_ALLOW_ORIGINS", ["*"])

    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    return Settings(
        data_dir=data_dir,
        default_page_id=default_page_id,
        puck_cdn_url=puck_cdn_url,
        cors_allow_origins=cors_allow_origins,
        debug_log_requests=debug_log_requests,
    )
