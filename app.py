from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dotenv import load_dotenv

from settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    load_dotenv("local.env")

    from endpoints.page_endpoints import router as page_router
    from persistence import AsyncDiskPageRepository, DiskPageDocumentStore

    settings = settings or get_settings()

    store = DiskPageDocumentStore(settings.data_dir)
    store.ensure_ready()
    logger.info("Page documents stored under %s", store.root)

    app = FastAPI()
    app.state.settings = settings
    app.state.page_repo = AsyncDiskPageRepository(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(page_router)

    return app


app = create_app()
