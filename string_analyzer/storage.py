import logging
from fastapi import FastAPI, Request

from string_analyzer.crud import StringStore

logger = logging.getLogger(__name__)


def init_store(app: FastAPI) -> StringStore:
    """Attach a fresh store to the application (runs once on startup)."""
    store = StringStore()
    app.state.store = store
    logger.info("In-memory string store initialized")
    return store


def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store
