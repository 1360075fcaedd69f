from typing import Optional
import logging

from fastapi import FastAPI
import uvicorn

import config
from application.edit_state import EditState
from application.use_cases import TaskStore
from infrastructure.database import Database
from interfaces.api import router as task_router
from interfaces.web import router as page_router

# --- Basic Setup ---
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """Build the app around one task store (a fresh one on ``config.DB_PATH`` if not given)."""
    if store is None:
        store = TaskStore(Database(config.DB_PATH), key=config.STORAGE_KEY)

    app = FastAPI(title="ZenTask")
    app.state.store = store
    app.state.edit_state = EditState(store)
    app.include_router(page_router)
    app.include_router(task_router)

    logger.info(f"ZenTask ready with {len(store.tasks)} tasks ({store.pending_count()} pending)")
    return app


def run() -> None:
    logger.info(f"Serving on http://{config.HOST}:{config.PORT}")
    uvicorn.run("main:create_app", factory=True, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
