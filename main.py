import logging
from typing import Optional

from fastapi import FastAPI

from application.use_cases import TaskUseCases
from config import Settings, load_settings
from infrastructure.memory_store import TaskStore
from interfaces.api import router as task_router
from interfaces.errors import register_error_handlers
from interfaces.middleware import add_cors
from interfaces.pages import router as pages_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    settings = settings or load_settings()
    if store is None:
        store = TaskStore(seed=settings.seed_sample_data)

    app = FastAPI(title="Task API", version=settings.version)
    app.state.settings = settings
    app.state.store = store
    app.state.use_cases = TaskUseCases(store)

    app.include_router(task_router)
    app.include_router(pages_router)
    register_error_handlers(app)
    add_cors(app)
    return app


def run():
    import uvicorn

    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    logger.info(f"Server starting on port {settings.port}")
    logger.info(f"API available at: http://localhost:{settings.port}/api")
    logger.info(f"Home page: http://localhost:{settings.port}")

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
