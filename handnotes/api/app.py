from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from handnotes.api.dependencies import Services, build_services
from handnotes.api.errors import register_error_handlers
from handnotes.api.routes import router
from handnotes.config.settings import Settings
from handnotes.database.connection import apply_schema, close_pool, init_pool
from handnotes.logging.logger import Log

LOCAL_FILES_MOUNT = "/files"


def create_app(settings: Settings | None = None, services: Services | None = None) -> FastAPI:
    """Build the FastAPI application.

    When services is given (tests) it is used as-is and no database pool is
    opened; otherwise the pool and all clients are created on startup.
    """
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if services is not None:
            yield
            return
        init_pool(settings)
        built: Services | None = None
        try:
            if settings.db_apply_schema_on_startup:
                apply_schema()
            built = build_services(settings)
            app.state.services = built
            Log.info(f"Handnotes started ({settings.app_env})")
            yield
        finally:
            if built is not None:
                built.close()
            close_pool()
            Log.info("Handnotes stopped")

    app = FastAPI(title="Handnotes", lifespan=lifespan)
    if services is not None:
        app.state.services = services

    register_error_handlers(app)
    app.include_router(router)

    if settings.storage_backend.lower() == "local":
        app.mount(
            LOCAL_FILES_MOUNT,
            StaticFiles(directory=Path(settings.storage_local_root), check_dir=False),
            name="files",
        )

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
