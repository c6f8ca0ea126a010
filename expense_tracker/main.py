import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from expense_tracker.config import Settings, get_settings
from expense_tracker.db.database import RecordStore
from expense_tracker.api.error_handlers import register_error_handlers
from expense_tracker.api.v1.routes.auth import router as auth_router
from expense_tracker.api.v1.routes.personal import router as personal_router
from expense_tracker.api.v1.routes.groups import router as groups_router
from expense_tracker.api.v1.routes.group_expenses import router as group_expenses_router
from expense_tracker.api.v1.routes.roommate import router as roommate_router
from expense_tracker.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    """Build the API around an explicitly provided record store.

    When no store is given one is built from settings.database_url and
    disposed on shutdown; a store passed in stays owned by the caller.
    """
    settings = settings or get_settings()
    owns_store = store is None
    store = store or RecordStore.from_url(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        store.create_all()
        store.check_connection()
        yield
        if owns_store:
            store.dispose()
            logger.info("Record store disposed")

    app = FastAPI(
        title="Expense Tracker",
        description="Personal expenses, shared groups and roommate transactions",
        version=VERSION,
        lifespan=lifespan
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(personal_router)
    app.include_router(groups_router)
    app.include_router(group_expenses_router)
    app.include_router(roommate_router)

    @app.get("/")
    def read_root():
        return {"message": "Expense Tracker API", "version": VERSION}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app
