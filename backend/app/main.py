# app/main.py
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

# Routers
from app.routes.auth import auth_router
from app.routes.bookings import booking_router
from app.routes.payments import payment_router
from app.routes.rooms import room_router
from app.routes.stats import stats_router
from app.routes.users import user_router

# Error Handlers
from stayvista.core.config import settings
from stayvista.core.error_handlers import (
    generic_exception_handler,
    http_exception_handler,
    stayvista_exception_handler,
    validation_exception_handler,
)
from stayvista.core.exceptions import StayVistaError
from stayvista.core.logging_config import setup_logging
from stayvista.db.database import close_db, users

logger = setup_logging("stayvista")


# ------------------------
# DB connectivity check
# ------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        # 5-second timeout so a dead cluster does not block startup
        await asyncio.wait_for(users().find_one({}), timeout=5)
        logger.info("MongoDB connected successfully.")
    except Exception as e:
        logger.error("MongoDB connection failed: %s", e)
    yield
    close_db()


def create_app() -> FastAPI:
    app = FastAPI(title="StayVista API", lifespan=lifespan)

    # ------------------------
    # CORS
    # ------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ------------------------
    # Routes
    # ------------------------
    app.include_router(auth_router)
    app.include_router(user_router)
    app.include_router(payment_router)
    app.include_router(room_router)
    app.include_router(booking_router)
    app.include_router(stats_router)

    # ------------------------
    # Exception handlers
    # ------------------------
    app.add_exception_handler(StayVistaError, stayvista_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ------------------------
    # Health & root
    # ------------------------
    @app.get("/")
    async def root():
        return {"message": "Hello from StayVista Server.."}

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


app = create_app()
