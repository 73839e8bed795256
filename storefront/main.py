"""FastAPI application for the storefront backend."""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront import __version__
from storefront.api import orders, products, users
from storefront.config import AppSettings
from storefront.converters import OrderConverter
from storefront.dao import OrderDao, ProductDao, UserDao
from storefront.db.postgres_client import PostgresConnection

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", "invalid"))
    return "; ".join(parts) or "Invalid request body"


def create_app(
    settings: AppSettings | None = None,
    *,
    db: PostgresConnection | None = None,
    user_dao: UserDao | None = None,
    product_dao: ProductDao | None = None,
    order_dao: OrderDao | None = None,
) -> FastAPI:
    """
    Build the application.

    Everything is wired explicitly: settings -> connection -> DAOs -> converter.
    Tests pass their own DAOs (or a stub connection) instead of touching PostgreSQL.
    """
    settings = settings or AppSettings.from_env()
    db = db or PostgresConnection(settings.postgres)
    user_dao = user_dao or UserDao(db)
    product_dao = product_dao or ProductDao(db)
    order_dao = order_dao or OrderDao(db, user_dao=user_dao, product_dao=product_dao)

    app = FastAPI(
        title="Storefront API",
        description="CRUD backend for users, products and orders",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.db = db
    app.state.user_dao = user_dao
    app.state.product_dao = product_dao
    app.state.order_dao = order_dao
    app.state.order_converter = OrderConverter(user_dao, product_dao)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Malformed JSON and missing body fields are client errors, not 422s
        return JSONResponse(status_code=400, content={"detail": _describe_validation_error(exc)})

    @app.on_event("startup")
    def create_tables():
        if settings.create_tables_on_startup:
            db.create_tables()

    @app.on_event("shutdown")
    def dispose_engine():
        db.dispose()

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        try:
            db.ping()
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            raise HTTPException(status_code=503, detail="Database unavailable")
        return {"status": "healthy", "service": "Storefront API"}

    app.include_router(users.router, prefix="/users", tags=["users"])
    app.include_router(products.router, prefix="/products", tags=["products"])
    app.include_router(orders.router, prefix="/orders", tags=["orders"])

    return app
