"""FastAPI app bootstrap for checkout_hero."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from checkout_hero.api.error_handlers import register_error_handlers
from checkout_hero.api.routes import v1_router
from checkout_hero.core.settings import Settings, get_settings
from checkout_hero.db.session import get_db_session
from checkout_hero.domain.amount_formatter import resolve_locale

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the API application.

    The configured default locale is resolved up front so a typo in
    ``DEFAULT_LOCALE`` fails at startup instead of on the first request.
    """

    settings = settings or get_settings()
    default_locale = str(resolve_locale(settings.default_locale))

    app = FastAPI(
        title="Checkout Hero API",
        description="Shopping lists with running totals and locale-aware amounts.",
        version="0.1.0",
    )

    @app.get("/health/live", include_in_schema=False)
    def health_live() -> dict[str, str]:
        return {"status": "alive"}

    @app.get("/health/ready", include_in_schema=False)
    def health_ready(
        db_session: Annotated[Session, Depends(get_db_session)],
    ) -> dict[str, str]:
        try:
            db_session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.warning(
                "database_unavailable",
                extra={"error_type": type(exc).__name__},
            )
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Database is unavailable",
            ) from exc
        return {"status": "ready", "default_locale": default_locale}

    register_error_handlers(app)
    app.include_router(v1_router)
    logger.info("api_app_created", extra={"default_locale": default_locale})
    return app


app = create_app()
