import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import sessionmaker
from starlette.middleware.sessions import SessionMiddleware

from .core.config import Settings, get_settings
from .core.db import build_session_factory
from .core.errors import StudioError
from .core.logging import configure_logging
from .api.routes_auth import router as auth_router, dev_router as dev_auth_router
from .api.routes_health import router as health_router
from .api.routes_studio import router as studio_router
from .api.routes_templates import router as templates_router
from .services.llm import build_generation_gateway

logger = logging.getLogger(__name__)


def _cors_origins(settings: Settings) -> list[str]:
    # - In prod, FRONTEND_ORIGIN is required and we never fall back to "*".
    # - In non-prod, wide-open CORS only when CORS_ALLOW_ALL_ORIGINS=True
    #   or no origin is configured.
    configured = [
        o.strip()
        for o in (settings.FRONTEND_ORIGIN or "").split(",")
        if o.strip()
    ]
    if settings.ENV.lower() == "prod":
        if not configured:
            raise RuntimeError(
                "FRONTEND_ORIGIN must be set in production – refusing to start with wide-open CORS."
            )
        return configured
    if settings.CORS_ALLOW_ALL_ORIGINS or not configured:
        return ["*"]
    return configured


async def _handle_studio_error(request: Request, exc: StudioError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def create_app(
    settings: Settings | None = None,
    *,
    session_factory: sessionmaker | None = None,
    llm_client: Any = None,
) -> FastAPI:
    """
    Build the API with its collaborators constructed once and held on
    ``app.state``. Tests pass their own session factory and model client.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="B2B Content Studio API")
    app.state.settings = settings
    app.state.session_factory = session_factory or build_session_factory(settings)
    app.state.generation_gateway = build_generation_gateway(settings, client=llm_client)

    origins = _cors_origins(settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        # Session cookies cannot be sent to a wildcard origin
        allow_credentials=origins != ["*"],
    )
    if settings.AUTH_SECRET:
        app.add_middleware(
            SessionMiddleware,
            secret_key=settings.AUTH_SECRET,
            session_cookie=settings.SESSION_COOKIE,
            same_site="lax",
            https_only=settings.ENV.lower() == "prod",
        )
    else:
        logger.warning("AUTH_SECRET is not set; protected routes will fail", extra={"step": "startup"})

    app.add_exception_handler(StudioError, _handle_studio_error)

    app.include_router(health_router, prefix=settings.API_PREFIX)
    app.include_router(auth_router, prefix=settings.API_PREFIX)
    app.include_router(templates_router, prefix=settings.API_PREFIX)
    app.include_router(studio_router, prefix=settings.API_PREFIX)
    if settings.ENV == "local":
        app.include_router(dev_auth_router, prefix=settings.API_PREFIX)

    return app


app = create_app()
