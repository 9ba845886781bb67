from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from hotel_gateway.config import APP_NAME, APP_VERSION, Settings
from hotel_gateway.exception_handlers import register_exception_handlers
from hotel_gateway.logging_setup import configure_logging
from hotel_gateway.middleware.structured_logging_middleware import StructuredLoggingMiddleware
from hotel_gateway.routers.booking import router as booking_router
from hotel_gateway.routers.health import router as health_router
from hotel_gateway.routers.search import router as search_router

ROOT_DIR = Path(__file__).parent

# Load .env only if exists (development fallback)
# Production: the hosting platform injects env vars directly
env_path = ROOT_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger("alora-gateway")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title=APP_NAME, version=APP_VERSION)
    app.state.settings = settings

    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(search_router)
    app.include_router(booking_router)

    @app.on_event("startup")
    async def _startup() -> None:
        logger.info("%s listening on port %s", APP_NAME, settings.port)
        logger.info("Environment: %s", settings.app_env)
        logger.info("Sandbox API key: %s", "set" if settings.sandbox_api_key else "missing")
        logger.info("Production API key: %s", "set" if settings.production_api_key else "missing")

    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)


if __name__ == "__main__":
    main()
