"""Main application entry point for the JQL Proxy API."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Loads .env before anything reads the environment
from modules.config import AppConfig
from modules.jql import InputValidationError, JQLTranslator
from modules.jql.translator import TextGenerator
from routers.jql import router as jql_router

READY_MESSAGE = "JQL Proxy Server is running and waiting for POST requests on /generate-jql"

logger = logging.getLogger(__name__)


def resolve_log_level(level: str) -> int:
    """Map a level name to its number, falling back to INFO for unknown names."""
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


async def validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed or non-object bodies get the same answer as a missing text field.
    logger.warning(f"Invalid request body: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": InputValidationError.public_message})


async def http_error_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def create_app(
    config: Optional[AppConfig] = None,
    llm_client: Optional[TextGenerator] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Settings to use. Read from the environment when omitted.
        llm_client: Text generator override, used by tests to stub Gemini.

    Returns:
        The configured application.
    """
    config = config or AppConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for FastAPI app.
        Handles startup and shutdown events.
        """
        logger.info("Starting up JQL Proxy API...")
        if not config.api_key_configured:
            logger.warning("GEMINI_API_KEY not set - /generate-jql will answer 500 until it is configured")
        logger.info(f"✓ Using model {config.gemini_model_name} (temperature {config.gemini_temperature})")

        yield  # Application runs here

        logger.info("Shutting down JQL Proxy API...")

    app = FastAPI(
        title="JQL Proxy API",
        description="Translates plain-language issue searches into JQL with Gemini",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.translator = JQLTranslator(config, llm_client=llm_client)

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    # Preflight OPTIONS requests answer 200
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(jql_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Root endpoint for readiness checks."""
        return READY_MESSAGE

    return app


settings = AppConfig.from_env()
configure_logging(settings.log_level)
app = create_app(settings)


def run(config: AppConfig = settings) -> None:
    """Listen directly on HOST:PORT; skipped when a serverless platform hosts the app."""
    if config.serverless:
        logger.info("Serverless mode - not binding a port, the platform invokes `app` directly")
        return

    import uvicorn
    logger.info(f"JQL proxy listening locally on port {config.port}")
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    run()
