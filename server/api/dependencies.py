"""Dependency injection for FastAPI routes."""

from fastapi import Request, HTTPException

from modules.config import AppConfig
from modules.jql import JQLTranslator


def get_config_dependency(request: Request) -> AppConfig:
    """
    Dependency to inject the application config into routes.

    Args:
        request: FastAPI request object containing app state.

    Returns:
        AppConfig instance from app state.
    """
    config = getattr(request.app.state, "config", None)
    if config is None:
        raise HTTPException(status_code=500, detail="Config not initialized.")
    return config


def get_translator_dependency(request: Request) -> JQLTranslator:
    """
    Dependency to inject the JQL translator into routes.

    Args:
        request: FastAPI request object containing app state.

    Returns:
        JQLTranslator instance from app state.

    Raises:
        HTTPException: If the translator is not initialized in app state.
    """
    translator = getattr(request.app.state, "translator", None)
    if translator is None:
        raise HTTPException(
            status_code=500,
            detail="Translator not initialized. Server may be starting up."
        )
    return translator
