"""Serverless entry point: the platform imports `app` and invokes it per request."""

from main import app

__all__ = ["app"]
