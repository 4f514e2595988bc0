"""Pydantic schemas for API request/response models."""

from typing import Optional
from pydantic import BaseModel


class GenerateJQLRequest(BaseModel):
    """Request model for the JQL generation endpoint."""
    text: Optional[str] = None


class GenerateJQLResponse(BaseModel):
    """Response model for a successful JQL generation."""
    jql: str


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""
    error: str


class HealthResponse(BaseModel):
    """Response model for the health endpoint."""
    status: str
    service: str
    api_key_configured: bool
