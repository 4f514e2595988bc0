"""API module for schemas, dependencies and the serverless entry point."""

from .schemas import GenerateJQLRequest, GenerateJQLResponse, ErrorResponse, HealthResponse

__all__ = ["GenerateJQLRequest", "GenerateJQLResponse", "ErrorResponse", "HealthResponse"]
