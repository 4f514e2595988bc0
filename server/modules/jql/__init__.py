"""JQL translation module: Gemini client, system instruction and translator."""

from .errors import (
    JQLProxyError,
    InputValidationError,
    ConfigurationError,
    UpstreamError,
    UpstreamResponseError,
)
from .llm_client import GeminiClient
from .prompts import JQL_SYSTEM_INSTRUCTION, build_system_instruction
from .translator import JQLTranslator

__all__ = [
    "JQLProxyError",
    "InputValidationError",
    "ConfigurationError",
    "UpstreamError",
    "UpstreamResponseError",
    "GeminiClient",
    "JQL_SYSTEM_INSTRUCTION",
    "build_system_instruction",
    "JQLTranslator",
]
