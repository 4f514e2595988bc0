"""Translation of free-text issue descriptions into JQL."""

import logging
from typing import Any, Optional, Protocol

from modules.config import AppConfig
from .errors import (
    ConfigurationError,
    InputValidationError,
    UpstreamError,
    UpstreamResponseError,
)
from .llm_client import GeminiClient
from .prompts import JQL_SYSTEM_INSTRUCTION

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, prompt: str, system_instruction: str) -> str:
        ...


class JQLTranslator:
    """Validates input, calls Gemini with the JQL instruction and cleans the answer."""

    def __init__(
        self,
        config: AppConfig,
        llm_client: Optional[TextGenerator] = None,
        system_instruction: str = JQL_SYSTEM_INSTRUCTION,
    ):
        self.config = config
        self.system_instruction = system_instruction
        self.llm_client = llm_client or GeminiClient(
            api_key=config.gemini_api_key,
            model_name=config.gemini_model_name,
            temperature=config.gemini_temperature,
        )

    async def translate(self, text: Any) -> str:
        """
        Translate a text description into a single JQL expression.

        Args:
            text: The user description. Must be a non-empty string.

        Returns:
            The generated JQL, stripped of surrounding whitespace.

        Raises:
            InputValidationError: If text is missing or empty.
            ConfigurationError: If no Gemini API key is configured.
            UpstreamError: If the Gemini call fails or returns no text.
        """
        if not text or not isinstance(text, str):
            raise InputValidationError("text is missing or empty")

        if not self.config.api_key_configured:
            raise ConfigurationError("GEMINI_API_KEY is not set")

        try:
            generated = await self.llm_client.generate(text, self.system_instruction)
        except (ConfigurationError, UpstreamError):
            raise
        except Exception as e:
            raise UpstreamError(f"Unexpected failure calling Gemini: {e}") from e

        if not isinstance(generated, str):
            raise UpstreamResponseError(f"Gemini returned {type(generated).__name__}, expected text")

        jql = generated.strip()
        logger.info(f"Translated text ({len(text)} chars) to JQL: {jql[:100]}")
        return jql
