"""LLM client for the Gemini API (google-genai SDK)."""

import logging
from typing import Optional

from google import genai
from google.genai import types

from modules.config import DEFAULT_MODEL_NAME, DEFAULT_TEMPERATURE
from .errors import ConfigurationError, UpstreamError, UpstreamResponseError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Client for single-shot text generation against Gemini."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: str = DEFAULT_MODEL_NAME,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        """
        Initialize the Gemini client.

        Args:
            api_key: Gemini API key. The SDK client is only built once a key is present.
            model_name: Gemini model identifier.
            temperature: Sampling temperature (0.0 to 1.0).
        """
        self.api_key = api_key
        self.model_name = model_name
        self.temperature = temperature
        self._client: Optional[genai.Client] = None

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise ConfigurationError("GEMINI_API_KEY is not set")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str, system_instruction: str) -> str:
        """
        Generate text for a prompt under a fixed system instruction.

        Args:
            prompt: The user text, sent as-is.
            system_instruction: Steering prompt sent alongside the user text.

        Returns:
            The raw generated text.

        Raises:
            UpstreamResponseError: If the response carries no text.
            UpstreamError: If the call itself fails.
        """
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=self.temperature,
        )
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=config,
            )
        except ConfigurationError:
            raise
        except Exception as e:
            raise UpstreamError(f"Gemini call failed: {e}") from e

        try:
            text = response.text
        except Exception as e:
            raise UpstreamResponseError(f"Unreadable Gemini response: {e}") from e

        if not isinstance(text, str):
            raise UpstreamResponseError(
                f"Gemini response has no text (got {type(text).__name__})"
            )
        return text
