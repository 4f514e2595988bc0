import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple
from dotenv import load_dotenv

# Load environment variables (single place for the app)
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.1
DEFAULT_PORT = 3000


def convert_to_float(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring non-numeric value {value!r}, using the default")
        return None


def convert_to_int(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer value {value!r}, using the default")
        return None


def convert_to_bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value.strip().lower() in {"true", "1", "yes", "y"}


def split_origins(value: Optional[str]) -> Tuple[str, ...]:
    """Parse a comma separated origin list; empty means allow every origin."""
    if not value or not value.strip():
        return ("*",)
    origins: List[str] = [o.strip() for o in value.split(",") if o.strip()]
    return tuple(origins) or ("*",)


@dataclass(frozen=True)
class AppConfig:
    """Process-wide settings, built once at startup and shared read-only."""

    # ----- Gemini -----
    gemini_api_key: Optional[str] = None
    gemini_model_name: str = DEFAULT_MODEL_NAME
    gemini_temperature: float = DEFAULT_TEMPERATURE

    # ----- Server -----
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    cors_origins: Tuple[str, ...] = ("*",)
    serverless: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Read every setting from the process environment."""
        app_env = (os.getenv("APP_ENV") or "").strip().lower()
        temperature = convert_to_float(os.getenv("GEMINI_TEMPERATURE"))
        port = convert_to_int(os.getenv("PORT"))

        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model_name=os.getenv("GEMINI_MODEL_NAME") or DEFAULT_MODEL_NAME,
            gemini_temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
            host=os.getenv("HOST") or "0.0.0.0",
            port=DEFAULT_PORT if port is None else port,
            cors_origins=split_origins(os.getenv("CORS_ALLOW_ORIGINS")),
            serverless=app_env == "production" or bool(convert_to_bool(os.getenv("VERCEL"))),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def api_key_configured(self) -> bool:
        return bool(self.gemini_api_key)
