import os
from dataclasses import dataclass

from dotenv import load_dotenv


DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1"
DEFAULT_MODEL = "google/gemini-2.5-flash"


def _flag(value) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at start-up."""

    api_key: str = ""
    gateway_url: str = DEFAULT_GATEWAY_URL
    model: str = DEFAULT_MODEL
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    validate_output: bool = False

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        # Load environment variables from .env file
        if load_env_file:
            load_dotenv()
        return cls(
            api_key=os.environ.get("LOVABLE_API_KEY", ""),
            gateway_url=os.environ.get("AI_GATEWAY_URL", DEFAULT_GATEWAY_URL),
            model=os.environ.get("AI_MODEL", DEFAULT_MODEL),
            host=os.environ.get("HOST", "127.0.0.1"),
            port=int(os.environ.get("PORT", "8000")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            validate_output=_flag(os.environ.get("VALIDATE_AI_OUTPUT")),
        )
