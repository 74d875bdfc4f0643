"""
Configuration loader for the career roadmap service.

Loads all settings from environment variables (.env file).
Settings are read into an explicit GenerationConfig that is passed into
RoadmapService, so tests can inject fake endpoints and keys.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_DATASET_PATH = Path(__file__).parent.parent / "data" / "career_roadmaps.json"


def _env_float(name: str, default: float) -> float:
    """Read a float env var, falling back to default on missing/invalid values."""
    raw = os.getenv(name, "")
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


class Config:
    """
    Environment-derived defaults for the roadmap service.

    All values loaded from environment variables - NO SECRETS IN CODE.
    """

    # ===== LLM API =====
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_API_URL: str = os.getenv("OPENAI_API_URL", DEFAULT_API_URL)

    # ===== Model Configuration =====
    ROADMAP_MODEL: str = os.getenv("ROADMAP_MODEL", "gpt-3.5-turbo")
    ROADMAP_TEMPERATURE: float = _env_float("ROADMAP_TEMPERATURE", 0.7)

    # Token bounds per document type
    ROADMAP_MAX_TOKENS: int = 1200
    GUIDE_MAX_TOKENS: int = 1500

    # ===== Network =====
    # Applies to both the generation call and a remote dataset fetch
    ROADMAP_REQUEST_TIMEOUT: float = _env_float("ROADMAP_REQUEST_TIMEOUT", 30.0)

    # ===== Dataset =====
    # Local path or http(s) URL of the roadmap dataset
    ROADMAP_DATASET: str = os.getenv("ROADMAP_DATASET", str(DEFAULT_DATASET_PATH))

    @classmethod
    def summary(cls) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        return f"""
Configuration Summary:
  LLM API key: {'✓ Configured' if cls.OPENAI_API_KEY else '✗ Missing (fallback only)'}
  LLM endpoint: {cls.OPENAI_API_URL}
  Model: {cls.ROADMAP_MODEL} (temperature {cls.ROADMAP_TEMPERATURE})
  Request timeout: {cls.ROADMAP_REQUEST_TIMEOUT}s
  Dataset: {cls.ROADMAP_DATASET}
"""


@dataclass
class GenerationConfig:
    """
    Explicit configuration for the remote generation call.

    Attributes:
        api_key: Bearer token for the chat completions endpoint. Empty means
            the remote path is skipped and the fallback is used.
        api_url: Chat completions endpoint URL
        model: Model identifier sent in the request body
        temperature: Sampling temperature
        roadmap_max_tokens: Token bound for roadmap requests
        guide_max_tokens: Token bound for career guide requests
        timeout_seconds: Request timeout for remote calls
        dataset_location: Local path or URL of the roadmap dataset
    """

    api_key: str = ""
    api_url: str = DEFAULT_API_URL
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.7
    roadmap_max_tokens: int = 1200
    guide_max_tokens: int = 1500
    timeout_seconds: float = 30.0
    dataset_location: str = str(DEFAULT_DATASET_PATH)

    @property
    def is_configured(self) -> bool:
        """True when an API key is present and the remote call can be attempted."""
        return bool(self.api_key and self.api_key.strip())

    @classmethod
    def from_env(cls, dataset_location: Optional[str] = None) -> "GenerationConfig":
        """
        Build a GenerationConfig from the environment-derived Config defaults.

        Args:
            dataset_location: Optional override for the dataset location

        Returns:
            GenerationConfig populated from Config
        """
        return cls(
            api_key=Config.OPENAI_API_KEY,
            api_url=Config.OPENAI_API_URL,
            model=Config.ROADMAP_MODEL,
            temperature=Config.ROADMAP_TEMPERATURE,
            roadmap_max_tokens=Config.ROADMAP_MAX_TOKENS,
            guide_max_tokens=Config.GUIDE_MAX_TOKENS,
            timeout_seconds=Config.ROADMAP_REQUEST_TIMEOUT,
            dataset_location=dataset_location or Config.ROADMAP_DATASET,
        )
