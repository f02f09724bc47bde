"""Application configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).parent

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_API_URL = os.getenv("OPENAI_API_URL", "https://api.openai.com/v1")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

RELAY_URL = os.getenv("DREAMCHAT_RELAY_URL", "http://127.0.0.1:8000")
RELAY_TIMEOUT = float(os.getenv("DREAMCHAT_RELAY_TIMEOUT", "60"))

SYSTEM_PROMPT_PATH = Path(os.getenv("SYSTEM_PROMPT_PATH", BASE_DIR / "system_prompt.txt"))


@dataclass(frozen=True)
class Settings:
    """Explicit configuration handed to the clients that need it."""

    openai_api_key: str | None = None
    openai_api_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"
    relay_url: str = "http://127.0.0.1:8000"
    relay_timeout: float = 60.0
    system_prompt_path: Path = BASE_DIR / "system_prompt.txt"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment (and .env, loaded at import)."""
        return cls(
            openai_api_key=OPENAI_API_KEY,
            openai_api_url=OPENAI_API_URL,
            openai_model=OPENAI_MODEL,
            relay_url=RELAY_URL,
            relay_timeout=RELAY_TIMEOUT,
            system_prompt_path=SYSTEM_PROMPT_PATH,
        )


def load_system_prompt(path: Path = SYSTEM_PROMPT_PATH) -> str:
    """Load the system prompt from file."""
    return Path(path).read_text(encoding="utf-8").strip()
