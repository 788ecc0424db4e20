import os
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

# --- LLM provider (any OpenAI-compatible endpoint) ---
LLM_API_KEY = os.getenv("LLM_API_KEY", "")
LLM_BASE_URL = os.getenv("LLM_BASE_URL") or None

# --- Generation ---
TEMPERATURE = 0.9

# --- CORS: frontend origins ---
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001").split(",")
    if origin.strip()
]

# --- Logging ---
LOG_PREVIEW_CHARS = 200


class LLMConfig(BaseModel):
    """Connection settings handed to the completion relay."""

    api_key: str
    base_url: str | None = None
    temperature: float = TEMPERATURE


def load_llm_config() -> LLMConfig:
    if not LLM_API_KEY:
        print("[startup] LLM_API_KEY is not set; add it to the environment or .env")
        raise RuntimeError("Please set LLM_API_KEY environment variable for the completion provider.")
    return LLMConfig(api_key=LLM_API_KEY, base_url=LLM_BASE_URL)
