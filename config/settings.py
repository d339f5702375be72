from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")

    # Model backend: "gemini" (hosted) or "ollama" (local)
    llm_provider: str = os.getenv("LLM_PROVIDER", "gemini")
    google_api_key: Optional[str] = os.getenv("GOOGLE_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    gemini_embedding_model: str = os.getenv(
        "GEMINI_EMBEDDING_MODEL", "models/gemini-embedding-001"
    )
    ollama_base_url: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
    ollama_model: str = os.getenv("OLLAMA_MODEL", "llama3.2")
    ollama_embedding_model: str = os.getenv("OLLAMA_EMBEDDING_MODEL", "nomic-embed-text")
    temperature: float = float(os.getenv("MODEL_TEMPERATURE", "0.3"))
    top_p: float = float(os.getenv("MODEL_TOP_P", "0.9"))

    memory_enabled: bool = _env_bool("MEMORY_ENABLED", True)
    memory_max_messages: int = int(os.getenv("MEMORY_MAX_MESSAGES", "10"))

    rag_enabled: bool = _env_bool("RAG_ENABLED", True)
    rag_max_results: int = int(os.getenv("RAG_MAX_RESULTS", "5"))
    rag_min_score: float = float(os.getenv("RAG_MIN_SCORE", "0.6"))
    rag_segment_size: int = int(os.getenv("RAG_SEGMENT_SIZE", "500"))
    rag_segment_overlap: int = int(os.getenv("RAG_SEGMENT_OVERLAP", "50"))

    tools_enabled: bool = _env_bool("TOOLS_ENABLED", True)
    tool_content_limit: int = int(os.getenv("TOOL_CONTENT_LIMIT", "5000"))

    guardrail_enabled: bool = _env_bool("GUARDRAIL_ENABLED", True)
    # Let questions through when the classifier call itself fails
    guardrail_fail_open: bool = _env_bool("GUARDRAIL_FAIL_OPEN", True)

    scrape_timeout: float = float(os.getenv("SCRAPE_TIMEOUT", "30"))
    scrape_user_agent: str = os.getenv(
        "SCRAPE_USER_AGENT", "Mozilla/5.0 (compatible; AirlineLoyaltyBot/1.0)"
    )
    delta_url: str = os.getenv(
        "DELTA_URL",
        "https://www.delta.com/us/en/skymiles/medallion-program/how-to-qualify",
    )
    united_url: str = os.getenv(
        "UNITED_URL",
        "https://www.united.com/en/us/fly/mileageplus/premier/qualify.html",
    )

    @property
    def document_urls(self) -> List[str]:
        return [self.delta_url, self.united_url]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
