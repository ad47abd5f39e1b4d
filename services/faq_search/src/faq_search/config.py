"""FAQ search service configuration."""
from pydantic import Field
from pydantic_settings import SettingsConfigDict

from shared.config import BaseAppSettings

from faq_search.storage import DEFAULT_CORPUS_PATH


class FaqSearchSettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="FAQ_SEARCH_")

    host: str = "0.0.0.0"
    port: int = 8003
    corpus_path: str = str(DEFAULT_CORPUS_PATH)
    top_n: int = Field(default=3, ge=1, le=20)
    max_summary_keywords: int = Field(default=3, ge=0)
    snippet_max_chars: int = Field(default=150, ge=1)
