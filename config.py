"""Runtime configuration for the wiki server."""

from dataclasses import dataclass
from pathlib import Path

import constants


@dataclass(frozen=True)
class WikiConfig:
    """Settings resolved once at startup and handed to build_services()."""

    pages_dir: Path
    llm_model: str
    definition_max_tokens: int
    openai_api_key: str | None
    host: str
    port: int

    @classmethod
    def from_env(cls) -> "WikiConfig":
        return cls(
            pages_dir=constants.PAGES_DIR,
            llm_model=constants.LLM_MODEL,
            definition_max_tokens=constants.DEFINITION_MAX_TOKENS,
            openai_api_key=constants.OPENAI_API_KEY,
            host=constants.WIKI_HOST,
            port=constants.WIKI_PORT,
        )
