"""App constants, overridable via environment variables."""

import os
from pathlib import Path

# Page files live here as <title>.txt; default "data/pages" under the working directory, overridable via PAGES_DIR env
PAGES_DIR = Path(os.environ["PAGES_DIR"]) if os.environ.get("PAGES_DIR") else Path.cwd() / "data" / "pages"

# LLM model used to write the first definition of a new page.
LLM_MODEL: str = os.environ.get("LLM_MODEL") or "gpt-4o-mini"

# Output token budget for a generated definition.
DEFINITION_MAX_TOKENS: int = int(os.environ.get("DEFINITION_MAX_TOKENS", "60"))

# Provider credential. Not validated here: when unset every provider call fails
# and cold titles fall back to the edit form.
OPENAI_API_KEY: str | None = os.environ.get("OPENAI_API_KEY")

# ── HTTP server ───────────────────────────────────────────────────────────────
WIKI_HOST: str = os.environ.get("WIKI_HOST") or "127.0.0.1"
WIKI_PORT: int = int(os.environ.get("WIKI_PORT", "8080"))

LOG_LEVEL: str = (os.environ.get("LOG_LEVEL") or "INFO").upper()
