"""Ask an LLM for a one-sentence definition of a page title."""

import logging

from openai import OpenAI, OpenAIError

from autowiki.models import Definition, DefinitionEmpty, DefinitionFailed, DefinitionOutcome
from autowiki.prompts import build_define_title_prompt

logger = logging.getLogger(__name__)


class DefinitionProvider:
    """Single-turn definition requests against the OpenAI Responses API.

    One call per title: no retry, no rate limiting and no timeout beyond the
    client's own defaults. Without an injected client one is built on first
    use, so a missing API key shows up as a failed definition rather than a
    startup error.
    """

    def __init__(
        self,
        client: OpenAI | None = None,
        *,
        model: str,
        max_output_tokens: int = 60,
        api_key: str | None = None,
    ):
        self._client = client
        self._api_key = api_key
        self._model = model
        self._max_output_tokens = max_output_tokens

    @property
    def model(self) -> str:
        return self._model

    def define(self, title: str) -> DefinitionOutcome:
        prompt = build_define_title_prompt(title)
        logger.info("Requesting definition for %s model=%s", title, self._model)
        try:
            response = self._get_openai_client().responses.create(
                model=self._model,
                input=prompt,
                max_output_tokens=self._max_output_tokens,
            )
        except OpenAIError as e:
            logger.warning("Definition request failed for %s: %s", title, e)
            return DefinitionFailed(title=title, error=str(e))

        text = _first_output_text(response)
        if text is None or not text.strip():
            logger.warning("Definition request for %s returned no content", title)
            return DefinitionEmpty(title=title)
        logger.debug("Definition for %s: %r", title, text)
        return Definition(title=title, text=text)

    def _get_openai_client(self) -> OpenAI:
        # Raises OpenAIError when no key is configured; not cached until it succeeds.
        if self._client is None:
            self._client = OpenAI(api_key=self._api_key, max_retries=0)
        return self._client


def _first_output_text(response: object) -> str | None:
    """First text segment of the first output message, else the SDK's aggregated text."""
    for item in getattr(response, "output", None) or []:
        if getattr(item, "type", None) != "message":
            continue
        for part in getattr(item, "content", None) or []:
            if getattr(part, "type", None) == "output_text":
                text = getattr(part, "text", None)
                if isinstance(text, str):
                    return text
    output_text = getattr(response, "output_text", None)
    if isinstance(output_text, str):
        return output_text
    return None
