"""Build the service graph once at startup."""

import logging
from dataclasses import dataclass

from openai import OpenAI

from config import WikiConfig
from autowiki.services.definition import DefinitionProvider
from autowiki.services.page import PageResolver, PageService
from autowiki.stores import PageStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WikiServices:
    store: PageStore
    provider: DefinitionProvider
    resolver: PageResolver
    pages: PageService


def build_services(config: WikiConfig, *, client: OpenAI | None = None) -> WikiServices:
    """Wire store, provider, resolver and page service from config.

    A missing API key is not an error here; provider calls will fail and
    cold titles fall back to the edit form.
    """
    if client is None and not config.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; new pages will open in the editor")
    store = PageStore(config.pages_dir)
    provider = DefinitionProvider(
        client,
        model=config.llm_model,
        max_output_tokens=config.definition_max_tokens,
        api_key=config.openai_api_key or None,
    )
    resolver = PageResolver(store, provider)
    logger.info("Services ready pages_dir=%s model=%s", config.pages_dir, config.llm_model)
    return WikiServices(
        store=store,
        provider=provider,
        resolver=resolver,
        pages=PageService(store, resolver),
    )
