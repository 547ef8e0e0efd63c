"""autowiki: a flat-file wiki whose new pages start from an LLM definition."""

from pathlib import Path

from .models import Page
from .stores import PageStore
from .services import DefinitionProvider, PageResolver, PageService, WikiServices, build_services

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

__all__ = [
    "TEMPLATE_DIR",
    "Page",
    "PageStore",
    "DefinitionProvider",
    "PageResolver",
    "PageService",
    "WikiServices",
    "build_services",
]
