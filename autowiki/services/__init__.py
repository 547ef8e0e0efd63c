"""Service layer exports."""

from .definition import DefinitionProvider
from .page import PageResolver, PageService
from .container import WikiServices, build_services

__all__ = ["DefinitionProvider", "PageResolver", "PageService", "WikiServices", "build_services"]
