from .resolver import PageResolver
from .service import PageService

__all__ = ["PageResolver", "PageService"]
