from .provider import DefinitionProvider

__all__ = ["DefinitionProvider"]
