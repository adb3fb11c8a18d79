"""Language resolution and tree-sitter providers."""

from .base import Capture, Category, Chunk, Grammar, OutlineProvider
from .registry import LanguageRegistry, create_default_registry

__all__ = [
    "Capture",
    "Category",
    "Chunk",
    "Grammar",
    "OutlineProvider",
    "LanguageRegistry",
    "create_default_registry",
]
