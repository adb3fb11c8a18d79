"""Grammar registry mapping file paths to languages."""

from pathlib import Path

from .base import Grammar


class LanguageRegistry:
    """Registry of available grammars."""

    def __init__(self):
        self._grammars: dict[str, Grammar] = {}
        self._extension_map: dict[str, Grammar] = {}

    def register(self, grammar: Grammar) -> None:
        """Register a grammar. Later registrations win for shared extensions."""
        self._grammars[grammar.language] = grammar

        for ext in grammar.extensions:
            self._extension_map[ext.lower()] = grammar

    def resolve(self, file_path: str | Path) -> str | None:
        """Return the language for a file, or None if no grammar handles it."""
        ext = Path(file_path).suffix.lower()
        grammar = self._extension_map.get(ext)
        return grammar.language if grammar else None

    def get_grammar(self, language: str) -> Grammar | None:
        """Get grammar by language name."""
        return self._grammars.get(language)

    def languages(self) -> list[str]:
        """Registered language names, sorted."""
        return sorted(self._grammars)

    def extensions(self) -> dict[str, str]:
        """Map of extension to language name."""
        return {ext: g.language for ext, g in sorted(self._extension_map.items())}


def create_default_registry() -> LanguageRegistry:
    """Create registry with all built-in grammars."""
    from ..extractors.grammars.go import GoGrammar
    from ..extractors.grammars.java import JavaGrammar
    from ..extractors.grammars.javascript import JavaScriptGrammar
    from ..extractors.grammars.python import PythonGrammar
    from ..extractors.grammars.rust import RustGrammar
    from ..extractors.grammars.typescript import TSXGrammar, TypeScriptGrammar

    registry = LanguageRegistry()

    registry.register(PythonGrammar())
    registry.register(JavaScriptGrammar())
    registry.register(TypeScriptGrammar())
    registry.register(TSXGrammar())
    registry.register(GoGrammar())
    registry.register(JavaGrammar())
    registry.register(RustGrammar())

    return registry
