"""Tests for the language registry."""

from pathlib import Path

from codeoutline.analyzers.base import Grammar
from codeoutline.analyzers.registry import LanguageRegistry, create_default_registry


def test_create_default_registry():
    registry = create_default_registry()
    assert registry.get_grammar("python") is not None
    assert registry.get_grammar("typescript") is not None
    assert registry.get_grammar("go") is not None
    assert registry.get_grammar("rust") is not None
    assert registry.languages() == [
        "go", "java", "javascript", "python", "rust", "tsx", "typescript",
    ]


def test_registry_file_dispatch():
    registry = create_default_registry()
    assert registry.resolve(Path("example.py")) == "python"
    assert registry.resolve("src/App.TSX") == "tsx"
    assert registry.resolve("lib/index.mjs") == "javascript"


def test_registry_unknown_extension():
    registry = create_default_registry()
    assert registry.resolve(Path("file.xyz")) is None
    assert registry.resolve("Makefile") is None


def test_grammar_name_defaults_to_language():
    registry = create_default_registry()
    assert registry.get_grammar("python").grammar_name == "python"


def test_every_grammar_has_a_query():
    registry = create_default_registry()
    for language in registry.languages():
        grammar = registry.get_grammar(language)
        assert grammar.query.strip()
        assert grammar.extensions
        assert isinstance(grammar.extensions, tuple)


def test_base_grammar_has_no_extensions():
    assert Grammar.extensions == ()


def test_grammar_patterns_split_on_blank_lines():
    class Sample(Grammar):
        language = "sample"
        query = (
            "\n(comment) @comment\n\n"
            "(lexical_declaration\n"
            "  (variable_declarator)) @definition.function\n"
        )

    assert Sample().patterns() == [
        "(comment) @comment",
        "(lexical_declaration\n  (variable_declarator)) @definition.function",
    ]


def test_later_registration_wins():
    class Legacy(Grammar):
        language = "legacy-js"
        extensions = (".js",)
        query = "(comment) @comment"

    registry = create_default_registry()
    registry.register(Legacy())
    assert registry.resolve("a.js") == "legacy-js"
    assert registry.extensions()[".js"] == "legacy-js"


def test_empty_registry_resolves_nothing():
    assert LanguageRegistry().resolve("a.py") is None
