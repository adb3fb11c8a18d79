"""Tree-sitter backed parser and query provider."""

import logging
import threading
from pathlib import Path
from typing import Any

from tree_sitter import Language, Parser, Query, QueryCursor, QueryError
from tree_sitter_language_pack import get_language

from ..extractors.classifier import classify_tag
from .base import Capture, Category, GrammarUnavailableError
from .registry import LanguageRegistry, create_default_registry

logger = logging.getLogger(__name__)


class TreeSitterQuery:
    """A compiled capture query whose capture names are classified once."""

    def __init__(self, language: str, query: Query, skipped_patterns: list[str] | None = None):
        self.language = language
        self._query = query
        self.skipped_patterns = skipped_patterns or []
        self.categories: dict[str, Category] = {}
        for index in range(query.capture_count):
            name = query.capture_name(index)
            self.categories[name] = classify_tag(name)

    def captures(self, root_node: Any) -> list[Capture]:
        """Run the query and return captures in document order."""
        cursor = QueryCursor(self._query)
        found = []
        for name, nodes in cursor.captures(root_node).items():
            category = self.categories.get(name, Category.IRRELEVANT)
            for node in nodes:
                found.append((node.start_byte, _to_capture(node, name, category)))
        found.sort(key=lambda item: item[0])
        return [capture for _, capture in found]


def _to_capture(node: Any, name: str, category: Category) -> Capture:
    start_row = node.start_point.row
    end_row = node.end_point.row
    # Nodes that swallow their trailing newline end at column 0 of the next row.
    if end_row > start_row and node.end_point.column == 0:
        end_row -= 1

    body_start = None
    body = node.child_by_field_name("body")
    if body is not None:
        body_start = (body.start_point.row, body.start_point.column)

    name_node = node.child_by_field_name("name")
    name_row = name_node.start_point.row if name_node is not None else None

    return Capture(
        start_row=start_row,
        end_row=end_row,
        tag=name,
        category=category,
        body_start=body_start,
        name_row=name_row,
    )


class TreeSitterProvider:
    """Resolves languages and hands out tree-sitter parsers and queries.

    Grammars and compiled queries are cached. Construction of each cache
    entry happens at most once even when several threads ask for the same
    language at the same time. Parsers are not cached: tree-sitter parsers
    are not safe to share between threads, and building one is cheap.

    Usage::

        provider = TreeSitterProvider()
        language = provider.resolve("src/app.ts")
        tree = provider.get_parser(language).parse(source_bytes)
        captures = provider.get_query(language).captures(tree.root_node)
    """

    def __init__(self, registry: LanguageRegistry | None = None):
        self.registry = registry or create_default_registry()
        self._languages: dict[str, Language] = {}
        self._queries: dict[str, TreeSitterQuery] = {}
        self._lock = threading.Lock()

    def resolve(self, file_path: str | Path) -> str | None:
        """Return the language name for a path, or None if unsupported."""
        return self.registry.resolve(file_path)

    def _get_language(self, language: str) -> Language:
        with self._lock:
            if language in self._languages:
                return self._languages[language]

            grammar = self.registry.get_grammar(language)
            if grammar is None:
                raise GrammarUnavailableError(f"No grammar registered for {language}")

            try:
                ts_language = get_language(grammar.grammar_name)
            except (LookupError, ImportError, ValueError) as e:
                raise GrammarUnavailableError(
                    f"Grammar {grammar.grammar_name} not available: {e}"
                ) from e

            logger.debug("Loaded tree-sitter grammar %s", grammar.grammar_name)
            self._languages[language] = ts_language
            return ts_language

    def get_parser(self, language: str) -> Parser:
        """Get a fresh parser for a language."""
        return Parser(self._get_language(language))

    def get_query(self, language: str) -> TreeSitterQuery:
        """Get the compiled outline query for a language."""
        ts_language = self._get_language(language)

        with self._lock:
            if language in self._queries:
                return self._queries[language]

            grammar = self.registry.get_grammar(language)
            skipped: list[str] = []
            try:
                query = Query(ts_language, grammar.query)
            except QueryError:
                query, skipped = _compile_valid_patterns(language, ts_language, grammar.patterns())

            compiled = TreeSitterQuery(language, query, skipped)
            self._queries[language] = compiled
            return compiled


def _compile_valid_patterns(language: str, ts_language: Language, patterns: list[str]) -> tuple[Query, list[str]]:
    """Compile only the patterns the loaded grammar accepts.

    Rejected patterns are logged and returned so callers can report them.
    """
    valid, skipped = [], []
    for pattern in patterns:
        try:
            Query(ts_language, pattern)
        except QueryError as e:
            logger.warning("Skipping outline pattern for %s: %s (%s)", language, pattern, e)
            skipped.append(pattern)
        else:
            valid.append(pattern)

    if not valid:
        raise GrammarUnavailableError(f"No valid outline patterns for {language}")
    return Query(ts_language, "\n\n".join(valid)), skipped
