"""Outline extraction: turn classified captures into a condensed file outline."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from ..analyzers.base import (
    DEDUP_CATEGORIES,
    Capture,
    Category,
    Chunk,
    OutlineProvider,
)
from ..config import OutlineConfig
from .classifier import classify_tag
from .trimming import extract_span, trim_class_signature, trim_signature

logger = logging.getLogger(__name__)


class ChunkCollector:
    """Collects outline chunks for one file, dropping repeated definitions.

    A collector lives for exactly one extraction call. Comments are never
    deduplicated; every other category is emitted at most once per text.
    """

    def __init__(self):
        self.chunks: list[Chunk] = []
        self._seen: set[str] = set()

    def add(self, text: str, category: Category, start_row: int) -> bool:
        """Add a chunk. Returns False if it was a duplicate and dropped."""
        if category in DEDUP_CATEGORIES:
            if text in self._seen:
                return False
            self._seen.add(text)
        self.chunks.append(Chunk(text=text, category=category, start_row=start_row))
        return True

    def add_capture(self, lines: Sequence[str], capture: Capture) -> bool:
        """Classify, trim and add a single capture."""
        category = capture.category or classify_tag(capture.tag)
        if category is Category.IRRELEVANT:
            return False

        if category is Category.SIGNATURE:
            text = trim_signature(lines, capture.start_row, capture.end_row, capture.body_start)
        elif category is Category.CLASS_DEFINITION:
            text = trim_class_signature(lines, capture.start_row, capture.end_row, capture.name_row)
        else:
            text = extract_span(lines, capture.start_row, capture.end_row)

        return self.add(text, category, capture.start_row)

    def outline(self) -> str:
        """Assemble the collected chunks."""
        return assemble_chunks(self.chunks)


def sort_captures(captures: Iterable[Capture]) -> list[Capture]:
    """Sort captures by start row, keeping original order for ties."""
    return sorted(captures, key=lambda c: c.start_row)


def assemble_chunks(chunks: Iterable[Chunk]) -> str:
    """Join non-empty chunks with a blank line between them."""
    texts = [chunk.text.strip() for chunk in chunks]
    return "\n\n".join(text for text in texts if text)


def _collect(lines: Sequence[str], captures: Iterable[Capture], collector: ChunkCollector) -> None:
    for capture in sort_captures(captures):
        # Captures starting past the end of the file are skipped.
        if not 0 <= capture.start_row < len(lines):
            continue
        collector.add_capture(lines, capture)


def extract_outline(lines: Sequence[str], captures: Iterable[Capture]) -> str:
    """Build an outline from source lines and already-computed captures."""
    collector = ChunkCollector()
    _collect(lines, captures, collector)
    return collector.outline()


def parse_file(
    file_text: str,
    file_path: str | Path,
    provider: OutlineProvider,
    config: OutlineConfig | None = None,
) -> str | None:
    """Extract the outline of one file.

    Returns the outline (possibly empty), or None when no grammar handles
    ``file_path``. Parse and query failures are logged and whatever was
    collected before the failure is returned; they are never raised.

    ``config`` is accepted for per-language policy and currently unused.
    """
    language = provider.resolve(file_path)
    if language is None:
        return None

    lines = file_text.split("\n")
    collector = ChunkCollector()

    try:
        parser = provider.get_parser(language)
        query = provider.get_query(language)
        tree = parser.parse(file_text.encode("utf-8"))
        captures = query.captures(tree.root_node)
        _collect(lines, captures, collector)
    except Exception as e:
        logger.error("Error parsing file %s: %s", file_path, e)

    return collector.outline()
