"""Shared types for the outline pipeline and its language providers."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Protocol


class OutlineError(Exception):
    """Base class for codeoutline errors."""


class GrammarUnavailableError(OutlineError):
    """A grammar or query could not be loaded for a language."""


class ConfigError(OutlineError):
    """Configuration file is missing or invalid."""


class Category(str, Enum):
    """What a capture contributes to an outline."""

    COMMENT = "comment"
    TYPE_DEFINITION = "type_definition"
    CLASS_DEFINITION = "class_definition"
    IMPORT = "import"
    PROPERTY = "property"
    SIGNATURE = "signature"
    IRRELEVANT = "irrelevant"


# Categories whose chunks are emitted at most once per file.
DEDUP_CATEGORIES = frozenset({
    Category.SIGNATURE,
    Category.CLASS_DEFINITION,
    Category.TYPE_DEFINITION,
    Category.IMPORT,
    Category.PROPERTY,
})


@dataclass(frozen=True)
class Capture:
    """A tagged span of source rows produced by a capture query.

    Attributes:
        start_row: 0-based first row of the captured node.
        end_row: 0-based last row of the captured node (inclusive).
        tag: Capture name from the query, e.g. ``definition.function``.
        category: Category attached when the query was compiled, if any.
        body_start: ``(row, byte_column)`` where the node's body begins,
            when the grammar exposes a body node.
        name_row: Row of the node's name, when the grammar exposes one.
            Differs from ``start_row`` when annotations or decorators
            precede the declaration.
    """

    start_row: int
    end_row: int
    tag: str
    category: Category | None = None
    body_start: tuple[int, int] | None = None
    name_row: int | None = None


@dataclass
class Chunk:
    """A finished block of outline text."""

    text: str
    category: Category
    start_row: int


@dataclass
class FileOutline:
    """Outline of a single source file."""

    path: str
    language: str
    outline: str


@dataclass
class RepoOutline:
    """Outlines collected from a directory tree."""

    root: str
    files: list[FileOutline] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    file_count: int = 0
    unsupported_count: int = 0

    def merge(self, other: "RepoOutline") -> None:
        """Merge another outline set into this one."""
        self.files.extend(other.files)
        self.errors.extend(other.errors)
        self.file_count += other.file_count
        self.unsupported_count += other.unsupported_count


class Tree(Protocol):
    root_node: Any


class Parser(Protocol):
    def parse(self, source: bytes) -> Tree: ...


class CompiledQuery(Protocol):
    def captures(self, root_node: Any) -> list[Capture]: ...


class OutlineProvider(Protocol):
    """Resolves languages and hands out parsers and compiled queries."""

    def resolve(self, file_path: str | Path) -> str | None: ...

    def get_query(self, language: str) -> CompiledQuery: ...

    def get_parser(self, language: str) -> Parser: ...


class Grammar:
    """Base class for a language grammar definition.

    Subclasses declare the tree-sitter grammar name, the file extensions it
    handles, and the capture query that tags outline-worthy nodes. Patterns
    in the query are separated by blank lines.
    """

    language: str = ""
    grammar_name: str = ""
    extensions: tuple[str, ...] = ()
    query: str = ""

    def __init__(self):
        if not self.grammar_name:
            self.grammar_name = self.language

    def patterns(self) -> list[str]:
        """Split the query into its blank-line separated patterns."""
        return [block.strip() for block in self.query.split("\n\n") if block.strip()]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(language={self.language!r})"
