"""Shared test fixtures."""

import pytest

from codeoutline.analyzers.base import Capture
from codeoutline.analyzers.registry import create_default_registry


class FakeTree:
    def __init__(self, source: bytes):
        self.root_node = source


class FakeParser:
    def __init__(self, fail: bool = False):
        self.fail = fail

    def parse(self, source: bytes) -> FakeTree:
        if self.fail:
            raise RuntimeError("parser exploded")
        return FakeTree(source)


class FakeQuery:
    def __init__(self, captures: list[Capture]):
        self._captures = captures

    def captures(self, root_node):
        return list(self._captures)


class ExplodingCapture:
    """Capture-like object that fails when the pipeline classifies it."""

    tag = "definition.function"
    body_start = None
    name_row = None

    def __init__(self, start_row: int):
        self.start_row = start_row
        self.end_row = start_row

    @property
    def category(self):
        raise RuntimeError("capture exploded")


class FakeProvider:
    """In-memory provider: real language registry, canned parse results."""

    def __init__(self, captures=None, fail_parse: bool = False):
        self.registry = create_default_registry()
        self.captures = captures or []
        self.fail_parse = fail_parse

    def resolve(self, file_path):
        return self.registry.resolve(file_path)

    def get_parser(self, language):
        return FakeParser(fail=self.fail_parse)

    def get_query(self, language):
        return FakeQuery(self.captures)


@pytest.fixture
def fake_provider():
    """Factory for FakeProvider instances."""
    return FakeProvider


@pytest.fixture
def add_source():
    """A commented TypeScript function."""
    return (
        "// Adds two numbers\n"
        "function add(a: number, b: number): number {\n"
        "  return a + b;\n"
        "}\n"
    )


@pytest.fixture
def add_captures():
    """Captures for ``add_source``, deliberately out of row order."""
    return [
        Capture(start_row=1, end_row=3, tag="definition.function"),
        Capture(start_row=0, end_row=0, tag="comment"),
    ]


@pytest.fixture
def exploding_capture():
    """Factory for captures that raise while being processed."""
    return ExplodingCapture
