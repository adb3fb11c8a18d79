"""Tests for directory outlining and output rendering."""

import json

import pytest

from codeoutline.analyzers.base import Capture, FileOutline, RepoOutline
from codeoutline.config import OutlineConfig
from codeoutline.extractors.repository import outline_file, outline_repository
from codeoutline.store.output import render, render_json, render_markdown, render_plain, write_output


@pytest.fixture
def sample_repo(tmp_path):
    """A small tree with supported, unsupported and skipped files."""
    (tmp_path / "a.py").write_text("# alpha\n")
    (tmp_path / "empty.py").write_text("")
    (tmp_path / "readme.md").write_text("hello\n")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.ts").write_text("// beta\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "c.js").write_text("// vendored\n")
    return tmp_path


@pytest.fixture
def first_line_provider(fake_provider):
    return fake_provider([Capture(start_row=0, end_row=0, tag="comment")])


def test_outline_repository(sample_repo, first_line_provider):
    result = outline_repository(sample_repo, first_line_provider)
    assert [(f.path, f.language, f.outline) for f in result.files] == [
        ("a.py", "python", "# alpha"),
        ("sub/b.ts", "typescript", "// beta"),
    ]
    assert result.file_count == 4
    assert result.unsupported_count == 1
    assert result.errors == []


def test_outline_repository_include_extensions(sample_repo, first_line_provider):
    config = OutlineConfig(include_extensions=[".TS"])
    result = outline_repository(sample_repo, first_line_provider, config)
    assert [f.path for f in result.files] == ["sub/b.ts"]
    assert result.file_count == 1


def test_outline_repository_max_file_size(sample_repo, first_line_provider):
    config = OutlineConfig(max_file_size=7)
    result = outline_repository(sample_repo, first_line_provider, config)
    assert result.files == []


def test_outline_repository_custom_skip_dirs(sample_repo, first_line_provider):
    config = OutlineConfig(skip_dirs=["sub"])
    result = outline_repository(sample_repo, first_line_provider, config)
    assert [f.path for f in result.files] == ["a.py", "node_modules/c.js"]


def test_outline_repository_concurrent_matches_sequential(sample_repo, first_line_provider):
    sequential = outline_repository(sample_repo, first_line_provider, OutlineConfig(workers=1))
    concurrent = outline_repository(sample_repo, first_line_provider, OutlineConfig(workers=4))
    assert concurrent.files == sequential.files
    assert concurrent.file_count == sequential.file_count


def test_outline_file_unsupported(tmp_path, first_line_provider):
    path = tmp_path / "notes.txt"
    path.write_text("just text\n")
    result = outline_file(path, first_line_provider, OutlineConfig())
    assert result.files == []
    assert result.unsupported_count == 1


@pytest.fixture
def repo_outline():
    return RepoOutline(
        root="/tmp/repo",
        files=[
            FileOutline(path="a.py", language="python", outline="def f(x):"),
            FileOutline(path="b.go", language="go", outline="func Run() error"),
        ],
        file_count=3,
    )


def test_render_markdown(repo_outline):
    assert render_markdown(repo_outline) == (
        "## a.py\n\n```python\ndef f(x):\n```\n\n"
        "## b.go\n\n```go\nfunc Run() error\n```\n"
    )


def test_render_plain(repo_outline):
    text = render_plain(repo_outline)
    assert "File: a.py\n================\ndef f(x):" in text
    assert text.index("a.py") < text.index("b.go")


def test_render_json(repo_outline):
    data = json.loads(render_json(repo_outline))
    assert data["file_count"] == 3
    assert data["files"][1]["outline"] == "func Run() error"


def test_render_empty():
    assert render_markdown(RepoOutline(root=".")) == ""
    assert render_plain(RepoOutline(root=".")) == ""


def test_render_unknown_format(repo_outline):
    with pytest.raises(ValueError, match="Unknown output format"):
        render(repo_outline, "html")


def test_write_output(tmp_path, repo_outline):
    path = write_output(repo_outline, tmp_path / "out" / "outline.md")
    assert path.read_text() == render_markdown(repo_outline)
