"""Output renderers for repository outlines."""

import json
from dataclasses import asdict
from pathlib import Path

from ..analyzers.base import RepoOutline

SEPARATOR = "=" * 16


def render_plain(repo: RepoOutline) -> str:
    """Render outlines as plain text sections separated by file headers."""
    sections = []
    for file_outline in repo.files:
        sections.append(f"{SEPARATOR}\nFile: {file_outline.path}\n{SEPARATOR}\n{file_outline.outline}")
    return "\n\n".join(sections) + ("\n" if sections else "")


def render_markdown(repo: RepoOutline) -> str:
    """Render outlines as Markdown, one fenced block per file."""
    sections = []
    for file_outline in repo.files:
        sections.append(
            f"## {file_outline.path}\n\n"
            f"```{file_outline.language}\n{file_outline.outline}\n```"
        )
    return "\n\n".join(sections) + ("\n" if sections else "")


def render_json(repo: RepoOutline) -> str:
    """Render outlines and counters as JSON."""
    return json.dumps(asdict(repo), indent=2)


RENDERERS = {
    "plain": render_plain,
    "markdown": render_markdown,
    "json": render_json,
}


def render(repo: RepoOutline, output_format: str = "markdown") -> str:
    """Render with the named format."""
    try:
        renderer = RENDERERS[output_format]
    except KeyError:
        raise ValueError(f"Unknown output format: {output_format}") from None
    return renderer(repo)


def write_output(repo: RepoOutline, path: Path | str, output_format: str = "markdown") -> Path:
    """Render and write to a file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render(repo, output_format))
    return path
