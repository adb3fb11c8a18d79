"""Outline every supported file under a directory."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from ..analyzers.base import FileOutline, OutlineProvider, RepoOutline
from ..config import OutlineConfig
from .outline import parse_file

logger = logging.getLogger(__name__)


def iter_source_files(repo_path: Path, config: OutlineConfig):
    """Yield files under ``repo_path`` that pass the config filters.

    Files without a grammar are yielded too; the caller counts them as
    unsupported.
    """
    skip_dirs = set(config.skip_dirs)
    include_extensions = (
        {ext.lower() for ext in config.include_extensions}
        if config.include_extensions else None
    )

    for file_path in sorted(repo_path.rglob("*")):
        # Skip directories in exclusion list
        if any(skip in file_path.relative_to(repo_path).parts for skip in skip_dirs):
            continue

        if not file_path.is_file():
            continue

        if include_extensions and file_path.suffix.lower() not in include_extensions:
            continue

        try:
            if file_path.stat().st_size > config.max_file_size:
                logger.debug("Skipping %s: larger than %d bytes", file_path, config.max_file_size)
                continue
        except OSError:
            continue

        yield file_path


def outline_file(
    file_path: Path,
    provider: OutlineProvider,
    config: OutlineConfig,
    rel_path: str | None = None,
) -> RepoOutline:
    """Outline a single file into a one-file RepoOutline."""
    result = RepoOutline(root=str(file_path.parent), file_count=1)
    rel_path = rel_path or str(file_path)

    language = provider.resolve(file_path)
    if language is None:
        result.unsupported_count += 1
        return result

    try:
        content = file_path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        result.errors.append(f"{rel_path}: {e}")
        return result

    outline = parse_file(content, file_path, provider, config)
    if outline:
        result.files.append(FileOutline(path=rel_path, language=language, outline=outline))
    return result


def outline_repository(
    repo_path: Path,
    provider: OutlineProvider,
    config: OutlineConfig | None = None,
) -> RepoOutline:
    """Outline an entire directory tree."""
    config = config or OutlineConfig()
    repo_path = Path(repo_path)

    result = RepoOutline(root=str(repo_path))
    files = list(iter_source_files(repo_path, config))

    def _outline(file_path: Path) -> RepoOutline:
        return outline_file(
            file_path, provider, config,
            rel_path=file_path.relative_to(repo_path).as_posix(),
        )

    if config.workers > 1:
        with ThreadPoolExecutor(max_workers=config.workers) as executor:
            futures = {executor.submit(_outline, path): path for path in files}
            for future in as_completed(futures):
                try:
                    result.merge(future.result())
                except Exception as e:
                    result.errors.append(f"{futures[future]}: {e}")
    else:
        for file_path in files:
            result.merge(_outline(file_path))

    result.files.sort(key=lambda f: f.path)
    logger.info(
        "Outlined %d of %d files under %s",
        len(result.files), result.file_count, repo_path,
    )
    return result
