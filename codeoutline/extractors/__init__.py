"""Outline extraction pipeline."""

from .classifier import classify_tag
from .outline import ChunkCollector, assemble_chunks, extract_outline, parse_file
from .repository import outline_file, outline_repository
from .trimming import extract_span, trim_class_signature, trim_signature

__all__ = [
    "ChunkCollector",
    "assemble_chunks",
    "classify_tag",
    "extract_outline",
    "extract_span",
    "outline_file",
    "outline_repository",
    "parse_file",
    "trim_class_signature",
    "trim_signature",
]
