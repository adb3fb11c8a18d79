"""Outline output rendering."""

from .output import render, render_json, render_markdown, render_plain, write_output

__all__ = ["render", "render_json", "render_markdown", "render_plain", "write_output"]
