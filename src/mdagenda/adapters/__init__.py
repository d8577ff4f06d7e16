"""Adapters - I/O implementations of ports."""

from .markdown_files import MarkdownTaskSource, parse_document

__all__ = [
    "MarkdownTaskSource",
    "parse_document",
]
