"""Helpers for writing banner artifacts."""

from __future__ import annotations

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content or "", encoding="utf-8")


def write_document(path: Path, document: str) -> None:
    """Write an SVG document with exactly one trailing newline.

    The file is closed on return, so a renderer may load it right away.
    """
    write_text(path, document.strip() + "\n")


__all__ = [
    "ensure_dir",
    "write_text",
    "write_document",
]
