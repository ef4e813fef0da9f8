"""Utility helpers for the banner workflow."""

from .artifacts import ensure_dir, write_document, write_text
from .timing import StepTimer

__all__ = [
    "ensure_dir",
    "write_document",
    "write_text",
    "StepTimer",
]
