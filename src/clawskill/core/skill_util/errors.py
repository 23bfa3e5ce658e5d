"""Exceptions raised while reading and checking skill manifests."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SkillError(Exception):
    """Base exception for all skill manifest errors."""


class ParseError(SkillError):
    """The document has no usable frontmatter block, or the file is missing."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ValidationError(SkillError):
    """A manifest failed one or more checklist items.

    ``errors`` holds the message of every failed check.
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors if errors is not None else [message]
