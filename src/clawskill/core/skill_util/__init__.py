"""SKILL.md parsing helpers."""

from .errors import ParseError, SkillError, ValidationError
from .frontmatter import (
    has_opening_delimiter,
    parse_frontmatter,
    parse_yaml_block,
    split_frontmatter,
)
from .models import SkillManifest, find_skill_md, read_manifest, resolve_skill_md

__all__ = [
    "SkillError",
    "ParseError",
    "ValidationError",
    "SkillManifest",
    "has_opening_delimiter",
    "parse_frontmatter",
    "parse_yaml_block",
    "split_frontmatter",
    "find_skill_md",
    "read_manifest",
    "resolve_skill_md",
]
