"""Data models for skill manifests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional

from .errors import ParseError
from .frontmatter import has_opening_delimiter, parse_yaml_block, split_frontmatter

SKILL_FILENAMES = ("SKILL.md", "skill.md")


@dataclass
class SkillManifest:
    """A SKILL.md document: parsed frontmatter plus body text."""

    name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    body: str = ""
    frontmatter: dict[str, Any] = field(default_factory=dict)

    @property
    def openclaw(self) -> dict[str, Any]:
        """The ``metadata.openclaw`` mapping, or an empty dict."""
        openclaw = self.metadata.get("openclaw")
        return openclaw if isinstance(openclaw, dict) else {}

    def to_dict(self) -> dict:
        """Convert to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        if self.name is not None:
            result["name"] = self.name
        if self.description is not None:
            result["description"] = self.description
        if self.version is not None:
            result["version"] = self.version
        if self.metadata:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_document(cls, content: str) -> "SkillManifest":
        if not has_opening_delimiter(content):
            raise ParseError("SKILL.md must start with --- (YAML frontmatter delimiter)")

        parts = split_frontmatter(content)
        if parts is None:
            raise ParseError("SKILL.md frontmatter not properly closed with ---")

        block, body = parts
        frontmatter = parse_yaml_block(block)
        metadata = frontmatter.get("metadata")

        return cls(
            name=_optional_str(frontmatter.get("name")),
            description=_optional_str(frontmatter.get("description")),
            version=_optional_str(frontmatter.get("version")),
            metadata=metadata if isinstance(metadata, dict) else {},
            body=body,
            frontmatter=frontmatter,
        )


def _optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    return None


def find_skill_md(
    skill_dir: Path, filenames: Iterable[str] = SKILL_FILENAMES
) -> Optional[Path]:
    """Find the manifest file in a skill directory, preferring SKILL.md."""
    for filename in filenames:
        candidate = Path(skill_dir) / filename
        if candidate.is_file():
            return candidate
    return None


def resolve_skill_md(path: Path, filenames: Iterable[str] = SKILL_FILENAMES) -> Path:
    """Resolve a file or skill directory to a manifest path.

    Directories without a manifest resolve to ``<dir>/SKILL.md`` so callers
    can report the missing file by name.
    """
    path = Path(path)
    if path.is_dir():
        filenames = tuple(filenames)
        found = find_skill_md(path, filenames)
        return found if found is not None else path / filenames[0]
    return path


def read_manifest(path: Path) -> SkillManifest:
    """Read and parse a SKILL.md file or skill directory."""
    skill_md = resolve_skill_md(path)
    if not skill_md.is_file():
        raise ParseError(f"SKILL.md not found: {skill_md}", path=skill_md)

    content = skill_md.read_text(encoding="utf-8", errors="replace")
    try:
        return SkillManifest.from_document(content)
    except ParseError as e:
        raise ParseError(f"{skill_md}: {e}", path=skill_md) from e
