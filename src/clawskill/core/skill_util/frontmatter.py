"""Frontmatter parsing for SKILL.md documents.

Handles the subset of YAML used in skill manifests: plain and quoted
scalars, booleans, inline JSON arrays/objects, nested block mappings and
simple block lists. It is not a full YAML parser; block scalar markers
(``|`` and ``>``) only open a nested block and do not preserve literal text.
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional

from loguru import logger

DELIMITER = "---"

_FRONTMATTER_RE = re.compile(
    r"\A---\r?\n(?:(.*?)\r?\n)?---(?=\r?\n|\Z)",
    re.DOTALL,
)
_KEY_VALUE_RE = re.compile(r"^(\s*)([\w.-]+)\s*:\s*(.*)")
_LIST_MARKER_RE = re.compile(r"^-(?:\s+|$)")
_BLOCK_MARKERS = ("", "|", ">")


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _is_blank_or_comment(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def _first_child(lines: list[str], start: int, parent_indent: int) -> Optional[str]:
    for line in lines[start:]:
        if _is_blank_or_comment(line):
            continue
        if _indent(line) <= parent_indent:
            return None
        return line
    return None


def _parse_scalar(value: str) -> Any:
    if value.startswith(("{", "[")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logger.debug(f"inline JSON 解析失败，按字符串处理: {value}")
            return value

    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]

    if value == "true":
        return True
    if value == "false":
        return False

    return value


def _parse_sequence(
    lines: list[str], start: int, parent_indent: int
) -> tuple[list[str], int]:
    items: list[str] = []
    i = start
    while i < len(lines):
        line = lines[i]
        if _is_blank_or_comment(line):
            i += 1
            continue
        if _indent(line) <= parent_indent:
            break
        items.append(_LIST_MARKER_RE.sub("", line.strip(), count=1))
        i += 1
    return items, i


def _parse_mapping(
    lines: list[str], start: int, parent_indent: int
) -> tuple[dict[str, Any], int]:
    """Parse ``key: value`` lines deeper than ``parent_indent``.

    Returns the mapping and the index of the first line not consumed.
    """
    result: dict[str, Any] = {}
    i = start
    while i < len(lines):
        line = lines[i]
        if _is_blank_or_comment(line):
            i += 1
            continue

        indent = _indent(line)
        if indent <= parent_indent:
            break

        i += 1
        match = _KEY_VALUE_RE.match(line)
        if match is None:
            continue

        key = match.group(2)
        value = match.group(3).strip()

        if value in _BLOCK_MARKERS:
            first = _first_child(lines, i, indent)
            if first is not None and _LIST_MARKER_RE.match(first.strip()):
                result[key], i = _parse_sequence(lines, i, indent)
            else:
                result[key], i = _parse_mapping(lines, i, indent)
        else:
            result[key] = _parse_scalar(value)

    return result, i


def has_opening_delimiter(content: str) -> bool:
    """Return True if the document starts with the ``---`` delimiter."""
    return content.startswith(DELIMITER)


def split_frontmatter(content: str) -> Optional[tuple[str, str]]:
    """Split a document into its frontmatter block and body.

    Returns None when the opening or closing delimiter line is missing.
    The body has its leading whitespace removed.
    """
    match = _FRONTMATTER_RE.match(content)
    if match is None:
        return None
    block = match.group(1) or ""
    body = content[match.end():].lstrip()
    return block, body


def parse_yaml_block(text: str) -> dict[str, Any]:
    """Parse a frontmatter block (without delimiters) into a mapping."""
    mapping, _ = _parse_mapping(text.splitlines(), 0, -1)
    return mapping


def parse_frontmatter(content: str) -> Optional[dict[str, Any]]:
    """Parse the frontmatter of a document.

    Returns None if the document has no well-formed frontmatter block.
    """
    parts = split_frontmatter(content)
    if parts is None:
        logger.debug("未找到 frontmatter 分隔符")
        return None

    mapping = parse_yaml_block(parts[0])
    logger.debug(f"frontmatter 解析完成: {list(mapping)}")
    return mapping
