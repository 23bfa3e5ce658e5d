"""
clawskill Core - 核心模块
"""

from clawskill.core.config import ValidatorConfig
from clawskill.core.report import Finding, Level, ValidationReport, render_report
from clawskill.core.skill_util import (
    ParseError,
    SkillError,
    SkillManifest,
    ValidationError,
    parse_frontmatter,
    read_manifest,
)
from clawskill.core.validator import validate_document, validate_file

__all__ = [
    # 配置
    "ValidatorConfig",
    # 解析
    "SkillManifest",
    "parse_frontmatter",
    "read_manifest",
    # 校验
    "Finding",
    "Level",
    "ValidationReport",
    "render_report",
    "validate_document",
    "validate_file",
    # 异常
    "SkillError",
    "ParseError",
    "ValidationError",
]
