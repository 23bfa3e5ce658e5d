"""
clawskill - SKILL.md 技能清单解析与校验

核心概念:
- parse_frontmatter: 解析文档头部 --- 之间的 YAML 子集
- validate_file: 按检查清单校验 SKILL.md，产出 ValidationReport
- render_report: 将校验结果输出到控制台

Example:
    >>> from clawskill import parse_frontmatter, validate_file, render_report
    >>>
    >>> parse_frontmatter("---\\nname: hello-world\\nversion: 1.0.0\\n---\\n")
    {'name': 'hello-world', 'version': '1.0.0'}
    >>>
    >>> report = validate_file("./skills/clawpost/SKILL.md")
    >>> render_report(report)
    >>> report.exit_code
    0
"""

from clawskill.core import (
    ParseError,
    SkillError,
    SkillManifest,
    ValidationError,
    ValidationReport,
    ValidatorConfig,
    parse_frontmatter,
    read_manifest,
    render_report,
    validate_document,
    validate_file,
)

__version__ = "0.1.0"
__all__ = [
    "ParseError",
    "SkillError",
    "SkillManifest",
    "ValidationError",
    "ValidationReport",
    "ValidatorConfig",
    "parse_frontmatter",
    "read_manifest",
    "render_report",
    "validate_document",
    "validate_file",
]
