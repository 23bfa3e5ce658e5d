"""
SKILL.md 校验器

按检查清单逐项校验 frontmatter 与正文，结果记录到 ValidationReport。
单项检查互不依赖，失败只计数，不中断后续检查；
只有找不到文件或 frontmatter 结构缺失时提前结束。
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from loguru import logger

from clawskill.core.config import ValidatorConfig
from clawskill.core.report import ValidationReport
from clawskill.core.skill_util.frontmatter import (
    has_opening_delimiter,
    parse_yaml_block,
    split_frontmatter,
)
from clawskill.core.skill_util.models import resolve_skill_md

NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9-]*$")
VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+")
URL_PATTERN = re.compile(r"^https?://")
ENV_VAR_PATTERN = re.compile(r"^[A-Z_][A-Z0-9_]*$")
TEMPLATE_PATTERN = re.compile(r"\{\{[^}]+\}\}")

LIST_REQUIREMENTS = (
    ("bins", "bin"),
    ("anyBins", "anyBin"),
    ("config", "config"),
)


def _is_set(value: object) -> bool:
    """字段已声明: 空列表和空映射也算已声明，None/False/空串不算"""
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def _check_name(fm: dict, report: ValidationReport) -> None:
    name = fm.get("name")
    if not name:
        report.failed("Missing required field: name")
    elif isinstance(name, str) and NAME_PATTERN.match(name):
        report.passed(f'name: "{name}"')
    else:
        report.failed(
            f'name "{name}" must be lowercase, URL-safe (^[a-z0-9][a-z0-9-]*$)'
        )


def _check_description(
    fm: dict, report: ValidationReport, config: ValidatorConfig
) -> None:
    description = fm.get("description")
    if not description:
        report.failed("Missing required field: description")
        return

    if not isinstance(description, str):
        report.failed("description must be a string")
        return

    if len(description) > config.max_description_length:
        report.warned(
            f"description is {len(description)} chars, keep it concise "
            f"(limit {config.max_description_length})"
        )

    limit = config.description_preview_length
    preview = description[:limit] + ("..." if len(description) > limit else "")
    report.passed(f'description: "{preview}"')


def _check_version(fm: dict, report: ValidationReport) -> None:
    version = fm.get("version")
    if not version:
        report.failed("Missing required field: version")
    elif isinstance(version, str) and VERSION_PATTERN.match(version):
        report.passed(f"version: {version}")
    else:
        report.failed(f'version "{version}" must be semver (e.g., 1.0.0)')


def _check_os(oc: dict, report: ValidationReport, config: ValidatorConfig) -> None:
    os_list = oc.get("os")
    if not _is_set(os_list):
        return

    if not isinstance(os_list, list):
        report.failed("os must be an array of strings")
        return

    for item in os_list:
        if item in config.valid_os:
            report.passed(f"os: {item}")
        else:
            report.failed(
                f'Unknown os "{item}", expected: {", ".join(config.valid_os)}'
            )


def _check_openclaw(oc: dict, report: ValidationReport, config: ValidatorConfig) -> None:
    requires = oc.get("requires")
    env = requires.get("env") if isinstance(requires, dict) else None

    if oc.get("emoji"):
        report.passed(f"emoji: {oc['emoji']}")
    else:
        report.warned("No emoji set, a display icon is recommended")

    homepage = oc.get("homepage")
    if homepage:
        if isinstance(homepage, str) and URL_PATTERN.match(homepage):
            report.passed(f"homepage: {homepage}")
        else:
            report.failed(f'homepage "{homepage}" must be a valid URL')

    if oc.get("primaryEnv"):
        report.passed(f"primaryEnv: {oc['primaryEnv']}")
    elif isinstance(env, list) and env:
        report.warned(
            "requires.env is set but primaryEnv is missing, declare the main "
            "credential var to avoid security flags"
        )

    if "always" in oc:
        report.info(f"always: {oc['always']}")

    if oc.get("skillKey"):
        report.info(f"skillKey: {oc['skillKey']}")

    _check_os(oc, report, config)


def _check_requires(oc: dict, report: ValidationReport) -> None:
    report.start_section("requires")

    requires = oc.get("requires")
    if not _is_set(requires):
        report.warned("No requires block, skill declares no runtime dependencies")
        return

    if not isinstance(requires, dict):
        report.failed("requires must be a mapping")
        return

    env = requires.get("env")
    if _is_set(env):
        if isinstance(env, list):
            for var in env:
                if isinstance(var, str) and ENV_VAR_PATTERN.match(var):
                    report.passed(f"env: {var}")
                else:
                    report.failed(
                        f'env var "{var}" should be uppercase with underscores '
                        "(e.g., MY_API_KEY)"
                    )
            primary = oc.get("primaryEnv")
            if primary and primary not in env:
                report.failed(f'primaryEnv "{primary}" is not listed in requires.env')
        else:
            report.failed("requires.env must be an array of strings")

    for key, label in LIST_REQUIREMENTS:
        values = requires.get(key)
        if not _is_set(values):
            continue
        if isinstance(values, list):
            for value in values:
                report.passed(f"{label}: {value}")
        else:
            report.failed(f"requires.{key} must be an array of strings")


def _check_install(oc: dict, report: ValidationReport, config: ValidatorConfig) -> None:
    install = oc.get("install")
    if not _is_set(install):
        return

    report.start_section("install")

    if not isinstance(install, list):
        report.failed("install must be an array")
        return

    for idx, spec in enumerate(install):
        kind = spec.get("kind") if isinstance(spec, dict) else None
        if not kind:
            report.failed(f'install[{idx}]: missing "kind"')
        elif kind not in config.install_kinds:
            report.failed(
                f'install[{idx}]: unknown kind "{kind}", expected: '
                f"{', '.join(config.install_kinds)}"
            )
        else:
            package = spec.get("formula") or spec.get("package") or "(unnamed)"
            report.passed(f"install[{idx}]: {kind} → {package}")


def _check_metadata(
    fm: dict, report: ValidationReport, config: ValidatorConfig
) -> Optional[dict]:
    """校验 metadata.openclaw，返回 openclaw 映射（不存在时返回 None）"""
    report.start_section("metadata.openclaw")

    metadata = fm.get("metadata")
    if not _is_set(metadata):
        report.warned(
            "No metadata field, skill will work but has no runtime requirements declared"
        )
        return None

    oc = metadata.get("openclaw") if isinstance(metadata, dict) else None
    if not _is_set(oc):
        report.warned('metadata exists but missing "openclaw" key')
        return None

    if not isinstance(oc, dict):
        report.failed("metadata.openclaw must be a mapping")
        return None

    _check_openclaw(oc, report, config)
    _check_requires(oc, report)
    _check_install(oc, report, config)
    return oc


def _check_body(
    body: str,
    oc: Optional[dict],
    report: ValidationReport,
    config: ValidatorConfig,
) -> None:
    report.start_section("Body Content")

    if not body.strip():
        report.failed("No content after frontmatter, the skill body is empty")
    else:
        report.passed(f"Body: {len(body.strip().splitlines())} lines")

    if "{{" not in body or "}}" not in body:
        return

    requires = oc.get("requires") if oc else None
    env = requires.get("env") if isinstance(requires, dict) else None

    for template in dict.fromkeys(TEMPLATE_PATTERN.findall(body)):
        var_name = template.strip("{}").strip()
        if (
            isinstance(env, list)
            and var_name not in env
            and var_name not in config.builtin_template_vars
        ):
            report.warned(
                f'Template var {template} used in body but "{var_name}" '
                "is not in requires.env"
            )
        else:
            report.passed(f"Template var: {template}")


def _check_size(size: int, report: ValidationReport, config: ValidatorConfig) -> None:
    size_kb = f"{size / 1024:.1f}"
    if size > config.max_file_size:
        limit_mb = config.max_file_size / (1024 * 1024)
        report.failed(f"File size {size_kb} KB exceeds {limit_mb:g} MB limit")
    else:
        report.passed(f"File size: {size_kb} KB")


def validate_document(
    content: str,
    path: Optional[Path] = None,
    size: Optional[int] = None,
    config: Optional[ValidatorConfig] = None,
) -> ValidationReport:
    """
    校验 SKILL.md 文本内容

    Args:
        content: 文档全文
        path: 文档路径，仅用于输出
        size: 文件字节数，提供时检查文件大小限制
        config: 校验配置，默认使用 ValidatorConfig()

    Returns:
        ValidationReport
    """
    config = config or ValidatorConfig()
    report = ValidationReport(path=path)

    report.start_section("Frontmatter")

    if not has_opening_delimiter(content):
        report.failed("File must start with --- (YAML frontmatter delimiter)")
        return report

    parts = split_frontmatter(content)
    if parts is None:
        report.failed("Could not parse frontmatter (missing closing ---)")
        return report
    report.passed("Frontmatter delimiters found")

    block, body = parts
    fm = parse_yaml_block(block)

    _check_name(fm, report)
    _check_description(fm, report, config)
    _check_version(fm, report)

    oc = _check_metadata(fm, report, config)
    _check_body(body, oc, report, config)

    if size is not None:
        _check_size(size, report, config)

    logger.debug(
        f"校验完成: {path or '<content>'} errors={report.errors} "
        f"warnings={report.warnings}"
    )
    return report


def validate_file(
    path: str | Path, config: Optional[ValidatorConfig] = None
) -> ValidationReport:
    """
    校验 SKILL.md 文件或技能目录

    Args:
        path: SKILL.md 路径或包含 SKILL.md 的技能目录
        config: 校验配置

    Returns:
        ValidationReport
    """
    config = config or ValidatorConfig()
    skill_md = resolve_skill_md(Path(path), config.skill_filenames).resolve()

    if not skill_md.is_file():
        report = ValidationReport(path=skill_md)
        report.failed(f"File not found: {skill_md}")
        return report

    logger.debug(f"读取技能文件: {skill_md}")
    content = skill_md.read_text(encoding="utf-8", errors="replace")
    return validate_document(
        content,
        path=skill_md,
        size=skill_md.stat().st_size,
        config=config,
    )
