"""
clawskill-validate 命令行入口

运行:
    clawskill-validate                     # 校验 ./SKILL.md
    clawskill-validate skills/clawpost/    # 校验技能目录
    clawskill-validate SKILL.md --show-frontmatter -v
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from clawskill.core.config import ValidatorConfig
from clawskill.core.report import render_report
from clawskill.core.skill_util.errors import ParseError
from clawskill.core.skill_util.models import SkillManifest, resolve_skill_md
from clawskill.core.validator import validate_file


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clawskill-validate",
        description="Validate a SKILL.md file against the skill manifest format.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="SKILL.md",
        help="SKILL.md 文件或技能目录，默认 ./SKILL.md",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON 配置文件，覆盖默认校验阈值",
    )
    parser.add_argument(
        "--show-frontmatter",
        action="store_true",
        help="以 JSON 输出解析后的 frontmatter",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="输出调试日志",
    )
    return parser


def _show_frontmatter(path: Path) -> None:
    content = path.read_text(encoding="utf-8", errors="replace")
    try:
        manifest = SkillManifest.from_document(content)
    except ParseError as e:
        logger.warning(f"无法输出 frontmatter: {e}")
        return
    print(json.dumps(manifest.frontmatter, ensure_ascii=False, indent=2))


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    config = ValidatorConfig()
    if args.config:
        try:
            config = ValidatorConfig.load(args.config)
        except ValueError as e:
            logger.error(str(e))
            return 2
        logger.info(f"使用配置: {args.config}")

    target = resolve_skill_md(Path(args.path), config.skill_filenames).resolve()
    report = validate_file(target, config)
    render_report(report)

    if args.show_frontmatter and target.is_file():
        _show_frontmatter(target)

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
