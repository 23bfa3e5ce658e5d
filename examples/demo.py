"""
clawskill 快速入门示例

流程:
1. 解析阶段: parse_frontmatter() 读取 SKILL.md 头部
2. 校验阶段: validate_file() 执行检查清单
3. 输出阶段: render_report() 打印结果

运行:
    uv run python examples/demo.py
    uv run python examples/demo.py --broken
"""

from __future__ import annotations

import argparse
import json
import tempfile
from pathlib import Path

from clawskill import parse_frontmatter, render_report, validate_file

EXAMPLE_SKILL = Path(__file__).resolve().parent / "skills" / "clawpost"

BROKEN_SKILL_MD = """---
name: Broken_Skill
description: |
  Block scalars are not preserved.
metadata:
  openclaw:
    homepage: clawpost.dev
    requires:
      env: [claw_api_key]
    install: [{"kind": "apt"}]
---
"""


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--broken",
        action="store_true",
        help="额外校验一个不合规的 SKILL.md",
    )
    args = parser.parse_args()

    content = (EXAMPLE_SKILL / "SKILL.md").read_text(encoding="utf-8")
    print("[frontmatter]")
    print(json.dumps(parse_frontmatter(content), ensure_ascii=False, indent=2))

    report = validate_file(EXAMPLE_SKILL)
    render_report(report)

    if args.broken:
        with tempfile.TemporaryDirectory() as tmpdir:
            skill_md = Path(tmpdir) / "SKILL.md"
            skill_md.write_text(BROKEN_SKILL_MD, encoding="utf-8")
            broken = validate_file(skill_md)
            render_report(broken)
            print(f"exit code: {broken.exit_code}")


if __name__ == "__main__":
    main()
