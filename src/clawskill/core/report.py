"""
ValidationReport - 校验结果与控制台输出

校验器只负责产出 Finding，输出格式统一在这里处理。
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO

from clawskill.core.skill_util.errors import ValidationError


class Level(str, Enum):
    """检查项结果级别"""

    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"
    INFO = "info"


SYMBOLS = {
    Level.PASS: "✓",
    Level.FAIL: "✗",
    Level.WARN: "⚠",
    Level.INFO: "ℹ",
}


@dataclass
class Finding:
    """单条检查结果"""

    level: Level
    message: str
    section: str = ""

    def __str__(self) -> str:
        return f"{SYMBOLS[self.level]} {self.message}"


@dataclass
class ValidationReport:
    """一次校验的全部结果"""

    path: Optional[Path] = None
    findings: list[Finding] = field(default_factory=list)
    section: str = ""

    def start_section(self, title: str) -> None:
        self.section = title

    def add(self, level: Level, message: str) -> None:
        self.findings.append(Finding(level, message, self.section))

    def passed(self, message: str) -> None:
        self.add(Level.PASS, message)

    def failed(self, message: str) -> None:
        self.add(Level.FAIL, message)

    def warned(self, message: str) -> None:
        self.add(Level.WARN, message)

    def info(self, message: str) -> None:
        self.add(Level.INFO, message)

    def by_level(self, level: Level) -> list[Finding]:
        return [f for f in self.findings if f.level is level]

    @property
    def errors(self) -> int:
        return len(self.by_level(Level.FAIL))

    @property
    def warnings(self) -> int:
        return len(self.by_level(Level.WARN))

    @property
    def ok(self) -> bool:
        return self.errors == 0

    @property
    def exit_code(self) -> int:
        """进程退出码: 0 = 无错误, 1 = 至少一个错误"""
        return 0 if self.ok else 1

    def raise_for_errors(self) -> None:
        """存在错误时抛出 ValidationError，携带所有失败信息"""
        if self.ok:
            return
        messages = [f.message for f in self.by_level(Level.FAIL)]
        name = self.path.name if self.path is not None else "SKILL.md"
        raise ValidationError(
            f"{name} 校验失败: {self.errors} error(s)", errors=messages
        )


def render_report(report: ValidationReport, stream: TextIO | None = None) -> None:
    """
    将校验结果输出到控制台

    Args:
        report: 校验结果
        stream: 输出流，默认 stdout
    """
    if stream is None:
        stream = sys.stdout

    target = report.path if report.path is not None else "<stdin>"
    stream.write(f"\nValidating: {target}\n")

    current = None
    for finding in report.findings:
        if finding.section != current:
            current = finding.section
            if current:
                stream.write(f"\n{current}\n")
        stream.write(f"  {finding}\n")

    stream.write(f"\n{'─' * 50}\n")
    if report.ok:
        stream.write(f"✓ Valid! {report.warnings} warning(s)\n\n")
    else:
        stream.write(
            f"✗ {report.errors} error(s), {report.warnings} warning(s)\n\n"
        )
