"""
ValidatorConfig - 校验器配置数据模型

只负责定义校验阈值和取值范围，不包含任何校验逻辑。
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path



def _matches_default(default: object, value: object) -> bool:
    """配置值必须与默认值同类型: 整数字段不接受 bool，列表字段只接受字符串列表"""
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool)
    if isinstance(default, list):
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    return isinstance(value, type(default))


@dataclass
class ValidatorConfig:
    """SKILL.md 校验配置"""

    max_description_length: int = 200
    description_preview_length: int = 80
    max_file_size: int = 50 * 1024 * 1024
    valid_os: list[str] = field(default_factory=lambda: ["macos", "linux", "windows"])
    install_kinds: list[str] = field(default_factory=lambda: ["brew", "node", "go", "uv"])
    # 运行时注入的模板变量，无需在 requires.env 中声明
    builtin_template_vars: list[str] = field(default_factory=lambda: ["CLAW_API_URL"])
    skill_filenames: list[str] = field(default_factory=lambda: ["SKILL.md", "skill.md"])

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ValidatorConfig":
        """从字典构建配置，未知字段直接报错"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"未知的配置项: {', '.join(sorted(unknown))}")

        defaults = cls()
        for key, value in data.items():
            if not _matches_default(getattr(defaults, key), value):
                raise ValueError(f"配置项 {key} 类型错误: {value!r}")
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> "ValidatorConfig":
        """
        从 JSON 文件加载配置

        Args:
            path: 配置文件路径，只需包含要覆盖的字段

        Returns:
            ValidatorConfig
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ValueError(f"配置文件不存在: {path}")
        except json.JSONDecodeError as e:
            raise ValueError(f"配置文件不是合法 JSON: {path}: {e}")
        except OSError as e:
            raise ValueError(f"无法读取配置文件: {path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"配置文件顶层必须是对象: {path}")
        return cls.from_dict(data)
