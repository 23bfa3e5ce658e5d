"""
clawskill-validate 命令行测试
"""

import json

import pytest
from pathlib import Path

from clawskill.cli import main

SKILL_MD = """---
name: cli-skill
description: Skill used by CLI tests.
version: 1.0.0
metadata:
  openclaw:
    emoji: "🛠"
    requires:
      bins:
        - git
---

# CLI Skill

Run git.
"""


class TestCli:
    """测试命令行入口"""

    @pytest.fixture
    def skill_dir(self, tmp_path: Path) -> Path:
        skill_dir = tmp_path / "cli-skill"
        skill_dir.mkdir()
        (skill_dir / "SKILL.md").write_text(SKILL_MD, encoding="utf-8")
        return skill_dir

    def test_valid_file_exits_zero(self, skill_dir: Path, capsys):
        assert main([str(skill_dir / "SKILL.md")]) == 0

        out = capsys.readouterr().out
        assert "Validating:" in out
        assert "✓ Valid! 0 warning(s)" in out

    def test_directory_argument(self, skill_dir: Path, capsys):
        assert main([str(skill_dir)]) == 0
        assert str((skill_dir / "SKILL.md").resolve()) in capsys.readouterr().out

    def test_default_path_is_cwd_skill_md(self, skill_dir: Path, monkeypatch, capsys):
        monkeypatch.chdir(skill_dir)
        assert main([]) == 0

    def test_invalid_file_exits_one(self, tmp_path: Path, capsys):
        bad = tmp_path / "SKILL.md"
        bad.write_text("---\nname: Bad Name\n---\n", encoding="utf-8")

        assert main([str(bad)]) == 1
        assert "error(s)" in capsys.readouterr().out

    def test_missing_file_exits_one(self, tmp_path: Path, capsys):
        assert main([str(tmp_path / "nope.md")]) == 1
        assert "File not found" in capsys.readouterr().out

    def test_show_frontmatter(self, skill_dir: Path, capsys):
        assert main([str(skill_dir), "--show-frontmatter"]) == 0

        out = capsys.readouterr().out
        payload = out[out.index("{"):]
        data = json.loads(payload)
        assert data["name"] == "cli-skill"
        assert data["metadata"]["openclaw"]["requires"]["bins"] == ["git"]

    def test_config_override(self, skill_dir: Path, tmp_path: Path, capsys):
        config = tmp_path / "limits.json"
        config.write_text(json.dumps({"max_description_length": 10}))

        assert main([str(skill_dir), "--config", str(config)]) == 0
        assert "1 warning(s)" in capsys.readouterr().out

    def test_invalid_config_exits_two(self, skill_dir: Path, tmp_path: Path):
        config = tmp_path / "limits.json"
        config.write_text(json.dumps({"unknown": 1}))

        assert main([str(skill_dir), "--config", str(config)]) == 2

    def test_invalid_utf8_file(self, tmp_path: Path, capsys):
        """非 UTF-8 字节被替换后照常校验"""
        skill_md = tmp_path / "SKILL.md"
        skill_md.write_bytes(SKILL_MD.encode("utf-8").replace(b"Run git.", b"Run git \xe9."))

        assert main([str(skill_md), "--show-frontmatter"]) == 0
        assert "✓ Valid!" in capsys.readouterr().out

    def test_wrongly_typed_config_exits_two(self, skill_dir: Path, tmp_path: Path):
        config = tmp_path / "limits.json"
        config.write_text(json.dumps({"max_file_size": "big"}))

        assert main([str(skill_dir), "--config", str(config)]) == 2

    def test_config_directory_exits_two(self, skill_dir: Path, tmp_path: Path):
        assert main([str(skill_dir), "--config", str(tmp_path)]) == 2
