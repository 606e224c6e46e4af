"""
Skill 注册中心（Markdown-Based 版本）

只维护内存中的 Skill 索引（name → MarkdownSkill），启动时由 create_resolver 按名称取出绑定路由表。

多目录加载：
- from_directories([builtin_dir, user_dir]) 按顺序扫描
- 同名 Skill 后加载的覆盖先加载的（用户目录 > 内置目录）
"""

from __future__ import annotations

from pathlib import Path

import structlog

from intents_guide.skills.loader import MarkdownSkill, scan_skills_dir

log = structlog.get_logger()

# 内置 Skills 目录（项目自带）
BUILTIN_SKILLS_DIR = Path(__file__).parent / "builtin_skills"


class SkillRegistry:
    """Skill 注册中心（Markdown-Based）"""

    def __init__(self):
        self._skills: dict[str, MarkdownSkill] = {}

    @classmethod
    def from_directories(cls, skill_dirs: list[Path]) -> "SkillRegistry":
        """
        工厂方法：从多个目录扫描创建 SkillRegistry。

        按顺序加载，同名 Skill 后加载的覆盖先加载的。
        典型用法：from_directories([BUILTIN_SKILLS_DIR, user_dir])
        """
        registry = cls()
        for skill_dir in skill_dirs:
            if not skill_dir.exists():
                log.debug("Skill 目录不存在，跳过", path=str(skill_dir))
                continue
            for skill in scan_skills_dir(skill_dir):
                registry.register(skill)
        return registry

    def register(self, skill: MarkdownSkill) -> None:
        """注册单个 MarkdownSkill，同名覆盖"""
        if skill.name in self._skills:
            log.info("Skill 同名覆盖", skill=skill.name, tip="用户目录 Skill 覆盖内置 Skill")

        self._skills[skill.name] = skill
        log.debug("Skill 已注册", skill=skill.name, references=skill.reference_names)

    def get(self, name: str) -> MarkdownSkill | None:
        return self._skills.get(name)

    @property
    def skill_names(self) -> list[str]:
        return list(self._skills.keys())
