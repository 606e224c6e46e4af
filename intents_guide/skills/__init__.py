"""
Skill 语料（Markdown-Based）

Skill 以目录 + SKILL.md 定义：
- Tier 1：frontmatter（name, description）→ 始终加载
- Tier 2：body（Markdown 正文，任务路由说明）→ 被调用时注入
- Tier 3：references/（参考文档）→ 按路由表顺序读取

新增参考文档只需在 references/ 下放入 .md 文件，并在路由表中登记。
"""

from intents_guide.skills.loader import MarkdownSkill, ReferenceDoc, load_skill_from_dir, scan_skills_dir
from intents_guide.skills.registry import BUILTIN_SKILLS_DIR, SkillRegistry

__all__ = [
    "BUILTIN_SKILLS_DIR",
    "MarkdownSkill",
    "ReferenceDoc",
    "SkillRegistry",
    "load_skill_from_dir",
    "scan_skills_dir",
]
