"""
内置工具集：加载 Skill 语料并注册总览 / 路由 / 读取工具

使用方式：
    from intents_guide.tools.builtin_tools import create_builtin_registry
    registry = create_builtin_registry()
"""

from intents_guide.config import get_settings
from intents_guide.routing import GuideResolver, get_routing_table
from intents_guide.skills import BUILTIN_SKILLS_DIR, SkillRegistry
from intents_guide.tools.builtin_tools.guide_overview import GuideOverviewTool
from intents_guide.tools.builtin_tools.guide_read import GuideReadTool
from intents_guide.tools.builtin_tools.guide_route import GuideRouteTool
from intents_guide.tools.registry import ToolRegistry


def create_resolver() -> GuideResolver:
    """
    多目录加载 Skill（内置 → 用户目录，同名用户覆盖内置），绑定路由表。

    Raises:
        RuntimeError: 配置的 Skill 不存在
    """
    settings = get_settings()
    skills = SkillRegistry.from_directories([BUILTIN_SKILLS_DIR, settings.USER_SKILLS_DIR])
    skill = skills.get(settings.SKILL_NAME)
    if skill is None:
        raise RuntimeError(f"Skill 未找到: {settings.SKILL_NAME}（已加载: {skills.skill_names}）")
    return GuideResolver(get_routing_table(), skill)


def create_builtin_registry(resolver: GuideResolver | None = None) -> ToolRegistry:
    """创建并注册所有内置工具的 Registry 实例"""
    resolver = resolver or create_resolver()
    registry = ToolRegistry()

    registry.register(GuideOverviewTool(resolver))
    registry.register(GuideRouteTool(resolver))
    registry.register(GuideReadTool(resolver))

    return registry
