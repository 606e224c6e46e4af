"""
GuideOverviewTool — Skill 总览工具

返回 SKILL.md 正文（Tier 2 注入）：任务路由说明 + 各 Topic 的阅读顺序。
LLM 不确定该选哪个 Topic 时先读总览，再调用 guide_route / guide_read。
"""

from pydantic import BaseModel

from intents_guide.routing import GuideResolver
from intents_guide.tools.base import BaseTool, ToolResult


class _NoParams(BaseModel):
    pass


class GuideOverviewTool(BaseTool):
    """读取 Skill 总览"""

    def __init__(self, resolver: GuideResolver) -> None:
        self._resolver = resolver

    @property
    def name(self) -> str:
        return "guide_overview"

    @property
    def description(self) -> str:
        skill = self._resolver.skill
        return f"读取 {skill.name} 总览：{skill.description}。返回按开发者目标划分的阅读顺序。"

    @property
    def params_model(self) -> type[BaseModel]:
        return _NoParams

    async def execute(self, args: dict) -> ToolResult:
        skill = self._resolver.skill
        return ToolResult.success(skill=skill.name, instructions=skill.render_tool_result())
