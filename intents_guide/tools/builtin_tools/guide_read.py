"""
GuideReadTool — 参考文档读取工具

document 参数的 enum 随路由表动态生成；返回文档正文（Tier 3 注入）。
"""

from pydantic import BaseModel

from intents_guide.routing import DocumentNotFound, GuideResolver
from intents_guide.tools.base import BaseTool, ToolResult


class _PlaceholderParams(BaseModel):
    """占位 Pydantic Model，满足 BaseTool 抽象约束（实际 schema 由 schema() 覆盖）"""
    model_config = {"extra": "allow"}


class GuideReadTool(BaseTool):
    """读取单篇参考文档"""

    def __init__(self, resolver: GuideResolver) -> None:
        self._resolver = resolver

    @property
    def name(self) -> str:
        return "guide_read"

    @property
    def description(self) -> str:
        lines = ["读取一篇 App Intents 参考文档的全文。可用文档："]
        for doc in self._resolver.table.documents:
            lines.append(f"  - {doc.name}: {doc.description}")
        return "\n".join(lines)

    @property
    def params_model(self) -> type[BaseModel]:
        return _PlaceholderParams

    def schema(self) -> dict:
        """覆盖父类 schema()，动态构建 document enum"""
        names = [doc.name for doc in self._resolver.table.documents]
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": {
                        "document": {
                            "type": "string",
                            "description": "参考文档名称",
                            "enum": names,
                        },
                    },
                    "required": ["document"],
                },
            },
        }

    async def execute(self, args: dict) -> ToolResult:
        name = args.get("document", "")

        try:
            doc = self._resolver.read(name)
        except DocumentNotFound:
            return ToolResult.fail(f"未知文档: {name}，请检查 document 参数")

        if doc is None:
            return ToolResult.fail(f"文档 {name} 未随 Skill 安装")

        return ToolResult.success(document=doc.name, title=doc.title, content=doc.render())
