"""
GuideRouteTool — 任务路由工具

LLM 先根据用户目标挑选最接近的 Topic，再调用 guide_route(topic=...)，
拿到有序文档列表后按顺序调用 guide_read 阅读。

Topic 不在预定义集合内时返回错误，并附上可选 Topic 和全部文档名，
由 LLM 自行改选 Topic 或直接浏览全部文档。
"""

from pydantic import BaseModel, Field

from intents_guide.routing import GuideResolver, Topic, TopicNotRecognized
from intents_guide.tools.base import BaseTool, ToolResult


class GuideRouteParams(BaseModel):
    topic: Topic = Field(description="开发者目标对应的 Topic")


class GuideRouteTool(BaseTool):
    """任务路由：Topic → 有序参考文档列表"""

    def __init__(self, resolver: GuideResolver) -> None:
        self._resolver = resolver

    @property
    def name(self) -> str:
        return "guide_route"

    @property
    def description(self) -> str:
        lines = [
            "根据开发者目标返回应阅读的 App Intents 参考文档（按优先级排序，第一篇最相关）。",
            "请从下列 Topic 中选择最接近用户需求的一个：",
        ]
        for entry in self._resolver.table.entries:
            lines.append(f"  - {entry.topic}: {entry.goal}")
        return "\n".join(lines)

    @property
    def params_model(self) -> type[BaseModel]:
        return GuideRouteParams

    async def execute(self, args: dict) -> ToolResult:
        topic = args.get("topic", "")
        table = self._resolver.table

        try:
            entry = table.entry(topic)
        except TopicNotRecognized as e:
            return ToolResult.fail(
                f"未识别的 Topic: {topic}，暂无针对性路由",
                topics=list(e.known_topics),
                documents=[doc.name for doc in table.fallback()],
            )

        return ToolResult.success(
            topic=entry.topic,
            goal=entry.goal,
            documents=[
                {"name": doc.name, "description": doc.description}
                for doc in entry.documents
            ],
        )
