"""
路由解析：路由表 + 已加载 Skill → 有序阅读清单（含文档正文）

路由表只知道文档名，Skill 持有磁盘上的文档内容，两者在此汇合。
文档文件缺失不影响路由结果（路由表是权威），只在启动时告警。
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from intents_guide.routing.errors import TopicNotRecognized
from intents_guide.routing.schemas import DocumentRef
from intents_guide.routing.table import RoutingTable
from intents_guide.skills.loader import MarkdownSkill, ReferenceDoc

log = structlog.get_logger()


@dataclass(frozen=True)
class RoutedReading:
    """
    一次解析的结果。

    matched=False 表示 Topic 未识别，items 为全部文档（兜底，无优先级含义）。
    """
    topic: str
    matched: bool
    items: tuple[tuple[DocumentRef, ReferenceDoc | None], ...]
    goal: str | None = None

    @property
    def document_names(self) -> list[str]:
        return [ref.name for ref, _ in self.items]


class GuideResolver:
    """路由表与 Skill 语料的连接器"""

    def __init__(self, table: RoutingTable, skill: MarkdownSkill):
        self._table = table
        self._skill = skill

        missing = self.missing_documents()
        if missing:
            log.warning(
                "路由表引用的参考文档在磁盘上不存在",
                skill=skill.name,
                missing=[doc.name for doc in missing],
            )

    @property
    def table(self) -> RoutingTable:
        return self._table

    @property
    def skill(self) -> MarkdownSkill:
        return self._skill

    def missing_documents(self) -> list[DocumentRef]:
        """路由表中声明、但 Skill 目录下没有对应文件的文档"""
        return [doc for doc in self._table.documents if doc.name not in self._skill.references]

    def read(self, name: str) -> ReferenceDoc | None:
        """按文档名读取正文（DocumentNotFound 向上抛出）"""
        ref = self._table.document(name)
        return self._skill.references.get(ref.name)

    def resolve(self, topic: str) -> RoutedReading:
        """
        解析 Topic 为有序阅读清单。

        Raises:
            TopicNotRecognized: 直接透传路由表的异常
        """
        entry = self._table.entry(topic)
        return RoutedReading(
            topic=topic,
            matched=True,
            goal=entry.goal,
            items=self._attach(entry.documents),
        )

    def resolve_or_fallback(self, topic: str) -> RoutedReading:
        """Topic 未识别时返回全部文档，调用方据 matched 判断是否有针对性路由"""
        try:
            return self.resolve(topic)
        except TopicNotRecognized:
            log.info("Topic 未识别，返回全部文档", topic=topic)
            return RoutedReading(
                topic=topic,
                matched=False,
                items=self._attach(self._table.fallback()),
            )

    def _attach(self, refs: tuple[DocumentRef, ...]) -> tuple[tuple[DocumentRef, ReferenceDoc | None], ...]:
        return tuple((ref, self._skill.references.get(ref.name)) for ref in refs)
