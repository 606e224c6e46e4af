"""
任务路由：开发者目标（Topic）→ 有序参考文档列表

路由表是静态只读数据，lookup 是唯一核心操作：
    from intents_guide.routing import lookup
    lookup("first-intent")  # (DocumentRef(intent-fundamentals), DocumentRef(shortcuts-provider))
"""

from intents_guide.routing.errors import DocumentNotFound, RoutingError, TopicNotRecognized
from intents_guide.routing.resolver import GuideResolver, RoutedReading
from intents_guide.routing.schemas import TOPICS, DocumentRef, RoutingEntry, Topic
from intents_guide.routing.table import RoutingTable, get_routing_table, lookup

__all__ = [
    "TOPICS",
    "DocumentNotFound",
    "DocumentRef",
    "GuideResolver",
    "RoutedReading",
    "RoutingEntry",
    "RoutingError",
    "RoutingTable",
    "Topic",
    "TopicNotRecognized",
    "get_routing_table",
    "lookup",
]
