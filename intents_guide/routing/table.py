"""
任务路由表：维护 Topic → 有序 DocumentRef 序列的静态映射

硬编码字典 (Code-as-Configuration)，与 SKILL.md 中 "Task-based routing" 一节一一对应。
进程启动时构建一次，之后只读：
- 内部存储为 MappingProxyType + tuple，不存在修改入口
- lookup 为纯函数式查表，多线程并发读取无需加锁
"""

from collections.abc import Iterable
from functools import lru_cache
from types import MappingProxyType

import structlog

from intents_guide.routing.errors import DocumentNotFound, TopicNotRecognized
from intents_guide.routing.schemas import TOPICS, DocumentRef, RoutingEntry

log = structlog.get_logger()

# ── 文档枚举（references/ 下每个文件一项，声明顺序即默认展示顺序） ──

_DOCUMENTS: dict[str, str] = {
    "intent-fundamentals": "AppIntent protocol, parameters, perform(), result types, dialog",
    "shortcuts-provider": "AppShortcutsProvider, phrases, parameterized shortcuts, discoverability",
    "entities-and-queries": "AppEntity, EntityQuery variants, AppEnum, identifiers and display",
    "spotlight-indexing": "IndexedEntity, CSSearchableIndex, attribute sets, index lifecycle",
    "siri-integration": "Siri invocation, voice phrases, disambiguation, confirmation flows",
    "apple-intelligence": "Assistant schemas, semantic understanding, visual intelligence hooks",
    "interactive-snippets": "Snippet views, buttons and toggles in snippets, result rendering",
    "intent-driven-architecture": "Sharing intents across app, widgets, controls and Siri",
    "migration-from-sirikit": "Replacing INIntent definitions with App Intents step by step",
    "testing-intents": "Unit testing perform(), queries, shortcuts and Siri phrases",
    "common-pitfalls": "Build errors, runtime failures and metadata extraction problems",
}

# ── 路由表（顺序即阅读优先级） ──

_ROUTES: dict[str, tuple[str, list[str]]] = {
    "first-intent": (
        "Create your first App Intent",
        ["intent-fundamentals", "shortcuts-provider"],
    ),
    "searchable-content": (
        "Make app content searchable and addressable",
        ["entities-and-queries", "spotlight-indexing", "siri-integration"],
    ),
    "assistant-integration": (
        "Integrate with Siri and Apple Intelligence",
        ["apple-intelligence", "siri-integration", "entities-and-queries"],
    ),
    "interactive-snippets": (
        "Build interactive snippets",
        ["interactive-snippets", "intent-fundamentals"],
    ),
    "shortcuts-and-phrases": (
        "Add App Shortcuts and spoken phrases",
        ["shortcuts-provider", "siri-integration"],
    ),
    "intent-driven-architecture": (
        "Structure the app around intents",
        ["intent-driven-architecture", "entities-and-queries"],
    ),
    "visual-intelligence": (
        "Support visual intelligence search",
        ["apple-intelligence", "entities-and-queries"],
    ),
    "sirikit-migration": (
        "Migrate from SiriKit",
        ["migration-from-sirikit", "intent-fundamentals"],
    ),
    "testing": (
        "Test App Intents",
        ["testing-intents", "common-pitfalls"],
    ),
    "build-and-runtime-errors": (
        "Fix build and runtime errors",
        ["common-pitfalls", "testing-intents"],
    ),
}


class RoutingTable:
    """只读路由表"""

    def __init__(self, documents: Iterable[DocumentRef], entries: Iterable[RoutingEntry]):
        docs: dict[str, DocumentRef] = {}
        for doc in documents:
            if doc.name in docs:
                raise ValueError(f"文档重复声明: {doc.name}")
            docs[doc.name] = doc

        routes: dict[str, RoutingEntry] = {}
        for entry in entries:
            if entry.topic in routes:
                raise ValueError(f"Topic 重复声明: {entry.topic}")
            # 引用完整性：entry 里的文档必须全部在枚举内，且内容一致
            for doc in entry.documents:
                if docs.get(doc.name) != doc:
                    raise ValueError(f"Topic {entry.topic} 引用了未声明的文档: {doc.name}")
            routes[entry.topic] = entry

        missing = [topic for topic in TOPICS if topic not in routes]
        if missing:
            raise ValueError(f"以下 Topic 缺少路由: {missing}")

        self._documents = MappingProxyType(docs)
        self._routes = MappingProxyType(routes)

    @classmethod
    def from_static(cls) -> "RoutingTable":
        """工厂方法：从模块内硬编码的静态数据构建"""
        documents = [DocumentRef(name=n, description=d) for n, d in _DOCUMENTS.items()]
        by_name = {doc.name: doc for doc in documents}
        entries = []
        for topic, (goal, names) in _ROUTES.items():
            try:
                refs = tuple(by_name[n] for n in names)
            except KeyError as e:
                raise ValueError(f"Topic {topic} 引用了未声明的文档: {e.args[0]}") from e
            entries.append(RoutingEntry(topic=topic, goal=goal, documents=refs))
        table = cls(documents, entries)
        log.debug("路由表已构建", topics=len(table.topics), documents=len(table.documents))
        return table

    def lookup(self, topic: str) -> tuple[DocumentRef, ...]:
        """
        根据 Topic 返回有序文档序列（第一项最相关）。

        Raises:
            TopicNotRecognized: Topic 不在预定义集合内，不返回任何默认结果
        """
        return self.entry(topic).documents

    def entry(self, topic: str) -> RoutingEntry:
        """返回 Topic 对应的完整路由项（非 str 输入同样视为未识别）"""
        if not isinstance(topic, str) or topic not in self._routes:
            raise TopicNotRecognized(topic, self.topics)
        return self._routes[topic]

    def document(self, name: str) -> DocumentRef:
        if not isinstance(name, str) or name not in self._documents:
            raise DocumentNotFound(name)
        return self._documents[name]

    def fallback(self) -> tuple[DocumentRef, ...]:
        """无匹配 Topic 时的兜底：全部文档（不分优先级，按声明顺序）"""
        return self.documents

    @property
    def topics(self) -> tuple[str, ...]:
        return tuple(self._routes.keys())

    @property
    def documents(self) -> tuple[DocumentRef, ...]:
        return tuple(self._documents.values())

    @property
    def entries(self) -> tuple[RoutingEntry, ...]:
        return tuple(self._routes.values())


@lru_cache
def get_routing_table() -> RoutingTable:
    """单例获取路由表（进程内只构建一次）"""
    return RoutingTable.from_static()


def lookup(topic: str) -> tuple[DocumentRef, ...]:
    """模块级快捷入口：等价于 get_routing_table().lookup(topic)"""
    return get_routing_table().lookup(topic)
