"""
路由表数据结构定义

- Topic：开发者目标分类（路由键），固定 10 个取值
- DocumentRef：参考文档标识（name + 内容描述）
- RoutingEntry：Topic → 有序 DocumentRef 序列（第一项优先阅读）

所有模型均为 frozen，路由表构建后不可变。
"""

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, field_validator

Topic = Literal[
    "first-intent",
    "searchable-content",
    "assistant-integration",
    "interactive-snippets",
    "shortcuts-and-phrases",
    "intent-driven-architecture",
    "visual-intelligence",
    "sirikit-migration",
    "testing",
    "build-and-runtime-errors",
]

# 声明顺序即对外枚举顺序
TOPICS: tuple[str, ...] = get_args(Topic)


class DocumentRef(BaseModel):
    """参考文档标识"""

    model_config = ConfigDict(frozen=True)

    name: str  # 文档名，同时是 references/ 下的文件名（不含 .md）
    description: str  # 文档内容描述


class RoutingEntry(BaseModel):
    """单条路由：一个 Topic 对应的有序阅读列表"""

    model_config = ConfigDict(frozen=True)

    topic: Topic
    goal: str  # 面向人的目标描述，如 "Create your first App Intent"
    documents: tuple[DocumentRef, ...]

    @field_validator("documents")
    @classmethod
    def _check_documents(cls, value: tuple[DocumentRef, ...]) -> tuple[DocumentRef, ...]:
        if not value:
            raise ValueError("RoutingEntry 至少需要一个 DocumentRef")
        names = [doc.name for doc in value]
        if len(set(names)) != len(names):
            raise ValueError(f"RoutingEntry 中存在重复文档: {names}")
        return value

    @property
    def document_names(self) -> list[str]:
        return [doc.name for doc in self.documents]
