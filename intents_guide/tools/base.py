"""
工具抽象基类 + 标准化结果

BaseTool 约束：
1. name / description / params_model — 定义工具 Schema（Pydantic 生成）
2. execute — 返回 ToolResult

ToolResult：
- status: "success" | "error"
- data: 工具特定的结果数据
- error: 错误描述（仅 status="error" 时有值）
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel


@dataclass
class ToolResult:
    """工具执行标准化结果"""

    status: str  # "success" | "error"
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None

    def to_json(self) -> str:
        """序列化为 JSON 字符串（给 LLM 作为 tool result）"""
        if self.status == "error":
            return json.dumps(
                {"status": "error", "error": self.error, **self.data},
                ensure_ascii=False,
            )
        return json.dumps(
            {"status": "success", **self.data},
            ensure_ascii=False,
        )

    @classmethod
    def success(cls, **data: Any) -> "ToolResult":
        return cls(status="success", data=data)

    @classmethod
    def fail(cls, error: str, **data: Any) -> "ToolResult":
        """失败结果，data 用于附带提示信息（如可选 Topic 列表）"""
        return cls(status="error", error=error, data=data)


class BaseTool(ABC):
    """工具抽象基类"""

    @property
    @abstractmethod
    def name(self) -> str:
        """工具唯一名称"""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """工具描述（给 LLM 看）"""
        ...

    @property
    @abstractmethod
    def params_model(self) -> type[BaseModel]:
        """参数 Pydantic Model，用于自动生成 JSON Schema"""
        ...

    @abstractmethod
    async def execute(self, args: dict) -> ToolResult:
        ...

    def schema(self) -> dict:
        """生成 OpenAI function calling 格式的 tool schema"""
        json_schema = self.params_model.model_json_schema()

        required = json_schema.get("required", [])

        # 移除 Pydantic 附加的 title 字段
        properties = {}
        for key, prop in json_schema.get("properties", {}).items():
            properties[key] = {k: v for k, v in prop.items() if k != "title"}

        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": properties,
                    "required": required,
                },
            },
        }
