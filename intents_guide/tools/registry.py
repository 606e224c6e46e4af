"""
工具注册中心：统一管理工具的注册、Schema 获取和执行分发

内置工具都是内存读取，不做超时包装；execute 只负责把异常收敛为 ToolResult JSON。
"""

import asyncio

import structlog

from intents_guide.tools.base import BaseTool, ToolResult

log = structlog.get_logger()


class ToolRegistry:
    """工具注册中心"""

    def __init__(self):
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        self._tools[tool.name] = tool
        log.debug("工具已注册", tool=tool.name)

    def get_all_schemas(self) -> list[dict]:
        """获取所有已注册工具的 OpenAI function calling schema"""
        return [tool.schema() for tool in self._tools.values()]

    def get_schemas(self, allowed_tools: list[str]) -> list[dict]:
        """获取指定工具的 schema（按需过滤）"""
        return [
            self._tools[name].schema()
            for name in allowed_tools
            if name in self._tools
        ]

    async def execute(self, name: str, arguments: dict) -> str:
        """
        执行工具，返回 JSON 字符串结果。

        - 成功: {"status": "success", ...data}
        - 失败: {"status": "error", "error": "..."}
        """
        tool = self._tools.get(name)
        if not tool:
            return ToolResult.fail(f"未知工具: {name}", tools=self.tool_names).to_json()

        if not isinstance(arguments, dict):
            return ToolResult.fail(f"工具 {name} 的参数必须是 JSON 对象").to_json()

        try:
            result = await tool.execute(arguments)
        except asyncio.CancelledError:
            # 系统级中断信号，必须向上传播
            log.warning("工具执行被取消", tool=name)
            raise
        except Exception as e:
            log.error("工具执行异常", tool=name, error=str(e), exc_info=True)
            return ToolResult.fail(f"工具执行异常: {e}").to_json()
        return result.to_json()

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools.keys())

    @property
    def tool_count(self) -> int:
        return len(self._tools)
