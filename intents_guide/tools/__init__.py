"""
工具系统：BaseTool 抽象基类 + ToolRegistry 注册中心 + 内置工具集
"""

from intents_guide.tools.base import BaseTool, ToolResult
from intents_guide.tools.registry import ToolRegistry

__all__ = ["BaseTool", "ToolResult", "ToolRegistry"]
