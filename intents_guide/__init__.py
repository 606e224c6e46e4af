"""
App Intents 参考指南：Skill 语料 + 任务路由表
"""

__version__ = "0.1.0"
