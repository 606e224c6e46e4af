"""
控制台交互脚本：加载 Skill 语料，按 Topic 查询阅读清单

运行方式：
    python scripts/guide_console.py

支持命令：
    <topic>          — 查询该 Topic 的阅读顺序
    /overview        — 打印 SKILL.md 总览
    /topics          — 列出全部 Topic
    /docs            — 列出全部参考文档
    /read <document> — 打印文档全文
    /quit            — 退出
"""

import asyncio
import json
import sys
from pathlib import Path

from prompt_toolkit import PromptSession

# 确保项目根目录在 sys.path 中
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from intents_guide.config import get_settings
from intents_guide.observability.logging_config import setup_logging
from intents_guide.routing import GuideResolver
from intents_guide.tools.builtin_tools import create_builtin_registry, create_resolver

GRAY = "\033[90m"
YELLOW = "\033[93m"
RESET = "\033[0m"


def print_reading(resolver: GuideResolver, topic: str) -> None:
    reading = resolver.resolve_or_fallback(topic)
    if not reading.matched:
        print(f"{YELLOW}  未识别的 Topic: {topic}，暂无针对性路由，以下为全部文档{RESET}")
    else:
        print(f"  {reading.goal}")

    for i, (ref, doc) in enumerate(reading.items, start=1):
        marker = "" if doc else f" {YELLOW}(未安装){RESET}"
        print(f"  {i}. {ref.name}{marker}")
        print(f"{GRAY}     {ref.description}{RESET}")


async def main():
    settings = get_settings()
    setup_logging(env=settings.ENV, level=settings.LOG_LEVEL)

    resolver = create_resolver()
    tools = create_builtin_registry(resolver)

    print("=" * 60)
    print(f"  {settings.APP_NAME} 控制台")
    print("  输入 Topic 查询阅读顺序")
    print("  命令: /overview | /topics | /docs | /read <document> | /quit")
    print("=" * 60)

    pt_session = PromptSession()

    while True:
        try:
            user_input = (await pt_session.prompt_async("topic> ")).strip()
        except (EOFError, KeyboardInterrupt):
            print("\n再见！")
            break

        if not user_input:
            continue

        if user_input == "/quit":
            print("再见！")
            break
        elif user_input == "/overview":
            result = json.loads(await tools.execute("guide_overview", {}))
            print(result["instructions"])
        elif user_input == "/topics":
            for entry in resolver.table.entries:
                print(f"  {entry.topic}{GRAY}  {entry.goal}{RESET}")
        elif user_input == "/docs":
            for ref in resolver.table.documents:
                print(f"  {ref.name}{GRAY}  {ref.description}{RESET}")
        elif user_input.startswith("/read"):
            name = user_input.removeprefix("/read").strip()
            result = json.loads(await tools.execute("guide_read", {"document": name}))
            if result["status"] == "success":
                print(result["content"])
            else:
                print(f"{YELLOW}  {result['error']}{RESET}")
        elif user_input.startswith("/"):
            print(f"{YELLOW}  未知命令: {user_input}{RESET}")
        else:
            print_reading(resolver, user_input)


if __name__ == "__main__":
    asyncio.run(main())
