"""
全局配置模块：通过 pydantic-settings 读取 .env 环境变量
"""

from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用全局配置，从 .env 文件加载"""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Skill 语料 ──
    SKILL_NAME: str = "app-intents"  # 路由表绑定的 Skill 名称
    USER_SKILLS_DIR: Path = Path.home() / ".intents-guide" / "skills"  # 用户自定义 Skill（覆盖内置）

    # ── 日志 ──
    LOG_LEVEL: str = "INFO"

    # ── 应用 ──
    ENV: str = "development"  # development | production
    APP_NAME: str = "intents-guide"

    @model_validator(mode="after")
    def _check_log_level(self) -> "Settings":
        """LOG_LEVEL 必须是 logging 标准级别名"""
        level = self.LOG_LEVEL.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL 非法: {self.LOG_LEVEL}")
        self.LOG_LEVEL = level
        return self


@lru_cache
def get_settings() -> Settings:
    """单例获取配置（带缓存）"""
    return Settings()
