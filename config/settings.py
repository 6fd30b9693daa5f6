"""
全局配置模块
"""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """FSM 库全局配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 项目路径
    PROJECT_ROOT: Path = Path(__file__).parent.parent

    # FSM 配置
    FSM_STRICT_INITIAL: bool = Field(
        default=False, description="构造时校验初始状态是否已声明"
    )
    FSM_CONFIG_PATH: Optional[Path] = Field(
        default=None, description="默认 FSM 配置文件路径 (YAML)"
    )

    # 日志配置
    LOG_LEVEL: str = Field(default="INFO", description="日志级别")
    LOG_FORMAT: str = Field(default="text", description="日志格式: text, json")
    LOG_FILE: Optional[Path] = Field(default=None, description="日志文件路径")


# 全局配置实例
settings = Settings()
