"""
配置模块
"""
from config.settings import Settings, settings
from config.logging_config import setup_logging

__all__ = [
    "Settings",
    "settings",
    "setup_logging",
]
