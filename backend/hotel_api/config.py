"""
应用配置
从环境变量 / .env 读取配置
"""
from typing import List
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用设置"""

    # 应用基础配置
    APP_NAME: str = "Project Bolt Hotel Management API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 数据库配置
    DATABASE_URL: str = "sqlite:///./hotel.db"

    # 服务监听
    HOST: str = "0.0.0.0"
    PORT: int = 5001

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # 启动时写入演示用维修任务
    SEED_DEMO_DATA: bool = False

    model_config = ConfigDict(env_file=".env", case_sensitive=True)


# 全局设置实例
settings = Settings()
