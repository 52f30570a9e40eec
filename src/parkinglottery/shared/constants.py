"""
全局常量定义

存储项目级别的常量（路径、配置文件格式版本等），供所有模块使用
"""

import os
from pathlib import Path

# 项目根目录路径（src/parkinglottery/shared -> 项目根）
PROJECT_ROOT = Path(__file__).resolve().parents[3]


def get_path_from_env(env_var: str, default: Path) -> Path:
    """
    从环境变量获取路径，如果未设置则使用默认值

    Args:
        env_var: 环境变量名称
        default: 默认路径

    Returns:
        Path: 配置的路径
    """
    env_value = os.getenv(env_var)
    if env_value:
        return Path(env_value)
    return default


# 抽签配置覆盖文件路径（可选；不存在时使用内置默认配置）
LOTTERY_CONFIG_FILE = get_path_from_env(
    "PARKINGLOTTERY_CONFIG_FILE", PROJECT_ROOT / "lottery_config.yaml"
)

# 配置文件格式版本（仅支持该版本）
LOTTERY_CONFIG_VERSION = 1

# 日志格式
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
