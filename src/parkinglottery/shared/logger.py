import logging
from typing import Union

from parkinglottery.shared.constants import LOG_FORMAT


def set_global_log_level(level: Union[str, int]) -> None:
    """
    设置全局日志级别

    Args:
        level: 日志级别，可以是字符串('DEBUG', 'INFO'等)或logging模块的级别常量

    Raises:
        ValueError: 未知的日志级别名称
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"未知的日志级别: {level!r}")
        level = resolved

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 没有处理器时挂一个控制台处理器
    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console_handler)

    for handler in root_logger.handlers:
        handler.setLevel(level)
