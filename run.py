import logging
import sys
from pathlib import Path
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from parkinglottery.domain.models.lottery_config import LotteryConfig  # noqa: E402
from parkinglottery.domain.services.space_layout import (  # noqa: E402
    build_space_layout,
    shared_candidates,
)
from parkinglottery.infrastructure.config.lottery_config import (  # noqa: E402
    get_lottery_config,
    load_lottery_config,
)
from parkinglottery.shared.logger import set_global_log_level  # noqa: E402

logger = logging.getLogger(__name__)


def _resolve_config(config_path: Optional[Path]) -> LotteryConfig:
    if config_path is None:
        return get_lottery_config()
    if not config_path.exists():
        raise FileNotFoundError(f"未找到抽签配置文件：{config_path}")
    return load_lottery_config(config_path)


def format_config(config: LotteryConfig) -> str:
    """
    把抽签配置格式化为可读文本

    Args:
        config: 抽签配置

    Returns:
        多行文本，包含基本信息、两轮候选和车位分布
    """
    lines = [
        f"标题: {config.title}",
        f"主题色: {config.theme_color}",
        f"车位总数: {config.total_spaces}"
        f"（大车位 {config.big_spaces_count}，一般车位 {config.standard_spaces_count}）",
        f"第一轮候选 ({len(config.candidates)}): {', '.join(config.candidates)}",
        f"第二轮候选 ({len(config.second_candidates)}): "
        f"{', '.join(config.second_candidates)}",
    ]

    shared = shared_candidates(config)
    if shared:
        lines.append(f"两轮均参与: {', '.join(shared)}")

    lines.append("车位分布:")
    for space in build_space_layout(config):
        lines.append(f"  - {space}")
    return "\n".join(lines)


def show_config(config_path: Optional[Path] = None, log_level: str = "INFO") -> int:
    set_global_log_level(log_level)
    try:
        config = _resolve_config(config_path)
    except Exception as e:
        print(f"ERROR: 加载抽签配置失败: {e}", file=sys.stderr)
        return 1

    print(format_config(config))
    return 0


def validate_config(config_path: Optional[Path] = None, log_level: str = "INFO") -> int:
    set_global_log_level(log_level)
    try:
        config = _resolve_config(config_path)
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info(
        f"抽签配置有效: {config.title}，{config.total_spaces} 个车位，"
        f"{len(config.candidates)}/{len(config.second_candidates)} 名候选"
    )
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description="社区车位抽签配置工具")
    parser.add_argument(
        "command",
        choices=["show", "validate"],
        help="执行的命令: show(显示当前配置) 或 validate(校验配置)",
    )
    parser.add_argument(
        "--config", type=Path, help="抽签配置 YAML 文件路径，默认使用内置/环境变量配置"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="设置日志级别，默认为INFO",
    )

    args = parser.parse_args(argv)

    if args.command == "show":
        return show_config(args.config, args.log_level)
    return validate_config(args.config, args.log_level)


if __name__ == "__main__":
    raise SystemExit(main())
