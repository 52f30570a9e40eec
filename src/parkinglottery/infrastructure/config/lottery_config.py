"""
抽签配置加载器

说明：
- 内置默认配置见 `DEFAULT_LOTTERY_CONFIG`
- 如存在 `lottery_config.yaml`（或环境变量 PARKINGLOTTERY_CONFIG_FILE 指向的文件），
  其中出现的字段会覆盖默认值；未出现的字段沿用默认值
- 本模块只读取配置，不写回文件
"""

from __future__ import annotations

import logging
from dataclasses import replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from parkinglottery.domain.models.lottery_config import (
    DEFAULT_LOTTERY_CONFIG,
    LotteryConfig,
)
from parkinglottery.domain.services.space_layout import duplicate_candidates
from parkinglottery.shared.constants import LOTTERY_CONFIG_FILE, LOTTERY_CONFIG_VERSION

logger = logging.getLogger(__name__)

# 兼容前端配置里的驼峰字段名
_FIELD_ALIASES = {
    "totalSpaces": "total_spaces",
    "bigSpacesCount": "big_spaces_count",
    "secondCandidates": "second_candidates",
    "themeColor": "theme_color",
}

_FIELDS = (
    "title",
    "total_spaces",
    "big_spaces_count",
    "candidates",
    "second_candidates",
    "theme_color",
)


class LotteryConfigError(Exception):
    """Lottery config error with user-facing message in args[0]."""


def _validate_str(value: object, *, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise LotteryConfigError(f"{label} 必须是非空字符串")
    return value.strip()


def _validate_int(value: object, *, label: str) -> int:
    if isinstance(value, bool):
        raise LotteryConfigError(f"{label} 必须是整数（不能是 bool）")

    if isinstance(value, int):
        return value

    if isinstance(value, str) and value.strip():
        try:
            return int(value.strip())
        except ValueError as e:
            raise LotteryConfigError(f"{label} 不是合法整数：{value!r}") from e

    raise LotteryConfigError(f"{label} 必须是整数")


def _validate_str_list(value: object, *, label: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise LotteryConfigError(f"{label} 必须是字符串列表")

    normalized = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise LotteryConfigError(f"{label} 包含非法项：{item!r}")
        normalized.append(item.strip())

    if not normalized:
        raise LotteryConfigError(f"{label} 不能为空")

    return tuple(normalized)


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except Exception as e:
        raise LotteryConfigError(f"读取抽签配置文件失败：{path}（{e}）") from e

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as e:
        raise LotteryConfigError(f"抽签配置 YAML 格式错误：{e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise LotteryConfigError("抽签配置文件根节点必须是 YAML mapping（dict）")

    return data


def _canonical_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = _FIELD_ALIASES.get(raw_key, raw_key)
        if key not in _FIELDS:
            raise LotteryConfigError(f"抽签配置包含未知字段：{raw_key!r}")
        if key in fields:
            raise LotteryConfigError(f"抽签配置字段重复：{raw_key!r}（与 {key} 冲突）")
        fields[key] = value
    return fields


def parse_lottery_config(
    data: Dict[str, Any], *, base: LotteryConfig = DEFAULT_LOTTERY_CONFIG
) -> LotteryConfig:
    """
    把 YAML mapping 归一化为 LotteryConfig。

    Args:
        data: 配置字典（可含 version 字段，出现时必须为 1）
        base: 未出现字段的默认值来源

    Raises:
        LotteryConfigError: 字段类型错误或记录不满足约束
    """
    data = dict(data)
    version = data.pop("version", LOTTERY_CONFIG_VERSION)
    if isinstance(version, bool) or version != LOTTERY_CONFIG_VERSION:
        raise LotteryConfigError(
            f"抽签配置版本不支持：{version!r}（仅支持 {LOTTERY_CONFIG_VERSION}）"
        )

    fields = _canonical_fields(data)

    overrides: Dict[str, Any] = {}
    if "title" in fields:
        overrides["title"] = _validate_str(fields["title"], label="title")
    for key in ("total_spaces", "big_spaces_count"):
        if key in fields:
            overrides[key] = _validate_int(fields[key], label=key)
    for key in ("candidates", "second_candidates"):
        if key in fields:
            overrides[key] = _validate_str_list(fields[key], label=key)
    if "theme_color" in fields:
        overrides["theme_color"] = _validate_str(
            fields["theme_color"], label="theme_color"
        )

    try:
        config = replace(base, **overrides)
    except ValueError as e:
        raise LotteryConfigError(f"抽签配置不合法：{e}") from e

    for label, candidates in (
        ("candidates", config.candidates),
        ("second_candidates", config.second_candidates),
    ):
        duplicates = duplicate_candidates(candidates)
        if duplicates:
            logger.warning(f"{label} 中存在重复候选: {', '.join(duplicates)}")

    return config


def load_lottery_config(path: Optional[Path] = None) -> LotteryConfig:
    """
    读取抽签配置（不缓存）。

    Args:
        path: 配置文件路径，默认为 LOTTERY_CONFIG_FILE

    Returns:
        文件不存在时返回内置默认配置，否则返回覆盖后的配置
    """
    config_path = LOTTERY_CONFIG_FILE if path is None else path

    if not config_path.exists():
        logger.debug(f"抽签配置文件不存在，使用内置默认配置: {config_path}")
        return DEFAULT_LOTTERY_CONFIG

    config = parse_lottery_config(_load_yaml(config_path))
    logger.info(f"已从 {config_path} 加载抽签配置")
    return config


@lru_cache(maxsize=1)
def get_lottery_config() -> LotteryConfig:
    """
    获取当前生效的抽签配置。

    Note:
        - 如需在运行时重新加载，可调用 `get_lottery_config.cache_clear()` 后再调用本函数。
    """
    return load_lottery_config()
