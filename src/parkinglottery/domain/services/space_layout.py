from __future__ import annotations

from typing import List

from parkinglottery.domain.models.lottery_config import LotteryConfig
from parkinglottery.domain.models.space import ParkingSpace, SpaceKind


def space_kind(config: LotteryConfig, number: int) -> SpaceKind:
    """
    获取指定车位号的类型（车位号从 1 开始）

    Raises:
        ValueError: 车位号不在 1..total_spaces 范围内
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValueError(f"车位号必须是整数：{number!r}")
    if not 1 <= number <= config.total_spaces:
        raise ValueError(f"车位号超出范围（1-{config.total_spaces}）：{number}")

    if number <= config.big_spaces_count:
        return SpaceKind.BIG
    return SpaceKind.STANDARD


def build_space_layout(config: LotteryConfig) -> List[ParkingSpace]:
    return [
        ParkingSpace(number=number, kind=space_kind(config, number))
        for number in range(1, config.total_spaces + 1)
    ]


def shared_candidates(config: LotteryConfig) -> List[str]:
    """第二轮候选中同时出现在第一轮的住户（按第二轮顺序）"""
    first_round = set(config.candidates)
    return [c for c in config.second_candidates if c in first_round]


def duplicate_candidates(candidates: tuple[str, ...]) -> List[str]:
    """同一轮内重复出现的候选（按首次重复出现的顺序，不去重校验）"""
    seen: set[str] = set()
    duplicates: List[str] = []
    for candidate in candidates:
        if candidate in seen and candidate not in duplicates:
            duplicates.append(candidate)
        seen.add(candidate)
    return duplicates
