"""
车位抽签配置记录

整个抽签只依赖这一条不可变记录：标题、车位数量、两轮候选名单与主题色。
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# 十六进制颜色：#RGB 或 #RRGGBB
THEME_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_valid_theme_color(value: object) -> bool:
    return isinstance(value, str) and bool(THEME_COLOR_PATTERN.match(value))


@dataclass(frozen=True)
class LotteryConfig:
    title: str
    total_spaces: int
    # 前 big_spaces_count 个车位为大车位
    big_spaces_count: int
    candidates: tuple[str, ...]
    second_candidates: tuple[str, ...]
    theme_color: str

    def __post_init__(self) -> None:
        self.validate()

    @property
    def standard_spaces_count(self) -> int:
        return self.total_spaces - self.big_spaces_count

    def validate(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("title must be non-empty str")

        for label, value in (
            ("total_spaces", self.total_spaces),
            ("big_spaces_count", self.big_spaces_count),
        ):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{label} must be int >= 0, got {value!r}")

        if self.big_spaces_count > self.total_spaces:
            raise ValueError(
                f"big_spaces_count ({self.big_spaces_count}) must not exceed "
                f"total_spaces ({self.total_spaces})"
            )

        self._validate_candidates("candidates", self.candidates)
        self._validate_candidates("second_candidates", self.second_candidates)

        if not is_valid_theme_color(self.theme_color):
            raise ValueError(
                f"theme_color must be a hex color like #2c3e50, got {self.theme_color!r}"
            )

    @staticmethod
    def _validate_candidates(label: str, value: tuple[str, ...]) -> None:
        if not isinstance(value, tuple) or not value:
            raise ValueError(f"{label} must be a non-empty tuple")

        for item in value:
            if not isinstance(item, str) or not item.strip():
                raise ValueError(f"{label} contains invalid item: {item!r}")


DEFAULT_LOTTERY_CONFIG = LotteryConfig(
    title="社區車位抽選系統",
    total_spaces=12,
    big_spaces_count=4,
    candidates=(
        "70-2F",
        "70-3F",
        "70-4F",
        "72-5F",
        "72-6F",
        "74-8F",
        "74-9F",
        "76-10F",
        "76-11F",
        "78-12F",
    ),
    second_candidates=("70-2F", "72-5F", "74-8F", "80-2F", "80-5F", "82-7F"),
    theme_color="#2c3e50",
)
