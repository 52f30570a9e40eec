from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from parkinglottery.domain.models.lottery_config import (
    DEFAULT_LOTTERY_CONFIG,
    LotteryConfig,
    is_valid_theme_color,
)


def _make(**overrides: Any) -> LotteryConfig:
    return dataclasses.replace(DEFAULT_LOTTERY_CONFIG, **overrides)


def test_default_config_matches_published_values() -> None:
    config = DEFAULT_LOTTERY_CONFIG
    assert config.title == "社區車位抽選系統"
    assert config.total_spaces == 12
    assert config.big_spaces_count == 4
    assert config.big_spaces_count <= config.total_spaces
    assert config.standard_spaces_count == 8
    assert len(config.candidates) == 10
    assert len(config.second_candidates) == 6
    assert config.candidates[0] == "70-2F"
    assert config.second_candidates[-1] == "82-7F"
    assert config.theme_color == "#2c3e50"
    assert is_valid_theme_color(config.theme_color)


def test_config_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_LOTTERY_CONFIG.total_spaces = 20  # type: ignore[misc]


def test_big_spaces_may_equal_total_or_be_zero() -> None:
    assert _make(big_spaces_count=12).standard_spaces_count == 0
    assert _make(big_spaces_count=0).standard_spaces_count == 12
    assert _make(total_spaces=0, big_spaces_count=0).total_spaces == 0


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"title": "  "}, "title"),
        ({"total_spaces": -1}, "total_spaces"),
        ({"big_spaces_count": True}, "big_spaces_count"),
        ({"big_spaces_count": 13}, "must not exceed"),
        ({"candidates": ()}, "candidates"),
        ({"candidates": ["70-2F"]}, "candidates"),
        ({"second_candidates": ("80-2F", " ")}, "second_candidates"),
        ({"theme_color": "2c3e50"}, "theme_color"),
        ({"theme_color": "#2c3e5"}, "theme_color"),
    ],
)
def test_invalid_records_are_rejected(overrides: dict[str, Any], message: str) -> None:
    with pytest.raises(ValueError) as exc:
        _make(**overrides)
    assert message in str(exc.value)


def test_second_round_may_overlap_and_repeat() -> None:
    config = _make(second_candidates=("70-2F", "70-2F"))
    assert config.second_candidates == ("70-2F", "70-2F")


def test_theme_color_accepts_short_and_uppercase_hex() -> None:
    assert is_valid_theme_color("#FFF")
    assert is_valid_theme_color("#2C3E50")
    assert not is_valid_theme_color("navy")
    assert not is_valid_theme_color(None)
