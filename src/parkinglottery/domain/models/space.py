from dataclasses import dataclass
from enum import Enum


class SpaceKind(Enum):
    """车位类型枚举"""

    BIG = "大車位"
    STANDARD = "一般車位"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParkingSpace:
    number: int
    kind: SpaceKind

    @property
    def is_big(self) -> bool:
        return self.kind is SpaceKind.BIG

    def __str__(self) -> str:
        return f"{self.number}号（{self.kind}）"
