from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class ModifierKind(Enum):
    """保留/捨棄修正類型，值為指令中的字母"""
    KEEP_HIGHEST = "m"
    KEEP_LOWEST = "mm"
    DROP_HIGHEST = "sM"
    DROP_LOWEST = "sm"

    @classmethod
    def from_letters(cls, letters: str) -> Optional["ModifierKind"]:
        """依字母取得修正類型（區分大小寫），無法識別時返回 None"""
        for kind in cls:
            if kind.value == letters:
                return kind
        return None


@dataclass(frozen=True)
class Modifier:
    """骰子修正：保留或捨棄 count 顆"""
    kind: ModifierKind
    count: int


@dataclass(frozen=True)
class DiceSpec:
    """骰子配置"""
    count: int
    sides: int
    modifier: Optional[Modifier] = None


@dataclass(frozen=True)
class Literal:
    """常數項"""
    value: int


@dataclass(frozen=True)
class Term:
    """表達式中的一項，operator 為 + - * / 之一"""
    operator: str
    payload: Union[DiceSpec, Literal]

    @property
    def is_dice(self) -> bool:
        return isinstance(self.payload, DiceSpec)


@dataclass(frozen=True)
class RollOutcome:
    """原始擲骰結果（擲骰順序）"""
    raw_results: Tuple[int, ...]


@dataclass(frozen=True)
class KeptOutcome:
    """套用修正後保留的骰子"""
    selected: Tuple[int, ...]
    total: int


@dataclass(frozen=True)
class RollResult:
    """骰子結果"""
    total: int
    visual: str
    critical_message: str = ""
