"""扑克牌模型"""
from dataclasses import dataclass
from typing import List

from poker_hands.domain.enums import Rank, Suit


@dataclass(frozen=True)
class Card:
    """扑克牌（点数 + 花色，不可变）"""
    rank: Rank
    suit: Suit

    @property
    def color(self) -> str:
        """牌的颜色"""
        return self.suit.color

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """
        解析 '10♠'、'A♥' 这样的字符串

        参数:
            s: 点数字符 + 花色符号
        返回:
            Card: 对应的牌
        """
        s = s.strip()
        rank_str, suit_str = s[:-1], s[-1:]
        for rank in Rank:
            if rank.display == rank_str:
                return cls(rank=rank, suit=Suit(suit_str))
        raise ValueError(f"Invalid card: {s!r}")

    @classmethod
    def list_from_string(cls, s: str) -> List["Card"]:
        """解析空格分隔的多张牌"""
        return [cls.from_string(part) for part in s.split()]

    def __str__(self):
        return f"{self.rank.display}{self.suit.value}"

    def __repr__(self):
        return f"Card({self.rank.display}{self.suit.value})"
