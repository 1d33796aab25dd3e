"""玩家模型"""
from dataclasses import dataclass, field

from poker_hands.domain.models.hand import Hand


@dataclass
class Player:
    """玩家"""
    name: str

    # 当前手牌
    hand: Hand = field(default_factory=Hand)

    def to_dict(self) -> dict:
        """转换为字典（用于显示）"""
        return {
            "name": self.name,
            "hand": [str(c) for c in self.hand.cards],
            "category": self.hand.category.display_name,
        }
