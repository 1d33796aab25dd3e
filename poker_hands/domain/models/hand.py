"""手牌模型"""
from typing import List

from poker_hands.domain.enums import HandCategory
from poker_hands.domain.models.card import Card
from poker_hands.domain.services.hand_classifier import HAND_SIZE, HandClassifier


class Hand:
    """手牌，每加入一张牌就重新判定牌型"""

    def __init__(self):
        self._cards: List[Card] = []
        self._category = HandCategory.HIGH_CARD

    def add_card(self, card: Card):
        """加入一张牌（没有移除操作）"""
        self._cards.append(card)
        # 只在正好 5 张时判定，其余情况一律视为高牌
        if len(self._cards) == HAND_SIZE:
            self._category = HandClassifier.classify(self._cards)
        else:
            self._category = HandCategory.HIGH_CARD

    @property
    def category(self) -> HandCategory:
        """当前牌型"""
        return self._category

    @property
    def cards(self) -> List[Card]:
        """手牌副本"""
        return self._cards.copy()

    def stronger_than(self, other: "Hand") -> bool:
        """牌型是否更大（同牌型不比踢脚）"""
        return self._category > other._category

    def weaker_than(self, other: "Hand") -> bool:
        """牌型是否更小（同牌型不比踢脚）"""
        return self._category < other._category

    def __lt__(self, other: "Hand") -> bool:
        return self.weaker_than(other)

    def __gt__(self, other: "Hand") -> bool:
        return self.stronger_than(other)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self):
        cards = " ".join(str(card) for card in self._cards)
        return f"{cards} ({self._category.display_name})"
