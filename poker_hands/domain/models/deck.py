"""牌组模型"""
import random
from typing import Iterator, List, Optional

from poker_hands.core.logging_utils import get_logger
from poker_hands.domain.enums import DeckKind, Rank, Suit
from poker_hands.domain.models.card import Card

logger = get_logger(__name__)


class Deck:
    """牌组（有序、可变）"""

    def __init__(self, kind: DeckKind = DeckKind.EMPTY):
        self._cards: List[Card] = []
        if kind == DeckKind.STANDARD:
            # 按点数优先的固定顺序生成 52 张
            for rank in Rank:
                for suit in Suit:
                    self.add(rank, suit)

    @classmethod
    def create(cls, kind: DeckKind) -> "Deck":
        """创建空牌组或标准 52 张牌组"""
        return cls(kind)

    def add(self, rank: Rank, suit: Suit) -> Card:
        """追加一张牌（不检查重复）"""
        card = Card(rank=rank, suit=suit)
        self._cards.append(card)
        return card

    def shuffle(self, repetitions: int = 1, rng: Optional[random.Random] = None):
        """洗牌，repetitions 为洗牌遍数"""
        if not self._cards:
            return
        rng = rng or random.Random()
        for _ in range(repetitions):
            rng.shuffle(self._cards)
        logger.debug("shuffled %d cards (%d passes)", len(self._cards), repetitions)

    def sort_descending(self):
        """按点数降序稳定排序，花色不参与比较"""
        self._cards.sort(key=lambda c: c.rank, reverse=True)

    @property
    def cards(self) -> List[Card]:
        """牌的副本"""
        return self._cards.copy()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __str__(self):
        return "\n".join(str(card) for card in self._cards)
