"""手牌牌型判定服务

只处理正好 5 张牌，不做 7 选 5，也不比踢脚。
判定完全基于点数/花色直方图和连续性检查，不查表、不穷举。

已知限制：
    - A 永远是最大的牌，A-2-3-4-5 不算顺子
    - 同牌型之间不区分大小
"""
import logging
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Sequence, Tuple

from poker_hands.core.logging_utils import get_logger
from poker_hands.domain.enums import HandCategory, Rank, Suit

if TYPE_CHECKING:
    from poker_hands.domain.models.card import Card

logger = get_logger(__name__)

HAND_SIZE = 5

ROYAL_RANKS = frozenset([Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE])


@dataclass(frozen=True, eq=False)
class HandFeatures:
    """判定牌型所需的统计信息"""
    rank_counts: Dict[Rank, int]
    suit_counts: Dict[Suit, int]
    in_sequence: bool
    is_flush: bool
    pairs: int  # 各点数 count // 2 之和

    @classmethod
    def from_cards(cls, cards: Sequence["Card"]) -> "HandFeatures":
        """从 5 张牌计算统计信息"""
        rank_counts = Counter(card.rank for card in cards)
        suit_counts = Counter(card.suit for card in cards)

        # 按点数降序稳定排序
        sorted_cards = sorted(cards, key=lambda c: c.rank, reverse=True)

        # 相邻两张点数差必须正好为 1
        in_sequence = all(
            a.rank - b.rank == 1 for a, b in zip(sorted_cards, sorted_cards[1:])
        )
        is_flush = suit_counts[sorted_cards[0].suit] == HAND_SIZE
        pairs = sum(count // 2 for count in rank_counts.values())

        return cls(
            rank_counts={rank: rank_counts.get(rank, 0) for rank in Rank},
            suit_counts={suit: suit_counts.get(suit, 0) for suit in Suit},
            in_sequence=in_sequence,
            is_flush=is_flush,
            pairs=pairs,
        )

    def ranks_with_count(self, count: int) -> List[Rank]:
        """出现次数正好为 count 的点数"""
        return [rank for rank, n in self.rank_counts.items() if n == count]

    @property
    def has_four(self) -> bool:
        return bool(self.ranks_with_count(4))

    @property
    def has_three(self) -> bool:
        return bool(self.ranks_with_count(3))

    @property
    def pair_ranks(self) -> int:
        """正好成对的点数个数"""
        return len(self.ranks_with_count(2))

    @property
    def is_royal(self) -> bool:
        """10 J Q K A 各一张"""
        return all(
            self.rank_counts[rank] == (1 if rank in ROYAL_RANKS else 0)
            for rank in Rank
        )


def _royal_flush(f: HandFeatures) -> bool:
    return f.is_flush and f.is_royal


def _straight_flush(f: HandFeatures) -> bool:
    return f.in_sequence and f.is_flush and not _royal_flush(f)


def _four_of_a_kind(f: HandFeatures) -> bool:
    return f.has_four


def _full_house(f: HandFeatures) -> bool:
    return f.has_three and f.pair_ranks == 1


def _flush(f: HandFeatures) -> bool:
    return f.is_flush and not f.in_sequence


def _straight(f: HandFeatures) -> bool:
    return f.in_sequence and not f.is_flush


def _three_of_a_kind(f: HandFeatures) -> bool:
    return f.has_three and f.pair_ranks == 0


def _two_pair(f: HandFeatures) -> bool:
    return f.pairs == 2 and not f.has_three and not f.has_four


def _pair(f: HandFeatures) -> bool:
    return f.pair_ranks == 1 and not f.has_three


# 按优先级排列，第一个命中的即为结果
RULES: Tuple[Tuple[HandCategory, Callable[[HandFeatures], bool]], ...] = (
    (HandCategory.ROYAL_FLUSH, _royal_flush),
    (HandCategory.STRAIGHT_FLUSH, _straight_flush),
    (HandCategory.FOUR_OF_A_KIND, _four_of_a_kind),
    (HandCategory.FULL_HOUSE, _full_house),
    (HandCategory.FLUSH, _flush),
    (HandCategory.STRAIGHT, _straight),
    (HandCategory.THREE_OF_A_KIND, _three_of_a_kind),
    (HandCategory.TWO_PAIR, _two_pair),
    (HandCategory.PAIR, _pair),
)


class HandClassifier:
    """手牌牌型判定器"""

    @staticmethod
    def classify(cards: Sequence["Card"]) -> HandCategory:
        """
        判定 5 张牌的牌型

        参数:
            cards: 正好 5 张牌（调用方保证，不做校验）
        返回:
            HandCategory: 牌型
        """
        features = HandFeatures.from_cards(cards)
        if logger.isEnabledFor(logging.DEBUG):
            HandClassifier._log_features(features)

        for category, matches in RULES:
            if matches(features):
                return category
        return HandCategory.HIGH_CARD

    @staticmethod
    def matching_categories(cards: Sequence["Card"]) -> List[HandCategory]:
        """所有命中的牌型（不考虑优先级，用于检查规则互斥）"""
        features = HandFeatures.from_cards(cards)
        matched = [category for category, matches in RULES if matches(features)]
        return matched or [HandCategory.HIGH_CARD]

    @staticmethod
    def _log_features(features: HandFeatures):
        ranks = "".join(f"[{features.rank_counts[r]}]" for r in Rank)
        suits = "".join(f"[{features.suit_counts[s]}]" for s in Suit)
        logger.debug(
            "ranks=%s suits=%s pairs=%d four=%s three=%s sequential=%s flush=%s",
            ranks, suits, features.pairs, features.has_four, features.has_three,
            features.in_sequence, features.is_flush,
        )
