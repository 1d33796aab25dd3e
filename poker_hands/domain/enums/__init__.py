"""领域层枚举定义"""
from enum import Enum, IntEnum


class Suit(Enum):
    """花色（无大小之分，只用于同花分组）"""
    HEARTS = "♥"
    CLUBS = "♣"
    DIAMONDS = "♦"
    SPADES = "♠"

    @property
    def color(self) -> str:
        """牌的颜色"""
        return "red" if self in (Suit.HEARTS, Suit.DIAMONDS) else "black"


class Rank(IntEnum):
    """牌点数（A 永远最大，不作为 1 使用）"""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def display(self) -> str:
        """显示字符"""
        return _RANK_DISPLAY[self]


_RANK_DISPLAY = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}


class HandCategory(IntEnum):
    """牌型等级（从小到大）"""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def display_name(self) -> str:
        """牌型名称"""
        names = {
            HandCategory.HIGH_CARD: "高牌",
            HandCategory.PAIR: "一对",
            HandCategory.TWO_PAIR: "两对",
            HandCategory.THREE_OF_A_KIND: "三条",
            HandCategory.STRAIGHT: "顺子",
            HandCategory.FLUSH: "同花",
            HandCategory.FULL_HOUSE: "葫芦",
            HandCategory.FOUR_OF_A_KIND: "四条",
            HandCategory.STRAIGHT_FLUSH: "同花顺",
            HandCategory.ROYAL_FLUSH: "皇家同花顺",
        }
        return names[self]


class DeckKind(Enum):
    """牌组类型"""
    EMPTY = "empty"
    STANDARD = "standard"
