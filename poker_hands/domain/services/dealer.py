"""荷官服务"""
import random
from typing import List, Optional

from poker_hands.core.config import Settings, settings as default_settings
from poker_hands.core.exceptions import PreconditionViolation
from poker_hands.core.logging_utils import get_logger
from poker_hands.domain.enums import DeckKind
from poker_hands.domain.models.deck import Deck
from poker_hands.domain.models.player import Player

logger = get_logger(__name__)


class Dealer:
    """荷官，持有一副标准牌"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.deck = Deck.create(DeckKind.STANDARD)

    def shuffle(self, rng: Optional[random.Random] = None):
        """按配置的遍数洗牌"""
        self.deck.shuffle(self.settings.shuffle_repetitions, rng=rng)

    def deal(self, cards_per_player: int, players: List[Player]):
        """
        按座位轮流发牌

        牌按牌组当前顺序依次读取，不从牌组中移除。

        参数:
            cards_per_player: 每人发几张
            players: 玩家列表
        """
        to_deal = cards_per_player * len(players)
        deck_size = len(self.deck)
        if to_deal >= deck_size:
            raise PreconditionViolation(
                f"Cannot deal {to_deal} cards from a deck of {deck_size}"
            )

        dealt = 0
        for _ in range(cards_per_player):
            for player in players:
                player.hand.add_card(self.deck[dealt])
                dealt += 1
                logger.debug("%s: %s", player.name, player.hand)

        logger.info("Deal finished (%d cards to %d players)", dealt, len(players))
