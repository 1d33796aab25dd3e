"""牌局服务 - 协调荷官、玩家和牌型判定"""
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from poker_hands.core.config import Settings, settings as default_settings
from poker_hands.core.logging_utils import get_logger
from poker_hands.domain.models.player import Player
from poker_hands.domain.services.dealer import Dealer

logger = get_logger(__name__)


@dataclass
class RoundResult:
    """一局的结果"""
    players: List[Player]
    winners: List[Player] = field(default_factory=list)

    @property
    def is_tie(self) -> bool:
        """最大牌型不止一人（不比踢脚）"""
        return len(self.winners) > 1

    def to_dict(self) -> dict:
        return {
            "players": [p.to_dict() for p in self.players],
            "winners": [p.name for p in self.winners],
        }


class RoundService:
    """牌局服务"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def play_round(
        self,
        player_names: Optional[Sequence[str]] = None,
        rng: Optional[random.Random] = None
    ) -> RoundResult:
        """洗牌、发牌并比较牌型"""
        names = player_names if player_names is not None else self.settings.player_names
        if rng is None:
            rng = random.Random(self.settings.seed)

        players = [Player(name=name) for name in names]
        dealer = Dealer(self.settings)
        dealer.shuffle(rng)
        dealer.deal(self.settings.cards_per_player, players)

        result = RoundResult(players=players, winners=self.find_winners(players))
        logger.info("Winners: %s", ", ".join(p.name for p in result.winners) or "-")
        return result

    @staticmethod
    def find_winners(players: List[Player]) -> List[Player]:
        """牌型最大的玩家（可能多人并列）"""
        winners: List[Player] = []
        for player in players:
            if not winners or player.hand.stronger_than(winners[0].hand):
                winners = [player]
            elif not player.hand.weaker_than(winners[0].hand):
                winners.append(player)
        return winners
