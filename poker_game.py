"""五张牌对局 - 彩色终端输出"""
import sys
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from poker_hands.application.services import RoundResult, RoundService
from poker_hands.core.config import Settings, settings as default_settings
from poker_hands.core.exceptions import PreconditionViolation
from poker_hands.core.logging_utils import get_logger, setup_logging
from poker_hands.domain.models.card import Card
from poker_hands.domain.models.hand import Hand
from poker_hands.domain.services.hand_classifier import HAND_SIZE

logger = get_logger(__name__)


class RoundPrinter:
    """把一局结果打印到终端"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def get_card_display(self, card: Card) -> Text:
        """获取牌的彩色显示"""
        if card.color == "red":
            return Text(str(card), style="bold red")
        return Text(str(card), style="bold white")

    def display_round(self, result: RoundResult):
        """显示所有玩家的手牌和牌型"""
        table = Table(title="发牌结果", show_header=True, header_style="bold cyan", border_style="blue")
        table.add_column("玩家", style="white", width=15)
        table.add_column("手牌", justify="center", width=24)
        table.add_column("牌型", style="green", width=12)

        for player in result.players:
            cards_text = Text()
            for card in player.hand.cards:
                cards_text.append_text(self.get_card_display(card))
                cards_text.append(" ")
            table.add_row(player.name, cards_text, player.hand.category.display_name)

        self.console.print(table)
        self.display_winners(result)

    def display_hand(self, hand: Hand):
        """显示单手牌的牌型"""
        hand_text = Text()
        for card in hand.cards:
            hand_text.append_text(self.get_card_display(card))
            hand_text.append(" ")
        hand_text.append(f"({hand.category.display_name})", style="cyan")
        self.console.print(Panel(hand_text, border_style="blue"))

    def display_winners(self, result: RoundResult):
        """显示赢家"""
        if not result.winners:
            return

        winner_text = Text()
        winner_text.append("🏆 ", style="yellow")
        winner_text.append(", ".join(p.name for p in result.winners), style="bold green")
        if result.is_tie:
            winner_text.append(" 平局 ", style="bold magenta")
        else:
            winner_text.append(" 获胜 ", style="bold magenta")
        winner_text.append(f"({result.winners[0].hand.category.display_name})", style="cyan")

        self.console.print(Panel(winner_text, border_style="yellow"))


def build_parser():
    """命令行参数"""
    import argparse

    parser = argparse.ArgumentParser(description='五张牌对局')
    parser.add_argument('--players', nargs='+', default=list(default_settings.player_names), help='玩家名字')
    parser.add_argument('--cards', type=int, default=default_settings.cards_per_player, help='每人发牌数')
    parser.add_argument('--shuffles', type=int, default=default_settings.shuffle_repetitions, help='洗牌遍数')
    parser.add_argument('--seed', type=int, default=None, help='随机数种子')
    parser.add_argument('--log-level', default=default_settings.log_level, help='日志级别')
    parser.add_argument('--hand', default=None, help='只判定给定的 5 张牌，例如 "A♦ K♦ Q♦ J♦ 10♦"')
    return parser


def settings_from_args(args) -> Settings:
    """从解析后的参数生成配置"""
    return Settings(
        shuffle_repetitions=args.shuffles,
        cards_per_player=args.cards,
        player_names=tuple(args.players),
        seed=args.seed,
        log_level=args.log_level.upper(),
    )


def build_settings(argv: Optional[List[str]] = None) -> Settings:
    """从命令行参数生成配置"""
    return settings_from_args(build_parser().parse_args(argv))


def parse_hand(text: str) -> Hand:
    """解析 5 张牌并判定牌型"""
    cards = Card.list_from_string(text)
    if len(cards) != HAND_SIZE:
        raise ValueError(f"Expected {HAND_SIZE} cards, got {len(cards)}")
    hand = Hand()
    for card in cards:
        hand.add_card(card)
    return hand


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    setup_logging(settings.log_level)

    if args.hand is not None:
        try:
            hand = parse_hand(args.hand)
        except ValueError as e:
            logger.error("Invalid hand: %s", e)
            return 2
        RoundPrinter(console).display_hand(hand)
        return 0

    try:
        result = RoundService(settings).play_round()
    except PreconditionViolation as e:
        logger.error("Deal aborted: %s", e)
        return 1

    RoundPrinter(console).display_round(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
