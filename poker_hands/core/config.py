"""配置"""
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class Settings:
    """应用配置"""
    # 发牌
    shuffle_repetitions: int = 1  # 每次洗牌的遍数
    cards_per_player: int = 5
    player_names: Tuple[str, ...] = ("Player 1", "Player 2")

    # 随机数种子，None 表示每局随机
    seed: Optional[int] = None

    # 日志
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


settings = Settings()
