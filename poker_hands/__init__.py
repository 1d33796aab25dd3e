"""五张牌型判定"""

__version__ = "0.1.0"
