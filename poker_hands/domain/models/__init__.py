"""领域模型"""
from .card import Card
from .deck import Deck
from .hand import Hand
from .player import Player

__all__ = ['Card', 'Deck', 'Hand', 'Player']
