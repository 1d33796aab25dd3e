"""核心模块"""
from .config import Settings, settings
from .exceptions import PokerHandsError, PreconditionViolation
from .logging_utils import get_logger, setup_logging

__all__ = [
    'Settings', 'settings',
    'PokerHandsError', 'PreconditionViolation',
    'get_logger', 'setup_logging',
]
