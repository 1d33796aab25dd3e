"""日志工具"""
import logging

from rich.logging import RichHandler

from poker_hands.core.config import settings


def setup_logging(level: str = settings.log_level) -> None:
    """程序启动时调用一次"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
