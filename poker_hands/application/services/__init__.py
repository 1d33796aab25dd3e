"""应用服务"""
from .round_service import RoundResult, RoundService

__all__ = ['RoundResult', 'RoundService']
