"""
扑克牌型业务异常定义
发牌前置条件不满足属于致命错误，调用方不应尝试恢复
"""


class PokerHandsError(Exception):
    """基础异常类"""
    pass


class PreconditionViolation(PokerHandsError):
    """前置条件不满足（例如要发的牌比牌组里的还多）"""
    pass
