"""分队引擎异常定义"""


class BalancerError(Exception):
    """分队引擎异常基类"""


class InsufficientParticipantsError(BalancerError):
    """参与者不足两人，无法分成两队"""

    def __init__(self, count: int, minimum: int = 2):
        self.count = count
        self.minimum = minimum
        super().__init__(f"至少需要 {minimum} 名参与者才能分队，当前仅有 {count} 名")


class InvalidParticipantError(BalancerError, ValueError):
    """参与者数据不合法（评分越界、负数场次、NaN等）"""


class RosterFileError(BalancerError):
    """名单文件缺失、无法解析或格式不符"""
