'''
Name: ANN Perceptron
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''

class PerceptronError(Exception):
    """感知器相關錯誤的基礎類別。"""


class InvalidTopologyError(PerceptronError, ValueError):
    """層數少於 2，或某一層的神經元數量不是正整數。"""


class ShapeMismatchError(PerceptronError, ValueError):
    """權重向量 (或目標向量) 的長度與網路拓樸不符。"""


class LengthMismatchError(ShapeMismatchError):
    """輸入或目標向量的長度與對應層的神經元數量 (不含偏置) 不符。"""


class InvalidRangeError(PerceptronError, ValueError):
    """(min, max) 範圍不合法，也就是 min > max。"""


class ComputeRequiredError(PerceptronError, RuntimeError):
    """在執行任何前向傳播之前就呼叫了反向傳播。"""
