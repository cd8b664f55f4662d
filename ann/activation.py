'''
Name: ANN Perceptron
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import numpy as np

class Activation:
    """
    活化函數的基礎類別。
    """
    def forward(self, inputs):
        """前向傳播"""
        raise NotImplementedError

    def backward(self, grad, output):
        """反向傳播，output 為 forward 的輸出值"""
        raise NotImplementedError

class Sigmoid(Activation):
    """
    Sigmoid 活化函數: s(x) = 1 / (1 + e^-x)，輸出範圍在 (0, 1) 之間。
    """
    def forward(self, inputs):
        """
        執行前向傳播。
        """
        return 1 / (1 + np.exp(-inputs))

    def backward(self, grad, output):
        """
        執行反向傳播。
        sigmoid 的導數可以直接由輸出值求得: s'(x) = s(x)(1 - s(x))
        """
        return grad * (output * (1 - output))
