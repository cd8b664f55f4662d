'''
Name: ANN Perceptron
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''

'''
Loss function
Half sum of squared errors: 0.5 * sum((target - output)^2)
'''
import numpy as np

class Loss:
    def loss(self, predicted, actual):
        raise NotImplementedError("loss() 尚未實作")

    def grad(self, predicted, actual):
        raise NotImplementedError("grad() 尚未實作")

class HalfSquaredError(Loss):
    """
    平方誤差總和的一半，E = 0.5 * Σ (t - o)^2。
    乘上 0.5 是為了讓梯度剛好等於 (o - t)。
    """
    def loss(self, predicted, actual):
        """
        計算誤差，回傳 Python float。
        """
        diff = np.asarray(actual, dtype=float) - np.asarray(predicted, dtype=float)
        return float(0.5 * np.sum(diff ** 2))

    def grad(self, predicted, actual):
        """
        計算誤差對輸出的梯度: dE/do = -(t - o)
        """
        return -(np.asarray(actual, dtype=float) - np.asarray(predicted, dtype=float))
