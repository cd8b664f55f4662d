'''
Name: ANN Perceptron
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import numpy as np

class Optimizer:
    """優化器的基礎類別"""
    def __init__(self, learning_rate):
        self.lr = learning_rate

    def step(self, weights, variations, grads):
        """更新一組權重"""
        raise NotImplementedError

class SGD(Optimizer):
    """
    梯度下降 (Gradient Descent) 搭配動量 (Momentum)。

    每條連線的更新量:
        variation = -(1 - momentum) * lr * grad + momentum * 上一次的 variation
    新的梯度步伐與上一次的更新量依 momentum 做加權混合。
    """
    def __init__(self, learning_rate=0.1, momentum=0.5, bounds=None):
        """
        參數:
            learning_rate (float): 學習率。
            momentum (float): 動量係數 (alpha)。
            bounds (tuple, optional): (min, max)，更新後把權重裁切到此範圍內。
        """
        super().__init__(learning_rate)
        self.momentum = momentum
        self.bounds = bounds

    def step(self, weights, variations, grads):
        """
        原地 (in-place) 更新權重與更新量。

        參數:
            weights (np.array): 要更新的權重，可以是 view。
            variations (np.array): 上一次的更新量，形狀與 weights 相同，會被覆寫。
            grads (np.array): 誤差對每個權重的梯度。
        """
        variations[...] = -(1 - self.momentum) * self.lr * grads + self.momentum * variations
        weights += variations

        if self.bounds is not None:
            # 會把 array 中的每個元素壓在範圍 [min_value, max_value] 之內
            np.clip(weights, self.bounds[0], self.bounds[1], out=weights)
