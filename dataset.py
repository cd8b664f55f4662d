'''
Name: ANN Perceptron
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import numpy as np

def _generate_periodic(func, steps):
    if steps < 1:
        raise ValueError(f"steps 必須至少為 1，但收到 {steps}")
    # x 在 [0, 1] 之間等距取樣，對應到一個完整週期 [0, 2π]
    x = np.linspace(0, 1, steps + 1)
    # 把 [-1, 1] 的函數值正規化到 [0, 1]，才能落在 sigmoid 的輸出範圍內
    y = (func(2 * np.pi * x) + 1) / 2
    return x.reshape(-1, 1), y.reshape(-1, 1)

def generate_sine(steps=20):
    """
    產生正規化後的正弦函數資料表。

    參數:
        steps (int): 一個週期切成幾段，樣本數為 steps + 1。

    返回:
        tuple: (X, y)，形狀皆為 (steps + 1, 1)。
    """
    return _generate_periodic(np.sin, steps)

def generate_cosine(steps=20):
    """
    產生正規化後的餘弦函數資料表，格式同 generate_sine()。
    """
    return _generate_periodic(np.cos, steps)
