'''
Name: ANN Perceptron
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import numpy as np

# 進度條函式庫
from tqdm import tqdm

class Trainer:
    """
    訓練器類別，負責執行感知器的訓練迴圈。
    每個樣本做一次前向與反向傳播 (線上學習)，不做批次累積。
    """
    def __init__(self, model, learning_rate=0.1, alpha=0.5):
        """
        初始化訓練器。

        參數:
            model (Perceptron): 要訓練的感知器。
            learning_rate (float): 學習率。
            alpha (float): 動量係數。
        """
        self.model = model
        self.learning_rate = learning_rate
        self.alpha = alpha

    @staticmethod
    def _check_samples(X, y):
        X = np.atleast_2d(np.asarray(X, dtype=float))
        y = np.atleast_2d(np.asarray(y, dtype=float))
        if X.shape[0] != y.shape[0]:
            raise ValueError(f"樣本數不符: X 有 {X.shape[0]} 筆，y 有 {y.shape[0]} 筆")
        return X, y

    def train(self, X_train, y_train, epochs, log_interval=1000):
        """
        執行訓練迴圈。

        參數:
            X_train (np.array): 訓練資料，形狀為 (樣本數, 輸入數)。
            y_train (np.array): 目標值，形狀為 (樣本數, 輸出數)。
            epochs (int): 訓練週期數。
            log_interval (int): 輸出日誌的間隔週期數。

        返回:
            list: 每個週期的總誤差 (每個樣本更新前量到的誤差總和)。
        """
        X_train, y_train = self._check_samples(X_train, y_train)

        error_history = []
        for epoch in tqdm(range(epochs), desc="Training Progress"):
            total_error = 0.0
            for inputs, targets in zip(X_train, y_train):
                total_error += self.model.train_step(
                    inputs, targets, learning_rate=self.learning_rate, alpha=self.alpha
                )
            error_history.append(total_error)

            if log_interval and (epoch + 1) % log_interval == 0:
                print(f"Epoch {epoch+1}/{epochs}, Error: {total_error:.6f}")

        return error_history

    def evaluate(self, X, y):
        """
        計算所有樣本的總誤差，不更新權重。
        """
        X, y = self._check_samples(X, y)
        return sum(self.model.compute_error(inputs, targets)[1] for inputs, targets in zip(X, y))

    def predict(self, X):
        """
        對每個樣本做前向傳播。

        返回:
            np.array: 形狀為 (樣本數, 輸出數)。
        """
        X = np.atleast_2d(np.asarray(X, dtype=float))
        return np.array([self.model.compute(inputs) for inputs in X])
