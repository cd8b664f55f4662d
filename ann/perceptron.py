'''
Name: ANN Perceptron
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import threading

import numpy as np

from .activation import Sigmoid
from .exceptions import (
    ComputeRequiredError,
    InvalidRangeError,
    InvalidTopologyError,
    LengthMismatchError,
    ShapeMismatchError,
)
from .loss import HalfSquaredError
from .optimizer import SGD

# 每一層的第 0 號神經元保留給偏置 (bias)，輸出永遠是 1.0
BIAS = 0


def _check_range(min_value, max_value):
    if min_value > max_value:
        raise InvalidRangeError(f"範圍不合法: min ({min_value}) > max ({max_value})")


class Perceptron:
    """
    多層感知器 (Multilayer Perceptron)，支援前向傳播與誤差反向傳播訓練。

    每一層都多保留一個偏置神經元 (索引 0)，其輸出固定為 1.0。
    連線可以從任何來源神經元 (包含偏置) 出發，但只會連到下一層的非偏置神經元。

    屬性:
        layer_sizes (list): 每層神經元數量 (已包含偏置)。
        weights (list of np.array): weights[l][src, dst] 為第 l 層 src 到第 l+1 層 dst 的權重，
            dst = 0 的欄位不會被使用，永遠是 0。
        weight_variations (list of np.array): 每條連線上一次的更新量 (動量項)。
        outputs (list of np.array): 最近一次前向傳播的每層輸出。
        gradients (list of np.array): 最近一次反向傳播的每層梯度。
        weight_bounds (tuple or None): 權重裁切範圍 (min, max)。
    """
    def __init__(self, *layer_sizes):
        """
        建構網路拓樸，並把權重初始化為 0。

        參數:
            layer_sizes: 由輸入層到輸出層的每層神經元數量 (不含偏置)，
                可以直接傳入多個整數，或傳入一個序列。
        """
        if len(layer_sizes) == 1 and not isinstance(layer_sizes[0], (int, np.integer)):
            layer_sizes = tuple(layer_sizes[0])

        if len(layer_sizes) < 2:
            raise InvalidTopologyError(f"至少需要兩層 (輸入層與輸出層)，但只有 {len(layer_sizes)} 層")
        for size in layer_sizes:
            if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
                raise InvalidTopologyError(f"每層的神經元數量必須是正整數: {size!r}")

        # +1 是為了偏置神經元
        self.layer_sizes = [int(size) + 1 for size in layer_sizes]
        self.n_layers = len(self.layer_sizes)
        self.n_inputs = self.layer_sizes[0] - 1
        self.n_outputs = self.layer_sizes[-1] - 1

        self.activation = Sigmoid()
        self.loss_fn = HalfSquaredError()

        self.outputs = [np.zeros(size) for size in self.layer_sizes]
        self.gradients = [np.zeros(size) for size in self.layer_sizes]
        for layer_output in self.outputs:
            layer_output[BIAS] = 1.0

        self.weights = [
            np.zeros((self.layer_sizes[i], self.layer_sizes[i + 1]))
            for i in range(self.n_layers - 1)
        ]
        self.weight_variations = [np.zeros_like(w) for w in self.weights]
        self.weight_bounds = None

        self.lock = threading.Lock()
        self._computed = False

    def __repr__(self):
        sizes = ", ".join(str(size - 1) for size in self.layer_sizes)
        return f"{self.__class__.__name__}({sizes})"

    def weight_count(self):
        """
        回傳連線總數 (不含連到偏置神經元的連線)。
        """
        return sum(w.shape[0] * (w.shape[1] - 1) for w in self.weights)

    def set_weights(self, flat):
        """
        由一維權重向量設定所有權重。

        順序為: 層 (遞增) -> 目標神經元 (遞增，跳過偏置) -> 來源神經元 (遞增)。
        動量項不會被重設。

        參數:
            flat (sequence of float): 長度必須等於 weight_count()。
        """
        flat = np.asarray(flat, dtype=float).ravel()
        if flat.size != self.weight_count():
            raise ShapeMismatchError(
                f"權重數量不符: 需要 {self.weight_count()} 個，但收到 {flat.size} 個"
            )

        offset = 0
        for w in self.weights:
            n_src, n_dst = w.shape[0], w.shape[1] - 1
            chunk = flat[offset:offset + n_src * n_dst]
            # 向量中是以目標神經元為外層，所以要轉置回 (src, dst)
            w[:, 1:] = chunk.reshape(n_dst, n_src).T
            offset += n_src * n_dst

    def get_weights(self):
        """
        回傳一維權重向量，順序與 set_weights() 相同。

        返回:
            np.array: 新配置的 float64 陣列。
        """
        return np.concatenate([w[:, 1:].T.ravel() for w in self.weights])

    def randomize_weights(self, min_weight, max_weight, rng=None):
        """
        以均勻分布 [min_weight, max_weight] 隨機設定每一個權重。

        參數:
            min_weight (float): 下界。
            max_weight (float): 上界。
            rng (np.random.Generator, optional): 亂數產生器，未指定時使用 np.random。
        """
        _check_range(min_weight, max_weight)
        uniform = rng.uniform if rng is not None else np.random.uniform
        for w in self.weights:
            w[:, 1:] = uniform(min_weight, max_weight, size=(w.shape[0], w.shape[1] - 1))

    def set_weight_bounds(self, min_weight, max_weight):
        """
        之後每一次更新權重時，都會把權重裁切到 [min_weight, max_weight]。
        """
        _check_range(min_weight, max_weight)
        self.weight_bounds = (float(min_weight), float(max_weight))

    def clear_weight_bounds(self):
        """取消權重裁切。"""
        self.weight_bounds = None

    def layer_outputs(self, layer):
        """
        回傳某一層最近一次前向傳播的輸出 (不含偏置) 的副本。
        """
        return self.outputs[layer][1:].copy()

    def compute(self, inputs):
        """
        執行前向傳播。

        參數:
            inputs (sequence of float): 輸入層的值，長度為 n_inputs。

        返回:
            np.array: 輸出層的值 (不含偏置)，長度為 n_outputs。
        """
        inputs = np.asarray(inputs, dtype=float).ravel()
        if inputs.size != self.n_inputs:
            raise LengthMismatchError(f"輸入長度不符: 需要 {self.n_inputs} 個，但收到 {inputs.size} 個")

        self.outputs[0][1:] = inputs
        for i, w in enumerate(self.weights):
            # 偏置的輸出是 1.0，所以加權總和裡已經包含了偏置權重
            total = self.outputs[i] @ w[:, 1:]
            self.outputs[i + 1][1:] = self.activation.forward(total)

        self._computed = True
        return self.outputs[-1][1:].copy()

    def compute_error(self, inputs, targets):
        """
        執行前向傳播並計算誤差 0.5 * Σ (t - o)^2。

        返回:
            tuple: (輸出值, 總誤差)
        """
        targets = np.asarray(targets, dtype=float).ravel()
        if targets.size != self.n_outputs:
            raise LengthMismatchError(f"目標長度不符: 需要 {self.n_outputs} 個，但收到 {targets.size} 個")

        outputs = self.compute(inputs)
        return outputs, self.loss_fn.loss(outputs, targets)

    def back_propagate(self, targets, learning_rate=0.1, alpha=0.5):
        """
        以最近一次前向傳播的結果執行反向傳播，並原地更新權重。

        參數:
            targets (sequence of float): 輸出層的目標值，長度為 n_outputs。
            learning_rate (float): 學習率。
            alpha (float): 動量係數。
        """
        targets = np.asarray(targets, dtype=float).ravel()
        if targets.size != self.n_outputs:
            raise LengthMismatchError(f"目標長度不符: 需要 {self.n_outputs} 個，但收到 {targets.size} 個")
        if not self._computed:
            raise ComputeRequiredError("必須先呼叫 compute() 才能執行反向傳播")

        # 1. 輸出層的梯度: -(t - o) * o * (1 - o)
        output = self.outputs[-1][1:]
        grad = self.loss_fn.grad(output, targets)
        self.gradients[-1][1:] = self.activation.backward(grad, output)

        # 2. 隱藏層的梯度，由後往前
        for layer in range(self.n_layers - 2, 0, -1):
            # 偏置神經元沒有任何連入的連線，不需要梯度
            downstream = self.weights[layer][1:, 1:] @ self.gradients[layer + 1][1:]
            self.gradients[layer][1:] = self.activation.backward(downstream, self.outputs[layer][1:])

        # 3. 更新權重，由後往前
        optimizer = SGD(learning_rate=learning_rate, momentum=alpha, bounds=self.weight_bounds)
        for layer in range(self.n_layers - 1, 0, -1):
            raw_grads = np.outer(self.outputs[layer - 1], self.gradients[layer][1:])
            optimizer.step(
                self.weights[layer - 1][:, 1:],
                self.weight_variations[layer - 1][:, 1:],
                raw_grads,
            )

    def train_step(self, inputs, targets, learning_rate=0.1, alpha=0.5):
        """
        一次完整的訓練步驟: 前向傳播、計算誤差、反向傳播。
        整個步驟期間會持有 self.lock，避免被其他執行緒的步驟插入。

        返回:
            float: 更新前的誤差。
        """
        with self.lock:
            _, error = self.compute_error(inputs, targets)
            self.back_propagate(targets, learning_rate=learning_rate, alpha=alpha)
        return error
