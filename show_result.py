'''
Name: ANN Perceptron
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import matplotlib.pyplot as plt
import numpy as np

def plot_loss_curve(error_history):
    """
    繪製訓練誤差曲線。

    參數:
        error_history (list): 包含每個 epoch 總誤差的列表。
    """
    plt.figure()
    plt.plot(error_history)
    plt.title("Training Error Curve")
    plt.xlabel("Epoch")
    plt.ylabel("Error")
    plt.grid(True)
    plt.show()

def show_result(trainer, X, y_true):
    """
    比較目標值與網路的預測值，並顯示總誤差。

    參數:
        trainer: 包含訓練好的感知器的 Trainer 物件。
        X (np.array): 輸入資料。
        y_true (np.array): 目標值。

    返回:
        float: 所有樣本的總誤差。
    """
    y_pred = trainer.predict(X)

    plt.figure(figsize=(8, 6))
    plt.title("Target vs. Prediction", fontsize=16)
    plt.plot(X[:, 0], y_true[:, 0], 'ro-', label='Target')
    plt.plot(X[:, 0], y_pred[:, 0], 'bx--', label='Prediction')
    plt.xlabel("x")
    plt.ylabel("y")
    plt.legend()
    plt.grid(True)
    plt.tight_layout()
    plt.show()

    # 計算並顯示總誤差
    total_error = float(0.5 * np.sum((y_true - y_pred) ** 2))
    print(f"Total error: {total_error:.6f}")
    return total_error
