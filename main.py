'''
Name: ANN Perceptron
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import argparse
import numpy as np

from dataset import generate_sine, generate_cosine
from ann.perceptron import Perceptron
from ann.trainer import Trainer
from show_result import show_result, plot_loss_curve

def build_parser():
    parser = argparse.ArgumentParser(description='Multilayer perceptron: back-propagation')
    parser.add_argument('--function', type=str, default='sine', choices=['sine', 'cosine'],
                        help='function to approximate (default: sine)')
    parser.add_argument('--steps', type=int, default=20, metavar='N',
                        help='number of intervals the period is split into (default: 20)')
    parser.add_argument('--epochs', type=int, default=5000, metavar='N',
                        help='number of epochs to train (default: 5000)')
    parser.add_argument('--lr', type=float, default=0.1, metavar='LR',
                        help='learning rate (default: 0.1)')
    parser.add_argument('--alpha', type=float, default=0.5, metavar='M',
                        help='momentum (default: 0.5)')
    parser.add_argument('--hidden-dims', type=int, nargs='+', default=[4],
                        help='dimensions of hidden layers (default: 4)')
    parser.add_argument('--weight-range', type=float, nargs=2, default=[-1.0, 1.0], metavar=('MIN', 'MAX'),
                        help='range of the uniform initial weights (default: -1 1)')
    parser.add_argument('--weight-bounds', type=float, nargs=2, default=None, metavar=('MIN', 'MAX'),
                        help='clamp weights into this range after every update (default: disabled)')
    parser.add_argument('--seed', type=int, default=1, metavar='S',
                        help='random seed (default: 1)')
    parser.add_argument('--log-interval', type=int, default=1000, metavar='N',
                        help='how many epochs to wait before logging training status')
    parser.add_argument('--no-plot', action='store_true', default=False,
                        help='skip the matplotlib figures')
    return parser

def main(argv=None):
    """
    主函式，負責解析命令列參數、建構感知器並執行訓練。

    返回:
        list: 每個週期的總誤差。
    """
    args = build_parser().parse_args(argv)
    np.random.seed(args.seed)

    # --- 資料準備 ---
    print(f"使用資料集: {args.function.upper()}")
    if args.function == 'sine':
        X, y = generate_sine(args.steps)
    elif args.function == 'cosine':
        X, y = generate_cosine(args.steps)
    else:
        raise ValueError(f"不支援的函數: {args.function}")

    # --- 模型建構 ---
    model = Perceptron(X.shape[1], *args.hidden_dims, y.shape[1])
    model.randomize_weights(*args.weight_range)
    if args.weight_bounds is not None:
        model.set_weight_bounds(*args.weight_bounds)
    print(f"模型結構: {model}，權重數量: {model.weight_count()}")

    # --- 模型訓練 ---
    trainer = Trainer(model, learning_rate=args.lr, alpha=args.alpha)
    print(f"\n開始訓練... (Epochs: {args.epochs}, LR: {args.lr}, Momentum: {args.alpha})")
    error_history = trainer.train(X, y, args.epochs, args.log_interval)

    # --- 結果顯示 ---
    print("\n訓練完成！")
    if args.no_plot:
        print(f"Total error: {trainer.evaluate(X, y):.6f}")
    else:
        plot_loss_curve(error_history)
        show_result(trainer, X, y)
    return error_history

if __name__ == '__main__':
    main()
