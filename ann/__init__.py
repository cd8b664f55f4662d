'''
Name: ANN Perceptron
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
from .perceptron import Perceptron
from .activation import Sigmoid
from .loss import HalfSquaredError
from .optimizer import SGD
from .trainer import Trainer
from .exceptions import (
    PerceptronError,
    InvalidTopologyError,
    ShapeMismatchError,
    LengthMismatchError,
    InvalidRangeError,
    ComputeRequiredError,
)
