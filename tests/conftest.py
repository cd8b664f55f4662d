import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from ann.perceptron import Perceptron


@pytest.fixture(autouse=True)
def seed_numpy():
    np.random.seed(1)


@pytest.fixture
def no_show(monkeypatch):
    """Keep matplotlib from opening windows and close figures afterwards."""
    import matplotlib.pyplot as plt

    monkeypatch.setattr(plt, "show", lambda *args, **kwargs: None)
    yield
    plt.close("all")


@pytest.fixture
def random_perceptron():
    """A [2, 3, 1] perceptron with uniform weights in [-1, 1]."""
    model = Perceptron(2, 3, 1)
    model.randomize_weights(-1.0, 1.0)
    return model
