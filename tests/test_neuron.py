import pytest

from neuronet.activations import d_relu, d_sigma, relu, sigma
from neuronet.neuron import Neuron


def test_getters_and_setters():
    n = Neuron(3)
    n.weights[0] = 1.1
    n.weight_derivatives[0] = 2.2
    n.bias = 3.3
    n.db = 4.4
    n.set_activation(sigma, d_sigma)

    assert n.weights[0] == 1.1
    assert n.weight_derivatives[0] == 2.2
    assert n.bias == 3.3
    assert n.db == 4.4
    assert n.post_activation == 0
    assert n.size == 3
    assert n.activation is sigma
    assert n.derivative is d_sigma
    assert n.name == "n/a"
    assert n.evaluate(2.2) == sigma(2.2)
    assert n.evaluate_derivative(2.2) == d_sigma(2.2)


def test_default_constructor():
    n1 = Neuron()
    assert n1.size == 1
    assert n1.weights[0] == 1
    assert n1.bias == 0
    assert n1.db == 0
    assert n1.post_activation == 0
    assert n1.pre_activation == 0
    assert n1.activation is relu
    assert n1.derivative is d_relu
    assert n1.name == "ReLU"


def test_constructor_with_size():
    n2 = Neuron(3)
    assert n2.size == 3
    assert n2.weights == [1, 1, 1]
    assert n2.bias == 0
    assert n2.db == 0
    assert n2.post_activation == 0
    assert n2.pre_activation == 0
    assert n2.activation is relu and n2.derivative is d_relu


def test_constructor_with_activation():
    n3 = Neuron(2, sigma, d_sigma, "sigmoid")
    assert n3.size == 2
    assert n3.weights == [1, 1]
    assert n3.bias == 0
    assert n3.db == 0
    assert n3.post_activation == 0
    assert n3.pre_activation == 0
    assert n3.activation is sigma and n3.derivative is d_sigma
    assert n3.name == "sigmoid"


@pytest.mark.parametrize("size", [0, -2])
def test_constructor_rejects_empty_size(size):
    with pytest.raises(ValueError):
        Neuron(size)


def _modified_neuron():
    n2 = Neuron(3)
    n2.bias = 1
    n2.db = 2
    n2.weights[0] = 3
    n2.weight_derivatives[1] = 4
    return n2


def test_copy():
    n2 = _modified_neuron()
    n4 = n2.copy()

    assert n4.size == 3
    assert n4.bias == 1
    assert n4.db == 2
    assert n4.weights == [3, 1, 1]
    assert n4.weights is not n2.weights
    assert n4.weight_derivatives is not n2.weight_derivatives
    assert n4.weight_derivatives == [0, 4, 0]
    assert n4.post_activation == 0
    assert n4.pre_activation == 0
    assert n4.activation is n2.activation
    assert n4.derivative is n2.derivative
    assert n4 == n2


def test_copy_is_independent():
    n2 = _modified_neuron()
    n4 = n2.copy()
    n4.weights[1] = 9.0
    assert n2.weights[1] == 1
    assert n4 != n2


def test_copy_of_copy():
    n4 = _modified_neuron().copy()
    n1 = n4.copy()
    assert n1.size == 3
    assert n1.db == 2
    assert n1.weights == [3, 1, 1]
    assert n1.weights is not n4.weights
    assert n1.weight_derivatives == [0, 4, 0]
    assert n1.activation is n4.activation


def test_set_weights_ones_and_derivatives_zeros():
    n1 = _modified_neuron()
    n1.set_weights_ones()
    assert n1.weights == [1, 1, 1]
    n1.set_weight_derivatives_zeros()
    assert n1.weight_derivatives == [0, 0, 0]


def test_set_weights_random():
    n1 = Neuron(3)
    n1.set_weights_random(-1_000_000, 1_000_000)
    w = n1.weights
    assert w[0] != w[1]
    assert w[0] != w[2]
    assert w[1] != w[2]
    assert all(-1_000_000 <= v <= 1_000_000 for v in w)


def test_activate():
    n5 = Neuron(4)
    for i in range(4):
        n5.weights[i] = i + 1
    x = [0.1, 0.2, 0.3, 0.4]
    n5.bias = 0.2
    n5.set_activation(sigma, d_sigma)
    result = n5.activate(x)
    assert n5.pre_activation == pytest.approx(3.2)
    assert n5.post_activation == sigma(n5.pre_activation)
    assert result == n5.post_activation


def test_activate_rejects_wrong_size():
    n = Neuron(4)
    with pytest.raises(ValueError):
        n.activate([1.0, 2.0])


def test_evaluate_functions():
    n5 = Neuron(4, sigma, d_sigma)
    assert n5.evaluate(1.1) == sigma(1.1)
    assert n5.evaluate_derivative(1.1) == d_sigma(1.1)


def test_evaluate_without_activation():
    n = Neuron(2)
    n.set_activation(None, None)
    assert n.evaluate(3.0) == 0.0
    assert n.evaluate_derivative(3.0) == 0.0


def test_equality_ignores_name_but_not_activation():
    a = Neuron(2)
    b = Neuron(2)
    b.name = "other"
    assert a == b
    b.set_activation(sigma, d_sigma)
    assert a != b


def test_str_describes_neuron():
    n = Neuron(4)
    n.activate([1, 2, 1.1, 5])
    text = str(n)
    assert "size : 4" in text
    assert "ReLU" in text
    assert "[1, 1, 1, 1]" in text
    assert "9.1" in text