# neuronet

A small feed-forward neural network with no dependencies. You build a
network from `Neuron` objects, group them into `Layer` objects, and chain
the layers with `FeedForward` or its multilayer-perceptron subclass `Mpc`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

- `neuronet.activations` provides `sigma`, `d_sigma`, `relu`, `d_relu`,
  `heavyside` (0 for `x <= 0`, 1 otherwise) and `inv` (negation).
- `neuronet.neuron.Neuron(size=1, activation=None, derivative=None, name=None)`
  holds `weights` (which start at 1), `weight_derivatives`, `bias`, `db`, an
  activation function and its derivative. `relu` and `d_relu` are the
  defaults. `activate(x)` computes `activation(<x, w> + bias)`, stores the
  value in `pre_activation` and `post_activation`, and returns it. An input
  of the wrong size raises `ValueError`. Other methods are
  `set_activation`, `set_weights_ones`, `set_weights_random(a, b)` (which
  draws from Unif([a, b])), `set_weight_derivatives_zeros`, `evaluate`,
  `evaluate_derivative` and `copy`.
- `neuronet.layer.Layer(nb_data=0, nb_neurons=0)` is a list of neurons that
  all read the same input vector. It supports `len()`, indexing and
  iteration. Indexing returns the neuron itself, not a copy. `evaluate(x)`
  returns the outputs of the neurons and keeps them in `y`. Two layers
  compare equal when they have the same number of neurons, and `<=`
  compares those counts.
- `neuronet.feed_forward.FeedForward(n_in, n_out, n_layers)` is a network
  of `n_layers + 1` layers. By default each layer has `n_out` neurons. It
  provides `evaluate`, `total_weights`, `nb_biases`, `get_all_weights`,
  `set_all_weights`, `get_all_biases`, `set_all_biases`,
  `set_all_weights_random`, `set_all_weight_derivatives_zeros` and `copy`.
  Its `build` leaves the layout unchanged.
- `neuronet.mpc.Mpc` is a `FeedForward` with three more methods:
  - `build(nb_neurons)` sets the size of each hidden layer.
  - `set_activation(activation, derivative, i_layer, name)` sets the
    activation of one layer.
  - `set_all_activations(activation, derivative, name)` sets the activation
    of every layer.

## Example

```python
from neuronet.activations import sigma, d_sigma
from neuronet.mpc import Mpc

net = Mpc(2, 3, 4)            # 2 inputs, 3 outputs, 4 hidden layers
net.build([1, 1, 2, 3])       # neurons in each hidden layer
print(net.evaluate([1, 2]))   # [18.0, 18.0, 18.0] with default weights

net.set_all_weights_random(-1, 1)
net.set_all_activations(sigma, d_sigma, "sigmoid")
print(net.evaluate([1, 2]))
```

Every weight or bias can be read and replaced as a flat list, ordered
layer by layer and then neuron by neuron:

```python
weights = net.get_all_weights()
net.set_all_weights([0.5] * net.total_weights())
biases = net.get_all_biases()
net.set_all_biases([0.0] * net.nb_biases())
```

If a list has the wrong length, `ValueError` is raised.

## Demo

The demo command builds a neuron, a layer and two networks, evaluates
them, and prints each one:

```
neuronet-demo
neuronet-demo --depth 20
```

`--depth` sets the number of hidden layers of the last perceptron. The
default is 200.

## What it does not do

The package evaluates networks but does not train them. Neurons store
weight and bias derivatives, but nothing computes gradients or updates
weights from them. There is no backpropagation, loss function or
optimiser. Networks cannot be saved to or loaded from files.