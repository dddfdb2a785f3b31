"""A multilayer perceptron whose hidden layer sizes can be chosen."""

from __future__ import annotations

from typing import Optional, Sequence

from neuronet.feed_forward import FeedForward
from neuronet.layer import Layer
from neuronet.neuron import Activation


class Mpc(FeedForward):
    """A feed-forward network with per-layer activations and sizes."""

    def set_all_activations(
        self,
        activation: Optional[Activation],
        derivative: Optional[Activation],
        name: str = "n/a",
    ) -> None:
        """Use the same activation for every neuron of the network."""
        for layer in self.layers:
            for neuron in layer:
                neuron.set_activation(activation, derivative, name)

    def set_activation(
        self,
        activation: Optional[Activation],
        derivative: Optional[Activation],
        i_layer: int,
        name: str = "n/a",
    ) -> None:
        """Use the given activation for every neuron of one layer."""
        for neuron in self[i_layer]:
            neuron.set_activation(activation, derivative, name)

    def build(self, nb_neurons: Sequence[int]) -> None:
        """Rebuild the layers with ``nb_neurons[i]`` neurons on hidden layer i."""
        sizes = list(nb_neurons)
        if len(sizes) != self.n_layers:
            raise ValueError(
                "the number of layers and the size of the array must be the same: "
                f"size required {self.n_layers}, given {len(sizes)}"
            )
        layers: list[Layer] = []
        nb_data = self.n_in
        for size in sizes + [self.n_out]:
            layer = Layer(nb_data, size)
            layers.append(layer)
            nb_data = len(layer)
        self.layers = layers