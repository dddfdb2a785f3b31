"""Feed-forward neural networks built from neurons and layers, with a demo command."""

__version__ = "0.1.0"
__all__ = ["activations", "neuron", "layer", "feed_forward", "mpc", "main"]