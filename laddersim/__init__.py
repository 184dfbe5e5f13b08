"""Monte Carlo simulation of snakes and ladders games on a classic board and on a graph board."""

__version__ = "0.1.0"
__all__ = ["__version__"]