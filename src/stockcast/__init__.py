"""Stock quote dashboard backend with a naive SMA-crossover prediction engine."""

__version__ = "0.1.0"
