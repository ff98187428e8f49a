"""ninjagen - ninja build graph generator for subsets of large native trees."""

__version__ = "0.1.0"
