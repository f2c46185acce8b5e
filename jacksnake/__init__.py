"""Snake arcade game with sliding letter obstacles, built on pygame."""

__version__ = "0.1.0"