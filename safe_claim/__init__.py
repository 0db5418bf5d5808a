"""Lock-protected task claiming for concurrent agents."""

__version__ = "0.1.0"
