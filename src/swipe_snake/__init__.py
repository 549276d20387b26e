"""Snake on a 20x20 grid with keyboard and swipe controls."""

__version__ = "0.1.0"
