"""cpusim — discrete-time CPU scheduling simulator."""

__version__ = "0.1.0"
