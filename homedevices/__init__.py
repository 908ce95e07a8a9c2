"""Simulated thermometer and power socket, their message formats, controllers and a TCP dashboard server."""

__version__ = "0.1.0"