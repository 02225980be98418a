"""Render GitHub contribution graphs as an animated Breakout game."""

__version__ = "0.1.0"
