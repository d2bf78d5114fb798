"""Headless underwater scene simulation: submarine, coral, water waves and a flocking school of boids."""

__version__ = "0.1.0"