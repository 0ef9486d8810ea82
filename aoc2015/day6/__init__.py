"""Day 6: a grid of lights driven by instructions."""

__all__ = ["operation", "instruction", "grid", "solver"]