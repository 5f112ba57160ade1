"""Solvers for festive puzzles: rucksacks, crates, forests, ropes, a tiny CPU and hills."""

__version__ = "0.1.0"
__all__ = ["cpu", "crates", "forest", "hills", "rope", "rucksack"]