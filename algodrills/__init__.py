"""Classic algorithm exercises: number theory, counting, sequences, backtracking, heaps,
scheduling, graphs, trees and segment trees."""

__version__ = "0.1.0"