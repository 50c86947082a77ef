"""Compact solutions to classic array, string, number, linked-list, tree and graph exercises."""

__version__ = "0.1.0"

__all__ = ["arrays", "graphs", "linked_lists", "numbers", "text", "trees", "words"]