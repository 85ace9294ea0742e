"""A film catalogue grouped by director, with a binary search tree, a chained hash map and a menu."""

__version__ = "0.1.0"