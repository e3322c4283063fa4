"""Dictionary data types: an ordered binary search tree and a linear-probing hash table."""

__version__ = "0.1.0"