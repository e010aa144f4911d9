"""
Persistent Pairs and Lists Package

A minimal cons-cell data structure and the immutable singly-linked
list built on top of it.

ARCHITECTURAL GUARANTEE:
------------------------
    - Pair is the ONLY structural primitive
    - A list is EMPTY, or a Pair whose second slot is a list
    - Nothing is ever mutated after construction
    - "Update" operations return new lists and share existing tails

Layers (leaves first):
    conspairs.pair   -> cons / car / cdr / is_pair / to_string
    conspairs.lists  -> list construction, access, folding, set semantics
"""

__version__ = "0.1.0"
