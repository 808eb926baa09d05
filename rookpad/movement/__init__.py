"""Rook move generation and adjacency tables."""
#rookpad/movement/__init__.py
from rookpad.movement.rook import ROOK_MOVEMENT_VECTORS, reachable_from, reachable_keys
from rookpad.movement.precompute import (
    Adjacency, build_adjacency, asymmetric_pairs
)

__all__ = [
    'ROOK_MOVEMENT_VECTORS', 'reachable_from', 'reachable_keys',
    'Adjacency', 'build_adjacency', 'asymmetric_pairs',
]
