# precompute.py
"""Build the one-slide adjacency tables for the keypad, once per engine."""
from __future__ import annotations
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple
import logging

from rookpad.board.keypad import Keypad
from rookpad.movement.rook import reachable_keys

logger = logging.getLogger(__name__)

Adjacency = Mapping[str, Tuple[str, ...]]


def build_adjacency(keypad: Keypad) -> Adjacency:
    """Digit key -> digit keys reachable in one rook slide (read-only view)."""
    table: Dict[str, Tuple[str, ...]] = {}
    for key in keypad.digit_keys:
        table[key] = reachable_keys(keypad, key)
        logger.debug("adjacency %s -> %s", key, "".join(table[key]))
    return MappingProxyType(table)


def asymmetric_pairs(adjacency: Adjacency) -> List[Tuple[str, str]]:
    """Pairs (a, b) where b is reachable from a but a is not reachable from b."""
    pairs = []
    for src, targets in adjacency.items():
        for dst in targets:
            if src not in adjacency.get(dst, ()):
                pairs.append((src, dst))
    return pairs


__all__ = ['Adjacency', 'build_adjacency', 'asymmetric_pairs']
