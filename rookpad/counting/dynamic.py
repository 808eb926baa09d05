"""Linear-time rook-number counter.

counts[d] holds the number of valid sequences of the current length ending on
digit d. One step pushes every non-zero count along its adjacency list into a
fresh vector; the previous vector is dropped.
"""
from __future__ import annotations

import logging
import numpy as np

from rookpad.board.keypad import Keypad
from rookpad.common.shared_types import N_DIGITS, COUNT_DTYPE, digit_index
from rookpad.movement.precompute import Adjacency

logger = logging.getLogger(__name__)


def _zeros() -> np.ndarray:
    return np.zeros(N_DIGITS, dtype=COUNT_DTYPE)


def initial_counts(keypad: Keypad) -> np.ndarray:
    """All length-1 sequences: one per valid start digit."""
    counts = _zeros()
    for key in keypad.digit_keys:
        if keypad.is_valid_start(key):
            counts[digit_index(key)] = 1
    return counts


def step_counts(counts: np.ndarray, adjacency: Adjacency) -> np.ndarray:
    next_counts = _zeros()
    for src, targets in adjacency.items():
        c = counts[digit_index(src)]
        if c <= 0:
            continue
        for dst in targets:
            next_counts[digit_index(dst)] += c
    return next_counts


def count_vector(keypad: Keypad, adjacency: Adjacency, length: int) -> np.ndarray:
    """Per-digit ending counts for `length`; all zeros when length <= 0."""
    if length <= 0:
        return _zeros()
    counts = initial_counts(keypad)
    for _ in range(2, length + 1):
        counts = step_counts(counts, adjacency)
    return counts


def count_sequences(keypad: Keypad, adjacency: Adjacency, length: int) -> int:
    if length <= 0:
        return 0
    total = int(count_vector(keypad, adjacency, length).sum())
    logger.debug("dynamic: length=%d -> %d", length, total)
    return total


__all__ = ['initial_counts', 'step_counts', 'count_vector', 'count_sequences']
