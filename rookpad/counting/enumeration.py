"""
Exhaustive rook-number enumeration.

Every completed string is produced by a recursive generator: each level
extends the current prefix by one reachable key and hands completed strings
back up through `yield from`. Nothing is retained unless the caller asks for
a list, so counting costs time but not memory.

The number of strings grows exponentially with length. Use this as a
reference oracle for the dynamic-programming counter, not for large lengths.
"""
from __future__ import annotations

from typing import Iterator, List, Optional
import logging

from rookpad.board.keypad import Keypad
from rookpad.common.validation import EnumerationLimitExceeded
from rookpad.movement.precompute import Adjacency

logger = logging.getLogger(__name__)


def _extend(prefix: str, adjacency: Adjacency, length: int) -> Iterator[str]:
    if len(prefix) == length:
        yield prefix
        return
    for nxt in adjacency[prefix[-1]]:
        yield from _extend(prefix + nxt, adjacency, length)


def iter_sequences(keypad: Keypad, adjacency: Adjacency, length: int) -> Iterator[str]:
    """Lazily yield every valid sequence of `length` keys, start keys in scan order."""
    if length <= 0:
        return
    for start in keypad.valid_start_keys:
        yield from _extend(start, adjacency, length)


def iter_bounded(keypad: Keypad, adjacency: Adjacency, length: int,
                 max_results: Optional[int] = None) -> Iterator[str]:
    """iter_sequences, raising EnumerationLimitExceeded past `max_results` strings."""
    for produced, seq in enumerate(iter_sequences(keypad, adjacency, length), start=1):
        if max_results is not None and produced > max_results:
            raise EnumerationLimitExceeded(
                f"Enumeration produced more than max_results={max_results} sequences"
            )
        yield seq


def count_sequences(keypad: Keypad, adjacency: Adjacency, length: int,
                    max_results: Optional[int] = None) -> int:
    total = 0
    for _ in iter_bounded(keypad, adjacency, length, max_results):
        total += 1
    logger.debug("enumeration: length=%d -> %d", length, total)
    return total


def enumerate_sequences(keypad: Keypad, adjacency: Adjacency, length: int,
                        max_results: Optional[int] = None) -> List[str]:
    """Materialize every sequence. Memory grows with the result count."""
    return list(iter_bounded(keypad, adjacency, length, max_results))


__all__ = ['iter_sequences', 'iter_bounded', 'count_sequences', 'enumerate_sequences']
