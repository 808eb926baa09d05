"""
Centralized constants and types for the rook keypad counter.
Single source of truth for the keypad layout, dtypes and enums.
"""

import numpy as np
from typing import Tuple
from enum import IntEnum, unique

# =============================================================================
# KEYPAD GEOMETRY
# =============================================================================

N_ROWS = 4
N_COLS = 3

KEYPAD_LAYOUT: Tuple[Tuple[str, ...], ...] = (
    ("1", "2", "3"),
    ("4", "5", "6"),
    ("7", "8", "9"),
    ("*", "0", "#"),
)

# Keys that exist on the pad but can never be landed on
BLOCKED_KEYS = frozenset("*#")

# Scan order used for every key iteration (deterministic output)
KEY_ORDER = "1234567890"
KEY_ALPHABET = frozenset("1234567890*#")

# Business rule: 0 and 1 never start a number
VALID_START_KEYS = frozenset("23456789")

N_DIGITS = 10

# =============================================================================
# DTYPES
# =============================================================================

COORD_DTYPE = np.int64
BOOL_DTYPE = np.bool_
KEY_DTYPE = "<U1"
# Exact python ints; counts grow roughly 4-5x per step and overflow int64 quickly
COUNT_DTYPE = object

Position = Tuple[int, int]

INVALID_POSITION: Position = (-1, -1)


@unique
class Strategy(IntEnum):
    """Counting strategy selector."""
    ENUMERATION = 0
    DYNAMIC_PROGRAMMING = 1

    @classmethod
    def from_name(cls, name: str) -> 'Strategy':
        """Resolve a strategy from a CLI/config string (case-insensitive, aliases allowed)."""
        key = str(name).strip().lower().replace("-", "_")
        try:
            return _STRATEGY_ALIASES[key]
        except KeyError:
            raise ValueError(
                f"Unknown strategy {name!r}; expected one of {sorted(_STRATEGY_ALIASES)}"
            ) from None


_STRATEGY_ALIASES = {
    "enumeration": Strategy.ENUMERATION,
    "enum": Strategy.ENUMERATION,
    "brute": Strategy.ENUMERATION,
    "dfs": Strategy.ENUMERATION,
    "dynamic_programming": Strategy.DYNAMIC_PROGRAMMING,
    "dp": Strategy.DYNAMIC_PROGRAMMING,
    "dynamic": Strategy.DYNAMIC_PROGRAMMING,
}


def digit_index(key: str) -> int:
    """Index of a digit key in a count vector (the digit's value)."""
    return ord(key) - ord("0")


__all__ = [
    'N_ROWS', 'N_COLS', 'KEYPAD_LAYOUT', 'BLOCKED_KEYS', 'KEY_ORDER', 'KEY_ALPHABET',
    'VALID_START_KEYS', 'N_DIGITS', 'COORD_DTYPE', 'BOOL_DTYPE', 'KEY_DTYPE',
    'COUNT_DTYPE', 'Position', 'INVALID_POSITION', 'Strategy',
    'digit_index',
]
