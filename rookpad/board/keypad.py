# rookpad/board/keypad.py
"""Immutable numpy-backed telephone keypad."""

import numpy as np
from typing import Tuple
import logging
logger = logging.getLogger(__name__)

from rookpad.common.shared_types import (
    N_ROWS, N_COLS, KEYPAD_LAYOUT, BLOCKED_KEYS, KEY_ORDER, VALID_START_KEYS,
    KEY_DTYPE, BOOL_DTYPE, Position, INVALID_POSITION
)
from rookpad.common.validation import (
    in_bounds, validate_key, validate_position
)

# =============================================================================
# KEYPAD CLASS
# =============================================================================
class Keypad:
    """
    Fixed 4x3 phone keypad:

        1 2 3
        4 5 6
        7 8 9
        * 0 #

    The grid and the landable mask are read-only arrays built once at
    construction. All lookups are pure.
    """
    __slots__ = ('_grid', '_landable', '_positions', '_valid_starts')

    def __init__(self):
        grid = np.array(KEYPAD_LAYOUT, dtype=KEY_DTYPE)
        grid.setflags(write=False)
        self._grid = grid

        landable = np.isin(grid, sorted(BLOCKED_KEYS), invert=True).astype(BOOL_DTYPE)
        landable.setflags(write=False)
        self._landable = landable

        self._positions = {
            str(grid[r, c]): (r, c) for r in range(N_ROWS) for c in range(N_COLS)
        }
        self._valid_starts = VALID_START_KEYS
        logger.debug("Keypad ready: %d landable cells", int(landable.sum()))

    # -------------------------------------------------------------------------
    # LOOKUPS
    # -------------------------------------------------------------------------
    @property
    def grid(self) -> np.ndarray:
        return self._grid

    def position_of(self, key: str) -> Position:
        """Grid position of `key`, or INVALID_POSITION when it is not on the pad."""
        return self._positions.get(key, INVALID_POSITION)

    def require_position(self, key: str) -> Position:
        """Like position_of, but an unknown key is a contract violation."""
        return self._positions[validate_key(key)]

    def key_at(self, position: Position) -> str:
        row, col = validate_position(position)
        return str(self._grid[row, col])

    def is_valid_start(self, key: str) -> bool:
        return key in self._valid_starts

    def is_landable(self, position: Position) -> bool:
        if not in_bounds(position):
            return False
        return bool(self._landable[position[0], position[1]])

    def landable_mask(self) -> np.ndarray:
        """Read-only (N_ROWS, N_COLS) bool mask of cells a slide may stop on."""
        return self._landable

    # -------------------------------------------------------------------------
    # KEY SETS
    # -------------------------------------------------------------------------
    @property
    def digit_keys(self) -> Tuple[str, ...]:
        return tuple(KEY_ORDER)

    @property
    def valid_start_keys(self) -> Tuple[str, ...]:
        return tuple(k for k in KEY_ORDER if k in self._valid_starts)

    def __repr__(self) -> str:
        rows = [" ".join(row) for row in self._grid.tolist()]
        return f"Keypad({' / '.join(rows)})"


__all__ = ['Keypad']
