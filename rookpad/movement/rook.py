"""
Rook - orthogonal slider rays on the keypad.
Exports:
  ROOK_MOVEMENT_VECTORS
  reachable_from(keypad, position) -> list[Position]
  reachable_keys(keypad, key) -> tuple[str, ...]
"""
from __future__ import annotations

from typing import List, Tuple, TYPE_CHECKING
import numpy as np

from rookpad.common.shared_types import COORD_DTYPE, Position
from rookpad.common.validation import KeypadContractError, validate_position
from rookpad.movement.slider_engine import generate_slider_targets

if TYPE_CHECKING:
    from rookpad.board.keypad import Keypad

# 4 orthogonal directions: down, up, right, left
ROOK_MOVEMENT_VECTORS = np.array([
    [1, 0],
    [-1, 0],
    [0, 1],
    [0, -1],
], dtype=COORD_DTYPE)
ROOK_MOVEMENT_VECTORS.setflags(write=False)


def reachable_from(keypad: Keypad, position: Position) -> List[Position]:
    """Every cell one unbounded rook slide away, in direction order."""
    position = validate_position(position)
    if not keypad.is_landable(position):
        raise KeypadContractError(
            f"Rook cannot stand on {keypad.key_at(position)!r} at {position}"
        )
    targets = generate_slider_targets(position, ROOK_MOVEMENT_VECTORS, keypad.landable_mask())
    return [(int(r), int(c)) for r, c in targets]


def reachable_keys(keypad: Keypad, key: str) -> Tuple[str, ...]:
    return tuple(keypad.key_at(pos) for pos in reachable_from(keypad, keypad.require_position(key)))


__all__ = ['ROOK_MOVEMENT_VECTORS', 'reachable_from', 'reachable_keys']
