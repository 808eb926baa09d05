# validation.py
"""Contract checks for keys, positions and lengths."""

from __future__ import annotations

from typing import Any

from rookpad.common.shared_types import N_ROWS, N_COLS, KEY_ALPHABET, Position


# ==============================================================================
# EXCEPTIONS
# ==============================================================================

class ValidationError(Exception):
    """Base exception for all contract failures."""
    pass


class KeypadContractError(ValidationError):
    """A key, position or length outside the keypad contract (programmer error)."""
    pass


class EnumerationLimitExceeded(RuntimeError):
    """Exhaustive enumeration went past a caller-configured bound."""
    pass

# ==============================================================================
# VALIDATORS
# ==============================================================================

def in_bounds(position: Position) -> bool:
    row, col = position
    return 0 <= row < N_ROWS and 0 <= col < N_COLS


def validate_key(key: Any) -> str:
    """Return `key` if it is one of the 12 keypad symbols, else raise."""
    if not isinstance(key, str) or key not in KEY_ALPHABET:
        raise KeypadContractError(f"Key {key!r} is not on the keypad")
    return key


def validate_position(position: Any) -> Position:
    """Normalize to a (row, col) tuple of ints and check it lies on the 4x3 grid."""
    try:
        row, col = position
        row, col = int(row), int(col)
    except (TypeError, ValueError):
        raise KeypadContractError(f"Position must be a (row, col) pair, got {position!r}") from None
    if not in_bounds((row, col)):
        raise KeypadContractError(
            f"OutOfRange: position {(row, col)} outside {N_ROWS}x{N_COLS} keypad"
        )
    return (row, col)


def validate_length(length: Any) -> int:
    """Lengths must be real ints; bools are rejected even though they subclass int."""
    if isinstance(length, bool) or not isinstance(length, int):
        raise KeypadContractError(f"Sequence length must be an int, got {type(length).__name__}")
    return length


__all__ = [
    'ValidationError', 'KeypadContractError', 'EnumerationLimitExceeded',
    'in_bounds', 'validate_key', 'validate_position', 'validate_length',
]
