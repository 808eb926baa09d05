"""Count the phone numbers a chess rook can dial on a telephone keypad."""
from rookpad.common.shared_types import Strategy
from rookpad.common.validation import (
    ValidationError, KeypadContractError, EnumerationLimitExceeded
)
from rookpad.board.keypad import Keypad
from rookpad.config import EngineConfig
from rookpad.counting.engine import CountingEngine, count

__version__ = "1.0.0"

__all__ = [
    'Strategy', 'ValidationError', 'KeypadContractError', 'EnumerationLimitExceeded',
    'Keypad', 'EngineConfig', 'CountingEngine', 'count',
]
