# engine.py
"""
Counting Engine facade.

Builds the keypad and its one-slide adjacency once, then answers count queries
with either strategy:
1. Enumeration (recursive generator, reference oracle)
2. Dynamic programming (linear in length)
Both read the same immutable adjacency, so an engine can be shared freely.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterator, List, Optional, Union

from rookpad.board.keypad import Keypad
from rookpad.common.shared_types import Strategy
from rookpad.common.validation import EnumerationLimitExceeded, validate_length
from rookpad.config import EngineConfig
from rookpad.counting import dynamic, enumeration
from rookpad.movement.precompute import Adjacency, build_adjacency

logger = logging.getLogger(__name__)

StrategyLike = Union[Strategy, str, int, None]


class CountingEngine:
    """Counts rook-dialable phone numbers of a given length."""

    def __init__(self, keypad: Optional[Keypad] = None, config: Optional[EngineConfig] = None):
        self._keypad = keypad if keypad is not None else Keypad()
        self._config = config if config is not None else EngineConfig()
        self._adjacency = build_adjacency(self._keypad)
        logger.debug(
            "CountingEngine ready (default=%s, enum max length=%s, enum max results=%s)",
            self._config.default_strategy.name,
            self._config.enumeration_max_length,
            self._config.enumeration_max_results,
        )

    @property
    def keypad(self) -> Keypad:
        return self._keypad

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def adjacency(self) -> Adjacency:
        return self._adjacency

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------
    def resolve_strategy(self, strategy: StrategyLike = None) -> Strategy:
        if strategy is None:
            return self._config.default_strategy
        if isinstance(strategy, Strategy):
            return strategy
        if isinstance(strategy, str):
            return Strategy.from_name(strategy)
        return Strategy(strategy)

    def count(self, length: int, strategy: StrategyLike = None) -> int:
        """Number of valid sequences of `length` keys. Non-positive lengths count 0."""
        length = validate_length(length)
        strategy = self.resolve_strategy(strategy)
        if length <= 0:
            return 0

        if strategy is Strategy.ENUMERATION:
            self._check_enumeration_length(length)
            return enumeration.count_sequences(
                self._keypad, self._adjacency, length,
                max_results=self._config.enumeration_max_results,
            )
        return dynamic.count_sequences(self._keypad, self._adjacency, length)

    def count_range(self, first: int, last: int, strategy: StrategyLike = None) -> Dict[int, int]:
        """Inclusive range of lengths -> count, one query per length."""
        first, last = validate_length(first), validate_length(last)
        return {length: self.count(length, strategy) for length in range(first, last + 1)}

    def count_vector(self, length: int) -> List[int]:
        """Per-digit breakdown (index = digit) of the dynamic-programming counts."""
        length = validate_length(length)
        return [int(c) for c in dynamic.count_vector(self._keypad, self._adjacency, length)]

    def sequences(self, length: int) -> Iterator[str]:
        """Lazy enumeration of every valid sequence, honouring the configured bounds."""
        length = validate_length(length)
        self._check_enumeration_length(length)
        return enumeration.iter_bounded(
            self._keypad, self._adjacency, length,
            max_results=self._config.enumeration_max_results,
        )

    def _check_enumeration_length(self, length: int) -> None:
        limit = self._config.enumeration_max_length
        if limit is not None and length > limit:
            raise EnumerationLimitExceeded(
                f"Length {length} exceeds enumeration_max_length={limit}; "
                f"use the dynamic-programming strategy"
            )


_default_engine: Optional[CountingEngine] = None


def get_default_engine() -> CountingEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = CountingEngine(config=EngineConfig.from_env())
    return _default_engine


def count(length: int, strategy: StrategyLike = None) -> int:
    return get_default_engine().count(length, strategy)


__all__ = ['CountingEngine', 'get_default_engine', 'count']
