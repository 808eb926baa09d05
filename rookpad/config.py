# rookpad/config.py

"""Configuration settings for the counting engine."""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from rookpad.common.shared_types import Strategy

logger = logging.getLogger(__name__)

ENV_STRATEGY = "ROOKPAD_STRATEGY"
ENV_ENUM_MAX_LENGTH = "ROOKPAD_ENUM_MAX_LENGTH"
ENV_ENUM_MAX_RESULTS = "ROOKPAD_ENUM_MAX_RESULTS"


@dataclass(frozen=True)
class EngineConfig:
    """Strategy default and the caller-chosen bounds on exhaustive enumeration."""
    default_strategy: Strategy = Strategy.DYNAMIC_PROGRAMMING
    enumeration_max_length: Optional[int] = None   # None = unbounded
    enumeration_max_results: Optional[int] = None  # None = unbounded

    def __post_init__(self):
        strategy = self.default_strategy
        if not isinstance(strategy, Strategy):
            if isinstance(strategy, str):
                strategy = Strategy.from_name(strategy)
            else:
                strategy = Strategy(strategy)
            object.__setattr__(self, "default_strategy", strategy)
        if self.enumeration_max_length is not None and self.enumeration_max_length < 1:
            raise ValueError("enumeration_max_length must be at least 1")
        if self.enumeration_max_results is not None and self.enumeration_max_results < 0:
            raise ValueError("enumeration_max_results must be non-negative")

    @classmethod
    def from_env(cls, environ=None) -> "EngineConfig":
        """Build a config from ROOKPAD_* variables.

        Unset variables keep the defaults; malformed ones are skipped with a
        warning so a bad environment never stops a run.
        """
        env = os.environ if environ is None else environ
        kwargs = {}
        if env.get(ENV_STRATEGY):
            try:
                kwargs["default_strategy"] = Strategy.from_name(env[ENV_STRATEGY])
            except ValueError:
                logger.warning("Ignoring %s=%r; unknown strategy", ENV_STRATEGY, env[ENV_STRATEGY])
        bound = _env_bound(env, ENV_ENUM_MAX_LENGTH, minimum=1)
        if bound is not None:
            kwargs["enumeration_max_length"] = bound
        bound = _env_bound(env, ENV_ENUM_MAX_RESULTS, minimum=0)
        if bound is not None:
            kwargs["enumeration_max_results"] = bound
        if kwargs:
            logger.debug("EngineConfig overrides from environment: %s", kwargs)
        return cls(**kwargs)


def _env_bound(env, name: str, minimum: int) -> Optional[int]:
    text = env.get(name)
    if not text:
        return None
    try:
        value = int(text)
    except ValueError:
        logger.warning("Ignoring %s=%r; not an integer", name, text)
        return None
    if value < minimum:
        logger.warning("Ignoring %s=%r; must be at least %d", name, text, minimum)
        return None
    return value
