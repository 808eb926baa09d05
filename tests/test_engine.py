
import pytest
import sys
import os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import rookpad
from rookpad import CountingEngine, EngineConfig, Strategy
from rookpad.common.validation import KeypadContractError, EnumerationLimitExceeded


@pytest.fixture(scope="module")
def engine():
    return CountingEngine()


def test_length_one_counts_valid_starts(engine):
    assert engine.count(1, Strategy.ENUMERATION) == 8
    assert engine.count(1, Strategy.DYNAMIC_PROGRAMMING) == 8


def test_default_strategy_is_dynamic_programming(engine):
    assert engine.resolve_strategy() is Strategy.DYNAMIC_PROGRAMMING
    assert engine.count(7) == 49326


def test_strategy_names(engine):
    assert engine.count(4, "enumeration") == 633
    assert engine.count(4, "dp") == 633
    assert engine.resolve_strategy("Dynamic-Programming") is Strategy.DYNAMIC_PROGRAMMING
    assert engine.resolve_strategy(0) is Strategy.ENUMERATION
    with pytest.raises(ValueError):
        engine.resolve_strategy("bogus")


def test_zero_length(engine):
    assert engine.count(0) == 0
    assert engine.count(0, Strategy.ENUMERATION) == 0


@pytest.mark.parametrize("bad", [True, 2.0, "3", None])
def test_non_integer_length_rejected(engine, bad):
    with pytest.raises(KeypadContractError):
        engine.count(bad)


def test_count_range(engine):
    assert engine.count_range(3, 5) == {3: 148, 4: 633, 5: 2702}
    assert engine.count_range(5, 3) == {}


def test_count_vector_sums_to_count(engine):
    vec = engine.count_vector(5)
    assert len(vec) == 10
    assert sum(vec) == engine.count(5)


def test_recurrence_matches_degrees(engine):
    """count(L + 1) is each ending count times the out-degree of its digit."""
    vec = engine.count_vector(6)
    degree = [len(engine.adjacency[str(d)]) for d in range(10)]
    assert sum(c * k for c, k in zip(vec, degree)) == engine.count(7)


def test_sequences_are_lazy(engine):
    it = engine.sequences(3)
    assert next(it) == "258"


def test_enumeration_length_bound():
    engine = CountingEngine(config=EngineConfig(enumeration_max_length=5))
    assert engine.count(5, Strategy.ENUMERATION) == 2702
    with pytest.raises(EnumerationLimitExceeded):
        engine.count(6, Strategy.ENUMERATION)
    with pytest.raises(EnumerationLimitExceeded):
        engine.sequences(6)
    # The recurrence is never bounded
    assert engine.count(6) == 11545


def test_enumeration_result_bound():
    engine = CountingEngine(config=EngineConfig(enumeration_max_results=10))
    with pytest.raises(EnumerationLimitExceeded):
        engine.count(2, Strategy.ENUMERATION)
    with pytest.raises(EnumerationLimitExceeded):
        list(engine.sequences(2))
    assert engine.count(1, Strategy.ENUMERATION) == 8


def test_config_validation():
    assert EngineConfig(default_strategy="enum").default_strategy is Strategy.ENUMERATION
    with pytest.raises(ValueError):
        EngineConfig(enumeration_max_length=0)
    with pytest.raises(ValueError):
        EngineConfig(enumeration_max_results=-1)


def test_config_from_env():
    config = EngineConfig.from_env({
        "ROOKPAD_STRATEGY": "enumeration",
        "ROOKPAD_ENUM_MAX_LENGTH": "6",
        "ROOKPAD_ENUM_MAX_RESULTS": "1000",
    })
    assert config == EngineConfig(Strategy.ENUMERATION, 6, 1000)
    assert EngineConfig.from_env({}) == EngineConfig()


def test_module_level_count():
    assert rookpad.count(3) == 148
    assert rookpad.count(3, Strategy.ENUMERATION) == 148


def test_config_accepts_integer_strategy():
    assert EngineConfig(default_strategy=0).default_strategy is Strategy.ENUMERATION
    assert EngineConfig(default_strategy=1).default_strategy is Strategy.DYNAMIC_PROGRAMMING
    with pytest.raises(ValueError):
        EngineConfig(default_strategy=7)


def test_config_from_env_skips_bad_values():
    config = EngineConfig.from_env({
        "ROOKPAD_STRATEGY": "quantum",
        "ROOKPAD_ENUM_MAX_LENGTH": "abc",
        "ROOKPAD_ENUM_MAX_RESULTS": "50",
    })
    assert config == EngineConfig(enumeration_max_results=50)
    assert EngineConfig.from_env({"ROOKPAD_ENUM_MAX_LENGTH": "0"}) == EngineConfig()
