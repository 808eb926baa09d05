
import logging
import pytest
import sys
import os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from rookpad.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ROOKPAD_STRATEGY", "ROOKPAD_ENUM_MAX_LENGTH", "ROOKPAD_ENUM_MAX_RESULTS"):
        monkeypatch.delenv(name, raising=False)


def _lines(capsys):
    return capsys.readouterr().out.strip().splitlines()


def test_default_range(capsys):
    assert main([]) == 0
    lines = _lines(capsys)
    assert len(lines) == 7
    assert lines[0] == "Count of valid 1-digit phone numbers: 8"
    assert lines[-1] == "Count of valid 7-digit phone numbers: 49326"


def test_single_length(capsys):
    main(["-l", "3"])
    assert _lines(capsys) == ["Count of valid 3-digit phone numbers: 148"]


def test_hyphen_range_with_enumeration(capsys):
    main(["-r", "3-5", "-s", "enumeration"])
    assert _lines(capsys) == [
        "Count of valid 3-digit phone numbers: 148",
        "Count of valid 4-digit phone numbers: 633",
        "Count of valid 5-digit phone numbers: 2702",
    ]


def test_min_max(capsys):
    main(["--min", "2", "--max", "3"])
    assert _lines(capsys) == [
        "Count of valid 2-digit phone numbers: 35",
        "Count of valid 3-digit phone numbers: 148",
    ]


def test_reversed_bounds_are_swapped(capsys):
    main(["--min", "3", "--max", "2"])
    assert len(_lines(capsys)) == 2


def test_malformed_numbers_fall_back_to_defaults(capsys, caplog):
    with caplog.at_level(logging.WARNING):
        assert main(["--min", "abc", "--max", "2", "-r", "x-y", "-l", "??"]) == 0
    assert len(_lines(capsys)) == 2
    assert "--min" in caplog.text
    assert "--range" in caplog.text


def test_unknown_strategy_falls_back(capsys, caplog):
    with caplog.at_level(logging.WARNING):
        main(["-l", "2", "-s", "quantum"])
    assert _lines(capsys) == ["Count of valid 2-digit phone numbers: 35"]
    assert "quantum" in caplog.text


@pytest.mark.parametrize("name,value", [
    ("ROOKPAD_STRATEGY", "quantum"),
    ("ROOKPAD_ENUM_MAX_LENGTH", "abc"),
    ("ROOKPAD_ENUM_MAX_LENGTH", "0"),
    ("ROOKPAD_ENUM_MAX_RESULTS", "-5"),
])
def test_malformed_environment_is_not_fatal(capsys, caplog, monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with caplog.at_level(logging.WARNING):
        assert main(["-l", "2"]) == 0
    assert _lines(capsys) == ["Count of valid 2-digit phone numbers: 35"]
    assert name in caplog.text


def test_enumeration_bound_reports_error(capsys, caplog, monkeypatch):
    monkeypatch.setenv("ROOKPAD_ENUM_MAX_LENGTH", "3")
    with caplog.at_level(logging.ERROR):
        assert main(["-l", "5", "-s", "enum"]) == 1
    assert _lines(capsys) == []
    assert "enumeration_max_length=3" in caplog.text
