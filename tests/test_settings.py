import io

import pytest

from clytia import Clytia, ConfigError, Settings, load_settings


def test_defaults_without_environment():
    assert load_settings({}) == Settings(tick_interval=0.05, retry_delay=0.5, color=True)


def test_millisecond_variables():
    settings = load_settings({"CLYTIA_TICK_MS": "20", "CLYTIA_RETRY_DELAY_MS": " 0 "})
    assert settings.tick_interval == 0.02
    assert settings.retry_delay == 0


@pytest.mark.parametrize("value, color", [("1", False), ("yes", False), ("", True), ("  ", True)])
def test_no_color(value, color):
    assert load_settings({"NO_COLOR": value}).color is color


@pytest.mark.parametrize(
    "env",
    [
        {"CLYTIA_TICK_MS": "fast"},
        {"CLYTIA_TICK_MS": "0"},
        {"CLYTIA_RETRY_DELAY_MS": "-1"},
        {"CLYTIA_RETRY_DELAY_MS": "0.5"},
    ],
)
def test_invalid_values_are_rejected(env):
    with pytest.raises(ConfigError):
        load_settings(env)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("CLYTIA_TICK_MS", "5")
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert load_settings().tick_interval == 0.005


def test_clytia_picks_up_environment(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    cli = Clytia(io.StringIO(), io.StringIO())
    assert cli.settings.color is False


def test_plain_output_without_color():
    output = io.StringIO()
    cli = Clytia(io.StringIO("1\n"), output, settings=Settings(color=False))
    assert cli.parsed_input("number", type=int) == 1
    assert output.getvalue() == "number => "
