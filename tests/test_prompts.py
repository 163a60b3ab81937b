from unittest.mock import patch

import click
import pytest

from clytia import InputClosedError, InputRequiredError, ParseError
from clytia.term.renderer import CLEAR_LINE, cursor_up

_FG = {"blue": 34, "green": 32, "red": 31, "magenta": 35, "white": 37}


def _paint(text: str, fg: str) -> str:
    return f"\x1b[{_FG[fg]}m{text}\x1b[39m"


# ── parsed_input ────────────────────────────────────────────────────


def test_parsed_input_with_default(make_cli, output):
    cli = make_cli("1\n")
    assert cli.parsed_input("input a number", default=0) == 1
    assert output.getvalue() == (
        _paint("input a number", fg="blue")
        + _paint("(default: 0)", fg="magenta")
        + _paint(" => ", fg="blue")
    )


def test_parsed_input_without_default(make_cli, output):
    cli = make_cli("1\n")
    assert cli.parsed_input("input a number", type=int) == 1
    assert output.getvalue() == _paint("input a number => ", fg="blue")


def test_empty_answer_without_default_is_an_error(make_cli):
    with pytest.raises(InputRequiredError):
        make_cli("\n").parsed_input("name")


def test_empty_answer_returns_default(make_cli):
    assert make_cli("   \n").parsed_input("port", default=8080) == 8080


def test_closed_input_returns_default(make_cli):
    assert make_cli("").parsed_input("port", default=8080) == 8080


def test_closed_input_without_default_is_an_error(make_cli):
    with pytest.raises(InputRequiredError):
        make_cli("").parsed_input("port", type=int)


def test_unparseable_answer_is_reported_once(make_cli):
    cli = make_cli("abc\n42\n")
    with pytest.raises(ParseError) as exc_info:
        cli.parsed_input("number", type=int)
    assert exc_info.value.raw == "abc"
    assert cli.input.readline() == "42\n"


def test_answer_is_trimmed(make_cli):
    assert make_cli("  7  \n").parsed_input("number", type=int) == 7


def test_plain_answer_is_a_string(make_cli):
    assert make_cli("hello\n").parsed_input("greeting") == "hello"


def test_click_choice_type(make_cli):
    animal = click.Choice(["cats", "dogs"])
    assert make_cli("dogs\n").parsed_input("animal", type=animal) == "dogs"
    with pytest.raises(ParseError):
        make_cli("fish\n").parsed_input("animal", type=animal)


# ── validated_input ─────────────────────────────────────────────────


def _between_1_and_10(n: int) -> bool:
    return 1 <= n <= 10


def test_validated_input_accepts_first_valid_answer(make_cli, output):
    cli = make_cli("5\n")
    assert cli.validated_input("number", "1-10", _between_1_and_10, type=int) == 5
    assert output.getvalue() == (
        f"{CLEAR_LINE}\r"
        + _paint("number", fg="blue") + " "
        + _paint("(requirements: 1-10)", fg="magenta") + " "
        + _paint("=>", fg="blue") + " "
    )


def test_validated_input_retries_until_valid(make_cli):
    cli = make_cli("\nabc\n42\n0\n5\n")
    assert cli.validated_input("number", "1-10", _between_1_and_10, type=int) == 5


def test_validated_input_never_returns_rejected_value(make_cli):
    seen = []

    def validate(n):
        seen.append(n)
        return n % 2 == 0

    assert make_cli("1\n3\n4\n").validated_input("even", "even", validate, type=int) == 4
    assert seen == [1, 3, 4]


def test_rejected_answer_is_shown_in_red(make_cli, output):
    make_cli("42\n5\n").validated_input("number", "1-10", _between_1_and_10, type=int)

    text = output.getvalue()
    red_prompt = (
        _paint("number", fg="red") + " "
        + _paint("(requirements: 1-10)", fg="magenta") + " "
        + _paint("=>", fg="red") + " "
    )
    blue_prompt = (
        f"{CLEAR_LINE}\r"
        + _paint("number", fg="blue") + " "
        + _paint("(requirements: 1-10)", fg="magenta") + " "
        + _paint("=>", fg="blue") + " "
    )
    assert text == (
        blue_prompt
        + f"\r{cursor_up(1)}{red_prompt}" + _paint("42", fg="white")
        + blue_prompt
    )


def test_empty_answer_redraws_prompt_in_red(make_cli, output):
    make_cli("\n5\n").validated_input("number", "1-10", _between_1_and_10, type=int)
    assert f"{cursor_up(1)}{CLEAR_LINE}\r" + _paint("number", fg="red") in output.getvalue()


def test_closed_input_ends_validation_loop(make_cli):
    with pytest.raises(InputClosedError):
        make_cli("20\n30\n").validated_input("number", "1-10", _between_1_and_10, type=int)


def test_retry_pauses_for_configured_delay(make_cli, settings):
    with patch("clytia.services.prompts.time.sleep") as mock_sleep:
        make_cli("\n0\n5\n").validated_input("number", "1-10", _between_1_and_10, type=int)
    assert mock_sleep.call_count == 2
    mock_sleep.assert_called_with(settings.retry_delay)
