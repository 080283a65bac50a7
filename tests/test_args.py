import pytest

from philosim.args import (
    ArgumentError,
    Settings,
    USAGE,
    is_numeric,
    parse_limited_int,
    parse_settings,
)


@pytest.mark.parametrize("text", ["123", "", " 12", "+5", "-3", "1 2 3"])
def test_is_numeric_accepts(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["12a", "1.5", "abc", "\t3", "x"])
def test_is_numeric_rejects(text):
    assert is_numeric(text) is False


def test_parse_plain_number():
    assert parse_limited_int("42") == 42


def test_parse_with_whitespace_and_plus():
    assert parse_limited_int("  +7") == 7


def test_parse_int_max():
    assert parse_limited_int("2147483647") == 2147483647


def test_parse_stops_at_non_digit():
    assert parse_limited_int("12 34") == 12


def test_parse_negative_zero_is_zero():
    assert parse_limited_int("-0") == 0


@pytest.mark.parametrize("text", ["-5", "2147483648", "+-1", "99999999999"])
def test_parse_out_of_range(text):
    with pytest.raises(ArgumentError) as info:
        parse_limited_int(text)
    assert "int limit" in info.value.message


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_parse_blank(text):
    with pytest.raises(ArgumentError) as info:
        parse_limited_int(text)
    assert info.value.message == "Please, fill all the arguments"


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1"] * 6])
def test_settings_wrong_count(args):
    with pytest.raises(ArgumentError) as info:
        parse_settings(args)
    assert info.value.message == USAGE
    assert info.value.to_stderr is False


def test_settings_too_long_goes_to_stderr():
    with pytest.raises(ArgumentError) as info:
        parse_settings(["5", "800", "200", "200", "123456789012"])
    assert info.value.message == "Error int out of limits"
    assert info.value.to_stderr is True


def test_settings_non_numeric():
    with pytest.raises(ArgumentError) as info:
        parse_settings(["5", "abc", "200", "200"])
    assert info.value.message == "The program needs numerical arguments"


def test_settings_zero_philosophers():
    with pytest.raises(ArgumentError) as info:
        parse_settings(["0", "800", "200", "200"])
    assert info.value.message == "The program needs at least 1 philosopher"


def test_settings_negative_time():
    with pytest.raises(ArgumentError):
        parse_settings(["5", "-800", "200", "200"])


def test_settings_without_meals():
    settings = parse_settings(["5", "800", "200", "300"])
    assert settings == Settings(5, 800, 200, 300, None)


def test_settings_with_meals():
    settings = parse_settings(["5", "800", "200", "200", "7"])
    assert settings.meals == 7
    assert settings.philosophers == 5
    assert settings.time_to_die == 800