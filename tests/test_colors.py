import pytest

from logfile.colors import RESET, STYLES, resolve_color, strip_ansi


@pytest.mark.parametrize(
    "name,expected",
    [
        ("red", "\x1b[31m"),
        ("bright", "\x1b[1m"),
        ("bgYellow", "\x1b[43m"),
        ("bg_red", "\x1b[41m"),
        ("bg-blue", "\x1b[44m"),
        ("reset", RESET),
    ],
)
def test_resolve_known(name, expected):
    assert resolve_color(name) == expected


@pytest.mark.parametrize("name", [None, "", "plaid", "RED", "bg_plaid"])
def test_resolve_unknown_is_empty(name):
    assert resolve_color(name) == ""


def test_style_table_has_required_entries():
    for name in ("reset", "bright", "underscore", "black", "red", "green", "yellow",
                 "blue", "magenta", "cyan", "white", "bgBlack", "bgWhite"):
        assert STYLES[name].startswith("\x1b[")


def test_strip_ansi_removes_styles():
    colored = STYLES["underscore"] + STYLES["green"] + "ok" + RESET + " \x1b[1;34mdone\x1b[0m"
    assert strip_ansi(colored) == "ok done"


def test_strip_ansi_8bit_csi():
    assert strip_ansi("\u009b31mwarn") == "warn"


def test_strip_ansi_plain_untouched():
    text = "plain [x] text (with) brackets; 12:00:00"
    assert strip_ansi(text) == text
