"""Unit tests for argquote.escaper."""

import pytest

import argquote
from argquote.errors import (
    ExecutableNotFoundError,
    QuotingUnsupportedError,
    StringificationError,
    UnsupportedShellError,
)
from argquote.escaper import Escaper
from argquote.models import EscapeOptions, ShellName

UNIX = dict(env={}, platform="linux")
WINDOWS = dict(env={}, platform="win32")

ALL_SHELLS = [
    ("bash", UNIX),
    ("dash", UNIX),
    ("zsh", UNIX),
    ("csh", UNIX),
    (False, UNIX),
    ("cmd.exe", WINDOWS),
    ("powershell.exe", WINDOWS),
    (False, WINDOWS),
]


@pytest.fixture(autouse=True)
def _resolve(fake_resolve):
    return fake_resolve


class TestConstruction:
    def test_accepts_keyword_options(self):
        escaper = Escaper(shell="zsh", flag_protection=False, **UNIX)
        assert escaper.shell_name == ShellName.ZSH
        assert escaper.flag_protection is False

    def test_accepts_options_model(self):
        escaper = Escaper(EscapeOptions(shell="dash"), **UNIX)
        assert escaper.shell_name == ShellName.DASH
        assert escaper.flag_protection is True

    def test_keyword_options_override_mapping(self):
        escaper = Escaper({"shell": "bash"}, shell="zsh", **UNIX)
        assert escaper.shell_name == ShellName.ZSH

    def test_unsupported_shell_fails_at_construction(self):
        with pytest.raises(UnsupportedShellError):
            Escaper(shell="fish", **UNIX)

    def test_missing_shell_fails_at_construction(self, fake_resolve):
        fake_resolve.side_effect = ExecutableNotFoundError("zsh")
        with pytest.raises(ExecutableNotFoundError):
            Escaper(shell="zsh", **UNIX)

    def test_resolves_shell_once(self, fake_resolve):
        escaper = Escaper(shell="bash", **UNIX)
        escaper.escape_all(["a", "b", "c"])
        escaper.quote("d")
        assert fake_resolve.call_count == 1

    def test_repr(self):
        assert repr(Escaper(shell="bash", **UNIX)) == (
            "Escaper(shell='bash', flag_protection=True)"
        )


class TestEscape:
    def test_bash(self):
        assert Escaper(shell="bash", **UNIX).escape("a b$c") == "a\\ b\\$c"

    def test_cmd(self):
        assert Escaper(shell="cmd.exe", **WINDOWS).escape("a&b") == "a^&b"

    def test_no_shell_strips_flag_prefix(self):
        assert Escaper(shell=False, **UNIX).escape("--verbose") == "verbose"

    def test_flag_protection_disabled_keeps_prefix(self):
        escaper = Escaper(shell=False, flag_protection=False, **UNIX)
        assert escaper.escape("--verbose") == "--verbose"

    def test_flag_protection_on_cmd_strips_slashes(self):
        assert Escaper(shell="cmd.exe", **WINDOWS).escape("/c") == "c"

    def test_stringifies_values(self):
        escaper = Escaper(shell="bash", **UNIX)
        assert escaper.escape(42) == "42"
        assert escaper.escape(b"a b") == "a\\ b"

    def test_rejects_none(self):
        with pytest.raises(StringificationError):
            Escaper(shell="bash", **UNIX).escape(None)

    def test_stringification_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            Escaper(shell="bash", **UNIX).escape(None)

    @pytest.mark.parametrize("shell, platform", ALL_SHELLS)
    def test_control_characters_never_survive(self, shell, platform):
        escaper = Escaper(shell=shell, **platform)
        result = escaper.escape("a\x00b\x08c\x1bd\x9be")
        assert not set(result) & {"\x00", "\x08", "\x1b", "\x9b"}


class TestEscapeAll:
    @pytest.mark.parametrize("shell, platform", ALL_SHELLS)
    def test_scalar_and_list_agree(self, shell, platform):
        escaper = Escaper(shell=shell, **platform)
        assert escaper.escape_all(["a b"]) == [escaper.escape("a b")]
        assert escaper.escape_all("a b") == escaper.escape_all(["a b"])

    def test_preserves_order_and_length(self):
        escaper = Escaper(shell="bash", **UNIX)
        assert escaper.escape_all(["a", "b c", "$d"]) == ["a", "b\\ c", "\\$d"]

    def test_accepts_tuples_and_generators(self):
        escaper = Escaper(shell="bash", **UNIX)
        assert escaper.escape_all(("a", "b")) == ["a", "b"]
        assert escaper.escape_all(str(i) for i in range(2)) == ["0", "1"]

    def test_non_iterable_is_a_single_value(self):
        assert Escaper(shell="bash", **UNIX).escape_all(7) == ["7"]


class TestQuote:
    def test_bash_scenarios(self):
        escaper = Escaper(shell="bash", flag_protection=False, **UNIX)
        assert escaper.quote("&& ls") == "'&& ls'"
        assert escaper.quote("it's") == "'it'\\''s'"

    def test_powershell_scenario(self):
        assert Escaper(shell="powershell.exe", **WINDOWS).quote("O'Brien") == "'O''Brien'"

    def test_flag_protection_applies_inside_quotes(self):
        assert Escaper(shell="bash", **UNIX).quote("--all") == "'all'"
        escaper = Escaper(shell="bash", flag_protection=False, **UNIX)
        assert escaper.quote("--all") == "'--all'"

    @pytest.mark.parametrize("platform", [UNIX, WINDOWS])
    @pytest.mark.parametrize("arg", ["", "a", "--x"])
    def test_no_shell_always_fails(self, platform, arg):
        escaper = Escaper(shell=False, **platform)
        with pytest.raises(QuotingUnsupportedError):
            escaper.quote(arg)
        with pytest.raises(QuotingUnsupportedError):
            escaper.quote_all([arg])

    def test_quote_all(self):
        escaper = Escaper(shell="zsh", **UNIX)
        assert escaper.quote_all(["a", "b c"]) == ["'a'", "'b c'"]
        assert escaper.quote_all("b c") == ["'b c'"]

    def test_rejects_none(self):
        with pytest.raises(StringificationError):
            Escaper(shell="bash", **UNIX).quote_all([None])


class TestModuleFunctions:
    def test_escape(self):
        assert argquote.escape("a&b", {"shell": "cmd.exe"}, **WINDOWS) == "a^&b"

    def test_escape_all(self):
        assert argquote.escape_all(["-a", "b"], {"shell": False}, **UNIX) == ["a", "b"]

    def test_quote(self):
        assert argquote.quote("a b", {"shell": "bash"}, **UNIX) == "'a b'"

    def test_quote_all(self):
        assert argquote.quote_all(["x"], {"shell": "powershell.exe"}, **WINDOWS) == ["'x'"]

    def test_resolves_per_call(self, fake_resolve):
        argquote.escape("a", {"shell": "bash"}, **UNIX)
        argquote.escape("b", {"shell": "bash"}, **UNIX)
        assert fake_resolve.call_count == 2


class TestFlagProtectionKeepsWordStartEscaped:
    @pytest.mark.parametrize(
        "shell, platform, arg, expected",
        [
            ("bash", UNIX, "-#x", "\\#x"),
            ("bash", UNIX, "-~root", "\\~root"),
            ("dash", UNIX, "--#x", "\\#x"),
            ("zsh", UNIX, "-=ls", "\\=ls"),
            ("csh", UNIX, "-~root", "\\~root"),
            ("powershell.exe", WINDOWS, "->out.txt", "`>out.txt"),
            ("powershell.exe", WINDOWS, "-2>out.txt", "2`>out.txt"),
            ("powershell.exe", WINDOWS, "-@a", "`@a"),
            ("powershell.exe", WINDOWS, "/#a", "`#a"),
        ],
    )
    def test_escape(self, shell, platform, arg, expected):
        assert Escaper(shell=shell, **platform).escape(arg) == expected

    def test_without_flag_protection_the_dash_stays(self):
        escaper = Escaper(shell="bash", flag_protection=False, **UNIX)
        assert escaper.escape("-#x") == "-#x"

    def test_quote_does_not_add_escapes_inside_quotes(self):
        assert Escaper(shell="bash", **UNIX).quote("-#x") == "'#x'"
        assert Escaper(shell="powershell.exe", **WINDOWS).quote("-@a") == "'@a'"

    def test_cmd_strips_mixed_prefixes(self):
        assert Escaper(shell="cmd.exe", **WINDOWS).escape("-/c") == "c"


class TestNoneOptions:
    def test_none_means_default(self):
        escaper = Escaper(shell=None, flag_protection=None, **UNIX)
        assert escaper.shell_name == ShellName.BASH
        assert escaper.flag_protection is True
