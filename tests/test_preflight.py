import pytest
from helpers import ScriptedPrompter, completed

from font_gallery.casks import (
    BREW,
    FD,
    IMAGEMAGICK,
    RIPGREP,
    PreflightError,
    TerminalPrompter,
    check_tools,
)


@pytest.fixture(autouse=True)
def brew_version_ok(monkeypatch):
    monkeypatch.setattr(
        "font_gallery.casks.tools.run_command",
        lambda cmd, **kwargs: completed("Homebrew 4.4.0\n"),
    )


def which_from(present: set[str]):
    return lambda name: f"/usr/local/bin/{name}" if name in present else None


def test_all_tools_present_asks_nothing():
    prompter = ScriptedPrompter()
    installs = []

    check_tools(
        [BREW, IMAGEMAGICK, RIPGREP, FD],
        prompter,
        lambda formula: installs.append(formula) or True,
        which=which_from({"brew", "magick", "rg", "fd"}),
    )

    assert prompter.questions == []
    assert installs == []


def test_missing_brew_is_fatal_without_prompt():
    prompter = ScriptedPrompter(True)

    with pytest.raises(PreflightError, match="Homebrew"):
        check_tools([BREW], prompter, lambda formula: True, which=which_from(set()))

    assert prompter.questions == []


def test_failing_brew_version_counts_as_missing(monkeypatch):
    monkeypatch.setattr(
        "font_gallery.casks.tools.run_command",
        lambda cmd, **kwargs: completed(returncode=1),
    )

    with pytest.raises(PreflightError):
        check_tools([BREW], ScriptedPrompter(), lambda f: True, which=which_from({"brew"}))


def test_missing_tool_installed_after_confirmation():
    present = {"brew"}
    installs = []

    def install(formula):
        installs.append(formula)
        present.add("fd")
        return True

    prompter = ScriptedPrompter(True)
    check_tools([BREW, FD], prompter, install, which=which_from(present))

    assert installs == ["fd"]
    assert len(prompter.questions) == 1
    assert "brew install fd" in prompter.questions[0]


def test_declined_install_is_fatal():
    installs = []

    with pytest.raises(PreflightError, match="declined"):
        check_tools(
            [IMAGEMAGICK],
            ScriptedPrompter(False),
            lambda formula: installs.append(formula) or True,
            which=which_from(set()),
        )

    assert installs == []


def test_failed_install_is_fatal():
    with pytest.raises(PreflightError, match="Failed to install ripgrep"):
        check_tools(
            [RIPGREP], ScriptedPrompter(True), lambda formula: False, which=which_from(set())
        )


def test_closed_stdin_declines_even_when_default_is_yes(monkeypatch):
    def closed(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)

    assert TerminalPrompter().confirm("Install 3 missing font casks?", default=True) is False


def test_terminal_prompter_answers(monkeypatch):
    answers = iter(["maybe", "", "y"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    prompter = TerminalPrompter()

    # "maybe" is asked again, then an empty answer takes the default
    assert prompter.confirm("Preview?", default=True) is True
    assert prompter.confirm("Install?") is True


def test_assume_yes_skips_input(monkeypatch):
    def fail(prompt):
        raise AssertionError("input should not be read")

    monkeypatch.setattr("builtins.input", fail)

    assert TerminalPrompter(assume_yes=True).confirm("Install?") is True
