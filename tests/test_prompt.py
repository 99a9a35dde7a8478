"""Tests for the confirmation prompt."""

from __future__ import annotations

import builtins
import io

import pytest

from reposync.utils import prompt
from reposync.utils.prompt import ask_confirmation


class TtyStdin(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.fixture
def tty(monkeypatch):
    monkeypatch.setattr(prompt.sys, "stdin", TtyStdin())


class TestAskConfirmation:
    """Tests for ask_confirmation."""

    @pytest.mark.parametrize("answer", ["y", "Y", " y \n"])
    def test_affirmative(self, tty, monkeypatch, answer) -> None:
        monkeypatch.setattr(builtins, "input", lambda text: answer)

        assert ask_confirmation("Pull?")

    @pytest.mark.parametrize("answer", ["n", "", "yes please", "q"])
    def test_anything_else_is_no(self, tty, monkeypatch, answer) -> None:
        monkeypatch.setattr(builtins, "input", lambda text: answer)

        assert not ask_confirmation("Pull?")

    def test_question_gets_default_hint(self, tty, monkeypatch) -> None:
        asked = []
        monkeypatch.setattr(builtins, "input", lambda text: asked.append(text) or "n")

        ask_confirmation("Pull updates for all repositories?")

        assert asked == ["Pull updates for all repositories? [y/N]: "]

    def test_eof_is_no(self, tty, monkeypatch) -> None:
        def raise_eof(text):
            raise EOFError

        monkeypatch.setattr(builtins, "input", raise_eof)

        assert not ask_confirmation("Pull?")

    def test_no_tty_is_no(self, monkeypatch) -> None:
        monkeypatch.setattr(prompt.sys, "stdin", io.StringIO())

        def no_tty(*args, **kwargs):
            raise OSError("no tty")

        monkeypatch.setattr(builtins, "open", no_tty)

        assert not ask_confirmation("Pull?")
