"""Tests for server address resolution."""

import pytest

from mpdproto.config import DEFAULT_HOST, DEFAULT_PORT, get_address


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("MPD_HOST", raising=False)
    monkeypatch.delenv("MPD_PORT", raising=False)


def test_defaults():
    assert get_address() == (DEFAULT_HOST, DEFAULT_PORT) == ("localhost", 6600)


def test_environment(monkeypatch):
    monkeypatch.setenv("MPD_HOST", "music.lan")
    monkeypatch.setenv("MPD_PORT", "6601")

    assert get_address() == ("music.lan", 6601)


def test_arguments_win(monkeypatch):
    monkeypatch.setenv("MPD_HOST", "music.lan")
    monkeypatch.setenv("MPD_PORT", "6601")

    assert get_address("127.0.0.1", 7000) == ("127.0.0.1", 7000)


def test_empty_environment_uses_defaults(monkeypatch):
    monkeypatch.setenv("MPD_HOST", "")
    monkeypatch.setenv("MPD_PORT", "")

    assert get_address() == ("localhost", 6600)


def test_bad_port(monkeypatch):
    monkeypatch.setenv("MPD_PORT", "http")

    with pytest.raises(ValueError):
        get_address()
