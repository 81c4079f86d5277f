# tests/conftest.py
import pytest

from combinate import config
from combinate.config import CombinateSettings


def append(suffix: str):
    def _append(x: str) -> str:
        return x + suffix

    return _append


def str_replace(search, replace, subject):
    """Replace every occurrence of `search` in `subject` with `replace`."""
    return subject.replace(search, replace)


@pytest.fixture
def suffixers():
    """Three string functions appending 'a', 'b' and 'c'."""
    return append("a"), append("b"), append("c")


@pytest.fixture
def replace_fn():
    return str_replace


@pytest.fixture
def use_settings(monkeypatch):
    """Swap the library settings for the duration of a test."""

    def _use(**overrides) -> CombinateSettings:
        new = CombinateSettings(**overrides)
        monkeypatch.setattr(config, "settings", new)
        return new

    return _use
