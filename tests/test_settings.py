"""Tests for AppSettings."""

from argparse import Namespace

from sjakk.i18n import t
from sjakk.settings import AppSettings


def test_defaults_from_empty_namespace() -> None:
    assert AppSettings.from_args(Namespace()) == AppSettings()


def test_flags_invert_into_settings() -> None:
    settings = AppSettings.from_args(Namespace(hide_legal=True, no_color=True, free=True))
    assert not settings.show_legal_moves
    assert not settings.use_color
    assert not settings.enforce_turns


def test_apply_switches_language() -> None:
    AppSettings(language="Nynorsk").apply()
    assert t().king == "konge"
