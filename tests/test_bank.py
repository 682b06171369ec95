"""
Tests for the bank and settings.
"""

import pytest
from pydantic import ValidationError

from ateliers import AtelierSettings, Bank, get_bank


def test_bank_cash():
    bank = Bank()
    assert bank.get_cash() == 0

    bank.set_cash(1000)
    assert bank.get_cash() == bank.cash == 1000


def test_bank_cash_is_read_only():
    bank = Bank(10)
    with pytest.raises(AttributeError):
        bank.cash = 0
    assert bank.get_cash() == 10


def test_get_bank_returns_one_instance():
    first = get_bank()
    second = get_bank()

    assert first is second


def test_settings_defaults(monkeypatch):
    for var in ("ATELIERS_LOG_LEVEL", "ATELIERS_STARTING_CASH", "ATELIERS_BANK_CASH"):
        monkeypatch.delenv(var, raising=False)

    settings = AtelierSettings(_env_file=None)

    assert settings.log_level == "WARNING"
    assert settings.starting_cash == 1500
    assert settings.bank_cash == 0


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ATELIERS_LOG_LEVEL", "debug")
    monkeypatch.setenv("ATELIERS_STARTING_CASH", "2000")

    settings = AtelierSettings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.starting_cash == 2000


def test_settings_reject_bad_values():
    with pytest.raises(ValidationError):
        AtelierSettings(_env_file=None, log_level="chatty")
    with pytest.raises(ValidationError):
        AtelierSettings(_env_file=None, starting_cash=-1)
