"""Tests for environment-driven configuration."""

import importlib

import pytest

from gto_trainer import config
from gto_trainer.models.position import Position
from gto_trainer.training import catalog

ENV_VARS = (
    "GTO_TRAINER_DEFAULT_POSITION",
    "GTO_TRAINER_ROUNDS",
    "GTO_TRAINER_AUTO_ADVANCE",
    "GTO_TRAINER_SEED",
    "GTO_TRAINER_LOG_LEVEL",
)


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config and the default catalog; restore both afterwards."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    def _reload():
        importlib.reload(config)
        importlib.reload(catalog)

    yield _reload

    monkeypatch.undo()
    _reload()


class TestDefaults:

    def test_defaults(self, reload_config):
        reload_config()
        assert config.DEFAULT_POSITION == "UTG"
        assert config.DEFAULT_ROUNDS == 20
        assert config.AUTO_ADVANCE_DELAY == 1.0
        assert config.SEED is None
        assert config.LOG_LEVEL == "WARNING"


class TestOverrides:

    def test_auto_advance(self, reload_config, monkeypatch):
        monkeypatch.setenv("GTO_TRAINER_AUTO_ADVANCE", "0.25")
        reload_config()
        assert config.AUTO_ADVANCE_DELAY == pytest.approx(0.25)

    def test_default_position(self, reload_config, monkeypatch):
        monkeypatch.setenv("GTO_TRAINER_DEFAULT_POSITION", "btn")
        reload_config()
        assert Position.parse(config.DEFAULT_POSITION) == Position.BTN

    def test_rounds_and_log_level(self, reload_config, monkeypatch):
        monkeypatch.setenv("GTO_TRAINER_ROUNDS", "5")
        monkeypatch.setenv("GTO_TRAINER_LOG_LEVEL", "debug")
        reload_config()
        assert config.DEFAULT_ROUNDS == 5
        assert config.LOG_LEVEL == "DEBUG"


class TestSeededCatalog:

    def test_same_seed_repeats_draws(self, reload_config, monkeypatch):
        monkeypatch.setenv("GTO_TRAINER_SEED", "42")

        reload_config()
        assert config.SEED == 42
        first = [catalog.random_hand().label for _ in range(30)]

        reload_config()
        second = [catalog.random_hand().label for _ in range(30)]

        assert first == second
        assert all(label in catalog.DEFAULT_CATALOG for label in first)

    def test_different_seeds_differ(self, reload_config, monkeypatch):
        monkeypatch.setenv("GTO_TRAINER_SEED", "1")
        reload_config()
        first = [catalog.random_hand().label for _ in range(30)]

        monkeypatch.setenv("GTO_TRAINER_SEED", "2")
        reload_config()
        second = [catalog.random_hand().label for _ in range(30)]

        assert first != second
