import importlib

from rubber_spring import settings


def test_defaults():
    assert settings.DEFAULT_TOLERANCE_BAND == 1e-4
    assert settings.DEFAULT_SETTLE_THRESHOLD == 30


def test_env_var_bootstrap(monkeypatch):
    monkeypatch.setenv("RUBBER_SPRING_TOLERANCE_BAND", "0.01")
    monkeypatch.setenv("RUBBER_SPRING_SETTLE_THRESHOLD", "5")
    try:
        fresh = importlib.reload(settings)
        assert fresh.DEFAULT_TOLERANCE_BAND == 0.01
        assert fresh.DEFAULT_SETTLE_THRESHOLD == 5
    finally:
        monkeypatch.delenv("RUBBER_SPRING_TOLERANCE_BAND")
        monkeypatch.delenv("RUBBER_SPRING_SETTLE_THRESHOLD")
        importlib.reload(settings)
