import pytest

from mahina.services.transitions import reset_default_detector


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    # A developer's .env must not leak into expectations that assume defaults.
    for name in ("MAHINA_GROUP_RANGES", "MAHINA_TIMEZONE", "MAHINA_LANG"):
        monkeypatch.delenv(name, raising=False)
    reset_default_detector()
    yield
    reset_default_detector()
