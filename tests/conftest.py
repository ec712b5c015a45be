import pytest

from bucket_studio.settings import SETTINGS_ENV


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    # keep a real ~/.bucket_studio/settings.json out of every test
    monkeypatch.setenv(SETTINGS_ENV, str(tmp_path / "no-settings.json"))
