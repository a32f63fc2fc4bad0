import pytest
from PySide6.QtCore import QSettings

from filterpresets import localization
from filterpresets.settings import LANG_ENV_VAR, Settings, set_settings


@pytest.fixture(autouse=True)
def settings(tmp_path, monkeypatch):
    """Настройки во временном INI файле, чистый кэш локализации"""
    monkeypatch.delenv(LANG_ENV_VAR, raising=False)
    qsettings = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    s = Settings(qsettings)
    s.set_language("en")
    s.set_presets_dir(tmp_path / "presets")
    set_settings(s)
    localization.reset_cache()
    yield s
    set_settings(None)
    localization.reset_cache()
