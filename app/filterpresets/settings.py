"""
Настройки приложения пресетов (QSettings)
"""

import os
import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings, QLocale

logger = logging.getLogger(__name__)

RESOURCES_DIR = Path(__file__).parent / 'resources'
DEFAULT_L10N_DIR = RESOURCES_DIR / 'l10n'

LANG_ENV_VAR = 'FILTER_PRESETS_LANG'


class Settings:
    """Настройки: язык, каталог локализации, каталог сохраненных пресетов"""

    def __init__(self, qsettings: Optional[QSettings] = None):
        self.settings = qsettings if qsettings is not None else QSettings("FilterPresets", "Settings")

    @property
    def language(self) -> str:
        """
        Язык интерфейса

        Порядок: переменная окружения, сохраненная настройка, системная локаль
        """
        env_lang = os.environ.get(LANG_ENV_VAR)
        if env_lang:
            return env_lang

        lang = self.settings.value("language", "", type=str)
        if lang:
            return lang

        # "ru_RU" -> "ru"
        return QLocale.system().name().split('_')[0]

    def set_language(self, language: str):
        self.settings.setValue("language", language)
        logger.info(f"Установлен язык: {language}")

    @property
    def l10n_dir(self) -> Path:
        path = self.settings.value("l10n_dir", "", type=str)
        return Path(path) if path else DEFAULT_L10N_DIR

    def set_l10n_dir(self, path: Path):
        self.settings.setValue("l10n_dir", str(path))

    @property
    def presets_dir(self) -> Path:
        path = self.settings.value("presets_dir", "", type=str)
        return Path(path) if path else Path.home() / '.filter_presets' / 'presets'

    def set_presets_dir(self, path: Path):
        self.settings.setValue("presets_dir", str(path))
        logger.info(f"Каталог пресетов: {path}")


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Получить настройки процесса"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Optional[Settings]):
    """Заменить настройки процесса (None - вернуть настройки по умолчанию)"""
    global _settings
    _settings = settings
