"""
Локализация названий пресетов и их параметров

Таблица ключ -> строка загружается из JSON ресурса один раз при первом
обращении. Ключи: "<preset>" и "<preset>.<param>".
"""

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional

from .settings import get_settings

logger = logging.getLogger(__name__)

RESOURCE_NAME = 'FilterPresets'

_table: Optional[Dict[str, str]] = None
_lock = threading.Lock()


def resource_path(directory: Path, language: str) -> Path:
    """
    Путь к файлу локализации

    Returns:
        FilterPresets.<language>.json если он есть, иначе FilterPresets.json
    """
    localized = directory / f"{RESOURCE_NAME}.{language}.json"
    if language and localized.exists():
        return localized
    return directory / f"{RESOURCE_NAME}.json"


def load_table(directory: Path, language: str) -> Dict[str, str]:
    """
    Загрузить таблицу локализации

    Returns:
        Словарь строк. Пустой словарь, если файл отсутствует или поврежден
    """
    path = resource_path(directory, language)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Файл локализации не найден: {path}")
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Ошибка чтения файла локализации {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.error(f"Неверный формат файла локализации: {path}")
        return {}

    table = {str(k): str(v) for k, v in data.items() if isinstance(v, str)}
    logger.info(f"Загружена локализация {path.name}: {len(table)} строк")
    return table


def get_table() -> Dict[str, str]:
    """Таблица локализации процесса (загружается один раз)"""
    global _table
    if _table is None:
        with _lock:
            if _table is None:
                settings = get_settings()
                _table = load_table(settings.l10n_dir, settings.language)
    return _table


def translate(key: str, default: Optional[str] = None) -> str:
    """Перевод ключа; при отсутствии - default или сам ключ"""
    return get_table().get(key, key if default is None else default)


def reset_cache():
    """Сбросить загруженную таблицу (смена языка)"""
    global _table
    with _lock:
        _table = None
