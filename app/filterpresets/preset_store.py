from typing import Any, Dict, List, Optional
import json
import logging
from pathlib import Path

from .catalog import PresetCatalog, get_catalog
from .presets import FilterPresetInstance
from .settings import get_settings

logger = logging.getLogger(__name__)


class PresetStore:
    """Хранилище сохраненных экземпляров пресетов (JSON файлы)"""

    def __init__(self, presets_dir: Optional[Path] = None, catalog: Optional[PresetCatalog] = None):
        self.catalog = catalog or get_catalog()
        self.presets_dir = presets_dir or get_settings().presets_dir
        self.presets_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Инициализировано хранилище пресетов: {self.presets_dir}")

    def _preset_file(self, name: str) -> Path:
        # Безопасное имя файла
        safe_name = "".join(c for c in name if c.isalnum() or c in (' ', '-', '_')).strip()
        return self.presets_dir / f"{safe_name}.json"

    def save(self, name: str, instance: FilterPresetInstance, description: str = "") -> bool:
        """
        Сохранить экземпляр пресета

        Args:
            name: Имя сохранения
            instance: Экземпляр пресета
            description: Описание

        Returns:
            True если успешно сохранено
        """
        try:
            data = {
                'name': name,
                'description': description,
                'instance': instance.to_dict()
            }

            preset_file = self._preset_file(name)
            with open(preset_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)

            logger.info(f"Сохранен пресет: {name} в {preset_file}")
            return True

        except (OSError, TypeError) as e:
            logger.error(f"Ошибка сохранения пресета: {e}", exc_info=True)
            return False

    def load(self, preset_file: Path) -> Optional[FilterPresetInstance]:
        """
        Загрузить экземпляр пресета из файла

        Returns:
            Экземпляр или None при ошибке
        """
        try:
            with open(preset_file, 'r', encoding='utf-8') as f:
                data = json.load(f)

            instance_data = data['instance']
            preset = self.catalog.get_preset(instance_data['preset'])
            if preset is None:
                logger.error(f"Пресет не найден: {instance_data['preset']}")
                return None

            instance = FilterPresetInstance.from_dict(instance_data, preset)
            logger.info(f"Загружен пресет: {data.get('name', preset_file.stem)}")
            return instance

        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Ошибка загрузки пресета {preset_file}: {e}", exc_info=True)
            return None

    def load_by_name(self, name: str) -> Optional[FilterPresetInstance]:
        return self.load(self._preset_file(name))

    def get_available_presets(self) -> List[Dict[str, Any]]:
        """
        Получить список сохраненных пресетов

        Returns:
            Список словарей с информацией о пресетах
        """
        presets = []

        for preset_file in sorted(self.presets_dir.glob('*.json')):
            try:
                with open(preset_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)

                presets.append({
                    'name': data.get('name', preset_file.stem),
                    'description': data.get('description', ''),
                    'file': preset_file,
                    'preset': data.get('instance', {}).get('preset', ''),
                    'params_count': len(data.get('instance', {}).get('params', {}))
                })
            except (OSError, json.JSONDecodeError, AttributeError) as e:
                logger.warning(f"Не удалось прочитать пресет {preset_file}: {e}")

        return presets

    def delete(self, preset_file: Path) -> bool:
        """
        Удалить сохраненный пресет

        Returns:
            True если успешно удалено
        """
        try:
            preset_file.unlink()
            logger.info(f"Удален пресет: {preset_file}")
            return True
        except OSError as e:
            logger.error(f"Ошибка удаления пресета: {e}", exc_info=True)
            return False
