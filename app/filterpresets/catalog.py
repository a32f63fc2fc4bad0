"""
Каталог встроенных пресетов фильтров
"""

from typing import Dict, List, Optional
import logging

from .parameters import FilterParameter as PM
from .presets import FilterPreset, FilterPresetInstance
from .filter_expression import FilterExpression

logger = logging.getLogger(__name__)


def _mpv_filter(instance: FilterPresetInstance) -> FilterExpression:
    return FilterExpression.mpv_from_preset_instance(instance)


def _sharpen(instance: FilterPresetInstance) -> FilterExpression:
    return FilterExpression.unsharp(amount=instance.value('amount').float_value,
                                    msize=instance.value('msize').int_value)


def _blur(instance: FilterPresetInstance) -> FilterExpression:
    # Размытие - тот же unsharp с отрицательной силой
    return FilterExpression.unsharp(amount=-instance.value('amount').float_value,
                                    msize=instance.value('msize').int_value)


def _negative(instance: FilterPresetInstance) -> FilterExpression:
    return FilterExpression.lavfi('lutrgb', None, {
        'r': 'negval', 'g': 'negval', 'b': 'negval'
    })


def _custom_mpv(instance: FilterPresetInstance) -> FilterExpression:
    return FilterExpression.from_raw_string(
        f"{instance.value('name').string_value}={instance.value('string').string_value}"
    )


def _custom_ffmpeg(instance: FilterPresetInstance) -> FilterExpression:
    return FilterExpression(
        name='lavfi',
        raw_params=f"[{instance.value('name').string_value}={instance.value('string').string_value}]"
    )


def _unsharp_params() -> dict:
    return {
        'amount': PM.float(min=0, max=1.5),
        'msize': PM.int(min=3, max=23, step=2, default_value=5)
    }


def builtin_presets() -> List[FilterPreset]:
    """Встроенные пресеты в порядке отображения"""
    return [
        # Обрезка
        FilterPreset('crop', params={
            'x': PM.text(), 'y': PM.text(),
            'w': PM.text(), 'h': PM.text()
        }, param_order='w:h:x:y', transformer=_mpv_filter),

        # Расширение кадра
        FilterPreset('expand', params={
            'x': PM.text(), 'y': PM.text(),
            'w': PM.text(), 'h': PM.text(),
            'aspect': PM.text(default_value='0'),
            'round': PM.text(default_value='1')
        }, param_order='w:h:x:y:aspect:round', transformer=_mpv_filter),

        # Резкость
        FilterPreset('sharpen', params=_unsharp_params(), transformer=_sharpen),

        # Размытие
        FilterPreset('blur', params=_unsharp_params(), transformer=_blur),

        # Удаление логотипа
        FilterPreset('delogo', params={
            'x': PM.text(default_value='1'),
            'y': PM.text(default_value='1'),
            'w': PM.text(default_value='1'),
            'h': PM.text(default_value='1')
        }, param_order='x:y:w:h'),

        # Негатив
        FilterPreset('negative', params={}, transformer=_negative),

        # Отражение по вертикали
        FilterPreset('vflip', params={}, transformer=_mpv_filter),

        # Зеркало
        FilterPreset('hflip', params={}, transformer=_mpv_filter),

        # Произвольный фильтр mpv
        FilterPreset('custom_mpv', params={
            'name': PM.text(default_value=''),
            'string': PM.text(default_value='')
        }, transformer=_custom_mpv),

        # Произвольный фильтр ffmpeg
        FilterPreset('custom_ffmpeg', params={
            'name': PM.text(default_value=''),
            'string': PM.text(default_value='')
        }, transformer=_custom_ffmpeg),
    ]


class PresetCatalog:
    """Каталог пресетов"""

    def __init__(self, presets: Optional[List[FilterPreset]] = None):
        self.presets: Dict[str, FilterPreset] = {}
        for preset in (presets if presets is not None else builtin_presets()):
            if preset.name in self.presets:
                logger.warning(f"Дублирующийся пресет {preset.name} заменен")
            self.presets[preset.name] = preset
        logger.info(f"Инициализирован каталог пресетов: {len(self.presets)} пресетов")

    def get_preset(self, name: str) -> Optional[FilterPreset]:
        """Получить пресет по имени"""
        return self.presets.get(name)

    def get_all_presets(self) -> List[FilterPreset]:
        """Получить все пресеты"""
        return list(self.presets.values())

    def preset_names(self) -> List[str]:
        return list(self.presets)

    def search_presets(self, query: str) -> List[FilterPreset]:
        """Поиск пресетов по имени или локализованному названию"""
        query_lower = query.lower()
        return [
            p for p in self.presets.values()
            if query_lower in p.name.lower() or query_lower in p.localized_name.lower()
        ]


_catalog: Optional[PresetCatalog] = None


def get_catalog() -> PresetCatalog:
    """Каталог встроенных пресетов (создается при первом обращении)"""
    global _catalog
    if _catalog is None:
        _catalog = PresetCatalog()
    return _catalog
