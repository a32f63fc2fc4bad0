"""
Пресеты фильтров и их экземпляры
"""

from typing import Any, Callable, Dict, List, Optional, Union
import logging

from .parameters import FilterParameter, FilterParameterValue
from .filter_expression import FilterExpression
from . import localization

logger = logging.getLogger(__name__)


class UnknownParameterError(KeyError):
    """Параметр не объявлен в пресете (ошибка программиста)"""

    def __init__(self, preset_name: str, param: str):
        super().__init__(f"{preset_name}.{param}")
        self.preset_name = preset_name
        self.param = param


Transformer = Callable[['FilterPresetInstance'], FilterExpression]


class FilterPreset:
    """Пресет фильтра: имя, параметры и правило построения выражения"""

    def __init__(self,
                 name: str,
                 params: Dict[str, FilterParameter],
                 param_order: Optional[str] = None,
                 transformer: Optional[Transformer] = None):
        """
        Args:
            name: Уникальное имя (ключ локализации)
            params: Параметры {name: FilterParameter}
            param_order: Порядок параметров через ":", например "w:h:x:y"
            transformer: Функция экземпляр -> выражение фильтра
                (по умолчанию lavfi-фильтр с именем пресета)
        """
        self.name = name
        self.params = dict(params)
        self.param_order = self._parse_param_order(param_order)
        self.transformer: Transformer = transformer or FilterExpression.lavfi_from_preset_instance

    def _parse_param_order(self, param_order: Optional[str]) -> Optional[List[str]]:
        if not param_order:
            return None

        order = []
        for token in param_order.split(':'):
            if not token:
                continue
            if token not in self.params:
                logger.warning(f"Пресет {self.name}: параметр '{token}' из порядка не объявлен, пропущен")
                continue
            order.append(token)
        return order

    @property
    def localized_name(self) -> str:
        return localization.translate(self.name)

    def localized_param_name(self, param: str) -> str:
        return localization.translate(f"{self.name}.{param}", param)

    def create_instance(self, **overrides: Any) -> 'FilterPresetInstance':
        """Создать экземпляр пресета с начальными значениями"""
        instance = FilterPresetInstance(self)
        for name, value in overrides.items():
            instance.set_value(name, value)
        return instance

    def __repr__(self) -> str:
        return f"FilterPreset({self.name!r}, params={list(self.params)})"


class FilterPresetInstance:
    """
    Экземпляр пресета

    Хранит только явно заданные значения; остальные берутся
    из значений по умолчанию пресета.
    """

    def __init__(self, preset: FilterPreset):
        self.preset = preset
        self.params: Dict[str, FilterParameterValue] = {}

    def _spec(self, name: str) -> FilterParameter:
        try:
            return self.preset.params[name]
        except KeyError:
            raise UnknownParameterError(self.preset.name, name) from None

    def value(self, name: str) -> FilterParameterValue:
        """
        Значение параметра: заданное явно или значение по умолчанию

        Raises:
            UnknownParameterError: параметр не объявлен в пресете
        """
        spec = self._spec(name)
        if name in self.params:
            return self.params[name]
        return spec.default_value

    def set_value(self, name: str, value: Union[FilterParameterValue, str, int, float]):
        """
        Задать значение параметра

        Готовый FilterParameterValue сохраняется как есть, скаляры
        приводятся к объявленному типу. Границы не проверяются.
        """
        spec = self._spec(name)
        if not isinstance(value, FilterParameterValue):
            value = FilterParameterValue.coerce(spec.type, value)
        self.params[name] = value
        logger.debug(f"{self.preset.name}.{name} = {value.string_value!r}")

    def reset_value(self, name: str):
        """Вернуть параметру значение по умолчанию"""
        self._spec(name)
        self.params.pop(name, None)

    def validate(self) -> tuple[bool, str]:
        """
        Проверить заданные значения по границам параметров

        Returns:
            (is_valid, error_message)
        """
        for name, value in self.params.items():
            is_valid, error_msg = self.preset.params[name].validate(value)
            if not is_valid:
                return False, f"{self.preset.localized_param_name(name)}: {error_msg}"
        return True, ""

    def apply(self) -> FilterExpression:
        """Построить выражение фильтра"""
        expression = self.preset.transformer(self)
        logger.debug(f"Пресет {self.preset.name} -> {expression}")
        return expression

    def to_dict(self) -> dict:
        """Сериализация в словарь"""
        return {
            'preset': self.preset.name,
            'params': {name: value.to_dict() for name, value in self.params.items()}
        }

    @classmethod
    def from_dict(cls, data: dict, preset: FilterPreset) -> 'FilterPresetInstance':
        """
        Десериализация из словаря

        Неизвестные пресету параметры пропускаются
        """
        instance = cls(preset)
        for name, value_data in data.get('params', {}).items():
            if name not in preset.params:
                logger.warning(f"Пресет {preset.name}: пропущен неизвестный параметр '{name}'")
                continue
            instance.set_value(name, FilterParameterValue.from_dict(value_data))
        return instance
