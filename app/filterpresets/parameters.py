"""
Типизированные параметры пресетов фильтров
- FilterParameterValue: скалярное значение (текст, целое, дробное)
- FilterParameter: описание параметра (тип, значение по умолчанию, границы)
"""

from dataclasses import dataclass
from typing import Any, Optional, Union
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class ParamType(Enum):
    """Типы параметров пресета"""
    TEXT = "text"      # Строка
    INT = "int"        # Целое число
    FLOAT = "float"    # Дробное число


def _parse_int(raw: Any) -> int:
    """Целое из ввода без потери точности больших чисел"""
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError:
            # "5.0" из текстового поля тоже считаем целым
            return int(float(raw))
    return int(raw)


@dataclass(frozen=True)
class FilterParameterValue:
    """
    Значение параметра

    Хранит ровно один вариант. Чтение через "чужой" аксессор не падает,
    а возвращает нулевое значение (строковая форма есть всегда).
    """
    _string: Optional[str] = None
    _int: Optional[int] = None
    _float: Optional[float] = None

    @property
    def type(self) -> ParamType:
        """Активный вариант значения"""
        if self._string is not None:
            return ParamType.TEXT
        if self._int is not None:
            return ParamType.INT
        return ParamType.FLOAT

    @property
    def string_value(self) -> str:
        if self._string is not None:
            return self._string
        if self._int is not None:
            return str(self._int)
        if self._float is not None:
            return str(self._float)
        return ""

    @property
    def int_value(self) -> int:
        return self._int if self._int is not None else 0

    @property
    def float_value(self) -> float:
        return self._float if self._float is not None else 0.0

    @property
    def raw(self) -> Union[str, int, float]:
        """Значение активного варианта как есть"""
        if self.type == ParamType.TEXT:
            return self.string_value
        if self.type == ParamType.INT:
            return self.int_value
        return self.float_value

    @classmethod
    def coerce(cls, param_type: ParamType, raw: Any) -> 'FilterParameterValue':
        """
        Построить значение нужного типа из произвольного ввода

        Args:
            param_type: Объявленный тип параметра
            raw: Значение из CLI, JSON или виджета

        Returns:
            Значение с вариантом param_type. Нечисловой ввод для
            числовых типов дает 0 / 0.0
        """
        if isinstance(raw, FilterParameterValue):
            raw = raw.raw

        if param_type == ParamType.TEXT:
            return cls.text("" if raw is None else str(raw))

        try:
            if param_type == ParamType.INT:
                return cls.int(_parse_int(raw))
            return cls.float(float(raw))
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Не удалось привести {raw!r} к типу {param_type.value}, используется 0")
            return cls.int(0) if param_type == ParamType.INT else cls.float(0.0)

    def to_dict(self) -> dict:
        """Сериализация в словарь"""
        return {
            'type': self.type.value,
            'value': self.raw
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'FilterParameterValue':
        """Десериализация из словаря"""
        return cls.coerce(ParamType(data.get('type', 'text')), data.get('value'))

    def __str__(self) -> str:
        return self.string_value

    # Фабрики - в конце тела класса: имена int/float перекрывают встроенные типы
    @classmethod
    def text(cls, value: str) -> 'FilterParameterValue':
        return cls(_string=value)

    @classmethod
    def int(cls, value: int) -> 'FilterParameterValue':
        return cls(_int=value)

    @classmethod
    def float(cls, value: float) -> 'FilterParameterValue':
        return cls(_float=value)


@dataclass(frozen=True)
class FilterParameter:
    """
    Описание параметра пресета

    Создается только через фабрики text() / int() / float().
    Границы - метаданные для редакторов, модель их не применяет.
    """

    @property
    def type(self) -> ParamType:
        raise NotImplementedError

    @property
    def default_value(self) -> FilterParameterValue:
        raise NotImplementedError

    @staticmethod
    def text(default_value: str = "") -> 'TextParameter':
        return TextParameter(default=default_value)

    @staticmethod
    def int(min: int, max: int, step: int = 1, default_value: int = 0) -> 'IntParameter':
        return IntParameter(min=min, max=max, step=step, default=default_value)

    @staticmethod
    def float(min: float, max: float, default_value: float = 0) -> 'FloatParameter':
        return FloatParameter(min=min, max=max, default=default_value)

    def validate(self, value: FilterParameterValue) -> tuple[bool, str]:
        """
        Проверка значения для редактора

        Returns:
            (is_valid, error_message)
        """
        if value.type != self.type:
            return False, f"Ожидается тип {self.type.value}, получен {value.type.value}"
        return True, ""


@dataclass(frozen=True)
class TextParameter(FilterParameter):
    """Текстовый параметр"""
    default: str = ""

    @property
    def type(self) -> ParamType:
        return ParamType.TEXT

    @property
    def default_value(self) -> FilterParameterValue:
        return FilterParameterValue.text(self.default)


@dataclass(frozen=True)
class IntParameter(FilterParameter):
    """Целочисленный параметр с шагом"""
    min: int = 0
    max: int = 0
    step: int = 1
    default: int = 0

    @property
    def type(self) -> ParamType:
        return ParamType.INT

    @property
    def default_value(self) -> FilterParameterValue:
        return FilterParameterValue.int(self.default)

    def validate(self, value: FilterParameterValue) -> tuple[bool, str]:
        is_valid, error_msg = super().validate(value)
        if not is_valid:
            return is_valid, error_msg

        n = value.int_value
        if n < self.min:
            return False, f"Значение не может быть меньше {self.min}"
        if n > self.max:
            return False, f"Значение не может быть больше {self.max}"
        if self.step > 1 and (n - self.min) % self.step != 0:
            return False, f"Значение должно идти с шагом {self.step} от {self.min}"
        return True, ""


@dataclass(frozen=True)
class FloatParameter(FilterParameter):
    """Дробный параметр (непрерывный, без шага)"""
    min: float = 0.0
    max: float = 0.0
    default: float = 0.0

    @property
    def type(self) -> ParamType:
        return ParamType.FLOAT

    @property
    def default_value(self) -> FilterParameterValue:
        return FilterParameterValue.float(float(self.default))

    def validate(self, value: FilterParameterValue) -> tuple[bool, str]:
        is_valid, error_msg = super().validate(value)
        if not is_valid:
            return is_valid, error_msg

        f = value.float_value
        if f < self.min:
            return False, f"Значение не может быть меньше {self.min}"
        if f > self.max:
            return False, f"Значение не может быть больше {self.max}"
        return True, ""
