"""
Выражения фильтров для бэкенда (mpv / ffmpeg lavfi)

Минимальный построитель строк фильтров, в которые пресеты
превращают свои экземпляры.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .presets import FilterPresetInstance


@dataclass
class FilterExpression:
    """Выражение фильтра"""
    name: str                                              # Имя фильтра бэкенда
    label: Optional[str] = None                            # Метка (@label:)
    params: Dict[str, str] = field(default_factory=dict)   # Параметры {name: value}
    param_order: Optional[List[str]] = None                # Позиционный порядок параметров
    raw_params: Optional[str] = None                       # Готовая строка параметров
    raw: Optional[str] = None                              # Готовая строка фильтра целиком

    @classmethod
    def from_raw_string(cls, raw: str) -> 'FilterExpression':
        """
        Фильтр из произвольной строки

        Строка не проверяется: ошибку увидит только бэкенд.
        """
        name = raw.split('=', 1)[0]
        return cls(name=name, raw=raw)

    @classmethod
    def lavfi(cls, lavfi_name: str, label: Optional[str], params: Dict[str, str]) -> 'FilterExpression':
        """
        Обертка ffmpeg lavfi

        Returns:
            Выражение вида "lavfi=[name=k=v:k=v]"
        """
        inner = lavfi_name
        if params:
            inner += "=" + ":".join(f"{k}={v}" for k, v in params.items())
        return cls(name='lavfi', label=label, params=dict(params), raw_params=f"[{inner}]")

    @classmethod
    def lavfi_from_preset_instance(cls, instance: 'FilterPresetInstance') -> 'FilterExpression':
        """Lavfi-фильтр с именем пресета и всеми его параметрами"""
        preset = instance.preset
        keys = preset.param_order or list(preset.params)
        params = {key: instance.value(key).string_value for key in keys}
        return cls.lavfi(preset.name, None, params)

    @classmethod
    def mpv_from_preset_instance(cls, instance: 'FilterPresetInstance') -> 'FilterExpression':
        """Нативный фильтр mpv с именем пресета"""
        preset = instance.preset
        keys = preset.param_order or list(preset.params)
        params = {key: instance.value(key).string_value for key in keys}
        return cls(name=preset.name, params=params, param_order=preset.param_order)

    @classmethod
    def unsharp(cls, amount: float, msize: int = 5) -> 'FilterExpression':
        """
        Фильтр unsharp: положительный amount - резкость, отрицательный - размытие

        Args:
            amount: Сила эффекта для яркости и цветности
            msize: Размер матрицы (нечетный, 3-23)
        """
        # -0.0 выводится как 0.0
        amount = amount or 0.0
        return cls.lavfi('unsharp', None, {
            'lx': str(msize), 'ly': str(msize), 'la': str(amount),
            'cx': str(msize), 'cy': str(msize), 'ca': str(amount)
        })

    def build_filter_string(self) -> str:
        """
        Построить строку фильтра

        Returns:
            Строка фильтра, например: "crop=640:480" или "lavfi=[delogo=x=1:y=1:w=1:h=1]"
        """
        if self.raw is not None:
            return self.raw

        filter_str = f"@{self.label}:" if self.label else ""
        filter_str += self.name

        if self.raw_params is not None:
            return f"{filter_str}={self.raw_params}"

        if not self.params:
            return filter_str

        if self.param_order:
            values = [self.params.get(key, "") for key in self.param_order]
            # Хвостовые пустые значения не выводятся
            while values and values[-1] == "":
                values.pop()
            if not values:
                return filter_str
            return f"{filter_str}={':'.join(values)}"

        param_strings = [f"{k}={v}" for k, v in self.params.items() if v != ""]
        if not param_strings:
            return filter_str
        return f"{filter_str}={':'.join(param_strings)}"

    def __str__(self) -> str:
        return self.build_filter_string()
