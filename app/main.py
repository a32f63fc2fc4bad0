import sys
import argparse
import logging
from pathlib import Path
from datetime import datetime
from typing import List, Optional

from filterpresets.catalog import get_catalog
from filterpresets.preset_store import PresetStore
from filterpresets.presets import UnknownParameterError

logger = logging.getLogger(__name__)


def setup_logging():
    """Настройка логирования"""
    log_dir = Path.home() / '.filter_presets' / 'logs'
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f'presets_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'

    # Форматирование
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # File handler
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    # Console handler: в stderr, stdout занят выводом команд
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.info(f"Логирование настроено, файл: {log_file}")


def _parse_assignments(pairs: List[str]) -> dict:
    """["w=640", "h=480"] -> {"w": "640", "h": "480"}"""
    values = {}
    for pair in pairs:
        if '=' not in pair:
            raise ValueError(f"Ожидается name=value: {pair}")
        name, value = pair.split('=', 1)
        values[name] = value
    return values


def _cmd_list(args) -> int:
    for preset in get_catalog().get_all_presets():
        print(f"{preset.name}: {preset.localized_name}")
        names = preset.param_order or list(preset.params)
        for name in names:
            default = preset.params[name].default_value.string_value
            print(f"    {name} ({preset.localized_param_name(name)}) = {default!r}")
    return 0


def _cmd_build(args) -> int:
    preset = get_catalog().get_preset(args.preset)
    if preset is None:
        print(f"Пресет не найден: {args.preset}", file=sys.stderr)
        return 1

    try:
        instance = preset.create_instance(**_parse_assignments(args.params))
    except (ValueError, UnknownParameterError) as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1

    is_valid, error_msg = instance.validate()
    if not is_valid:
        logger.warning(f"Значения вне допустимого диапазона: {error_msg}")

    print(instance.apply())

    if args.save:
        if not PresetStore().save(args.save, instance, args.description):
            return 1
    return 0


def _cmd_saved(args) -> int:
    store = PresetStore()
    if args.name:
        instance = store.load_by_name(args.name)
        if instance is None:
            return 1
        print(instance.apply())
        return 0

    for info in store.get_available_presets():
        print(f"{info['name']}: {info['preset']} ({info['params_count']})")
    return 0


def run(argv: Optional[List[str]] = None) -> int:
    """Разбор аргументов и выполнение команды"""
    ap = argparse.ArgumentParser(
        description="Пресеты видеофильтров для mpv / FFmpeg")
    sub = ap.add_subparsers(dest="command")

    sp_list = sub.add_parser("list", help="Список встроенных пресетов")
    sp_list.set_defaults(func=_cmd_list)

    sp_build = sub.add_parser("build", help="Построить строку фильтра")
    sp_build.add_argument("preset", help="Имя пресета, например crop")
    sp_build.add_argument("params", nargs="*", help="Значения параметров name=value")
    sp_build.add_argument("--save", default=None, help="Сохранить экземпляр под именем")
    sp_build.add_argument("--description", default="", help="Описание сохранения")
    sp_build.set_defaults(func=_cmd_build)

    sp_saved = sub.add_parser("saved", help="Сохраненные пресеты")
    sp_saved.add_argument("name", nargs="?", default=None,
                          help="Имя сохранения (без имени - список)")
    sp_saved.set_defaults(func=_cmd_saved)

    args = ap.parse_args(argv)
    if not getattr(args, "func", None):
        ap.print_help()
        return 1
    return args.func(args)


def main():
    """Главная функция запуска"""
    setup_logging()
    try:
        return run()
    except Exception as e:
        logging.error(f"Критическая ошибка: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
