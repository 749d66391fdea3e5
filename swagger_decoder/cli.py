import argparse
import json
import logging
import os
import sys
from typing import Dict, Any

import httpx
import yaml

from swagger_decoder.config import CONFIG_FILE, DecoderConfig
from swagger_decoder.decoder import decode
from swagger_decoder.exceptions import SwaggerDecoderError


def load_spec(location: str) -> Dict[str, Any]:
    """Загрузка спецификации из файла или по URL (JSON или YAML)"""
    # Проверяем - это локальный файл или URL
    if location.startswith(("http://", "https://")):
        response = httpx.get(location, follow_redirects=True)
        response.raise_for_status()
        content = response.text
    elif os.path.exists(location):
        with open(location, "r", encoding="utf-8") as f:
            content = f.read()
    else:
        raise ValueError(
            f"Не удалось загрузить спецификацию из {location}. Проверьте URL или путь к файлу."
        )

    if content.lstrip().startswith("{"):
        spec = json.loads(content)
    else:
        spec = yaml.safe_load(content)

    if not isinstance(spec, dict):
        raise ValueError(f"Спецификация {location} не является объектом")

    return spec


def _write_output(view: Dict[str, Any], output: str = None):
    """Сохранение результата в файл или вывод в stdout"""
    content = json.dumps(view, ensure_ascii=False, indent=2)

    if not output:
        print(content)
        return

    directory = os.path.dirname(output)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(output, "w", encoding="utf-8") as f:
        f.write(content + "\n")

    print(f"✅ Результат сохранен в {os.path.abspath(output)}", file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Декодирование Swagger 1.x / 2.x спецификации для генерации клиента"
    )
    parser.add_argument("--spec", type=str, help="Путь или URL к спецификации")
    parser.add_argument("--output", type=str, help="JSON файл для результата")
    parser.add_argument("--module-name", type=str, help="Имя модуля клиента")
    parser.add_argument(
        "--service-name", type=str, help="Имя сервиса для операций без тегов"
    )
    parser.add_argument("--host", type=str, help="Хост, если не указан в спецификации")
    parser.add_argument(
        "--schema", type=str, help="Схема (http/https), если не указана в спецификации"
    )
    parser.add_argument(
        "--strict-refs",
        action="store_true",
        help="Ошибка при неразрешенных $ref вместо пропуска параметра",
    )
    parser.add_argument(
        "--config", type=str, default=CONFIG_FILE, help="Путь к файлу конфигурации"
    )
    parser.add_argument(
        "--init-config", action="store_true", help=f"Создать конфиг файл {CONFIG_FILE}"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробный лог")
    return parser


def main(argv=None):
    """Универсальная команда декодирования спецификации"""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Инициализация конфига
    if args.init_config:
        config = DecoderConfig().merge_with_args(args)
        config.save_to_file(args.config)
        print(f"✅ Создан конфиг файл {args.config}", file=sys.stderr)
        return

    # Аргументы командной строки важнее конфига
    file_config = DecoderConfig.from_file(args.config)
    if file_config:
        print(f"📋 Используется конфиг из {args.config}", file=sys.stderr)
        final_config = file_config.merge_with_args(args)
    else:
        final_config = DecoderConfig().merge_with_args(args)

    if not final_config.spec:
        print(
            "❌ Ошибка: Укажите --spec или создайте конфиг с --init-config",
            file=sys.stderr,
        )
        sys.exit(1)

    try:
        print(f"📥 Загрузка спецификации {final_config.spec}...", file=sys.stderr)
        spec = load_spec(final_config.spec)

        print("⚙️ Декодирование...", file=sys.stderr)
        summary = decode(spec, **final_config.to_options())
        _write_output(summary.to_dict(), final_config.output)

    except (
        SwaggerDecoderError,
        httpx.HTTPError,
        yaml.YAMLError,
        OSError,
        ValueError,
    ) as e:
        print(f"❌ Ошибка декодирования: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
