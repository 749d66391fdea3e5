"""
Конфигурация для декодирования спецификации
"""

import os
from typing import Dict, Any, Optional
import toml
from dataclasses import dataclass, fields

CONFIG_FILE = "swagger.toml"


@dataclass
class DecoderConfig:
    """Конфигурация декодера Swagger спецификаций"""

    spec: Optional[str] = None
    output: Optional[str] = None
    module_name: Optional[str] = None
    service_name: Optional[str] = None
    host: Optional[str] = None
    schema: Optional[str] = None
    strict_refs: bool = False
    proxy_headers: bool = False

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE, search_dir: str = None
    ) -> Optional["DecoderConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError):
            return None

        known = {field.name for field in fields(cls)}
        return cls(**{k: v for k, v in config_data.items() if k in known})

    def save_to_file(self, config_path: str = CONFIG_FILE) -> None:
        """Сохранение конфигурации в файл"""
        # toml не умеет сохранять None
        config_data = {k: v for k, v in self.__dict__.items() if v is not None}

        with open(config_path, "w") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "DecoderConfig":
        """Объединение с аргументами командной строки"""
        return DecoderConfig(
            spec=getattr(args, "spec", None) or self.spec,
            output=getattr(args, "output", None) or self.output,
            module_name=getattr(args, "module_name", None) or self.module_name,
            service_name=getattr(args, "service_name", None) or self.service_name,
            host=getattr(args, "host", None) or self.host,
            schema=getattr(args, "schema", None) or self.schema,
            strict_refs=bool(getattr(args, "strict_refs", False)) or self.strict_refs,
            proxy_headers=self.proxy_headers,
        )

    def to_options(self) -> Dict[str, Any]:
        """Именованные аргументы для decode()"""
        return {
            "module_name": self.module_name,
            "service_name": self.service_name,
            "host": self.host,
            "schema": self.schema,
            "strict_refs": self.strict_refs,
            "proxy_headers": self.proxy_headers,
        }
