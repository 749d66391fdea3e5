"""
Главный модуль декодера - чистый интерфейс
"""

from typing import Dict, Any, List, Optional

from .internal.decoders import decode_spec, select_decoder
from .internal.types.models import DecodeOptions, SpecSummary


class SpecDecoder:
    """Чистый интерфейс для декодирования Swagger спецификаций"""

    def __init__(self, spec: Dict[str, Any], options: DecodeOptions = None):
        self.spec = spec
        self.options = options or DecodeOptions()

    @property
    def decoder_name(self) -> str:
        """Имя декодера, выбранного для спецификации"""
        return select_decoder(self.spec).__name__

    def decode(self) -> SpecSummary:
        """
        Декодирование спецификации.

        Возвращает полностью готовое представление: группы параметров методов
        и camelCase имена сервисов уже заполнены.
        """
        return decode_spec(self.spec, self.options)


def decode(
    spec: Dict[str, Any],
    module_name: Optional[str] = None,
    service_name: Optional[str] = None,
    imports: Optional[List[str]] = None,
    host: Optional[str] = None,
    schema: Optional[str] = None,
    strict_refs: bool = False,
    proxy_headers: bool = False,
) -> SpecSummary:
    """Декодирование Swagger 1.x / 2.x спецификации в промежуточное представление"""
    options = DecodeOptions(
        module_name=module_name,
        service_name=service_name,
        imports=imports,
        host=host,
        schema=schema,
        strict_refs=strict_refs,
        proxy_headers=proxy_headers,
    )
    return SpecDecoder(spec, options).decode()
